#!/usr/bin/env python3
"""
Schema Generator for ECharts option types

Regenerates the JSON schemas from a source checkout without installing the
package.
"""

import sys
from pathlib import Path

# Add src to path so we can import chartschema
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from chartschema.schema_generator import main

if __name__ == '__main__':
    sys.exit(main())
