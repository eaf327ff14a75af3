"""
Global Pytest Configuration and Fixtures.

Makes the 'src' directory importable and gives every test a freshly
configured chartschema logger.
"""

import os
import sys

import pytest

_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from chartschema.backends.typing_backend import TypingBackend  # noqa: E402
from chartschema.common import logger  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_logger():
    """Rebind the logger handlers to the current test's streams."""
    logger(level="DEBUG", format_type="simple", use_colors=False, reset=True)
    yield


@pytest.fixture
def backend() -> TypingBackend:
    return TypingBackend()
