"""
Command line for the generated chart schemas.

    chartschema list                 List the available schema names
    chartschema show [name]          Print one schema (default: full option)
    chartschema generate             Regenerate every schema
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ..common import ChartSchemaError, logger, set_log_level
from ..schema_generator import (COMPONENT_TYPES, SERIES_TYPES, all_schema_names,
                                generate, get_schema_output_dir)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chartschema",
        description="Compact JSON schemas for ECharts series and components",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List available chart types")

    show = subparsers.add_parser("show", help="Output JSON schema for a chart type")
    show.add_argument(
        "type",
        nargs="?",
        default="full",
        help="Chart type (bar, line, pie, etc.) or omit for full option schema",
    )

    regenerate = subparsers.add_parser("generate", help="Regenerate the JSON schemas")
    regenerate.add_argument(
        "--types",
        dest="source",
        default=None,
        help="Module name or YAML/JSON type graph to compile",
    )
    regenerate.add_argument(
        "--output",
        dest="output_dir",
        default=None,
        help="Directory for the generated schemas",
    )
    return parser


def list_types(out=None) -> int:
    out = out or sys.stdout
    out.write("Series:\n")
    for name in SERIES_TYPES:
        out.write(f"  {name}\n")
    out.write("\nComponents:\n")
    for name in COMPONENT_TYPES:
        if name != "full":
            out.write(f"  {name}\n")
    out.write("\nUse 'chartschema show <name>' or 'chartschema show' for full option.\n")
    return 0


def show_schema(name: str, schema_dir: Path = None, out=None) -> int:
    out = out or sys.stdout
    if name != "full" and name not in all_schema_names():
        logger().error(f'Unknown type: "{name}". Use \'list\' to see available types.')
        return 1

    schema_dir = Path(schema_dir) if schema_dir else get_schema_output_dir()
    file_path = schema_dir / f"{name}.json"
    if not file_path.exists():
        logger().error(f"Schema file not found: {file_path}. Run the schema generator first.")
        return 1

    out.write(file_path.read_text(encoding="utf-8"))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        try:
            set_log_level(args.log_level)
        except ValueError as e:
            logger().error(str(e))
            return 1

    if args.command == "list":
        return list_types()
    if args.command == "show":
        return show_schema(args.type)

    try:
        written = generate(args.source, args.output_dir)
    except (ChartSchemaError, ImportError, OSError) as e:
        logger().error(f"Schema generation failed: {e}")
        return 1
    return 0 if written else 1


if __name__ == "__main__":
    sys.exit(main())
