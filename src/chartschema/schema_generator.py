"""
Schema Generator for ECharts option types

This module compiles a fixed table of named root types into compact JSON
schemas, one artifact per name, by walking the types through a type backend.

Environment Variables:
- CHARTSCHEMA_TYPES: Type source, an importable module name or a YAML/JSON type graph
  (defaults to chartschema.echarts_types)
- CHARTSCHEMA_SCHEMA_DIR: Directory for the generated artifacts (overrides default location)
"""

import importlib
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .backend import TypeBackend
from .backends.graph_backend import GraphBackend
from .backends.typing_backend import TypingBackend
from .common import log, logger
from .template_renderer import get_template_renderer
from .walker import walk

SCHEMA_META_URI = "http://json-schema.org/draft-07/schema#"
DEFAULT_TYPES_MODULE = "chartschema.echarts_types"
GRAPH_EXTENSIONS = (".yaml", ".yml", ".json")

SERIES_TYPES = {
    "bar": "BarSchema",
    "line": "LineSchema",
    "pie": "PieSchema",
    "scatter": "ScatterSchema",
    "radar": "RadarSchema",
    "funnel": "FunnelSchema",
    "gauge": "GaugeSchema",
    "treemap": "TreemapSchema",
    "boxplot": "BoxplotSchema",
    "heatmap": "HeatmapSchema",
    "candlestick": "CandlestickSchema",
    "sankey": "SankeySchema",
}

COMPONENT_TYPES = {
    "title": "TitleSchema",
    "tooltip": "TooltipSchema",
    "grid": "GridSchema",
    "xAxis": "XAxisSchema",
    "yAxis": "YAxisSchema",
    "legend": "LegendSchema",
    "dataZoom": "DataZoomSchema",
    "visualMap": "VisualMapSchema",
    "toolbox": "ToolboxSchema",
    "dataset": "DatasetSchema",
    "radar-coord": "RadarCoordSchema",
    "polar": "PolarSchema",
    "geo": "GeoSchema",
    "full": "FullOptionSchema",
}

ENVELOPE_TEMPLATES = {
    "full": (
        "ECharts option",
        "Top-level ECharts option. Pass to: charts render --config <file>",
    ),
    "series": (
        "ECharts {{ name }} series",
        '{{ name }} series config. Use in: { series: [{ type: "{{ name }}", ... }] }',
    ),
    "component": (
        "ECharts {{ name }} component",
        "{{ name }} component config. Use as top-level key in ECharts option.",
    ),
}

def schema_category(name: str) -> str:
    """Category of an artifact name: series, component or full"""
    if name == "full":
        return "full"
    if name in SERIES_TYPES:
        return "series"
    return "component"

def build_envelope(name: str, category: str, schema: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap a compiled schema with the artifact metadata"""
    renderer = get_template_renderer()
    title_template, description_template = ENVELOPE_TEMPLATES[category]
    output = {
        '$schema': SCHEMA_META_URI,
        'title': renderer.render_template(title_template, {'name': name}),
        'description': renderer.render_template(description_template, {'name': name}),
    }
    output.update(schema)
    return output

@log
def generate_schema(backend: TypeBackend, name: str, type_name: str, category: str) -> Optional[Dict[str, Any]]:
    """Compile one named root type, or return None when the backend does not know it"""
    root = backend.lookup(type_name)
    if root is None:
        logger().warning(f"{name}: type {type_name} NOT FOUND, skipping")
        return None

    schema = walk(backend, root)
    return build_envelope(name, category, schema.to_dict())

def write_schema(envelope: Dict[str, Any], output_dir: Path, name: str) -> Path:
    """Write one artifact as <output_dir>/<name>.json"""
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / f"{name}.json"
    text = json.dumps(envelope, indent=2, sort_keys=True)
    with open(out_path, 'w', encoding='utf-8') as f:
        f.write(text)
    logger().info(f"{name} ({len(text.encode('utf-8')) / 1024:.1f}KB)")
    return out_path

def generate_all(backend: TypeBackend, output_dir: Path) -> Dict[str, Path]:
    """Generate every series and component artifact; unknown names are skipped"""
    output_dir = Path(output_dir)
    written = {}

    sections = [("Series", SERIES_TYPES), ("Components", COMPONENT_TYPES)]
    for title, table in sections:
        logger().info(f"{title}:")
        logger().push()
        try:
            for name, type_name in table.items():
                envelope = generate_schema(backend, name, type_name, schema_category(name))
                if envelope is None:
                    continue
                written[name] = write_schema(envelope, output_dir, name)
        finally:
            logger().pop()

    return written

def all_schema_names():
    return list(SERIES_TYPES) + [name for name in COMPONENT_TYPES if name != "full"]

def load_backend(source: Optional[str] = None) -> TypeBackend:
    """Create a backend for a module name or a type graph file"""
    source = source or os.getenv('CHARTSCHEMA_TYPES') or DEFAULT_TYPES_MODULE
    if source.lower().endswith(GRAPH_EXTENSIONS):
        backend = GraphBackend.from_file(source, expand_env=True)
        recursive = backend.recursive_types()
        if recursive:
            logger().debug(f"Recursive types (summarized past the root): {', '.join(recursive)}")
        return backend
    return TypingBackend(importlib.import_module(source))

def get_schema_output_dir() -> Path:
    """Get the artifact directory from environment variable or default location"""
    custom_path = os.getenv('CHARTSCHEMA_SCHEMA_DIR')
    if custom_path:
        return Path(custom_path)

    # Default: generated artifacts live inside the package
    import chartschema
    return Path(chartschema.__file__).parent / "schemas" / "generated"

def generate(source: Optional[str] = None, output_dir: Optional[Path] = None) -> Dict[str, Path]:
    """Generate and save the schemas, returning the written paths by name"""
    logger().info("Compiling ECharts types...")

    source = source or os.getenv('CHARTSCHEMA_TYPES')
    output_dir = Path(output_dir) if output_dir else get_schema_output_dir()
    logger().info("Configuration:")
    logger().push()
    logger().info(f"Type source: {source or DEFAULT_TYPES_MODULE}")
    logger().info(f"Output directory: {output_dir}")
    logger().pop()

    backend = load_backend(source)
    written = generate_all(backend, output_dir)

    expected = len(SERIES_TYPES) + len(COMPONENT_TYPES)
    logger().info(f"Done! {len(written)}/{expected} schemas written to {output_dir}")
    return written

def main() -> int:
    """Main function to generate and save the schemas"""
    written = generate()
    return 0 if written else 1

if __name__ == '__main__':
    sys.exit(main())
