"""
Integration tests for the schema generator.

Compiles the bundled ECharts option types and checks the written artifacts:
one file per name, envelope metadata, and flat children under every root.
"""

import importlib
import json
import runpy
import warnings
from typing import List, Literal, TypedDict
from unittest.mock import MagicMock

import pytest

from chartschema import schema_generator
from chartschema.backends.typing_backend import TypingBackend
from chartschema.schema_generator import (COMPONENT_TYPES, SCHEMA_META_URI,
                                          SERIES_TYPES, build_envelope,
                                          generate, generate_all,
                                          generate_schema, load_backend,
                                          schema_category, write_schema)


class LabelOption(TypedDict, total=False):
    show: bool


class ScenarioSeries(TypedDict, total=False):
    kind: Literal["bar", "line"]
    data: List[float]
    label: LabelOption


@pytest.fixture(scope="module")
def echarts_backend():
    return TypingBackend(importlib.import_module("chartschema.echarts_types"))


def assert_children_flat(schema: dict):
    children = list((schema.get("properties") or {}).values())
    if "items" in schema:
        children.append(schema["items"])
    for child in children:
        assert "properties" not in child
        assert "items" not in child


def test_schema_category():
    assert schema_category("bar") == "series"
    assert schema_category("legend") == "component"
    assert schema_category("full") == "full"


def test_series_envelope():
    envelope = build_envelope("bar", "series", {"type": "object"})

    assert envelope == {
        "$schema": SCHEMA_META_URI,
        "title": "ECharts bar series",
        "description": 'bar series config. Use in: { series: [{ type: "bar", ... }] }',
        "type": "object",
    }


def test_component_and_full_envelopes():
    component = build_envelope("xAxis", "component", {"type": "object"})
    full = build_envelope("full", "full", {"type": "object"})

    assert component["title"] == "ECharts xAxis component"
    assert component["description"] == "xAxis component config. Use as top-level key in ECharts option."
    assert full["title"] == "ECharts option"
    assert full["description"] == "Top-level ECharts option. Pass to: charts render --config <file>"


def test_generate_schema_scenario():
    backend = TypingBackend(types={"ScenarioSeries": ScenarioSeries})

    envelope = generate_schema(backend, "scenario", "ScenarioSeries", "series")

    assert envelope["properties"] == {
        "kind": {"type": "string", "enum": ["bar", "line"]},
        "data": {"type": "array"},
        "label": {"type": "object", "description": "Props: show"},
    }


def test_generate_schema_unknown_type_is_skipped(monkeypatch):
    mock_logger = MagicMock()
    monkeypatch.setattr(schema_generator, "logger", lambda: mock_logger)

    assert generate_schema(TypingBackend(), "bar", "BarSchema", "series") is None
    mock_logger.warning.assert_called_once_with("bar: type BarSchema NOT FOUND, skipping")


def test_write_schema_sorts_keys(tmp_path):
    path = write_schema({"type": "object", "$schema": SCHEMA_META_URI}, tmp_path / "out", "bar")

    assert path == tmp_path / "out" / "bar.json"
    text = path.read_text(encoding="utf-8")
    assert text.index('"$schema"') < text.index('"type"')
    assert json.loads(text) == {"type": "object", "$schema": SCHEMA_META_URI}


def test_generate_all_writes_every_artifact(echarts_backend, tmp_path):
    written = generate_all(echarts_backend, tmp_path)

    assert set(written) == set(SERIES_TYPES) | set(COMPONENT_TYPES)
    assert len(list(tmp_path.glob("*.json"))) == len(SERIES_TYPES) + len(COMPONENT_TYPES)

    for name, path in written.items():
        schema = json.loads(path.read_text(encoding="utf-8"))
        assert schema["$schema"] == SCHEMA_META_URI
        assert schema["title"].startswith("ECharts")
        assert_children_flat(schema)


def test_generated_bar_schema(echarts_backend, tmp_path):
    written = generate_all(echarts_backend, tmp_path)
    bar = json.loads(written["bar"].read_text(encoding="utf-8"))

    assert bar["type"] == "object"
    assert bar["properties"]["type"] == {"type": "string", "enum": ["bar"]}
    assert bar["properties"]["data"] == {"type": "array"}
    assert bar["properties"]["stack"] == {
        "type": "string",
        "description": "Series with the same stack name are stacked",
    }
    assert bar["properties"]["label"]["type"] == "object"
    assert bar["properties"]["label"]["description"].startswith("Props: show, position")


def test_generated_legend_merges_variants(echarts_backend, tmp_path):
    written = generate_all(echarts_backend, tmp_path)
    legend = json.loads(written["legend"].read_text(encoding="utf-8"))

    assert legend["type"] == "object"
    assert legend["properties"]["type"] == {"type": "string", "enum": ["plain", "scroll"]}
    assert legend["properties"]["show"] == {"type": "boolean"}
    assert "scrollDataIndex" not in legend["properties"]


def test_generated_full_option(echarts_backend, tmp_path):
    written = generate_all(echarts_backend, tmp_path)
    full = json.loads(written["full"].read_text(encoding="utf-8"))

    assert full["properties"]["series"] == {
        "type": "object | array",
        "description": "One series or a list of series",
    }
    assert full["properties"]["toolbox"]["type"] == "object"


def test_generate_is_deterministic(echarts_backend, tmp_path):
    first = generate_all(echarts_backend, tmp_path / "a")
    second = generate_all(echarts_backend, tmp_path / "b")

    for name in first:
        assert first[name].read_bytes() == second[name].read_bytes()


def test_generate_missing_types_are_skipped(tmp_path):
    backend = TypingBackend(types={"BarSchema": ScenarioSeries})

    written = generate_all(backend, tmp_path)

    assert list(written) == ["bar"]


def test_load_backend_from_graph_file(tmp_path):
    path = tmp_path / "types.yaml"
    path.write_text(
        "types:\n"
        "  BarSchema:\n"
        "    kind: object\n"
        "    properties:\n"
        "      type: {type: {kind: literal, value: bar}}\n",
        encoding="utf-8",
    )

    written = generate(str(path), tmp_path / "out")

    assert list(written) == ["bar"]
    bar = json.loads(written["bar"].read_text(encoding="utf-8"))
    assert bar["properties"] == {"type": {"type": "string", "enum": ["bar"]}}


def test_load_backend_from_environment(monkeypatch):
    monkeypatch.setenv("CHARTSCHEMA_TYPES", "chartschema.echarts_types")

    backend = load_backend()

    assert isinstance(backend, TypingBackend)
    assert backend.lookup("FullOptionSchema") is not None


def test_output_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("CHARTSCHEMA_SCHEMA_DIR", str(tmp_path))

    assert schema_generator.get_schema_output_dir() == tmp_path


def test_main_exit_status_when_nothing_is_written(tmp_path, monkeypatch):
    path = tmp_path / "types.yaml"
    path.write_text("types:\n  Unrelated: {kind: object}\n", encoding="utf-8")
    monkeypatch.setenv("CHARTSCHEMA_TYPES", str(path))
    monkeypatch.setenv("CHARTSCHEMA_SCHEMA_DIR", str(tmp_path / "out"))

    assert schema_generator.main() == 1

    with pytest.raises(SystemExit) as exc_info, warnings.catch_warnings():
        warnings.simplefilter("ignore", RuntimeWarning)
        runpy.run_module("chartschema.schema_generator", run_name="__main__")
    assert exc_info.value.code == 1
