"""
Unit tests for the command line parser and the list/show commands.
"""

import io

import pytest

from chartschema.cli.main import build_parser, list_types, main, show_schema


def test_show_defaults_to_full():
    args = build_parser().parse_args(["show"])

    assert args.command == "show"
    assert args.type == "full"


def test_generate_options():
    args = build_parser().parse_args(["generate", "--types", "types.yaml", "--output", "out"])

    assert args.source == "types.yaml"
    assert args.output_dir == "out"


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_list_types_output():
    out = io.StringIO()

    assert list_types(out) == 0

    text = out.getvalue()
    assert text.startswith("Series:\n  bar\n")
    assert "\nComponents:\n  title\n" in text
    assert "  full\n" not in text
    assert text.endswith("Use 'chartschema show <name>' or 'chartschema show' for full option.\n")


def test_show_unknown_type(tmp_path):
    assert show_schema("sparkline", tmp_path, io.StringIO()) == 1


def test_show_missing_file(tmp_path):
    assert show_schema("bar", tmp_path, io.StringIO()) == 1


def test_show_prints_file(tmp_path):
    (tmp_path / "bar.json").write_text('{"type": "object"}', encoding="utf-8")
    out = io.StringIO()

    assert show_schema("bar", tmp_path, out) == 0
    assert out.getvalue() == '{"type": "object"}'


def test_show_full_uses_schema_dir_from_environment(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("CHARTSCHEMA_SCHEMA_DIR", str(tmp_path))
    (tmp_path / "full.json").write_text("{}", encoding="utf-8")

    assert main(["show"]) == 0
    assert capsys.readouterr().out == "{}"


def test_invalid_log_level():
    assert main(["--log-level", "LOUD", "list"]) == 1
