"""
Unit tests for SimpleSchema nodes.
"""

import pytest

from chartschema.schema import SimpleSchema, props_description


def test_to_dict_omits_absent_fields():
    assert SimpleSchema("string").to_dict() == {"type": "string"}


def test_to_dict_nests_children():
    schema = SimpleSchema(
        "object",
        properties={
            "data": SimpleSchema("array", items=SimpleSchema("number")),
            "kind": SimpleSchema("string", enum=["bar", "line"]),
        },
    )

    assert schema.to_dict() == {
        "type": "object",
        "properties": {
            "data": {"type": "array", "items": {"type": "number"}},
            "kind": {"type": "string", "enum": ["bar", "line"]},
        },
    }


def test_with_description_prefixes_existing_text():
    schema = SimpleSchema("object", description="Props: show")

    assert schema.with_description("Label settings").description == "Label settings. Props: show"
    assert schema.description == "Props: show"


def test_with_description_without_existing_text():
    assert SimpleSchema("number").with_description("Bar width").description == "Bar width"


def test_with_description_ignores_empty_doc():
    schema = SimpleSchema("number")

    assert schema.with_description(None) is schema
    assert schema.with_description("") is schema


@pytest.mark.parametrize("kwargs", [
    {"type": "object", "enum": ["a"]},
    {"type": "string", "properties": {}},
    {"type": "object", "items": SimpleSchema("string")},
])
def test_invalid_combinations_are_rejected(kwargs):
    with pytest.raises(ValueError):
        SimpleSchema(**kwargs)


def test_props_description():
    assert props_description(["show", "color"]) == "Props: show, color"
    assert props_description(iter(["a"])) == "Props: a"
