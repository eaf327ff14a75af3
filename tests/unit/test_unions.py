"""
Unit tests for union normalization.

Verifies:
1. Literal-only unions of one kind become enums
2. Object unions merge into their shared properties
3. Anything else becomes a pipe-joined kind summary
"""

import enum
from typing import Annotated, Callable, List, Literal, Optional, Protocol, TypedDict, Union

from chartschema.unions import kind_names, literal_enum, non_null_members, normalize_union
from chartschema.walker import summarize


class PlainLegend(TypedDict, total=False):
    type: Literal["plain"]
    show: Annotated[bool, "Whether to show the legend"]
    left: str


class ScrollLegend(TypedDict, total=False):
    type: Literal["scroll"]
    show: bool
    pageIcons: dict


class Circle(TypedDict):
    radius: float


class Square(TypedDict):
    side: float


class StringBox(Protocol):
    def toString(self) -> str: ...
    def valueOf(self) -> str: ...
    def trim(self) -> str: ...


class Align(enum.Enum):
    LEFT = "left"
    RIGHT = "right"


def test_literal_union_becomes_enum(backend):
    result = normalize_union(backend, Literal["bar", "line", "pie"])

    assert result.to_dict() == {"type": "string", "enum": ["bar", "line", "pie"]}


def test_optional_literal_union_drops_null(backend):
    result = normalize_union(backend, Optional[Literal["top", "bottom"]])

    assert result.to_dict() == {"type": "string", "enum": ["top", "bottom"]}


def test_number_literals(backend):
    assert normalize_union(backend, Literal[1, 2, 3]).to_dict() == {
        "type": "number",
        "enum": [1, 2, 3],
    }


def test_mixed_literal_kinds_are_joined(backend):
    result = normalize_union(backend, Literal["auto", 10])

    assert result.to_dict() == {"type": "string | number"}


def test_enum_class_becomes_enum(backend):
    assert normalize_union(backend, Align).to_dict() == {
        "type": "string",
        "enum": ["left", "right"],
    }


def test_object_union_merges_shared_properties(backend):
    expand = lambda tp: summarize(backend, tp)

    result = normalize_union(backend, Union[PlainLegend, ScrollLegend], expand).to_dict()

    assert result == {
        "type": "object",
        "properties": {
            "type": {"type": "string", "enum": ["plain", "scroll"]},
            "show": {"type": "boolean", "description": "Whether to show the legend"},
        },
    }


def test_object_union_without_expander_lists_shared_names(backend):
    result = normalize_union(backend, Union[PlainLegend, ScrollLegend, None])

    assert result.to_dict() == {"type": "object", "description": "Props: type, show"}


def test_object_union_without_shared_properties(backend):
    result = normalize_union(backend, Union[Circle, Square])

    assert result.to_dict() == {"type": "object"}


def test_mixed_union_kind_names(backend):
    assert normalize_union(backend, Union[str, List[int]]).to_dict() == {"type": "string | array"}
    assert normalize_union(backend, Union[float, Callable[[], float]]).to_dict() == {
        "type": "number | function"
    }


def test_kind_names_are_distinct_in_order(backend):
    members = [str, Circle, Literal["a"], Square, List[str]]

    assert kind_names(backend, members) == ["string", "object", "array"]


def test_wrapper_member_in_mixed_union(backend):
    assert normalize_union(backend, Union[StringBox, int]).to_dict() == {"type": "string | number"}


def test_null_only_union_is_any(backend):
    assert normalize_union(backend, Union[None, Literal[None]]).to_dict() == {"type": "any"}


def test_non_null_members_flattens_nested_unions(backend):
    nested = Union[str, Union[int, None], Literal["a", "b"]]

    assert non_null_members(backend, nested) == [str, int, Literal["a"], Literal["b"]]


def test_literal_enum_rejects_non_literals(backend):
    assert literal_enum(backend, [str, Literal["a"]]) is None
    assert literal_enum(backend, []) is None
