"""
Unit tests for primitive classification and the wrapper-object heuristic.
"""

import enum
from typing import Any, Callable, List, Literal, Optional, Protocol, TypedDict

import pytest

from chartschema.backends.graph_backend import GraphBackend
from chartschema.classify import (boxed_primitive_name, is_array, is_function,
                                  is_nullish, is_primitive, is_private,
                                  is_wrapper_object, literal_type_name,
                                  primitive_type_name, wrapper_matches)


class StringBox(Protocol):
    def toString(self) -> str: ...
    def valueOf(self) -> str: ...
    def charAt(self, pos: int) -> str: ...


class NumberBox(Protocol):
    def toFixed(self, digits: int) -> str: ...
    def toPrecision(self, digits: int) -> str: ...
    def valueOf(self) -> float: ...


class TwoAccessors(Protocol):
    def toString(self) -> str: ...
    def valueOf(self) -> str: ...


class Formatter(Protocol):
    def __call__(self, value: float) -> str: ...


class Point(TypedDict):
    x: float
    y: float


class Color(enum.Enum):
    RED = "red"


@pytest.mark.parametrize("tp, expected", [
    (str, "string"),
    (int, "number"),
    (float, "number"),
    (bool, "boolean"),
    (type(None), "null"),
    (None, "null"),
    (Literal["bar"], "string"),
    (Literal[3], "number"),
    (Literal[True], "boolean"),
    (Literal[None], "null"),
    (Point, None),
    (List[int], None),
    (Optional[str], None),
    (Any, None),
])
def test_primitive_type_name(backend, tp, expected):
    assert primitive_type_name(backend, tp) == expected
    assert is_primitive(backend, tp) is (expected is not None)


def test_literal_type_name():
    assert literal_type_name("a") == "string"
    assert literal_type_name(1.5) == "number"
    assert literal_type_name(False) == "boolean"
    assert literal_type_name(None) == "null"
    assert literal_type_name(Color.RED) == "string"
    assert literal_type_name(b"raw") == "unknown"


def test_is_nullish(backend):
    assert is_nullish(backend, type(None))
    assert is_nullish(backend, Literal[None])
    assert not is_nullish(backend, str)


def test_is_array_and_is_function(backend):
    assert is_array(backend, List[int])
    assert is_array(backend, tuple)
    assert not is_array(backend, Point)
    assert is_function(backend, Callable[[int], str])
    assert is_function(backend, Formatter)
    assert not is_function(backend, Point)


def test_is_private():
    assert is_private("_cache")
    assert is_private("$ref")
    assert not is_private("show")


def test_wrapper_object_needs_three_accessors(backend):
    assert is_wrapper_object(backend, StringBox)
    assert not is_wrapper_object(backend, TwoAccessors)
    assert not is_wrapper_object(backend, Point)
    assert not is_wrapper_object(backend, str)


def test_boxed_primitive_name(backend):
    assert boxed_primitive_name(backend, StringBox) == "string"
    assert boxed_primitive_name(backend, NumberBox) == "number"


def test_wrapper_matches_scan_limit():
    names = [f"prop{i}" for i in range(10)] + ["toString", "valueOf", "charAt"]

    assert wrapper_matches(names) == 0
    assert wrapper_matches(names, scan_limit=13) == 3


def test_wrapper_scan_only_looks_at_first_ten_properties():
    props = {f"prop{i}": {"type": "string"} for i in range(10)}
    props.update({
        "toString": {"type": "function"},
        "valueOf": {"type": "function"},
        "charAt": {"type": "function"},
    })
    late = {"kind": "object", "properties": props}
    early = {"kind": "object", "properties": dict(reversed(list(props.items())))}
    backend = GraphBackend.from_dict({"types": {"Late": late, "Early": early}})

    assert not is_wrapper_object(backend, backend.node("Late"))
    assert is_wrapper_object(backend, backend.node("Early"))
