"""Primitive classification and the boxed-primitive wrapper heuristic."""

import enum
from typing import Any, Iterable, Optional

from .backend import TypeBackend, TypeKind

PRIMITIVE_KINDS = {
    TypeKind.STRING: "string",
    TypeKind.NUMBER: "number",
    TypeKind.BOOLEAN: "boolean",
    TypeKind.NULL: "null",
}

# Accessors found on boxed string/number wrappers: JavaScript's String and
# Number prototypes, and Python's str and float
WRAPPER_METHODS = frozenset([
    "toString", "valueOf", "charAt", "charCodeAt", "concat", "indexOf",
    "lastIndexOf", "localeCompare", "match", "replace", "search", "slice",
    "split", "substring", "toLowerCase", "toUpperCase", "trim", "toFixed",
    "toPrecision", "toExponential",
    "lower", "upper", "casefold", "capitalize", "startswith", "endswith",
    "strip", "lstrip", "rstrip", "rsplit", "splitlines", "zfill", "isdigit",
    "isalpha", "encode", "is_integer", "as_integer_ratio", "hex", "conjugate",
])
NUMBER_WRAPPER_METHODS = frozenset([
    "toFixed", "toPrecision", "toExponential", "is_integer",
    "as_integer_ratio", "hex", "conjugate",
])

WRAPPER_SCAN_LIMIT = 10
WRAPPER_MIN_MATCHES = 3

PRIVATE_PREFIXES = ("_", "$")


def is_private(name: str) -> bool:
    return name.startswith(PRIVATE_PREFIXES)


def literal_type_name(value: Any) -> str:
    if isinstance(value, enum.Enum):
        value = value.value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    return "unknown"


def primitive_type_name(backend: TypeBackend, tp) -> Optional[str]:
    """Base kind name of a primitive or literal type, None when not primitive."""
    kind = backend.kind_of(tp)
    if kind is TypeKind.LITERAL:
        return literal_type_name(backend.literal_value_of(tp))
    return PRIMITIVE_KINDS.get(kind)


def is_primitive(backend: TypeBackend, tp) -> bool:
    return primitive_type_name(backend, tp) is not None


def is_nullish(backend: TypeBackend, tp) -> bool:
    return primitive_type_name(backend, tp) == "null"


def is_literal(backend: TypeBackend, tp) -> bool:
    return backend.kind_of(tp) is TypeKind.LITERAL


def is_array(backend: TypeBackend, tp) -> bool:
    return backend.kind_of(tp) is TypeKind.ARRAY


def is_function(backend: TypeBackend, tp) -> bool:
    return backend.kind_of(tp) is TypeKind.FUNCTION or bool(backend.call_signatures_of(tp))


def wrapper_matches(names: Iterable[str],
                    methods=WRAPPER_METHODS,
                    scan_limit: int = WRAPPER_SCAN_LIMIT) -> int:
    return sum(1 for name in list(names)[:scan_limit] if name in methods)


def is_wrapper_object(backend: TypeBackend, tp,
                      methods=WRAPPER_METHODS,
                      scan_limit: int = WRAPPER_SCAN_LIMIT,
                      min_matches: int = WRAPPER_MIN_MATCHES) -> bool:
    """Does ``tp`` merely box a primitive behind accessor-style methods?

    Only the first ``scan_limit`` property names are inspected; the node is a
    wrapper when ``min_matches`` of them are known wrapper accessors.
    """
    if backend.kind_of(tp) is not TypeKind.OBJECT:
        return False
    names = [p.name for p in backend.properties_of(tp)]
    if len(names) < min_matches:
        return False
    return wrapper_matches(names, methods, scan_limit) >= min_matches


def boxed_primitive_name(backend: TypeBackend, tp) -> str:
    """Primitive a wrapper object stands for: number or string."""
    display = backend.display_name_of(tp)
    if "Number" in display or display in ("number", "float", "int"):
        return "number"
    names = [p.name for p in backend.properties_of(tp)][:WRAPPER_SCAN_LIMIT]
    if names and wrapper_matches(names, NUMBER_WRAPPER_METHODS) * 2 > wrapper_matches(names):
        return "number"
    return "string"
