"""
Depth-limited type walker

``walk`` expands the root type only: its own properties, array items or
shared union properties are compiled by ``summarize``, which never recurses.
The depth cap alone guarantees termination on recursive type graphs; the
visited set keeps a type from being expanded twice along one path.
"""

from typing import FrozenSet, Hashable

from .backend import TypeBackend, TypeKind
from .classify import (is_array, is_function, is_literal, is_private,
                       is_wrapper_object, primitive_type_name)
from .schema import SimpleSchema, props_description
from .unions import normalize_union

EMPTY_VISITED: FrozenSet[Hashable] = frozenset()


def primitive_schema(backend: TypeBackend, tp) -> SimpleSchema:
    name = primitive_type_name(backend, tp)
    if is_literal(backend, tp) and name != "unknown":
        return SimpleSchema(name, enum=[backend.literal_value_of(tp)])
    return SimpleSchema(name)


def public_properties(backend: TypeBackend, tp):
    return [p for p in backend.properties_of(tp) if not is_private(p.name)]


def summarize(backend: TypeBackend, tp) -> SimpleSchema:
    """Flat schema for ``tp``: never carries properties or items."""
    if primitive_type_name(backend, tp) is not None:
        return primitive_schema(backend, tp)
    if is_array(backend, tp):
        return SimpleSchema("array")
    if is_wrapper_object(backend, tp):
        return SimpleSchema("string")

    kind = backend.kind_of(tp)
    if kind is TypeKind.UNION:
        return normalize_union(backend, tp)
    if is_function(backend, tp):
        return SimpleSchema("function")
    if kind is TypeKind.OBJECT:
        names = [p.name for p in public_properties(backend, tp)]
        if names:
            return SimpleSchema("object", description=props_description(names))
        return SimpleSchema("object")

    return SimpleSchema(backend.display_name_of(tp))


def walk(backend: TypeBackend, tp, depth: int = 0,
         visited: FrozenSet[Hashable] = EMPTY_VISITED) -> SimpleSchema:
    """Compile ``tp`` into a SimpleSchema.

    Args:
        backend: Type system the type belongs to
        tp: Type node to compile
        depth: Distance from the root; anything below the root is summarized
        visited: Identities already expanded on the path to ``tp``

    Returns:
        A freshly built schema tree, at most two tiers deep
    """
    identity = backend.identity_of(tp)
    if depth > 0 or identity in visited:
        return summarize(backend, tp)
    # Every child gets this set; it is immutable so siblings cannot see each other
    visited = visited | {identity}

    def expand(child) -> SimpleSchema:
        return walk(backend, child, depth + 1, visited)

    if primitive_type_name(backend, tp) is not None:
        return primitive_schema(backend, tp)

    kind = backend.kind_of(tp)
    if kind is TypeKind.UNION:
        return normalize_union(backend, tp, expand)

    if is_array(backend, tp):
        element = backend.element_type_of(tp)
        if element is None:
            return SimpleSchema("array")
        return SimpleSchema("array", items=expand(element))

    if is_function(backend, tp):
        return SimpleSchema("function")

    if is_wrapper_object(backend, tp):
        return SimpleSchema("string")

    if kind is TypeKind.OBJECT:
        props = public_properties(backend, tp)
        if not props:
            return SimpleSchema("object")
        properties = {p.name: expand(p.type).with_description(p.doc) for p in props}
        return SimpleSchema("object", properties=properties)

    return SimpleSchema(backend.display_name_of(tp))
