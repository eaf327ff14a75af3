"""
Union normalization

A union is reduced to one of three shapes: a literal enum, a single object
built from the members' shared properties, or a pipe-joined list of kind
names.
"""

from typing import Callable, List, Optional

from .backend import TypeBackend
from .classify import (boxed_primitive_name, is_array, is_function, is_literal,
                       is_nullish, is_primitive, is_private, is_wrapper_object,
                       primitive_type_name)
from .schema import SimpleSchema, props_description

PropertyExpander = Callable[[object], SimpleSchema]


def non_null_members(backend: TypeBackend, union_type) -> List[object]:
    return [m for m in backend.union_members_of(union_type) if not is_nullish(backend, m)]


def literal_enum(backend: TypeBackend, members) -> Optional[SimpleSchema]:
    """Enum schema when every member is a literal of one primitive kind."""
    if not members or not all(is_literal(backend, m) for m in members):
        return None
    kinds = {primitive_type_name(backend, m) for m in members}
    if len(kinds) != 1:
        return None
    kind = kinds.pop()
    if kind == "unknown":
        return None
    return SimpleSchema(kind, enum=[backend.literal_value_of(m) for m in members])


def is_object_like(backend: TypeBackend, tp) -> bool:
    return not (is_primitive(backend, tp) or is_array(backend, tp) or is_function(backend, tp))


def member_kind_name(backend: TypeBackend, tp) -> str:
    name = primitive_type_name(backend, tp)
    if name is not None:
        return name
    if is_array(backend, tp):
        return "array"
    if is_function(backend, tp):
        return "function"
    if is_wrapper_object(backend, tp):
        return boxed_primitive_name(backend, tp)
    return "object"


def kind_names(backend: TypeBackend, members) -> List[str]:
    """Distinct member kind names in first-encountered order."""
    names = []
    for member in members:
        name = member_kind_name(backend, member)
        if name not in names:
            names.append(name)
    return names


def merged_object(backend: TypeBackend, members,
                  expand_property: Optional[PropertyExpander]) -> Optional[SimpleSchema]:
    shared = [p for p in backend.shared_properties_of(members) if not is_private(p.name)]
    if not shared:
        return None
    if expand_property is None:
        return SimpleSchema("object", description=props_description(p.name for p in shared))
    properties = {p.name: expand_property(p.type).with_description(p.doc) for p in shared}
    return SimpleSchema("object", properties=properties)


def normalize_union(backend: TypeBackend, union_type,
                    expand_property: Optional[PropertyExpander] = None) -> SimpleSchema:
    """Reduce a union to an enum, a merged object or a kind summary.

    ``expand_property`` compiles the type of each shared property of an
    object union. Without it the merged object only lists the shared names.
    """
    members = non_null_members(backend, union_type)
    if not members:
        return SimpleSchema("any")

    enum_schema = literal_enum(backend, members)
    if enum_schema is not None:
        return enum_schema

    if all(is_object_like(backend, m) for m in members):
        merged = merged_object(backend, members, expand_property)
        if merged is not None:
            return merged

    return SimpleSchema(" | ".join(kind_names(backend, members)))
