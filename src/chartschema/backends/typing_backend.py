"""
Typing backend

Reads shapes from Python type annotations: TypedDicts, dataclasses, pydantic
models, Protocols, Literal/Union/Optional, Enum, list/tuple/Sequence,
dict/Mapping and Callable. Documentation comes from ``Annotated`` string
metadata, dataclass field ``metadata['description']``, pydantic field
descriptions and method/property docstrings.
"""

import collections
import collections.abc
import dataclasses
import decimal
import enum
import fractions
import inspect
import types
import typing
from typing import (Annotated, Any, Dict, ForwardRef, List, Literal, Optional,
                    Union, get_args, get_origin, get_type_hints)

from pydantic import BaseModel

from ..backend import TypeBackend, TypeKind, TypeProperty
from ..common import logger

ARRAY_ORIGINS = frozenset([
    list, tuple, set, frozenset,
    collections.abc.Sequence, collections.abc.MutableSequence,
    collections.abc.Set, collections.abc.MutableSet,
    collections.abc.Collection, collections.abc.Iterable,
    collections.abc.Iterator, collections.abc.Generator,
])
MAPPING_ORIGINS = frozenset([
    dict, collections.OrderedDict, collections.defaultdict,
    collections.abc.Mapping, collections.abc.MutableMapping,
])
NUMBER_TYPES = (int, float, complex, decimal.Decimal, fractions.Fraction)
STRING_TYPES = (str, bytes, bytearray)
UNION_ORIGINS = (Union, types.UnionType)
QUALIFIERS = (typing.Required, typing.NotRequired, typing.ClassVar, typing.Final)
_TypeAliasType = getattr(typing, "TypeAliasType", None)
_PROTOCOL_BASES = (object, typing.Protocol, typing.Generic)


def annotation_doc(metadata) -> Optional[str]:
    """First documentation string found in ``Annotated`` metadata."""
    for item in metadata:
        if isinstance(item, str):
            return item
        for attr in ("documentation", "description"):
            value = getattr(item, attr, None)
            if isinstance(value, str) and value:
                return value
    return None


def unwrap(tp):
    """Strip aliases, Annotated and field qualifiers, keeping any doc found."""
    doc = None
    aliases = set()
    while True:
        if _TypeAliasType is not None and isinstance(tp, _TypeAliasType):
            # ``type A = A`` stays an opaque alias
            if id(tp) in aliases:
                return tp, doc
            aliases.add(id(tp))
            tp = tp.__value__
            continue
        origin = get_origin(tp)
        if origin is Annotated:
            args = get_args(tp)
            doc = doc or annotation_doc(args[1:])
            tp = args[0]
            continue
        if origin in QUALIFIERS:
            tp = get_args(tp)[0]
            continue
        return tp, doc


def first_doc_line(obj) -> Optional[str]:
    doc = inspect.getdoc(obj)
    if not doc:
        return None
    return doc.strip().splitlines()[0]


class TypingBackend(TypeBackend):
    """Schema backend over Python type annotations.

    Args:
        module: Module whose public type definitions are the exported roots
        types: Extra named root types
    """

    def __init__(self, module: types.ModuleType = None, types: Dict[str, Any] = None):
        self.module = module
        self.extra_types = dict(types or {})

    def _class_of(self, tp) -> Optional[type]:
        if isinstance(tp, type) and not get_args(tp):
            return tp
        origin = get_origin(tp)
        if isinstance(origin, type):
            return origin
        return None

    def _class_kind(self, cls: type) -> TypeKind:
        if cls is type(None):
            return TypeKind.NULL
        if issubclass(cls, enum.Enum):
            return TypeKind.UNION
        if issubclass(cls, bool):
            return TypeKind.BOOLEAN
        if issubclass(cls, STRING_TYPES):
            return TypeKind.STRING
        if issubclass(cls, NUMBER_TYPES):
            return TypeKind.NUMBER
        if cls in ARRAY_ORIGINS:
            return TypeKind.ARRAY
        if cls is collections.abc.Callable:
            return TypeKind.FUNCTION
        return TypeKind.OBJECT

    def kind_of(self, tp) -> TypeKind:
        tp, _ = unwrap(tp)
        if tp is None or tp is type(None):
            return TypeKind.NULL
        if tp is Any or tp is object:
            return TypeKind.UNKNOWN

        origin = get_origin(tp)
        if origin is Literal:
            values = get_args(tp)
            if len(values) != 1:
                return TypeKind.UNION
            return TypeKind.NULL if values[0] is None else TypeKind.LITERAL
        if origin in UNION_ORIGINS:
            return TypeKind.UNION
        if origin is collections.abc.Callable:
            return TypeKind.FUNCTION
        if origin in ARRAY_ORIGINS:
            return TypeKind.ARRAY
        if origin in MAPPING_ORIGINS:
            return TypeKind.OBJECT

        cls = self._class_of(tp)
        if cls is not None:
            return self._class_kind(cls)
        if inspect.isroutine(tp):
            return TypeKind.FUNCTION
        # Unresolved forward references, TypeVars and the like
        return TypeKind.UNKNOWN

    def _type_hints(self, cls: type) -> Dict[str, Any]:
        try:
            return get_type_hints(cls, include_extras=True)
        except (NameError, TypeError) as e:
            logger().debug(f"Could not resolve annotations of {cls.__qualname__}: {e}")
            hints = {}
            for klass in reversed(cls.__mro__):
                hints.update(inspect.get_annotations(klass))
            return hints

    def _model_properties(self, cls) -> List[TypeProperty]:
        props = []
        for name, field in cls.model_fields.items():
            inner, doc = unwrap(field.annotation)
            doc = field.description or doc or annotation_doc(field.metadata)
            props.append(TypeProperty(field.alias or name, inner, doc))
        return props

    def _protocol_members(self, cls) -> Dict[str, TypeProperty]:
        members = {}
        for klass in reversed(cls.__mro__):
            if klass in _PROTOCOL_BASES:
                continue
            for name, attr in vars(klass).items():
                if name.startswith("__"):
                    continue
                if isinstance(attr, property):
                    try:
                        returns = get_type_hints(attr.fget).get("return", Any)
                    except (NameError, TypeError):
                        returns = Any
                    members[name] = TypeProperty(name, returns, first_doc_line(attr))
                elif isinstance(attr, (staticmethod, classmethod)):
                    members[name] = TypeProperty(name, attr.__func__, first_doc_line(attr.__func__))
                elif inspect.isfunction(attr):
                    members[name] = TypeProperty(name, attr, first_doc_line(attr))
        return members

    def properties_of(self, tp) -> List[TypeProperty]:
        tp, _ = unwrap(tp)
        cls = self._class_of(tp)
        if cls is None or self._class_kind(cls) is not TypeKind.OBJECT:
            return []
        if issubclass(cls, BaseModel):
            return self._model_properties(cls)

        field_docs = {}
        if dataclasses.is_dataclass(cls):
            field_docs = {f.name: f.metadata.get("description") for f in dataclasses.fields(cls)}

        props = {}
        for name, hint in self._type_hints(cls).items():
            if get_origin(hint) is typing.ClassVar or isinstance(hint, dataclasses.InitVar):
                continue
            inner, doc = unwrap(hint)
            props[name] = TypeProperty(name, inner, field_docs.get(name) or doc)

        if getattr(cls, "_is_protocol", False):
            for name, member in self._protocol_members(cls).items():
                props.setdefault(name, member)
        return list(props.values())

    def union_members_of(self, tp) -> List[Any]:
        return self._flatten_union(tp, {self.identity_of(tp)})

    def _flatten_union(self, tp, seen) -> List[Any]:
        tp, _ = unwrap(tp)
        origin = get_origin(tp)
        if origin is Literal:
            return [Literal[value] for value in get_args(tp)]
        cls = self._class_of(tp)
        if cls is not None and issubclass(cls, enum.Enum):
            return [Literal[member.value] for member in cls]
        if origin not in UNION_ORIGINS:
            return []

        members = []
        for arg in get_args(tp):
            if self.kind_of(arg) is not TypeKind.UNION:
                members.append(arg)
                continue
            # Recursive aliases such as ``type A = A | str`` are flattened once
            identity = self.identity_of(arg)
            if identity in seen:
                continue
            seen.add(identity)
            members.extend(self._flatten_union(arg, seen))
        return members

    def element_type_of(self, tp) -> Optional[Any]:
        tp, _ = unwrap(tp)
        args = get_args(tp)
        if not args:
            return None
        if (get_origin(tp) or tp) is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                return args[0]
            distinct = list(dict.fromkeys(args))
            if len(distinct) == 1:
                return distinct[0]
            return self._union_of(distinct)
        return args[0]

    def _signature_text(self, fn) -> str:
        try:
            return str(inspect.signature(fn))
        except (TypeError, ValueError):
            return "(...)"

    def call_signatures_of(self, tp) -> List[str]:
        tp, _ = unwrap(tp)
        if get_origin(tp) is collections.abc.Callable or tp is collections.abc.Callable:
            args = get_args(tp)
            if not args:
                return ["(...)"]
            params, returns = args[0], args[-1]
            if params is Ellipsis:
                rendered = "..."
            else:
                rendered = ", ".join(self.display_name_of(p) for p in params)
            return [f"({rendered}) -> {self.display_name_of(returns)}"]
        if inspect.isroutine(tp):
            return [self._signature_text(tp)]

        cls = self._class_of(tp)
        if cls is None or cls is type(None):
            return []
        for klass in cls.__mro__:
            if klass is object:
                continue
            if "__call__" in vars(klass):
                return [self._signature_text(vars(klass)["__call__"])]
        return []

    def identity_of(self, tp):
        tp, _ = unwrap(tp)
        try:
            hash(tp)
        except TypeError:
            return ("id", id(tp))
        return tp

    def display_name_of(self, tp) -> str:
        tp, _ = unwrap(tp)
        if tp is Any:
            return "any"
        if tp is None or tp is type(None):
            return "None"
        if isinstance(tp, ForwardRef):
            return tp.__forward_arg__
        if isinstance(tp, str):
            return tp
        if isinstance(tp, type) and not get_args(tp):
            return tp.__qualname__
        if inspect.isroutine(tp):
            return getattr(tp, "__qualname__", repr(tp))
        return repr(tp).replace("typing.", "")

    def literal_value_of(self, tp) -> Any:
        tp, _ = unwrap(tp)
        value = get_args(tp)[0]
        if isinstance(value, enum.Enum):
            return value.value
        return value

    def _union_of(self, members):
        if len(members) == 1:
            return members[0]
        try:
            return Union[tuple(members)]
        except TypeError:
            return members[0]

    def shared_properties_of(self, members) -> List[TypeProperty]:
        """Shared properties typed as the union of every member's property type."""
        per_member = [{p.name: p for p in self.properties_of(m)} for m in members]
        if not per_member:
            return []

        shared = []
        for name in per_member[0]:
            if not all(name in props for props in per_member[1:]):
                continue
            candidates = [props[name] for props in per_member]
            distinct = {}
            for candidate in candidates:
                distinct.setdefault(self.identity_of(candidate.type), candidate.type)
            doc = next((c.doc for c in candidates if c.doc), None)
            shared.append(TypeProperty(name, self._union_of(list(distinct.values())), doc))
        return shared

    def _is_exported_type(self, value) -> bool:
        if _TypeAliasType is not None and isinstance(value, _TypeAliasType):
            return True
        if isinstance(value, type):
            return value.__module__ == self.module.__name__
        return get_origin(value) is not None and bool(get_args(value))

    def exports(self) -> Dict[str, Any]:
        result = {}
        if self.module is not None:
            names = getattr(self.module, "__all__", None) or list(vars(self.module))
            for name in names:
                if name.startswith("_"):
                    continue
                value = getattr(self.module, name, None)
                if self._is_exported_type(value):
                    result[name] = value
        result.update(self.extra_types)
        return result
