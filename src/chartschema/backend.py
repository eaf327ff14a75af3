"""
Type backend interface

The walker never talks to a type system directly. Anything able to answer the
questions below (a Python typing introspector, a declarative type graph, a
foreign type-checker bridge) can be compiled into schemas.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Hashable, List, NamedTuple, Optional


class TypeKind(Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    LITERAL = "literal"
    UNION = "union"
    ARRAY = "array"
    OBJECT = "object"
    FUNCTION = "function"
    UNKNOWN = "unknown"


class TypeProperty(NamedTuple):
    name: str
    type: Any
    doc: Optional[str] = None


class TypeBackend(ABC):
    """Capabilities the schema walker requires from a hosting type system."""

    @abstractmethod
    def kind_of(self, tp) -> TypeKind:
        pass

    @abstractmethod
    def properties_of(self, tp) -> List[TypeProperty]:
        """Own properties of ``tp`` in declaration order."""

    @abstractmethod
    def union_members_of(self, tp) -> List[Any]:
        """Flattened members of a union type."""

    @abstractmethod
    def element_type_of(self, tp) -> Optional[Any]:
        """Element type of an array type, or None when it is not known."""

    @abstractmethod
    def call_signatures_of(self, tp) -> List[str]:
        pass

    @abstractmethod
    def identity_of(self, tp) -> Hashable:
        """A key that is equal for the same type every time it is seen."""

    @abstractmethod
    def display_name_of(self, tp) -> str:
        pass

    @abstractmethod
    def literal_value_of(self, tp) -> Any:
        pass

    @abstractmethod
    def exports(self) -> Dict[str, Any]:
        """Named root types this backend can resolve."""

    def lookup(self, name: str) -> Optional[Any]:
        return self.exports().get(name)

    def shared_properties_of(self, members: List[Any]) -> List[TypeProperty]:
        """Properties present on every member of an object union.

        Names are intersected in the first member's order; each shared
        property takes the first member's type and the first non-empty doc.
        Backends with a notion of apparent types may override this.
        """
        if not members:
            return []
        per_member = [{p.name: p for p in self.properties_of(m)} for m in members]
        shared = []
        for name, first in per_member[0].items():
            if not all(name in props for props in per_member[1:]):
                continue
            doc = next((props[name].doc for props in per_member if props[name].doc), None)
            shared.append(TypeProperty(name, first.type, doc))
        return shared
