"""Compact schema nodes produced by the walker."""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Union

SCALAR_TYPES = frozenset(["string", "number", "boolean", "null", "unknown"])

EnumValue = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class SimpleSchema:
    """A JSON-serializable description of one type's shape.

    Nodes are built bottom-up and never changed afterwards; use
    ``with_description`` to derive a copy carrying extra documentation.
    """
    type: str
    description: Optional[str] = None
    properties: Optional[Dict[str, "SimpleSchema"]] = None
    items: Optional["SimpleSchema"] = None
    enum: Optional[List[EnumValue]] = None

    def __post_init__(self):
        if self.enum is not None and self.type not in SCALAR_TYPES:
            raise ValueError(f"enum is only allowed on primitive schemas, not '{self.type}'")
        if self.properties is not None and self.type != "object":
            raise ValueError(f"properties are only allowed on object schemas, not '{self.type}'")
        if self.items is not None and self.type != "array":
            raise ValueError(f"items are only allowed on array schemas, not '{self.type}'")

    def with_description(self, doc: Optional[str]) -> "SimpleSchema":
        """Prefix ``doc`` to the description, as "{doc}. {existing}"."""
        if not doc:
            return self
        description = f"{doc}. {self.description}" if self.description else doc
        return replace(self, description=description)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {'type': self.type}
        if self.description is not None:
            result['description'] = self.description
        if self.properties is not None:
            result['properties'] = {name: child.to_dict() for name, child in self.properties.items()}
        if self.items is not None:
            result['items'] = self.items.to_dict()
        if self.enum is not None:
            result['enum'] = list(self.enum)
        return result


def props_description(names) -> str:
    return "Props: " + ", ".join(names)
