"""
Graph backend

Reads a declarative type graph from a YAML or JSON document:

    types:
      LabelOption:
        kind: object
        properties:
          show: {type: boolean, doc: Whether to show the label}
      BarSchema:
        kind: object
        properties:
          data: {type: {kind: array, items: number}}
          label: {type: LabelOption}

A type reference is the name of a type in ``types``, a built-in name
(see BUILTIN_KINDS) or an inline type spec. References may form cycles.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Literal, Optional, Set, Union

import commentjson
import networkx as nx
import yaml
from pydantic import BaseModel, ValidationError

from ..backend import TypeBackend, TypeKind, TypeProperty
from ..common import MalformedTypeGraph, loadfile, logger

BUILTIN_KINDS = {
    "string": TypeKind.STRING,
    "number": TypeKind.NUMBER,
    "boolean": TypeKind.BOOLEAN,
    "null": TypeKind.NULL,
    "undefined": TypeKind.NULL,
    "void": TypeKind.NULL,
    "any": TypeKind.UNKNOWN,
    "unknown": TypeKind.UNKNOWN,
    "function": TypeKind.FUNCTION,
    "object": TypeKind.OBJECT,
    "array": TypeKind.ARRAY,
}

SpecKind = Literal["string", "number", "boolean", "null", "literal", "union",
                   "array", "object", "function", "any"]


class PropertySpec(BaseModel):
    type: Union[str, "TypeSpec"]
    doc: Optional[str] = None


class TypeSpec(BaseModel):
    kind: SpecKind
    name: Optional[str] = None
    value: Union[str, int, float, bool, None] = None
    properties: Dict[str, PropertySpec] = {}
    members: List[Union[str, "TypeSpec"]] = []
    items: Optional[Union[str, "TypeSpec"]] = None
    signatures: List[str] = []


class TypeGraphDocument(BaseModel):
    types: Dict[str, TypeSpec]


PropertySpec.model_rebuild()
TypeSpec.model_rebuild()


@dataclass(frozen=True)
class GraphType:
    """A node of the type graph.

    Named and built-in types are keyed by their name, inline specs by their
    path in the document (``X.prop``, ``X|0``, ``X[]``) together with ``root``,
    the named type that path starts from. A type named ``X.prop`` is a
    different node.
    """
    key: str
    spec: Optional[TypeSpec] = field(default=None, compare=False, hash=False)
    builtin: Optional[str] = None
    root: Optional[str] = None


def _references(spec: Union[str, TypeSpec]):
    """Names referenced by a spec, inline specs included."""
    if isinstance(spec, str):
        yield spec
        return
    for prop in spec.properties.values():
        yield from _references(prop.type)
    for member in spec.members:
        yield from _references(member)
    if spec.items is not None:
        yield from _references(spec.items)


class GraphBackend(TypeBackend):
    """Schema backend over a declarative type graph."""

    def __init__(self, document: TypeGraphDocument):
        self.document = document
        self._nodes: Dict[Hashable, GraphType] = {}
        self.graph = self._reference_graph()
        self._check_references()

    @classmethod
    def from_dict(cls, data: Any) -> "GraphBackend":
        try:
            document = TypeGraphDocument.model_validate(data)
        except ValidationError as e:
            raise MalformedTypeGraph(f"Invalid type graph: {e}") from e
        return cls(document)

    @classmethod
    def from_file(cls, filename, expand_env: bool = False) -> "GraphBackend":
        logger().debug(f"Loading type graph from {filename}")
        try:
            data = loadfile(filename, expand_env)
        except (yaml.YAMLError, commentjson.JSONLibraryException, ValueError) as e:
            raise MalformedTypeGraph(f"Could not parse {filename}: {e}") from e
        if not isinstance(data, dict):
            raise MalformedTypeGraph(f"{filename} does not contain a type graph")
        return cls.from_dict(data)

    def _reference_graph(self) -> nx.DiGraph:
        graph = nx.DiGraph()
        for name, spec in self.document.types.items():
            graph.add_node(name)
            for ref in _references(spec):
                if ref not in BUILTIN_KINDS:
                    graph.add_edge(name, ref)
        return graph

    def _check_references(self):
        shadowing = sorted(name for name in self.document.types if name in BUILTIN_KINDS)
        if shadowing:
            raise MalformedTypeGraph(f"Type names shadow built-in types: {', '.join(shadowing)}")
        missing = sorted(n for n in self.graph.nodes if n not in self.document.types)
        if missing:
            raise MalformedTypeGraph(f"Unknown type references: {', '.join(missing)}")

    def recursive_types(self) -> List[str]:
        """Named types that can reach themselves through references."""
        recursive = set()
        for component in nx.strongly_connected_components(self.graph):
            if len(component) > 1:
                recursive.update(component)
        recursive.update(n for n in self.graph.nodes if self.graph.has_edge(n, n))
        return [name for name in self.document.types if name in recursive]

    def _resolve(self, ref: Union[str, TypeSpec, GraphType], key: str,
                 parent: Optional[GraphType] = None) -> GraphType:
        if isinstance(ref, GraphType):
            return ref
        if isinstance(ref, str):
            if ref in BUILTIN_KINDS:
                node = GraphType(ref, None, ref)
            else:
                node = GraphType(ref, self.document.types[ref])
        else:
            root = (parent.root or parent.key) if parent is not None else key
            node = GraphType(key, ref, root=root)
        return self._nodes.setdefault(self.identity_of(node), node)

    def node(self, name: str) -> GraphType:
        return self._resolve(name, name)

    def kind_of(self, tp: GraphType) -> TypeKind:
        if tp.builtin is not None:
            return BUILTIN_KINDS[tp.builtin]
        kind = tp.spec.kind
        if kind == "any":
            return TypeKind.UNKNOWN
        if kind == "literal" and tp.spec.value is None:
            return TypeKind.NULL
        return TypeKind(kind)

    def properties_of(self, tp: GraphType) -> List[TypeProperty]:
        if tp.spec is None:
            return []
        return [
            TypeProperty(name, self._resolve(prop.type, f"{tp.key}.{name}", tp), prop.doc)
            for name, prop in tp.spec.properties.items()
        ]

    def union_members_of(self, tp: GraphType) -> List[GraphType]:
        return self._flatten_union(tp, {self.identity_of(tp)})

    def _flatten_union(self, tp: GraphType, seen: Set[Hashable]) -> List[GraphType]:
        if tp.spec is None or tp.spec.kind != "union":
            return []
        members = []
        for i, member in enumerate(tp.spec.members):
            node = self._resolve(member, f"{tp.key}|{i}", tp)
            if self.kind_of(node) is not TypeKind.UNION:
                members.append(node)
                continue
            # Unions may reference each other; each one is flattened once
            identity = self.identity_of(node)
            if identity in seen:
                continue
            seen.add(identity)
            members.extend(self._flatten_union(node, seen))
        return members

    def element_type_of(self, tp: GraphType) -> Optional[GraphType]:
        if tp.spec is None or tp.spec.items is None:
            return None
        return self._resolve(tp.spec.items, f"{tp.key}[]", tp)

    def call_signatures_of(self, tp: GraphType) -> List[str]:
        if self.kind_of(tp) is not TypeKind.FUNCTION:
            return []
        if tp.spec is not None and tp.spec.signatures:
            return list(tp.spec.signatures)
        return ["(...)"]

    def identity_of(self, tp: GraphType) -> Hashable:
        if tp.root is not None:
            return ("inline", tp.root, tp.key[len(tp.root):])
        return tp.key

    def display_name_of(self, tp: GraphType) -> str:
        if tp.builtin is not None:
            return tp.builtin
        return tp.spec.name or tp.key

    def literal_value_of(self, tp: GraphType) -> Any:
        return tp.spec.value if tp.spec is not None else None

    def exports(self) -> Dict[str, GraphType]:
        return {name: self.node(name) for name in self.document.types}
