"""Core data models shared across scngen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional, Tuple

FILE_EDGE_KIND = "imports"


class NodeType(str, Enum):
    """Closed set of entity kinds a graph provider may emit."""

    FILE = "file"
    CLASS = "class"
    FUNCTION = "function"
    METHOD = "method"
    INTERFACE = "interface"
    ENUM = "enum"
    TYPE_ALIAS = "type-alias"
    NAMESPACE = "namespace"
    STRUCT = "struct"
    PROPERTY = "property"
    FIELD = "field"
    VARIABLE = "variable"
    CONSTANT = "constant"
    ARROW_FUNCTION = "arrow-function"
    CONSTRUCTOR = "constructor"
    HTML_ELEMENT = "html-element"
    CSS_RULE = "css-rule"
    TRAIT = "trait"
    IMPL = "impl"
    STATIC = "static"
    UNION = "union"
    TEMPLATE = "template"


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class CssIntent(str, Enum):
    LAYOUT = "layout"
    TYPOGRAPHY = "typography"
    APPEARANCE = "appearance"


@dataclass(frozen=True)
class CodeNode:
    """One file or one declared entity inside a file.

    ``type`` stays a plain string so that values outside :class:`NodeType`
    survive untouched; the serializer maps them to a fallback glyph.
    """

    id: str
    file_path: str
    type: str
    name: str
    start_line: int = 1
    end_line: int = 1
    visibility: Optional[str] = None
    is_async: bool = False
    can_throw: bool = False
    is_pure: bool = False
    css_intents: FrozenSet[str] = field(default_factory=frozenset)
    code_snippet: Optional[str] = None
    parent_id: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.type == NodeType.FILE.value


@dataclass(frozen=True)
class CodeEdge:
    """Directed relationship between two nodes."""

    from_id: str
    to_id: str
    kind: str = "references"

    @property
    def is_file_relation(self) -> bool:
        return self.kind == FILE_EDGE_KIND


@dataclass(frozen=True)
class CodeGraph:
    """Immutable snapshot of a resolved project graph."""

    nodes: Mapping[str, CodeNode] = field(default_factory=dict)
    edges: Tuple[CodeEdge, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", MappingProxyType(dict(self.nodes)))
        object.__setattr__(self, "edges", tuple(self.edges))

    @classmethod
    def from_nodes(
        cls, nodes: Iterable[CodeNode], edges: Iterable[CodeEdge] = ()
    ) -> "CodeGraph":
        """Build a graph keyed by each node's own id, keeping iteration order."""
        return cls(nodes={node.id: node for node in nodes}, edges=tuple(edges))

    def __len__(self) -> int:
        return len(self.nodes)


__all__ = [
    "FILE_EDGE_KIND",
    "CodeEdge",
    "CodeGraph",
    "CodeNode",
    "CssIntent",
    "NodeType",
    "Visibility",
]
