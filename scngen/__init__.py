"""Render resolved code graphs as Symbolic Context Notation (SCN)."""

from .errors import ConfigError, GraphError, ProviderError
from .ids import IdStyle
from .models import FILE_EDGE_KIND, CodeEdge, CodeGraph, CodeNode, CssIntent, NodeType, Visibility
from .serializer import RenderOptions, serialize_graph

__version__ = "0.1.0"

__all__ = [
    "FILE_EDGE_KIND",
    "CodeEdge",
    "CodeGraph",
    "CodeNode",
    "ConfigError",
    "CssIntent",
    "GraphError",
    "IdStyle",
    "NodeType",
    "ProviderError",
    "RenderOptions",
    "Visibility",
    "serialize_graph",
]
