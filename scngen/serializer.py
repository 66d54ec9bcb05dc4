"""Serialize a resolved CodeGraph into Symbolic Context Notation text.

The pipeline is partition -> index -> render each file -> join. Every stage
reads the graph and the lookup tables built at the start; nothing is mutated,
so file blocks can be rendered in any order (or concurrently) and merged back
in file order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .edges import EdgeIndex, EdgeView, build_edge_index
from .ids import IdStyle, ScnIdMap
from .logging import get_logger
from .models import CodeGraph, CodeNode, NodeType
from .partition import FileGroup, GraphPartition, partition_graph
from .symbols import (
    CALLER_ARROW,
    DEPENDENCY_ARROW,
    FILE_SYMBOL,
    format_css_intents,
    qualifiers_for,
    symbol_for,
)

INDENT = "  "

_logger = get_logger("serializer")


@dataclass(frozen=True)
class RenderOptions:
    """Knobs that change the rendered text (all off by default)."""

    id_style: IdStyle = IdStyle.VERBATIM
    uppercase_containers: bool = False
    max_workers: Optional[int] = None


@dataclass(frozen=True)
class _RenderContext:
    partition: GraphPartition
    edges: EdgeIndex
    ids: ScnIdMap
    options: RenderOptions


def serialize_graph(graph: CodeGraph, options: Optional[RenderOptions] = None) -> str:
    """Return the SCN document for ``graph``.

    Raises :class:`~scngen.errors.GraphError` when the graph is malformed;
    no partial document is produced in that case.
    """
    options = options or RenderOptions()
    partition = partition_graph(graph)
    edges = build_edge_index(graph)
    context = _RenderContext(
        partition=partition,
        edges=edges,
        ids=ScnIdMap(partition, options.id_style),
        options=options,
    )
    _logger.debug(
        "Serializing %d file(s), %d node(s), %d indexed link(s)",
        len(partition.files),
        len(graph.nodes),
        edges.edge_count,
    )

    groups = partition.files
    if options.max_workers and options.max_workers > 1 and len(groups) > 1:
        with ThreadPoolExecutor(max_workers=options.max_workers) as pool:
            blocks = list(pool.map(lambda group: render_file_block(group, context), groups))
    else:
        blocks = [render_file_block(group, context) for group in groups]
    return "\n\n".join(blocks)


def render_file_block(group: FileGroup, context: _RenderContext) -> str:
    """Header, file-level links, then each entity's line group."""
    file_node = group.file
    lines = [f"{FILE_SYMBOL} ({context.ids.display(file_node.id)}) {_quote_path(file_node.file_path)}"]
    lines.extend(_link_lines(file_node.id, context.edges.files, INDENT, context.ids))
    for entity in group.entities:
        lines.extend(render_node_lines(entity, context))
    return "\n".join(lines)


def render_node_lines(node: CodeNode, context: _RenderContext) -> List[str]:
    """Main line for ``node`` followed by its dependency and caller lines."""
    depth = context.partition.depth_of(node.id)
    indent = INDENT * (depth + 1)
    pieces = [
        *qualifiers_for(node),
        symbol_for(node, uppercase_containers=context.options.uppercase_containers),
        f"({context.ids.display(node.id)})",
        node.name,
        _signature(node),
    ]
    main_line = indent + " ".join(piece for piece in pieces if piece)
    return [main_line, *_link_lines(node.id, context.edges.entities, indent + INDENT, context.ids)]


def _link_lines(node_id: str, view: EdgeView, indent: str, ids: ScnIdMap) -> List[str]:
    lines: List[str] = []
    for arrow, targets in (
        (DEPENDENCY_ARROW, view.dependencies(node_id)),
        (CALLER_ARROW, view.callers(node_id)),
    ):
        if targets:
            lines.append(f"{indent}{arrow} {_format_links(targets, ids)}")
    return lines


def _format_links(targets: Sequence[str], ids: ScnIdMap) -> str:
    return ", ".join(f"({ids.link(target)})" for target in targets)


def _signature(node: CodeNode) -> str:
    if node.type == NodeType.CSS_RULE.value:
        intents = format_css_intents(node.css_intents)
        if intents:
            return intents
    return node.code_snippet or ""


def _quote_path(path: str) -> str:
    if any(char.isspace() for char in path):
        return f'"{path}"'
    return path


__all__ = ["INDENT", "RenderOptions", "render_file_block", "render_node_lines", "serialize_graph"]
