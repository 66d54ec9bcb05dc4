"""Read-only lookup of graph edges by endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

from .models import CodeGraph

_EMPTY: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EdgeView:
    """Outgoing and incoming neighbour ids, de-duplicated in input edge order."""

    outgoing: Mapping[str, Tuple[str, ...]]
    incoming: Mapping[str, Tuple[str, ...]]

    def dependencies(self, node_id: str) -> Tuple[str, ...]:
        return self.outgoing.get(node_id, _EMPTY)

    def callers(self, node_id: str) -> Tuple[str, ...]:
        return self.incoming.get(node_id, _EMPTY)


@dataclass(frozen=True)
class EdgeIndex:
    """File-level (imports between files) and entity-level views over the edges."""

    files: EdgeView
    entities: EdgeView

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.files.outgoing.values()) + sum(
            len(targets) for targets in self.entities.outgoing.values()
        )


def build_edge_index(graph: CodeGraph) -> EdgeIndex:
    """Index ``graph.edges``; endpoints must already be validated."""
    # dict values double as insertion-ordered sets
    file_out: Dict[str, Dict[str, None]] = {}
    file_in: Dict[str, Dict[str, None]] = {}
    entity_out: Dict[str, Dict[str, None]] = {}
    entity_in: Dict[str, Dict[str, None]] = {}

    for edge in graph.edges:
        if edge.from_id == edge.to_id:
            continue
        source = graph.nodes[edge.from_id]
        target = graph.nodes[edge.to_id]

        if source.is_file and target.is_file:
            if edge.is_file_relation:
                _append_unique(file_out, edge.from_id, edge.to_id)
                _append_unique(file_in, edge.to_id, edge.from_id)
            continue
        if source.is_file:
            # structural edges such as file -> entity containment
            continue

        _append_unique(entity_out, edge.from_id, edge.to_id)
        if not target.is_file:
            _append_unique(entity_in, edge.to_id, edge.from_id)

    return EdgeIndex(
        files=EdgeView(outgoing=_freeze(file_out), incoming=_freeze(file_in)),
        entities=EdgeView(outgoing=_freeze(entity_out), incoming=_freeze(entity_in)),
    )


def _append_unique(table: Dict[str, Dict[str, None]], key: str, value: str) -> None:
    table.setdefault(key, {})[value] = None


def _freeze(table: Dict[str, Dict[str, None]]) -> Dict[str, Tuple[str, ...]]:
    return {key: tuple(values) for key, values in table.items()}


__all__ = ["EdgeIndex", "EdgeView", "build_edge_index"]
