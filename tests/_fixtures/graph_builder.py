"""Helper utilities for assembling CodeGraph values in tests."""

from __future__ import annotations

from typing import Any, List

from scngen.models import CodeEdge, CodeGraph, CodeNode


class GraphBuilder:
    """Accumulates nodes and edges in insertion order and freezes them into a graph."""

    def __init__(self) -> None:
        self._nodes: List[CodeNode] = []
        self._edges: List[CodeEdge] = []

    def file(self, node_id: str, path: str) -> str:
        self._nodes.append(CodeNode(id=node_id, file_path=path, type="file", name=path))
        return node_id

    def entity(
        self,
        node_id: str,
        path: str,
        name: str,
        *,
        type: str = "function",
        start_line: int = 1,
        **attrs: Any,
    ) -> str:
        attrs.setdefault("end_line", start_line)
        self._nodes.append(
            CodeNode(
                id=node_id,
                file_path=path,
                type=type,
                name=name,
                start_line=start_line,
                **attrs,
            )
        )
        return node_id

    def edge(self, from_id: str, to_id: str, kind: str = "references") -> None:
        self._edges.append(CodeEdge(from_id=from_id, to_id=to_id, kind=kind))

    def imports(self, from_id: str, to_id: str) -> None:
        self.edge(from_id, to_id, kind="imports")

    def build(self) -> CodeGraph:
        return CodeGraph.from_nodes(self._nodes, self._edges)


__all__ = ["GraphBuilder"]
