"""Group graph nodes by owning file and order them deterministically."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from .errors import GraphError
from .models import CodeGraph, CodeNode


@dataclass(frozen=True)
class FileGroup:
    """A file node and its entities in rendering order."""

    file: CodeNode
    entities: Tuple[CodeNode, ...]


@dataclass(frozen=True)
class GraphPartition:
    """Files in id order, plus per-entity containment depth."""

    files: Tuple[FileGroup, ...]
    depths: Mapping[str, int]

    def depth_of(self, node_id: str) -> int:
        return self.depths.get(node_id, 0)


def partition_graph(graph: CodeGraph) -> GraphPartition:
    """Validate ``graph`` and split it into ordered file groups.

    Raises :class:`GraphError` on the first structural violation found.
    """
    validate_graph(graph)

    file_nodes: List[CodeNode] = []
    entities_by_path: Dict[str, List[CodeNode]] = {}
    for node in graph.nodes.values():
        if node.is_file:
            file_nodes.append(node)
            entities_by_path.setdefault(node.file_path, [])
        else:
            entities_by_path.setdefault(node.file_path, []).append(node)

    file_nodes.sort(key=lambda node: node.id)
    groups = tuple(
        FileGroup(
            file=file_node,
            # list.sort is stable, so equal start lines keep graph order.
            entities=tuple(
                sorted(entities_by_path[file_node.file_path], key=lambda node: node.start_line)
            ),
        )
        for file_node in file_nodes
    )
    return GraphPartition(files=groups, depths=_containment_depths(graph))


def validate_graph(graph: CodeGraph) -> None:
    """Check the invariants the serializer relies on."""
    file_paths: Dict[str, str] = {}
    for key, node in graph.nodes.items():
        if key != node.id:
            raise GraphError(f"Node registered under '{key}' declares id '{node.id}'")
        if not node.file_path:
            raise GraphError(f"Node '{node.id}' has no file path")
        if not node.name:
            raise GraphError(f"Node '{node.id}' has no name")
        if node.is_file:
            existing = file_paths.get(node.file_path)
            if existing is not None:
                raise GraphError(
                    f"File nodes '{existing}' and '{node.id}' share path '{node.file_path}'"
                )
            file_paths[node.file_path] = node.id

    for node in graph.nodes.values():
        if node.is_file:
            continue
        if node.file_path not in file_paths:
            raise GraphError(
                f"Node '{node.id}' belongs to '{node.file_path}' which has no file node"
            )
        if node.parent_id is not None:
            parent = graph.nodes.get(node.parent_id)
            if parent is None:
                raise GraphError(f"Node '{node.id}' has unknown parent '{node.parent_id}'")
            if parent.is_file or parent.file_path != node.file_path:
                raise GraphError(
                    f"Parent '{parent.id}' of node '{node.id}' is not an entity of the same file"
                )

    for index, edge in enumerate(graph.edges):
        for endpoint in (edge.from_id, edge.to_id):
            if endpoint not in graph.nodes:
                raise GraphError(
                    f"Edge #{index} ({edge.from_id} -> {edge.to_id}, {edge.kind}) "
                    f"references unknown node '{endpoint}'"
                )


def _containment_depths(graph: CodeGraph) -> Dict[str, int]:
    depths: Dict[str, int] = {}
    for node in graph.nodes.values():
        if node.is_file or node.parent_id is None:
            continue
        depth = 0
        seen = {node.id}
        current = node
        while current.parent_id is not None:
            if current.parent_id in seen:
                raise GraphError(f"Containment cycle through node '{current.parent_id}'")
            seen.add(current.parent_id)
            current = graph.nodes[current.parent_id]
            depth += 1
        depths[node.id] = depth
    return depths


__all__ = ["FileGroup", "GraphPartition", "partition_graph", "validate_graph"]
