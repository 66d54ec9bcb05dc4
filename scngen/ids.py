"""Display identifiers printed inside SCN parentheses."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from .partition import GraphPartition


class IdStyle(str, Enum):
    VERBATIM = "verbatim"
    COMPACT = "compact"


class ScnIdMap:
    """Maps graph node ids to the ids shown in the document.

    ``verbatim`` prints node ids unchanged. ``compact`` numbers files ``1..n``
    in file order and entities ``<file>.<k>`` in entity order; when a link
    points at a file node it is written as ``<file>.0`` so it cannot be
    confused with an entity id.
    """

    def __init__(self, partition: GraphPartition, style: IdStyle = IdStyle.VERBATIM) -> None:
        self.style = IdStyle(style)
        self._display: Dict[str, str] = {}
        self._link: Dict[str, str] = {}
        if self.style is IdStyle.COMPACT:
            self._assign_compact(partition)

    def _assign_compact(self, partition: GraphPartition) -> None:
        for file_index, group in enumerate(partition.files, start=1):
            file_id = str(file_index)
            self._display[group.file.id] = file_id
            self._link[group.file.id] = f"{file_id}.0"
            for entity_index, entity in enumerate(group.entities, start=1):
                entity_id = f"{file_id}.{entity_index}"
                self._display[entity.id] = entity_id
                self._link[entity.id] = entity_id

    def display(self, node_id: str) -> str:
        return self._display.get(node_id, node_id)

    def link(self, node_id: str) -> str:
        return self._link.get(node_id, node_id)


__all__ = ["IdStyle", "ScnIdMap"]
