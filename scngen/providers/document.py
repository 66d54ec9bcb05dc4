"""Decode graph documents (``{"nodes": [...], "edges": [...]}``) into CodeGraph values.

Documents use the camelCase keys emitted by repograph-style analysers. Node
``type`` spellings are normalised to the hyphenated canonical form; values
outside the known set pass through untouched.
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from ..errors import ProviderError
from ..models import CodeEdge, CodeGraph, CodeNode, NodeType

_TYPE_ALIASES: Dict[str, str] = {
    "type": NodeType.TYPE_ALIAS.value,
    "typealias": NodeType.TYPE_ALIAS.value,
}


def normalise_type(raw: str) -> str:
    value = raw.strip().lower().replace("_", "-")
    return _TYPE_ALIASES.get(value, value)


def graph_from_document(data: Any, *, source: str = "<document>") -> CodeGraph:
    """Build a CodeGraph from a decoded JSON/YAML document."""
    if not isinstance(data, Mapping):
        raise ProviderError(f"{source}: graph document must be a mapping")

    raw_nodes = data.get("nodes") or []
    raw_edges = data.get("edges") or []
    if isinstance(raw_nodes, Mapping):
        raw_nodes = list(raw_nodes.values())
    if not isinstance(raw_nodes, list) or not isinstance(raw_edges, list):
        raise ProviderError(f"{source}: 'nodes' and 'edges' must be lists")

    nodes: List[CodeNode] = []
    for index, entry in enumerate(raw_nodes):
        nodes.append(_node_from_dict(entry, f"{source}: nodes[{index}]"))
    edges = [
        _edge_from_dict(entry, f"{source}: edges[{index}]")
        for index, entry in enumerate(raw_edges)
    ]

    seen: Dict[str, int] = {}
    for index, node in enumerate(nodes):
        if node.id in seen:
            raise ProviderError(
                f"{source}: node id '{node.id}' appears at nodes[{seen[node.id]}] and nodes[{index}]"
            )
        seen[node.id] = index

    return CodeGraph.from_nodes(nodes, edges)


def _node_from_dict(entry: Any, where: str) -> CodeNode:
    if not isinstance(entry, Mapping):
        raise ProviderError(f"{where} must be a mapping")
    node_id = _require_str(entry, "id", where)
    node_type = normalise_type(_require_str(entry, "type", where))
    file_path = _first(entry, "filePath", "file_path")
    if not isinstance(file_path, str):
        raise ProviderError(f"{where} is missing 'filePath'")
    name = entry.get("name")
    if name is None and node_type == NodeType.FILE.value:
        name = file_path
    if not isinstance(name, str):
        raise ProviderError(f"{where} is missing 'name'")

    start_line = _as_line(_first(entry, "startLine", "start_line"), where)
    end_line = _as_line(_first(entry, "endLine", "end_line"), where, default=start_line)

    return CodeNode(
        id=node_id,
        file_path=file_path,
        type=node_type,
        name=name,
        start_line=start_line,
        end_line=end_line,
        visibility=_optional_str(entry.get("visibility")),
        is_async=_as_flag(_first(entry, "isAsync", "is_async"), "isAsync", where),
        can_throw=_as_flag(_first(entry, "canThrow", "can_throw"), "canThrow", where),
        is_pure=_as_flag(_first(entry, "isPure", "is_pure"), "isPure", where),
        css_intents=_as_intents(_first(entry, "cssIntents", "css_intents"), where),
        code_snippet=_optional_str(_first(entry, "codeSnippet", "code_snippet")),
        parent_id=_optional_str(_first(entry, "parentId", "parent_id")),
    )


def _edge_from_dict(entry: Any, where: str) -> CodeEdge:
    if not isinstance(entry, Mapping):
        raise ProviderError(f"{where} must be a mapping")
    from_id = _first(entry, "fromId", "from_id", "from")
    to_id = _first(entry, "toId", "to_id", "to")
    if not isinstance(from_id, str) or not isinstance(to_id, str):
        raise ProviderError(f"{where} needs string 'fromId' and 'toId'")
    kind = _first(entry, "kind", "type")
    return CodeEdge(from_id=from_id, to_id=to_id, kind=str(kind) if kind else "references")


def _first(entry: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in entry:
            return entry[key]
    return None


def _require_str(entry: Mapping[str, Any], key: str, where: str) -> str:
    value = entry.get(key)
    if not isinstance(value, str) or not value:
        raise ProviderError(f"{where} is missing '{key}'")
    return value


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _as_line(value: Any, where: str, default: int = 1) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ProviderError(f"{where} has a non-integer line number: {value!r}")
    if value < 1:
        raise ProviderError(f"{where} has a line number below 1: {value}")
    return value


def _as_flag(value: Any, key: str, where: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise ProviderError(f"{where} has non-boolean '{key}': {value!r}")


def _as_intents(value: Any, where: str) -> FrozenSet[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset({value.lower()})
    if isinstance(value, list):
        return frozenset(str(item).lower() for item in value)
    raise ProviderError(f"{where} has invalid 'cssIntents': {value!r}")


__all__ = ["graph_from_document", "normalise_type"]
