"""Providers that read serialized graph documents from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .base import GraphProvider
from .document import graph_from_document
from ..errors import ProviderError
from ..logging import get_logger
from ..models import CodeGraph

_logger = get_logger("providers")


class JsonGraphProvider(GraphProvider):
    """Reads graph documents written as JSON."""

    name = "json"
    SUFFIXES = {".json"}

    def supports(self, source: Path) -> bool:
        return source.suffix.lower() in self.SUFFIXES

    def load(self, source: Path) -> CodeGraph:
        text = _read_text(source)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ProviderError(f"Failed to parse {source.name}: {exc}") from exc
        return _decode(data, source)


class YamlGraphProvider(GraphProvider):
    """Reads graph documents written as YAML."""

    name = "yaml"
    SUFFIXES = {".yml", ".yaml"}

    def supports(self, source: Path) -> bool:
        return source.suffix.lower() in self.SUFFIXES

    def load(self, source: Path) -> CodeGraph:
        text = _read_text(source)
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ProviderError(f"Failed to parse {source.name}: {exc}") from exc
        return _decode(data or {}, source)


def _read_text(source: Path) -> str:
    try:
        return source.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ProviderError(f"Graph document not found: {source}") from exc
    except OSError as exc:
        raise ProviderError(f"Unable to read {source}: {exc}") from exc


def _decode(data: Any, source: Path) -> CodeGraph:
    graph = graph_from_document(data, source=source.name)
    _logger.debug(
        "Loaded %d node(s) and %d edge(s) from %s", len(graph.nodes), len(graph.edges), source
    )
    return graph


__all__ = ["JsonGraphProvider", "YamlGraphProvider"]
