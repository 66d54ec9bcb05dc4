"""Graph provider plugin implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Callable, Iterable, List, Sequence, Set

from .base import GraphProvider
from .document import graph_from_document
from .files import JsonGraphProvider, YamlGraphProvider
from ..errors import ProviderError
from ..models import CodeGraph

_ENTRY_POINT_GROUP = "scngen.providers"

_BUILTIN_FACTORIES: dict[str, Callable[[], GraphProvider]] = {
    "json": JsonGraphProvider,
    "yaml": YamlGraphProvider,
}


def discover_providers(enabled: Sequence[str] | None = None) -> List[GraphProvider]:
    """Return instantiated providers, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled:
        enabled_set = {name.lower() for name in enabled}

    providers: List[GraphProvider] = []
    seen: Set[str] = set()

    def _add(name: str, factory: Callable[[], GraphProvider]) -> None:
        key = name.lower()
        if enabled_set is not None and key not in enabled_set:
            return
        if key in seen:
            return
        instance = factory()
        if not isinstance(instance, GraphProvider):
            raise TypeError(f"Provider factory for '{name}' did not return a GraphProvider instance")
        providers.append(instance)
        seen.add(key)
        if enabled_set is not None:
            enabled_set.discard(key)

    for name, factory in _BUILTIN_FACTORIES.items():
        _add(name, factory)

    for entry in _iter_entry_points():
        name = entry.name
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - defensive guard
            raise RuntimeError(f"Failed to load provider entry point '{name}': {exc}") from exc

        def _factory(obj: object = loaded) -> GraphProvider:
            return _coerce_provider(obj)

        _add(name, _factory)

    if enabled_set:
        missing = ", ".join(sorted(enabled_set))
        raise ValueError(f"Unknown providers requested: {missing}")

    return providers


def load_graph(source: Path, providers: Sequence[GraphProvider] | None = None) -> CodeGraph:
    """Load ``source`` with the first provider that supports it."""
    candidates = providers if providers is not None else discover_providers()
    for provider in candidates:
        if provider.supports(source):
            return provider.load(source)
    names = ", ".join(provider.name or type(provider).__name__ for provider in candidates)
    raise ProviderError(f"No graph provider supports {source.name} (tried: {names or 'none'})")


def _coerce_provider(obj: object) -> GraphProvider:
    if isinstance(obj, GraphProvider):
        return obj
    if isinstance(obj, type) and issubclass(obj, GraphProvider):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, GraphProvider):
            return instance
    raise TypeError("Provider entry point must be a GraphProvider subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "GraphProvider",
    "JsonGraphProvider",
    "YamlGraphProvider",
    "discover_providers",
    "graph_from_document",
    "load_graph",
]
