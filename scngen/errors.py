"""Exception types raised by scngen components."""

from __future__ import annotations


class GraphError(ValueError):
    """Raised when a graph violates the structural preconditions of serialization."""


class ProviderError(RuntimeError):
    """Raised when a graph provider cannot read or decode its source."""


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


__all__ = ["ConfigError", "GraphError", "ProviderError"]
