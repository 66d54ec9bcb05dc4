"""Base classes for graph provider plugins."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..models import CodeGraph


class GraphProvider(ABC):
    """Contract for plugins that turn an analyser's output into a CodeGraph."""

    name: str = ""

    @abstractmethod
    def supports(self, source: Path) -> bool:
        """Return True when this provider can read ``source``."""

    @abstractmethod
    def load(self, source: Path) -> CodeGraph:
        """Read ``source`` and return the resolved graph it describes."""
