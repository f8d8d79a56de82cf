# ftsearch/export/base.py
from abc import ABC, abstractmethod
from pathlib import Path

from ftsearch.models import SearchResult


class Exporter(ABC):
    """Base class for search result exporters."""

    @abstractmethod
    def to_string(self, result: SearchResult) -> str:
        """Render the result as a string."""
        ...

    def export(self, result: SearchResult, path: Path) -> None:
        path.write_text(self.to_string(result), encoding="utf-8")
