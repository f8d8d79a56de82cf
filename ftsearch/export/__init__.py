# ftsearch/export/__init__.py
from ftsearch.export.base import Exporter
from ftsearch.export.json import JsonExporter
from ftsearch.export.tree import TreeExporter

EXPORTERS: dict[str, type[Exporter]] = {
    "json": JsonExporter,
    "tree": TreeExporter,
}


def get_exporter(format: str) -> Exporter:
    """Exporter for a format name."""
    try:
        return EXPORTERS[format]()
    except KeyError:
        raise ValueError(f"Unknown format: {format}. Available: {list(EXPORTERS)}") from None


__all__ = ["Exporter", "JsonExporter", "TreeExporter", "get_exporter"]
