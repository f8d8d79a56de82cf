# ftsearch/export/json.py
import json
from dataclasses import asdict

from ftsearch.models import SearchResult

from .base import Exporter


class JsonExporter(Exporter):
    """Export results to JSON format."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def to_string(self, result: SearchResult) -> str:
        metrics = result.meta_data.metrics
        data = {
            "rows": [
                {
                    "index": row.index,
                    "id": row.id,
                    "score": row.score,
                    "fragments": {k: list(v) for k, v in row.fragments.items()},
                    "fields": row.fields,
                    "explanation": row.explanation,
                    "locations": [asdict(loc) for loc in row.locations],
                }
                for row in result.rows
            ],
            "facets": {
                name: {"kind": str(facet.kind), **asdict(facet)}
                for name, facet in result.facets.items()
            },
            "metrics": {
                **asdict(metrics),
                "total_partition_count": metrics.total_partition_count,
            },
            "errors": dict(result.meta_data.errors),
        }
        return json.dumps(data, indent=self.indent, ensure_ascii=False)
