# ftsearch/export/tree.py
from ftsearch.models import (
    DateRangeFacetResult,
    FacetResult,
    NumericRangeFacetResult,
    ResultRow,
    SearchResult,
    TermFacetResult,
)

from .base import Exporter


class TreeExporter(Exporter):
    """Human readable tree view of the rows and facets."""

    def format_row(self, row: ResultRow) -> str:
        lines = [f"{row.id}  ({row.index}, score {row.score:.4f})"]
        fragments = list(row.fragments.items())
        for i, (field, excerpts) in enumerate(fragments):
            branch = "└──" if i == len(fragments) - 1 else "├──"
            lines.append(f"{branch} {field}: {' … '.join(excerpts)}")
        return "\n".join(lines)

    def format_facet(self, name: str, facet: FacetResult) -> str:
        lines = [f"{name} [{facet.field}] total={facet.total} missing={facet.missing} other={facet.other}"]
        match facet:
            case TermFacetResult(terms=terms):
                buckets = [(t.term, t.count) for t in terms]
            case NumericRangeFacetResult(numeric_ranges=ranges):
                buckets = [(r.name, r.count) for r in ranges]
            case DateRangeFacetResult(date_ranges=ranges):
                buckets = [(r.name, r.count) for r in ranges]
            case _:
                buckets = []
        for i, (label, count) in enumerate(buckets):
            branch = "└──" if i == len(buckets) - 1 else "├──"
            lines.append(f"{branch} {label}: {count}")
        return "\n".join(lines)

    def to_string(self, result: SearchResult) -> str:
        blocks = [self.format_row(row) for row in result.rows]
        blocks.extend(self.format_facet(name, facet) for name, facet in result.facets.items())
        return "\n\n".join(blocks)
