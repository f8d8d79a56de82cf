# ftsearch/options.py
import dataclasses
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from ftsearch.facets import FacetSpec, encode_facets
from ftsearch.query.encode import encode_query
from ftsearch.query.nodes import Query, as_tuple
from ftsearch.sort import Sort, encode_sort
from ftsearch.transcoder import JsonTranscoder, Transcoder

HighlightStyle = Literal["html", "ansi"]


@dataclass(frozen=True)
class SearchOptions:
    """Per-request search settings.

    Attributes:
        limit: Maximum number of rows to return
        skip: Number of rows to skip before the first returned row
        explain: Include score explanations in the rows
        disable_scoring: Skip relevance scoring (all scores are zero)
        highlight_style: Highlighting markup; server default when unset
        highlight_fields: Fields to highlight; all when unset
        fields: Stored fields to return with each row
        sort: Sort specifications or field-name strings ("-title", "_score")
        facets: Facet requests by name; result facets use the same names
        timeout: Server-side timeout in milliseconds
        transcoder: Decoder for the returned stored fields
    """

    limit: int | None = None
    skip: int | None = None
    explain: bool = False
    disable_scoring: bool = False
    highlight_style: HighlightStyle | None = None
    highlight_fields: Sequence[str] | str | None = None
    fields: Sequence[str] | str | None = None
    sort: Sequence[Sort | str] | Sort | str | None = None
    facets: Mapping[str, FacetSpec] = dataclasses.field(default_factory=dict)
    timeout: int | None = None
    transcoder: Transcoder = dataclasses.field(default_factory=JsonTranscoder, compare=False)

    def __post_init__(self) -> None:
        for name in ("highlight_fields", "fields"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, as_tuple(value))
        if isinstance(self.sort, Sort):
            object.__setattr__(self, "sort", (self.sort,))
        elif self.sort is not None:
            object.__setattr__(self, "sort", as_tuple(self.sort))


def build_request(query: Query, options: SearchOptions | None = None) -> dict[str, Any]:
    """Build the body of a search request.

    Raises an InvalidQueryError subclass if the query tree is invalid.
    """
    options = options or SearchOptions()
    body: dict[str, Any] = {"query": encode_query(query), "explain": options.explain}
    if options.limit is not None:
        body["size"] = options.limit
    if options.skip is not None:
        body["from"] = options.skip
    if options.highlight_style is not None or options.highlight_fields is not None:
        highlight: dict[str, Any] = {}
        if options.highlight_style is not None:
            highlight["style"] = options.highlight_style
        if options.highlight_fields is not None:
            highlight["fields"] = list(options.highlight_fields)
        body["highlight"] = highlight
    if options.fields is not None:
        body["fields"] = list(options.fields)
    if options.sort:
        body["sort"] = [encode_sort(s) for s in options.sort]
    if options.facets:
        body["facets"] = encode_facets(options.facets)
    if options.disable_scoring:
        body["score"] = "none"
    if options.timeout is not None:
        body["ctl"] = {"timeout": options.timeout}
    return body
