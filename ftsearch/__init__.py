# ftsearch/__init__.py
"""ftsearch - Full-text search query composition and result decoding."""

from ftsearch.client import SearchClient
from ftsearch.decode import decode_result
from ftsearch.errors import (
    EmptyBooleanQuery,
    EmptyCompoundQuery,
    InvalidMinimumMatch,
    InvalidQueryError,
    MalformedResponse,
    MissingRangeBound,
    SearchError,
)
from ftsearch.facets import (
    DateRangeFacetSpec,
    FacetKind,
    FacetSpec,
    NumericRangeFacetSpec,
    TermFacetSpec,
)
from ftsearch.models import (
    DateRangeFacet,
    DateRangeFacetResult,
    FacetResult,
    Location,
    Locations,
    NumericRangeFacet,
    NumericRangeFacetResult,
    ResultRow,
    SearchMetaData,
    SearchMetrics,
    SearchResult,
    TermFacet,
    TermFacetResult,
)
from ftsearch.options import SearchOptions, build_request
from ftsearch.query import Query, encode_query, to_json
from ftsearch.sort import Sort, SortField, SortGeoDistance, SortId, SortScore
from ftsearch.transcoder import JsonTranscoder, Transcoder

__all__ = [
    # Queries
    "Query",
    "encode_query",
    "to_json",
    # Sorting
    "Sort",
    "SortScore",
    "SortId",
    "SortField",
    "SortGeoDistance",
    # Facet requests
    "FacetKind",
    "FacetSpec",
    "TermFacetSpec",
    "NumericRangeFacetSpec",
    "DateRangeFacetSpec",
    # Requests
    "SearchOptions",
    "build_request",
    "SearchClient",
    # Results
    "decode_result",
    "SearchResult",
    "SearchMetaData",
    "SearchMetrics",
    "ResultRow",
    "Location",
    "Locations",
    "FacetResult",
    "TermFacetResult",
    "TermFacet",
    "NumericRangeFacetResult",
    "NumericRangeFacet",
    "DateRangeFacetResult",
    "DateRangeFacet",
    "Transcoder",
    "JsonTranscoder",
    # Errors
    "SearchError",
    "InvalidQueryError",
    "MissingRangeBound",
    "EmptyCompoundQuery",
    "InvalidMinimumMatch",
    "EmptyBooleanQuery",
    "MalformedResponse",
]
