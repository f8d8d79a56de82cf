# ftsearch/query/__init__.py
from ftsearch.query.combinators import (
    boolean_field,
    booleans,
    conjuncts,
    date_range,
    disjuncts,
    doc_id,
    geo_bounding_box,
    geo_distance,
    match,
    match_all,
    match_none,
    match_phrase,
    numeric_range,
    phrase,
    prefix,
    query_string,
    regexp,
    term,
    term_range,
    wildcard,
)
from ftsearch.query.encode import encode_query, format_time, to_json
from ftsearch.query.nodes import (
    Boolean,
    BooleanField,
    Conjunction,
    DateRange,
    Disjunction,
    DocId,
    FieldQuery,
    GeoBoundingBox,
    GeoDistance,
    Match,
    MatchAll,
    MatchNone,
    MatchPhrase,
    NumericRange,
    Phrase,
    Prefix,
    Query,
    QueryString,
    Regexp,
    Term,
    TermRange,
    Wildcard,
)

__all__ = [
    # Nodes
    "Query",
    "FieldQuery",
    "Match",
    "MatchPhrase",
    "Regexp",
    "QueryString",
    "Wildcard",
    "DocId",
    "BooleanField",
    "DateRange",
    "NumericRange",
    "TermRange",
    "GeoDistance",
    "GeoBoundingBox",
    "Term",
    "Prefix",
    "Phrase",
    "MatchAll",
    "MatchNone",
    "Conjunction",
    "Disjunction",
    "Boolean",
    # Factories
    "match",
    "match_phrase",
    "regexp",
    "query_string",
    "wildcard",
    "doc_id",
    "boolean_field",
    "date_range",
    "numeric_range",
    "term_range",
    "geo_distance",
    "geo_bounding_box",
    "term",
    "prefix",
    "phrase",
    "match_all",
    "match_none",
    "conjuncts",
    "disjuncts",
    "booleans",
    # Encoding
    "encode_query",
    "format_time",
    "to_json",
]
