# ftsearch/query/encode.py
"""Serialization of query trees to the search service wire format."""

import json
from datetime import datetime, timezone
from typing import Any

from ftsearch.errors import (
    EmptyBooleanQuery,
    EmptyCompoundQuery,
    InvalidMinimumMatch,
    MissingRangeBound,
)
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
    TimePoint,
    Wildcard,
)

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%S%:z"


def format_time(point: TimePoint) -> str:
    """Render a time bound; naive datetimes are taken as UTC."""
    if isinstance(point, datetime):
        if point.tzinfo is None:
            point = point.replace(tzinfo=timezone.utc)
        return point.strftime(RFC3339_FORMAT)
    return point


def _put(data: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        data[key] = value


def _put_fuzziness(data: dict[str, Any], fuzziness: int | None, prefix_length: int | None) -> None:
    if fuzziness is not None:
        data["fuzziness"] = fuzziness
        _put(data, "prefix_length", prefix_length)


def _put_bound(
    data: dict[str, Any], key: str, value: Any, inclusive_key: str, inclusive: bool | None
) -> None:
    if value is not None:
        data[key] = value
        _put(data, inclusive_key, inclusive)


def _encode_children(kind: str, queries: tuple[Query, ...]) -> list[dict[str, Any]]:
    if not queries:
        raise EmptyCompoundQuery(f"{kind} query must have sub-queries")
    return [encode_query(q) for q in queries]


def encode_query(query: Query) -> dict[str, Any]:
    """Encode a query tree into its JSON-compatible wire form.

    Raises an InvalidQueryError subclass if a node in the tree is invalid.
    """
    data: dict[str, Any]
    match query:
        case Match(match=text, analyzer=analyzer, fuzziness=fuzziness, prefix_length=prefix_length):
            data = {"match": text}
            _put(data, "analyzer", analyzer)
            _put_fuzziness(data, fuzziness, prefix_length)
        case MatchPhrase(match_phrase=text, analyzer=analyzer):
            data = {"match_phrase": text}
            _put(data, "analyzer", analyzer)
        case Regexp(regexp=pattern):
            data = {"regexp": pattern}
        case QueryString(query=text):
            data = {"query": text}
        case Wildcard(wildcard=pattern):
            data = {"wildcard": pattern}
        case DocId(ids=ids):
            data = {"doc_ids": list(ids)}
        case BooleanField(value=value):
            data = {"bool": value}
        case DateRange(start=None, end=None):
            raise MissingRangeBound("either start or end must be set for date range query")
        case DateRange():
            data = {}
            _put(data, "datetime_parser", query.datetime_parser)
            if query.start is not None:
                _put_bound(
                    data, "start", format_time(query.start), "inclusive_start", query.inclusive_start
                )
            if query.end is not None:
                _put_bound(data, "end", format_time(query.end), "inclusive_end", query.inclusive_end)
        case NumericRange(min=None, max=None) | TermRange(min=None, max=None):
            raise MissingRangeBound(
                f"either min or max must be set for {type(query).__name__} query"
            )
        case NumericRange() | TermRange():
            data = {}
            _put_bound(data, "min", query.min, "inclusive_min", query.inclusive_min)
            _put_bound(data, "max", query.max, "inclusive_max", query.inclusive_max)
        case GeoDistance(longitude=lon, latitude=lat, distance=distance):
            data = {"location": [lon, lat], "distance": distance}
        case GeoBoundingBox():
            data = {
                "top_left": [query.top_left_longitude, query.top_left_latitude],
                "bottom_right": [query.bottom_right_longitude, query.bottom_right_latitude],
            }
        case Term(term=term, fuzziness=fuzziness, prefix_length=prefix_length):
            data = {"term": term}
            _put_fuzziness(data, fuzziness, prefix_length)
        case Prefix(prefix=prefix):
            data = {"prefix": prefix}
        case Phrase(terms=terms):
            data = {"terms": list(terms)}
        case MatchAll():
            data = {"match_all": None}
        case MatchNone():
            data = {"match_none": None}
        case Conjunction(queries=queries):
            data = {"conjuncts": _encode_children("conjunction", queries)}
        case Disjunction(queries=queries, min=minimum):
            data = {"disjuncts": _encode_children("disjunction", queries)}
            if minimum is not None:
                if minimum > len(queries):
                    raise InvalidMinimumMatch(
                        f"disjunction has {len(queries)} sub-queries, fewer than minimum {minimum}"
                    )
                data["min"] = minimum
        case Boolean(must=must, must_not=must_not, should=should):
            if query.is_empty:
                raise EmptyBooleanQuery("boolean query must have at least one non-empty sub-query")
            data = {}
            if not must.is_empty:
                data["must"] = encode_query(must)
            if not must_not.is_empty:
                data["must_not"] = encode_query(must_not)
            if not should.is_empty:
                data["should"] = encode_query(should)
        case _:
            raise TypeError(f"Unsupported query node: {type(query).__name__}")

    _put(data, "boost", query.boost)
    if isinstance(query, FieldQuery):
        _put(data, "field", query.field)
    return data


def to_json(query: Query) -> str:
    """Encode a query tree as a JSON string."""
    return json.dumps(encode_query(query))
