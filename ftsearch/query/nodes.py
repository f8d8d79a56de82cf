# ftsearch/query/nodes.py
import dataclasses
from collections.abc import Iterable
from dataclasses import KW_ONLY, dataclass
from datetime import datetime
from typing import Any, Self, TypeVar

TimePoint = str | datetime

T = TypeVar("T")


def unique(items: Iterable[T]) -> tuple[T, ...]:
    """Drop value-equal duplicates, keeping the first occurrence."""
    return tuple(dict.fromkeys(items))


def as_tuple(items: Iterable[T] | str) -> tuple[T, ...]:
    """Sequence arguments as a tuple; a lone string is one item."""
    if isinstance(items, str):
        return (items,)  # type: ignore[return-value]
    return tuple(items)


@dataclass(frozen=True)
class Query:
    """Base node of a search query tree."""

    boost: float | None = dataclasses.field(default=None, kw_only=True)

    def __and__(self, other: "Query") -> "Conjunction":
        return Conjunction((self, other))

    def __or__(self, other: "Query") -> "Disjunction":
        return Disjunction((self, other))

    def __invert__(self) -> "Boolean":
        return Boolean(must_not=Disjunction((self,)))

    def encode(self) -> dict[str, Any]:
        """Wire representation of this node."""
        from ftsearch.query.encode import encode_query

        return encode_query(self)


@dataclass(frozen=True)
class FieldQuery(Query):
    """Query that can target a specific field instead of the index default."""

    field: str | None = dataclasses.field(default=None, kw_only=True)


@dataclass(frozen=True)
class Match(FieldQuery):
    """Analyzes the input text and queries the index with the result."""

    match: str
    _: KW_ONLY
    analyzer: str | None = None
    fuzziness: int | None = None
    prefix_length: int | None = None


@dataclass(frozen=True)
class MatchPhrase(FieldQuery):
    """Builds a phrase query from the analyzed input text."""

    match_phrase: str
    _: KW_ONLY
    analyzer: str | None = None


@dataclass(frozen=True)
class Regexp(FieldQuery):
    """Terms matching a regular expression."""

    regexp: str


@dataclass(frozen=True)
class QueryString(Query):
    """Query expressed in the server's query string syntax."""

    query: str


@dataclass(frozen=True)
class Wildcard(FieldQuery):
    """Terms matching a pattern with `*` and `?` wildcards."""

    wildcard: str


@dataclass(frozen=True)
class DocId(FieldQuery):
    """Documents with one of the given identifiers."""

    ids: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "ids", unique(as_tuple(self.ids)))


@dataclass(frozen=True)
class BooleanField(FieldQuery):
    """Documents whose boolean field has the given value."""

    value: bool


@dataclass(frozen=True)
class DateRange(FieldQuery):
    """Date values within a range.

    Bounds are either preformatted strings or ``datetime`` objects. The server
    treats the start as inclusive and the end as exclusive unless told
    otherwise.
    """

    start: TimePoint | None = None
    end: TimePoint | None = None
    _: KW_ONLY
    inclusive_start: bool | None = None
    inclusive_end: bool | None = None
    datetime_parser: str | None = None

    def start_time(self, point: TimePoint, inclusive: bool | None = None) -> Self:
        return dataclasses.replace(self, start=point, inclusive_start=inclusive)

    def end_time(self, point: TimePoint, inclusive: bool | None = None) -> Self:
        return dataclasses.replace(self, end=point, inclusive_end=inclusive)


@dataclass(frozen=True)
class NumericRange(FieldQuery):
    """Numeric values within a range."""

    min: float | None = None
    max: float | None = None
    _: KW_ONLY
    inclusive_min: bool | None = None
    inclusive_max: bool | None = None


@dataclass(frozen=True)
class TermRange(FieldQuery):
    """String values within a lexical range."""

    min: str | None = None
    max: str | None = None
    _: KW_ONLY
    inclusive_min: bool | None = None
    inclusive_max: bool | None = None


@dataclass(frozen=True)
class GeoDistance(FieldQuery):
    """Geopoints within `distance` (number with unit, e.g. "10mi") of a location."""

    longitude: float
    latitude: float
    distance: str


@dataclass(frozen=True)
class GeoBoundingBox(FieldQuery):
    """Geopoints inside a bounding box."""

    top_left_longitude: float
    top_left_latitude: float
    bottom_right_longitude: float
    bottom_right_latitude: float


@dataclass(frozen=True)
class Term(FieldQuery):
    """Exact term match, no analysis. Fuzziness may still be applied."""

    term: str
    _: KW_ONLY
    fuzziness: int | None = None
    prefix_length: int | None = None


@dataclass(frozen=True)
class Prefix(FieldQuery):
    """Terms starting with the given prefix."""

    prefix: str


@dataclass(frozen=True)
class Phrase(FieldQuery):
    """Exact sequence of terms, in order."""

    terms: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", unique(as_tuple(self.terms)))


@dataclass(frozen=True)
class MatchAll(Query):
    """Matches every indexed document."""


@dataclass(frozen=True)
class MatchNone(Query):
    """Matches nothing."""


@dataclass(frozen=True)
class Conjunction(Query):
    """All child queries must match."""

    queries: tuple[Query, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "queries", unique(self.queries))

    @property
    def is_empty(self) -> bool:
        return not self.queries

    def and_also(self, *queries: Query) -> Self:
        return dataclasses.replace(self, queries=self.queries + queries)

    def __and__(self, other: Query) -> "Conjunction":
        if self.boost is None:
            return self.and_also(other)
        return super().__and__(other)


@dataclass(frozen=True)
class Disjunction(Query):
    """At least `min` child queries (one when unset) must match."""

    queries: tuple[Query, ...] = ()
    _: KW_ONLY
    min: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "queries", unique(self.queries))

    @property
    def is_empty(self) -> bool:
        return not self.queries

    def or_else(self, *queries: Query) -> Self:
        return dataclasses.replace(self, queries=self.queries + queries)

    def __or__(self, other: Query) -> "Disjunction":
        if self.boost is None and self.min is None:
            return self.or_else(other)
        return super().__or__(other)


@dataclass(frozen=True)
class Boolean(Query):
    """Combination of a must conjunction with must_not and should disjunctions."""

    must: Conjunction = dataclasses.field(default_factory=Conjunction)
    must_not: Disjunction = dataclasses.field(default_factory=Disjunction)
    should: Disjunction = dataclasses.field(default_factory=Disjunction)

    @property
    def is_empty(self) -> bool:
        return self.must.is_empty and self.must_not.is_empty and self.should.is_empty

    def with_must(self, *queries: Query) -> Self:
        return dataclasses.replace(self, must=self.must.and_also(*queries))

    def with_must_not(self, *queries: Query) -> Self:
        return dataclasses.replace(self, must_not=self.must_not.or_else(*queries))

    def with_should(self, *queries: Query) -> Self:
        return dataclasses.replace(self, should=self.should.or_else(*queries))

    def should_min(self, min: int) -> Self:
        return dataclasses.replace(self, should=dataclasses.replace(self.should, min=min))
