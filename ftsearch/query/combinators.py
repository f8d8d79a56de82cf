# ftsearch/query/combinators.py
from ftsearch.query.nodes import (
    Boolean,
    BooleanField,
    Conjunction,
    DateRange,
    Disjunction,
    DocId,
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


# Factory functions (public API)
def match(
    text: str,
    *,
    field: str | None = None,
    analyzer: str | None = None,
    fuzziness: int | None = None,
    prefix_length: int | None = None,
    boost: float | None = None,
) -> Match:
    return Match(
        text,
        field=field,
        analyzer=analyzer,
        fuzziness=fuzziness,
        prefix_length=prefix_length,
        boost=boost,
    )


def match_phrase(
    text: str,
    *,
    field: str | None = None,
    analyzer: str | None = None,
    boost: float | None = None,
) -> MatchPhrase:
    return MatchPhrase(text, field=field, analyzer=analyzer, boost=boost)


def regexp(pattern: str, *, field: str | None = None, boost: float | None = None) -> Regexp:
    return Regexp(pattern, field=field, boost=boost)


def query_string(text: str, *, boost: float | None = None) -> QueryString:
    return QueryString(text, boost=boost)


def wildcard(pattern: str, *, field: str | None = None, boost: float | None = None) -> Wildcard:
    return Wildcard(pattern, field=field, boost=boost)


def doc_id(*ids: str, field: str | None = None, boost: float | None = None) -> DocId:
    return DocId(ids, field=field, boost=boost)


def boolean_field(value: bool, *, field: str | None = None, boost: float | None = None) -> BooleanField:
    return BooleanField(value, field=field, boost=boost)


def date_range(
    start: TimePoint | None = None,
    end: TimePoint | None = None,
    *,
    inclusive_start: bool | None = None,
    inclusive_end: bool | None = None,
    datetime_parser: str | None = None,
    field: str | None = None,
    boost: float | None = None,
) -> DateRange:
    return DateRange(
        start,
        end,
        inclusive_start=inclusive_start,
        inclusive_end=inclusive_end,
        datetime_parser=datetime_parser,
        field=field,
        boost=boost,
    )


def numeric_range(
    min: float | None = None,
    max: float | None = None,
    *,
    inclusive_min: bool | None = None,
    inclusive_max: bool | None = None,
    field: str | None = None,
    boost: float | None = None,
) -> NumericRange:
    return NumericRange(
        min,
        max,
        inclusive_min=inclusive_min,
        inclusive_max=inclusive_max,
        field=field,
        boost=boost,
    )


def term_range(
    min: str | None = None,
    max: str | None = None,
    *,
    inclusive_min: bool | None = None,
    inclusive_max: bool | None = None,
    field: str | None = None,
    boost: float | None = None,
) -> TermRange:
    return TermRange(
        min,
        max,
        inclusive_min=inclusive_min,
        inclusive_max=inclusive_max,
        field=field,
        boost=boost,
    )


def geo_distance(
    longitude: float,
    latitude: float,
    distance: str,
    *,
    field: str | None = None,
    boost: float | None = None,
) -> GeoDistance:
    return GeoDistance(longitude, latitude, distance, field=field, boost=boost)


def geo_bounding_box(
    top_left_longitude: float,
    top_left_latitude: float,
    bottom_right_longitude: float,
    bottom_right_latitude: float,
    *,
    field: str | None = None,
    boost: float | None = None,
) -> GeoBoundingBox:
    return GeoBoundingBox(
        top_left_longitude,
        top_left_latitude,
        bottom_right_longitude,
        bottom_right_latitude,
        field=field,
        boost=boost,
    )


def term(
    value: str,
    *,
    field: str | None = None,
    fuzziness: int | None = None,
    prefix_length: int | None = None,
    boost: float | None = None,
) -> Term:
    return Term(value, field=field, fuzziness=fuzziness, prefix_length=prefix_length, boost=boost)


def prefix(value: str, *, field: str | None = None, boost: float | None = None) -> Prefix:
    return Prefix(value, field=field, boost=boost)


def phrase(*terms: str, field: str | None = None, boost: float | None = None) -> Phrase:
    return Phrase(terms, field=field, boost=boost)


def match_all(*, boost: float | None = None) -> MatchAll:
    return MatchAll(boost=boost)


def match_none(*, boost: float | None = None) -> MatchNone:
    return MatchNone(boost=boost)


def conjuncts(*queries: Query, boost: float | None = None) -> Conjunction:
    return Conjunction(queries, boost=boost)


def disjuncts(*queries: Query, min: int | None = None, boost: float | None = None) -> Disjunction:
    return Disjunction(queries, min=min, boost=boost)


def booleans(
    *,
    must: Query | tuple[Query, ...] = (),
    must_not: Query | tuple[Query, ...] = (),
    should: Query | tuple[Query, ...] = (),
    should_min: int | None = None,
    boost: float | None = None,
) -> Boolean:
    """Boolean query; each clause takes a single query or a tuple of queries."""

    def clause(queries: Query | tuple[Query, ...]) -> tuple[Query, ...]:
        return (queries,) if isinstance(queries, Query) else tuple(queries)

    return Boolean(
        must=Conjunction(clause(must)),
        must_not=Disjunction(clause(must_not)),
        should=Disjunction(clause(should), min=should_min),
        boost=boost,
    )
