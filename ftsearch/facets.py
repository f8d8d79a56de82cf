# ftsearch/facets.py
"""Facet requests: aggregations computed alongside a search."""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar, Self

from ftsearch.query.encode import format_time
from ftsearch.query.nodes import TimePoint


class FacetKind(StrEnum):
    TERM = "term"
    NUMERIC_RANGE = "numeric_range"
    DATE_RANGE = "date_range"


@dataclass(frozen=True)
class NumericRangeBucket:
    name: str
    min: float | None = None
    max: float | None = None


@dataclass(frozen=True)
class DateRangeBucket:
    name: str
    start: TimePoint | None = None
    end: TimePoint | None = None


@dataclass(frozen=True)
class FacetSpec:
    """Base class for facet requests."""

    kind: ClassVar[FacetKind]

    field: str
    size: int | None = None


@dataclass(frozen=True)
class TermFacetSpec(FacetSpec):
    """Most frequent terms of a field."""

    kind: ClassVar[FacetKind] = FacetKind.TERM


@dataclass(frozen=True)
class NumericRangeFacetSpec(FacetSpec):
    """Document counts per named numeric range."""

    kind: ClassVar[FacetKind] = FacetKind.NUMERIC_RANGE

    ranges: tuple[NumericRangeBucket, ...] = ()

    def add(self, name: str, min: float | None, max: float | None) -> Self:
        """Return a copy with one more range; pass None for an open bound."""
        return dataclasses.replace(self, ranges=(*self.ranges, NumericRangeBucket(name, min, max)))


@dataclass(frozen=True)
class DateRangeFacetSpec(FacetSpec):
    """Document counts per named date range."""

    kind: ClassVar[FacetKind] = FacetKind.DATE_RANGE

    ranges: tuple[DateRangeBucket, ...] = ()

    def add(self, name: str, start: TimePoint | None, end: TimePoint | None) -> Self:
        """Return a copy with one more range; pass None for an open bound."""
        return dataclasses.replace(self, ranges=(*self.ranges, DateRangeBucket(name, start, end)))


def term(field: str, size: int | None = None) -> TermFacetSpec:
    return TermFacetSpec(field, size)


def numeric_range(field: str, size: int | None = None) -> NumericRangeFacetSpec:
    return NumericRangeFacetSpec(field, size)


def date_range(field: str, size: int | None = None) -> DateRangeFacetSpec:
    return DateRangeFacetSpec(field, size)


def _put(data: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        data[key] = value


def _encode_numeric_bucket(bucket: NumericRangeBucket) -> dict[str, Any]:
    data: dict[str, Any] = {"name": bucket.name}
    _put(data, "min", bucket.min)
    _put(data, "max", bucket.max)
    return data


def _encode_date_bucket(bucket: DateRangeBucket) -> dict[str, Any]:
    data: dict[str, Any] = {"name": bucket.name}
    if bucket.start is not None:
        data["start"] = format_time(bucket.start)
    if bucket.end is not None:
        data["end"] = format_time(bucket.end)
    return data


def encode_facet(spec: FacetSpec) -> dict[str, Any]:
    data: dict[str, Any] = {"field": spec.field}
    _put(data, "size", spec.size)
    match spec:
        case NumericRangeFacetSpec(ranges=ranges):
            data["numeric_ranges"] = [_encode_numeric_bucket(r) for r in ranges]
        case DateRangeFacetSpec(ranges=ranges):
            data["date_ranges"] = [_encode_date_bucket(r) for r in ranges]
    return data


def encode_facets(facets: Mapping[str, FacetSpec]) -> dict[str, dict[str, Any]]:
    return {name: encode_facet(spec) for name, spec in facets.items()}
