# ftsearch/sort.py
"""Ordering directives for search results."""

from dataclasses import KW_ONLY, dataclass
from typing import Any, Literal

SortType = Literal["auto", "string", "number", "date"]
SortMissing = Literal["first", "last"]
SortMode = Literal["default", "min", "max"]
DistanceUnit = Literal[
    "meters",
    "miles",
    "centimeters",
    "millimeters",
    "kilometers",
    "nauticalmiles",
    "feet",
    "yards",
    "inch",
]


@dataclass(frozen=True)
class Sort:
    """Base class for sort specifications."""

    descending: bool = False


@dataclass(frozen=True)
class SortScore(Sort):
    """Order by relevance score."""


@dataclass(frozen=True)
class SortId(Sort):
    """Order by document identifier."""


@dataclass(frozen=True, kw_only=True)
class SortField(Sort):
    """Order by the value of a stored field."""

    field: str
    type: SortType | None = None
    missing: SortMissing | None = None
    mode: SortMode | None = None


@dataclass(frozen=True, kw_only=True)
class SortGeoDistance(Sort):
    """Order by distance between a geopoint field and a location."""

    field: str
    longitude: float
    latitude: float
    unit: DistanceUnit | None = None


def score(descending: bool = False) -> SortScore:
    return SortScore(descending)


def id(descending: bool = False) -> SortId:
    return SortId(descending)


def field(
    name: str,
    descending: bool = False,
    *,
    type: SortType | None = None,
    missing: SortMissing | None = None,
    mode: SortMode | None = None,
) -> SortField:
    return SortField(descending=descending, field=name, type=type, missing=missing, mode=mode)


def geo_distance(
    name: str,
    longitude: float,
    latitude: float,
    descending: bool = False,
    *,
    unit: DistanceUnit | None = None,
) -> SortGeoDistance:
    return SortGeoDistance(
        descending=descending, field=name, longitude=longitude, latitude=latitude, unit=unit
    )


def encode_sort(sort: Sort | str) -> dict[str, Any] | str:
    """Encode a sort specification.

    Strings are field names (prefixed with "-" for descending order, "_score"
    for relevance) and are sent as is.
    """
    data: dict[str, Any]
    match sort:
        case str():
            return sort
        case SortScore():
            data = {"by": "score"}
        case SortId():
            data = {"by": "id"}
        case SortField(field=name, type=type_, missing=missing, mode=mode):
            data = {"by": "field", "field": name}
            for key, value in (("type", type_), ("missing", missing), ("mode", mode)):
                if value is not None:
                    data[key] = value
        case SortGeoDistance(field=name, longitude=lon, latitude=lat, unit=unit):
            data = {"by": "geo_distance", "field": name, "location": [lon, lat]}
            if unit is not None:
                data["unit"] = unit
        case _:
            raise TypeError(f"Unsupported sort: {type(sort).__name__}")
    data["desc"] = sort.descending
    return data
