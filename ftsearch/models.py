# ftsearch/models.py
import dataclasses
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from ftsearch.facets import FacetKind
from ftsearch.transcoder import JsonTranscoder, Transcoder


@dataclass(frozen=True)
class Location:
    """A single occurrence of a term in a hit."""

    field: str
    term: str
    position: int  # starting at 1
    start_offset: int  # byte offsets within the field
    end_offset: int
    array_positions: tuple[int, ...] | None = None


@dataclass(frozen=True)
class Locations:
    """Term locations of a result row."""

    locations: tuple[Location, ...] = ()

    def __iter__(self) -> Iterator[Location]:
        return iter(self.locations)

    def __len__(self) -> int:
        return len(self.locations)

    def get_all(self) -> tuple[Location, ...]:
        return self.locations

    def get_for_field(self, field: str) -> tuple[Location, ...]:
        return tuple(loc for loc in self.locations if loc.field == field)

    def get_for_field_and_term(self, field: str, term: str) -> tuple[Location, ...]:
        return tuple(loc for loc in self.locations if loc.field == field and loc.term == term)

    def fields(self) -> frozenset[str]:
        return frozenset(loc.field for loc in self.locations)

    def terms(self) -> frozenset[str]:
        return frozenset(loc.term for loc in self.locations)

    def terms_for_field(self, field: str) -> frozenset[str]:
        return frozenset(loc.term for loc in self.get_for_field(field))


@dataclass(frozen=True)
class ResultRow:
    """A single search hit."""

    index: str
    id: str
    score: float
    locations: Locations = dataclasses.field(default_factory=Locations)
    fragments: Mapping[str, tuple[str, ...]] = dataclasses.field(default_factory=dict)
    explanation: Any = None
    raw_fields: bytes | None = None
    transcoder: Transcoder = dataclasses.field(
        default_factory=JsonTranscoder, compare=False, repr=False
    )

    @property
    def fields(self) -> Any:
        """Stored field values, decoded with the row's transcoder."""
        if self.raw_fields is None:
            return None
        return self.transcoder.decode(self.raw_fields)


@dataclass(frozen=True)
class SearchMetrics:
    took: int  # milliseconds
    total_rows: int
    max_score: float
    success_partition_count: int
    error_partition_count: int

    @property
    def total_partition_count(self) -> int:
        return self.success_partition_count + self.error_partition_count


@dataclass(frozen=True)
class SearchMetaData:
    metrics: SearchMetrics
    errors: Mapping[str, str] = dataclasses.field(default_factory=dict)


@dataclass(frozen=True)
class TermFacet:
    term: str
    count: int


@dataclass(frozen=True)
class NumericRangeFacet:
    name: str
    count: int
    min: float | None = None
    max: float | None = None


@dataclass(frozen=True)
class DateRangeFacet:
    name: str
    count: int
    start: str | None = None
    end: str | None = None


@dataclass(frozen=True)
class FacetResult:
    """Aggregate counts shared by every facet result."""

    kind: ClassVar[FacetKind]

    name: str
    field: str
    total: int
    missing: int = 0
    other: int = 0


@dataclass(frozen=True)
class TermFacetResult(FacetResult):
    kind: ClassVar[FacetKind] = FacetKind.TERM

    terms: tuple[TermFacet, ...] = ()


@dataclass(frozen=True)
class NumericRangeFacetResult(FacetResult):
    kind: ClassVar[FacetKind] = FacetKind.NUMERIC_RANGE

    numeric_ranges: tuple[NumericRangeFacet, ...] = ()


@dataclass(frozen=True)
class DateRangeFacetResult(FacetResult):
    kind: ClassVar[FacetKind] = FacetKind.DATE_RANGE

    date_ranges: tuple[DateRangeFacet, ...] = ()


@dataclass(frozen=True)
class SearchResult:
    """Decoded response of a single search request."""

    rows: tuple[ResultRow, ...]
    meta_data: SearchMetaData
    facets: Mapping[str, FacetResult] = dataclasses.field(default_factory=dict)
