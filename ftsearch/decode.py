# ftsearch/decode.py
"""Decoding of search responses into result objects.

The response does not say which kind of facet each entry is, so facets are
decoded against the facet requests that produced them, matched by name.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from ftsearch.errors import MalformedResponse
from ftsearch.facets import FacetKind, FacetSpec
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
from ftsearch.transcoder import JsonTranscoder, Transcoder

logger = logging.getLogger(__name__)


def _require(data: Any, key: str, where: str) -> Any:
    if not isinstance(data, Mapping):
        raise MalformedResponse(f"{where} must be an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise MalformedResponse(f"missing '{key}' in {where}") from None


def _require_list(data: Any, key: str, where: str) -> list[Any]:
    value = _require(data, key, where)
    if not isinstance(value, list):
        raise MalformedResponse(f"'{key}' in {where} must be a list")
    return value


def _require_int(data: Any, key: str, where: str) -> int:
    value = _require(data, key, where)
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedResponse(f"'{key}' in {where} must be an integer, got {value!r}")
    return value


def _require_number(data: Any, key: str, where: str) -> float:
    value = _require(data, key, where)
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise MalformedResponse(f"'{key}' in {where} must be a number, got {value!r}")
    return value


def _require_str(data: Any, key: str, where: str) -> str:
    value = _require(data, key, where)
    if not isinstance(value, str):
        raise MalformedResponse(f"'{key}' in {where} must be a string, got {value!r}")
    return value


def _optional_list(data: Mapping[str, Any], key: str, where: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedResponse(f"'{key}' in {where} must be a list")
    return value


def decode_metrics(data: Any) -> SearchMetrics:
    where = "metrics"
    return SearchMetrics(
        took=_require_int(data, "took", where),
        total_rows=_require_int(data, "total_rows", where),
        max_score=_require_number(data, "max_score", where),
        success_partition_count=_require_int(data, "success_partition_count", where),
        error_partition_count=_require_int(data, "error_partition_count", where),
    )


def _decode_fragments(data: Mapping[str, Any], where: str) -> dict[str, tuple[str, ...]]:
    fragments = data.get("fragments") or {}
    if not isinstance(fragments, Mapping):
        raise MalformedResponse(f"'fragments' in {where} must be an object")
    return {
        name: tuple(_require_list(fragments, name, f"fragments of {where}"))
        for name in fragments
    }


def decode_location(data: Any) -> Location:
    where = "location"
    field = _require(data, "field", where)
    array_positions = data.get("array_positions")
    return Location(
        field=field,
        term=_require(data, "term", where),
        position=_require(data, "position", where),
        start_offset=_require(data, "start_offset", where),
        end_offset=_require(data, "end_offset", where),
        array_positions=tuple(array_positions) if array_positions is not None else None,
    )


def _raw_fields(value: Any) -> bytes | None:
    match value:
        case None:
            return None
        case bytes():
            return value
        case str():
            return value.encode()
        case _:
            return json.dumps(value).encode()


def _explanation(value: Any) -> Any:
    if not isinstance(value, str | bytes):
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"explanation is not valid JSON: {e}") from e


def decode_row(data: Any, transcoder: Transcoder) -> ResultRow:
    where = "row"
    index = _require_str(data, "index", where)
    row_id = _require_str(data, "id", where)
    score = _require_number(data, "score", where)
    where = f"row {row_id!r}"
    locations = Locations(
        tuple(decode_location(loc) for loc in _optional_list(data, "locations", where))
    )
    return ResultRow(
        index=index,
        id=row_id,
        score=score,
        locations=locations,
        fragments=_decode_fragments(data, where),
        explanation=_explanation(data.get("explanation")),
        raw_fields=_raw_fields(data.get("fields")),
        transcoder=transcoder,
    )


def decode_facet(name: str, data: Any, spec: FacetSpec) -> FacetResult:
    """Decode one facet into the result type matching its request."""
    where = f"facet {name!r}"
    common = {
        "name": data.get("name", name) if isinstance(data, Mapping) else name,
        "field": _require(data, "field", where),
        "total": _require(data, "total", where),
        "missing": data.get("missing", 0),
        "other": data.get("other", 0),
    }
    match spec.kind:
        case FacetKind.TERM:
            return TermFacetResult(
                **common,
                terms=tuple(
                    TermFacet(_require(t, "term", where), _require(t, "count", where))
                    for t in _optional_list(data, "terms", where)
                ),
            )
        case FacetKind.NUMERIC_RANGE:
            return NumericRangeFacetResult(
                **common,
                numeric_ranges=tuple(
                    NumericRangeFacet(
                        name=_require(r, "name", where),
                        count=_require(r, "count", where),
                        min=r.get("min"),
                        max=r.get("max"),
                    )
                    for r in _optional_list(data, "numeric_ranges", where)
                ),
            )
        case FacetKind.DATE_RANGE:
            return DateRangeFacetResult(
                **common,
                date_ranges=tuple(
                    DateRangeFacet(
                        name=_require(r, "name", where),
                        count=_require(r, "count", where),
                        start=r.get("start"),
                        end=r.get("end"),
                    )
                    for r in _optional_list(data, "date_ranges", where)
                ),
            )


def decode_facets(data: Any, requested: Mapping[str, FacetSpec]) -> dict[str, FacetResult]:
    if not isinstance(data, Mapping):
        raise MalformedResponse("'facets' must be an object")
    facets: dict[str, FacetResult] = {}
    for name, value in data.items():
        spec = requested.get(name)
        if spec is None:
            # Facets that were not requested carry no type information.
            logger.debug("Skipping facet %r that is not in the request", name)
            continue
        facets[name] = decode_facet(name, value, spec)
    return facets


def decode_result(
    payload: Any,
    facets: Mapping[str, FacetSpec] | None = None,
    transcoder: Transcoder | None = None,
) -> SearchResult:
    """Decode a search response.

    Args:
        payload: Response object with ``rows``, ``meta_data`` and optionally ``facets``
        facets: The facet requests sent with the search, by name
        transcoder: Decoder for row field payloads (JSON by default)

    Raises:
        MalformedResponse: if a required part of the response is missing
    """
    transcoder = transcoder or JsonTranscoder()
    meta = _require(payload, "meta_data", "response")
    metrics = decode_metrics(_require(meta, "metrics", "meta_data"))
    errors = meta.get("errors") or {}
    if not isinstance(errors, Mapping):
        raise MalformedResponse("'errors' in meta_data must be an object")
    meta_data = SearchMetaData(metrics=metrics, errors=dict(errors))
    rows = tuple(decode_row(r, transcoder) for r in _require_list(payload, "rows", "response"))
    raw_facets = payload.get("facets")
    decoded = decode_facets(raw_facets, facets or {}) if raw_facets is not None else {}
    logger.debug("Decoded %s rows and %s facets", len(rows), len(decoded))
    return SearchResult(rows=rows, meta_data=meta_data, facets=decoded)
