# ftsearch/client.py
"""HTTP client for the search service."""

import logging
import os
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from ftsearch.decode import decode_result
from ftsearch.models import SearchResult
from ftsearch.options import SearchOptions, build_request
from ftsearch.query.nodes import Query, QueryString

logger = logging.getLogger(__name__)

NANOS_PER_MILLI = 1_000_000


def _flatten_locations(locations: Mapping[str, Any] | None) -> list[dict[str, Any]]:
    """Flatten the server's field -> term -> [location] map."""
    flat: list[dict[str, Any]] = []
    for field, terms in (locations or {}).items():
        for term, occurrences in terms.items():
            for loc in occurrences:
                flat.append(
                    {
                        "field": field,
                        "term": term,
                        "position": loc.get("pos"),
                        "start_offset": loc.get("start"),
                        "end_offset": loc.get("end"),
                        "array_positions": loc.get("array_positions"),
                    }
                )
    return flat


def normalize_response(data: Mapping[str, Any]) -> dict[str, Any]:
    """Convert a native search service response to the shape `decode_result` reads.

    Missing pieces are left missing so that decoding reports them.
    """
    result: dict[str, Any] = {}
    if "hits" in data:
        result["rows"] = [
            {**hit, "locations": _flatten_locations(hit.get("locations"))}
            for hit in data["hits"] or []
        ]
    status = data.get("status")
    if isinstance(status, Mapping):
        metrics: dict[str, Any] = {
            "success_partition_count": status.get("successful", 0),
            "error_partition_count": status.get("failed", 0),
        }
        for key, name in (("total_hits", "total_rows"), ("max_score", "max_score")):
            if key in data:
                metrics[name] = data[key]
        if "took" in data:
            metrics["took"] = data["took"] // NANOS_PER_MILLI
        errors = status.get("errors") or {}
        if not isinstance(errors, Mapping):
            errors = {str(i): str(e) for i, e in enumerate(errors)}
        result["meta_data"] = {"metrics": metrics, "errors": errors}
    if data.get("facets"):
        result["facets"] = {
            name: {"name": name, **facet} for name, facet in data["facets"].items()
        }
    return result


class SearchClient:
    """Async client submitting queries to a search service.

    Configuration falls back to the FTSEARCH_URL, FTSEARCH_USERNAME and
    FTSEARCH_PASSWORD environment variables.

    Example:
        async with SearchClient("http://localhost:8094") as client:
            result = await client.search("travel", match("hotel", field="type"))
    """

    DEFAULT_URL = "http://localhost:8094"

    def __init__(
        self,
        url: str | None = None,
        username: str | None = None,
        password: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        url = url or os.environ.get("FTSEARCH_URL") or self.DEFAULT_URL
        self._url = url.rstrip("/")
        self._username = username or os.environ.get("FTSEARCH_USERNAME")
        self._password = password or os.environ.get("FTSEARCH_PASSWORD")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "SearchClient":
        auth = None
        if self._username is not None:
            auth = httpx.BasicAuth(self._username, self._password or "")
        self._client = httpx.AsyncClient(
            base_url=self._url,
            auth=auth,
            timeout=self._timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def search(
        self,
        index: str,
        query: Query | str,
        options: SearchOptions | None = None,
    ) -> SearchResult:
        """Run a query against an index.

        Strings are sent as query-string queries.
        """
        if self._client is None:
            raise RuntimeError("Client not initialized. Use 'async with client:'")

        options = options or SearchOptions()
        if isinstance(query, str):
            query = QueryString(query)
        body = build_request(query, options)
        logger.info("Searching index %s", index)
        logger.debug("Request body: %s", body)

        response = await self._client.post(f"/api/index/{quote(index, safe='')}/query", json=body)
        response.raise_for_status()
        logger.debug("Response status: %s", response.status_code)

        result = decode_result(
            normalize_response(response.json()), options.facets, options.transcoder
        )
        logger.info(
            "Search complete: %s rows of %s total",
            len(result.rows),
            result.meta_data.metrics.total_rows,
        )
        return result
