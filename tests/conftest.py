from __future__ import annotations

import copy
from typing import Any

import pytest

RESPONSE: dict[str, Any] = {
    "rows": [
        {
            "index": "travel_1a2b",
            "id": "hotel_10025",
            "score": 1.25,
            "locations": [
                {
                    "field": "title",
                    "term": "view",
                    "position": 2,
                    "start_offset": 5,
                    "end_offset": 9,
                    "array_positions": None,
                },
                {
                    "field": "title",
                    "term": "sea",
                    "position": 3,
                    "start_offset": 10,
                    "end_offset": 13,
                    "array_positions": [0],
                },
                {
                    "field": "body",
                    "term": "view",
                    "position": 7,
                    "start_offset": 30,
                    "end_offset": 34,
                    "array_positions": None,
                },
            ],
            "fragments": {"title": ["nice <mark>view</mark>"]},
            "fields": {"name": "Sea View Hotel", "city": "Brighton"},
        },
        {"index": "travel_1a2b", "id": "hotel_10026", "score": 0.5},
    ],
    "facets": {
        "colors": {
            "name": "colors",
            "field": "color",
            "total": 10,
            "missing": 1,
            "other": 2,
            "terms": [{"term": "red", "count": 7}],
        },
        "prices": {
            "name": "prices",
            "field": "price",
            "total": 4,
            "numeric_ranges": [{"name": "cheap", "count": 4, "max": 10}],
        },
        "updated": {"name": "updated", "field": "updated", "total": 0},
        "sizes": {"name": "sizes", "field": "size", "total": 3},
    },
    "meta_data": {
        "metrics": {
            "took": 12,
            "total_rows": 2,
            "max_score": 1.25,
            "success_partition_count": 6,
            "error_partition_count": 0,
        },
        "errors": {},
    },
}


@pytest.fixture
def response() -> dict[str, Any]:
    return copy.deepcopy(RESPONSE)
