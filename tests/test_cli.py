from __future__ import annotations

import json

import pytest

from ftsearch.cli import _parse_facets, request
from ftsearch.facets import TermFacetSpec


def test_request_prints_body(capsys):
    request("+type:hotel", limit=3, facet=["colors=color:5"], sort=["-_score"])
    body = json.loads(capsys.readouterr().out)
    assert body == {
        "query": {"query": "+type:hotel"},
        "explain": False,
        "size": 3,
        "sort": ["-_score"],
        "facets": {"colors": {"field": "color", "size": 5}},
    }


def test_request_rejects_bad_facet(capsys):
    with pytest.raises(SystemExit) as exc:
        request("x", facet=["colors"])
    assert exc.value.code == 1
    assert "NAME=FIELD" in capsys.readouterr().err


def test_parse_facets():
    assert _parse_facets(["a=b", "c=d:2"]) == {
        "a": TermFacetSpec("b"),
        "c": TermFacetSpec("d", 2),
    }
