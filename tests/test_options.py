import pytest

from ftsearch import facets, sort
from ftsearch.errors import EmptyCompoundQuery
from ftsearch.options import SearchOptions, build_request
from ftsearch.query import conjuncts, match, match_all


def test_defaults_only_send_query_and_explain():
    assert build_request(match_all()) == {"query": {"match_all": None}, "explain": False}


def test_all_options():
    options = SearchOptions(
        limit=10,
        skip=20,
        explain=True,
        disable_scoring=True,
        highlight_style="html",
        highlight_fields=["title"],
        fields=["*"],
        sort=["-_score", sort.field("name", type="string")],
        facets={"colors": facets.term("color", 3)},
        timeout=7500,
    )
    assert build_request(match("hotel", field="type"), options) == {
        "query": {"match": "hotel", "field": "type"},
        "explain": True,
        "size": 10,
        "from": 20,
        "highlight": {"style": "html", "fields": ["title"]},
        "fields": ["*"],
        "sort": ["-_score", {"by": "field", "field": "name", "desc": False, "type": "string"}],
        "facets": {"colors": {"field": "color", "size": 3}},
        "score": "none",
        "ctl": {"timeout": 7500},
    }


def test_highlight_without_style():
    body = build_request(match_all(), SearchOptions(highlight_fields=["title"]))
    assert body["highlight"] == {"fields": ["title"]}


def test_zero_limit_is_sent():
    assert build_request(match_all(), SearchOptions(limit=0))["size"] == 0


def test_invalid_query_fails_before_sending():
    with pytest.raises(EmptyCompoundQuery):
        build_request(conjuncts(), SearchOptions())


def test_single_string_options_are_not_split():
    options = SearchOptions(sort="title", fields="*", highlight_fields="body")
    body = build_request(match_all(), options)
    assert body["sort"] == ["title"]
    assert body["fields"] == ["*"]
    assert body["highlight"] == {"fields": ["body"]}


def test_single_sort_object():
    body = build_request(match_all(), SearchOptions(sort=sort.score(descending=True)))
    assert body["sort"] == [{"by": "score", "desc": True}]
