import json

import pytest

from ftsearch import facets
from ftsearch.decode import decode_facets, decode_result
from ftsearch.errors import MalformedResponse
from ftsearch.models import (
    DateRangeFacetResult,
    Location,
    Locations,
    NumericRangeFacet,
    NumericRangeFacetResult,
    SearchMetrics,
    TermFacet,
    TermFacetResult,
)

REQUESTED = {
    "colors": facets.term("color"),
    "prices": facets.numeric_range("price").add("cheap", None, 10),
    "updated": facets.date_range("updated").add("recent", "2024-01-01", None),
}


class TestRows:
    def test_row_attributes(self, response):
        result = decode_result(response)
        row = result.rows[0]
        assert (row.index, row.id, row.score) == ("travel_1a2b", "hotel_10025", 1.25)
        assert row.fragments == {"title": ("nice <mark>view</mark>",)}
        assert row.explanation is None

    def test_fields_decoded_by_transcoder(self, response):
        row = decode_result(response).rows[0]
        assert row.fields == {"name": "Sea View Hotel", "city": "Brighton"}

    def test_custom_transcoder(self, response):
        class UpperTranscoder:
            def decode(self, data: bytes):
                return data.decode().upper()

        row = decode_result(response, transcoder=UpperTranscoder()).rows[0]
        assert json.loads(row.fields.lower()) == {"name": "sea view hotel", "city": "brighton"}

    def test_optional_row_parts_default(self, response):
        row = decode_result(response).rows[1]
        assert len(row.locations) == 0
        assert row.fragments == {}
        assert row.fields is None

    def test_explanation_string_is_parsed(self, response):
        response["rows"][1]["explanation"] = '{"value": 0.5, "message": "sum of:"}'
        row = decode_result(response).rows[1]
        assert row.explanation == {"value": 0.5, "message": "sum of:"}

    def test_explanation_mapping_kept(self, response):
        response["rows"][1]["explanation"] = {"value": 0.5}
        assert decode_result(response).rows[1].explanation == {"value": 0.5}

    def test_locations(self, response):
        locations = decode_result(response).rows[0].locations
        assert locations.fields() == {"title", "body"}
        assert len(locations.get_for_field("title")) == 2
        assert all(loc.field == "title" for loc in locations.get_for_field("title"))
        assert locations.get_all()[1].array_positions == (0,)


class TestLocations:
    locations = Locations(
        (
            Location("title", "sea", 1, 0, 3),
            Location("title", "view", 2, 4, 8),
            Location("body", "view", 5, 20, 24, (1,)),
        )
    )

    def test_get_all(self):
        assert len(self.locations.get_all()) == 3

    def test_fields_is_distinct_set(self):
        assert self.locations.fields() == {"title", "body"}

    def test_get_for_field(self):
        assert self.locations.get_for_field("title") == self.locations.get_all()[:2]
        assert self.locations.get_for_field("missing") == ()

    def test_get_for_field_and_term(self):
        assert self.locations.get_for_field_and_term("body", "view") == (
            Location("body", "view", 5, 20, 24, (1,)),
        )

    def test_terms(self):
        assert self.locations.terms() == {"sea", "view"}
        assert self.locations.terms_for_field("body") == {"view"}


class TestMetaData:
    def test_metrics(self, response):
        metrics = decode_result(response).meta_data.metrics
        assert metrics.took == 12
        assert metrics.total_rows == 2
        assert metrics.max_score == 1.25
        assert metrics.total_partition_count == 6

    def test_total_partition_count_is_derived(self):
        assert SearchMetrics(0, 0, 0.0, 0, 0).total_partition_count == 0
        assert SearchMetrics(0, 0, 0.0, 4, 2).total_partition_count == 6

    def test_errors(self, response):
        response["meta_data"]["errors"] = {"pindex_1": "timeout"}
        assert decode_result(response).meta_data.errors == {"pindex_1": "timeout"}


class TestFacets:
    def test_term_facet(self):
        raw = {
            "colors": {
                "name": "colors",
                "field": "color",
                "total": 10,
                "terms": [{"term": "red", "count": 7}],
            }
        }
        decoded = decode_facets(raw, {"colors": facets.term("color")})
        facet = decoded["colors"]
        assert isinstance(facet, TermFacetResult)
        assert facet.terms == (TermFacet("red", 7),)
        assert facet.total == 10

    def test_unrequested_facets_are_skipped(self, response):
        result = decode_result(response, {"colors": facets.term("color")})
        assert list(result.facets) == ["colors"]

    def test_dispatch_by_request_kind(self, response):
        result = decode_result(response, REQUESTED)
        assert set(result.facets) == {"colors", "prices", "updated"}
        assert isinstance(result.facets["colors"], TermFacetResult)
        assert result.facets["colors"].missing == 1
        assert result.facets["colors"].other == 2
        prices = result.facets["prices"]
        assert isinstance(prices, NumericRangeFacetResult)
        assert prices.numeric_ranges == (NumericRangeFacet("cheap", 4, None, 10),)
        assert isinstance(result.facets["updated"], DateRangeFacetResult)

    def test_absent_detail_array_is_empty(self, response):
        updated = decode_result(response, REQUESTED).facets["updated"]
        assert updated.date_ranges == ()

    def test_date_range_details(self, response):
        response["facets"]["updated"]["date_ranges"] = [
            {"name": "recent", "count": 3, "start": "2024-01-01T00:00:00Z"}
        ]
        updated = decode_result(response, REQUESTED).facets["updated"]
        assert updated.date_ranges[0].start == "2024-01-01T00:00:00Z"
        assert updated.date_ranges[0].end is None

    def test_no_facets_requested(self, response):
        assert decode_result(response).facets == {}

    def test_facet_missing_total(self, response):
        del response["facets"]["colors"]["total"]
        with pytest.raises(MalformedResponse):
            decode_result(response, REQUESTED)


class TestMalformedResponse:
    def test_missing_rows(self, response):
        del response["rows"]
        with pytest.raises(MalformedResponse, match="rows"):
            decode_result(response)

    def test_missing_metrics(self, response):
        del response["meta_data"]["metrics"]
        with pytest.raises(MalformedResponse, match="metrics"):
            decode_result(response)

    def test_missing_metric_counter(self, response):
        del response["meta_data"]["metrics"]["error_partition_count"]
        with pytest.raises(MalformedResponse, match="error_partition_count"):
            decode_result(response)

    def test_missing_row_id(self, response):
        del response["rows"][0]["id"]
        with pytest.raises(MalformedResponse, match="id"):
            decode_result(response)

    def test_rows_not_a_list(self, response):
        response["rows"] = {"id": "x"}
        with pytest.raises(MalformedResponse):
            decode_result(response)

    def test_location_missing_term(self, response):
        del response["rows"][0]["locations"][0]["term"]
        with pytest.raises(MalformedResponse, match="term"):
            decode_result(response)

    def test_payload_not_an_object(self):
        with pytest.raises(MalformedResponse):
            decode_result(["rows"])

    @pytest.mark.parametrize(
        "key, value",
        [
            ("success_partition_count", None),
            ("error_partition_count", "0"),
            ("took", 1.5),
            ("total_rows", True),
            ("max_score", None),
        ],
    )
    def test_ill_typed_metric(self, response, key, value):
        response["meta_data"]["metrics"][key] = value
        with pytest.raises(MalformedResponse, match=key):
            decode_result(response)

    @pytest.mark.parametrize("key, value", [("score", None), ("id", 10025), ("index", None)])
    def test_ill_typed_row_attribute(self, response, key, value):
        response["rows"][0][key] = value
        with pytest.raises(MalformedResponse, match=key):
            decode_result(response)

    def test_integer_score_accepted(self, response):
        response["rows"][0]["score"] = 1
        assert decode_result(response).rows[0].score == 1

    @pytest.mark.parametrize("errors", [["pindex_1 timeout"], "timeout", 3])
    def test_errors_not_an_object(self, response, errors):
        response["meta_data"]["errors"] = errors
        with pytest.raises(MalformedResponse, match="errors"):
            decode_result(response)

    @pytest.mark.parametrize("excerpts", ["nice view", None, {"0": "nice"}])
    def test_fragment_excerpts_not_a_list(self, response, excerpts):
        response["rows"][0]["fragments"] = {"title": excerpts}
        with pytest.raises(MalformedResponse, match="title"):
            decode_result(response)
