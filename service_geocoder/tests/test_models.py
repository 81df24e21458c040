"""
Unit tests for Geocoder place models.
"""

import json
import pytest
from pydantic import ValidationError

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from shared.test_helpers import TestDataFactory
from service_geocoder.app.lookup.models import (
    PlaceResult, LookupResponse, dump_results, load_results, parse_results
)


class TestPlaceModels:
    """Test cases for PlaceResult serialization."""

    def test_wire_names_are_used(self):
        """The class field travels under its upstream name."""
        place = PlaceResult.model_validate(TestDataFactory.create_boston_place())

        assert place.place_class == "boundary"
        assert json.loads(dump_results([place]))[0]["class"] == "boundary"
        assert "place_class" not in json.loads(dump_results([place]))[0]

    @pytest.mark.parametrize("places", [
        [],
        [TestDataFactory.create_boston_place()],
        TestDataFactory.create_test_places(),
    ])
    def test_serialization_round_trip_is_stable(self, places):
        """serialize(deserialize(serialize(X))) == serialize(X)."""
        serialized = dump_results(parse_results(places))

        assert dump_results(load_results(serialized)) == serialized

    def test_missing_fields_decode_to_zero_values(self):
        """Sparse upstream objects are accepted."""
        place = parse_results([{"place_id": 9, "display_name": "Somewhere"}])[0]

        assert place.place_id == 9
        assert place.licence == ""
        assert place.boundingbox == []
        assert place.importance == 0.0
        assert place.icon == ""

    def test_null_fields_decode_to_zero_values(self):
        """JSON null is treated like an absent key."""
        payload = (b'[{"place_id": 1, "display_name": "X", "importance": null, "icon": null,'
                   b' "class": null, "boundingbox": null, "osm_id": null}]')

        place = load_results(payload)[0]

        assert place.place_id == 1
        assert place.display_name == "X"
        assert place.importance == 0.0
        assert place.icon == ""
        assert place.place_class == ""
        assert place.boundingbox == []
        assert place.osm_id == 0
        assert dump_results(load_results(dump_results([place]))) == dump_results([place])

    def test_unknown_fields_are_dropped(self):
        """Extra upstream keys do not reach the cache."""
        raw = dict(TestDataFactory.create_boston_place(), addresstype="city", place_rank=16)
        stored = json.loads(dump_results(parse_results([raw])))[0]

        assert stored == TestDataFactory.create_boston_place()

    @pytest.mark.parametrize("payload", [b"{}", b"null", b'"Boston"', b"[1, 2]", b"<html>"])
    def test_non_place_list_is_rejected(self, payload):
        """Only a JSON array of objects parses."""
        with pytest.raises(ValidationError):
            load_results(payload)

    def test_response_envelope_shape(self):
        """Envelope serializes to cache/data with wire names."""
        envelope = LookupResponse(cache=True, data=parse_results([TestDataFactory.create_boston_place()]))
        body = envelope.model_dump(by_alias=True)

        assert body["cache"] is True
        assert body["data"] == [TestDataFactory.create_boston_place()]
