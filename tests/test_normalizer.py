"""
tests/test_normalizer.py
Unit tests for provider payload normalization.
"""
import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from tracking.models import TrackingStatus
from tracking.normalizer import normalize_tracking, parse_coordinate


@pytest.fixture
def full_payload() -> dict:
    return {
        "container_number": "MSKU7750050",
        "bill_of_lading":   "MAEU253916247",
        "booking_number":   "253916247",
        "locations": [
            {
                "timestamp": "2024-11-01T08:00:00Z",
                "location": {
                    "name": "Shanghai Port",
                    "city": "Shanghai",
                    "country": "China",
                    "coordinates": {"lat": "31.2304", "lng": "121.4737"},
                },
                "event": "Container Loaded",
                "description": "Loaded on MSC GÜLSÜN",
            },
            {
                "timestamp": "2024-11-03T12:00:00Z",
                "location": {"name": "Busan", "coordinates": {"lat": 35.1, "lng": 129.04}},
                "event": "Vessel Departure",
            },
        ],
        "vessel": {
            "name": "MSC GÜLSÜN",
            "imo": 9811000,
            "mmsi": "353136000",
            "current_position": {"lat": "33.7175", "lng": "-118.2818", "timestamp": "2024-11-10T00:00:00Z"},
        },
        "estimated_arrival": "2024-11-20T00:00:00Z",
        "actual_arrival": None,
    }


class TestTotality:

    @pytest.mark.parametrize("payload", [
        {},
        {"locations": None, "vessel": None},
        {"locations": "not-a-list"},
        {"locations": [None, 3, "x"]},
        {"vessel": "MSC"},
        {"locations": [{}], "vessel": {}},
        [],
        None,
        "garbage",
    ])
    def test_never_raises(self, payload):
        data = normalize_tracking(payload)
        assert isinstance(data.locations, list)
        assert data.status in TrackingStatus

    def test_empty_object(self):
        data = normalize_tracking({})
        assert data.reference == "Unknown"
        assert data.locations == []
        assert data.status == TrackingStatus.UNKNOWN
        assert data.vessel is None
        assert data.container_number is None

    def test_empty_location_record_gets_defaults(self):
        data = normalize_tracking({"locations": [{}]})
        loc = data.locations[0]
        assert loc.location.name == "Unknown"
        assert loc.event == "Unknown Event"
        assert loc.location.coordinates is None
        assert loc.timestamp is None
        # non-empty sequence never yields Unknown
        assert data.status == TrackingStatus.IN_TRANSIT


class TestReference:

    def test_container_first(self):
        assert normalize_tracking({"container_number": "X", "booking_number": "Y"}).reference == "X"

    def test_booking_fallback(self):
        assert normalize_tracking({"booking_number": "Y"}).reference == "Y"

    def test_unknown(self):
        assert normalize_tracking({"bill_of_lading": "Z"}).reference == "Unknown"

    def test_empty_container_falls_through(self):
        assert normalize_tracking({"container_number": "", "booking_number": "Y"}).reference == "Y"


class TestFullPayload:

    def test_identifiers(self, full_payload):
        data = normalize_tracking(full_payload)
        assert data.reference == "MSKU7750050"
        assert data.bill_of_lading == "MAEU253916247"
        assert data.booking_number == "253916247"
        assert data.estimated_arrival == "2024-11-20T00:00:00Z"
        assert data.actual_arrival is None

    def test_locations_keep_provider_order(self, full_payload):
        data = normalize_tracking(full_payload)
        assert [l.event for l in data.locations] == ["Container Loaded", "Vessel Departure"]
        first = data.locations[0]
        assert first.location.city == "Shanghai"
        assert first.location.country == "China"
        assert first.description == "Loaded on MSC GÜLSÜN"
        assert first.location.coordinates.lat == pytest.approx(31.2304)
        assert first.location.coordinates.lng == pytest.approx(121.4737)

    def test_status_from_last_event(self, full_payload):
        assert normalize_tracking(full_payload).status == TrackingStatus.IN_TRANSIT

    def test_vessel(self, full_payload):
        vessel = normalize_tracking(full_payload).vessel
        assert vessel.name == "MSC GÜLSÜN"
        assert vessel.imo == "9811000"
        assert vessel.mmsi == "353136000"
        assert vessel.current_position.lat == pytest.approx(33.7175)
        assert vessel.current_position.lng == pytest.approx(-118.2818)
        assert vessel.current_position.timestamp == "2024-11-10T00:00:00Z"

    def test_vessel_without_position(self):
        vessel = normalize_tracking({"vessel": {"name": "EVER GIVEN"}}).vessel
        assert vessel.name == "EVER GIVEN"
        assert vessel.current_position is None

    def test_vessel_without_name(self):
        assert normalize_tracking({"vessel": {"imo": "9811000"}}).vessel.name == "Unknown"


class TestCoordinates:

    def test_string_and_number_agree(self):
        assert parse_coordinate("31.2304") == parse_coordinate(31.2304) == 31.2304

    def test_integer(self):
        assert parse_coordinate(50) == 50.0

    @pytest.mark.parametrize("value", ["north", "", None, True, "nan", {"lat": 1}])
    def test_unparseable(self, value):
        assert parse_coordinate(value) is None

    def test_integer_beyond_float_range(self):
        assert parse_coordinate(10 ** 400) is None

    def test_huge_integer_in_payload_does_not_raise(self):
        payload = json.loads(
            '{"locations":[{"location":{"coordinates":{"lat":1' + "0" * 400 + ',"lng":1}}}]}'
        )
        data = normalize_tracking(payload)
        assert data.locations[0].location.coordinates is None
        assert data.locations[0].location.name == "Unknown"

    def test_partial_pair_dropped(self):
        data = normalize_tracking({
            "locations": [{"location": {"name": "Rotterdam", "coordinates": {"lat": "51.9"}}}],
        })
        assert data.locations[0].location.coordinates is None
        assert data.locations[0].location.name == "Rotterdam"
