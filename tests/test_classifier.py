"""
tests/test_classifier.py
Unit tests for shipment status classification.
Run with: pytest tests/ -v
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from tracking.classifier import classify_event, classify_status
from tracking.models import Location, TrackingLocation, TrackingStatus


def _loc(event: str) -> TrackingLocation:
    return TrackingLocation(timestamp=None, location=Location(name="Somewhere"), event=event)


class TestClassifyStatus:

    @pytest.mark.parametrize("event,expected", [
        ("Container Discharged",    TrackingStatus.DELIVERED),
        ("Vessel Departure",        TrackingStatus.IN_TRANSIT),
        ("Berth Arrival",           TrackingStatus.AT_PORT),
        ("Container Loaded",        TrackingStatus.LOADING),
        ("Some Unrecognized Text",  TrackingStatus.IN_TRANSIT),
    ])
    def test_last_event_keywords(self, event, expected):
        assert classify_status([_loc(event)]) == expected

    def test_empty_is_unknown(self):
        assert classify_status([]) == TrackingStatus.UNKNOWN

    def test_only_last_event_counts(self):
        locations = [_loc("Delivered to consignee"), _loc("Container Loaded")]
        assert classify_status(locations) == TrackingStatus.LOADING

    def test_case_insensitive(self):
        assert classify_status([_loc("DELIVERED")]) == TrackingStatus.DELIVERED

    def test_first_rule_wins(self):
        # "discharge" outranks "load" and "arrival"
        assert classify_event("Discharged after arrival, unloaded") == TrackingStatus.DELIVERED
        # "sail" outranks "berth"
        assert classify_event("Sailed from berth 4") == TrackingStatus.IN_TRANSIT

    def test_unknown_event_default_is_in_transit(self):
        assert classify_status([_loc("Unknown Event")]) == TrackingStatus.IN_TRANSIT

    def test_pure(self):
        locations = [_loc("Berth Arrival")]
        assert classify_status(locations) == classify_status(locations)
        assert locations[0].event == "Berth Arrival"

    def test_status_values_are_display_strings(self):
        assert [s.value for s in TrackingStatus] == [
            "Unknown", "Delivered", "In Transit", "At Port", "Loading",
        ]
