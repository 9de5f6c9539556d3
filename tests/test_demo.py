"""
tests/test_demo.py
Demo / fallback tracking records.
"""
import sys
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from tracking.classifier import classify_status
from tracking.demo import demo_tracking_data
from tracking.models import TrackingStatus

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestDemoData:

    def test_two_records(self):
        records = demo_tracking_data(NOW)
        assert [r.container_number for r in records] == ["MSKU7750050", "COSU4567890"]
        assert [r.reference for r in records] == ["MSKU7750050", "COSU4567890"]

    def test_distinct_vessels(self):
        names = [r.vessel.name for r in demo_tracking_data(NOW)]
        assert names == ["MSC GÜLSÜN", "COSCO SHIPPING UNIVERSE"]

    def test_status_is_classifier_output(self):
        for record in demo_tracking_data(NOW):
            assert record.status == classify_status(record.locations)
            assert record.status == TrackingStatus.IN_TRANSIT

    def test_locations_ascending(self):
        for record in demo_tracking_data(NOW):
            stamps = [loc.timestamp for loc in record.locations]
            assert stamps == sorted(stamps)

    def test_relative_to_clock(self):
        first = demo_tracking_data(NOW)[0]
        assert first.locations[0].timestamp == "2025-02-22T12:00:00.000Z"
        assert first.locations[-1].timestamp == "2025-03-01T12:00:00.000Z"
        assert first.estimated_arrival == "2025-03-03T12:00:00.000Z"

    def test_deterministic(self):
        assert demo_tracking_data(NOW) == demo_tracking_data(NOW)

    def test_structure_stable_with_live_clock(self):
        a, b = demo_tracking_data(), demo_tracking_data()
        assert [(r.reference, len(r.locations), r.vessel.name) for r in a] == \
               [(r.reference, len(r.locations), r.vessel.name) for r in b]

    def test_vessel_position_matches_last_location(self):
        for record in demo_tracking_data(NOW):
            last = record.locations[-1].location.coordinates
            pos = record.vessel.current_position
            assert (pos.lat, pos.lng) == (last.lat, last.lng)
