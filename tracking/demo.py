"""
tracking/demo.py
Static example tracking records for running the dashboard without a live
provider key.  Timestamps are relative to the supplied clock.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from tracking.classifier import classify_status
from tracking.models import (
    Coordinates,
    Location,
    TrackingData,
    TrackingLocation,
    VesselInfo,
    VesselPosition,
)


def _iso(moment: datetime) -> str:
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _record(
    container_number: str,
    locations: list[TrackingLocation],
    vessel: VesselInfo,
    estimated_arrival: str,
) -> TrackingData:
    return TrackingData(
        reference=container_number,
        container_number=container_number,
        locations=locations,
        vessel=vessel,
        status=classify_status(locations),
        estimated_arrival=estimated_arrival,
    )


def demo_tracking_data(now: Optional[datetime] = None) -> list[TrackingData]:
    """
    Two fully populated records: a Shanghai → Los Angeles transpacific
    container and a Rotterdam → North Atlantic crossing.
    """
    now = now or datetime.now(timezone.utc)

    def days(offset: int) -> str:
        return _iso(now + timedelta(days=offset))

    transpacific = _record(
        "MSKU7750050",
        [
            TrackingLocation(
                timestamp=days(-7),
                location=Location(
                    name="Shanghai Port", city="Shanghai", country="China",
                    coordinates=Coordinates(lat=31.2304, lng=121.4737),
                ),
                event="Container Loaded",
            ),
            TrackingLocation(
                timestamp=days(-5),
                location=Location(name="Pacific Ocean", coordinates=Coordinates(lat=35.0, lng=140.0)),
                event="Vessel Departure",
            ),
            TrackingLocation(
                timestamp=days(0),
                location=Location(
                    name="Approaching Los Angeles", city="Los Angeles", country="USA",
                    coordinates=Coordinates(lat=33.7175, lng=-118.2818),
                ),
                event="In Transit",
            ),
        ],
        VesselInfo(
            name="MSC GÜLSÜN",
            imo="9811000",
            current_position=VesselPosition(lat=33.7175, lng=-118.2818, timestamp=days(0)),
        ),
        estimated_arrival=days(2),
    )

    transatlantic = _record(
        "COSU4567890",
        [
            TrackingLocation(
                timestamp=days(-3),
                location=Location(
                    name="Rotterdam Port", city="Rotterdam", country="Netherlands",
                    coordinates=Coordinates(lat=51.9244, lng=4.4777),
                ),
                event="Container Loaded",
            ),
            TrackingLocation(
                timestamp=days(0),
                location=Location(name="North Atlantic", coordinates=Coordinates(lat=50.0, lng=-30.0)),
                event="In Transit",
            ),
        ],
        VesselInfo(
            name="COSCO SHIPPING UNIVERSE",
            imo="9795000",
            current_position=VesselPosition(lat=50.0, lng=-30.0, timestamp=days(0)),
        ),
        estimated_arrival=days(5),
    )

    return [transpacific, transatlantic]
