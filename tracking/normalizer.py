"""
tracking/normalizer.py
Maps provider tracking payloads onto the canonical TrackingData shape.

Every provider field is treated as optional.  Accessors below return None
for anything missing or of the wrong type, so normalize_tracking() is total:
it returns a TrackingData for any JSON value, including {}.
"""
import math
from typing import Any, Mapping, Optional

from tracking.classifier import classify_status
from tracking.models import (
    Coordinates,
    Location,
    TrackingData,
    TrackingLocation,
    VesselInfo,
    VesselPosition,
)

UNKNOWN_REFERENCE = "Unknown"
UNKNOWN_LOCATION  = "Unknown"
UNKNOWN_EVENT     = "Unknown Event"
UNKNOWN_VESSEL    = "Unknown"


# ── Optional accessors ────────────────────────────────────────────────────────

def _mapping(value: Any) -> Optional[Mapping[str, Any]]:
    return value if isinstance(value, Mapping) else None


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    # IMO / MMSI numbers sometimes arrive as JSON numbers
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def parse_coordinate(value: Any) -> Optional[float]:
    """Parse a latitude/longitude given as a number or numeric string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _lat_lng(raw: Optional[Mapping[str, Any]]) -> Optional[tuple[float, float]]:
    if raw is None:
        return None
    lat = parse_coordinate(raw.get("lat"))
    lng = parse_coordinate(raw.get("lng"))
    if lat is None or lng is None:
        return None
    return lat, lng


# ── Record mappers ────────────────────────────────────────────────────────────

def normalize_location(raw: Mapping[str, Any]) -> TrackingLocation:
    place = _mapping(raw.get("location")) or {}
    pair = _lat_lng(_mapping(place.get("coordinates")))
    return TrackingLocation(
        timestamp=_text(raw.get("timestamp")),
        location=Location(
            name=_text(place.get("name")) or UNKNOWN_LOCATION,
            city=_text(place.get("city")),
            country=_text(place.get("country")),
            coordinates=Coordinates(lat=pair[0], lng=pair[1]) if pair else None,
        ),
        event=_text(raw.get("event")) or UNKNOWN_EVENT,
        description=_text(raw.get("description")),
    )


def normalize_vessel(raw: Mapping[str, Any]) -> VesselInfo:
    position = _mapping(raw.get("current_position"))
    pair = _lat_lng(position)
    return VesselInfo(
        name=_text(raw.get("name")) or UNKNOWN_VESSEL,
        imo=_text(raw.get("imo")),
        mmsi=_text(raw.get("mmsi")),
        current_position=VesselPosition(
            lat=pair[0],
            lng=pair[1],
            timestamp=_text(position.get("timestamp")),
        ) if pair and position is not None else None,
    )


def normalize_tracking(payload: Any) -> TrackingData:
    """
    Build a TrackingData from a raw provider payload.

    reference is the container number, else the booking number, else
    "Unknown".  status is derived from the normalized locations.
    """
    data = _mapping(payload) or {}

    raw_locations = data.get("locations")
    locations = [
        normalize_location(entry)
        for entry in (raw_locations if isinstance(raw_locations, list) else [])
        if isinstance(entry, Mapping)
    ]

    raw_vessel = _mapping(data.get("vessel"))

    container_number = _text(data.get("container_number"))
    booking_number   = _text(data.get("booking_number"))

    return TrackingData(
        reference=container_number or booking_number or UNKNOWN_REFERENCE,
        container_number=container_number,
        bill_of_lading=_text(data.get("bill_of_lading")),
        booking_number=booking_number,
        locations=locations,
        vessel=normalize_vessel(raw_vessel) if raw_vessel is not None else None,
        status=classify_status(locations),
        estimated_arrival=_text(data.get("estimated_arrival")),
        actual_arrival=_text(data.get("actual_arrival")),
    )
