"""
tracking/classifier.py
Derives a coarse shipment status from the most recent tracking event.
"""
from typing import Sequence

from tracking.models import TrackingLocation, TrackingStatus

# Ordered: first matching rule wins.
_STATUS_RULES: tuple[tuple[tuple[str, ...], TrackingStatus], ...] = (
    (("delivered", "discharge"), TrackingStatus.DELIVERED),
    (("departure", "sail"),      TrackingStatus.IN_TRANSIT),
    (("arrival", "berth"),       TrackingStatus.AT_PORT),
    (("load",),                  TrackingStatus.LOADING),
)


def classify_event(event: str) -> TrackingStatus:
    """Classify a single event description; unmatched text is In Transit."""
    text = event.lower()
    for keywords, status in _STATUS_RULES:
        if any(keyword in text for keyword in keywords):
            return status
    return TrackingStatus.IN_TRANSIT


def classify_status(locations: Sequence[TrackingLocation]) -> TrackingStatus:
    """
    Status of a shipment given its normalized locations.

    Only the last event is inspected.  An empty sequence is the one case
    that yields Unknown.
    """
    if not locations:
        return TrackingStatus.UNKNOWN
    return classify_event(locations[-1].event)
