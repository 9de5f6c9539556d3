"""tracking package"""
from .carriers import CarrierMatch, detect_carrier
from .classifier import classify_event, classify_status
from .client import ProviderConfig, VizionClient
from .demo import demo_tracking_data
from .models import (
    Coordinates, Location, TrackingData, TrackingLocation, TrackingRequest,
    TrackingStatus, VesselInfo, VesselPosition,
)
from .normalizer import normalize_tracking, parse_coordinate
from .service import TrackingService

__all__ = [
    "CarrierMatch", "detect_carrier", "classify_event", "classify_status",
    "ProviderConfig", "VizionClient", "demo_tracking_data",
    "Coordinates", "Location", "TrackingData", "TrackingLocation", "TrackingRequest",
    "TrackingStatus", "VesselInfo", "VesselPosition",
    "normalize_tracking", "parse_coordinate", "TrackingService",
]
