"""
tracking/models.py
Canonical tracking types shared by the normalizer, classifier, demo provider,
service and API layer.  Kept in a separate module to avoid circular imports.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class TrackingStatus(str, Enum):
    """Coarse shipment status derived from the latest tracking event."""
    UNKNOWN    = "Unknown"
    DELIVERED  = "Delivered"
    IN_TRANSIT = "In Transit"
    AT_PORT    = "At Port"
    LOADING    = "Loading"


@dataclass
class Coordinates:
    lat: float
    lng: float


@dataclass
class Location:
    name: str = "Unknown"
    city: Optional[str] = None
    country: Optional[str] = None
    coordinates: Optional[Coordinates] = None


@dataclass
class TrackingLocation:
    """One tracking event. Provider order is treated as oldest first."""
    timestamp: Optional[str]
    location: Location
    event: str = "Unknown Event"
    description: Optional[str] = None


@dataclass
class VesselPosition:
    lat: float
    lng: float
    timestamp: Optional[str] = None


@dataclass
class VesselInfo:
    name: str = "Unknown"
    imo: Optional[str] = None
    mmsi: Optional[str] = None
    current_position: Optional[VesselPosition] = None


@dataclass
class TrackingData:
    """
    Provider-agnostic tracking snapshot consumed by the dashboard.
    Built fresh for every lookup; never persisted by this package.
    """
    reference: str
    status: TrackingStatus = TrackingStatus.UNKNOWN
    container_number: Optional[str] = None
    bill_of_lading: Optional[str] = None
    booking_number: Optional[str] = None
    locations: list[TrackingLocation] = field(default_factory=list)
    vessel: Optional[VesselInfo] = None
    estimated_arrival: Optional[str] = None
    actual_arrival: Optional[str] = None


@dataclass(frozen=True)
class TrackingRequest:
    """
    Identifies a shipment by exactly one of container number, booking number
    or bill of lading.  A SCAC code may accompany booking / B/L lookups.
    """
    container_number: Optional[str] = None
    booking_number: Optional[str] = None
    bill_of_lading: Optional[str] = None
    scac_code: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("container_number", "booking_number", "bill_of_lading", "scac_code"):
            value = getattr(self, name)
            if value is not None:
                value = value.strip().upper() or None
                object.__setattr__(self, name, value)

        given = [
            name for name in ("container_number", "booking_number", "bill_of_lading")
            if getattr(self, name)
        ]
        if len(given) != 1:
            raise ValueError(
                "Exactly one of container_number, booking_number or bill_of_lading "
                f"must be provided (got {len(given)})."
            )

    @property
    def kind(self) -> str:
        if self.container_number:
            return "container"
        if self.booking_number:
            return "booking"
        return "bill_of_lading"

    @property
    def identifier(self) -> str:
        return self.container_number or self.booking_number or self.bill_of_lading or ""
