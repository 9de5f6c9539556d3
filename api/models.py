"""
api/models.py
Pydantic request/response models.

The dashboard consumes camelCase JSON; request bodies accept either
camelCase or snake_case keys.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from tracking.models import TrackingRequest, TrackingStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)



class TrackRequest(_CamelModel):
    container_number: Optional[str] = Field(default=None, description="ISO 6346 container number, e.g. MSKU7750050")
    booking_number:   Optional[str] = Field(default=None, description="Carrier booking number")
    bill_of_lading:   Optional[str] = Field(default=None, description="Bill of lading number")
    scac_code:        Optional[str] = Field(default=None, description="Carrier SCAC code for booking / B/L lookups")
    fallback_to_demo: bool = Field(
        default=False,
        description="Serve demo records instead of an error when the provider call fails.",
    )
    include_summary: bool = Field(
        default=False,
        description="Generate a plain-English status summary (uses Groq).",
    )

    @model_validator(mode="after")
    def require_single_identifier(self):
        self.to_tracking_request()
        return self

    def to_tracking_request(self) -> TrackingRequest:
        return TrackingRequest(
            container_number=self.container_number,
            booking_number=self.booking_number,
            bill_of_lading=self.bill_of_lading,
            scac_code=self.scac_code,
        )


class BatchTrackRequest(_CamelModel):
    container_numbers: list[str] = Field(..., min_length=1, max_length=50)



class CoordinatesOut(_CamelModel):
    lat: float
    lng: float


class LocationOut(_CamelModel):
    name:        str
    city:        Optional[str]            = None
    country:     Optional[str]            = None
    coordinates: Optional[CoordinatesOut] = None


class TrackingLocationOut(_CamelModel):
    timestamp:   Optional[str] = None
    location:    LocationOut
    event:       str
    description: Optional[str] = None


class VesselPositionOut(_CamelModel):
    lat:       float
    lng:       float
    timestamp: Optional[str] = None


class VesselInfoOut(_CamelModel):
    name:             str
    imo:              Optional[str]               = None
    mmsi:             Optional[str]               = None
    current_position: Optional[VesselPositionOut] = None


class TrackingDataOut(_CamelModel):
    reference:         str
    container_number:  Optional[str]           = None
    bill_of_lading:    Optional[str]           = None
    booking_number:    Optional[str]           = None
    locations:         list[TrackingLocationOut] = []
    vessel:            Optional[VesselInfoOut] = None
    status:            TrackingStatus
    estimated_arrival: Optional[str]           = None
    actual_arrival:    Optional[str]           = None


class TrackResponse(_CamelModel):
    success:    bool
    request_id: Optional[str] = None
    timestamp:  str           = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    source:     str           # "live" | "demo"
    results:    list[TrackingDataOut]
    summary:    Optional[str] = None


class BatchEntry(_CamelModel):
    container_number: str
    data:             Optional[TrackingDataOut] = None


class BatchTrackResponse(_CamelModel):
    success: bool
    found:   int
    results: list[BatchEntry]


class CarrierResponse(_CamelModel):
    reference:      str
    carrier:        str
    reference_type: str


class ErrorResponse(_CamelModel):
    success:    bool          = False
    error:      str
    detail:     Optional[Any] = None
    request_id: Optional[str] = None
