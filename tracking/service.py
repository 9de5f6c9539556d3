"""
tracking/service.py
Tracking Service: provider lookup → normalization → status classification.

One instance is built by the wiring layer (API factory or CLI) from an
explicit ProviderConfig; there is no module-level service object.
"""
import asyncio
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Iterable, Optional

from monitoring import TRACK_REQUESTS, get_logger
from tracking.client import ProviderConfig, VizionClient
from tracking.demo import demo_tracking_data
from tracking.models import TrackingData, TrackingRequest
from tracking.normalizer import normalize_tracking

log = get_logger(__name__)


class TrackingService:
    """
    Looks up containers, bookings and bills of lading with the provider.

    Every lookup returns a fresh TrackingData, or None when the provider call
    failed.  Callers decide whether None means an empty state or demo data.
    """

    def __init__(self, config: ProviderConfig) -> None:
        self._client = VizionClient(config)

    @property
    def config(self) -> ProviderConfig:
        return self._client.config

    @property
    def is_configured(self) -> bool:
        return self._client.config.has_live_key

    # ── Lookups ───────────────────────────────────────────────────────────────

    async def track_container(self, container_number: str) -> Optional[TrackingData]:
        return await self._track(
            "container",
            {"container_number": container_number, "scac_code": None},  # provider auto-detects carrier
        )

    async def track_by_booking(
        self, booking_number: str, scac_code: Optional[str] = None
    ) -> Optional[TrackingData]:
        return await self._track(
            "booking",
            {"booking_number": booking_number, "scac_code": scac_code},
        )

    async def track_bill_of_lading(
        self, bill_of_lading: str, scac_code: Optional[str] = None
    ) -> Optional[TrackingData]:
        return await self._track(
            "bill_of_lading",
            {"bill_of_lading": bill_of_lading, "scac_code": scac_code},
        )

    async def track(self, request: TrackingRequest) -> Optional[TrackingData]:
        """Dispatch on whichever identifier the request carries."""
        if request.container_number:
            return await self.track_container(request.container_number)
        if request.booking_number:
            return await self.track_by_booking(request.booking_number, request.scac_code)
        return await self.track_bill_of_lading(request.bill_of_lading, request.scac_code)

    async def track_many(
        self, requests: Iterable[TrackingRequest]
    ) -> list[Optional[TrackingData]]:
        """Run independent lookups concurrently; results keep input order."""
        return list(await asyncio.gather(*(self.track(r) for r in requests)))

    async def get_vessel_position(self, imo: str) -> Optional[Any]:
        """Raw provider vessel record, or None on failure."""
        payload = await self._client.get_vessel(imo)
        TRACK_REQUESTS.labels(kind="vessel", outcome="ok" if payload is not None else "failed").inc()
        return payload

    def demo_data(self, now: Optional[datetime] = None) -> list[TrackingData]:
        return demo_tracking_data(now)

    # ── Private ───────────────────────────────────────────────────────────────

    async def _track(self, kind: str, body: dict[str, Any]) -> Optional[TrackingData]:
        payload = await self._client.post_track(body)
        if payload is None:
            TRACK_REQUESTS.labels(kind=kind, outcome="failed").inc()
            return None
        if not isinstance(payload, Mapping):
            log.warning("Provider payload is not a JSON object", kind=kind, type=type(payload).__name__)
            TRACK_REQUESTS.labels(kind=kind, outcome="failed").inc()
            return None

        data = normalize_tracking(payload)
        TRACK_REQUESTS.labels(kind=kind, outcome="ok").inc()
        log.info(
            "Tracking normalized",
            kind=kind,
            reference=data.reference,
            status=data.status.value,
            events=len(data.locations),
        )
        return data
