"""
api/routes.py
REST endpoints.
"""
import time
import uuid
from dataclasses import asdict
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from api.models import (
    BatchEntry,
    BatchTrackRequest,
    BatchTrackResponse,
    CarrierResponse,
    TrackingDataOut,
    TrackRequest,
    TrackResponse,
)
from monitoring import DEMO_FALLBACKS
from tracking.carriers import detect_carrier
from tracking.models import TrackingData, TrackingRequest
from tracking.service import TrackingService

router = APIRouter()


def _log():
    from monitoring import get_logger
    return get_logger(__name__)


def get_service(request: Request) -> TrackingService:
    return request.app.state.tracking_service


def get_summarizer(request: Request):
    return request.app.state.summarizer


def _out(data: TrackingData) -> TrackingDataOut:
    return TrackingDataOut.model_validate(asdict(data))



@router.post(
    "/track",
    response_model=TrackResponse,
    summary="Track a container, booking or bill of lading",
    description="""
Look up one shipment with the tracking provider and return it in the
canonical tracking shape.

Exactly one identifier is required:
```json
{ "containerNumber": "MSKU7750050" }
{ "bookingNumber": "253916247", "scacCode": "MAEU" }
{ "billOfLading": "MAEU253916247" }
```

When the provider call fails the response is a 502, unless
`fallbackToDemo` is set, in which case the demo records are returned with
`source = "demo"`.
""",
)
async def track_shipment(
    body: TrackRequest,
    service: TrackingService = Depends(get_service),
    summarizer: Any = Depends(get_summarizer),
) -> TrackResponse:
    log = _log()
    request_id = str(uuid.uuid4())[:8]
    t0 = time.perf_counter()

    tracking_request = body.to_tracking_request()
    log.info(
        "Tracking request",
        request_id=request_id,
        kind=tracking_request.kind,
        identifier=tracking_request.identifier,
    )

    data = await service.track(tracking_request)

    if data is None:
        if not body.fallback_to_demo:
            raise HTTPException(
                status_code=502,
                detail=f"Tracking provider unavailable for {tracking_request.identifier}",
            )
        DEMO_FALLBACKS.inc()
        log.warning("Serving demo tracking data", request_id=request_id)
        return TrackResponse(
            success=True,
            request_id=request_id,
            source="demo",
            results=[_out(d) for d in service.demo_data()],
        )

    summary: Optional[str] = None
    if body.include_summary:
        try:
            summary = await run_in_threadpool(summarizer.generate, data)
        except Exception as exc:
            log.warning("Summary generation failed", error=str(exc), request_id=request_id)
            summary = f"Summary unavailable: {exc}"

    log.info(
        "Tracking complete",
        request_id=request_id,
        elapsed_ms=round((time.perf_counter() - t0) * 1000),
        status=data.status.value,
    )
    return TrackResponse(
        success=True,
        request_id=request_id,
        source="live",
        results=[_out(data)],
        summary=summary,
    )


@router.post("/track/batch", response_model=BatchTrackResponse, summary="Track several containers at once")
async def track_batch(
    body: BatchTrackRequest,
    service: TrackingService = Depends(get_service),
) -> BatchTrackResponse:
    try:
        requests = [TrackingRequest(container_number=n) for n in body.container_numbers]
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    results = await service.track_many(requests)
    entries = [
        BatchEntry(
            container_number=req.container_number,
            data=_out(data) if data is not None else None,
        )
        for req, data in zip(requests, results)
    ]
    return BatchTrackResponse(
        success=True,
        found=sum(1 for e in entries if e.data is not None),
        results=entries,
    )


@router.get("/vessel/{imo}", summary="Current vessel position from the provider")
async def vessel_position(imo: str, service: TrackingService = Depends(get_service)) -> Any:
    payload = await service.get_vessel_position(imo)
    if payload is None:
        raise HTTPException(status_code=404, detail=f"Vessel {imo} unavailable")
    return payload


@router.get("/demo", response_model=list[TrackingDataOut], summary="Demo tracking records")
async def demo_tracking(service: TrackingService = Depends(get_service)) -> list[TrackingDataOut]:
    return [_out(d) for d in service.demo_data()]


@router.get("/carriers/detect/{number}", response_model=CarrierResponse, summary="Detect carrier from a reference")
async def carrier_detect(number: str) -> CarrierResponse:
    match = detect_carrier(number)
    if match is None:
        raise HTTPException(status_code=404, detail=f"No carrier recognised for '{number}'")
    return CarrierResponse(
        reference=match.reference,
        carrier=match.name,
        reference_type=match.reference_type,
    )


@router.get("/health", summary="Health check")
async def health(request: Request, service: TrackingService = Depends(get_service)) -> dict:
    app_settings = request.app.state.settings
    return {
        "status": "healthy",
        "provider": {
            "base_url":   service.config.base_url,
            "configured": service.is_configured,
        },
        "summaries_enabled": bool(app_settings.groq_api_key),
    }
