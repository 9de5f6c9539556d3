"""monitoring package"""
from .logger import (
    logger,
    metrics,
    async_timed,
    start_metrics_server,
    get_logger,
    TRACK_REQUESTS,
    PROVIDER_LATENCY,
    PROVIDER_FAILURES,
    DEMO_FALLBACKS,
)

__all__ = [
    "logger", "metrics", "async_timed", "start_metrics_server",
    "get_logger", "TRACK_REQUESTS", "PROVIDER_LATENCY",
    "PROVIDER_FAILURES", "DEMO_FALLBACKS",
]
