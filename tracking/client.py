"""
tracking/client.py
Thin async HTTP wrapper around the container tracking provider.

Every failure (transport error, non-2xx status, undecodable body) is logged
and returned as None.  Nothing raises past this boundary; retries and
fallbacks are the caller's decision.
"""
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from config.settings import PLACEHOLDER_API_KEY
from monitoring import PROVIDER_FAILURES, async_timed, get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class ProviderConfig:
    """Connection settings for one tracking provider."""
    base_url: str
    api_key: str = PLACEHOLDER_API_KEY
    transport: Optional[httpx.AsyncBaseTransport] = None

    @property
    def has_live_key(self) -> bool:
        return bool(self.api_key) and self.api_key != PLACEHOLDER_API_KEY


class VizionClient:
    """Issues authenticated calls to the provider and returns raw JSON."""

    def __init__(self, config: ProviderConfig) -> None:
        self._config = config

    @property
    def config(self) -> ProviderConfig:
        return self._config

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type":  "application/json",
            "Authorization": f"Bearer {self._config.api_key}",
        }

    async def request(
        self,
        method: str,
        path: str,
        json_body: Optional[dict[str, Any]] = None,
    ) -> Optional[Any]:
        """
        Perform one call against the provider.

        Returns:
            Parsed JSON body on a 2xx response, otherwise None.
        """
        url = f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"
        try:
            async with httpx.AsyncClient(transport=self._config.transport) as client:
                response = await client.request(method, url, json=json_body, headers=self._headers())
        except httpx.InvalidURL as exc:
            log.error("Provider URL rejected", method=method, path=path, error=str(exc))
            PROVIDER_FAILURES.labels(reason="invalid_url").inc()
            return None
        except httpx.HTTPError as exc:
            log.error("Provider request failed", method=method, path=path, error=str(exc))
            PROVIDER_FAILURES.labels(reason="transport").inc()
            return None

        if not response.is_success:
            log.warning("Provider returned error status", method=method, path=path, status=response.status_code)
            PROVIDER_FAILURES.labels(reason="http_status").inc()
            return None

        try:
            return response.json()
        except ValueError as exc:
            log.error("Provider returned invalid JSON", method=method, path=path, error=str(exc))
            PROVIDER_FAILURES.labels(reason="invalid_json").inc()
            return None

    @async_timed("track")
    async def post_track(self, body: dict[str, Any]) -> Optional[Any]:
        return await self.request("POST", "/track", json_body=body)

    @async_timed("vessel")
    async def get_vessel(self, imo: str) -> Optional[Any]:
        return await self.request("GET", f"/vessel/{imo}")
