"""
HTTP client for the third-party title-search provider.

Two API families live on the same host:

* the national titles API (address search + status of an address-search order)
* the property-enquiry API (document orders + downloads)

Credentials are injected by :func:`shared.security.provider_headers`, so every
call uses the same header and scheme.
"""
from dataclasses import dataclass
from typing import Optional

import httpx
import structlog

from shared.config import settings
from shared.security import provider_headers, redacted
from .errors import ProviderError, ProviderUnavailable

logger = structlog.get_logger(__name__)


@dataclass
class ProviderDownload:
    content: bytes
    content_type: Optional[str]
    content_disposition: Optional[str]


class ProviderClient:
    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None, timeout: Optional[float] = None):
        # transport is injectable so tests can stand in for the provider
        self.transport = transport
        self.timeout = timeout if timeout is not None else settings.PROVIDER_TIMEOUT

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=settings.PROVIDER_HOST,
            timeout=self.timeout,
            transport=self.transport,
        )

    async def _send(self, method: str, url: str, json_body: bool = True, **kwargs) -> httpx.Response:
        headers = provider_headers(json_body=json_body)
        logger.info("provider_request", method=method, url=url, headers=redacted(headers))
        try:
            async with self._client() as client:
                resp = await client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error("provider_unreachable", method=method, url=url, error=str(e))
            raise ProviderUnavailable(str(e)) from e

        if resp.is_error:
            logger.error(
                "provider_error",
                method=method,
                url=url,
                status_code=resp.status_code,
                body=resp.text[:500],
            )
            raise ProviderError(resp.status_code, resp.text, resp.reason_phrase)
        return resp

    @staticmethod
    def _json(resp: httpx.Response):
        try:
            return resp.json()
        except ValueError as e:
            logger.error("provider_invalid_json", status_code=resp.status_code, body=resp.text[:150])
            raise ProviderUnavailable(f"Invalid JSON from provider (HTTP {resp.status_code})") from e

    # --- national titles API ---

    async def search_address(self, state: str, body: dict) -> dict:
        """POST an address search; ``state`` travels as a query parameter."""
        resp = await self._send(
            "POST", settings.PROVIDER_TITLES_PATH, params={"state": state}, json=body
        )
        return self._json(resp)

    async def get_search_status(self, order_id: str) -> dict:
        resp = await self._send("GET", f"{settings.PROVIDER_TITLES_PATH}/{order_id}")
        return self._json(resp)

    # --- property-enquiry API ---

    async def place_order(self, payload: dict) -> dict:
        resp = await self._send("POST", f"{settings.PROVIDER_ENQUIRY_PATH}/orders", json=payload)
        return self._json(resp)

    async def download(self, order_id: str) -> ProviderDownload:
        resp = await self._send(
            "GET", f"{settings.PROVIDER_ENQUIRY_PATH}/orders/{order_id}/download", json_body=False
        )
        return ProviderDownload(
            content=resp.content,
            content_type=resp.headers.get("Content-Type"),
            content_disposition=resp.headers.get("Content-Disposition"),
        )


def get_provider_client() -> ProviderClient:
    """FastAPI dependency; overridden in tests with a client on a mock transport."""
    return ProviderClient()
