from __future__ import annotations

import json
from typing import Any

import httpx
import structlog

from adiparse.core.errors import MalformedResponseError, TransportError

logger = structlog.get_logger()

JSON_MEDIA_TYPE = "application/json; charset=utf-8"


def decode_json(text: str) -> Any:
    """Parse a JSON body, unwrapping one level of double encoding.

    Some API deployments return the JSON document serialized as a JSON
    string; the inner string is parsed again.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(
            "response body is not valid JSON", {"error": str(exc)}
        ) from exc

    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(
                "double-encoded response body is not valid JSON", {"error": str(exc)}
            ) from exc

    return payload


class BaseHTTPClient:
    """Base HTTP client issuing exactly one attempt per request."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def base_url(self) -> str:
        return self._base_url

    def set_base_url(self, base_url: str) -> None:
        self._base_url = base_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        """Override to provide custom headers."""
        return {"Accept": JSON_MEDIA_TYPE, "Content-Type": JSON_MEDIA_TYPE}

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request and return the response whatever its status."""
        url = f"{self._base_url}{path}"
        req_headers = self._headers()
        if headers:
            req_headers.update(headers)

        try:
            if self._http_client is not None:
                return await self._http_client.request(
                    method, url, params=params, headers=req_headers
                )
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                return await client.request(method, url, params=params, headers=req_headers)
        # InvalidURL (malformed base URL) does not derive from HTTPError
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("http_network_error", method=method, url=url, error=str(exc))
            raise TransportError(
                f"{method} {url} failed", {"error": str(exc) or type(exc).__name__}
            ) from exc

    async def get(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Execute GET request."""
        return await self._request("GET", path, params=params, headers=headers)

    async def aclose(self) -> None:
        """Close an injected HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
