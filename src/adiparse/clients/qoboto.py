"""
Qoboto identity-data API client.

Fetches the section list for an identity from
``GET /api/v1/{provider}/GetDataValue/All?DataAccountUrl=<identity>``,
selects the section named "main" and caches it for a few minutes.

Every failure (transport, HTTP status, malformed JSON, missing main section)
is reported as a ``FetchResult`` carrying a ``FailureKind``; nothing raises
past ``fetch_section``.
"""

from __future__ import annotations

import asyncio
import copy
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import httpx
import structlog

from adiparse.cache import DEFAULT_TTL_SECONDS, ResponseCache
from adiparse.clients.base import BaseHTTPClient, decode_json
from adiparse.clients.sections import (
    MAIN_SECTION_NAME,
    MainSectionFields,
    extract_background_image_url,
    extract_description,
    extract_logo_url,
    find_main_section,
)
from adiparse.core.errors import (
    FailureKind,
    MalformedResponseError,
    TransportError,
    format_error_message,
)
from adiparse.identity.normalizer import strip_scheme

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://localhost:7033"
DEFAULT_PROVIDER = "Qoboto"
DEFAULT_MOCK_LATENCY = 0.2

MOCK_ASSET_BASE_URL = "https://pub-1c0e543900fc40318aa4c4aec39fb352.r2.dev"
MOCK_BACKGROUND_IMAGE_URL = (
    "https://images.unsplash.com/photo-1557804506-669a67965ba0"
    "?ixlib=rb-4.0.3&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D"
    "&auto=format&fit=crop&w=1074&q=80"
)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a main-section fetch."""

    locator: str
    section: dict[str, Any] | None = None
    failure: FailureKind | None = None
    detail: str | None = None
    cached: bool = False

    @property
    def ok(self) -> bool:
        return self.section is not None

    @classmethod
    def failed(cls, locator: str, failure: FailureKind, detail: str | None = None) -> FetchResult:
        return cls(locator=locator, failure=failure, detail=detail)


class QobotoClient(BaseHTTPClient):
    """Qoboto identity-data client with an in-memory response cache."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        provider: str = DEFAULT_PROVIDER,
        cache: ResponseCache[dict[str, Any]] | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        development_mode: bool = False,
        mock_latency: float = DEFAULT_MOCK_LATENCY,
        debug: bool = False,
    ) -> None:
        super().__init__(base_url, timeout=timeout, http_client=http_client)
        self._provider = provider
        self._cache: ResponseCache[dict[str, Any]] = (
            cache if cache is not None else ResponseCache(DEFAULT_TTL_SECONDS)
        )
        self._development_mode = development_mode
        self._mock_latency = mock_latency
        self._debug = debug

    @property
    def cache(self) -> ResponseCache[dict[str, Any]]:
        return self._cache

    @property
    def development_mode(self) -> bool:
        return self._development_mode

    @property
    def debug(self) -> bool:
        return self._debug

    def set_development_mode(self, enabled: bool = True) -> None:
        self._development_mode = enabled
        if enabled:
            logger.info("qoboto_development_mode_enabled")

    def set_debug_mode(self, enabled: bool = True) -> None:
        self._debug = enabled
        if enabled:
            logger.info("qoboto_debug_mode_enabled")

    def _trace(self, event: str, **kwargs: Any) -> None:
        if self._debug:
            logger.debug(event, **kwargs)

    @property
    def data_value_path(self) -> str:
        return f"/api/v1/{self._provider}/GetDataValue/All"

    async def fetch_section(self, locator: str) -> FetchResult:
        """
        Fetch the main section for an identity.

        Args:
            locator: Identity such as ``sunstream.acme``; also the cache key

        Returns:
            FetchResult with the section, or the failure kind
        """
        if self._development_mode:
            await asyncio.sleep(self._mock_latency)
            return FetchResult(locator=locator, section=self.mock_section(locator))

        cached = self._cache.get(locator)
        if cached is not None:
            self._trace("qoboto_cache_hit", locator=locator)
            return FetchResult(locator=locator, section=copy.deepcopy(cached), cached=True)

        data_account_url = strip_scheme(locator)
        self._trace(
            "qoboto_request",
            url=f"{self.base_url}{self.data_value_path}",
            data_account_url=data_account_url,
        )

        try:
            response = await self.get(
                self.data_value_path, params={"DataAccountUrl": data_account_url}
            )
        except TransportError as exc:
            logger.error(
                "qoboto_fetch_failed", locator=locator, error=format_error_message(exc)
            )
            return FetchResult.failed(locator, FailureKind.TRANSPORT, exc.details.get("error"))

        if not response.is_success:
            logger.warning(
                "qoboto_request_failed",
                locator=locator,
                status=response.status_code,
                reason=response.reason_phrase,
            )
            return FetchResult.failed(
                locator,
                FailureKind.HTTP_STATUS,
                f"{response.status_code} {response.reason_phrase}",
            )

        self._trace("qoboto_raw_response", body=response.text[:200])

        try:
            payload = decode_json(response.text)
        except MalformedResponseError as exc:
            logger.error(
                "qoboto_response_malformed", locator=locator, error=format_error_message(exc)
            )
            return FetchResult.failed(locator, FailureKind.MALFORMED_JSON, exc.message)

        section = find_main_section(payload)
        if section is None:
            logger.warning("qoboto_main_section_missing", locator=locator)
            return FetchResult.failed(
                locator,
                FailureKind.MISSING_MAIN_SECTION,
                f'no "{MAIN_SECTION_NAME}" section in response',
            )

        self._trace("qoboto_main_section_found", locator=locator, keys=sorted(section))
        # Callers only ever see copies of the cached section
        self._cache.set(locator, copy.deepcopy(section))
        return FetchResult(locator=locator, section=section)

    async def get_section(self, locator: str) -> dict[str, Any] | None:
        result = await self.fetch_section(locator)
        return result.section

    async def get_logo_url(self, locator: str) -> str | None:
        logo_url = extract_logo_url(await self.get_section(locator))
        self._trace("qoboto_logo_url", locator=locator, logo_url=logo_url)
        return logo_url

    async def get_section_description(self, locator: str) -> str | None:
        description = extract_description(await self.get_section(locator))
        self._trace(
            "qoboto_section_description",
            locator=locator,
            description=description[:100] if description else None,
        )
        return description

    async def get_background_image_url(self, locator: str) -> str | None:
        return extract_background_image_url(await self.get_section(locator))

    async def get_all_fields(self, locator: str) -> MainSectionFields:
        return MainSectionFields.from_section(await self.get_section(locator))

    def clear_cache(self, locator: str | None = None) -> None:
        """Clear one identity's cached section, or all of them."""
        if locator:
            self._cache.delete(locator)
        else:
            self._cache.clear()

    def mock_section(self, locator: str) -> dict[str, Any]:
        """Placeholder main section used in development mode."""
        identity_name = strip_scheme(locator).split(".")[0]
        return {
            "name": MAIN_SECTION_NAME,
            "logoUrl": f"{MOCK_ASSET_BASE_URL}/logo-{identity_name}.png",
            "sectionMain1Description": (
                f"Welcome to {identity_name}'s digital identity space. This is a "
                "comprehensive platform for managing your digital presence and "
                "accessing various blockchain services."
            ),
            "sectionMain1Background2ImageUrl": MOCK_BACKGROUND_IMAGE_URL,
            "lastUpdated": datetime.now(timezone.utc).isoformat(),
            "identityUrl": locator,
        }
