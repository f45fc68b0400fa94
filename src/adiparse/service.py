"""
AdiParse facade.

One object holding the collaborators a host page needs: identity parsing,
partner URL generation, per-identity display records and the global knobs
(API base URL, network, debug and development modes, cache clearing).

Usage:
    adi = AdiParse.from_settings()
    adi.bank_on_ledger_url("sunstream")
        → https://sunstream.BankOnLedger.com/?current-network=mainnet
    await adi.logo_url("acc://sunstream.acme")

Unparsable identities give None; everything else gives real data or a
documented default.
"""

from __future__ import annotations

import structlog

from adiparse.cache import ResponseCache
from adiparse.clients.qoboto import QobotoClient
from adiparse.config.settings import Settings, get_settings
from adiparse.identity.models import ParsedIdentity, ParseResult
from adiparse.identity.normalizer import normalize_identity_url
from adiparse.identity.parser import parse_identity_url
from adiparse.logging import set_debug_logging, set_log_level
from adiparse.network import NetworkContext
from adiparse.record import DisplayRecord, IdentityRecord, IdentityRecordFactory
from adiparse.urls import PartnerUrlBuilder

logger = structlog.get_logger()


class AdiParse:
    """Facade over identity parsing, partner URLs and display records."""

    def __init__(
        self,
        *,
        network: NetworkContext,
        url_builder: PartnerUrlBuilder,
        client: QobotoClient,
        records: IdentityRecordFactory,
    ) -> None:
        self.network_context = network
        self.url_builder = url_builder
        self.client = client
        self.records = records

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        client: QobotoClient | None = None,
    ) -> AdiParse:
        """Wire the default collaborators from configuration."""
        settings = settings or get_settings()
        set_log_level(settings.log_level)
        if settings.debug:
            set_debug_logging(True)
        network = NetworkContext(settings.network_name)
        if client is None:
            client = QobotoClient(
                settings.api_base_url,
                provider=settings.api_provider,
                cache=ResponseCache(
                    settings.cache_ttl_seconds, maxsize=settings.cache_max_entries
                ),
                timeout=settings.http_timeout,
                development_mode=settings.development_mode,
                mock_latency=settings.mock_latency_seconds,
                debug=settings.debug,
            )
        return cls(
            network=network,
            url_builder=PartnerUrlBuilder(network),
            client=client,
            records=IdentityRecordFactory(client),
        )

    # Identity parsing

    def normalize(self, identity_url: str | None) -> str | None:
        return normalize_identity_url(identity_url)

    def parse(self, identity_url: str | None) -> ParseResult:
        return parse_identity_url(identity_url)

    # Partner URLs

    def _parsed_or_none(self, identity_url: str | None) -> ParsedIdentity | None:
        result = parse_identity_url(identity_url)
        if result.identity is None:
            logger.warning(
                "partner_url_unavailable", identity_url=identity_url, reason=result.reason
            )
        return result.identity

    def bank_on_ledger_url(self, identity_url: str | None) -> str | None:
        parsed = self._parsed_or_none(identity_url)
        return self.url_builder.bank_on_ledger_url(parsed) if parsed else None

    def qoboto_url(self, identity_url: str | None) -> str | None:
        parsed = self._parsed_or_none(identity_url)
        return self.url_builder.qoboto_url(parsed) if parsed else None

    # Display records

    def record(self, identity_url: str | None) -> IdentityRecord | None:
        return self.records.create_by_identity_url(identity_url)

    def record_by_name(self, identity_name: str | None) -> IdentityRecord | None:
        return self.records.create_by_identity_name(identity_name)

    async def logo_url(self, identity_url: str | None) -> str | None:
        record = self.record(identity_url)
        return await record.logo_url() if record else None

    async def section_description(self, identity_url: str | None) -> str | None:
        record = self.record(identity_url)
        return await record.section_description() if record else None

    async def background_image_url(self, identity_url: str | None) -> str | None:
        record = self.record(identity_url)
        return await record.background_image_url() if record else None

    async def all_fields(self, identity_url: str | None) -> DisplayRecord | None:
        record = self.record(identity_url)
        return await record.all_fields() if record else None

    # Configuration

    def network(self) -> str:
        return self.network_context.current()

    def set_network(self, network_name: str) -> None:
        self.network_context.switch_to(network_name)

    def set_api_base_url(self, base_url: str) -> None:
        self.client.set_base_url(base_url)

    def set_development_mode(self, enabled: bool = True) -> None:
        self.client.set_development_mode(enabled)

    def set_debug_mode(self, enabled: bool = True) -> None:
        set_debug_logging(enabled)
        self.client.set_debug_mode(enabled)

    def clear_cache(self, identity_url: str | None = None) -> None:
        """Clear cached API data for one identity, or for all of them."""
        if identity_url is None:
            self.client.clear_cache()
            return
        record = self.record(identity_url)
        if record is not None:
            record.clear_cache()

    async def aclose(self) -> None:
        await self.client.aclose()
