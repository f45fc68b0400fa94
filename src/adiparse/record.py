"""
Per-identity display record.

Resolves the logo, description and background image of one identity. Each
field is resolved independently in priority order:

1. Manual override
2. Memoized value
3. Qoboto client (main section of the identity-data API)
4. Fixed default (memoized as well, so a failing API is not retried)

Clearing a field's cache also evicts the identity's entry in the client
cache so the next read goes back to the API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable

import structlog

from adiparse.clients.qoboto import QobotoClient
from adiparse.clients.sections import (
    MainSectionFields,
    extract_background_image_url,
    extract_description,
    extract_logo_url,
)
from adiparse.core.errors import FailureKind
from adiparse.identity.models import ParsedIdentity
from adiparse.identity.normalizer import identity_url_from_name
from adiparse.identity.parser import parse_identity_url
from adiparse.logging import bind_context

logger = structlog.get_logger()

DEFAULT_LOGO_URL = "https://pub-1c0e543900fc40318aa4c4aec39fb352.r2.dev/logo.png"
DEFAULT_BACKGROUND_IMAGE_URL = (
    "https://images.unsplash.com/photo-1557804506-669a67965ba0"
    "?ixlib=rb-4.0.3&auto=format&fit=crop&w=1074&q=80"
)
DEFAULT_DESCRIPTION_TEMPLATE = "Welcome to {name}'s digital identity dashboard."


class DisplayField(str, Enum):
    """Display fields resolved per identity."""

    LOGO_URL = "logo_url"
    SECTION_DESCRIPTION = "section_description"
    BACKGROUND_IMAGE_URL = "background_image_url"


class FieldState(str, Enum):
    UNSET = "unset"
    OVERRIDDEN = "overridden"
    CACHED = "cached"


class FieldSource(str, Enum):
    """Where a memoized value came from."""

    API = "api"
    DEFAULT = "default"


_EXTRACTORS: dict[DisplayField, Callable[[dict[str, Any] | None], str | None]] = {
    DisplayField.LOGO_URL: extract_logo_url,
    DisplayField.SECTION_DESCRIPTION: extract_description,
    DisplayField.BACKGROUND_IMAGE_URL: extract_background_image_url,
}


@dataclass
class FieldSlot:
    """Override and memo for one display field.

    Presence is ``is not None``: an empty-string override is a real override.
    Empty API values never reach the memo (the client reports them as missing).
    """

    override: str | None = None
    value: str | None = None
    source: FieldSource | None = None
    resolved_at: datetime | None = None

    @property
    def state(self) -> FieldState:
        if self.override is not None:
            return FieldState.OVERRIDDEN
        if self.value is not None:
            return FieldState.CACHED
        return FieldState.UNSET

    def store(self, value: str, source: FieldSource) -> None:
        self.value = value
        self.source = source
        self.resolved_at = datetime.now(timezone.utc)

    def forget(self) -> None:
        self.value = None
        self.source = None
        self.resolved_at = None


@dataclass
class DisplaySlots:
    """Fixed-shape slot set, one per display field."""

    logo_url: FieldSlot = field(default_factory=FieldSlot)
    section_description: FieldSlot = field(default_factory=FieldSlot)
    background_image_url: FieldSlot = field(default_factory=FieldSlot)

    def slot(self, display_field: DisplayField) -> FieldSlot:
        return getattr(self, display_field.value)

    def all(self) -> list[FieldSlot]:
        return [self.logo_url, self.section_description, self.background_image_url]


@dataclass(frozen=True)
class DisplayRecord:
    """Fully resolved display fields for an identity."""

    logo_url: str
    section_description: str
    background_image_url: str
    last_updated: datetime | None = None
    raw_section: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the API's field names."""
        return {
            "logoUrl": self.logo_url,
            "sectionMain1Description": self.section_description,
            "sectionMain1Background2ImageUrl": self.background_image_url,
            "lastUpdated": self.last_updated.isoformat() if self.last_updated else None,
            "rawData": self.raw_section,
        }


class IdentityRecord:
    """Lazily resolved, memoized display fields for one identity."""

    def __init__(self, identity: ParsedIdentity, client: QobotoClient) -> None:
        self.identity = identity
        self._client = client
        self._slots = DisplaySlots()
        self.last_failure: FailureKind | None = None
        self._log = bind_context(identity=identity.canonical_url)

    @property
    def data_account_url(self) -> str:
        """Identity in the form the API expects (``sunstream.acme``)."""
        return self.identity.data_account_url

    def state(self, display_field: DisplayField) -> FieldState:
        return self._slots.slot(display_field).state

    def source(self, display_field: DisplayField) -> FieldSource | None:
        return self._slots.slot(display_field).source

    def default_value(self, display_field: DisplayField) -> str:
        if display_field is DisplayField.LOGO_URL:
            return DEFAULT_LOGO_URL
        if display_field is DisplayField.SECTION_DESCRIPTION:
            return DEFAULT_DESCRIPTION_TEMPLATE.format(name=self.identity.root_name)
        return DEFAULT_BACKGROUND_IMAGE_URL

    async def logo_url(self) -> str:
        return await self.resolve(DisplayField.LOGO_URL)

    async def section_description(self) -> str:
        return await self.resolve(DisplayField.SECTION_DESCRIPTION)

    async def background_image_url(self) -> str:
        return await self.resolve(DisplayField.BACKGROUND_IMAGE_URL)

    async def resolve(self, display_field: DisplayField) -> str:
        """Resolve one field through override, memo, API and default."""
        slot = self._slots.slot(display_field)
        if slot.override is not None:
            return slot.override
        if slot.value is not None:
            return slot.value

        value = await self._fetch_field(display_field)
        if value is not None:
            slot.store(value, FieldSource.API)
            return value

        default = self.default_value(display_field)
        slot.store(default, FieldSource.DEFAULT)
        return default

    async def _fetch_field(self, display_field: DisplayField) -> str | None:
        result = await self._client.fetch_section(self.data_account_url)
        self.last_failure = result.failure
        if not result.ok:
            self._log.info(
                "identity_field_default",
                field=display_field.value,
                failure=result.failure.value if result.failure else None,
                detail=result.detail,
            )
            return None

        value = _EXTRACTORS[display_field](result.section)
        if value is None:
            self._log.info("identity_field_missing", field=display_field.value)
        return value

    async def all_fields(self) -> DisplayRecord:
        """
        Resolve every field, preferring one combined API call.

        Fields present in the combined response are memoized; the rest go
        through the per-field chain, so a partial response still yields a
        complete record. Overrides still win.
        """
        result = await self._client.fetch_section(self.data_account_url)
        self.last_failure = result.failure
        fields = MainSectionFields.from_section(result.section)

        for display_field in DisplayField:
            value = getattr(fields, display_field.value)
            if value is not None:
                self._slots.slot(display_field).store(value, FieldSource.API)

        return DisplayRecord(
            logo_url=await self.logo_url(),
            section_description=await self.section_description(),
            background_image_url=await self.background_image_url(),
            last_updated=fields.last_updated,
            raw_section=result.section,
        )

    def set_override(self, display_field: DisplayField, value: str | None) -> None:
        """Set a manual value for a field; None clears the override."""
        self._slots.slot(display_field).override = value

    def set_custom_logo_url(self, logo_url: str) -> None:
        self.set_override(DisplayField.LOGO_URL, logo_url)

    def set_custom_description(self, description: str) -> None:
        self.set_override(DisplayField.SECTION_DESCRIPTION, description)

    def set_custom_background_image_url(self, background_image_url: str) -> None:
        self.set_override(DisplayField.BACKGROUND_IMAGE_URL, background_image_url)

    def clear_overrides(self, display_field: DisplayField | None = None) -> None:
        if display_field is not None:
            self._slots.slot(display_field).override = None
            return
        for slot in self._slots.all():
            slot.override = None

    def clear_cache(self, display_field: DisplayField | None = None) -> None:
        """Forget memoized values and evict this identity from the client cache."""
        if display_field is not None:
            self._slots.slot(display_field).forget()
        else:
            for slot in self._slots.all():
                slot.forget()
        self._client.clear_cache(self.data_account_url)


class IdentityRecordFactory:
    """Creates IdentityRecords bound to a shared client."""

    def __init__(self, client: QobotoClient) -> None:
        self._client = client

    def create_by_identity_url(self, identity_url: str | None) -> IdentityRecord | None:
        result = parse_identity_url(identity_url)
        if result.identity is None:
            logger.warning("identity_url_invalid", identity_url=identity_url, reason=result.reason)
            return None
        return IdentityRecord(result.identity, self._client)

    def create_by_identity_name(self, identity_name: str | None) -> IdentityRecord | None:
        """Create a record for a bare root name such as ``sunstream``."""
        name = (identity_name or "").strip().lower()
        if not name or "/" in name or "." in name:
            logger.warning("identity_name_invalid", identity_name=identity_name)
            return None
        identity = ParsedIdentity(
            canonical_url=identity_url_from_name(name) or "",
            root_name=name,
            path_train=name,
        )
        return IdentityRecord(identity, self._client)
