"""
Section selection and field extraction for identity-data responses.

The identity-data API returns a list of named section objects. Display
fields live on the section whose ``name`` is ``"main"``:

    [
        {"name": "header", ...},
        {
            "name": "main",
            "logoUrl": "https://...",
            "sectionMain1Description": "...",
            "sectionMain1Background2ImageUrl": "https://...",
            "lastUpdated": "2024-05-01T12:00:00Z"
        },
        {"name": "footer", ...}
    ]

A single bare object is accepted as the main section for older deployments.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import structlog

logger = structlog.get_logger()

MAIN_SECTION_NAME = "main"

LOGO_URL_KEY = "logoUrl"
DESCRIPTION_KEY = "sectionMain1Description"
BACKGROUND_IMAGE_URL_KEY = "sectionMain1Background2ImageUrl"
LAST_UPDATED_KEY = "lastUpdated"

# Characters that render badly in the partner pages, with ASCII stand-ins
TEXT_REPLACEMENTS: dict[str, str] = {
    "\ufffd": "",  # replacement character
    "\u00a0": " ",  # non-breaking space
    "\u2018": "'",  # left single quotation mark
    "\u2019": "'",  # right single quotation mark
    "\u201c": '"',  # left double quotation mark
    "\u201d": '"',  # right double quotation mark
    "\u2013": "-",  # en dash
    "\u2014": "--",  # em dash
    "\u2026": "...",  # horizontal ellipsis
}

_TRANSLATION = str.maketrans(TEXT_REPLACEMENTS)


def clean_text(text: Any) -> Any:
    """
    Replace problematic Unicode punctuation with ASCII and trim whitespace.

    Examples:
        "  It’s here — now  " → "It's here -- now"
        "caf�" → "caf"
        None → None

    Non-string values are returned unchanged.
    """
    if not isinstance(text, str):
        return text
    return text.translate(_TRANSLATION).strip()


def section_names(payload: list[Any]) -> list[str]:
    """Names of the sections in a response list, ``unnamed`` where missing."""
    names = []
    for item in payload:
        name = item.get("name") if isinstance(item, dict) else None
        names.append(name or "unnamed")
    return names


def find_main_section(payload: Any) -> dict[str, Any] | None:
    """
    Select the main section from a decoded response.

    Args:
        payload: Decoded JSON response body

    Returns:
        The bare object as-is, the first list element named "main",
        or None when there is no main section
    """
    if isinstance(payload, dict):
        if payload.get("name") != MAIN_SECTION_NAME:
            logger.debug("single_section_passthrough", name=payload.get("name"))
        return payload

    if isinstance(payload, list):
        for item in payload:
            if isinstance(item, dict) and item.get("name") == MAIN_SECTION_NAME:
                return item

        if payload:
            logger.warning(
                "main_section_not_found",
                available_sections=", ".join(section_names(payload)),
            )
        else:
            logger.warning("main_section_not_found", reason="empty response list")
        return None

    logger.warning("main_section_not_found", payload_type=type(payload).__name__)
    return None


def _string_field(section: dict[str, Any] | None, key: str) -> str | None:
    if not section:
        return None
    value = section.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def extract_logo_url(section: dict[str, Any] | None) -> str | None:
    return _string_field(section, LOGO_URL_KEY)


def extract_description(section: dict[str, Any] | None) -> str | None:
    """Description with ``clean_text`` applied; None when blank after cleaning."""
    raw = _string_field(section, DESCRIPTION_KEY)
    if raw is None:
        return None
    return clean_text(raw) or None


def extract_background_image_url(section: dict[str, Any] | None) -> str | None:
    return _string_field(section, BACKGROUND_IMAGE_URL_KEY)


def extract_last_updated(section: dict[str, Any] | None) -> datetime | None:
    raw = _string_field(section, LAST_UPDATED_KEY)
    if raw is None:
        return None
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("last_updated_unparseable", value=raw)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class MainSectionFields:
    """Display fields extracted from a main section."""

    logo_url: str | None = None
    section_description: str | None = None
    background_image_url: str | None = None
    last_updated: datetime | None = None
    raw_section: dict[str, Any] | None = None

    @classmethod
    def from_section(cls, section: dict[str, Any] | None) -> MainSectionFields:
        return cls(
            logo_url=extract_logo_url(section),
            section_description=extract_description(section),
            background_image_url=extract_background_image_url(section),
            last_updated=extract_last_updated(section),
            raw_section=section,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the API's field names."""
        return {
            LOGO_URL_KEY: self.logo_url,
            DESCRIPTION_KEY: self.section_description,
            BACKGROUND_IMAGE_URL_KEY: self.background_image_url,
            LAST_UPDATED_KEY: self.last_updated.isoformat() if self.last_updated else None,
            "rawData": self.raw_section,
        }
