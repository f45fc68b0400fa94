"""
adiparse: Accumulate identity helpers.

Parses identity URLs, builds BankOnLedger and Qoboto partner links and
fetches display data (logo, description, background image) from the Qoboto
identity-data API.
"""

from adiparse.cache import ResponseCache
from adiparse.clients import FetchResult, MainSectionFields, QobotoClient, clean_text
from adiparse.core.errors import AdiParseError, FailureKind
from adiparse.identity import (
    ParsedIdentity,
    ParseResult,
    normalize_identity_url,
    parse_identity_url,
)
from adiparse.network import NetworkContext
from adiparse.record import (
    DisplayField,
    DisplayRecord,
    FieldState,
    IdentityRecord,
    IdentityRecordFactory,
)
from adiparse.service import AdiParse
from adiparse.urls import BANK_ON_LEDGER_DOMAIN, QOBOTO_DOMAIN, PartnerUrlBuilder

__version__ = "0.1.0"

__all__ = [
    "AdiParse",
    "AdiParseError",
    "BANK_ON_LEDGER_DOMAIN",
    "DisplayField",
    "DisplayRecord",
    "FailureKind",
    "FetchResult",
    "FieldState",
    "IdentityRecord",
    "IdentityRecordFactory",
    "MainSectionFields",
    "NetworkContext",
    "ParseResult",
    "ParsedIdentity",
    "PartnerUrlBuilder",
    "QOBOTO_DOMAIN",
    "QobotoClient",
    "ResponseCache",
    "clean_text",
    "normalize_identity_url",
    "parse_identity_url",
]
