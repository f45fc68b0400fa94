"""
Identity locator normalization and parsing.

Turns loosely formatted Accumulate identity strings into canonical
``acc://<name>.acme`` locators and decomposes them into root name and
sub path.
"""

from adiparse.identity.models import ParsedIdentity, ParseResult
from adiparse.identity.normalizer import (
    IDENTITY_SCHEME,
    IDENTITY_SUFFIX,
    fix_identity_url,
    identity_url_from_name,
    normalize_identity_url,
    strip_scheme,
)
from adiparse.identity.parser import IDENTITY_PATTERN, parse_identity_url, path_train

__all__ = [
    # Models
    "ParsedIdentity",
    "ParseResult",
    # Normalizer
    "IDENTITY_SCHEME",
    "IDENTITY_SUFFIX",
    "fix_identity_url",
    "identity_url_from_name",
    "normalize_identity_url",
    "strip_scheme",
    # Parser
    "IDENTITY_PATTERN",
    "parse_identity_url",
    "path_train",
]
