"""
Identity models for Accumulate identity locators.

Provides the structured decomposition of a canonical locator and the
outcome type returned by the parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from adiparse.core.errors import FailureKind
from adiparse.identity.normalizer import IDENTITY_SCHEME, IDENTITY_SUFFIX


@dataclass(frozen=True)
class ParsedIdentity:
    """Decomposed canonical identity locator."""

    canonical_url: str  # acc://sunstream.acme/blog
    root_name: str  # sunstream
    sub_path: str = ""  # blog

    # Root name plus sub path segments joined with dots: sunstream.blog
    path_train: str = ""

    @property
    def path(self) -> str:
        """Locator without the scheme (``sunstream.acme/blog``)."""
        return self.canonical_url[len(IDENTITY_SCHEME) :]

    @property
    def root_url(self) -> str:
        """Locator of the root identity (``acc://sunstream.acme``)."""
        return f"{IDENTITY_SCHEME}{self.root_name}{IDENTITY_SUFFIX}"

    @property
    def data_account_url(self) -> str:
        """Value sent to the identity-data API as ``DataAccountUrl``."""
        return self.path

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "canonical_url": self.canonical_url,
            "root_name": self.root_name,
            "sub_path": self.sub_path,
            "path_train": self.path_train,
            "root_url": self.root_url,
        }


@dataclass(frozen=True)
class ParseResult:
    """Result of a parse attempt."""

    query: str | None  # Input as given
    identity: ParsedIdentity | None  # None when the input could not be parsed
    reason: str | None = None  # Why parsing failed

    @property
    def parsed(self) -> bool:
        """Whether the input was a valid identity locator."""
        return self.identity is not None

    @property
    def failure(self) -> FailureKind | None:
        return None if self.parsed else FailureKind.MALFORMED_LOCATOR
