"""
Identity URL parsing.

Decomposes a canonical ``acc://<name>.acme[/<remainder>]`` locator into its
root name and sub path. Anything else yields a failed ``ParseResult`` rather
than an exception.
"""

from __future__ import annotations

import re

from adiparse.identity.models import ParsedIdentity, ParseResult
from adiparse.identity.normalizer import normalize_identity_url

IDENTITY_PATTERN = re.compile(r"^acc://(?P<name>[^/.]+)\.acme(?:/(?P<remainder>.*))?$")


def path_train(root_name: str, remainder: str) -> str:
    """
    Flatten a root name and sub path into a dotted name.

    Examples:
        path_train("sunstream", "") → "sunstream"
        path_train("sunstream", "blog/2024") → "sunstream.blog.2024"
        path_train("sunstream", "blog//2024") → "sunstream.blog.2024"
    """
    segments = [segment for segment in remainder.split("/") if segment]
    return ".".join([root_name, *segments])


def parse_identity_url(raw: str | None) -> ParseResult:
    """
    Parse an identity string into its components.

    The input is normalized first, so ``sunstream`` and
    ``ACC://SunStream.acme/`` parse the same as ``acc://sunstream.acme``.

    Args:
        raw: Identity string in any accepted shape

    Returns:
        ParseResult with the ParsedIdentity, or a reason when it cannot be parsed
    """
    canonical = normalize_identity_url(raw)
    if canonical is None:
        return ParseResult(query=raw, identity=None, reason="empty identity url")

    match = IDENTITY_PATTERN.match(canonical)
    if not match:
        return ParseResult(
            query=raw,
            identity=None,
            reason=f"invalid identity url format: {canonical}",
        )

    root_name = match.group("name")
    remainder = match.group("remainder") or ""

    identity = ParsedIdentity(
        canonical_url=canonical,
        root_name=root_name,
        sub_path=remainder,
        path_train=path_train(root_name, remainder),
    )
    return ParseResult(query=raw, identity=identity)
