"""
Identity URL normalization.

Turns loosely formatted Accumulate identity strings into the canonical
``acc://<name>.acme[/<sub/path>]`` locator. Users type identities in many
shapes (``SunStream``, ``sunstream.acme``, ``acc://sunstream.acme/blog/``);
all of them normalize to the same locator.
"""

from __future__ import annotations

import re

IDENTITY_SCHEME = "acc://"
IDENTITY_SUFFIX = ".acme"

_TRAILING_SLASHES = re.compile(r"/+$")


def fix_identity_url(url: str) -> str:
    """Lowercase and drop trailing slashes."""
    url = url.lower()
    return _TRAILING_SLASHES.sub("", url)


def normalize_identity_url(raw: str | None) -> str | None:
    """
    Normalize an identity string to its canonical locator.

    Examples:
        sunstream → acc://sunstream.acme
        SunStream.ACME → acc://sunstream.acme
        acc://sunstream.acme/blog/ → acc://sunstream.acme/blog
        sunstream/blog → acc://sunstream.acme/blog

    Args:
        raw: Identity string as typed by a user

    Returns:
        Canonical locator, or None for empty/blank input
    """
    if raw is None or not raw.strip():
        return None

    url = fix_identity_url(raw.strip())

    if url.startswith(IDENTITY_SCHEME):
        path = url[len(IDENTITY_SCHEME) :]
    else:
        path = url

    # Suffix belongs to the root segment, ahead of any sub path
    root, sep, rest = path.partition("/")
    if not root.endswith(IDENTITY_SUFFIX):
        root = f"{root}{IDENTITY_SUFFIX}"

    return f"{IDENTITY_SCHEME}{root}{sep}{rest}"


def identity_url_from_name(name: str) -> str | None:
    """Build the canonical locator for a bare root name like ``sunstream``."""
    return normalize_identity_url(name)


def strip_scheme(locator: str) -> str:
    """Drop the ``acc://`` prefix (``acc://sunstream.acme`` → ``sunstream.acme``)."""
    if locator.startswith(IDENTITY_SCHEME):
        return locator[len(IDENTITY_SCHEME) :]
    return locator
