"""Canonical form of album titles and artist names for equality checks.

``normalize`` is the only way names are compared: the history side and the library
side must both go through it. It is idempotent, so already-normalized text (such as
the search query sent to the library) may safely be normalized again.
"""

from __future__ import annotations

import re

# One parenthesized group closing the string, e.g. "(Deluxe Edition)".
_TRAILING_PARENTHESIZED = re.compile(r"\([^)]*\)\Z")
_WHITESPACE_RUN = re.compile(r"\s+")


def _keep(char: str) -> bool:
    # ASCII digits only; superscripts and other numeric symbols are dropped.
    return char.isalpha() or "0" <= char <= "9" or char == " "


def normalize(text: str) -> str:
    cleaned = text.strip()
    cleaned = _TRAILING_PARENTHESIZED.sub("", cleaned, count=1)
    cleaned = "".join(char for char in cleaned if _keep(char))
    cleaned = _WHITESPACE_RUN.sub(" ", cleaned)
    return cleaned.strip()


def names_equal(left: str, right: str) -> bool:
    """Case-insensitive equality after normalizing both sides."""

    return normalize(left).casefold() == normalize(right).casefold()
