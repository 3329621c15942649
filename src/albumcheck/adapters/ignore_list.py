"""Load the list of Last.fm album URLs that should never be recommended."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


def parse_ignore_list(text: str) -> frozenset[str]:
    return frozenset(line.strip() for line in text.splitlines() if line.strip())


def load_ignored_urls(path: Path | None) -> frozenset[str]:
    """Read one URL per line; a missing or unreadable file yields an empty set."""

    if path is None:
        return frozenset()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Could not read ignore file %s: %s", path, exc)
        return frozenset()
    ignored = parse_ignore_list(text)
    log.debug("Loaded %s ignored URLs from %s", len(ignored), path)
    return ignored
