# toolscout/cache.py
"""
In-memory result cache keyed by the raw URL string.

No expiry and no eviction: entries live as long as the owning
:class:`~toolscout.engine.Scraper`, or the whole process for the instance
behind :func:`~toolscout.engine.scrape_url`.
"""
from __future__ import annotations

from typing import Dict, Optional

from toolscout.logger import get_logger
from toolscout.models import ScrapedMetadata

logger = get_logger("cache")


class ResultCache:
    """Plain dict-backed store; every write fully replaces the previous value."""

    def __init__(self) -> None:
        self._entries: Dict[str, ScrapedMetadata] = {}

    def get(self, url: str) -> Optional[ScrapedMetadata]:
        return self._entries.get(url)

    def set(self, url: str, metadata: ScrapedMetadata) -> None:
        self._entries[url] = metadata
        logger.debug("Cached %s (%d entries)", url, len(self._entries))

    def clear(self) -> None:
        self._entries.clear()

    def size(self) -> int:
        return len(self._entries)

    def __contains__(self, url: object) -> bool:
        return url in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["ResultCache"]
