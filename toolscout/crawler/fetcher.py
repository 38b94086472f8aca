# toolscout/crawler/fetcher.py
"""
Fetcher module: a single HTTP GET with browser-like headers and a hard timeout.

There is no retry: every failure surfaces as a
:class:`~toolscout.exceptions.FetchError` subclass.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from toolscout.config import ScraperConfig
from toolscout.exceptions import (
    ContentTypeError,
    FetchError,
    FetchTimeoutError,
    HTTPStatusError,
)
from toolscout.logger import get_logger

logger = get_logger("fetcher")


@dataclass(slots=True)
class PageData:
    """Holds the requested URL and the HTML returned for it."""

    url: str
    content: str


class Fetcher:
    """Fetches HTML documents, using *session* if given or a short-lived one."""

    def __init__(self, config: ScraperConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session

    def new_session(self) -> ClientSession:
        return ClientSession(
            timeout=ClientTimeout(total=self.config.timeout),
            headers=self.config.request_headers(),
            raise_for_status=False,
        )

    async def fetch(self, url: str) -> PageData:
        """
        GET *url* and return its HTML.

        Raises FetchTimeoutError past the deadline, HTTPStatusError on non-2xx,
        ContentTypeError on non-HTML responses and FetchError on transport errors.
        """
        if self.session is not None:
            return await self._fetch(self.session, url)
        async with self.new_session() as session:
            return await self._fetch(session, url)

    async def _fetch(self, session: ClientSession, url: str) -> PageData:
        logger.info("Fetching %s", url)
        try:
            async with asyncio.timeout(self.config.timeout):
                async with session.get(url, headers=self.config.request_headers()) as resp:
                    if not 200 <= resp.status < 300:
                        raise HTTPStatusError(url, resp.status, resp.reason)
                    ctype = resp.headers.get("Content-Type", "")
                    if "text/html" not in ctype.lower():
                        raise ContentTypeError(url, ctype)
                    text = await resp.text(errors="replace")
        except TimeoutError as exc:
            logger.warning("Timed out after %ss: %s", self.config.timeout, url)
            raise FetchTimeoutError(url, self.config.timeout) from exc
        except ClientError as exc:
            logger.warning("Failed %s: %s", url, exc)
            raise FetchError(f"Failed to fetch URL: {exc}", url=url) from exc
        return PageData(url, text)
