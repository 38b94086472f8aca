# File: toolscout/engine.py
"""toolscout.engine: Orchestration layer: fetch → extract → classify → generate → validate → cache."""

from __future__ import annotations

import asyncio
from typing import Dict, Optional, Tuple

from aiohttp import ClientSession
from pydantic import ValidationError

from toolscout.cache import ResultCache
from toolscout.classifier import classify_categories, classify_tags
from toolscout.config import ScraperConfig
from toolscout.crawler.fetcher import Fetcher
from toolscout.exceptions import InvalidURLError, MetadataValidationError
from toolscout.generator import generate_content
from toolscout.logger import get_logger
from toolscout.models import ScrapedMetadata
from toolscout.parser.html_parser import WrapFn, parse_html
from toolscout.parser.main_content import locate_main_content
from toolscout.parser.pricing import extract_pricing
from toolscout.translation import BilingualWrapper
from toolscout.utils import is_valid_url

logger = get_logger("engine")

__all__ = [
    "Scraper",
    "build_metadata",
    "scrape_url",
    "clear_shared_cache",
    "shared_cache_size",
]

# Process-lifetime cache used by scrape_url (and the CLI).
_shared_cache = ResultCache()


def build_metadata(
    html: str,
    url: str,
    wrap: WrapFn,
    config: Optional[ScraperConfig] = None,
) -> ScrapedMetadata:
    """Run extraction, classification, generation and validation on fetched HTML.

    Raises MetadataValidationError if the assembled record breaks the schema.
    """
    config = config or ScraperConfig()

    page = parse_html(html, url, wrap)
    if page.soup is None:
        raise RuntimeError("Parsed page has no document tree")
    main_content = locate_main_content(
        page.soup,
        wrap,
        min_length=config.min_content_length,
        max_length=config.max_content_length,
    )
    pricing = extract_pricing(page.soup)

    tags = classify_tags(
        page.title, page.description, page.keywords, pricing=pricing, existing=page.tags
    )
    categories = classify_categories(
        page.title, page.description, page.keywords, existing=page.categories
    )
    generated = generate_content(page, pricing, wrap)

    try:
        return ScrapedMetadata(
            url=url,
            domain=page.domain,
            name=page.name,
            title=page.title,
            description=page.description,
            og_title=page.og_title,
            og_description=page.og_description,
            og_image=page.og_image,
            twitter_title=page.twitter_title,
            twitter_description=page.twitter_description,
            twitter_card=page.twitter_card,
            twitter_site=page.twitter_site,
            twitter_creator=page.twitter_creator,
            twitter_image=page.twitter_image,
            main_content=main_content,
            favicon=page.favicon,
            keywords=page.keywords,
            author=page.author,
            language=page.language,
            theme_color=page.theme_color,
            type=page.og_type,
            published_time=page.published_time,
            modified_time=page.modified_time,
            tags=tags,
            categories=categories,
            pricing=pricing,
            generated_content=generated,
        )
    except ValidationError as exc:
        raise MetadataValidationError(url, str(exc)) from exc


class Scraper:
    """Фасад для CLI и тестов: кэш, загрузка страницы и сборка метаданных.

    Use as ``async with Scraper(config) as scraper`` to share one HTTP session
    between calls; without the context every fetch opens its own session.
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        cache: Optional[ResultCache] = None,
        wrapper: Optional[WrapFn] = None,
    ) -> None:
        self.config = config or ScraperConfig()
        self.cache = cache if cache is not None else ResultCache()
        self.wrap: WrapFn = wrapper or BilingualWrapper(
            source_language=self.config.source_language,
            target_language=self.config.target_language,
        )
        self.fetcher = Fetcher(self.config)
        self._session: Optional[ClientSession] = None
        self._inflight: Dict[Tuple[str, bool], asyncio.Task[ScrapedMetadata]] = {}

    async def __aenter__(self) -> Scraper:
        self._session = self.fetcher.new_session()
        self.fetcher.session = self._session
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.fetcher.session = None
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def scrape(self, url: str, use_cache: bool = True) -> ScrapedMetadata:
        """Return metadata for *url*, from the cache when allowed."""
        if not isinstance(url, str) or not is_valid_url(url):
            raise InvalidURLError(str(url))

        if use_cache:
            cached = self.cache.get(url)
            if cached is not None:
                logger.debug("Cache hit: %s", url)
                return cached

        if not self.config.coalesce_requests:
            return await self._run(url, use_cache)

        # runs are shared only between callers with the same cache policy
        key = (url, use_cache)
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._run(url, use_cache))
            self._inflight[key] = task
            task.add_done_callback(lambda _t: self._inflight.pop(key, None))
        else:
            logger.debug("Joining in-flight scrape: %s", url)
        return await asyncio.shield(task)

    async def _run(self, url: str, use_cache: bool) -> ScrapedMetadata:
        try:
            page = await self.fetcher.fetch(url)
            metadata = build_metadata(page.content, url, self.wrap, self.config)
        except Exception as exc:
            logger.error("Scrape failed for %s: %s", url, exc)
            raise

        if use_cache:
            self.cache.set(url, metadata)
        logger.info("Scraped %s: %d tags, %d categories", url, len(metadata.tags), len(metadata.categories))
        return metadata

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_size(self) -> int:
        return self.cache.size()


async def scrape_url(
    url: str,
    config: Optional[ScraperConfig] = None,
    use_cache: bool = True,
) -> ScrapedMetadata:
    """
    Запускает Scraper в контексте и возвращает метаданные одной страницы.

    Parameters
    ----------
    url : str
        Абсолютный URL страницы.
    config : ScraperConfig, optional
        Конфигурация скрапера.
    use_cache : bool
        Использовать ли общий кэш результатов процесса.
    """
    async with Scraper(config, cache=_shared_cache) as scraper:
        return await scraper.scrape(url, use_cache=use_cache)


def clear_shared_cache() -> None:
    """Очищает общий кэш, используемый scrape_url."""
    _shared_cache.clear()


def shared_cache_size() -> int:
    """Число URL в общем кэше scrape_url."""
    return _shared_cache.size()
