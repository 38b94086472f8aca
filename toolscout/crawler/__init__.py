"""toolscout.crawler: загрузка HTML-страниц по HTTP."""

from toolscout.crawler.fetcher import Fetcher, PageData

__all__ = ["Fetcher", "PageData"]
