"""
Исключения ToolScout.

Все ошибки конвейера наследуют :class:`ScrapeError`; сообщение предназначено
для показа пользователю как есть.
"""
from __future__ import annotations

from typing import Optional


class ScrapeError(Exception):
    """Base exception class for scraper errors"""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        self.message = message
        self.url = url
        super().__init__(message)


class InvalidURLError(ScrapeError, ValueError):
    """Raised before any network activity when the input is not an absolute URL"""

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid URL format: {url!r}", url=url)


class FetchError(ScrapeError):
    """Raised when unable to fetch content from URL"""


class HTTPStatusError(FetchError):
    """Raised for non-2xx responses"""

    def __init__(self, url: str, status: int, reason: Optional[str] = None) -> None:
        self.status = status
        super().__init__(f"Failed to fetch URL: {reason or 'HTTP error'} ({status})", url=url)


class ContentTypeError(FetchError):
    """Raised when the response is not an HTML document"""

    def __init__(self, url: str, content_type: str) -> None:
        self.content_type = content_type
        super().__init__(
            f"URL does not return HTML content: {content_type or 'unknown content type'}",
            url=url,
        )


class FetchTimeoutError(FetchError):
    """Raised when the fetch exceeds the configured deadline"""

    def __init__(self, url: str, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Request timed out after {timeout:g} seconds", url=url)


class MetadataValidationError(ScrapeError):
    """Raised when the assembled record does not satisfy the schema"""

    def __init__(self, url: str, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Metadata validation failed: {detail}", url=url)


__all__ = [
    "ScrapeError",
    "InvalidURLError",
    "FetchError",
    "HTTPStatusError",
    "ContentTypeError",
    "FetchTimeoutError",
    "MetadataValidationError",
]
