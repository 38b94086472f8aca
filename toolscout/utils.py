# File: toolscout/utils.py
"""toolscout.utils: Утилитарные функции для обработки URL и списков."""

from __future__ import annotations

from typing import Collection, List, Sequence
from urllib.parse import urlparse

from toolscout.logger import logger

__all__: Sequence[str] = (
    "is_valid_url",
    "derive_domain",
    "derive_name",
    "remove_duplicates",
)


def is_valid_url(url: str) -> bool:
    """Проверяет, что URL абсолютный, использует http(s) и содержит хост."""
    try:
        parsed = urlparse(url)
        valid = parsed.scheme in ("http", "https") and bool(parsed.hostname)
    except ValueError as exc:
        logger.debug("URL validation error %s: %s", url, exc)
        return False
    logger.debug("URL valid: %s -> %s", url, valid)
    return valid


def derive_domain(url: str) -> str:
    """Возвращает хост URL без ведущего ``www.``."""
    host = urlparse(url).hostname or ""
    return host.removeprefix("www.")


def derive_name(domain: str) -> str:
    """Первая метка домена с заглавной первой буквой: ``example.com`` -> ``Example``."""
    label = domain.split(".")[0]
    return label[:1].upper() + label[1:]


def remove_duplicates(items: Collection[str]) -> List[str]:
    """Удаляет дубликаты, сохраняя порядок первого появления."""
    unique = list(dict.fromkeys(items))
    removed = len(items) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate entries", removed)
    return unique
