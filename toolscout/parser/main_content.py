"""
Main-content locator: isolates the primary readable region of a page.
"""
from __future__ import annotations

import copy
from typing import Final, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from toolscout.logger import get_logger
from toolscout.models import BilingualContent
from toolscout.parser.html_parser import WrapFn
from toolscout.translation import wrap as default_wrap

logger = get_logger("main_content")

__all__: Sequence[str] = ("CONTENT_SELECTORS", "STRIP_SELECTORS", "locate_main_content")

# Checked in order; the first container with enough text wins.
CONTENT_SELECTORS: Final[tuple[str, ...]] = (
    "article",
    "main",
    ".content",
    "#content",
    ".post-content",
    ".entry-content",
    ".article-content",
)

# Page chrome removed from <body> when no container qualifies.
STRIP_SELECTORS: Final[tuple[str, ...]] = (
    "nav", "header", "footer", "aside",
    ".nav", ".header", ".footer", ".sidebar",
    "#nav", "#header", "#footer", "#sidebar",
    ".navigation", ".menu", ".comments", ".ads", ".advertisement",
)

_INVISIBLE: Final[tuple[str, ...]] = ("script", "style", "noscript", "template")


def _text(tag: Tag) -> str:
    return " ".join(tag.stripped_strings)


def locate_main_content(
    soup: BeautifulSoup,
    wrap: WrapFn = default_wrap,
    *,
    min_length: int = 100,
    max_length: int = 5000,
) -> BilingualContent:
    """Return the page's main text, truncated to *max_length* and wrapped.

    The caller's tree is left untouched; all removals happen on a copy.
    """
    work = copy.copy(soup)
    for element in work(list(_INVISIBLE)):
        element.decompose()

    content = ""
    for selector in CONTENT_SELECTORS:
        element = work.select_one(selector)
        if element is None:
            continue
        text = _text(element)
        if len(text) > min_length:
            logger.debug("Main content matched selector %r (%d chars)", selector, len(text))
            content = text
            break
    else:
        body = work.body or work
        for selector in STRIP_SELECTORS:
            for element in body.select(selector):
                element.decompose()
        content = _text(body)
        logger.debug("No content container found, using stripped body (%d chars)", len(content))

    return wrap(content[:max_length])
