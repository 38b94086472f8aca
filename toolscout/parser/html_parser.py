# === FILE: toolscout/parser/html_parser.py ===
"""HTML field extraction for ToolScout.

:func:`parse_html` turns raw markup plus its source URL into a flat
:class:`ParsedPage`:

* identity: ``url``, ``domain`` (host without ``www.``), ``name``.
* text fields: title, description, Open Graph and Twitter title/description,
  each wrapped into :class:`~toolscout.models.BilingualContent`.
* scalar fields: images, card info, author, keywords, language, theme colour,
  article timestamps, absolute favicon URL.
* earliest-guess ``tags``/``categories`` from ``.tag``/``[data-tag]`` style
  markers.

Missing fields default to ``""``/``[]``/``None``; extraction never fails
because an optional field is absent.  The parsed tree is kept on the page so
that the content locator and the pricing heuristic reuse it.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from toolscout.models import BilingualContent
from toolscout.translation import wrap as default_wrap
from toolscout.utils import derive_domain, derive_name, remove_duplicates

__all__: Sequence[str] = ("ParsedPage", "parse_html", "WrapFn")

WrapFn = Callable[[str], BilingualContent]

_TAG_SELECTOR = ".tag, .tags, [data-tag], [data-tags]"
_CATEGORY_SELECTOR = ".category, .categories, [data-category], [data-categories]"


@dataclass(slots=True)
class ParsedPage:
    """Raw fields pulled out of one HTML document."""

    url: str
    domain: str
    name: str
    title: BilingualContent
    description: BilingualContent
    og_title: Optional[BilingualContent] = None
    og_description: Optional[BilingualContent] = None
    og_image: str = ""
    og_type: str = ""
    twitter_card: str = ""
    twitter_site: str = ""
    twitter_creator: str = ""
    twitter_image: str = ""
    twitter_title: Optional[BilingualContent] = None
    twitter_description: Optional[BilingualContent] = None
    author: str = ""
    keywords: list[str] = field(default_factory=list)
    language: str = ""
    theme_color: str = ""
    published_time: str = ""
    modified_time: str = ""
    favicon: str = ""
    tags: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    soup: Optional[BeautifulSoup] = field(default=None, repr=False, compare=False)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _attr(tag: Optional[Tag], name: str) -> str:
    if tag is None:
        return ""
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return (value or "").strip()


def _meta_name(soup: BeautifulSoup, name: str) -> str:
    return _attr(soup.find("meta", attrs={"name": name}), "content")


def _meta_property(soup: BeautifulSoup, prop: str) -> str:
    return _attr(soup.find("meta", attrs={"property": prop}), "content")


def _twitter(soup: BeautifulSoup, key: str) -> str:
    # twitter:* is declared via name=, but plenty of sites use property=
    return _meta_name(soup, f"twitter:{key}") or _meta_property(soup, f"twitter:{key}")


def _optional_wrap(text: str, wrap: WrapFn) -> Optional[BilingualContent]:
    return wrap(text) if text else None


def _marker_texts(soup: BeautifulSoup, selector: str) -> list[str]:
    texts = (el.get_text(" ", strip=True) for el in soup.select(selector))
    return remove_duplicates([t for t in texts if t])


def _favicon(soup: BeautifulSoup, base_url: str) -> str:
    link = soup.select_one('link[rel~="icon"]')
    href = _attr(link, "href")
    return urljoin(base_url, href) if href else ""


# ---------------------------------------------------------------------------
# Public function
# ---------------------------------------------------------------------------


def parse_html(html: str, source_url: str, wrap: WrapFn = default_wrap) -> ParsedPage:
    """Parse *html* fetched from *source_url* into a :class:`ParsedPage`.

    Parameters
    ----------
    html
        Raw markup.
    source_url
        Absolute URL the markup was fetched from; used for ``domain``/``name``
        and to resolve the favicon link.
    wrap
        Bilingual wrapper applied to every textual field.
    """
    soup = BeautifulSoup(html, "html.parser")

    domain = derive_domain(source_url)
    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else ""

    keywords_raw = _meta_name(soup, "keywords")
    keywords = [" ".join(k.split()) for k in keywords_raw.split(",") if k.strip()]

    html_tag = soup.find("html")

    return ParsedPage(
        url=source_url,
        domain=domain,
        name=derive_name(domain),
        title=wrap(title),
        description=wrap(_meta_name(soup, "description")),
        og_title=_optional_wrap(_meta_property(soup, "og:title"), wrap),
        og_description=_optional_wrap(_meta_property(soup, "og:description"), wrap),
        og_image=_meta_property(soup, "og:image"),
        og_type=_meta_property(soup, "og:type"),
        twitter_card=_twitter(soup, "card"),
        twitter_site=_twitter(soup, "site"),
        twitter_creator=_twitter(soup, "creator"),
        twitter_image=_twitter(soup, "image"),
        twitter_title=_optional_wrap(_twitter(soup, "title"), wrap),
        twitter_description=_optional_wrap(_twitter(soup, "description"), wrap),
        author=_meta_name(soup, "author"),
        keywords=keywords,
        language=_attr(html_tag if isinstance(html_tag, Tag) else None, "lang"),
        theme_color=_meta_name(soup, "theme-color"),
        published_time=_meta_property(soup, "article:published_time"),
        modified_time=_meta_property(soup, "article:modified_time"),
        favicon=_favicon(soup, source_url),
        tags=_marker_texts(soup, _TAG_SELECTOR),
        categories=_marker_texts(soup, _CATEGORY_SELECTOR),
        soup=soup,
    )
