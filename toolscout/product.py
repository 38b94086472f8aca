# File: toolscout/product.py
"""toolscout.product: Преобразование ScrapedMetadata в кандидата для каталога."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from toolscout.models import BilingualContent, ScrapedMetadata


@dataclass(slots=True)
class ProductCandidate:
    """Поля, которые слой хранения использует при создании продукта."""

    product_website: str
    codename: str
    punchline: str
    description: str
    categories: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    logo_src: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _first_text(*values: BilingualContent | None) -> str:
    for value in values:
        if value is not None and value.original:
            return value.original
    return ""


def to_product_candidate(metadata: ScrapedMetadata) -> ProductCandidate:
    """Собирает кандидата: Open Graph важнее обычных title/description."""
    return ProductCandidate(
        product_website=metadata.url,
        codename=metadata.name,
        punchline=_first_text(metadata.og_title, metadata.title) or metadata.name,
        description=_first_text(metadata.og_description, metadata.description)
        or f"AI tool scraped from {metadata.url}",
        categories=list(metadata.categories),
        tags=list(metadata.tags),
        logo_src=metadata.og_image or metadata.favicon,
    )


__all__ = ["ProductCandidate", "to_product_candidate"]
