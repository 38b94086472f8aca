"""
Pricing heuristic: free/trial/price/billing-model signals from page text.
"""
from __future__ import annotations

import re
from typing import Final, Optional, Sequence

from bs4 import BeautifulSoup

from toolscout.models import PricingInfo, PricingModel

__all__: Sequence[str] = ("PRICING_SELECTORS", "extract_pricing", "analyze_pricing_text")

PRICING_SELECTORS: Final[tuple[str, ...]] = (
    ".pricing", "#pricing", ".price", "#price",
    ".plan", ".subscription", ".package", ".tier",
)

_FREE_MARKERS: Final = ("free", "no cost", "$0")
_TRIAL_MARKERS: Final = ("trial", "try for free", "demo")
_MODELS: Final[tuple[PricingModel, ...]] = ("subscription", "one-time", "monthly", "yearly")
_PRICE_RE: Final = re.compile(r"\$\d+(?:\.\d{2})?")


def analyze_pricing_text(text: str) -> PricingInfo:
    """Apply the keyword rules to an arbitrary chunk of text."""
    text = text.lower()
    price_match = _PRICE_RE.search(text)
    model: Optional[PricingModel] = next((m for m in _MODELS if m in text), None)
    return PricingInfo(
        is_free=any(marker in text for marker in _FREE_MARKERS),
        has_trial=any(marker in text for marker in _TRIAL_MARKERS),
        price=price_match.group(0) if price_match else None,
        pricing_model=model,
    )


def extract_pricing(soup: BeautifulSoup) -> PricingInfo:
    """Analyse the first pricing-like element, or the whole body when none exists."""
    region = None
    for selector in PRICING_SELECTORS:
        region = soup.select_one(selector)
        if region is not None:
            break
    if region is None:
        region = soup.body or soup
    return analyze_pricing_text(region.get_text(" "))
