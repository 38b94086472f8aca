# File: toolscout/classifier.py
"""toolscout.classifier: Эвристическая классификация страниц по тегам и категориям.

Оба классификатора ищут подстроки в общем тексте ``title + description +
keywords`` (в нижнем регистре) и объединяют результат с тегами/категориями,
уже найденными в разметке.
"""

from __future__ import annotations

from typing import Final, Iterable, List, Mapping, Optional, Sequence

from toolscout.models import BilingualContent, PricingInfo
from toolscout.utils import remove_duplicates

__all__: Sequence[str] = (
    "AI_KEYWORDS",
    "CATEGORY_KEYWORDS",
    "DEFAULT_CATEGORY",
    "DEFAULT_TAG",
    "classify_tags",
    "classify_categories",
)

AI_KEYWORDS: Final[tuple[str, ...]] = (
    "ai", "artificial intelligence", "machine learning", "ml", "deep learning",
    "nlp", "natural language processing", "computer vision", "neural network",
    "algorithm", "automation", "bot", "chatbot", "gpt", "llm", "large language model",
    "data science", "analytics", "prediction", "classification", "recognition",
    "generation", "transformer", "vector", "embedding", "prompt", "fine-tuning",
)

CATEGORY_KEYWORDS: Final[Mapping[str, tuple[str, ...]]] = {
    "Text Generation": ("text generation", "content creation", "writing", "copywriting", "blog", "article"),
    "Image Generation": (
        "image", "art", "design", "graphic", "photo", "picture",
        "dall-e", "midjourney", "stable diffusion",
    ),
    "Code Assistant": ("code", "programming", "developer", "software", "github", "copilot"),
    "Chatbot": ("chat", "conversation", "assistant", "support", "customer service"),
    "Data Analysis": ("data", "analytics", "visualization", "dashboard", "insight", "statistics"),
    "Productivity": ("productivity", "workflow", "automation", "efficiency", "time-saving"),
    "Marketing": ("marketing", "seo", "advertising", "campaign", "social media"),
    "Education": ("education", "learning", "teaching", "student", "course", "tutor"),
    "Research": ("research", "academic", "paper", "study", "analysis"),
    "Business": ("business", "enterprise", "company", "corporate", "management"),
}

DEFAULT_CATEGORY: Final[str] = "AI Tools"
DEFAULT_TAG: Final[str] = "ai-tool"


def _text_blob(
    title: BilingualContent | str | None,
    description: BilingualContent | str | None,
    keywords: Iterable[str],
) -> str:
    def _original(value: BilingualContent | str | None) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else value.original

    return f"{_original(title)} {_original(description)} {' '.join(keywords)}".lower()


def classify_tags(
    title: BilingualContent | str | None,
    description: BilingualContent | str | None,
    keywords: Iterable[str] = (),
    pricing: Optional[PricingInfo] = None,
    existing: Iterable[str] = (),
) -> List[str]:
    """Возвращает уникальные теги; всегда содержит ``ai-tool``."""
    blob = _text_blob(title, description, keywords)
    detected = [kw for kw in AI_KEYWORDS if kw in blob]

    if pricing is not None and pricing.is_free:
        detected.append("free")
    else:
        detected.append("paid")
    if pricing is not None and pricing.has_trial:
        detected.append("free-trial")

    return remove_duplicates([*existing, *detected, DEFAULT_TAG])


def classify_categories(
    title: BilingualContent | str | None,
    description: BilingualContent | str | None,
    keywords: Iterable[str] = (),
    existing: Iterable[str] = (),
) -> List[str]:
    """Возвращает уникальные категории; при отсутствии совпадений добавляет ``AI Tools``."""
    blob = _text_blob(title, description, keywords)
    detected = [
        category
        for category, words in CATEGORY_KEYWORDS.items()
        if any(word in blob for word in words)
    ]
    if not detected:
        detected.append(DEFAULT_CATEGORY)
    return remove_duplicates([*existing, *detected])
