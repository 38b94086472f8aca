# toolscout/models.py
"""
Data models for the ToolScout metadata engine.

All records are frozen pydantic models.  Python attributes use snake_case;
:meth:`ScrapedMetadata.to_json` and ``model_dump(by_alias=True)`` emit the
camelCase keys (``ogTitle``, ``keyPoints`` ...) expected by the product store.
"""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from toolscout.utils import derive_domain, is_valid_url

PricingModel = Literal["subscription", "one-time", "monthly", "yearly"]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class BilingualContent(_Record):
    """Original text plus its optional secondary-language rendering."""

    original: str = ""
    secondary: Optional[str] = None


class GeneratedContent(_Record):
    summary: BilingualContent
    article: BilingualContent
    key_points: List[BilingualContent]
    pros: List[BilingualContent]
    cons: List[BilingualContent]


class PricingInfo(_Record):
    """Best-effort pricing signals; ``None`` means undetermined."""

    is_free: Optional[bool] = None
    has_trial: Optional[bool] = None
    price: Optional[str] = None
    pricing_model: Optional[PricingModel] = None


class ScrapedMetadata(_Record):
    """Structured description of one scraped page (a product candidate)."""

    url: str
    domain: str
    name: str

    title: BilingualContent
    description: BilingualContent
    og_title: Optional[BilingualContent] = None
    og_description: Optional[BilingualContent] = None
    og_image: str = ""
    twitter_title: Optional[BilingualContent] = None
    twitter_description: Optional[BilingualContent] = None
    twitter_card: str = ""
    twitter_site: str = ""
    twitter_creator: str = ""
    twitter_image: str = ""
    main_content: Optional[BilingualContent] = None

    favicon: str = ""
    keywords: List[str] = Field(default_factory=list)
    author: str = ""
    language: str = ""
    theme_color: str = ""
    type: str = ""
    published_time: str = ""
    modified_time: str = ""

    tags: List[str] = Field(..., min_length=1)
    categories: List[str] = Field(..., min_length=1)

    pricing: Optional[PricingInfo] = None
    generated_content: Optional[GeneratedContent] = None

    tech_stack: List[str] = Field(default_factory=list)
    integrations: List[str] = Field(default_factory=list)

    @field_validator("url")
    @classmethod
    def _check_url(cls, v: str) -> str:
        if not is_valid_url(v):
            raise ValueError(f"url must be an absolute http(s) URL, got {v!r}")
        return v

    @field_validator("tags", "categories")
    @classmethod
    def _check_unique(cls, v: List[str]) -> List[str]:
        if len(set(v)) != len(v):
            raise ValueError("entries must be unique")
        return v

    @model_validator(mode="after")
    def _check_domain(self) -> ScrapedMetadata:
        expected = derive_domain(self.url)
        if self.domain != expected:
            raise ValueError(f"domain {self.domain!r} does not match url host {expected!r}")
        return self

    def to_json(self, *, pretty: bool = False) -> str:
        """JSON with camelCase keys; unset optional blocks are omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2 if pretty else None)


__all__ = [
    "BilingualContent",
    "GeneratedContent",
    "PricingInfo",
    "PricingModel",
    "ScrapedMetadata",
]
