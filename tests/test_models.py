# File: tests/test_models.py
import json

import pytest
from pydantic import ValidationError

from toolscout.models import BilingualContent, PricingInfo, ScrapedMetadata
from toolscout.product import to_product_candidate


def _metadata(**overrides) -> ScrapedMetadata:
    data = dict(
        url="https://www.demo.ai/",
        domain="demo.ai",
        name="Demo",
        title=BilingualContent(original="Demo"),
        description=BilingualContent(original=""),
        tags=["ai-tool"],
        categories=["AI Tools"],
    )
    data.update(overrides)
    return ScrapedMetadata(**data)


def test_minimal_record_is_valid():
    meta = _metadata()
    assert meta.og_title is None
    assert meta.keywords == []
    assert meta.tech_stack == [] and meta.integrations == []


@pytest.mark.parametrize(
    "overrides",
    [
        {"tags": []},
        {"categories": []},
        {"tags": ["a", "a"]},
        {"url": "not a url"},
        {"url": "ftp://demo.ai/file"},
        {"domain": "other.ai"},
        {"pricing": {"pricing_model": "weekly"}},
    ],
)
def test_invalid_records(overrides):
    with pytest.raises(ValidationError):
        _metadata(**overrides)


def test_records_are_frozen():
    meta = _metadata()
    with pytest.raises(ValidationError):
        meta.name = "Changed"


def test_json_uses_camel_case_and_skips_unset():
    meta = _metadata(
        og_title=BilingualContent(original="Demo!", secondary="Demo!"),
        pricing=PricingInfo(is_free=True),
    )
    data = json.loads(meta.to_json())
    assert data["ogTitle"] == {"original": "Demo!", "secondary": "Demo!"}
    assert data["pricing"] == {"isFree": True}
    assert data["title"] == {"original": "Demo"}
    assert "ogDescription" not in data
    assert "themeColor" in data


def test_accepts_camel_case_input():
    meta = ScrapedMetadata.model_validate(
        json.loads(_metadata(og_image="https://demo.ai/og.png").to_json())
    )
    assert meta.og_image == "https://demo.ai/og.png"


def test_product_candidate_prefers_open_graph():
    meta = _metadata(
        og_title=BilingualContent(original="Demo OG"),
        og_description=BilingualContent(original="OG description"),
        og_image="https://demo.ai/og.png",
        favicon="https://demo.ai/favicon.ico",
    )
    product = to_product_candidate(meta)
    assert product.product_website == "https://www.demo.ai/"
    assert product.codename == "Demo"
    assert product.punchline == "Demo OG"
    assert product.description == "OG description"
    assert product.logo_src == "https://demo.ai/og.png"
    assert product.categories == ["AI Tools"]


def test_product_candidate_fallbacks():
    product = to_product_candidate(_metadata(title=BilingualContent(original=""), favicon="https://demo.ai/f.ico"))
    assert product.punchline == "Demo"
    assert product.description == "AI tool scraped from https://www.demo.ai/"
    assert product.logo_src == "https://demo.ai/f.ico"
    assert product.as_dict()["codename"] == "Demo"
