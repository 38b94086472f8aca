# File: tests/test_generator.py
from dataclasses import replace

from toolscout.generator import generate_content, render
from toolscout.models import PricingInfo
from toolscout.parser.html_parser import parse_html


def test_structure_and_arity(parsed_page):
    content = generate_content(parsed_page, PricingInfo(is_free=False))
    assert len(content.key_points) == 4
    assert len(content.pros) == 4
    assert len(content.cons) == 3
    for item in [content.summary, content.article, *content.key_points, *content.pros, *content.cons]:
        assert item.original
        assert item.secondary is not None


def test_summary(parsed_page):
    summary = generate_content(parsed_page).summary.original
    assert summary.startswith("WriteBot - AI Writing Assistant is an AI tool from writebot.io that ")
    assert summary.endswith("...")


def test_summary_description_is_clipped():
    page = parse_html(f'<meta name="description" content="{"d" * 300}">', "https://long.io")
    summary = generate_content(page).summary.original
    assert "d" * 100 + "..." in summary
    assert "d" * 101 not in summary


def test_article_sections(parsed_page):
    article = generate_content(parsed_page, PricingInfo(is_free=True, has_trial=True)).article.original
    assert article.startswith("# WriteBot - AI Writing Assistant")
    for heading in ("## About Writebot", "## Key Features", "## Use Cases", "## Pricing", "## Conclusion"):
        assert heading in article
    assert "related to writing, chatbot, llm." in article
    assert "This tool is available for free." in article
    assert "A free trial is available" in article


def test_article_paid_without_trial(parsed_page):
    article = generate_content(parsed_page, PricingInfo(is_free=False)).article.original
    assert "various pricing options" in article
    assert "A free trial is available" not in article


def test_key_points_use_first_keyword(parsed_page):
    points = generate_content(parsed_page).key_points
    assert points[0].original == "Writebot is a tool for writing."


def test_key_points_without_keywords():
    page = parse_html("<title>Zed</title>", "https://zed.dev")
    assert generate_content(page).key_points[0].original == "Zed is a tool for AI tasks."


def test_each_item_translated_independently(parsed_page):
    pros = generate_content(parsed_page).pros
    assert pros[0].original == "Easy to use interface"
    assert pros[1].secondary != pros[0].secondary


def test_render_summary_template():
    text = render("summary", title="T", domain="t.io", description="does things")
    assert text == "T is an AI tool from t.io that does things..."


def test_render_accepts_name_in_context():
    text = render("key_points/0", name="Zed", keywords=["editing"])
    assert text == "Zed is a tool for editing."


def test_multiline_keyword_keeps_list_lengths():
    page = parse_html('<meta name="keywords" content="machine\nlearning, ai">', "https://ml.io")
    assert page.keywords == ["machine learning", "ai"]
    content = generate_content(page)
    assert len(content.key_points) == 4
    assert len(content.pros) == 4
    assert len(content.cons) == 3
    assert content.key_points[0].original.endswith(" is a tool for machine learning.")


def test_newline_in_keyword_stays_in_one_item(parsed_page):
    page = replace(parsed_page, keywords=["line one\nline two"])
    points = generate_content(page).key_points
    assert len(points) == 4
    assert points[0].original == "Writebot is a tool for line one\nline two."
