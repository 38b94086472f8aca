# File: tests/test_pricing.py
import pytest
from bs4 import BeautifulSoup

from toolscout.parser.pricing import analyze_pricing_text, extract_pricing


def test_reference_example():
    info = analyze_pricing_text("Free trial available, then $9.99/month subscription")
    assert info.is_free is True
    assert info.has_trial is True
    assert info.price == "$9.99"
    assert info.pricing_model == "subscription"


def test_no_signals():
    info = analyze_pricing_text("A tool that summarises documents.")
    assert info.is_free is False
    assert info.has_trial is False
    assert info.price is None
    assert info.pricing_model is None


@pytest.mark.parametrize(
    "text,model",
    [
        ("Pay yearly or via subscription", "subscription"),
        ("one-time purchase, or monthly", "one-time"),
        ("billed monthly or yearly", "monthly"),
        ("billed yearly", "yearly"),
    ],
)
def test_pricing_model_priority(text, model):
    assert analyze_pricing_text(text).pricing_model == model


def test_first_price_and_whole_dollars():
    assert analyze_pricing_text("from $15 to $29.00").price == "$15"
    assert analyze_pricing_text("No cost at all").is_free is True
    assert analyze_pricing_text("Book a DEMO").has_trial is True


def test_pricing_region_preferred(parsed_page):
    info = extract_pricing(parsed_page.soup)
    assert info.price == "$19.99"
    assert info.pricing_model == "monthly"
    assert info.is_free is True
    assert info.has_trial is True


def test_falls_back_to_body():
    soup = BeautifulSoup("<body><p>Only $5, billed monthly</p></body>", "html.parser")
    info = extract_pricing(soup)
    assert info.price == "$5"
    assert info.pricing_model == "monthly"
    assert info.is_free is False


def test_region_only_when_present():
    html = "<body><p>Completely free!</p><div class='plan'>Pro: $49 yearly</div></body>"
    info = extract_pricing(BeautifulSoup(html, "html.parser"))
    assert info.is_free is False
    assert info.price == "$49"
    assert info.pricing_model == "yearly"
