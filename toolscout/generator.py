"""
toolscout.generator: Template-based descriptive content for a scraped tool.

Every text is rendered from a fixed Jinja2 template and wrapped
independently, so each bilingual field carries its own translation.
"""
from __future__ import annotations

from typing import Any, Final, Optional, Sequence

from jinja2 import DictLoader, Environment, StrictUndefined

from toolscout.models import BilingualContent, GeneratedContent, PricingInfo
from toolscout.parser.html_parser import ParsedPage, WrapFn
from toolscout.translation import wrap as default_wrap

__all__: Sequence[str] = ("generate_content", "render")

_SUMMARY = "{{ title }} is an AI tool from {{ domain }} that {{ description[:100] }}..."

_ARTICLE = """\
# {{ title }}

{{ description }}

## About {{ name }}

{{ name }} is a powerful AI tool that helps users with various tasks related to {{ topics }}.
The tool is designed to be user-friendly and efficient, providing a seamless experience for both beginners and experts.

## Key Features

- Advanced AI algorithms for optimal results
- User-friendly interface
- Fast processing times
- Integration with popular platforms
- Regular updates and improvements

## Use Cases

{{ name }} can be used in various scenarios, including but not limited to:
- Content creation and optimization
- Data analysis and visualization
- Automation of repetitive tasks
- Decision-making support

## Pricing

{% if pricing.is_free %}This tool is available for free.{% else %}This tool offers various pricing options to suit different needs.{% endif %}
{% if pricing.has_trial %}A free trial is available for users who want to test the features before committing.{% endif %}

## Conclusion

{{ name }} is a valuable addition to any AI toolkit, offering powerful features and capabilities that can significantly enhance productivity and results.
"""

_KEY_POINTS: Final[tuple[str, ...]] = (
    "{{ name }} is a tool for {{ keywords[0] if keywords else 'AI tasks' }}.",
    "It offers a user-friendly interface for easy navigation.",
    "The tool is regularly updated with new features.",
    "It integrates with popular platforms for seamless workflow.",
)

_PROS: Final[tuple[str, ...]] = (
    "Easy to use interface",
    "Powerful AI capabilities",
    "Regular updates",
    "Good documentation",
)

_CONS: Final[tuple[str, ...]] = (
    "May require some learning curve for advanced features",
    "Limited free tier (if applicable)",
    "Some features may be in beta",
)


def _numbered(prefix: str, templates: tuple[str, ...]) -> dict[str, str]:
    return {f"{prefix}/{i}": source for i, source in enumerate(templates)}


_env: Final = Environment(
    loader=DictLoader(
        {
            "summary": _SUMMARY,
            "article": _ARTICLE,
            **_numbered("key_points", _KEY_POINTS),
            **_numbered("pros", _PROS),
            **_numbered("cons", _CONS),
        }
    ),
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=False,
)

# One template per item, so the list lengths never depend on page data.
_ITEM_COUNTS: Final[dict[str, int]] = {
    "key_points": len(_KEY_POINTS),
    "pros": len(_PROS),
    "cons": len(_CONS),
}


def render(template_name: str, **context: Any) -> str:
    """Render template *template_name* and strip surrounding whitespace."""
    return _env.get_template(template_name).render(**context).strip()


def _items(group: str, **context: Any) -> list[str]:
    return [render(f"{group}/{i}", **context) for i in range(_ITEM_COUNTS[group])]


def generate_content(
    page: ParsedPage,
    pricing: Optional[PricingInfo] = None,
    wrap: WrapFn = default_wrap,
) -> GeneratedContent:
    """Build summary, article, key points, pros and cons for *page*."""
    context = {
        "title": page.title.original,
        "description": page.description.original,
        "name": page.name,
        "domain": page.domain,
        "keywords": page.keywords,
        "topics": ", ".join(page.keywords) or "AI tasks",
        "pricing": pricing or PricingInfo(),
    }

    def _wrap_all(texts: list[str]) -> list[BilingualContent]:
        return [wrap(text) for text in texts]

    return GeneratedContent(
        summary=wrap(render("summary", **context)),
        article=wrap(render("article", **context)),
        key_points=_wrap_all(_items("key_points", **context)),
        pros=_wrap_all(_items("pros")),
        cons=_wrap_all(_items("cons")),
    )
