"""toolscout.parser: разбор HTML-документа, поиск основного контента и цен."""

from toolscout.parser.html_parser import ParsedPage, parse_html
from toolscout.parser.main_content import locate_main_content
from toolscout.parser.pricing import extract_pricing

__all__ = ["ParsedPage", "parse_html", "locate_main_content", "extract_pricing"]
