"""HTML to Markdown conversion engine."""

from .converter import Converter
from .parsing import html_to_markdown, parse_html
from .protocols import ConvertResult, ConvertRule, Recurse
from .rules import TagRule, default_rules

__all__ = [
    # Protocols
    "ConvertRule",
    "ConvertResult",
    "Recurse",
    # Implementations
    "Converter",
    "TagRule",
    "default_rules",
    # Entry points
    "html_to_markdown",
    "parse_html",
]
