"""
html2md - Convert parsed HTML trees into Markdown documents.

Usage:
    from html2md import Converter, parse_html

    soup = parse_html("<h1>Title</h1><p>Some <strong>bold</strong> text</p>")
    document = Converter().convert_document(soup)
    print(document.render())

    # or in one call
    from html2md import html_to_markdown

    markdown = html_to_markdown("<h2>Welcome</h2>")
"""

__version__ = "0.1.0"

from .conversion import (
    ConvertRule,
    Converter,
    TagRule,
    default_rules,
    html_to_markdown,
    parse_html,
)
from .errors import (
    ConfigurationError,
    ConversionDepthError,
    Html2MdError,
    InvalidArgumentError,
    MalformedInputError,
    RuleError,
)
from .markdown import MDDocument, MDElement
from .models.config import ConverterConfig

__all__ = [
    "__version__",
    # Core
    "Converter",
    "ConvertRule",
    "TagRule",
    "default_rules",
    "html_to_markdown",
    "parse_html",
    # Markdown model
    "MDDocument",
    "MDElement",
    # Config
    "ConverterConfig",
    # Errors
    "Html2MdError",
    "ConfigurationError",
    "ConversionDepthError",
    "InvalidArgumentError",
    "MalformedInputError",
    "RuleError",
]
