"""Parsing entry points built on BeautifulSoup."""

from collections.abc import Iterable
from typing import Optional, Union

from bs4 import BeautifulSoup, FeatureNotFound

from ..errors import ConfigurationError
from ..models.config import ConverterConfig
from .converter import Converter
from .protocols import ConvertRule


def parse_html(markup: Union[str, bytes], parser: str = "html.parser") -> BeautifulSoup:
    """
    Parse raw markup into a tree the converter accepts.

    Args:
        markup: HTML source, text or bytes
        parser: BeautifulSoup tree builder name

    Returns:
        Parsed BeautifulSoup tree

    Raises:
        ConfigurationError: If the requested parser is not installed
    """
    try:
        return BeautifulSoup(markup, parser)
    except FeatureNotFound as err:
        raise ConfigurationError(f"HTML parser '{parser}' is not installed") from err


def html_to_markdown(
    markup: Union[str, bytes],
    config: Optional[ConverterConfig] = None,
    rules: Optional[Iterable[ConvertRule]] = None,
) -> str:
    """
    Convert HTML source to Markdown text.

    Example:
        html_to_markdown("<h1>Title</h1><p>Hello <em>world</em></p>")
        # "# Title\\n\\nHello *world*"

    Args:
        markup: HTML source, text or bytes
        config: Converter configuration (uses defaults if None)
        rules: Rules in priority order (uses the default rule set if None)

    Returns:
        Markdown text
    """
    config = config or ConverterConfig()
    soup = parse_html(markup, config.parser)
    return Converter(rules=rules, config=config).convert_document(soup).render()
