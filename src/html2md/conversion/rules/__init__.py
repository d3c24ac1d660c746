"""Concrete convert rules and the default rule set."""

from typing import Optional

from ...models.config import ConverterConfig
from ..protocols import ConvertRule
from .base import TagRule, convert_children
from .blocks import BlockquoteRule, ParagraphRule, PreformattedRule, ThematicBreakRule
from .fallback import FallbackRule
from .headers import HeaderRule
from .inline import (
    EmphasisRule,
    ImageRule,
    InlineCodeRule,
    LineBreakRule,
    LinkRule,
    StrongRule,
)
from .lists import ListRule
from .text import IgnoreRule, TextRule


def default_rules(config: Optional[ConverterConfig] = None) -> list[ConvertRule]:
    """
    Build the default rule set (order matters: first match wins).

    Args:
        config: Converter configuration (``skip_tags`` feeds IgnoreRule)

    Returns:
        Fresh rule instances, most specific first, FallbackRule last
    """
    config = config or ConverterConfig()
    return [
        IgnoreRule(config.skip_tags),
        TextRule(),
        HeaderRule(),
        ParagraphRule(),
        BlockquoteRule(),
        PreformattedRule(),
        ListRule(),
        ThematicBreakRule(),
        LineBreakRule(),
        ImageRule(),
        LinkRule(),
        StrongRule(),
        EmphasisRule(),
        InlineCodeRule(),
        FallbackRule(),  # catch-all (lowest priority)
    ]


__all__ = [
    "BlockquoteRule",
    "EmphasisRule",
    "FallbackRule",
    "HeaderRule",
    "IgnoreRule",
    "ImageRule",
    "InlineCodeRule",
    "LineBreakRule",
    "LinkRule",
    "ListRule",
    "ParagraphRule",
    "PreformattedRule",
    "StrongRule",
    "TagRule",
    "TextRule",
    "ThematicBreakRule",
    "convert_children",
    "default_rules",
]
