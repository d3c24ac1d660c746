"""Conversion rule for HTML headers."""

import re

from bs4 import Tag
from bs4.element import PageElement

from ...markdown.elements import Heading
from ..nodes import flatten_text
from ..protocols import Recurse

HEADER_TAG_NAME = re.compile(r"h[1-6]", re.IGNORECASE)


class HeaderRule:
    """
    Converts ``h1``..``h6`` into a Heading.

    The level comes from the digit in the tag name. Inner tags are stripped:
    the heading text is the element's flattened text content on one line.
    An empty header still yields a heading.
    """

    name = "header"

    def supports(self, node: PageElement) -> bool:
        return isinstance(node, Tag) and node.name is not None and HEADER_TAG_NAME.fullmatch(node.name) is not None

    def convert(self, node: Tag, recurse: Recurse) -> Heading:
        return Heading(int(node.name[-1]), flatten_text(node))
