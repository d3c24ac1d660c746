"""Rules for character data and for content that is dropped entirely."""

from collections.abc import Iterable
from typing import Optional

from bs4 import Tag
from bs4.element import PageElement, PreformattedString

from ...markdown.elements import MDElement
from ...models.config import DEFAULT_SKIP_TAGS
from ..nodes import is_text, text_elements
from ..protocols import Recurse


class IgnoreRule:
    """Drops comments, doctypes and processing instructions, and skipped tags with their subtree."""

    name = "ignore"

    def __init__(self, skip_tags: Optional[Iterable[str]] = None):
        tags = DEFAULT_SKIP_TAGS if skip_tags is None else skip_tags
        self._skip_tags = frozenset(tag.lower() for tag in tags)

    @property
    def skip_tags(self) -> frozenset[str]:
        return self._skip_tags

    def supports(self, node: PageElement) -> bool:
        if isinstance(node, PreformattedString):
            return True
        return isinstance(node, Tag) and node.name is not None and node.name.lower() in self._skip_tags

    def convert(self, node: PageElement, recurse: Recurse) -> list[MDElement]:
        return []


class TextRule:
    """Text nodes become PlainText with HTML whitespace collapsed."""

    name = "text"

    def supports(self, node: PageElement) -> bool:
        return is_text(node)

    def convert(self, node: PageElement, recurse: Recurse) -> list[MDElement]:
        return text_elements(node)
