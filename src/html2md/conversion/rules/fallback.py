"""Catch-all rule, registered last."""

from bs4 import NavigableString
from bs4.element import PageElement

from ...markdown.elements import MDElement
from ..nodes import is_text, text_elements
from ..protocols import Recurse
from .base import convert_children


class FallbackRule:
    """
    Supports every node so the walk never stalls on an unknown tag.

    Unknown wrappers (``div``, ``span``, ``section``, ...) introduce no
    element of their own: their converted children are returned directly.
    Text nodes reaching this rule become plain text.
    """

    name = "fallback"

    def supports(self, node: PageElement) -> bool:
        return True

    def convert(self, node: PageElement, recurse: Recurse) -> list[MDElement]:
        if isinstance(node, NavigableString):
            return text_elements(node) if is_text(node) else []
        return convert_children(node, recurse)
