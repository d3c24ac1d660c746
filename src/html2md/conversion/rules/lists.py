"""Conversion rule for ordered and unordered lists."""

from bs4 import Tag

from ...markdown.elements import ListBlock, ListItem, MDElement
from ...markdown.inline import compact_inline
from ..nodes import attribute, tag_name
from ..protocols import Recurse
from .base import TagRule, convert_children


def _item_content(elements: list[MDElement]) -> list[MDElement]:
    """Compact the inline runs of an item while keeping nested blocks in place."""
    content: list[MDElement] = []
    run: list[MDElement] = []
    for element in elements:
        if element.is_block:
            content.extend(compact_inline(run))
            run = []
            content.append(element)
        else:
            run.append(element)
    content.extend(compact_inline(run))
    return content


class ListRule(TagRule):
    """
    ``ul`` and ``ol`` become a ListBlock.

    Each ``li`` is one ListItem. Content that sits directly in the list
    outside any ``li`` becomes an item of its own, except a bare nested list,
    which is attached to the preceding item.
    """

    name = "list"
    tags = frozenset({"ul", "ol"})

    def _start(self, node: Tag) -> int:
        try:
            start = int(attribute(node, "start").strip())
        except ValueError:
            return 1
        return start if start >= 0 else 1

    def convert(self, node: Tag, recurse: Recurse) -> list[MDElement]:
        ordered = tag_name(node) == "ol"
        items: list[ListItem] = []

        for child in node.children:
            if tag_name(child) == "li":
                items.append(ListItem(tuple(_item_content(convert_children(child, recurse)))))
                continue

            content = _item_content(recurse(child))
            if not content:
                continue
            if items and all(isinstance(element, ListBlock) for element in content):
                previous = items.pop()
                items.append(ListItem(previous.children + tuple(content)))
            else:
                items.append(ListItem(tuple(content)))

        if not items:
            return []
        return [ListBlock(ordered, tuple(items), start=self._start(node) if ordered else 1)]
