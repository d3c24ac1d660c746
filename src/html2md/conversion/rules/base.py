"""Shared building blocks for convert rules."""

from abc import ABC, abstractmethod
from typing import ClassVar

from bs4 import Tag
from bs4.element import PageElement

from ...markdown.elements import MDElement
from ..protocols import ConvertResult, Recurse


def convert_children(node: Tag, recurse: Recurse) -> list[MDElement]:
    """Convert every child of ``node`` through the converter, flattened in order."""
    elements: list[MDElement] = []
    for child in node.children:
        elements.extend(recurse(child))
    return elements


class TagRule(ABC):
    """
    Base class for rules that match elements by tag name.

    Subclasses list the lower-case tag names they handle in ``tags``;
    matching is case-insensitive and never matches text nodes.
    """

    name: ClassVar[str] = "tag"
    tags: ClassVar[frozenset[str]] = frozenset()

    def supports(self, node: PageElement) -> bool:
        return isinstance(node, Tag) and node.name is not None and node.name.lower() in self.tags

    @abstractmethod
    def convert(self, node: Tag, recurse: Recurse) -> ConvertResult:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
