"""Protocol definitions for convert rules."""

from collections.abc import Sequence
from typing import Callable, Protocol, Union, runtime_checkable

from bs4.element import PageElement

from ..markdown.elements import MDElement

# Recursion callback handed to every rule: converts one child node
Recurse = Callable[[PageElement], list[MDElement]]

ConvertResult = Union[MDElement, Sequence[MDElement]]


@runtime_checkable
class ConvertRule(Protocol):
    """
    Protocol for rules converting one HTML node shape into Markdown.

    Rules are stateless policy objects. The converter asks each registered
    rule in priority order whether it ``supports`` a node; the first one that
    does is asked to ``convert`` it.

    Example implementation:
        class StrikeRule:
            name = "strike"

            def supports(self, node: PageElement) -> bool:
                return isinstance(node, Tag) and node.name in ("s", "del")

            def convert(self, node: PageElement, recurse: Recurse) -> ConvertResult:
                return [element for child in node.children for element in recurse(child)]
    """

    name: str

    def supports(self, node: PageElement) -> bool:
        """
        Decide whether this rule handles the node.

        Must never raise and must not have side effects.

        Args:
            node: A Tag or a text node

        Returns:
            True if ``convert`` should be called for this node
        """
        ...

    def convert(self, node: PageElement, recurse: Recurse) -> ConvertResult:
        """
        Produce the Markdown representation of a supported node.

        Args:
            node: A node for which ``supports`` returned True
            recurse: Converter callback used to convert child nodes

        Returns:
            One Markdown element or a sequence of them (possibly empty)
        """
        ...
