"""Markdown document: the ordered top-level sequence of elements."""

from collections.abc import Iterable, Iterator
from typing import Optional

from ..errors import InvalidArgumentError
from .elements import BLOCK_WHITESPACE, MDElement, render_inline

BLOCK_SEPARATOR = "\n\n"


class MDDocument:
    """
    An ordered sequence of top-level Markdown elements.

    Rendering joins block elements with exactly one blank line. Consecutive
    inline elements are laid out on the same line, as one block.

    Example:
        doc = MDDocument()
        doc.add_element(Heading(1, "Title"))
        doc.add_element(Paragraph([PlainText("Body")]))
        doc.render()  # "# Title\\n\\nBody"
    """

    def __init__(self, elements: Optional[Iterable[MDElement]] = None):
        self._elements: list[MDElement] = []
        if elements is not None:
            self.extend(elements)

    def add_element(self, element: MDElement) -> None:
        """Append an element after all existing ones."""
        if not isinstance(element, MDElement):
            raise InvalidArgumentError(f"MDDocument only holds Markdown elements, got {type(element).__name__}")
        self._elements.append(element)

    def extend(self, elements: Iterable[MDElement]) -> None:
        for element in elements:
            self.add_element(element)

    @property
    def elements(self) -> tuple[MDElement, ...]:
        return tuple(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[MDElement]:
        return iter(tuple(self._elements))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MDDocument):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"MDDocument({self._elements!r})"

    def render(self) -> str:
        """
        Render the document as Markdown source text.

        Returns:
            Markdown text without a trailing blank line ("" for an empty document)
        """
        segments: list[str] = []
        inline_run: list[MDElement] = []

        def add(text: str) -> None:
            if text.strip(BLOCK_WHITESPACE):
                segments.append(text)

        for element in self._elements:
            if element.is_block:
                add(render_inline(inline_run, line_start=True).strip(BLOCK_WHITESPACE))
                inline_run.clear()
                add(element.render())
            else:
                inline_run.append(element)
        add(render_inline(inline_run, line_start=True).strip(BLOCK_WHITESPACE))
        return BLOCK_SEPARATOR.join(segments)

    def __str__(self) -> str:
        return self.render()
