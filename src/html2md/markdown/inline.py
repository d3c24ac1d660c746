"""Helpers for assembling converted inline content into blocks."""

import re
from collections.abc import Iterable

from .elements import LineBreak, MDElement, Paragraph, PlainText

# HTML whitespace; non-breaking space is content
_WHITESPACE_RUN_RE = re.compile(r"[ \t\n\r\f]+")
_WHITESPACE = " \t\n\r\f"


def _is_blank(element: MDElement) -> bool:
    if isinstance(element, LineBreak):
        return True
    return isinstance(element, PlainText) and not element.text.strip(_WHITESPACE)


def compact_inline(elements: Iterable[MDElement]) -> list[MDElement]:
    """
    Tidy a run of inline elements the way a browser lays out inline text.

    Adjacent text is merged and every run of HTML whitespace collapses to a
    single space. Whitespace and line breaks at either edge of the run are
    dropped, as are spaces next to a line break.

    Args:
        elements: Inline elements in document order

    Returns:
        Compacted inline elements (possibly empty)
    """
    merged: list[MDElement] = []
    for element in elements:
        if isinstance(element, PlainText):
            text = element.text
            previous = merged[-1] if merged else None
            if isinstance(previous, PlainText):
                merged.pop()
                text = previous.text + text
            collapsed = _WHITESPACE_RUN_RE.sub(" ", text)
            element = element if collapsed == element.text else PlainText(collapsed)
        merged.append(element)

    while merged and _is_blank(merged[0]):
        merged.pop(0)
    while merged and _is_blank(merged[-1]):
        merged.pop()

    result: list[MDElement] = []
    last = len(merged) - 1
    for index, element in enumerate(merged):
        if isinstance(element, PlainText):
            text = element.text
            if index == 0 or isinstance(merged[index - 1], LineBreak):
                text = text.lstrip(" ")
            if index == last or isinstance(merged[index + 1], LineBreak):
                text = text.rstrip(" ")
            if not text:
                continue
            if text != element.text:
                element = PlainText(text)
        result.append(element)
    return result


def group_blocks(elements: Iterable[MDElement]) -> list[MDElement]:
    """
    Wrap every run of inline elements into a Paragraph.

    Block elements pass through untouched and keep their position. Runs that
    compact to nothing produce no Paragraph.

    Args:
        elements: Mixed block and inline elements in document order

    Returns:
        Block-level elements only
    """
    blocks: list[MDElement] = []
    run: list[MDElement] = []

    def flush() -> None:
        inline = compact_inline(run)
        run.clear()
        if inline:
            blocks.append(Paragraph(tuple(inline)))

    for element in elements:
        if element.is_block:
            flush()
            blocks.append(element)
        else:
            run.append(element)
    flush()
    return blocks
