"""Rules for inline markup: emphasis, links, images, code spans and line breaks."""

from typing import Callable

from bs4 import Tag

from ...markdown.elements import (
    CodeSpan,
    Emphasis,
    Image,
    LineBreak,
    Link,
    MDElement,
    PlainText,
    StrongEmphasis,
)
from ...markdown.inline import compact_inline
from ..nodes import attribute
from ..protocols import Recurse
from .base import TagRule, convert_children

SpanFactory = Callable[[tuple[MDElement, ...]], MDElement]
_HTML_WHITESPACE = (" ", "\t", "\n", "\r", "\f")


def _wrap_run(factory: SpanFactory, run: list[MDElement]) -> list[MDElement]:
    # Whitespace at the edges of a span moves outside its delimiters
    leading = bool(run) and isinstance(run[0], PlainText) and run[0].text.startswith(_HTML_WHITESPACE)
    trailing = bool(run) and isinstance(run[-1], PlainText) and run[-1].text.endswith(_HTML_WHITESPACE)
    content = compact_inline(run)
    if not content:
        return [PlainText(" ")] if leading or trailing else []

    wrapped: list[MDElement] = []
    if leading:
        wrapped.append(PlainText(" "))
    wrapped.append(factory(tuple(content)))
    if trailing:
        wrapped.append(PlainText(" "))
    return wrapped


def wrap_inline(factory: SpanFactory, elements: list[MDElement]) -> list[MDElement]:
    """
    Wrap each inline run of ``elements`` with ``factory``.

    Block elements cannot live inside an inline span, so they are passed
    through between the wrapped runs.
    """
    result: list[MDElement] = []
    run: list[MDElement] = []
    for element in elements:
        if element.is_block:
            result.extend(_wrap_run(factory, run))
            run = []
            result.append(element)
        else:
            run.append(element)
    result.extend(_wrap_run(factory, run))
    return result


class StrongRule(TagRule):
    name = "strong"
    tags = frozenset({"strong", "b"})

    def convert(self, node: Tag, recurse: Recurse) -> list[MDElement]:
        return wrap_inline(StrongEmphasis, convert_children(node, recurse))


class EmphasisRule(TagRule):
    name = "emphasis"
    tags = frozenset({"em", "i"})

    def convert(self, node: Tag, recurse: Recurse) -> list[MDElement]:
        return wrap_inline(Emphasis, convert_children(node, recurse))


class LinkRule(TagRule):
    """``a`` becomes a Link; a missing ``href`` yields an empty target."""

    name = "link"
    tags = frozenset({"a"})

    def convert(self, node: Tag, recurse: Recurse) -> list[MDElement]:
        target = attribute(node, "href").strip()
        return wrap_inline(lambda children: Link(children, target), convert_children(node, recurse))


class ImageRule(TagRule):
    name = "image"
    tags = frozenset({"img"})

    def convert(self, node: Tag, recurse: Recurse) -> Image:
        return Image(attribute(node, "alt"), attribute(node, "src").strip())


class InlineCodeRule(TagRule):
    name = "inline_code"
    tags = frozenset({"code", "kbd", "samp", "tt"})

    def convert(self, node: Tag, recurse: Recurse) -> list[MDElement]:
        code = node.get_text()
        if not code:
            return []
        return [CodeSpan(code)]


class LineBreakRule(TagRule):
    name = "line_break"
    tags = frozenset({"br"})

    def convert(self, node: Tag, recurse: Recurse) -> LineBreak:
        return LineBreak()
