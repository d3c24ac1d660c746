"""
Typed Markdown elements.

Each element is an immutable dataclass that knows how to render itself as
Markdown source text. Attribute domains are checked when the element is
built, so ``render()`` never fails on an element that exists.

Block-level elements (headings, paragraphs, lists, ...) are separated by a
blank line when they appear in a document. Inline elements (text, emphasis,
links, ...) compose inside a single block.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from ..errors import InvalidArgumentError
from .escaping import (
    escape_destination,
    escape_line_start,
    escape_markdown,
    longest_backtick_run,
)

# Indentation added per level of list nesting
INDENT_UNIT = "  "

# Whitespace removed around rendered blocks (non-breaking space is content)
BLOCK_WHITESPACE = " \t\n\r\f"


class MDElement(ABC):
    """A Markdown element that renders to Markdown source text."""

    is_block: ClassVar[bool] = True

    @abstractmethod
    def render(self) -> str:
        """Return the element as Markdown source text."""
        ...

    def __str__(self) -> str:
        return self.render()


def _freeze_children(
    element: MDElement,
    field_name: str,
    inline_only: bool = False,
    block_only: bool = False,
) -> None:
    """Validate a children field and store it as a tuple."""
    value = getattr(element, field_name)
    if isinstance(value, MDElement):
        value = (value,)
    owner = type(element).__name__
    if isinstance(value, (str, bytes)):
        raise InvalidArgumentError(f"{owner}.{field_name} must be a sequence of Markdown elements, got a string")
    try:
        children = tuple(value)
    except TypeError as err:
        raise InvalidArgumentError(f"{owner}.{field_name} must be a sequence of Markdown elements") from err

    for child in children:
        if not isinstance(child, MDElement):
            raise InvalidArgumentError(f"{owner}.{field_name} must contain Markdown elements, got {type(child).__name__}")
        if inline_only and child.is_block:
            raise InvalidArgumentError(f"{owner} only accepts inline content, got {type(child).__name__}")
        if block_only and not child.is_block:
            raise InvalidArgumentError(f"{owner} only accepts block content, got {type(child).__name__}")

    object.__setattr__(element, field_name, children)


def _require_str(element: MDElement, field_name: str) -> str:
    value = getattr(element, field_name)
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{type(element).__name__}.{field_name} must be a string, got {type(value).__name__}")
    return value


def _ends_with_live_bang(text: str) -> bool:
    if not text.endswith("!"):
        return False
    body = text[:-1]
    return (len(body) - len(body.rstrip("\\"))) % 2 == 0


def render_inline(
    children: Iterable[MDElement],
    line_start: bool = False,
    active: frozenset[type] = frozenset(),
) -> str:
    """
    Render a run of inline elements as one piece of Markdown text.

    Text that lands at the start of a line (the start of the run when
    ``line_start`` is set, or right after a hard line break) has any block
    marker escaped, and a ``!`` that would turn a following link into an
    image is escaped.

    Args:
        children: Inline elements in order
        line_start: True when the run begins a line of the output
        active: Delimited span types already open around this run

    Returns:
        Rendered Markdown text
    """
    parts: list[str] = []
    for child in children:
        if isinstance(child, DelimitedSpan):
            rendered = child.render_within(active)
        else:
            rendered = child.render()
        if line_start and isinstance(child, PlainText):
            rendered = escape_line_start(rendered)
        if rendered.startswith("[") and parts and _ends_with_live_bang(parts[-1]):
            parts[-1] = parts[-1][:-1] + "\\!"
        parts.append(rendered)
        if isinstance(child, LineBreak):
            line_start = True
        elif rendered.strip(" \t"):
            line_start = False
    return "".join(parts)


def _format_target(target: str) -> str:
    target = escape_destination(target)
    # Destinations with spaces are only valid inside angle brackets
    if any(char.isspace() for char in target):
        return f"<{target}>"
    return target


# ---------------------------------------------------------------------------
# Block elements
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Heading(MDElement):
    """ATX heading: ``#`` repeated ``level`` times, a space, then the text."""

    level: int
    text: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.level, bool) or not isinstance(self.level, int) or not 1 <= self.level <= 6:
            raise InvalidArgumentError(f"Heading level can only be an integer within 1 and 6, got {self.level!r}")
        text = _require_str(self, "text")
        if "\n" in text or "\r" in text:
            raise InvalidArgumentError("Heading text must fit on a single line")

    def render(self) -> str:
        return "#" * self.level + " " + self.text


@dataclass(frozen=True)
class Paragraph(MDElement):
    """A paragraph of inline content."""

    children: tuple[MDElement, ...] = ()

    def __post_init__(self) -> None:
        _freeze_children(self, "children", inline_only=True)

    def render(self) -> str:
        return render_inline(self.children, line_start=True).strip(BLOCK_WHITESPACE)


@dataclass(frozen=True)
class ListItem(MDElement):
    """
    One entry of a list.

    Children may mix inline content with nested blocks; nested lists are
    rendered on their own lines one indentation unit deeper.
    """

    children: tuple[MDElement, ...] = ()

    def __post_init__(self) -> None:
        _freeze_children(self, "children")
        for child in self.children:
            if isinstance(child, ListItem):
                raise InvalidArgumentError("ListItem cannot contain another ListItem; wrap it in a ListBlock")

    def _segments(self) -> list[MDElement | str]:
        segments: list[MDElement | str] = []
        run: list[MDElement] = []
        for child in self.children:
            if child.is_block:
                if run:
                    segments.append(render_inline(run, line_start=True).strip(BLOCK_WHITESPACE))
                    run = []
                segments.append(child if isinstance(child, ListBlock) else child.render())
            else:
                run.append(child)
        if run:
            segments.append(render_inline(run, line_start=True).strip(BLOCK_WHITESPACE))
        return [segment for segment in segments if not isinstance(segment, str) or segment.strip(BLOCK_WHITESPACE)]

    def render_lines(self, marker: str, depth: int) -> list[str]:
        """
        Render the item as lines of text.

        Args:
            marker: List marker placed before the first line, e.g. ``"- "``
            depth: Nesting depth of the list that owns this item

        Returns:
            Rendered lines, already indented
        """
        indent = INDENT_UNIT * depth
        continuation = indent + " " * len(marker)
        lines: list[str] = []
        started = False

        for segment in self._segments():
            if isinstance(segment, ListBlock):
                if not started:
                    lines.append(indent + marker)
                    started = True
                lines.extend(segment.render_lines(depth + 1))
                continue
            for line in segment.split("\n"):
                if not started:
                    lines.append(indent + marker + line)
                    started = True
                elif line:
                    lines.append(continuation + line)
                else:
                    lines.append("")

        if not started:
            lines.append(indent + marker)
        return lines

    def render(self) -> str:
        return "\n".join(self.render_lines("", 0))


@dataclass(frozen=True)
class ListBlock(MDElement):
    """Ordered (``1.``) or unordered (``-``) list."""

    ordered: bool = False
    items: tuple[ListItem, ...] = ()
    start: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.ordered, bool):
            raise InvalidArgumentError(f"ListBlock.ordered must be a bool, got {type(self.ordered).__name__}")
        if isinstance(self.start, bool) or not isinstance(self.start, int) or self.start < 0:
            raise InvalidArgumentError(f"ListBlock.start must be a non-negative integer, got {self.start!r}")
        _freeze_children(self, "items")
        for item in self.items:
            if not isinstance(item, ListItem):
                raise InvalidArgumentError(f"ListBlock.items must contain ListItem elements, got {type(item).__name__}")

    def render_lines(self, depth: int = 0) -> list[str]:
        lines: list[str] = []
        for offset, item in enumerate(self.items):
            marker = f"{self.start + offset}. " if self.ordered else "- "
            lines.extend(item.render_lines(marker, depth))
        return lines

    def render(self) -> str:
        return "\n".join(self.render_lines(0))


@dataclass(frozen=True)
class BlockQuote(MDElement):
    """Block quote wrapping other blocks; every line is prefixed with ``>``."""

    children: tuple[MDElement, ...] = ()

    def __post_init__(self) -> None:
        _freeze_children(self, "children", block_only=True)

    def render(self) -> str:
        rendered = (child.render() for child in self.children)
        body = "\n\n".join(text for text in rendered if text.strip(BLOCK_WHITESPACE))
        return "\n".join(f"> {line}" if line else ">" for line in body.split("\n"))


@dataclass(frozen=True)
class CodeBlock(MDElement):
    """Fenced code block. The code is emitted verbatim."""

    code: str = ""
    language: str = ""

    def __post_init__(self) -> None:
        _require_str(self, "code")
        language = _require_str(self, "language")
        if "`" in language or any(char.isspace() for char in language):
            raise InvalidArgumentError(f"CodeBlock language must be a single word without backticks, got {language!r}")

    def render(self) -> str:
        fence = "`" * max(3, longest_backtick_run(self.code) + 1)
        lines = [fence + self.language]
        if self.code:
            lines.append(self.code)
        lines.append(fence)
        return "\n".join(lines)


@dataclass(frozen=True)
class ThematicBreak(MDElement):
    """Horizontal rule."""

    def render(self) -> str:
        return "---"


# ---------------------------------------------------------------------------
# Inline elements
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PlainText(MDElement):
    """Literal text. Markdown-significant characters are escaped on render."""

    is_block: ClassVar[bool] = False

    text: str = ""

    def __post_init__(self) -> None:
        _require_str(self, "text")

    def render(self) -> str:
        first, *rest = escape_markdown(self.text).split("\n")
        return "\n".join([first] + [escape_line_start(line) for line in rest])


class DelimitedSpan(MDElement):
    """
    Inline span wrapped in a delimiter, such as ``*`` or ``**``.

    A span nested inside another span of the same type adds nothing visible,
    so it renders its children without delimiters of its own. Repeating the
    delimiter would change its meaning (``**`` is strong, not double emphasis).
    """

    is_block: ClassVar[bool] = False
    delimiter: ClassVar[str] = ""

    children: tuple[MDElement, ...]

    def render_within(self, active: frozenset[type]) -> str:
        if type(self) in active:
            return render_inline(self.children, active=active)
        inner = render_inline(self.children, active=active | {type(self)})
        return self.delimiter + inner + self.delimiter

    def render(self) -> str:
        return self.render_within(frozenset())


@dataclass(frozen=True)
class Emphasis(DelimitedSpan):
    delimiter: ClassVar[str] = "*"

    children: tuple[MDElement, ...] = ()

    def __post_init__(self) -> None:
        _freeze_children(self, "children", inline_only=True)


@dataclass(frozen=True)
class StrongEmphasis(DelimitedSpan):
    delimiter: ClassVar[str] = "**"

    children: tuple[MDElement, ...] = ()

    def __post_init__(self) -> None:
        _freeze_children(self, "children", inline_only=True)


@dataclass(frozen=True)
class Link(MDElement):
    """Inline link. An empty target still renders, as ``[text]()``."""

    is_block: ClassVar[bool] = False

    children: tuple[MDElement, ...] = ()
    target: str = ""

    def __post_init__(self) -> None:
        _freeze_children(self, "children", inline_only=True)
        _require_str(self, "target")

    def render(self) -> str:
        return "[" + render_inline(self.children) + "](" + _format_target(self.target) + ")"


@dataclass(frozen=True)
class Image(MDElement):
    is_block: ClassVar[bool] = False

    alt: str = ""
    source: str = ""

    def __post_init__(self) -> None:
        _require_str(self, "alt")
        _require_str(self, "source")

    def render(self) -> str:
        return "![" + escape_markdown(self.alt) + "](" + _format_target(self.source) + ")"


@dataclass(frozen=True)
class CodeSpan(MDElement):
    """Inline code; switches to a triple-backtick fence when the code holds a backtick."""

    is_block: ClassVar[bool] = False

    code: str = ""

    def __post_init__(self) -> None:
        _require_str(self, "code")

    def render(self) -> str:
        code = self.code
        fence = "`" * max(3, longest_backtick_run(code) + 1) if "`" in code else "`"
        # Readers strip one space from each side when both sides have one
        padded_by_reader = code.startswith(" ") and code.endswith(" ") and bool(code.strip(" "))
        if code.startswith("`") or code.endswith("`") or padded_by_reader:
            code = f" {code} "
        return f"{fence}{code}{fence}"


@dataclass(frozen=True)
class LineBreak(MDElement):
    """Hard line break inside a block."""

    is_block: ClassVar[bool] = False

    def render(self) -> str:
        return "  \n"
