"""Markdown element model and document."""

from .document import MDDocument
from .elements import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    DelimitedSpan,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    ListBlock,
    ListItem,
    MDElement,
    Paragraph,
    PlainText,
    StrongEmphasis,
    ThematicBreak,
    render_inline,
)
from .escaping import escape_destination, escape_line_start, escape_markdown
from .inline import compact_inline, group_blocks

__all__ = [
    # Base
    "MDElement",
    "MDDocument",
    # Block elements
    "BlockQuote",
    "CodeBlock",
    "Heading",
    "ListBlock",
    "ListItem",
    "Paragraph",
    "ThematicBreak",
    # Inline elements
    "CodeSpan",
    "DelimitedSpan",
    "Emphasis",
    "Image",
    "LineBreak",
    "Link",
    "PlainText",
    "StrongEmphasis",
    # Helpers
    "compact_inline",
    "render_inline",
    "escape_destination",
    "escape_line_start",
    "escape_markdown",
    "group_blocks",
]
