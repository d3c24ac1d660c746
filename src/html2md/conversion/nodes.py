"""Read-only helpers over BeautifulSoup nodes."""

import re

from bs4 import NavigableString, Tag
from bs4.element import Comment, PageElement, PreformattedString

from ..markdown.elements import MDElement, PlainText

# HTML whitespace; non-breaking space is content
HTML_WHITESPACE_RE = re.compile(r"[ \t\n\r\f]+")


def describe_node(node: object) -> str:
    """Short human-readable name of a node for log and error messages."""
    if isinstance(node, Tag):
        return f"<{node.name}>"
    if isinstance(node, Comment):
        return "#comment"
    if isinstance(node, NavigableString):
        return "#text"
    return type(node).__name__


def is_text(node: PageElement) -> bool:
    """True for character data that belongs in the output (not comments, doctypes, ...)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def tag_name(node: PageElement) -> str:
    if isinstance(node, Tag) and node.name:
        return node.name.lower()
    return ""


def attribute(node: Tag, name: str) -> str:
    """Attribute value as a string; multi-valued attributes are joined with spaces."""
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def collapse_whitespace(text: str) -> str:
    return HTML_WHITESPACE_RE.sub(" ", text)


def flatten_text(node: PageElement) -> str:
    """Text content of a node with inner tags stripped, on a single trimmed line."""
    return collapse_whitespace(node.get_text()).strip(" ")


def text_elements(node: NavigableString) -> list[MDElement]:
    text = collapse_whitespace(str(node))
    if not text:
        return []
    return [PlainText(text)]
