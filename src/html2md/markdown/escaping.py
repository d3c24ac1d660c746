"""Escaping helpers for Markdown source text."""

import re

# Characters that can start or end inline Markdown syntax
MARKDOWN_SPECIAL_CHARS = "\\`*_[]<"

_SPECIAL_CHARS_RE = re.compile(r"([\\`*_\[\]<])")
# An ampersand only matters when it would start an entity reference
_ENTITY_RE = re.compile(r"&(?=#?[0-9A-Za-z]+;)")
_BACKTICK_RUN_RE = re.compile(r"`+")

# Markers that open a block when they start a line: ATX headings, quotes,
# bullets, setext underlines, tilde fences and ordered list numbers
_BLOCK_MARKER_RE = re.compile(r"^([ \t]*)(?:(#{1,6})(?=[ \t]|$)|([>+=~-])|(\d{1,9})(?=[.)](?:[ \t]|$)))")

_DESTINATION_CHARS_RE = re.compile(r"([\\()<>])")


def escape_markdown(text: str) -> str:
    """
    Escape Markdown-significant characters with a leading backslash.

    Args:
        text: Raw text taken from the HTML tree

    Returns:
        Text that renders literally in Markdown
    """
    return _ENTITY_RE.sub(r"\\&", _SPECIAL_CHARS_RE.sub(r"\\\1", text))


def escape_line_start(text: str) -> str:
    """
    Neutralize a block marker at the start of a rendered line.

    ``# title``, ``> quote``, ``- item`` or ``1. item`` would otherwise turn a
    line of paragraph text into a heading, quote or list.

    Args:
        text: Escaped text that will be placed at the start of a line

    Returns:
        The same text with the marker backslash-escaped
    """
    match = _BLOCK_MARKER_RE.match(text)
    if not match:
        return text
    if match.group(4):
        # "1. " -> "1\. "
        split = match.end(4)
    else:
        split = match.end(1)
    return text[:split] + "\\" + text[split:]


def escape_destination(target: str) -> str:
    """Escape a link or image destination so it cannot end the link early."""
    target = target.replace("\r", "%0D").replace("\n", "%0A")
    return _DESTINATION_CHARS_RE.sub(r"\\\1", target)


def longest_backtick_run(text: str) -> int:
    """Return the length of the longest run of consecutive backticks in text."""
    return max((len(run) for run in _BACKTICK_RUN_RE.findall(text)), default=0)
