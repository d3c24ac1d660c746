"""Rules for block-level containers: paragraphs, quotes, code and rules."""

import re

from bs4 import Tag

from ...markdown.elements import BlockQuote, CodeBlock, MDElement, ThematicBreak
from ...markdown.inline import group_blocks
from ..nodes import attribute
from ..protocols import Recurse
from .base import TagRule, convert_children

_LANGUAGE_CLASS_RE = re.compile(r"^(?:language|lang)-([\w+#.-]+)$")


class ParagraphRule(TagRule):
    """
    ``p`` becomes a Paragraph of its inline content.

    Block elements found inside the paragraph are emitted as sibling blocks
    in document order; an empty paragraph produces nothing.
    """

    name = "paragraph"
    tags = frozenset({"p"})

    def convert(self, node: Tag, recurse: Recurse) -> list[MDElement]:
        return group_blocks(convert_children(node, recurse))


class BlockquoteRule(TagRule):
    name = "blockquote"
    tags = frozenset({"blockquote"})

    def convert(self, node: Tag, recurse: Recurse) -> list[MDElement]:
        blocks = group_blocks(convert_children(node, recurse))
        if not blocks:
            return []
        return [BlockQuote(tuple(blocks))]


class PreformattedRule(TagRule):
    """``pre`` becomes a fenced CodeBlock holding the raw text, unescaped."""

    name = "preformatted"
    tags = frozenset({"pre"})

    def _detect_language(self, node: Tag) -> str:
        candidates = [node]
        code = node.find("code")
        if isinstance(code, Tag):
            candidates.append(code)
        for candidate in candidates:
            for css_class in attribute(candidate, "class").split():
                match = _LANGUAGE_CLASS_RE.match(css_class)
                if match:
                    return match.group(1)
        return ""

    def convert(self, node: Tag, recurse: Recurse) -> CodeBlock:
        code = node.get_text()
        # The newline right after <pre> and the one before </pre> are layout only
        if code.startswith("\n"):
            code = code[1:]
        if code.endswith("\n"):
            code = code[:-1]
        return CodeBlock(code, self._detect_language(node))


class ThematicBreakRule(TagRule):
    name = "thematic_break"
    tags = frozenset({"hr"})

    def convert(self, node: Tag, recurse: Recurse) -> ThematicBreak:
        return ThematicBreak()
