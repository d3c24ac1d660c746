"""Tests for the default convert rules."""

import pytest
from bs4 import BeautifulSoup
from html2md import Converter, html_to_markdown
from html2md.conversion.rules import (
    FallbackRule,
    HeaderRule,
    IgnoreRule,
    ListRule,
    TextRule,
    default_rules,
)
from html2md.markdown import CodeBlock, Heading, ListBlock, PlainText
from html2md.models.config import ConverterConfig


def first(html: str):
    """Return the first top-level node of a parsed fragment."""
    return next(iter(BeautifulSoup(html, "html.parser").children))


class TestDefaultRules:
    """Tests for the default rule set."""

    def test_fallback_is_last(self):
        """Test that the catch-all rule has the lowest priority."""
        rules = default_rules()
        assert isinstance(rules[-1], FallbackRule)
        assert all(not isinstance(rule, FallbackRule) for rule in rules[:-1])

    def test_fresh_instances(self):
        """Test each call builds a new rule list."""
        assert default_rules() is not default_rules()

    def test_skip_tags_come_from_config(self):
        """Test that IgnoreRule uses the configured skip tags."""
        rules = default_rules(ConverterConfig(skip_tags=["NAV"]))
        ignore = rules[0]
        assert isinstance(ignore, IgnoreRule)
        assert ignore.skip_tags == frozenset({"nav"})


class TestHeaderRule:
    """Tests for HeaderRule."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_supports_all_levels(self, level):
        """Test h1..h6 are supported."""
        assert HeaderRule().supports(first(f"<h{level}>x</h{level}>"))

    @pytest.mark.parametrize("html", ["<h7>x</h7>", "<h>x</h>", "<h12>x</h12>", "<hr>", "<p>x</p>"])
    def test_rejects_other_tags(self, html):
        """Test that tags outside h1..h6 are not supported."""
        assert not HeaderRule().supports(first(html))

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_round_trip(self, level):
        """Test h{n} with plain text converts to n hashes, a space and the text."""
        assert html_to_markdown(f"<h{level}>Plain title</h{level}>") == "#" * level + " Plain title"

    def test_rejects_text_nodes(self):
        """Test that supports never matches character data."""
        assert not HeaderRule().supports(first("h1"))

    def test_uppercase_tag_name(self):
        """Test tag names are matched case-insensitively."""
        soup = BeautifulSoup("", "html.parser")
        tag = soup.new_tag("H2")
        tag.string = "Up"
        assert HeaderRule().supports(tag)
        assert Converter().convert_node(tag) == [Heading(2, "Up")]

    def test_level_from_tag_name(self):
        """Test that the digit in the tag name becomes the level."""
        heading = HeaderRule().convert(first("<h4>Deep</h4>"), lambda child: [])
        assert heading == Heading(4, "Deep")

    def test_inner_tags_are_flattened(self):
        """Test inner markup is stripped from heading text."""
        assert html_to_markdown("<h2>Hello <em>there</em></h2>") == "## Hello there"

    def test_whitespace_is_collapsed(self):
        """Test that multi-line heading text fits on one line."""
        assert html_to_markdown("<h3>\n  Multi\n  line\n</h3>") == "### Multi line"

    def test_empty_header(self):
        """Test that an empty header still yields a heading."""
        assert html_to_markdown("<h1></h1>") == "# "


class TestTextRules:
    """Tests for TextRule and IgnoreRule."""

    def test_text_becomes_plain_text(self):
        """Test that text nodes become PlainText."""
        node = first("hello   world")
        assert TextRule().supports(node)
        assert TextRule().convert(node, lambda child: []) == [PlainText("hello world")]

    def test_text_is_escaped(self):
        """Test that literal Markdown characters in text are escaped."""
        assert html_to_markdown("<p>2 * 3 = [six]</p>") == r"2 \* 3 = \[six\]"

    def test_comments_are_dropped(self):
        """Test comments produce no output."""
        node = first("<!-- note -->")
        assert IgnoreRule().supports(node)
        assert not TextRule().supports(node)
        assert html_to_markdown("<!-- note --><p>kept</p>") == "kept"

    @pytest.mark.parametrize("tag", ["script", "style", "noscript", "template"])
    def test_skipped_tags(self, tag):
        """Test that skipped tags drop their whole subtree."""
        assert html_to_markdown(f"<{tag}>hidden</{tag}><p>kept</p>") == "kept"

    def test_custom_skip_tags(self):
        """Test that skip tags can be configured."""
        config = ConverterConfig(skip_tags=["nav"])
        assert html_to_markdown("<nav>menu</nav><p>kept</p>", config=config) == "kept"
        assert html_to_markdown("<script>x</script>", config=config) == "x"


class TestBlockRules:
    """Tests for paragraph, blockquote, pre and hr."""

    def test_paragraph_with_emphasis(self):
        """Test inline markup inside a paragraph."""
        assert html_to_markdown("<p>Hello <em>big</em> world</p>") == "Hello *big* world"

    def test_span_edge_spaces_move_outside(self):
        """Test that spaces inside emphasis are kept outside the delimiters."""
        assert html_to_markdown("<p>a<em> b </em>c</p>") == "a *b* c"

    def test_empty_paragraph(self):
        """Test an empty paragraph produces nothing."""
        assert html_to_markdown("<p>  </p><p>x</p>") == "x"

    def test_block_inside_paragraph_is_split_out(self):
        """Test that blocks inside a paragraph become sibling blocks."""
        assert html_to_markdown("<p>Intro<ul><li>a</li></ul></p>") == "Intro\n\n- a"

    def test_blockquote(self):
        """Test quoted paragraphs are separated by a quoted blank line."""
        assert html_to_markdown("<blockquote><p>a</p><p>b</p></blockquote>") == "> a\n>\n> b"

    def test_blockquote_with_bare_text(self):
        """Test bare text in a quote becomes a quoted paragraph."""
        assert html_to_markdown("<blockquote>quoted</blockquote>") == "> quoted"

    def test_empty_blockquote(self):
        """Test an empty quote produces nothing."""
        assert html_to_markdown("<blockquote> </blockquote>") == ""

    def test_line_break(self):
        """Test that br becomes a hard line break."""
        assert html_to_markdown("<p>a<br>b</p>") == "a  \nb"

    def test_preformatted_with_language(self):
        """Test code blocks keep their text verbatim and pick up the language."""
        html = '<pre><code class="language-python">def f():\n    return 1\n</code></pre>'
        assert html_to_markdown(html) == "```python\ndef f():\n    return 1\n```"

    def test_preformatted_is_not_escaped(self):
        """Test Markdown characters in code stay literal."""
        document = Converter().convert_document(BeautifulSoup("<pre>a * b_c</pre>", "html.parser"))
        assert list(document) == [CodeBlock("a * b_c")]

    def test_thematic_break(self):
        """Test hr between paragraphs."""
        assert html_to_markdown("<p>a</p><hr><p>b</p>") == "a\n\n---\n\nb"


class TestListRule:
    """Tests for ListRule."""

    def test_unordered(self):
        """Test a flat unordered list."""
        assert html_to_markdown("<ul>\n<li>a</li>\n<li>b</li>\n</ul>") == "- a\n- b"

    def test_ordered_with_start(self):
        """Test numbering continues from the start attribute."""
        assert html_to_markdown('<ol start="3"><li>a</li><li>b</li></ol>') == "3. a\n4. b"

    def test_invalid_start_falls_back_to_one(self):
        """Test a malformed start attribute is ignored."""
        assert html_to_markdown('<ol start="x"><li>a</li></ol>') == "1. a"

    def test_nested_list_inside_item(self):
        """Test that a nested list is indented under its item."""
        html = "<ol><li>first<ul><li>inner</li></ul></li><li>second</li></ol>"
        assert html_to_markdown(html) == "1. first\n  - inner\n2. second"

    def test_bare_nested_list_attaches_to_previous_item(self):
        """Test a list placed directly in a list joins the preceding item."""
        assert html_to_markdown("<ul><li>a</li><ul><li>b</li></ul></ul>") == "- a\n  - b"

    def test_item_with_formatting(self):
        """Test inline markup inside list items."""
        assert html_to_markdown("<ul><li>Read <a href='/docs'>the <b>docs</b></a></li></ul>") == (
            "- Read [the **docs**](/docs)"
        )

    def test_empty_list(self):
        """Test a list without items produces nothing."""
        assert ListRule().convert(first("<ul> </ul>"), lambda child: []) == []

    def test_builds_list_block(self):
        """Test the element produced for an ordered list."""
        converter = Converter()
        result = converter.convert_node(first("<ol><li>x</li></ol>"))
        assert len(result) == 1
        assert isinstance(result[0], ListBlock)
        assert result[0].ordered


class TestInlineRules:
    """Tests for links, images, code spans and emphasis."""

    def test_strong(self):
        """Test strong and b map to strong emphasis."""
        assert html_to_markdown("<p><strong>a</strong> <b>b</b></p>") == "**a** **b**"

    def test_link(self):
        """Test a link with a target."""
        assert html_to_markdown('<a href="https://example.com">site</a>') == "[site](https://example.com)"

    def test_link_without_href(self):
        """Test that a missing href gives an empty target."""
        assert html_to_markdown("<a>name</a>") == "[name]()"

    def test_link_target_with_spaces(self):
        """Test targets containing spaces are wrapped in angle brackets."""
        assert html_to_markdown('<a href="my page.html">x</a>') == "[x](<my page.html>)"

    def test_image(self):
        """Test images render alt text and source."""
        assert html_to_markdown('<img src="a.png" alt="pic">') == "![pic](a.png)"

    def test_inline_code(self):
        """Test code spans keep their content unescaped."""
        assert html_to_markdown("<p>Run <code>a_b*c</code> now</p>") == "Run `a_b*c` now"

    def test_empty_inline_code(self):
        """Test that empty code produces nothing."""
        assert html_to_markdown("<p>x<code></code></p>") == "x"

    def test_unknown_wrappers_are_transparent(self):
        """Test div and span contribute only their children."""
        assert html_to_markdown("<div><span>one</span> <span>two</span></div>") == "one two"

    def test_fallback_supports_everything(self):
        """Test that the fallback rule matches tags and text."""
        rule = FallbackRule()
        assert rule.supports(first("<custom-tag>x</custom-tag>"))
        assert rule.supports(first("text"))


class TestLiteralText:
    """Text from the page must never turn into Markdown syntax."""

    def test_bang_before_link(self):
        """Test that an exclamation mark before a link does not make an image."""
        assert html_to_markdown('<p>Wow!<a href="x">y</a></p>') == r"Wow\![y](x)"

    def test_bang_with_space_before_link(self):
        """Test that a separated exclamation mark is left alone."""
        assert html_to_markdown('<p>Wow! <a href="x">y</a></p>') == "Wow! [y](x)"

    @pytest.mark.parametrize(
        "html, expected",
        [
            ("<p># not a heading</p>", r"\# not a heading"),
            ("<p>- dash</p>", r"\- dash"),
            ("<p>+ plus</p>", r"\+ plus"),
            ("<p>&gt; not a quote</p>", r"\> not a quote"),
            ("<p>1. one</p>", r"1\. one"),
            ("<p>2) two</p>", r"2\) two"),
            ("<p>3.14 is pi</p>", "3.14 is pi"),
        ],
    )
    def test_leading_block_markers(self, html, expected):
        """Test that paragraph text starting with a block marker stays a paragraph."""
        assert html_to_markdown(html) == expected

    def test_marker_after_line_break(self):
        """Test the line following a br is checked for markers."""
        assert html_to_markdown("<p>a<br># b</p>") == "a  \n\\# b"

    def test_marker_in_list_item(self):
        """Test that list item text cannot open a heading."""
        assert html_to_markdown("<ul><li># x</li></ul>") == r"- \# x"

    def test_marker_in_top_level_text(self):
        """Test bare text outside any paragraph is escaped too."""
        assert html_to_markdown("# x") == r"\# x"

    def test_raw_html_text(self):
        """Test that escaped tags in the page stay literal."""
        assert html_to_markdown("<p>&lt;em&gt;hi&lt;/em&gt;</p>") == r"\<em>hi\</em>"

    def test_entity_text(self):
        """Test that text spelling an entity is not decoded by Markdown readers."""
        assert html_to_markdown("<p>&amp;copy;</p>") == r"\&copy;"

    def test_code_inside_emphasis(self):
        """Test code content is not escaped by the surrounding emphasis."""
        assert html_to_markdown("<p><em><code>a*b</code></em></p>") == "*`a*b`*"

    def test_strong_inside_emphasis(self):
        """Test nested strong emphasis stays live markup."""
        assert html_to_markdown("<p><em>a <strong>b</strong></em></p>") == "*a **b***"

    def test_nested_emphasis(self):
        """Test that em inside em does not become strong."""
        assert html_to_markdown("<p><em>x <em>y</em></em></p>") == "*x y*"

    def test_link_target_with_parenthesis(self):
        """Test that a parenthesis in href cannot end the link."""
        assert html_to_markdown('<a href="a)b">x</a>') == r"[x](a\)b)"

    def test_inline_code_with_surrounding_spaces(self):
        """Test that padded inline code keeps its spaces."""
        assert html_to_markdown("<p>x <code> a </code></p>") == "x `  a  `"
