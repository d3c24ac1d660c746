"""Rule registry and recursive HTML to Markdown tree walk."""

import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from bs4 import NavigableString, Tag
from bs4.element import PageElement

from ..errors import (
    ConfigurationError,
    ConversionDepthError,
    Html2MdError,
    InvalidArgumentError,
    MalformedInputError,
    RuleError,
)
from ..markdown.document import MDDocument
from ..markdown.elements import MDElement
from ..markdown.inline import group_blocks
from ..models.config import ConverterConfig
from .nodes import describe_node
from .protocols import ConvertResult, ConvertRule
from .rules import default_rules

logger = logging.getLogger(__name__)


def _rule_name(rule: object) -> str:
    return getattr(rule, "name", None) or type(rule).__name__


class Converter:
    """
    Converts an HTML tree into a Markdown document.

    The converter owns an ordered list of convert rules. Registration order
    is priority order: for every node the first rule whose ``supports``
    returns True converts it, and gets the converter's recursion callback to
    convert the node's children. A universal fallback rule must be registered
    last; a node no rule supports is a configuration error.

    A converter keeps no state between calls, so one instance can convert
    many documents, including from several threads at once.

    Example:
        soup = BeautifulSoup("<h2>Welcome</h2>", "html.parser")
        converter = Converter()
        converter.convert_document(soup).render()  # "## Welcome"
    """

    def __init__(
        self,
        rules: Optional[Iterable[ConvertRule]] = None,
        config: Optional[ConverterConfig] = None,
    ):
        """
        Initialize the converter.

        Args:
            rules: Rules in priority order (uses the default rule set if None)
            config: Converter configuration (uses defaults if None)
        """
        self._config = config or ConverterConfig()
        self._rules: list[ConvertRule] = []
        if rules is None:
            self._load_convert_rules()
        else:
            self.register_all(rules)

    def _load_convert_rules(self) -> None:
        self.register_all(default_rules(self._config))

    @property
    def config(self) -> ConverterConfig:
        return self._config

    @property
    def rules(self) -> tuple[ConvertRule, ...]:
        """Registered rules, highest priority first."""
        return tuple(self._rules)

    def register(self, rule: ConvertRule) -> None:
        """
        Register a rule after all rules registered so far.

        Raises:
            ConfigurationError: If ``rule`` does not provide supports() and convert()
        """
        if not isinstance(rule, ConvertRule):
            raise ConfigurationError(
                f"{type(rule).__name__} is not a convert rule (needs name, supports() and convert())",
                rule=type(rule).__name__,
            )
        self._rules.append(rule)
        logger.debug(f"Registered rule {_rule_name(rule)} at priority {len(self._rules)}")

    def register_all(self, rules: Iterable[ConvertRule]) -> None:
        for rule in rules:
            self.register(rule)

    def find_rule(self, node: PageElement) -> ConvertRule:
        """
        Return the first registered rule that supports ``node``.

        Raises:
            ConfigurationError: If no rule supports the node
            RuleError: If a rule fails while deciding
        """
        for rule in self._rules:
            try:
                supported = rule.supports(node)
            except Html2MdError:
                raise
            except Exception as e:
                raise RuleError(
                    f"supports() raised {type(e).__name__}: {e}",
                    node=describe_node(node),
                    rule=_rule_name(rule),
                ) from e
            if supported:
                return rule
        raise ConfigurationError(
            "No convert rule supports this node; register a fallback rule last",
            node=describe_node(node),
        )

    def convert_node(self, node: PageElement) -> list[MDElement]:
        """
        Convert a single node (and, through its rule, its subtree).

        Args:
            node: A Tag or a text node

        Returns:
            Markdown elements produced for the node, in order (possibly empty)
        """
        return self._convert_node(node, 0)

    def _convert_node(self, node: PageElement, depth: int) -> list[MDElement]:
        if not isinstance(node, (Tag, NavigableString)):
            raise MalformedInputError(f"Expected an HTML node, got {type(node).__name__}")

        max_depth = self._config.max_depth
        if max_depth is not None and depth > max_depth:
            raise ConversionDepthError(max_depth, node=describe_node(node))

        rule = self.find_rule(node)
        if self._config.debug:
            logger.debug(f"{'  ' * depth}{describe_node(node)} -> {_rule_name(rule)}")

        def recurse(child: PageElement) -> list[MDElement]:
            return self._convert_node(child, depth + 1)

        try:
            result = rule.convert(node, recurse)
        except InvalidArgumentError as err:
            if err.rule is None and err.node is None:
                err.rule = _rule_name(rule)
                err.node = describe_node(node)
            raise
        except (Html2MdError, RecursionError):
            raise
        except Exception as e:
            raise RuleError(f"Rule raised {type(e).__name__}: {e}", node=describe_node(node), rule=_rule_name(rule)) from e

        return self._normalize_result(result, rule, node)

    def _normalize_result(self, result: ConvertResult, rule: ConvertRule, node: PageElement) -> list[MDElement]:
        if isinstance(result, MDElement):
            return [result]
        if not isinstance(result, Sequence) or isinstance(result, (str, bytes)):
            raise RuleError(
                f"Rule returned {type(result).__name__}, expected Markdown element(s)",
                node=describe_node(node),
                rule=_rule_name(rule),
            )
        elements = list(result)
        for element in elements:
            if not isinstance(element, MDElement):
                raise RuleError(
                    f"Rule returned a {type(element).__name__} among its elements",
                    node=describe_node(node),
                    rule=_rule_name(rule),
                )
        return elements

    def convert_document(self, root: Tag) -> MDDocument:
        """
        Convert a whole HTML tree into a Markdown document.

        The children of ``<body>`` are the top-level nodes when the tree has a
        body, otherwise the children of ``root`` itself. Any failure aborts
        the whole conversion; no partial document is returned.

        Args:
            root: Parsed tree, usually a BeautifulSoup object

        Returns:
            The Markdown document, with top-level inline runs grouped into paragraphs

        Raises:
            ConfigurationError: A node matched no rule
            InvalidArgumentError: A rule built an element with an invalid attribute
            MalformedInputError: The tree holds something that is not a node
            RuleError: A rule failed or returned something other than elements
        """
        if not isinstance(root, Tag):
            raise MalformedInputError(f"Expected a parsed HTML tree, got {type(root).__name__}")

        body = root.body if root.name != "body" else None
        container = body if isinstance(body, Tag) else root

        elements: list[MDElement] = []
        for child in container.children:
            elements.extend(self._convert_node(child, 0))

        document = MDDocument(group_blocks(elements))
        logger.debug(f"Converted {describe_node(container)} into {len(document)} top-level elements")
        return document

    def convert(self, root: Tag) -> MDDocument:
        """Alias of :meth:`convert_document`."""
        return self.convert_document(root)
