"""Exception hierarchy for html2md.

Every error raised by the conversion engine derives from ``Html2MdError`` so
callers can catch the whole family at once. Errors carry the name of the node
and, where known, the rule involved so a failed conversion can be traced back
to its origin.
"""

from typing import Optional


class Html2MdError(Exception):
    """Base exception for all html2md errors."""

    def __init__(self, message: str, node: Optional[str] = None, rule: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.node = node
        self.rule = rule

    def __str__(self) -> str:
        context = []
        if self.rule:
            context.append(f"rule={self.rule}")
        if self.node:
            context.append(f"node={self.node}")
        if context:
            return f"{self.message} ({', '.join(context)})"
        return self.message


class ConfigurationError(Html2MdError):
    """Raised when the rule registry cannot handle a node or holds an invalid rule."""


class InvalidArgumentError(Html2MdError, ValueError):
    """Raised when a Markdown element is constructed with an out-of-domain attribute."""


class MalformedInputError(Html2MdError):
    """Raised when the HTML tree contains something that is not a valid node."""


class ConversionDepthError(MalformedInputError):
    """Raised when the tree is nested deeper than the configured maximum."""

    def __init__(self, max_depth: int, node: Optional[str] = None):
        super().__init__(f"Maximum nesting depth of {max_depth} exceeded", node=node)
        self.max_depth = max_depth


class RuleError(Html2MdError):
    """Raised when a convert rule fails or returns something other than Markdown elements."""
