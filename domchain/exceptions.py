"""
Exceptions raised by domchain.
"""

from typing import Optional

EXTRA_CLOSE = "extra close"
UNCLOSED_OPEN = "unclosed open"


class DomChainError(Exception):
    """Base class for all domchain errors."""


class MarkupError(DomChainError):
    """A problem with markup text, located at a character position."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class UnbalancedBraces(MarkupError):
    """
    Braces in the markup do not pair up.

    ``kind`` is ``"extra close"`` for a ``}`` without a matching ``{`` and
    ``"unclosed open"`` for a ``{`` left open at the end of the text.
    ``position`` is the index of the offending brace.
    """

    def __init__(self, kind: str, position: int):
        if kind == EXTRA_CLOSE:
            message = f"Unbalanced braces: extra close at position {position}, '{{' expected"
        else:
            message = f"Unbalanced braces: unclosed open at position {position}, '}}' expected"
        super().__init__(message, position)
        self.kind = kind


class TreeError(DomChainError):
    """Invalid navigation or mutation of a page tree."""
