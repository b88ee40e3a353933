"""
Markup parser: compact, brace-nested descriptions of element trees.
"""

from .cursor import QuoteCursor
from .braces import BraceTable, match_braces
from .attributes import parse_attribute_list, unquote
from .segment import INPUT_SHORTHANDS, Mode, Action, transition, parse_segment
from .builder import MarkupParser, build_tree, validate

__all__ = [
    'QuoteCursor', 'BraceTable', 'match_braces', 'parse_attribute_list', 'unquote',
    'INPUT_SHORTHANDS', 'Mode', 'Action', 'transition', 'parse_segment',
    'MarkupParser', 'build_tree', 'validate',
]
