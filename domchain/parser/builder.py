"""
Tree building: the top-level driver of the markup parser.

Parsing runs in two passes. ``match_braces`` pairs every brace first, so
unbalanced markup fails before a single node exists. ``_build`` then walks
the spans recursively, handing the text in front of each span to the
segment parser and descending into the span with the last node created.
"""

import logging
from typing import Iterable, Optional

from .braces import BraceTable, match_braces
from .segment import INPUT_SHORTHANDS, parse_segment
from ..utils.logging import PerformanceLogger

logger = logging.getLogger(__name__)


def validate(text: str) -> BraceTable:
    """
    Check the brace structure of markup without building anything.

    Raises:
        UnbalancedBraces: if the braces do not pair up
    """
    return match_braces(text)


def _build(parent, text: str, table: BraceTable, start: int, end: int, shorthands) -> None:
    pos = start
    while pos < end:
        pair_id = table.first_open_at_or_after(pos, end)
        if pair_id is None:
            header = text[pos:end].strip()
            if header:
                parse_segment(header, parent, shorthands)
            return

        open_index, close_index = table.span(pair_id)
        header = text[pos:open_index].strip()
        # An empty header ("}{") attaches the block to the enclosing parent
        target = parent
        if header:
            target = parse_segment(header, parent, shorthands) or parent
        _build(target, text, table, open_index + 1, close_index, shorthands)
        pos = close_index + 1


def build_tree(parent, text: str, shorthands: Iterable[str] = INPUT_SHORTHANDS):
    """
    Build markup into ``parent``.

    Args:
        parent: Element sink receiving the top-level nodes
        text: Markup text
        shorthands: Tag names rewritten to ``input<type:NAME>``

    Returns:
        ``parent``

    Raises:
        UnbalancedBraces: if the braces do not pair up; nothing is built
    """
    shorthands = frozenset(shorthands)
    perf = PerformanceLogger(logger, "markup")

    perf.start("brace pass")
    table = match_braces(text)
    perf.end("brace pass")

    perf.start("build pass")
    _build(parent, text, table, 0, len(text), shorthands)
    perf.end("build pass")
    return parent


class MarkupParser:
    """
    Markup parser bound to a set of input shorthands.

    With a ``Config`` the shorthands come from ``parser.input_shorthands``.
    """

    def __init__(self, shorthands: Optional[Iterable[str]] = None, config=None):
        if shorthands is None and config is not None:
            shorthands = config.get("parser.input_shorthands")
        if shorthands is None:
            shorthands = INPUT_SHORTHANDS
        self.shorthands = frozenset(name.lower() for name in shorthands)
        logger.debug(f"Markup parser initialized with shorthands {sorted(self.shorthands)}")

    def parse(self, parent, text: str):
        """Build ``text`` into ``parent`` and return ``parent``."""
        return build_tree(parent, text, self.shorthands)

    def validate(self, text: str) -> BraceTable:
        return validate(text)
