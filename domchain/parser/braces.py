"""
Brace matching for markup text.
"""

import logging
from bisect import bisect_left
from typing import Iterator, List, Optional, Sequence, Tuple

from .cursor import QuoteCursor
from ..exceptions import UnbalancedBraces, EXTRA_CLOSE, UNCLOSED_OPEN

logger = logging.getLogger(__name__)


class BraceTable:
    """
    Matched ``{...}`` spans of one markup text, indexed by pair id.

    Pair ids are assigned when a brace opens, so ``opens`` is sorted.
    """

    def __init__(self, opens: Sequence[int], closes: Sequence[int]):
        self.opens: Tuple[int, ...] = tuple(opens)
        self.closes: Tuple[int, ...] = tuple(closes)

    def __len__(self) -> int:
        return len(self.opens)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(zip(self.opens, self.closes))

    def span(self, pair_id: int) -> Tuple[int, int]:
        return self.opens[pair_id], self.closes[pair_id]

    def first_open_at_or_after(self, pos: int, end: int) -> Optional[int]:
        """
        Find the first pair opening in ``[pos, end)``.

        Returns:
            The pair id, or None if no brace opens in that range
        """
        pair_id = bisect_left(self.opens, pos)
        if pair_id < len(self.opens) and self.opens[pair_id] < end:
            return pair_id
        return None

    def __repr__(self) -> str:
        return f"BraceTable({list(self)!r})"


def match_braces(text: str) -> BraceTable:
    """
    Pair up the unquoted braces of ``text`` in one pass.

    Args:
        text: Markup text

    Returns:
        BraceTable: the matched spans

    Raises:
        UnbalancedBraces: on a ``}`` with nothing open, or a ``{`` never closed
    """
    cursor = QuoteCursor()
    opens: List[int] = []
    closes: List[Optional[int]] = []
    stack: List[int] = []

    for index, c in enumerate(text):
        if cursor.feed(c):
            continue
        if c == '{':
            stack.append(len(opens))
            opens.append(index)
            closes.append(None)
        elif c == '}':
            if not stack:
                logger.debug(f"Parse: '{{' expected, found '}}' at position {index}")
                raise UnbalancedBraces(EXTRA_CLOSE, index)
            closes[stack.pop()] = index

    if stack:
        position = opens[stack[-1]]
        logger.debug(f"Parse: '}}' expected for '{{' at position {position}")
        raise UnbalancedBraces(UNCLOSED_OPEN, position)

    return BraceTable(opens, closes)
