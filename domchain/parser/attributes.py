"""
Parsing of ``key:value,...`` attribute blocks.
"""

from typing import Dict, List

from .cursor import QuoteCursor, QUOTES

KEY, VALUE = 0, 1


def unquote(s: str) -> str:
    """
    Strip one layer of matching quotes.

    ``'a'`` and ``"a"`` become ``a``; a lone or mismatched quote is kept.
    """
    if len(s) >= 2 and s[0] in QUOTES and s[-1] == s[0]:
        return s[1:-1]
    return s


def _commit(pair: List[str], mapping: Dict[str, str]) -> None:
    key = unquote(pair[KEY].strip())
    if key:
        mapping[key] = unquote(pair[VALUE].strip())


def parse_attribute_list(text: str) -> Dict[str, str]:
    """
    Parse the inside of an attribute block.

    The first unquoted ``:`` of a pair separates key from value; an unquoted
    ``,`` after it ends the pair. Pairs with an empty key are dropped and a
    repeated key keeps its last value.

    Args:
        text: e.g. ``"k1:v1,k2:'v,2'"``

    Returns:
        dict: key to value, both trimmed and unquoted
    """
    cursor = QuoteCursor()
    mapping: Dict[str, str] = {}
    pair = ["", ""]
    slot = KEY

    for c in text:
        if cursor.feed(c):
            pair[slot] += c
        elif c == ':' and slot == KEY:
            slot = VALUE
        elif c == ',' and slot == VALUE:
            _commit(pair, mapping)
            pair = ["", ""]
            slot = KEY
        else:
            pair[slot] += c

    _commit(pair, mapping)
    return mapping
