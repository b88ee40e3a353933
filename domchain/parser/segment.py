"""
Segment parsing: one brace-free header into sibling nodes.

A header such as ``div.card<id:'x'>(Hello) span#label`` declares one node
per whitespace-separated run. Each character is dispatched on the current
``Mode`` by ``transition``; quoted characters skip the table and go straight
into the active buffer.
"""

import logging
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from .attributes import parse_attribute_list, unquote
from .cursor import QuoteCursor

logger = logging.getLogger(__name__)

INPUT_SHORTHANDS: FrozenSet[str] = frozenset(
    ["checkbox", "radio", "text", "number", "password", "url"])


class Mode(Enum):
    TAG = "tag"
    PARAM = "param"
    TEXT = "text"
    ID = "id"
    WSPACE = "wspace"
    NA = "na"


class Action(Enum):
    APPEND = "append"
    SWITCH = "switch"
    START = "start"
    FLUSH = "flush"


# Modes that collect characters; WSPACE and NA drop them
BUFFERED_MODES = (Mode.TAG, Mode.PARAM, Mode.TEXT, Mode.ID)

_DECLARATION_MODES = (Mode.TAG, Mode.ID, Mode.NA)

# (mode, character) -> mode for the structural punctuation
TRANSITIONS: Dict[Tuple[Mode, str], Mode] = {}
for _mode in _DECLARATION_MODES:
    TRANSITIONS[_mode, '<'] = Mode.PARAM
    TRANSITIONS[_mode, '('] = Mode.TEXT
TRANSITIONS[Mode.PARAM, '>'] = Mode.NA
TRANSITIONS[Mode.TEXT, ')'] = Mode.NA
TRANSITIONS[Mode.TAG, '#'] = Mode.ID
TRANSITIONS[Mode.NA, '#'] = Mode.ID
del _mode


def is_space(c: str) -> bool:
    """Whitespace here means any character with a code at or below space."""
    return c <= ' '


def transition(mode: Mode, c: str) -> Tuple[Action, Mode]:
    """
    Decide what an unquoted character does in ``mode``.

    Returns:
        tuple: (action, mode after the character)
    """
    if is_space(c) and mode in _DECLARATION_MODES:
        return Action.FLUSH, Mode.WSPACE
    next_mode = TRANSITIONS.get((mode, c))
    if next_mode is not None:
        return Action.SWITCH, next_mode
    if mode is Mode.WSPACE and not is_space(c):
        return Action.START, Mode.TAG
    return Action.APPEND, mode


class SegmentState:
    """Scanner state for one header: buffers, mode and the last node made."""

    def __init__(self):
        self.mode = Mode.TAG
        self.buffers: Dict[Mode, str] = dict.fromkeys(BUFFERED_MODES, "")
        self.last = None

    def append(self, c: str) -> None:
        if self.mode in self.buffers:
            self.buffers[self.mode] += c

    def is_empty(self) -> bool:
        return not any(self.buffers.values())

    def take(self) -> Tuple[str, str, str, str]:
        """Return the TAG, PARAM, TEXT and ID buffers and reset for the next node."""
        taken = tuple(self.buffers[mode] for mode in BUFFERED_MODES)
        self.buffers = dict.fromkeys(BUFFERED_MODES, "")
        self.mode = Mode.WSPACE
        return taken


def _flush(state: SegmentState, parent, shorthands: FrozenSet[str]) -> None:
    if state.is_empty():
        state.mode = Mode.WSPACE
        return
    tag_spec, params, text, key = state.take()

    tokens = tag_spec.split('.')
    keyword = tokens[0].lower()
    if keyword in shorthands:
        tokens[0] = "input"
        params = f"type:{keyword},{params}" if params else f"type:{keyword}"
        tag_spec = ".".join(tokens)

    node = parent.insert(tag_spec)
    if params:
        node.set(parse_attribute_list(params))
    if text:
        node.html(unquote(text.strip()))
    if key:
        node.id(key)

    logger.debug(f"Created {tag_spec!r} under {parent!r}")
    state.last = node


def parse_segment(header: str, parent, shorthands: FrozenSet[str] = INPUT_SHORTHANDS):
    """
    Build the nodes a header declares as children of ``parent``.

    ``parent`` is the element sink: ``parent.insert(tag_spec)`` must return
    a node offering ``set(mapping)``, ``html(text)`` and ``id(key)``.
    An attribute or text block left open at the end of the header is still
    applied with whatever it collected.

    Args:
        header: Header text without unmatched braces
        parent: Node that receives the new nodes
        shorthands: Tag names rewritten to ``input<type:NAME>``

    Returns:
        The last node created, or None if the header declared nothing
    """
    state = SegmentState()
    cursor = QuoteCursor()

    for c in header:
        if cursor.feed(c):
            state.append(c)
            continue
        action, mode = transition(state.mode, c)
        if action is Action.FLUSH:
            _flush(state, parent, shorthands)
        elif action is Action.START:
            state.mode = mode
            state.append(c)
        elif action is Action.SWITCH:
            state.mode = mode
        else:
            state.append(c)

    _flush(state, parent, shorthands)
    return state.last
