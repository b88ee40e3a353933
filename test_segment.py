"""
Tests for the segment parser state machine.
"""

import pytest

from domchain.parser import Action, Mode, parse_segment, transition


@pytest.mark.parametrize("mode, c, expected", [
    (Mode.TAG, " ", (Action.FLUSH, Mode.WSPACE)),
    (Mode.ID, "\t", (Action.FLUSH, Mode.WSPACE)),
    (Mode.NA, "\n", (Action.FLUSH, Mode.WSPACE)),
    (Mode.TAG, "<", (Action.SWITCH, Mode.PARAM)),
    (Mode.ID, "<", (Action.SWITCH, Mode.PARAM)),
    (Mode.NA, "(", (Action.SWITCH, Mode.TEXT)),
    (Mode.PARAM, ">", (Action.SWITCH, Mode.NA)),
    (Mode.TEXT, ")", (Action.SWITCH, Mode.NA)),
    (Mode.TAG, "#", (Action.SWITCH, Mode.ID)),
    (Mode.NA, "#", (Action.SWITCH, Mode.ID)),
    (Mode.WSPACE, "a", (Action.START, Mode.TAG)),
    (Mode.WSPACE, "<", (Action.START, Mode.TAG)),
    (Mode.WSPACE, " ", (Action.APPEND, Mode.WSPACE)),
    (Mode.ID, "#", (Action.APPEND, Mode.ID)),
    (Mode.PARAM, " ", (Action.APPEND, Mode.PARAM)),
    (Mode.PARAM, "(", (Action.APPEND, Mode.PARAM)),
    (Mode.TEXT, ">", (Action.APPEND, Mode.TEXT)),
    (Mode.TEXT, " ", (Action.APPEND, Mode.TEXT)),
    (Mode.TAG, ".", (Action.APPEND, Mode.TAG)),
])
def test_transition_table(mode, c, expected):
    assert transition(mode, c) == expected


def test_full_declaration(sink):
    node = parse_segment("div.a.b<title:x>(Hi)#key", sink)
    assert sink.log[0] == ("insert", "div.a.b")
    assert node.attributes == {"title": "x"}
    assert node.payload == "Hi"
    assert node.key == "key"


def test_whitespace_separates_siblings(sink):
    last = parse_segment("h1 h2 \n\t h3", sink)
    assert [child.tag_spec for child in sink.children] == ["h1", "h2", "h3"]
    assert last is sink.children[-1]


def test_quoted_whitespace_stays_in_params(sink):
    parse_segment("a<title:'x y'>", sink)
    assert len(sink.children) == 1
    assert sink.children[0].attributes == {"title": "x y"}


def test_quoted_paren_stays_in_text(sink):
    node = parse_segment("p('a) b')", sink)
    assert node.payload == "a) b"


def test_text_is_trimmed_then_unquoted(sink):
    node = parse_segment("p( 'x' )", sink)
    assert node.payload == "x"


def test_shorthand_becomes_input(sink):
    node = parse_segment("checkbox<name:'x'>", sink)
    assert node.tag_spec == "input"
    assert node.attributes == {"type": "checkbox", "name": "x"}


def test_shorthand_keeps_classes_and_folds_case(sink):
    node = parse_segment("Radio.big", sink)
    assert node.tag_spec == "input.big"
    assert node.attributes == {"type": "radio"}


def test_explicit_type_overrides_shorthand(sink):
    node = parse_segment("text<type:email>", sink)
    assert node.attributes == {"type": "email"}


def test_custom_shorthands(sink):
    node = parse_segment("email checkbox", sink, frozenset(["email"]))
    assert [child.tag_spec for child in sink.children] == ["input", "checkbox"]
    assert sink.children[0].attributes == {"type": "email"}
    assert node.attributes == {}


def test_unterminated_blocks_are_flushed(sink):
    parse_segment("a<title:x", sink)
    parse_segment("p(hello", sink)
    assert sink.children[0].attributes == {"title": "x"}
    assert sink.children[1].payload == "hello"


def test_characters_after_a_block_are_dropped(sink):
    node = parse_segment("a<x:1>junk", sink)
    assert node.tag_spec == "a"
    assert node.attributes == {"x": "1"}


def test_id_before_params(sink):
    node = parse_segment("a#k<x:1>", sink)
    assert node.key == "k"
    assert node.attributes == {"x": "1"}


def test_empty_declaration_creates_nothing(sink):
    assert parse_segment("()", sink) is None
    assert sink.log == []


def test_call_order_per_node(sink):
    parse_segment("b<k:v>(t)#id", sink)
    assert [entry[0] for entry in sink.log] == ["insert", "set", "html", "id"]
