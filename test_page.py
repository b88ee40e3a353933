"""
Tests for the chaining Page API.
"""

import gc

import pytest

from domchain import Page, TreeError
from domchain.dom import SVG_NAMESPACE, HTML_NAMESPACE


def tags(page):
    return [child.element.tag_name for child in page.children]


def element_tags(page):
    return [child.tag_name for child in page.element.children]


def test_insert_chains_down_and_up(page):
    title = page.insert("div.card").insert("h1").text("Title")
    assert title.up().element.tag_name == "div"
    assert title.up(2) is page
    assert title.up(0) is title.parent


def test_up_past_the_root_raises(page):
    with pytest.raises(TreeError):
        page.insert("div").up(2)


def test_append_and_prepend_keep_pages_and_elements_in_step(page):
    a = page.insert("a")
    page.insert("c")
    a.append("b")
    a.prepend("z")
    assert tags(page) == ["z", "a", "b", "c"]
    assert element_tags(page) == ["z", "a", "b", "c"]


def test_append_after_last_child(page):
    a = page.insert("a")
    b = a.append("b")
    assert tags(page) == ["a", "b"]
    assert b.parent is page


def test_siblings_of_the_root_are_rejected(page):
    with pytest.raises(TreeError):
        page.append("div")
    with pytest.raises(TreeError):
        page.prepend("div")


def test_set_contract(page):
    div = page.insert("div").set({
        "class": "x.y",
        "style": "color:red; margin : 0;bogus",
        "title": "hello",
    })
    element = div.element
    assert list(element.class_list) == ["x", "y"]
    assert element.style == {"color": "red", "margin": "0"}
    assert element.properties == {"title": "hello"}
    assert element.attributes == {}


def test_set_with_nothing_is_a_no_op(page):
    div = page.insert("div")
    assert div.set(None) is div
    assert div.set({}) is div


def test_style_accepts_a_mapping(page):
    div = page.insert("div", {"style": {"color": "blue"}}).style({"width": "10px"})
    assert div.element.style == {"color": "blue", "width": "10px"}


def test_reflected_properties(page):
    div = page.insert("div", {"className": "a b", "textContent": "x"})
    assert list(div.element.class_list) == ["a", "b"]
    assert div.element.text_content == "x"
    assert "className" not in div.element.properties


def test_child_indexing(page):
    page.parse("a b c")
    assert page.child(0).element.tag_name == "a"
    assert page.child(-1).element.tag_name == "c"
    assert page.element_child(1).tag_name == "b"
    with pytest.raises(TreeError):
        page.child(3)


def test_classes(page):
    div = page.insert("div.a").add_class("b").add_class("b")
    assert list(div.element.class_list) == ["a", "b"]
    div.remove_class("a")
    assert list(div.element.class_list) == ["b"]
    div.remove_class()
    assert len(div.element.class_list) == 0


def test_lookup_keys_are_scoped_to_one_tree(page):
    span = page.insert("div").insert("span").id("k")
    assert page.get("k") is span
    assert page.get_element("k") is span.element
    assert span.parent.get("k") is span
    other = Page()
    assert other.get("k") is None
    assert other.get_element("k") is None


def test_registering_a_key_again_rebinds_it(page):
    page.insert("a").id("k")
    b = page.insert("b").id("k")
    assert page.get("k") is b


def test_html_parses_content_and_drops_child_pages(page):
    div = page.insert("div")
    div.insert("span")
    div.html("<b>x</b> y")
    assert div.children == []
    assert div.element.inner_html == "<b>x</b> y"
    assert div.element.text_content == "x y"


def test_text_is_escaped(page):
    p = page.insert("p").text("a < b")
    assert p.element.inner_html == "a &lt; b"


def test_find(page):
    page.parse("div { ul { li#target } }")
    target = page.get("target")
    assert page.find(target.element) is target
    assert page.child(0).find(page.child(0).element) is page.child(0)
    assert page.find(object()) is None


def test_clear(page):
    div = page.insert("div")
    div.parse("a b")
    assert div.clear() is div
    assert div.children == []
    assert div.element.child_nodes == []


def test_remove(page):
    page.parse("a b c")
    b = page.child(1)
    b.remove()
    assert tags(page) == ["a", "c"]
    assert element_tags(page) == ["a", "c"]
    assert b.element.parent_node is None


def test_css_replaces_inline_style(page):
    div = page.insert("div", {"style": "width:1px"}).css("color: red; display: block")
    assert div.element.style == {"color": "red", "display": "block"}


def test_inject_css_adds_style_to_head(page):
    style = page.inject_css("p { color: red }")
    document = page.document
    assert style in document.stylesheets
    assert style.parent_node is document.head
    assert "color: red" in style.text_content


def test_shadow_root(page):
    host = page.insert("div")
    shadow = host.shadow_root()
    assert host.shadow_root() is shadow
    shadow.insert("span").text("inside")
    assert host.to_html() == "<div></div>"
    assert shadow.to_html() == "<span>inside</span>"
    assert shadow.parent is host


def test_svg_namespace_is_inherited(page):
    circle = page.insert("svg").insert("circle")
    assert circle.svg
    assert circle.element.namespace_uri == SVG_NAMESPACE
    assert page.insert("div").element.namespace_uri == HTML_NAMESPACE
    assert page.child(0).to_html() == "<svg><circle/></svg>"


def test_chaining_from_a_temporary_root():
    heading = Page().insert("div").insert("h1")
    gc.collect()
    paragraph = heading.up().insert("p")
    assert tags(paragraph.up()) == ["h1", "p"]
    assert paragraph.up(2).element.tag_name == "body"
    assert paragraph.up(2).registry.root is paragraph.up(2)


def test_lookup_from_a_temporary_root():
    span = Page().parse("div{span#s}").get("s")
    gc.collect()
    assert span.up().element.tag_name == "div"
    assert span.up().get("s") is span


def test_parent_link_does_not_keep_a_dropped_parent_alive(page):
    div = page.insert("div")
    child = div.insert("span")
    page.clear()
    del div
    gc.collect()
    assert child.parent is None


def test_html_and_text_forget_dropped_keys(page):
    div = page.insert("div")
    div.parse("span#a { i#b }")
    div.html("<b>x</b>")
    assert page.get("a") is None
    assert page.get("b") is None

    div.parse("em#c")
    div.text("y")
    assert page.get("c") is None


def test_clear_forgets_dropped_keys(page):
    page.insert("p").id("keep")
    div = page.insert("div").id("outer")
    div.parse("ul#list { li#item }")
    div.clear()
    assert page.get("list") is None
    assert page.get("item") is None
    assert page.get("outer") is div
    assert page.get("keep") is not None


def test_remove_forgets_keys_of_the_subtree(page):
    page.insert("p").id("keep")
    section = page.insert("section").id("gone")
    section.insert("i").id("inner")
    section.shadow_root().insert("span").id("shadowed")
    section.remove()
    assert page.get("gone") is None
    assert page.get("inner") is None
    assert page.get("shadowed") is None
    assert page.get("keep").element.tag_name == "p"


def test_to_html(page):
    page.insert("div.card", {"title": "x"}).insert("span").text("hi")
    assert page.child(0).to_html() == '<div class="card" title="x"><span>hi</span></div>'
    assert page.to_html(inner=True) == page.child(0).to_html()


def test_to_html_properties(page):
    page.insert("input", {"type": "checkbox", "checked": True, "disabled": False, "htmlFor": "f"})
    assert page.to_html(inner=True) == '<input type="checkbox" checked="" for="f">'


def test_pretty_output(page):
    page.parse("div { p(Hi) }")
    pretty = page.to_html(pretty=True, inner=True)
    assert "\n" in pretty
    assert "<p>" in pretty


def test_outline_lists_keys(page):
    page.parse("div.card { button#ok }")
    lines = page.outline().splitlines()
    assert lines[0] == "body"
    assert lines[1] == "  div.card"
    assert lines[2] == "    button #ok"
