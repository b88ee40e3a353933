"""
Document implementation for the DOM.
This module implements the document skeleton and HTML fragment parsing.
"""

import logging
from typing import List, Optional
import cssutils
import html5lib

from .node import Node, NodeType
from .element import Element, HTML_NAMESPACE
from .text import Text, Comment

logger = logging.getLogger(__name__)


class Document(Node):
    """
    Document node: an ``html`` element with ``head`` and ``body``.
    """

    def __init__(self):
        """Initialize a new Document object."""
        super().__init__(NodeType.DOCUMENT_NODE)
        self.node_name = "#document"

        html = self.create_element("html")
        self.append_child(html)
        self.document_element = html

        self.head = self.create_element("head")
        html.append_child(self.head)

        self.body = self.create_element("body")
        html.append_child(self.body)

        logger.debug("Document initialized")

    def create_element(self, tag_name: str, namespace: Optional[str] = None) -> Element:
        """
        Create a new element with the specified tag name.

        Args:
            tag_name: The tag name of the element
            namespace: Optional namespace URI

        Returns:
            The new element
        """
        return Element(tag_name, namespace, self)

    def create_text_node(self, data: str) -> Text:
        return Text(data, self)

    def create_comment(self, data: str) -> Comment:
        return Comment(data, self)

    def create_fragment(self, html: str) -> Node:
        """
        Create a document fragment from an HTML string.

        Args:
            html: The HTML string

        Returns:
            A document fragment containing the parsed HTML
        """
        return parse_fragment(html, self)

    def inject_css(self, css: str) -> Element:
        """
        Add a ``<style>`` element with the given stylesheet to the head.

        The stylesheet is normalised through cssutils; rules it cannot parse
        are dropped.

        Args:
            css: Stylesheet text

        Returns:
            The new style element
        """
        sheet = cssutils.parseString(css)
        css_text = sheet.cssText.decode('utf-8') if sheet.cssText else ""
        style = self.create_element("style")
        style.text_content = css_text
        self.head.append_child(style)
        logger.debug(f"Injected stylesheet with {len(sheet.cssRules)} rules")
        return style

    @property
    def stylesheets(self) -> List[Element]:
        """The style elements in the head."""
        return [child for child in self.head.children if child.tag_name == "style"]


def parse_fragment(html: str, owner_document: Optional[Document] = None) -> Node:
    """
    Parse an HTML string into a detached document fragment.

    Args:
        html: The HTML string
        owner_document: Document that will own the created nodes

    Returns:
        A document fragment containing the parsed nodes
    """
    fragment = Node(NodeType.DOCUMENT_FRAGMENT_NODE, owner_document)
    parser = html5lib.HTMLParser(tree=html5lib.getTreeBuilder("dom"))
    parsed = parser.parseFragment(html)
    for child in parsed.childNodes:
        _convert_parsed_node(child, fragment, owner_document)
    return fragment


def _convert_parsed_node(node, parent: Node, owner_document: Optional[Document]) -> None:
    """
    Recursively convert html5lib (minidom) nodes to our DOM structure.

    Args:
        node: The parsed node from html5lib
        parent: The parent node in our DOM structure
        owner_document: Document that owns the created nodes
    """
    if node.nodeType == node.TEXT_NODE:
        parent.append_child(Text(node.nodeValue, owner_document))
    elif node.nodeType == node.COMMENT_NODE:
        parent.append_child(Comment(node.nodeValue, owner_document))
    elif node.nodeType == node.ELEMENT_NODE:
        element = Element(node.tagName, node.namespaceURI or HTML_NAMESPACE, owner_document)
        for name, value in node.attributes.items():
            element.set_attribute(name, value)
        parent.append_child(element)
        for child in node.childNodes:
            _convert_parsed_node(child, element, owner_document)
    else:
        logger.debug(f"Skipping parsed node of type {node.nodeType}")
