"""
In-memory DOM used as the element platform for pages.
"""

from .node import Node, NodeType
from .element import (
    Element, ClassList, ShadowRoot, serialize_node,
    HTML_NAMESPACE, SVG_NAMESPACE,
)
from .text import Text, Comment
from .document import Document, parse_fragment
from .element_factory import ElementFactory

__all__ = [
    'Node', 'NodeType', 'Element', 'ClassList', 'ShadowRoot', 'Text', 'Comment',
    'Document', 'ElementFactory', 'parse_fragment', 'serialize_node',
    'HTML_NAMESPACE', 'SVG_NAMESPACE',
]
