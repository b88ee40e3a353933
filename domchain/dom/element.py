"""
Element implementation for the DOM.
This module implements elements, their class lists, live properties,
inline style and markup serialization.
"""

import logging
from html import escape
from typing import Any, Dict, Iterator, List, Optional
import cssutils

from .node import Node, NodeType
from ..exceptions import DomChainError

# cssutils logs every unknown property otherwise
cssutils.log.setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)

HTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"

VOID_ELEMENTS = {
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr'
}

# Elements whose text children are serialized without escaping
RAW_TEXT_ELEMENTS = {'script', 'style'}

# Property names that serialize under a different attribute name
PROPERTY_ATTRIBUTES = {
    'className': 'class',
    'htmlFor': 'for',
}


class ClassList:
    """Ordered set of class tokens, like DOMTokenList."""

    def __init__(self, tokens=None):
        self._tokens: List[str] = []
        for token in tokens or ():
            self.add(token)

    def add(self, token: str) -> None:
        if token and token not in self._tokens:
            self._tokens.append(token)

    def remove(self, token: str) -> None:
        if token in self._tokens:
            self._tokens.remove(token)

    def clear(self) -> None:
        self._tokens = []

    @property
    def value(self) -> str:
        """The space-separated class attribute value."""
        return " ".join(self._tokens)

    @value.setter
    def value(self, text: str) -> None:
        self._tokens = []
        for token in (text or "").split():
            self.add(token)

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tokens))

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"ClassList({self._tokens!r})"


def parse_style_attribute(style_attr: str) -> Dict[str, str]:
    """
    Parse an inline ``style`` attribute into a property dictionary.

    Args:
        style_attr: CSS declarations separated by semicolons

    Returns:
        Dictionary of CSS properties
    """
    style_dict = {}
    for declaration in style_attr.split(';'):
        property_name, sep, value = declaration.partition(':')
        if sep and property_name.strip():
            style_dict[property_name.strip()] = value.strip()
    return style_dict


class Element(Node):
    """
    Element node implementation for the DOM.

    HTML attributes (from parsed markup) live in ``attributes``; values
    assigned through ``set_property`` live in ``properties``. Both are
    written out by ``outer_html``, properties last.
    """

    def __init__(self,
                 tag_name: str,
                 namespace: Optional[str] = None,
                 owner_document: Optional['Document'] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "circle")
            namespace: Namespace URI, HTML when omitted
            owner_document: The document that owns this element
        """
        super().__init__(NodeType.ELEMENT_NODE, owner_document)

        self.namespace_uri = namespace or HTML_NAMESPACE
        self.tag_name = tag_name.lower() if self.namespace_uri == HTML_NAMESPACE else tag_name
        self.node_name = self.tag_name.upper() if self.is_html else self.tag_name

        self.attributes: Dict[str, str] = {}
        self.properties: Dict[str, Any] = {}
        self.style: Dict[str, str] = {}
        self.class_list = ClassList()
        self.shadow_root: Optional['ShadowRoot'] = None

    @property
    def is_html(self) -> bool:
        return self.namespace_uri == HTML_NAMESPACE

    @property
    def is_svg(self) -> bool:
        return self.namespace_uri == SVG_NAMESPACE

    @property
    def is_void_element(self) -> bool:
        return self.is_html and self.tag_name in VOID_ELEMENTS

    # Attributes

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes or (name == 'class' and len(self.class_list) > 0) \
            or (name == 'style' and bool(self.style))

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of an attribute.

        Args:
            name: The attribute name

        Returns:
            The attribute value, or None if the attribute doesn't exist
        """
        if name == 'class':
            return self.class_list.value if len(self.class_list) else None
        if name == 'style':
            return self.css_text if self.style else None
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        """
        Set an attribute value. ``class`` and ``style`` update the class list
        and inline style.
        """
        if name == 'class':
            self.class_list.value = value
        elif name == 'style':
            self.style = parse_style_attribute(value)
        else:
            self.attributes[name] = value

    def remove_attribute(self, name: str) -> None:
        if name == 'class':
            self.class_list.clear()
        elif name == 'style':
            self.style = {}
        else:
            self.attributes.pop(name, None)

    # Properties

    def set_property(self, name: str, value: Any) -> None:
        """
        Assign a live property, the way ``element[name] = value`` works in a
        browser. A few reflected properties update element state instead.
        """
        if name == 'className':
            self.class_list.value = str(value)
        elif name == 'innerHTML':
            self.inner_html = str(value)
        elif name in ('textContent', 'innerText'):
            self.text_content = str(value)
        else:
            self.properties[name] = value

    def get_property(self, name: str, default: Any = None) -> Any:
        if name == 'className':
            return self.class_list.value
        if name == 'innerHTML':
            return self.inner_html
        if name in ('textContent', 'innerText'):
            return self.text_content
        return self.properties.get(name, default)

    # Style

    @property
    def css_text(self) -> str:
        """The inline style as a CSS declaration block."""
        return "; ".join(f"{name}: {value}" for name, value in self.style.items())

    @css_text.setter
    def css_text(self, text: str) -> None:
        declaration = cssutils.parseStyle(text or "")
        self.style = {prop.name: prop.value for prop in declaration.getProperties()}

    # Content

    @property
    def text_content(self) -> str:
        return super().text_content

    @text_content.setter
    def text_content(self, text: str) -> None:
        """Replace all children with a single text node."""
        from .text import Text

        self.remove_all_children()
        if text:
            self.append_child(Text(text, self.owner_document))

    @property
    def inner_html(self) -> str:
        """Get or set the HTML content of the element."""
        raw = self.is_html and self.tag_name in RAW_TEXT_ELEMENTS
        return "".join(serialize_node(child, raw) for child in self.child_nodes)

    @inner_html.setter
    def inner_html(self, html: str) -> None:
        from .document import parse_fragment

        self.remove_all_children()
        if not html:
            return
        fragment = parse_fragment(html, self.owner_document)
        for child in list(fragment.child_nodes):
            self.append_child(child)

    @property
    def outer_html(self) -> str:
        """The element itself and its content as markup."""
        return serialize_node(self)

    def attach_shadow(self, mode: str = "open") -> 'ShadowRoot':
        """
        Attach a shadow root to this element.

        Raises:
            DomChainError: if a shadow root is already attached
        """
        if self.shadow_root is not None:
            raise DomChainError(f"<{self.tag_name}> already has a shadow root")
        self.shadow_root = ShadowRoot(self, mode)
        return self.shadow_root

    def serialized_attributes(self) -> Dict[str, str]:
        """Attributes as written out: class, style, HTML attributes, then properties."""
        result = {}
        if len(self.class_list):
            result['class'] = self.class_list.value
        if self.style:
            result['style'] = self.css_text
        result.update(self.attributes)
        for name, value in self.properties.items():
            if value is None or value is False or callable(value):
                continue
            name = PROPERTY_ATTRIBUTES.get(name, name)
            result[name] = "" if value is True else str(value)
        return result

    def __repr__(self) -> str:
        classes = "".join(f".{token}" for token in self.class_list)
        return f"<{self.tag_name}{classes}>"


class ShadowRoot(Node):
    """
    Document-fragment-like root of an element's shadow tree.
    """

    def __init__(self, host: Element, mode: str = "open"):
        super().__init__(NodeType.DOCUMENT_FRAGMENT_NODE, host.owner_document)
        self.node_name = "#shadow-root"
        self.mode = mode
        self.host = host

    @property
    def inner_html(self) -> str:
        return "".join(serialize_node(child) for child in self.child_nodes)

    def __repr__(self) -> str:
        return f"<#shadow-root ({self.mode})>"


def serialize_node(node: Node, raw: bool = False) -> str:
    """
    Serialize a node as markup.

    Args:
        node: The node to serialize
        raw: Write text children unescaped (inside script and style)

    Returns:
        str: Markup for the node and its descendants
    """
    if node.node_type != NodeType.ELEMENT_NODE:
        if hasattr(node, 'serialize'):
            return node.serialize(raw)
        return "".join(serialize_node(child) for child in node.child_nodes)

    attrs = "".join(f' {name}="{escape(value, quote=True)}"'
                    for name, value in node.serialized_attributes().items())
    if node.is_void_element:
        return f"<{node.tag_name}{attrs}>"
    if not node.is_html and not node.child_nodes:
        return f"<{node.tag_name}{attrs}/>"
    return f"<{node.tag_name}{attrs}>{node.inner_html}</{node.tag_name}>"
