"""
Chainable pages over DOM elements.

A ``Page`` wraps one element and mirrors the element tree with its own list
of child pages. Mutators return a page so calls chain::

    page = Page()
    page.insert("div.card").insert("h1").text("Title").up().insert("p")
    page.parse("ul { li(One) li(Two)#second }")
    page.get("second").add_class("active")
"""

import logging
import weakref
from typing import Any, Dict, List, Optional
from bs4 import BeautifulSoup

from .dom import Document, Element, ElementFactory
from .exceptions import TreeError
from .parser import MarkupParser
from .registry import LookupRegistry

logger = logging.getLogger(__name__)

_default_parser = None


def _get_default_parser() -> MarkupParser:
    global _default_parser
    if _default_parser is None:
        _default_parser = MarkupParser()
    return _default_parser


class Page:
    """
    A chainable wrapper around a DOM element.

    Pages own their child pages; ``parent`` is a weak reference. All pages
    of a tree share one ``LookupRegistry``, which also holds the root page
    strongly so a chain started from a temporary ``Page()`` keeps its ancestors.
    """

    def __init__(self, element=None, parent: Optional['Page'] = None,
                 svg: bool = False, registry: Optional[LookupRegistry] = None):
        """
        Args:
            element: Element (or shadow root) to wrap. Without one, a new
                document is created and its body is wrapped.
            parent: Parent page, used internally
            svg: Whether the element is in the SVG namespace
            registry: Lookup registry; defaults to the parent's, or a new one
        """
        if element is None:
            element = Document().body
            parent = None
            svg = False
        self.element = element
        self.svg = bool(svg)
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        if registry is None:
            registry = parent.registry if parent is not None else LookupRegistry(self)
        elif registry.root is None and parent is None:
            registry.root = self
        self.registry = registry
        self.children: List['Page'] = []
        self._shadow: Optional['Page'] = None

    @property
    def parent(self) -> Optional['Page']:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def document(self) -> Optional[Document]:
        return self.element.owner_document

    def _create(self, tag_spec: str) -> 'Page':
        element = ElementFactory.create(tag_spec, svg=self.svg, document=self.document)
        return Page(element, self, element.is_svg, self.registry)

    def _require_parent(self, operation: str) -> 'Page':
        parent = self.parent
        if parent is None:
            raise TreeError(f"Cannot {operation} a sibling of a page without a parent")
        return parent

    def _forget_keys(self) -> None:
        """Unregister the lookup keys of this page and everything below it."""
        self.registry.unregister_node(self)
        for child in self.children:
            child._forget_keys()
        if self._shadow is not None:
            self._shadow._forget_keys()

    def _drop_children(self) -> None:
        for child in self.children:
            child._forget_keys()
        self.children = []

    def _position(self, child: 'Page') -> int:
        for index, page in enumerate(self.children):
            if page is child:
                return index
        raise TreeError(f"{child!r} is not a child of {self!r}")

    # Building

    def insert(self, tag_spec: str, attributes: Optional[Dict[str, Any]] = None) -> 'Page':
        """
        Insert a new element inside this one, after existing children.

        Args:
            tag_spec: Tag with optional classes, e.g. ``"div.class1.class2"``
            attributes: Values applied with ``set``

        Returns:
            Page: the inserted page
        """
        created = self._create(tag_spec)
        self.children.append(created)
        self.element.append_child(created.element)
        return created.set(attributes)

    def append(self, tag_spec: str, attributes: Optional[Dict[str, Any]] = None) -> 'Page':
        """
        Add a new element as the next sibling of this one.

        Returns:
            Page: the added page
        """
        parent = self._require_parent("append")
        created = parent._create(tag_spec)
        index = parent._position(self)
        if index + 1 == len(parent.children):
            parent.element.append_child(created.element)
        else:
            parent.element.insert_before(created.element, parent.children[index + 1].element)
        parent.children.insert(index + 1, created)
        return created.set(attributes)

    def prepend(self, tag_spec: str, attributes: Optional[Dict[str, Any]] = None) -> 'Page':
        """
        Add a new element as the previous sibling of this one.

        Returns:
            Page: the added page
        """
        parent = self._require_parent("prepend")
        created = parent._create(tag_spec)
        index = parent._position(self)
        parent.children.insert(index, created)
        parent.element.insert_before(created.element, self.element)
        return created.set(attributes)

    def set(self, attributes: Optional[Dict[str, Any]]) -> 'Page':
        """
        Apply values to the element.

        ``class`` adds the dot-separated classes in its value. ``style``
        assigns the ``;``-separated ``name:value`` clauses (or a dict) as
        style properties. Any other key is assigned as an element property.

        Returns:
            Page: this page
        """
        if not attributes:
            return self
        element = self.element
        for name, value in attributes.items():
            if name == 'class':
                for class_name in str(value).split('.'):
                    element.class_list.add(class_name)
            elif name == 'style':
                if isinstance(value, dict):
                    self.style(value)
                    continue
                for clause in str(value).split(';'):
                    property_name, sep, property_value = clause.partition(':')
                    if sep:
                        element.style[property_name.strip()] = property_value.strip()
            else:
                element.set_property(name, value)
        return self

    def style(self, properties: Dict[str, str]) -> 'Page':
        """Assign style properties. Returns this page."""
        for name, value in properties.items():
            self.element.style[name] = value
        return self

    def parse(self, text: str, parser: Optional[MarkupParser] = None) -> 'Page':
        """
        Build the tree described by markup inside this page.

        Raises:
            UnbalancedBraces: if braces do not pair up; the tree is unchanged

        Returns:
            Page: this page
        """
        (parser or _get_default_parser()).parse(self, text)
        return self

    # Navigation

    def child(self, num: int) -> 'Page':
        """
        The ``num``-th child page; negative numbers count from the end.
        """
        try:
            return self.children[num]
        except IndexError:
            raise TreeError(f"{self!r} has no child {num} ({len(self.children)} children)") from None

    def element_child(self, num: int) -> Element:
        """The element of the ``num``-th child page."""
        return self.child(num).element

    def up(self, n: int = 1) -> 'Page':
        """The ancestor ``n`` levels above (the parent when ``n`` is 0 or 1)."""
        page = self
        for _ in range(n or 1):
            page = page.parent
            if page is None:
                raise TreeError(f"{self!r} has fewer than {n} ancestors")
        return page

    def find(self, element) -> Optional['Page']:
        """Return the page wrapping ``element`` in this subtree, or None."""
        if self.element is element:
            return self
        for child in self.children:
            found = child.find(element)
            if found is not None:
                return found
        return None

    # Lookup keys

    def id(self, key: str) -> 'Page':
        """Register this page under ``key``, replacing any previous binding."""
        self.registry.register(key, self)
        return self

    def get(self, key: str) -> Optional['Page']:
        """The page registered under ``key`` in this tree."""
        return self.registry.resolve(key)

    def get_element(self, key: str) -> Optional[Element]:
        page = self.get(key)
        return page.element if page is not None else None

    # Classes and content

    def add_class(self, class_name: str) -> 'Page':
        self.element.class_list.add(class_name)
        return self

    def remove_class(self, class_name: Optional[str] = None) -> 'Page':
        """Remove one class, or all of them when no name is given."""
        if class_name is None:
            self.element.class_list.clear()
        else:
            self.element.class_list.remove(class_name)
        return self

    def html(self, value: str) -> 'Page':
        """Replace the content with parsed HTML. Child pages and their keys are dropped."""
        self.element.inner_html = value
        self._drop_children()
        return self

    def text(self, value: str) -> 'Page':
        """Replace the content with a single text node. Child pages and their keys are dropped."""
        self.element.text_content = value
        self._drop_children()
        return self

    def css(self, css_text: str) -> 'Page':
        """Replace the inline style with a CSS declaration block."""
        self.element.css_text = css_text
        return self

    def inject_css(self, css: str) -> Element:
        """
        Add a stylesheet to the head of this page's document.

        Returns:
            Element: the new style element
        """
        if self.document is None:
            raise TreeError(f"{self!r} does not belong to a document")
        return self.document.inject_css(css)

    def shadow_root(self, mode: str = "open") -> 'Page':
        """The page for this element's shadow root, created on first use."""
        if self._shadow is None:
            root = self.element.attach_shadow(mode)
            self._shadow = Page(root, self, self.svg, self.registry)
        return self._shadow

    # Removal

    def clear(self) -> 'Page':
        """Remove everything inside this page."""
        self.element.remove_all_children()
        self._drop_children()
        return self

    def remove(self) -> None:
        """
        Detach this page and its element from their parents.

        The lookup keys of this page and its descendants are unregistered.
        """
        self._forget_keys()
        element_parent = self.element.parent_node
        if element_parent is not None:
            element_parent.remove_child(self.element)
        parent = self.parent
        if parent is not None:
            for index, page in enumerate(parent.children):
                if page is self:
                    del parent.children[index]
                    break

    # Output

    def to_html(self, pretty: bool = False, inner: bool = False) -> str:
        """
        Serialize this page's element.

        Args:
            pretty: Indent the markup with BeautifulSoup
            inner: Serialize only the content, not the element itself
        """
        if inner or not isinstance(self.element, Element):
            html = self.element.inner_html
        else:
            html = self.element.outer_html
        if pretty:
            html = BeautifulSoup(html, "html.parser").prettify()
        return html

    def outline(self, depth: int = 0) -> str:
        """A one-line-per-page outline of this subtree, with lookup keys."""
        lead = "  " * depth
        line = f"{lead}{self._describe()}"
        keys = self.registry.keys_for(self)
        if keys:
            line += " " + " ".join(f"#{key}" for key in keys)
        lines = [line]
        lines.extend(child.outline(depth + 1) for child in self.children)
        return "\n".join(lines)

    def _describe(self) -> str:
        element = self.element
        if not isinstance(element, Element):
            return element.node_name
        description = element.tag_name + "".join(f".{c}" for c in element.class_list)
        if element.properties:
            description += " <" + ",".join(f"{k}:{v!r}" for k, v in element.properties.items()) + ">"
        text = element.text_content if not self.children else ""
        if text:
            description += f" ({text!r})"
        return description

    def __repr__(self) -> str:
        element = self.element
        name = element.tag_name if isinstance(element, Element) else element.node_name
        return f"<Page {name}>"
