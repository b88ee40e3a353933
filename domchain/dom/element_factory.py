"""
Element creation from dotted tag specs.
"""

import logging
from typing import Optional

from .element import Element, HTML_NAMESPACE, SVG_NAMESPACE

logger = logging.getLogger(__name__)

# Tag used when a tag spec has no name, e.g. ".card" or "<k:v>"
DEFAULT_TAG = "div"


class ElementFactory:
    """
    Factory class for creating elements from tag specs such as
    ``"div.card.wide"``.
    """

    @classmethod
    def split_tag_spec(cls, tag_spec: str):
        """
        Split a tag spec into a lower-cased tag name and its class tokens.

        Returns:
            tuple: (tag_name, [class, ...]); empty class tokens are dropped
        """
        tokens = tag_spec.split(".")
        return tokens[0].lower(), [token for token in tokens[1:] if token]

    @classmethod
    def create(cls, tag_spec: str, svg: bool = False, document=None) -> Element:
        """
        Create an element from a tag spec.

        The element is created in the SVG namespace when ``svg`` is set
        (the parent is SVG) or the tag is ``svg`` itself.

        Args:
            tag_spec: Tag name followed by dot-separated classes
            svg: Whether the parent element is in the SVG namespace
            document: Document that will own the element

        Returns:
            Element: The new, detached element
        """
        tag_name, classes = cls.split_tag_spec(tag_spec)
        if not tag_name:
            logger.debug(f"Tag spec {tag_spec!r} has no tag name, using {DEFAULT_TAG}")
            tag_name = DEFAULT_TAG

        namespace = SVG_NAMESPACE if svg or tag_name == "svg" else HTML_NAMESPACE
        if document is not None:
            element = document.create_element(tag_name, namespace)
        else:
            element = Element(tag_name, namespace)

        for class_name in classes:
            element.class_list.add(class_name)
        return element
