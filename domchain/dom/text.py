"""
Character data nodes for the DOM: text and comments.
"""

from html import escape
from typing import Optional
from .node import Node, NodeType


class Text(Node):
    """
    Text node implementation for the DOM.
    """

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        """
        Initialize a text node.

        Args:
            data: The text content
            owner_document: The document that owns this node
        """
        super().__init__(NodeType.TEXT_NODE, owner_document)
        self.node_name = "#text"
        self.data = data or ""

    @property
    def text_content(self) -> str:
        return self.data

    @property
    def length(self) -> int:
        return len(self.data)

    def serialize(self, raw: bool = False) -> str:
        """Serialize as markup. ``raw`` skips escaping (script and style content)."""
        return self.data if raw else escape(self.data, quote=False)

    def __repr__(self) -> str:
        return f"<Text {self.data!r}>"


class Comment(Node):
    """
    Comment node implementation for the DOM.
    """

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        super().__init__(NodeType.COMMENT_NODE, owner_document)
        self.node_name = "#comment"
        self.data = data or ""

    @property
    def text_content(self) -> str:
        # Comments contribute nothing to their ancestors' text
        return ""

    def serialize(self, raw: bool = False) -> str:
        return f"<!--{self.data}-->"

    def __repr__(self) -> str:
        return f"<Comment {self.data!r}>"
