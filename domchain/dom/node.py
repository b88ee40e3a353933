"""
Node implementation for the in-memory DOM.
This module implements the tree structure shared by every node type.
"""

from enum import IntEnum
from typing import List, Optional, Iterator
import weakref


class NodeType(IntEnum):
    """Node types as defined in the DOM specification."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9
    DOCUMENT_FRAGMENT_NODE = 11


class Node:
    """
    Base Node implementation for the DOM.

    A node owns its ``child_nodes``. The link back to the parent is a weak
    reference, so a subtree never keeps its ancestors alive.
    """

    def __init__(self, node_type: NodeType, owner_document: Optional['Document'] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            owner_document: The document that owns this node
        """
        self.node_type = node_type
        self.owner_document = owner_document
        self.node_name: str = "#node"
        self.child_nodes: List['Node'] = []
        self._parent_ref: Optional[weakref.ReferenceType] = None

    @property
    def parent_node(self) -> Optional['Node']:
        """The parent node, or None if detached (or the parent was collected)."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def children(self) -> List['Element']:
        """Get a list of child elements."""
        return [child for child in self.child_nodes if child.node_type == NodeType.ELEMENT_NODE]

    @property
    def first_child(self) -> Optional['Node']:
        return self.child_nodes[0] if self.child_nodes else None

    @property
    def last_child(self) -> Optional['Node']:
        return self.child_nodes[-1] if self.child_nodes else None

    @property
    def previous_sibling(self) -> Optional['Node']:
        parent = self.parent_node
        if parent is None:
            return None
        index = parent._index_of(self)
        return parent.child_nodes[index - 1] if index > 0 else None

    @property
    def next_sibling(self) -> Optional['Node']:
        parent = self.parent_node
        if parent is None:
            return None
        index = parent._index_of(self)
        return parent.child_nodes[index + 1] if index + 1 < len(parent.child_nodes) else None

    def _index_of(self, child: 'Node') -> int:
        # Identity, not equality: two nodes may compare equal
        for index, node in enumerate(self.child_nodes):
            if node is child:
                return index
        raise ValueError("Child not found in child nodes")

    def _adopt(self, child: 'Node') -> None:
        if child is self or child.contains(self):
            raise ValueError("A node cannot be inserted into itself or its descendants")
        old_parent = child.parent_node
        if old_parent is not None:
            old_parent.remove_child(child)
        child._parent_ref = weakref.ref(self)

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        self._adopt(child)
        self.child_nodes.append(child)
        return child

    def insert_before(self, new_child: 'Node', reference_child: Optional['Node'] = None) -> 'Node':
        """
        Insert a node before a reference node.

        Args:
            new_child: The node to insert
            reference_child: The reference node to insert before, or None to append

        Returns:
            The inserted node
        """
        if reference_child is None:
            return self.append_child(new_child)

        self._index_of(reference_child)
        self._adopt(new_child)
        # Index looked up again: adopting may have removed new_child from this node
        self.child_nodes.insert(self._index_of(reference_child), new_child)
        return new_child

    def remove_child(self, child: 'Node') -> 'Node':
        """
        Remove a child node from this node.

        Args:
            child: The node to remove

        Returns:
            The removed node
        """
        del self.child_nodes[self._index_of(child)]
        child._parent_ref = None
        return child

    def remove_all_children(self) -> None:
        for child in self.child_nodes:
            child._parent_ref = None
        self.child_nodes = []

    def has_child_nodes(self) -> bool:
        """Check if this node has any child nodes."""
        return len(self.child_nodes) > 0

    def contains(self, other: Optional['Node']) -> bool:
        """
        Check if this node is ``other`` or one of its ancestors.

        Args:
            other: The node to check

        Returns:
            True if this node contains the other node, False otherwise
        """
        current = other
        while current is not None:
            if current is self:
                return True
            current = current.parent_node
        return False

    def iter_descendants(self) -> Iterator['Node']:
        """Yield every descendant in document order."""
        for child in self.child_nodes:
            yield child
            yield from child.iter_descendants()

    @property
    def text_content(self) -> str:
        """The concatenated text of all descendant text nodes."""
        return "".join(node.data for node in self.iter_descendants()
                       if node.node_type == NodeType.TEXT_NODE)
