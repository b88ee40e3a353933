"""
Lookup registry: user-chosen keys to pages.
"""

import logging
from typing import Dict, Iterator, Optional

logger = logging.getLogger(__name__)


class LookupRegistry:
    """
    Maps lookup keys to pages for one tree.

    Every page of a tree shares its root's registry, so separate trees never
    see each other's keys. Registering a key again rebinds it.

    ``root`` is the tree's root node. Pages only hold weak links to their
    parents, so the registry is what keeps the root alive.
    """

    def __init__(self, root=None):
        self._entries: Dict[str, object] = {}
        self.root = root

    def register(self, key: str, node) -> None:
        previous = self._entries.get(key)
        if previous is not None and previous is not node:
            logger.debug(f"Lookup key {key!r} rebound from {previous!r} to {node!r}")
        self._entries[key] = node

    def resolve(self, key: str):
        """Return the node registered under ``key``, or None."""
        return self._entries.get(key)

    def unregister(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def unregister_node(self, node) -> int:
        """Remove every key bound to ``node``. Returns how many were removed."""
        keys = self.keys_for(node)
        for key in keys:
            del self._entries[key]
        return len(keys)

    def keys_for(self, node) -> list:
        """All keys bound to ``node``."""
        return [key for key, value in self._entries.items() if value is node]

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))
