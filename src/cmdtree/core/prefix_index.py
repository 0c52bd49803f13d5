"""
Shortest-unambiguous-prefix index for one level of a command tree.

Keys (command names, subtree names and shortcuts) are kept in a dict for
exact hits and in a sorted list so that every key sharing a prefix sits in
one contiguous run found by binary search.
"""

from bisect import bisect_left, insort
from typing import Generic

from cmdtree.core.types import NodeT
from cmdtree.exceptions import (
    AmbiguousCommandError,
    CommandNotFoundError,
    DuplicateKeyError,
)


def _node_name(node: object) -> str:
    return getattr(node, "name", None) or repr(node)


class PrefixIndex(Generic[NodeT]):
    """Maps key strings to nodes with exact-or-unique-prefix lookup.

    Keys are never removed. Registering a key twice raises DuplicateKeyError
    instead of overwriting the earlier entry.
    """

    def __init__(self):
        self._nodes: dict[str, NodeT] = {}
        self._keys: list[str] = []

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def keys(self) -> list[str]:
        """Return all keys in lexicographic order."""
        return list(self._keys)

    def add(self, key: str, node: NodeT) -> None:
        """
        Register a key for a node.

        Params:
            key: Command name, subtree name or shortcut
            node: Node the key resolves to

        Raises:
            DuplicateKeyError: If the key is already registered at this level
        """
        if key in self._nodes:
            raise DuplicateKeyError(key, _node_name(self._nodes[key]), _node_name(node))
        self._nodes[key] = node
        insort(self._keys, key)

    def _prefix_range(self, prefix: str) -> tuple[int, int]:
        start = bisect_left(self._keys, prefix)
        end = start
        while end < len(self._keys) and self._keys[end].startswith(prefix):
            end += 1
        return start, end

    def find(self, query: str) -> NodeT:
        """
        Resolve a query to a single node.

        An exact key match always wins, even when the query also prefixes
        longer keys. Otherwise the query must prefix exactly one key.

        Params:
            query: Field typed by the user

        Returns:
            The node registered under the matching key

        Raises:
            CommandNotFoundError: If the query is empty or prefixes no key
            AmbiguousCommandError: If the query prefixes several keys
        """
        if not query:
            raise CommandNotFoundError(query)
        if query in self._nodes:
            return self._nodes[query]

        start, end = self._prefix_range(query)
        if end - start == 0:
            raise CommandNotFoundError(query)
        if end - start > 1:
            raise AmbiguousCommandError(query)
        return self._nodes[self._keys[start]]

    def find_candidates(self, prefix: str) -> list[tuple[str, NodeT]]:
        """
        List every key that starts with the prefix, exact match included.

        Params:
            prefix: Partial field; empty matches every key

        Returns:
            (key, node) pairs sorted by key
        """
        start, end = self._prefix_range(prefix)
        return [(key, self._nodes[key]) for key in self._keys[start:end]]
