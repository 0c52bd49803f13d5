"""
Core type definitions for cmdtree.

This module contains type aliases shared by the prefix index, the node
types and the descriptor records.
"""

from typing import Any, TypeVar

# Caller data carried by a node; never inspected by cmdtree
Payload = Any

# Value stored against a key in a prefix index (a Command or Tree in practice)
NodeT = TypeVar("NodeT")
