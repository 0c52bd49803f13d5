"""
cmdtree structure components.

This package provides the descriptor records, the Command and Tree node
types and the registration API used to build a command tree.
"""

from cmdtree.structure.descriptors import (
    CommandDescriptor,
    NodeDescriptor,
    TreeDescriptor,
)
from cmdtree.structure.tree import Command, Node, Tree

__all__ = [
    "Command",
    "CommandDescriptor",
    "Node",
    "NodeDescriptor",
    "Tree",
    "TreeDescriptor",
]
