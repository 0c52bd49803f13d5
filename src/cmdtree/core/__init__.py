"""
Core cmdtree components.

This package provides the building blocks the resolution engines work on:
line tokenization and the per-level prefix index.
"""

from cmdtree.core.prefix_index import PrefixIndex
from cmdtree.core.tokenizer import next_field, split_fields, strip_leading_whitespace
from cmdtree.core.types import NodeT, Payload

__all__ = [
    "PrefixIndex",
    "next_field",
    "split_fields",
    "strip_leading_whitespace",
    "NodeT",
    "Payload",
]
