"""
cmdtree resolution engines.

This package turns lines of text into selections (lookup) or completion
candidates (autocomplete) by descending through nested prefix indexes.
"""

from cmdtree.resolution.autocomplete import autocomplete
from cmdtree.resolution.lookup import (
    Selection,
    lookup,
    lookup_command,
    lookup_subtree,
)

__all__ = [
    "Selection",
    "autocomplete",
    "lookup",
    "lookup_command",
    "lookup_subtree",
]
