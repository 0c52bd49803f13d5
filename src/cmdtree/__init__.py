"""
cmdtree - hierarchical command dispatch by shortest unambiguous prefix

cmdtree organizes named text commands into nested trees and resolves typed
lines to a command plus its arguments, with shortcuts, autocompletion and
help rendering.
"""

from importlib.metadata import version

from cmdtree.exceptions import (
    AmbiguousCommandError,
    CmdTreeError,
    CommandNotFoundError,
    DuplicateKeyError,
    InvalidShortcutError,
)
from cmdtree.rendering import HelpFormat
from cmdtree.resolution import Selection
from cmdtree.structure import Command, CommandDescriptor, Node, Tree, TreeDescriptor

__version__ = version("cmdtree")

__all__ = [
    "__version__",
    "Tree",
    "Command",
    "Node",
    "CommandDescriptor",
    "TreeDescriptor",
    "Selection",
    "HelpFormat",
    "CmdTreeError",
    "AmbiguousCommandError",
    "CommandNotFoundError",
    "DuplicateKeyError",
    "InvalidShortcutError",
]
