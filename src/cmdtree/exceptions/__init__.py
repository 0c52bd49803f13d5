"""
cmdtree exception classes.

This package provides all exception types used throughout cmdtree for
consistent error handling and reporting.
"""

from cmdtree.exceptions.core import (
    AmbiguousCommandError,
    CmdTreeError,
    CommandNotFoundError,
    DuplicateKeyError,
    InvalidShortcutError,
)

__all__ = [
    "CmdTreeError",
    "AmbiguousCommandError",
    "CommandNotFoundError",
    "DuplicateKeyError",
    "InvalidShortcutError",
]
