"""
Exception classes for cmdtree command resolution.

This module defines specific exception types for the error conditions that
can occur while registering commands into a tree or resolving a line of
text against it.
"""


class CmdTreeError(Exception):
    """Base exception for all cmdtree errors."""

    pass


class AmbiguousCommandError(CmdTreeError):
    """Raised when a field is a prefix of more than one key at a tree level."""

    def __init__(self, field: str):
        """
        Initialize the exception.

        Params:
            field: The input field that matched several keys
        """
        self.field = field
        super().__init__("Command is ambiguous")


class CommandNotFoundError(CmdTreeError):
    """Raised when a field matches no key, or the input is empty."""

    def __init__(self, field: str = ""):
        """
        Initialize the exception.

        Params:
            field: The input field that matched nothing (empty for blank input)
        """
        self.field = field
        super().__init__("Command not found")


class DuplicateKeyError(CmdTreeError):
    """Raised when attempting to register a key that already exists at a level."""

    def __init__(self, key: str, existing_name: str, new_name: str):
        """
        Initialize the exception.

        Params:
            key: The name or shortcut that is already registered
            existing_name: Name of the node the key currently resolves to
            new_name: Name of the node that tried to claim the key
        """
        self.key = key
        self.existing_name = existing_name
        self.new_name = new_name
        super().__init__(
            f"Key '{key}' already registered (existing: {existing_name}, new: {new_name})"
        )


class InvalidShortcutError(CmdTreeError):
    """Raised when a shortcut string is not exactly one field."""

    def __init__(self, shortcut: str, reason: str = "must be a single field"):
        """
        Initialize the exception.

        Params:
            shortcut: The rejected shortcut string
            reason: Why the shortcut is invalid
        """
        self.shortcut = shortcut
        self.reason = reason
        super().__init__(f"Invalid shortcut '{shortcut}': {reason}")
