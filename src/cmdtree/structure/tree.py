"""
Command and Tree nodes and the registration API for building a tree.

A Tree groups Commands and child Trees under one PrefixIndex so any of them
may be selected by a shortest unambiguous prefix of its name. Shortcuts are
extra keys in a tree's index that resolve to a node found anywhere below it.
"""

from __future__ import annotations

import logging
from bisect import insort
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO, Union

from cmdtree.core.prefix_index import PrefixIndex
from cmdtree.core.tokenizer import split_fields
from cmdtree.core.types import Payload
from cmdtree.exceptions import InvalidShortcutError
from cmdtree.structure.descriptors import (
    CommandDescriptor,
    NodeDescriptor,
    TreeDescriptor,
)

if TYPE_CHECKING:
    from cmdtree.rendering.help_format import HelpFormat
    from cmdtree.resolution.lookup import Selection

logger = logging.getLogger(__name__)


class _Node:
    """Display fields and shortcut bookkeeping shared by Command and Tree."""

    def __init__(self, descriptor: CommandDescriptor | TreeDescriptor):
        self.descriptor = descriptor
        self._shortcuts: list[str] = []

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def brief(self) -> str:
        return self.descriptor.brief

    @property
    def description(self) -> str:
        return self.descriptor.description

    @property
    def usage(self) -> str:
        return self.descriptor.usage

    @property
    def payload(self) -> Payload:
        return self.descriptor.payload

    @property
    def shortcuts(self) -> list[str]:
        """Shortcuts aliasing this node, in lexicographic order."""
        return list(self._shortcuts)

    def _add_shortcut(self, shortcut: str) -> None:
        insort(self._shortcuts, shortcut)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Command(_Node):
    """A terminal dispatch target. Only its shortcut list changes after creation."""

    descriptor: CommandDescriptor


class Tree(_Node):
    """A named group of commands and subtrees, itself selectable by name."""

    descriptor: TreeDescriptor

    def __init__(self, descriptor: TreeDescriptor | None = None, **fields: Any):
        if descriptor is None:
            descriptor = TreeDescriptor(**fields)
        super().__init__(descriptor)
        self._commands: list[Command] = []
        self._subtrees: list[Tree] = []
        self.index: PrefixIndex[Node] = PrefixIndex()

    @property
    def commands(self) -> list[Command]:
        """Child commands in registration order."""
        return list(self._commands)

    @property
    def subtrees(self) -> list[Tree]:
        """Child subtrees in registration order."""
        return list(self._subtrees)

    def add_command(
        self, descriptor: CommandDescriptor | None = None, **fields: Any
    ) -> Command:
        """
        Add a command to this tree.

        Params:
            descriptor: Command descriptor; built from keyword fields when omitted
            **fields: CommandDescriptor fields (name, brief, description, usage, payload)

        Returns:
            The new Command

        Raises:
            DuplicateKeyError: If the name is already a key at this level
        """
        if descriptor is None:
            descriptor = CommandDescriptor(**fields)
        command = Command(descriptor)
        self.index.add(command.name, command)
        self._commands.append(command)
        logger.debug("Added command '%s' to tree '%s'", command.name, self.name)
        return command

    def add_subtree(
        self, descriptor: TreeDescriptor | None = None, **fields: Any
    ) -> Tree:
        """
        Add a child tree to this tree.

        Params:
            descriptor: Tree descriptor; built from keyword fields when omitted
            **fields: TreeDescriptor fields

        Returns:
            The new, empty subtree

        Raises:
            DuplicateKeyError: If the name is already a key at this level
        """
        subtree = Tree(descriptor, **fields)
        self.index.add(subtree.name, subtree)
        self._subtrees.append(subtree)
        logger.debug("Added subtree '%s' to tree '%s'", subtree.name, self.name)
        return subtree

    def add_shortcut(self, shortcut: str, target: str) -> Node:
        """
        Register a shortcut at this level for a node anywhere below it.

        The target path is resolved once, now, with the same rules as
        `lookup`. Later lookups of the shortcut consume it as one token.

        Params:
            shortcut: Alias key; must be exactly one field, surrounding
                spaces and tabs are dropped
            target: Command path to alias, e.g. "file open"

        Returns:
            The node the shortcut resolves to

        Raises:
            InvalidShortcutError: If the shortcut is not a single field
            AmbiguousCommandError: If the target path is ambiguous
            CommandNotFoundError: If the target path matches nothing
            DuplicateKeyError: If the shortcut is already a key at this level
        """
        fields = split_fields(shortcut)
        if len(fields) != 1 or '"' in shortcut:
            raise InvalidShortcutError(shortcut)
        (key,) = fields

        node = self.lookup(target).node
        self.index.add(key, node)
        node._add_shortcut(key)
        logger.debug(
            "Added shortcut '%s' -> '%s' in tree '%s'", key, target, self.name
        )
        return node

    def lookup(self, line: str) -> Selection:
        """Resolve a line to a command or subtree plus its arguments."""
        from cmdtree.resolution.lookup import lookup

        return lookup(self, line)

    def lookup_command(self, line: str) -> Selection:
        """Resolve a line that must end at a command."""
        from cmdtree.resolution.lookup import lookup_command

        return lookup_command(self, line)

    def lookup_subtree(self, line: str) -> Selection:
        """Resolve a line that must end at a subtree."""
        from cmdtree.resolution.lookup import lookup_subtree

        return lookup_subtree(self, line)

    def autocomplete(self, line: str) -> list[str]:
        """List full command paths that complete a partial line."""
        from cmdtree.resolution.autocomplete import autocomplete

        return autocomplete(self, line)

    def get_help(
        self,
        args: list[str],
        stream: TextIO | None = None,
        help_format: HelpFormat | None = None,
    ) -> None:
        """
        Display help for this tree or for the node named by `args`.

        Params:
            args: Arguments of a 'help' command; empty for this tree's listing
            stream: Output stream, stdout when omitted
            help_format: Layout settings, defaults when omitted

        Raises:
            AmbiguousCommandError: If the named node is ambiguous
            CommandNotFoundError: If the named node does not exist
        """
        from cmdtree.rendering.help import DEFAULT_FORMAT, display_help

        node: Node = self
        if args:
            node = self.lookup(" ".join(args)).node
        display_help(node, stream, help_format or DEFAULT_FORMAT)

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> Tree:
        """Build a tree from a nested mapping.

        Args:
            config: Tree descriptor fields plus optional "commands" (list of
                    command descriptor mappings), "subtrees" (list of nested
                    tree mappings) and "shortcuts" (shortcut -> target path).

        Returns:
            Fully registered Tree

        Example:
            tree = Tree.from_dict({
                "name": "root",
                "commands": [{"name": "quit", "brief": "Exit"}],
                "subtrees": [{"name": "file", "commands": [{"name": "open"}]}],
                "shortcuts": {"o": "file open"},
            })
        """
        tree = cls(TreeDescriptor(**_descriptor_fields(config)))
        tree._populate(config)
        return tree

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> Tree:
        """Build a tree from a YAML file in the `from_dict` layout.

        Args:
            yaml_path: Path to YAML file containing the tree definition

        Returns:
            Fully registered Tree
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)

    def _populate(self, config: dict[str, Any]) -> None:
        for command in config.get("commands") or []:
            self.add_command(CommandDescriptor(**_descriptor_fields(command)))
        for sub in config.get("subtrees") or []:
            subtree = self.add_subtree(TreeDescriptor(**_descriptor_fields(sub)))
            subtree._populate(sub)
        # Shortcuts last: their targets may live in the subtrees just built
        for shortcut, target in (config.get("shortcuts") or {}).items():
            self.add_shortcut(shortcut, target)


def _descriptor_fields(config: dict[str, Any]) -> dict[str, Any]:
    valid_fields = set(NodeDescriptor.model_fields)
    return {k: v for k, v in config.items() if k in valid_fields}


Node = Union[Command, Tree]
