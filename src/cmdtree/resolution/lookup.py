"""
Line resolution against a command tree.

The first field of the line is resolved in the root's prefix index. Each
time a subtree is reached with input left over, the next field is resolved
in that subtree's index. Reaching a command ends the descent and whatever
text remains becomes the argument list.
"""

from attrs import field, frozen

from cmdtree.core.tokenizer import next_field, split_fields
from cmdtree.exceptions import CommandNotFoundError
from cmdtree.structure.tree import Command, Node, Tree


@frozen
class Selection:
    """Result of a lookup: the matched node and its residual arguments."""

    node: Node
    args: list[str] = field(factory=list)

    @property
    def command(self) -> Command | None:
        return self.node if isinstance(self.node, Command) else None

    @property
    def subtree(self) -> Tree | None:
        return self.node if isinstance(self.node, Tree) else None


def lookup(tree: Tree, line: str) -> Selection:
    """
    Resolve a line of text to a command or subtree.

    Params:
        tree: Root of the search
        line: Raw user input

    Returns:
        Selection holding the matched node and the remaining fields, quotes
        stripped, in their original order

    Raises:
        CommandNotFoundError: If the line is blank or a field matches nothing
        AmbiguousCommandError: If a field prefixes several keys at its level
    """
    field_, remain = next_field(line)
    if not field_:
        raise CommandNotFoundError(field_)

    node: Node = tree
    index = tree.index
    while True:
        node = index.find(field_)
        if isinstance(node, Command) or not remain:
            break
        field_, remain = next_field(remain)
        index = node.index

    return Selection(node, split_fields(remain))


def lookup_command(tree: Tree, line: str) -> Selection:
    """
    Resolve a line that must end at a command.

    Raises:
        CommandNotFoundError: If the line resolves to a subtree instead
    """
    selection = lookup(tree, line)
    if not isinstance(selection.node, Command):
        raise CommandNotFoundError(line)
    return selection


def lookup_subtree(tree: Tree, line: str) -> Selection:
    """
    Resolve a line that must end at a subtree.

    Raises:
        CommandNotFoundError: If the line resolves to a command instead
    """
    selection = lookup(tree, line)
    if not isinstance(selection.node, Tree):
        raise CommandNotFoundError(line)
    return selection
