"""
Plain-text help rendering for commands and trees.

Commands render as a usage line, a wrapped description and their
shortcuts. Trees render as a name-sorted, column-aligned listing of their
children. All render_* functions return strings; display_help writes to a
stream.
"""

import sys
from typing import TextIO

from cmdtree.rendering.help_format import HelpFormat
from cmdtree.structure.tree import Command, Node, Tree

DEFAULT_FORMAT = HelpFormat()


def indent_wrap(indent: int, text: str, width: int = 80) -> str:
    """
    Greedily wrap words into indented lines shorter than `width`.

    Params:
        indent: Spaces prefixed to every line
        text: Text to wrap; runs of whitespace collapse
        width: Lines are kept strictly below this length

    Returns:
        Wrapped lines joined by newlines, or "" for blank text
    """
    words = text.split()
    if not words:
        return ""

    pad = " " * indent
    lines = []
    line = [words[0]]
    length = indent + len(words[0])
    for word in words[1:]:
        if length + 1 + len(word) < width:
            line.append(word)
            length += 1 + len(word)
            continue
        lines.append(pad + " ".join(line))
        line = [word]
        length = indent + len(word)
    lines.append(pad + " ".join(line))
    return "\n".join(lines)


def render_usage(node: Node) -> str:
    if node.usage:
        return f"Usage: {node.usage}\n"
    if isinstance(node, Tree):
        return f"Usage: {node.name} [subcommand]\n"
    return ""


def render_description(node: Node, help_format: HelpFormat = DEFAULT_FORMAT) -> str:
    """Description block; falls back to the brief text, with a closing period."""
    indent, width = help_format.description_indent, help_format.width
    if node.description:
        return f"Description:\n{indent_wrap(indent, node.description, width)}\n\n"
    if node.brief:
        return f"Description:\n{indent_wrap(indent, node.brief, width)}.\n\n"
    return ""


def render_shortcuts(node: Node) -> str:
    shortcuts = node.shortcuts
    if not shortcuts:
        return ""
    if len(shortcuts) > 1:
        return f"Shortcuts: {', '.join(shortcuts)}\n\n"
    return f"Shortcut: {shortcuts[0]}\n\n"


def render_command_help(command: Command, help_format: HelpFormat = DEFAULT_FORMAT) -> str:
    return (
        render_usage(command)
        + render_description(command, help_format)
        + render_shortcuts(command)
    )


def render_tree_help(tree: Tree, help_format: HelpFormat = DEFAULT_FORMAT) -> str:
    """
    List a tree's commands and subtrees sorted by name, with brief text.

    Children without brief text are left out of the listing but still count
    toward the width of the name column.
    """
    nodes: list[Node] = sorted(
        [*tree.commands, *tree.subtrees], key=lambda node: node.name
    )
    name_width = max((len(node.name) for node in nodes), default=0)
    pad = " " * help_format.listing_indent
    gap = " " * help_format.column_gap

    lines = [f"{tree.name} commands:"]
    for node in nodes:
        if node.brief:
            lines.append(f"{pad}{node.name:<{name_width}}{gap}{node.brief}")
    return "\n".join(lines) + "\n\n"


def render_help(node: Node, help_format: HelpFormat = DEFAULT_FORMAT) -> str:
    if isinstance(node, Tree):
        return render_tree_help(node, help_format)
    return render_command_help(node, help_format)


def display_help(
    node: Node, stream: TextIO | None = None, help_format: HelpFormat = DEFAULT_FORMAT
) -> None:
    """
    Write help for a node to a stream.

    Params:
        node: Command or tree to describe
        stream: Output stream, stdout when omitted
        help_format: Layout settings
    """
    (stream or sys.stdout).write(render_help(node, help_format))
