"""
cmdtree help rendering.

This package formats the display text carried by commands and trees into
usage lines, wrapped descriptions and command listings.
"""

from cmdtree.rendering.help import (
    display_help,
    indent_wrap,
    render_command_help,
    render_description,
    render_help,
    render_shortcuts,
    render_tree_help,
    render_usage,
)
from cmdtree.rendering.help_format import HelpFormat

__all__ = [
    "HelpFormat",
    "display_help",
    "indent_wrap",
    "render_command_help",
    "render_description",
    "render_help",
    "render_shortcuts",
    "render_tree_help",
    "render_usage",
]
