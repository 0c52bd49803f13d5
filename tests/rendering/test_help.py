"""
Tests for help rendering.

This module tests word wrapping, usage/description/shortcut blocks,
tree listings, and Tree.get_help output.
"""

import io

import pytest

from cmdtree import CommandNotFoundError, HelpFormat, Tree
from cmdtree.rendering import (
    display_help,
    indent_wrap,
    render_command_help,
    render_description,
    render_shortcuts,
    render_tree_help,
    render_usage,
)


class TestIndentWrap:
    """Tests for indent_wrap."""

    def test_blank_text(self):
        """Test that blank text wraps to nothing."""
        assert indent_wrap(3, "   ") == ""

    def test_short_text_single_line(self):
        """Test that short text is indented on one line."""
        assert indent_wrap(3, "open  a\tfile") == "   open a file"

    def test_lines_stay_below_width(self):
        """Test that every wrapped line is shorter than the width."""
        text = " ".join(["word"] * 40)
        lines = indent_wrap(3, text, width=20).split("\n")
        assert len(lines) > 1
        assert all(len(line) < 20 for line in lines)
        assert all(line.startswith("   word") for line in lines)

    def test_exact_boundary_breaks(self):
        """Test that a line reaching exactly the width is broken."""
        # indent 0: "aaaa bbbb" is 9 chars, not < 9
        assert indent_wrap(0, "aaaa bbbb", width=9) == "aaaa\nbbbb"
        assert indent_wrap(0, "aaaa bbbb", width=10) == "aaaa bbbb"

    def test_long_word_kept_whole(self):
        """Test that a word longer than the width is not split."""
        assert indent_wrap(2, "x" * 30, width=10) == "  " + "x" * 30


class TestCommandHelp:
    """Tests for command help blocks."""

    def test_full_command_help(self):
        """Test usage, description and shortcuts together."""
        root = Tree(name="root")
        root.add_command(
            name="open",
            brief="Open a file",
            description="Opens the named file for reading.",
            usage="open <file>",
        )
        root.add_shortcut("op", "open")
        root.add_shortcut("o", "open")
        command = root.lookup("open").node
        assert render_command_help(command) == (
            "Usage: open <file>\n"
            "Description:\n"
            "   Opens the named file for reading.\n"
            "\n"
            "Shortcuts: o, op\n"
            "\n"
        )

    def test_brief_fallback_and_single_shortcut(self, shortcut_tree):
        """Test that brief text stands in for a missing description."""
        command = shortcut_tree.lookup("f").node
        assert render_usage(command) == ""
        assert render_description(command) == "Description:\n   Open a file.\n\n"
        assert render_shortcuts(command) == "Shortcut: f\n\n"

    def test_no_display_text(self):
        """Test that a bare command renders nothing."""
        root = Tree(name="root")
        command = root.add_command(name="bare")
        assert render_command_help(command) == ""

    def test_tree_usage_default(self, file_tree):
        """Test the default usage line for a subtree."""
        assert render_usage(file_tree.subtrees[0]) == "Usage: file [subcommand]\n"


class TestTreeHelp:
    """Tests for tree listings."""

    def test_listing_sorted_and_aligned(self, file_tree):
        """Test that children are sorted by name and briefs aligned."""
        assert render_tree_help(file_tree) == (
            "root commands:\n"
            "    file  File operations\n"
            "    quit  Exit the program\n"
            "\n"
        )

    def test_children_without_brief_skipped(self):
        """Test that undescribed children are hidden but widen the column."""
        root = Tree(name="root")
        root.add_command(name="a", brief="First")
        root.add_command(name="hidden")
        assert render_tree_help(root) == "root commands:\n    a       First\n\n"

    def test_custom_format(self, file_tree):
        """Test that HelpFormat controls indent and gap."""
        help_format = HelpFormat(listing_indent=1, column_gap=1)
        output = render_tree_help(file_tree, help_format)
        assert " file File operations\n" in output


class TestGetHelp:
    """Tests for Tree.get_help and display_help."""

    def test_no_args_lists_tree(self, file_tree):
        """Test that help without arguments lists the tree."""
        stream = io.StringIO()
        file_tree.get_help([], stream)
        assert stream.getvalue().startswith("root commands:\n")

    def test_args_select_node(self, file_tree):
        """Test that help arguments are looked up like a command line."""
        stream = io.StringIO()
        file_tree.get_help(["file", "cl"], stream)
        assert stream.getvalue() == "Description:\n   Close a file.\n\n"

    def test_args_select_subtree(self, file_tree):
        """Test that naming a subtree lists that subtree."""
        stream = io.StringIO()
        file_tree.get_help(["file"], stream)
        assert stream.getvalue().startswith("file commands:\n    close  Close a file\n")

    def test_unknown_topic(self, file_tree):
        """Test that lookup errors propagate from get_help."""
        with pytest.raises(CommandNotFoundError):
            file_tree.get_help(["nope"], io.StringIO())

    def test_display_help_defaults_to_stdout(self, file_tree, capsys):
        """Test that display_help writes to stdout without a stream."""
        display_help(file_tree.lookup("quit").node)
        assert capsys.readouterr().out == "Description:\n   Exit the program.\n\n"
