"""
Shared test fixtures and utilities for the cmdtree test suite.
"""

import pytest

from cmdtree import Tree


@pytest.fixture
def file_tree():
    """Root tree with a 'quit' command and a 'file' subtree.

    The 'file' subtree holds open, close, read, write and run, so 'file r'
    is ambiguous while 'file o' is not.

    Usage:
        def test_something(file_tree):
            assert file_tree.lookup("q").node.name == "quit"
    """
    root = Tree(name="root", brief="Root commands")
    root.add_command(name="quit", brief="Exit the program", payload="quit")
    file = root.add_subtree(name="file", brief="File operations")
    for name in ("open", "close", "read", "write", "run"):
        file.add_command(name=name, brief=f"{name.capitalize()} a file", payload=name)
    return root


@pytest.fixture
def shortcut_tree(file_tree):
    """The file tree with shortcut 'f' for 'file open' registered at the root."""
    file_tree.add_shortcut("f", "file open")
    return file_tree
