"""
Completion of partially typed command lines.

Walks the tree like `lookup`, but collects every key that could extend the
field being typed instead of failing when a field is ambiguous.
"""

from cmdtree.core.tokenizer import next_field
from cmdtree.structure.tree import Command, Tree


def autocomplete(tree: Tree, line: str) -> list[str]:
    """
    Build completion candidates for a partial line.

    Each candidate is a complete space-joined path of keys from `tree` down,
    usable to replace the typed text. Text typed past a command, or past an
    ambiguous field, has no completion.

    Params:
        tree: Root of the search
        line: Partial user input

    Returns:
        Candidate paths in lexicographic order, possibly empty
    """
    field, remain = next_field(line)
    index = tree.index
    prefix = ""
    while True:
        matches = index.find_candidates(field)
        if not matches:
            return []

        if len(matches) > 1:
            if remain:
                return []
            return sorted(prefix + key for key, _ in matches)

        key, node = matches[0]
        if isinstance(node, Command):
            return [] if remain else [prefix + key]

        if not remain and field != node.name:
            return [prefix + key]

        prefix += key + " "
        index = node.index
        field, remain = next_field(remain)
