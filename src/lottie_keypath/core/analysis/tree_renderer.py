from __future__ import annotations

"""
KeyPath Tree Renderer.

Converts KeyPathNode trees into an indented text listing or a JSON-ready
dictionary.
"""

from typing import Any, Dict, List

from lottie_keypath.domain.keypath_models import KeyPathNode

INDENT_UNIT = "  "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_into_string(tree: KeyPathNode, indent: str = "") -> str:
    """
    Render the tree as one line per node, children indented by two spaces.

    Args:
        tree: Root of the tree to render.
        indent: Prefix for the root line.

    Returns:
        str: Newline-terminated listing.
    """
    lines: List[str] = []
    render_tree_structure(tree, lines, indent)
    return "".join(lines)


def render_tree_structure(tree: KeyPathNode, lines: List[str], indent: str = "") -> None:
    """
    Recursively append the rendered lines of a tree to an accumulator.

    Args:
        tree: Current node to process.
        lines: Accumulator for newline-terminated lines.
        indent: Indentation prefix for the current recursion level.
    """
    lines.append(f"{indent}{tree.key}\n")
    child_indent = indent + INDENT_UNIT
    for child in tree.children:
        render_tree_structure(child, lines, child_indent)


def tree_to_dict(tree: KeyPathNode) -> Dict[str, Any]:
    """Convert a tree into nested plain dictionaries."""
    return {
        "key": tree.key,
        "children": [tree_to_dict(child) for child in tree.children],
    }


def count_nodes(tree: KeyPathNode) -> int:
    return 1 + sum(count_nodes(child) for child in tree.children)
