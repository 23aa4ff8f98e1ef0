"""Box-drawing tree rendering."""

from __future__ import annotations

from PathTree.models import TreeNode

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def render_tree(root: TreeNode) -> str:
    """Render the tree below *root* as text.

    Example output:
        src/
        ├── main.rs
        └── lib.rs
    """
    return "\n".join(render_lines(root))


def render_lines(root: TreeNode) -> list[str]:
    """Render the tree below *root* into lines.

    Top-level nodes are printed bare, the way a listing utility prints its
    starting directory; their descendants get connectors.
    """
    lines: list[str] = []
    for top in root.children:
        lines.append(top.display_name)
        _render_children(top, lines, prefix="")
    return lines


def _render_children(
    node: TreeNode,
    lines: list[str],
    prefix: str,
) -> None:
    """Recursively render the children of *node* into lines."""
    total = len(node.children)
    for i, child in enumerate(node.children):
        is_last = i == total - 1
        connector = LAST_BRANCH if is_last else BRANCH
        lines.append(f"{prefix}{connector}{child.display_name}")

        if child.children:
            extension = SPACE if is_last else PIPE
            _render_children(child, lines, prefix + extension)


def describe_node(node: TreeNode) -> list[str]:
    """Detailed listing of *node* and its subtree, two spaces per level."""
    lines: list[str] = []
    _describe(node, lines, level=0)
    return lines


def _describe(node: TreeNode, lines: list[str], level: int) -> None:
    indent = "  " * level
    path = node.path or "/"
    if node.is_directory:
        lines.append(f"{indent}Directory: {node.name or '/'}")
        lines.append(f"{indent} Children: {len(node.children)}")
    else:
        lines.append(f"{indent}File: {node.name}")
    lines.append(f"{indent} Path: {path}")
    lines.append(f"{indent} Depth: {node.depth}")

    for child in node.children:
        _describe(child, lines, level + 1)
