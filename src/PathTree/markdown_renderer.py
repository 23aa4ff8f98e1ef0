"""Markdown output assembly."""

from __future__ import annotations

from PathTree.models import TreeNode
from PathTree.tree_renderer import render_tree


def count_nodes(root: TreeNode) -> tuple[int, int]:
    """Return ``(directories, files)`` below *root*."""
    directories = files = 0
    for node in root.walk():
        if node.is_directory:
            directories += 1
        else:
            files += 1
    return directories, files


def render_markdown(title: str, root: TreeNode) -> str:
    """Render the tree as a single Markdown document.

    Args:
        title: e.g. the input file name
        root: synthetic root returned by ``build_tree``
    """
    directories, files = count_nodes(root)
    parts: list[str] = []

    parts.append(f"# Tree: {title}\n")

    parts.append("## Structure\n")
    parts.append("```")
    parts.append(render_tree(root))
    parts.append("```\n")

    dir_word = "directory" if directories == 1 else "directories"
    file_word = "file" if files == 1 else "files"
    parts.append(f"{directories} {dir_word}, {files} {file_word}")

    return "\n".join(parts) + "\n"
