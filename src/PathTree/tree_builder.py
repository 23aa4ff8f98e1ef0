"""Tree construction from a flat list of paths, and lookups on the result."""

from __future__ import annotations

import logging
from typing import Iterable

from PathTree.models import PathEntry, TreeNode
from PathTree.path_parser import parse_path, parse_paths

logger = logging.getLogger(__name__)


def new_root() -> TreeNode:
    """Return the synthetic root that owns all top-level nodes."""
    return TreeNode(name="", is_directory=True)


def build_tree(entries: Iterable[PathEntry]) -> TreeNode:
    """Build a tree from parsed entries, keeping first-seen sibling order.

    Example: ``src/``, ``src/main.rs``, ``src/lib.rs`` gives

        <root>
          src/  (directory)
            main.rs
            lib.rs
    """
    root = new_root()
    for entry in entries:
        insert_entry(root, entry)
    return root


def build_tree_from_text(text: str) -> TreeNode:
    return build_tree(parse_paths(text))


def insert_entry(root: TreeNode, entry: PathEntry) -> TreeNode:
    """Insert one entry under *root* and return the node of its last segment."""
    logger.debug("Adding: %s", entry.raw)
    node = root
    last = len(entry.segments) - 1
    for i, segment in enumerate(entry.segments):
        is_directory = entry.is_directory if i == last else True
        existing = node.child(segment)
        if existing is None:
            node = node.add_child(TreeNode(name=segment, is_directory=is_directory))
            logger.debug("Created %s (directory=%s)", node.path, is_directory)
            continue

        # A leaf with descendants becomes a directory; never the reverse.
        if is_directory and not existing.is_directory:
            existing.is_directory = True
            logger.debug("Promoted leaf to directory: %s", existing.path)
        node = existing
    return node


def find_by_name(root: TreeNode, name: str) -> TreeNode | None:
    """Return the first node in pre-order named *name*, or None."""
    for node in root.walk():
        if node.name == name:
            return node
    return None


def find_all_by_name(root: TreeNode, name: str) -> list[TreeNode]:
    return [node for node in root.walk() if node.name == name]


def find_by_path(root: TreeNode, path: str) -> TreeNode | None:
    """Return the node at *path* (normalized like an input line), or None."""
    entry = parse_path(path)
    if entry is None:
        return None
    node: TreeNode | None = root
    for segment in entry.segments:
        node = node.child(segment)
        if node is None:
            return None
    return node


def find_by_depth(root: TreeNode, depth: int) -> list[TreeNode]:
    """Return every node at *depth* in pre-order; depth 1 is the top level."""
    return [node for node in root.walk() if node.depth == depth]
