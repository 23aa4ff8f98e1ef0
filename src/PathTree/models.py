"""Data classes for PathTree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class PathEntry:
    raw: str
    segments: tuple[str, ...]
    is_directory: bool = False

    @property
    def path(self) -> str:
        return "/".join(self.segments)

    @property
    def name(self) -> str:
        return self.segments[-1]

    @property
    def depth(self) -> int:
        return len(self.segments)


@dataclass
class TreeNode:
    """One path segment in the tree.

    ``parent`` is a lookup-only back-reference; ownership flows from the
    root down through ``children``.
    """

    name: str
    is_directory: bool = False
    children: list[TreeNode] = field(default_factory=list)
    parent: TreeNode | None = field(default=None, repr=False, compare=False)

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    @property
    def path(self) -> str:
        names: list[str] = []
        node: TreeNode | None = self
        while node is not None and node.parent is not None:
            names.append(node.name)
            node = node.parent
        return "/".join(reversed(names))

    @property
    def display_name(self) -> str:
        return f"{self.name}/" if self.is_directory else self.name

    def child(self, name: str) -> TreeNode | None:
        for c in self.children:
            if c.name == name:
                return c
        return None

    def add_child(self, node: TreeNode) -> TreeNode:
        node.parent = self
        self.children.append(node)
        return node

    def walk(self) -> Iterator[TreeNode]:
        """Yield every descendant in pre-order (the node itself excluded)."""
        for c in self.children:
            yield c
            yield from c.walk()
