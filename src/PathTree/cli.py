"""Command line entry point: read a path list and print its tree."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from PathTree.markdown_renderer import render_markdown
from PathTree.path_parser import InputError, read_paths
from PathTree.tree_builder import build_tree, find_by_name
from PathTree.tree_renderer import describe_node, render_lines

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "paths.txt"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pathtree",
        description="Render a flat list of paths as a tree diagram.",
    )
    p.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Path list, one path per line (default: {DEFAULT_INPUT}).",
    )
    p.add_argument(
        "--format",
        choices=("text", "markdown"),
        default="text",
        help="Output format (default: text).",
    )
    p.add_argument(
        "--details",
        action="store_true",
        help="Print every node with its type, path and depth instead of the tree.",
    )
    p.add_argument(
        "--find",
        metavar="NAME",
        default=None,
        help="Print the details of the first node named NAME.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Log every parse and insert step to stderr.",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    # Box-drawing glyphs fail on ASCII and legacy code page streams.
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8")

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        entries = read_paths(args.input)
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    root = build_tree(entries)
    logger.debug("Built tree with %d top-level nodes", len(root.children))

    if args.find is not None:
        node = find_by_name(root, args.find)
        if node is None:
            print(f"Error: no node named {args.find!r}", file=sys.stderr)
            return 1
        lines = describe_node(node)
    elif args.details:
        lines = describe_node(root)
    elif args.format == "markdown":
        sys.stdout.write(render_markdown(Path(args.input).name, root))
        return 0
    else:
        lines = render_lines(root)

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
