"""Path list parsing and input file reading."""

from __future__ import annotations

import logging
from pathlib import Path

from PathTree.models import PathEntry

logger = logging.getLogger(__name__)


class InputError(Exception):
    """Raised when the path list cannot be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        super().__init__(f"Cannot read {self.path}: {reason}")


def parse_path(line: str) -> PathEntry | None:
    """Parse one input line into a PathEntry.

    Returns None for blank lines and for lines with no segments left
    after normalization (e.g. ``./`` or ``/``).

    Examples:
      - ``src/``          -> segments ("src",), directory
      - ``./src/main.rs`` -> segments ("src", "main.rs"), file
      - ``a//b/./c/``     -> segments ("a", "b", "c"), directory
      - ``a/b/.``         -> segments ("a", "b"), directory
    """
    raw = line.strip()
    if not raw:
        return None

    text = raw
    while text.startswith("./"):
        text = text[2:]

    is_directory = text.endswith(("/", "/."))
    segments = tuple(s for s in text.split("/") if s and s != ".")
    if not segments:
        logger.debug("Skipping line without segments: %r", raw)
        return None

    logger.debug("Parsed %r -> %s (directory=%s)", raw, list(segments), is_directory)
    return PathEntry(raw=raw, segments=segments, is_directory=is_directory)


def parse_paths(text: str) -> list[PathEntry]:
    """Parse the full content of a path list, one entry per non-empty line."""
    entries: list[PathEntry] = []
    for line in text.splitlines():
        entry = parse_path(line)
        if entry is not None:
            entries.append(entry)
    return entries


def read_paths(path: str | Path) -> list[PathEntry]:
    """Read and parse a path list file.

    Raises:
        InputError: if the file is missing, unreadable or not valid UTF-8.
    """
    try:
        with open(path, encoding="utf-8-sig") as f:
            content = f.read()
    except FileNotFoundError:
        raise InputError(path, "file not found") from None
    except IsADirectoryError:
        raise InputError(path, "is a directory") from None
    except UnicodeDecodeError as exc:
        raise InputError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise InputError(path, exc.strerror or str(exc)) from exc

    entries = parse_paths(content)
    logger.debug("Read %d entries from %s", len(entries), path)
    return entries
