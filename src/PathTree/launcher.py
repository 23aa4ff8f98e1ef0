"""Start the web UI with a path list preloaded into the page."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
import time
import webbrowser
from pathlib import Path
from urllib.parse import urlencode

import requests

from PathTree.cli import DEFAULT_INPUT
from PathTree.models import PathEntry
from PathTree.path_parser import InputError, read_paths

logger = logging.getLogger(__name__)

PORT = 8501
APP_PATH = Path(__file__).resolve().parent / "app.py"
HEALTH_ENDPOINT = "/_stcore/health"


def page_url(port: int, entries: list[PathEntry]) -> str:
    """Return the page URL, carrying *entries* in the ``paths`` query parameter."""
    url = f"http://localhost:{port}/"
    if not entries:
        return url
    paths = "\n".join(entry.raw for entry in entries)
    return f"{url}?{urlencode({'paths': paths})}"


def load_entries(input_path: str, explicit: bool) -> list[PathEntry]:
    """Read the path list to preload.

    A missing default file means an empty page; a missing file the user
    named raises InputError.
    """
    if not explicit and not Path(input_path).exists():
        logger.debug("No %s in working directory; starting empty", input_path)
        return []
    return read_paths(input_path)


def wait_for_server(port: int, attempts: int = 30, delay: float = 1.0) -> bool:
    """Poll the Streamlit health endpoint until it answers 200."""
    health_url = f"http://localhost:{port}{HEALTH_ENDPOINT}"
    for _ in range(attempts):
        try:
            resp = requests.get(health_url, timeout=2)
            if resp.status_code == 200:
                return True
        except requests.RequestException:
            pass
        time.sleep(delay)
    return False


def _open_when_ready(port: int, url: str) -> None:
    if wait_for_server(port):
        webbrowser.open(url)
    else:
        logger.warning("Server on port %d did not come up; open %s manually", port, url)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pathtree-ui",
        description="Open the PathTree web UI, optionally preloaded with a path list.",
    )
    p.add_argument(
        "input",
        nargs="?",
        default=None,
        help=f"Path list to preload (default: {DEFAULT_INPUT} if present).",
    )
    p.add_argument("--port", type=int, default=PORT, help=f"Server port (default: {PORT}).")
    p.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open a browser tab.",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    explicit = args.input is not None
    try:
        entries = load_entries(args.input or DEFAULT_INPUT, explicit)
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    url = page_url(args.port, entries)
    logger.info("Serving %d paths at %s", len(entries), url)

    if not args.no_browser:
        threading.Thread(
            target=_open_when_ready, args=(args.port, url), daemon=True
        ).start()

    from streamlit.web import bootstrap

    bootstrap.run(
        str(APP_PATH),
        False,
        [],
        {
            "server.headless": True,
            "server.port": args.port,
            "browser.gatherUsageStats": False,
        },
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
