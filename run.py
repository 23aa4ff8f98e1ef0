"""Source-checkout entry point for the web UI (same as ``pathtree-ui``)."""

import sys
from pathlib import Path

src_dir = Path(__file__).resolve().parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from PathTree.launcher import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
