import sys

from PathTree.cli import main

sys.exit(main())
