"""Entry point for running as a module: python -m tasktracker"""

import sys

from tasktracker.cli import main

if __name__ == "__main__":
    sys.exit(main())
