"""Entry point for running md2md as a module.

This allows the package to be executed as:
    python -m md2md [arguments]
"""

import sys

from md2md.cli import main

if __name__ == "__main__":
    sys.exit(main())
