"""
Entry point for running the sudoku_core module as a package.

Usage:
    python -m sudoku_core --puzzle path/to/puzzle.txt
"""

import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
