#!/usr/bin/env python3
"""
Convenience script to solve Sudoku puzzle files.

This script provides a simple interface to the Sudoku Solver pipeline.

Usage:
    python process_puzzle.py --puzzle puzzle.txt
    python process_puzzle.py --puzzle path/to/puzzle.json --output my_output/
"""

import sys
import os

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku_core.cli import main

if __name__ == '__main__':
    sys.exit(main())
