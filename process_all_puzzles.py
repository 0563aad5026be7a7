#!/usr/bin/env python3
"""
Solve all Sudoku puzzle files in the current directory.
"""

import sys
import os
import glob

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku_core.board import InvalidGridError
from sudoku_core.cli import PuzzleProcessor


def main():
    """Solve every .txt and .json puzzle in the current directory."""
    puzzle_files = sorted(glob.glob("*.txt") + glob.glob("*.json"))

    if not puzzle_files:
        print("No .txt or .json puzzle files found in current directory!")
        return

    print(f"Found {len(puzzle_files)} puzzles to process")
    print("=" * 60)

    processor = PuzzleProcessor(output_size=450, save_results=True)
    output_dir = "output"

    results = {
        'solved': [],
        'unsolved': [],
        'error': []
    }

    for i, puzzle_path in enumerate(puzzle_files, 1):
        print(f"\n[{i}/{len(puzzle_files)}] Processing {puzzle_path}...")

        try:
            result = processor.process_puzzle(puzzle_path, output_dir)
            if result:
                results['solved'].append(puzzle_path)
            else:
                results['unsolved'].append(puzzle_path)
        except InvalidGridError as e:
            print(f"Error processing {puzzle_path}: {e}")
            results['error'].append(puzzle_path)

    # Print summary
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"✅ Solved:    {len(results['solved'])}/{len(puzzle_files)}")
    print(f"❌ Unsolved:  {len(results['unsolved'])}/{len(puzzle_files)}")
    print(f"⚠️  Errors:    {len(results['error'])}/{len(puzzle_files)}")

    if results['solved']:
        print(f"\nSolved puzzles: {', '.join(results['solved'])}")

    print(f"\nSolutions saved to: {output_dir}/")
    print("Look for files named: XX_solution.json and XX_solution.png")


if __name__ == '__main__':
    main()
