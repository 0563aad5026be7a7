"""
Sudoku Solver - Command Line Module
"""

import argparse
import os
import sys

import cv2
import numpy as np

from .board import InvalidGridError, as_board, filled_mask, find_conflicts, format_board
from .puzzle_io import load_board, parse_board, save_board
from .render import render_solution
from .solver import solve_puzzle


class PuzzleProcessor:
    """
    Runs a puzzle through load, check, solve and save.

    The original board is kept alongside the solution so the saved image can
    tell given digits apart from the ones the solver filled in.
    """

    def __init__(self, output_size=450, save_results=True, max_steps=None):
        """
        Args:
            output_size (int): Size of the rendered solution image (default: 450x450)
            save_results (bool): Whether to write the solution files
            max_steps (int): Optional cap on solver placements (default: unbounded)
        """
        self.output_size = output_size
        self.save_results = save_results
        self.max_steps = max_steps

    def process_puzzle(self, puzzle_path, output_dir='output'):
        """
        Solve the puzzle stored in a file.

        Returns:
            dict: Results (see process_board), or None if unsolved
        """
        print(f"\n{'='*60}")
        print(f"Processing: {os.path.basename(puzzle_path)}")
        print(f"{'='*60}")

        print("\n[1/3] Loading puzzle...")
        board = load_board(puzzle_path)
        base_name = os.path.splitext(os.path.basename(puzzle_path))[0]
        return self.process_board(board, output_dir, base_name)

    def process_board(self, board, output_dir='output', base_name='puzzle'):
        """
        Solve an already loaded board.

        Returns:
            dict: original board, solution, solver message and filled-cell
            mask, or None if the puzzle could not be solved
        """
        board = as_board(board)
        given_count = np.count_nonzero(board)
        print(f"      Givens: {given_count}")
        print(format_board(board))

        print("\n[2/3] Checking givens...")
        conflicts = find_conflicts(board)
        if conflicts:
            for note in conflicts:
                print(f"        - {note}")
        else:
            print("      ✓ No duplicate givens")
        if given_count < 17:
            print(f"      WARNING: Only {given_count} givens; puzzle may have several solutions")

        print("\n[3/3] Solving...")
        solution, solve_msg = solve_puzzle(board, max_steps=self.max_steps)
        if solution is None:
            print(f"      ✗ Could not solve: {solve_msg}")
            return None

        print(f"      ✓ Solved puzzle ({solve_msg}):")
        print(format_board(solution))

        if self.save_results:
            self._save_results(board, solution, output_dir, base_name)

        return {
            'original': board,
            'solution': solution,
            'message': solve_msg,
            'filled': filled_mask(board, solution),
        }

    def _save_results(self, board, solution, output_dir, base_name):
        """
        Save the solution as JSON and as a rendered image.

        Args:
            board (np.ndarray): Original puzzle
            solution (np.ndarray): Solved puzzle
            output_dir (str): Output directory
            base_name (str): Prefix for the output files
        """
        os.makedirs(output_dir, exist_ok=True)

        json_path = os.path.join(output_dir, f"{base_name}_solution.json")
        save_board(solution, json_path)

        image_path = os.path.join(output_dir, f"{base_name}_solution.png")
        cv2.imwrite(image_path, render_solution(solution, board, size=self.output_size))

        print(f"\n      Saved {json_path} and {image_path}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog='sudoku_core',
        description='Sudoku Solver - backtracking search over 9x9 puzzles',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Solve a puzzle file:
    python -m sudoku_core --puzzle puzzle.txt

  Solve a puzzle given inline (0 or . for empty cells):
    python -m sudoku_core --grid 530070000600195000098000060...

  Solve without writing output files:
    python -m sudoku_core --puzzle puzzle.json --no-save
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--puzzle', '-p',
                        help='Path to a puzzle file (.txt or .json)')
    source.add_argument('--grid', '-g',
                        help='Puzzle as an 81-character string')
    parser.add_argument('--output', '-o', default='output',
                        help='Output directory (default: output)')
    parser.add_argument('--size', '-s', type=int, default=450,
                        help='Rendered solution size in pixels (default: 450)')
    parser.add_argument('--max-steps', type=int, default=None,
                        help='Give up after this many placements (default: no limit)')
    parser.add_argument('--no-save', action='store_true',
                        help='Do not write the solution files')
    return parser


def main(argv=None):
    """
    Main entry point for the Sudoku Solver application.

    Returns the process exit code: 0 when solved, 1 otherwise.
    """
    args = build_parser().parse_args(argv)

    if args.size < 9:
        print(f"Error: --size must be at least 9 pixels, got {args.size}")
        return 1

    if args.puzzle and not os.path.exists(args.puzzle):
        print(f"Error: Puzzle file not found: {args.puzzle}")
        return 1

    processor = PuzzleProcessor(
        output_size=args.size,
        save_results=not args.no_save,
        max_steps=args.max_steps
    )

    try:
        if args.puzzle:
            result = processor.process_puzzle(args.puzzle, args.output)
        else:
            result = processor.process_board(parse_board(args.grid), args.output)
    except InvalidGridError as e:
        print(f"\nError: {e}")
        return 1

    if result is None:
        print("\nNo solution. Please check the puzzle and try again.")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
