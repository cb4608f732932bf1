"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from typing import List, Optional, TextIO, Tuple

import numpy as np

from ..core.board import Board
from ..core.errors import PatternError
from ..core.files import load_pattern_file
from ..core.patterns import Pattern

ALIVE_GLYPH = "●"
DEAD_GLYPH = " "


def render_frame(board: Board) -> str:
    """Draw the board inside a box-drawing border.

    Args:
        board: Board to draw

    Returns:
        Frame text, one line per board row plus the top and bottom border
    """
    lines = ["┌" + "─" * board.cols + "┐"]
    for row in range(board.rows):
        cells = (ALIVE_GLYPH if board.is_alive(row, col) else DEAD_GLYPH for col in range(board.cols))
        lines.append("│" + "".join(cells) + "│")
    lines.append("└" + "─" * board.cols + "┘")
    return "\n".join(lines) + "\n"


def run(
    board: Board,
    rate: float,
    max_generations: int = 0,
    out: Optional[TextIO] = None,
) -> Tuple[int, str]:
    """Draw and advance the board until it dies out.

    A frame is written before every generation. The loop stops when the
    population reaches zero or, if ``max_generations`` is positive, after
    that many generations.

    Args:
        board: Seeded board to simulate
        rate: Seconds to wait between frames
        max_generations: Generation limit (0 for none)
        out: Stream to draw on (defaults to stdout)

    Returns:
        Tuple of (generations advanced, reason) where reason is
        'extinction' or 'max_generations'
    """
    if out is None:
        out = sys.stdout

    generations = 0
    while True:
        out.write(render_frame(board))
        out.flush()

        if board.alive_count() == 0:
            return generations, "extinction"
        if max_generations and generations >= max_generations:
            return generations, "max_generations"

        time.sleep(rate)
        board.advance()
        generations += 1


def build_board(args: argparse.Namespace) -> Board:
    """Create and seed the board described by the parsed arguments.

    With a pattern file the board grows to at least the pattern's size and
    the pattern is applied; otherwise every cell is seeded randomly.

    Raises:
        OSError: If the pattern file cannot be read
        PatternError: If the pattern cannot be decoded or applied
    """
    rows, cols = args.rows, args.cols

    if args.config:
        pattern: Pattern = load_pattern_file(args.config)
        rows = max(rows, pattern.rows)
        cols = max(cols, pattern.cols)
        if args.verbose:
            print(f"Loaded pattern '{pattern.name}': {pattern.rows}x{pattern.cols}, {pattern.population} cells")
        print(f"Board size: rows: {rows}, cols: {cols}")
        board = Board(rows, cols)
        pattern.apply_to_board(board)
    else:
        board = Board(rows, cols)
        if args.verbose:
            print(f"Generating random population (density: {args.density:.2%})")
        board.initialize_random(args.density, np.random.default_rng(args.seed))

    return board


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="gameoflife",
        description="An implementation of Conway's Game of Life.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 40x80 board, half the cells alive
  gameoflife

  # Sparse random board, reproducible
  gameoflife -r 30 -c 60 -p 0.2 --seed 7

  # Load a pattern file (RLE or JSON), refreshing every 100ms
  gameoflife -f gosper_glider_gun.rle --rate 100

  # Stop after 200 generations
  gameoflife -f glider.json -m 200
        """,
    )

    parser.add_argument("-r", "--rows", type=int, default=40, help="Number of rows in the grid (default: 40)")

    parser.add_argument("-c", "--cols", type=int, default=80, help="Number of columns in the grid (default: 80)")

    parser.add_argument(
        "-p",
        "--density",
        type=float,
        default=0.5,
        help="Probability that a cell is alive at the beginning, [0,1) (default: 0.5)",
    )

    parser.add_argument(
        "--rate",
        type=int,
        default=250,
        help="Milliseconds between refresh cycles (default: 250)",
    )

    parser.add_argument(
        "-f",
        "--config",
        type=str,
        help="Pattern file to start from (.json, anything else is read as RLE)",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=0,
        help="Stop after this many generations (default: 0, run until extinction)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible random boards",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.rows <= 0:
        errors.append("Rows must be positive")

    if args.cols <= 0:
        errors.append("Cols must be positive")

    if not 0.0 <= args.density < 1.0:
        errors.append("Density must be within [0, 1)")

    if args.rate < 0:
        errors.append("Rate must be non-negative")

    if args.max_generations < 0:
        errors.append("Max generations must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        board = build_board(args)
    except (OSError, PatternError) as e:
        print(f"Error: {e}")
        return 1

    try:
        generations, reason = run(board, args.rate / 1000.0, args.max_generations)
    except KeyboardInterrupt:
        print(f"\nSimulation interrupted by user at generation {board.generation}")
        return 1

    if reason == "extinction":
        print(f"Population died out after {generations} generations")
    else:
        print(f"Stopped after {generations} generations with {board.alive_count()} live cells")
    return 0


if __name__ == "__main__":
    sys.exit(main())
