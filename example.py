#!/usr/bin/env python3
"""
Example usage of the gameoflife package.
"""

import numpy as np

from gameoflife import Board, apply_pattern, decode_rle

GLIDER_RLE = """#N Glider
#C This is a glider.
x = 3, y = 3, rule = B3/S23
bo$2bo$3o!
"""


def main():
    """Demonstrate programmatic usage of the gameoflife package."""
    # Decode a glider and place it on a small board
    pattern = decode_rle(GLIDER_RLE)
    board = Board(10, 10)
    apply_pattern(pattern, board)

    print(f"Pattern: {pattern.name} ({pattern.rows}x{pattern.cols})")
    print("Initial state:")
    print(board)
    print(f"Population: {board.alive_count()}")
    print()

    # Run simulation for 8 generations; the glider moves two cells diagonally
    for _ in range(8):
        board.advance()

    print(f"Generation {board.generation}:")
    print(board)
    print()

    # Random board with a reproducible seed
    board = Board(8, 16)
    board.initialize_random(0.3, np.random.default_rng(42))
    while board.alive_count() and board.generation < 50:
        board.advance()
    print(f"Random board: {board.alive_count()} cells alive after {board.generation} generations")


if __name__ == "__main__":
    main()
