"""Conway's Game of Life on a bounded board, seeded randomly or from RLE/JSON patterns."""

__version__ = "0.1.0"

from .core.board import Board
from .core.files import load_pattern_file
from .core.patterns import Pattern, apply_pattern
from .core.rle import decode_rle

__all__ = ["Board", "Pattern", "apply_pattern", "load_pattern_file", "decode_rle"]
