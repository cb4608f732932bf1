"""Core Game of Life logic."""

from .cell import Cell
from .board import Board
from .patterns import Pattern, apply_pattern, load_json, save_json
from .rle import decode_rle
from .files import load_pattern_file, load_rle_file
from .errors import BoardTooSmallError, DecodeError, DimensionsError, PatternError, RuleError

__all__ = [
    "Cell",
    "Board",
    "Pattern",
    "apply_pattern",
    "load_json",
    "load_pattern_file",
    "save_json",
    "decode_rle",
    "load_rle_file",
    "BoardTooSmallError",
    "DecodeError",
    "DimensionsError",
    "PatternError",
    "RuleError",
]
