"""Exceptions raised while decoding and applying patterns."""

from typing import Optional, Tuple


class PatternError(ValueError):
    """Base class for pattern decode and apply failures."""


class DecodeError(PatternError):
    """Raised when pattern text cannot be decoded."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class DimensionsError(DecodeError):
    """Raised when pattern dimensions are missing or malformed."""


class RuleError(DecodeError):
    """Raised when a pattern declares a rule other than B3/S23."""


class BoardTooSmallError(PatternError):
    """Raised when a pattern does not fit on the target board."""

    def __init__(self, pattern_shape: Tuple[int, int], board_shape: Tuple[int, int]) -> None:
        self.pattern_shape = pattern_shape
        self.board_shape = board_shape
        if pattern_shape[0] > board_shape[0]:
            detail = "more rows"
        else:
            detail = "more cols"
        super().__init__(
            f"This configuration requires a larger board ({detail}): "
            f"pattern {pattern_shape[0]}x{pattern_shape[1]}, "
            f"board {board_shape[0]}x{board_shape[1]}"
        )
