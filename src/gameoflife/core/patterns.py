"""Game of Life patterns: the decoded matrix, applying it and JSON storage."""

from typing import Any, Dict, List, Optional, Sequence, Union
import json
import logging
from pathlib import Path

from .board import Board
from .errors import BoardTooSmallError, DecodeError

logger = logging.getLogger(__name__)


class Pattern:
    """A rectangular 0/1 matrix of starting cells, independent of any board.

    ``cells[row][col]`` is nonzero where the cell starts alive. Patterns come
    from :func:`gameoflife.core.rle.decode_rle`, from :func:`load_json` or
    from :meth:`from_board`.
    """

    def __init__(
        self,
        cells: Sequence[Sequence[int]],
        cols: Optional[int] = None,
        name: str = "",
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize a pattern.

        Args:
            cells: Row-major matrix, nonzero meaning alive
            cols: Declared width (defaults to the longest row)
            name: Optional pattern name
            description: Optional description
            metadata: Optional metadata dictionary
        """
        self.cells: List[List[int]] = [[1 if value else 0 for value in row] for row in cells]
        self.rows = len(self.cells)
        self.cols = cols if cols is not None else max((len(row) for row in self.cells), default=0)
        self.name = name
        self.description = description
        self.metadata = metadata or {}

    @property
    def population(self) -> int:
        """Number of live cells in the pattern."""
        return sum(sum(row) for row in self.cells)

    def fits(self, board: Board) -> bool:
        """Whether the pattern fits on ``board`` without clipping."""
        if self.rows > board.rows:
            return False
        return all(len(row) <= board.cols for row in self.cells)

    def apply_to_board(self, board: Board) -> None:
        """Clear ``board`` and paint this pattern at its top-left corner.

        The board is left untouched when the pattern does not fit.

        Raises:
            BoardTooSmallError: If the pattern has more rows or columns than the board
        """
        if not self.fits(board):
            widest = max((len(row) for row in self.cells), default=0)
            raise BoardTooSmallError((self.rows, widest), board.shape)

        board.clear()
        for r, row in enumerate(self.cells):
            for c, value in enumerate(row):
                if value != 0:
                    board.set_alive(r, c, True)

        logger.debug(
            "Applied pattern %r (%d live cells) to %dx%d board",
            self.name,
            self.population,
            board.rows,
            board.cols,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert pattern to the JSON configuration layout."""
        data: Dict[str, Any] = {"rows": self.rows, "cols": self.cols, "board": self.cells}
        if self.name:
            data["name"] = self.name
        if self.description:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pattern":
        """Create a pattern from the JSON configuration layout.

        Raises:
            DecodeError: If keys are missing or the matrix disagrees with rows/cols
        """
        try:
            rows = int(data["rows"])
            cols = int(data["cols"])
            board = data["board"]
        except (KeyError, TypeError, ValueError) as e:
            raise DecodeError(f"invalid pattern configuration: {e!r}") from e

        if not isinstance(board, list) or not all(isinstance(row, list) for row in board):
            raise DecodeError("'board' must be a list of rows")
        if len(board) != rows:
            raise DecodeError(f"'board' has {len(board)} rows, expected {rows}")
        for r, row in enumerate(board):
            if len(row) > cols:
                raise DecodeError(f"row {r} has {len(row)} columns, expected at most {cols}")

        return cls(
            board,
            cols=cols,
            name=data.get("name", ""),
            description=data.get("description", ""),
        )

    @classmethod
    def from_board(cls, board: Board, name: str = "", description: str = "") -> "Pattern":
        """Snapshot the live cells of a board as a pattern of the same size."""
        return cls(
            board.to_array().tolist(),
            cols=board.cols,
            name=name,
            description=description,
            metadata={"generation": board.generation},
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.rows == other.rows and self.cols == other.cols and self.cells == other.cells

    def __str__(self) -> str:
        return "\n".join("".join("*" if value else "." for value in row) for row in self.cells)


def apply_pattern(pattern: Pattern, board: Board) -> None:
    """Write ``pattern`` onto ``board``; see :meth:`Pattern.apply_to_board`."""
    pattern.apply_to_board(board)


def load_json(text: str) -> Pattern:
    """Decode a JSON pattern configuration.

    Raises:
        DecodeError: If the text is not valid JSON or not a pattern configuration
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError("pattern configuration must be a JSON object")
    return Pattern.from_dict(data)


def save_json(pattern: Pattern, path: Union[str, Path]) -> None:
    """Save a pattern as a JSON configuration file."""
    with open(path, "w") as f:
        json.dump(pattern.to_dict(), f, indent=2)
