"""Run Length Encoded (RLE) pattern decoding.

For the format, see https://conwaylife.com/wiki/Run_Length_Encoded. Only
the B3/S23 rule is accepted; any other rule is rejected rather than played
with the wrong rules.
"""

from typing import Dict, List, Optional, Union
import logging

from .errors import DecodeError, DimensionsError, RuleError
from .patterns import Pattern

logger = logging.getLogger(__name__)

CONWAY_RULE = "b3/s23"

DEAD_CELL = "b"
ALIVE_CELL = "o"
END_OF_ROW = "$"
END_OF_PATTERN = "!"
DIGITS = "0123456789"


def _parse_dimension(key: str, value: str, line_number: int) -> int:
    try:
        size = int(value)
    except ValueError:
        raise DimensionsError(f"invalid {key} dimension {value!r}", line_number) from None
    if size < 0:
        raise DimensionsError(f"{key} dimension must be non-negative, got {size}", line_number)
    return size


def _parse_header(line: str, line_number: int) -> Dict[str, Union[int, str]]:
    """Parse a ``x = <int>, y = <int>[, rule = <rule>]`` line.

    Returns:
        Mapping with any of the keys 'x', 'y' and 'rule'
    """
    header: Dict[str, Union[int, str]] = {}
    clauses = line.split(",")
    for index, clause in enumerate(clauses):
        key, sep, value = clause.partition("=")
        key = key.strip().lower()
        value = value.strip()
        if not sep:
            raise DecodeError(f"malformed header clause {clause.strip()!r}", line_number)

        if key in ("x", "y"):
            header[key] = _parse_dimension(key, value, line_number)
        elif key in ("rule", "type"):
            # the rule runs to the end of the line, bounded-grid suffixes may hold commas
            value = ",".join([value] + clauses[index + 1:]).strip()
            if value.lower() != CONWAY_RULE:
                raise RuleError(
                    f"pattern uses a non-standard rule {value!r}, cannot be played", line_number
                )
            header["rule"] = value
            break
        else:
            logger.debug("Ignoring unknown header key %r on line %d", key, line_number)

    if ("x" in header) != ("y" in header):
        raise DimensionsError("header must declare both x and y", line_number)
    return header


def decode_rle(text: str) -> Pattern:
    """Decode RLE text into a pattern.

    Args:
        text: RLE pattern description

    Returns:
        Pattern whose matrix has the declared y rows and x columns

    Raises:
        DimensionsError: If board data precedes the header or the header is malformed
        RuleError: If the header names a rule other than B3/S23
        DecodeError: If the board data is malformed or runs off the declared size
    """
    width: Optional[int] = None
    height: Optional[int] = None
    cells: List[List[int]] = []
    name = ""
    comments: List[str] = []
    metadata: Dict[str, str] = {}

    # write cursor and the repeat count being accumulated
    row = 0
    col = 0
    run_digits = ""

    finished = False
    for line_number, original_line in enumerate(text.splitlines(), start=1):
        stripped = original_line.strip()
        if not stripped:
            continue

        if stripped.startswith("#"):
            tag, content = stripped[1:2], stripped[2:].strip()
            if tag in ("C", "c"):
                comments.append(content)
            elif tag == "N":
                name = content
            elif tag == "O":
                metadata["author"] = content
            continue

        if "=" in stripped:
            header = _parse_header(stripped, line_number)
            if "rule" in header:
                metadata["rule"] = str(header["rule"]).upper()
            if "x" in header:
                width, height = int(header["x"]), int(header["y"])
                cells = [[0] * width for _ in range(height)]
                row = col = 0
                run_digits = ""
                logger.debug("RLE dimensions %dx%d", width, height)
            continue

        if width is None or height is None:
            raise DimensionsError("dimensions unknown, cannot place pattern", line_number)

        for char in stripped.lower():
            if char in DIGITS:
                run_digits += char
                continue
            if char.isspace():
                continue

            run = int(run_digits) if run_digits else 1
            run_digits = ""

            if char == DEAD_CELL:
                col += run
            elif char == ALIVE_CELL:
                if row >= height or col + run > width:
                    raise DecodeError(
                        f"live cells at row {row}, cols {col}-{col + run - 1} "
                        f"fall outside the declared {width}x{height} pattern",
                        line_number,
                    )
                cells[row][col:col + run] = [1] * run
                col += run
            elif char == END_OF_ROW:
                row += run
                col = 0
            elif char == END_OF_PATTERN:
                finished = True
                break
            else:
                raise DecodeError(f"unexpected character {char!r} in pattern data", line_number)

        if finished:
            break

    if width is None or height is None:
        raise DimensionsError("pattern has no dimensions header")

    pattern = Pattern(
        cells,
        cols=width,
        name=name,
        description="\n".join(comments),
        metadata=metadata,
    )
    logger.debug("Decoded RLE pattern %r with %d live cells", name, pattern.population)
    return pattern
