"""Reading pattern files from disk."""

from pathlib import Path
from typing import Union

from .errors import DecodeError
from .patterns import Pattern, load_json
from .rle import decode_rle


def _read_text(path: Path) -> str:
    """Read a pattern file as UTF-8 text.

    Raises:
        OSError: If the file cannot be read
        DecodeError: If the file is not valid UTF-8
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise DecodeError(f"{path} is not a UTF-8 text file: {e}") from e


def load_rle_file(path: Union[str, Path]) -> Pattern:
    """Read and decode an RLE file.

    The file stem becomes the pattern name when the file has no ``#N`` line.

    Raises:
        OSError: If the file cannot be read
        PatternError: If the contents cannot be decoded
    """
    path = Path(path)
    pattern = decode_rle(_read_text(path))
    if not pattern.name:
        pattern.name = path.stem
    return pattern


def load_pattern_file(path: Union[str, Path]) -> Pattern:
    """Load a pattern file, choosing the format from its extension.

    ``.json`` files are read as JSON configurations, anything else as RLE.

    Raises:
        OSError: If the file cannot be read
        PatternError: If the contents cannot be decoded
    """
    path = Path(path)
    if path.suffix.lower() != ".json":
        return load_rle_file(path)

    pattern = load_json(_read_text(path))
    if not pattern.name:
        pattern.name = path.stem
    return pattern
