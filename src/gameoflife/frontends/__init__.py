"""Frontend interfaces for the Game of Life."""

from .cli import main, render_frame, run

__all__ = ["main", "render_frame", "run"]
