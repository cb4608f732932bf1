"""Basic tests for the gameoflife package."""

from gameoflife import Board, Pattern, apply_pattern, decode_rle


def test_board_creation():
    """Test basic board creation and cell operations."""
    board = Board(10, 10)
    assert board.rows == 10
    assert board.cols == 10
    assert board.is_alive(0, 0) is False

    board.set_alive(5, 5, True)
    assert board.is_alive(5, 5) is True
    assert board.alive_count() == 1


def test_decode_and_apply():
    """Test decoding a pattern and placing it on a board."""
    pattern = decode_rle("x = 3, y = 3\nbo$2bo$3o!")
    assert isinstance(pattern, Pattern)

    board = Board(5, 5)
    apply_pattern(pattern, board)
    assert board.alive_count() == 5


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    board = Board(5, 5)

    # Vertical blinker
    board.set_alive(1, 2, True)
    board.set_alive(2, 2, True)
    board.set_alive(3, 2, True)

    # Step once - should become horizontal
    board.advance()
    assert board.alive_count() == 3
    assert board.is_alive(2, 1) is True
    assert board.is_alive(2, 2) is True
    assert board.is_alive(2, 3) is True

    # Step again - should return to vertical
    board.advance()
    assert board.alive_count() == 3
    assert board.is_alive(1, 2) is True
    assert board.is_alive(2, 2) is True
    assert board.is_alive(3, 2) is True
