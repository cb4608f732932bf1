"""Tests for the Cell class."""

from gameoflife.core.cell import Cell


def make_cell(alive: bool) -> Cell:
    cell = Cell()
    cell.alive = alive
    return cell


class TestCell:
    """Test cases for the Cell class."""

    def test_new_cell_is_dead(self):
        """Test a new cell starts dead with no pending state."""
        cell = Cell()
        assert cell.alive is False
        assert cell.pending is False

    def test_commit_dead_to_alive(self):
        """Test committing a pending birth."""
        cell = make_cell(False)
        cell.pending = True
        cell.commit()

        assert cell.alive is True
        assert cell.pending is False

    def test_commit_alive_to_dead(self):
        """Test committing a pending death."""
        cell = make_cell(True)
        cell.pending = False
        cell.commit()

        assert cell.alive is False

    def test_update_does_not_publish(self):
        """Test update only touches the pending state."""
        cell = make_cell(False)
        cell.update(3)
        assert cell.alive is False
        assert cell.pending is True

        cell = make_cell(True)
        cell.update(0)
        assert cell.alive is True
        assert cell.pending is False

    def test_survival(self):
        """Test a live cell with 2 or 3 neighbors survives."""
        for count in (2, 3):
            cell = make_cell(True)
            cell.update(count)
            cell.commit()
            assert cell.alive is True, f"live cell with {count} neighbors should survive"

    def test_underpopulation(self):
        """Test a live cell with fewer than 2 neighbors dies."""
        for count in (0, 1):
            cell = make_cell(True)
            cell.update(count)
            cell.commit()
            assert cell.alive is False, f"live cell with {count} neighbors should die"

    def test_overpopulation(self):
        """Test a live cell with more than 3 neighbors dies."""
        for count in range(4, 9):
            cell = make_cell(True)
            cell.update(count)
            cell.commit()
            assert cell.alive is False, f"live cell with {count} neighbors should die"

    def test_reproduction(self):
        """Test a dead cell comes alive with exactly 3 neighbors only."""
        for count in range(9):
            cell = make_cell(False)
            cell.update(count)
            cell.commit()
            assert cell.alive is (count == 3), f"dead cell with {count} neighbors"

    def test_update_overwrites_stale_pending(self):
        """Test update always stores the decided state."""
        for count in (0, 1, 2, 4, 8):
            cell = make_cell(False)
            cell.pending = True
            cell.update(count)
            assert cell.pending is False, f"dead cell with {count} neighbors"

    def test_commit_resets_pending(self):
        """Test pending state never leaks into the next generation."""
        cell = make_cell(False)
        cell.update(3)
        cell.commit()
        assert cell.pending is False

        # a second generation with no births must not revive the cell
        cell.update(0)
        cell.commit()
        assert cell.alive is False
