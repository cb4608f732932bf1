"""A single Game of Life cell."""


class Cell:
    """One automaton cell with a published and a pending state.

    ``alive`` is the state everyone else reads. ``pending`` holds the next
    generation's state and only means something between :meth:`update` and
    :meth:`commit` during a single board advance.
    """

    __slots__ = ("alive", "pending")

    def __init__(self) -> None:
        self.alive = False
        self.pending = False

    def update(self, alive_neighbors: int) -> None:
        """Decide the next state from the number of live neighbors.

        Args:
            alive_neighbors: Live neighbors counted in the current generation
        """
        if self.alive:
            self.pending = alive_neighbors in (2, 3)
        else:
            self.pending = alive_neighbors == 3

    def commit(self) -> None:
        """Publish the pending state and reset it."""
        self.alive = self.pending
        self.pending = False

    def __repr__(self) -> str:
        return f"Cell(alive={self.alive}, pending={self.pending})"
