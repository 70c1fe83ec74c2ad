"""Selection and column widths of the queue view."""

from __future__ import annotations

from muplayer import index as _index

DEFAULT_CONSTRAINT = (6, 37, 31, 26)


class QueueView:
    """The selected range of queue rows and the percentage width of each column.

    ``range`` is a ``(start, end)`` pair, both inclusive for display, or ``None``.
    """

    def __init__(self, index: int = 0) -> None:
        self.constraint: list[int] = list(DEFAULT_CONSTRAINT)
        self.range: tuple[int, int] | None = (index, index)

    def set_index(self, index: int) -> None:
        self.range = (index, index)

    def index(self) -> int | None:
        """The start of the selection, or ``None``."""
        return None if self.range is None else self.range[0]

    def select_all(self, length: int) -> None:
        self.range = (0, length)

    def up(self, length: int, amount: int) -> None:
        """Move the selection up in a queue of ``length`` songs, collapsing any range."""
        if self.range is None:
            return
        start, end = self.range
        if start != end and start == 0:
            # Leaving a select-all goes back to the top rather than wrapping.
            self.range = (0, 0)
            return
        new_index = _index.up(length, start, amount)
        self.range = (new_index, new_index)

    def down(self, length: int, amount: int) -> None:
        """Move the selection down in a queue of ``length`` songs, collapsing any range."""
        if self.range is None:
            return
        new_index = _index.down(length, self.range[0], amount)
        self.range = (new_index, new_index)

    def adjust_constraint(self, row: int, shift: bool) -> None:
        """Move the border after column ``row``: right, or left when ``shift`` is held."""
        if not 0 <= row < len(self.constraint) - 1:
            raise IndexError(f"no column border after column {row}")
        widths = self.constraint
        if shift and widths[row] != 0:
            widths[row + 1] += 1
            widths[row] -= 1
        elif widths[row + 1] != 0:
            widths[row] += 1
            widths[row + 1] -= 1