"""Seat grid value object."""

from typing import Iterable

import attrs


@attrs.define(frozen=True)
class SeatGrid:
    """
    Universe of bookable seat labels of the hall (Value Object).

    Labels are the row letter followed by the seat number, e.g. ``A1`` or
    ``E10``, and are listed row by row. The grid is never persisted.
    """

    rows: str = 'ABCDE'
    seats_per_row: int = 10

    @property
    def capacity(self) -> int:
        return len(self.rows) * self.seats_per_row

    def labels(self) -> list[str]:
        return [
            f'{row}{number}' for row in self.rows for number in range(1, self.seats_per_row + 1)
        ]

    def available(self, taken: Iterable[str]) -> list[str]:
        taken_seats = set(taken)
        return [label for label in self.labels() if label not in taken_seats]


HALL_GRID = SeatGrid()
