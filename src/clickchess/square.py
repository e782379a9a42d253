"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Iterator

# (rows, cols). Row 0 is the top of the board, where Second's back rank starts.
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True, order=True)
class Square:
    row: int
    col: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


def all_squares() -> Iterator[Square]:
    """Every square on the board, row by row."""
    for row, col in product(range(BOARD_DIMENSIONS[0]), range(BOARD_DIMENSIONS[1])):
        yield Square(row, col)
