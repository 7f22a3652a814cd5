"""
A cell on the board

(placed in its own module as both the board and the tests need to reason about rows/columns)
"""

from __future__ import annotations

from dataclasses import dataclass

# The fifteen puzzle is always 4x4. Kept as named dimensions so the index arithmetic reads clearly.
BOARD_DIMENSIONS = (4, 4)
BOARD_WIDTH = BOARD_DIMENSIONS[0]
BOARD_SIZE = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


@dataclass(frozen=True)
class Cell:
    row: int
    column: int

    @classmethod
    def from_index(cls, index: int) -> Cell:
        """Row-major index 0-15 gets converted to (0,0) - (3,3)"""
        return cls(index // BOARD_WIDTH, index % BOARD_WIDTH)

    def to_index(self) -> int:
        return self.row * BOARD_WIDTH + self.column

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[1]) and (
            0 <= self.column < BOARD_DIMENSIONS[0]
        )

    def neighbour(self, d_row: int, d_column: int) -> Cell:
        return Cell(self.row + d_row, self.column + d_column)
