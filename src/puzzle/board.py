"""
The puzzle board implements all rules of the fifteen puzzle ("penkiolika"): moving the empty cell,
shuffling, and detecting the solved state.

The board is a row-major list of 16 integers, 0 marking the empty cell:

     board[ 0] board[ 1] board[ 2] board[ 3]
     board[ 4] board[ 5] board[ 6] board[ 7]
     board[ 8] board[ 9] board[10] board[11]
     board[12] board[13] board[14] board[15]

Every instance guards its own cells with a lock, so one instance can be shared between request threads.
"""

import random
from collections.abc import Sequence
from threading import RLock
from typing import Optional

from src.core.shared_types import Direction
from src.puzzle.cell import BOARD_SIZE, Cell

EMPTY_CELL = 0

# 1..15 in order with the empty cell in the bottom right corner
FINAL_BOARD: tuple[int, ...] = tuple(range(1, BOARD_SIZE)) + (EMPTY_CELL,)

# Odd on purpose: an odd number of moves always changes the blank's position parity,
# so a default shuffle can never end up back on the final board.
DEFAULT_SHUFFLE_TIMES = 101

# (row step, column step) of the empty cell for each direction.
# A move is legal iff the empty cell stays on the board: top needs index >= 4, bottom index <= 11,
# left index % 4 != 0 and right index % 4 != 3.
MOVEMENT_RULES: dict[Direction, tuple[int, int]] = {
    Direction.TOP: (-1, 0),
    Direction.BOTTOM: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class Penkiolika:
    """A single fifteen puzzle game."""

    def __init__(
        self,
        board: Optional[Sequence[int]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Start from the final board, or from a copy of the given 16 cells.

        ---
        NOTE only the length is checked. Duplicate or out-of-range values are accepted as given.
        """
        if board is None:
            cells = list(FINAL_BOARD)
        else:
            cells = list(board)
            if len(cells) != BOARD_SIZE:
                raise ValueError(
                    f"Board size should equal to {BOARD_SIZE}, got {len(cells)}."
                )
        self._board: list[int] = cells
        self._rng = rng or random.Random()
        self._lock = RLock()

    # --- STATE ---
    def get_board(self) -> list[int]:
        """Copy of the cells: callers can never change the game through it."""
        with self._lock:
            return list(self._board)

    def is_final(self) -> bool:
        with self._lock:
            return tuple(self._board) == FINAL_BOARD

    def snapshot(self) -> tuple[list[int], bool]:
        """Board and final flag read together, so both describe the same moment."""
        with self._lock:
            return self.get_board(), self.is_final()

    def empty_cell_index(self) -> int:
        with self._lock:
            try:
                return self._board.index(EMPTY_CELL)
            except ValueError:
                return -1

    # --- MOVES ---
    def move_top(self) -> bool:
        return self.move(Direction.TOP)

    def move_bottom(self) -> bool:
        return self.move(Direction.BOTTOM)

    def move_left(self) -> bool:
        return self.move(Direction.LEFT)

    def move_right(self) -> bool:
        return self.move(Direction.RIGHT)

    def move(self, direction: Direction) -> bool:
        """
        Slide the empty cell one step in the given direction by swapping it with its neighbour.

        Returns False (and changes nothing) if the empty cell sits on the edge it would cross.
        """
        d_row, d_column = MOVEMENT_RULES[direction]
        with self._lock:
            empty_index = self.empty_cell_index()
            if empty_index < 0:
                return False
            target = Cell.from_index(empty_index).neighbour(d_row, d_column)
            if not target.is_within_bounds():
                return False
            self._swap(empty_index, target.to_index())
            return True

    def shuffle(self, times: int = DEFAULT_SHUFFLE_TIMES) -> None:
        """
        Move the empty cell exactly `times` times in random directions.

        Attempts that would cross the edge of the board do not count and are simply redrawn.
        A board shuffled from a solved state is always solvable (just like the physical puzzle),
        which is not true for a random permutation of the cells.
        It is not guaranteed that positions are not repeated along the way: with an even `times`
        the board may (rarely) end up where it started.
        """
        # one entry per direction, so every draw is uniform over the four
        moves = [self.move_top, self.move_bottom, self.move_left, self.move_right]
        with self._lock:
            remaining = times
            while remaining > 0:
                if self._rng.choice(moves)():
                    remaining -= 1

    def _swap(self, first: int, second: int) -> None:
        self._board[first], self._board[second] = (
            self._board[second],
            self._board[first],
        )

    # --- COMPARISON ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Penkiolika):
            return NotImplemented
        return self.get_board() == other.get_board()

    def __hash__(self) -> int:
        return hash(tuple(self.get_board()))

    def __repr__(self) -> str:
        return f"Penkiolika({self.get_board()})"
