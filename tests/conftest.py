"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import random
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.api.handler import RequestHandler
from src.db.memory_repository import InMemoryGameRepository
from src.puzzle.board import FINAL_BOARD, Penkiolika
from src.services.puzzle_service import PuzzleService

BASE_PATH = "/penkiolika"

# Scrambled but valid board, used wherever a "game in progress" is needed
MID_GAME_BOARD = [3, 5, 7, 2, 1, 10, 4, 11, 15, 6, 0, 13, 12, 9, 8, 14]

# Empty cell in the top left corner: cannot move left nor top
TOP_LEFT_EMPTY_BOARD = [0, *range(1, 16)]


def count_inversions(board: list[int]) -> int:
    tiles = [value for value in board if value != 0]
    return sum(
        1
        for i, first in enumerate(tiles)
        for second in tiles[i + 1 :]
        if first > second
    )


def is_solvable(board: list[int]) -> bool:
    """
    4x4 solvability: (inversions + row of the empty cell) keeps its parity under every legal move.
    The final board has 0 inversions and the empty cell in row 3, so that sum must be odd.
    """
    return (count_inversions(board) + board.index(0) // 4) % 2 == 1


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1515)


@pytest.fixture
def board_factory(seeded_rng: random.Random) -> Callable[..., Penkiolika]:
    """Call the inner function with the desired cells (defaults to the final board)."""

    def _create_board(cells: list[int] | None = None) -> Penkiolika:
        return Penkiolika(cells if cells is not None else list(FINAL_BOARD), rng=seeded_rng)

    return _create_board


@pytest.fixture
def repository() -> InMemoryGameRepository:
    """Fresh registry per test, with a short shuffle to keep tests fast."""
    return InMemoryGameRepository(shuffle_times=11)


@pytest.fixture
def handler(repository: InMemoryGameRepository) -> RequestHandler:
    return RequestHandler(PuzzleService(repository), base_path=BASE_PATH)


@pytest.fixture
def client(handler: RequestHandler) -> Generator[TestClient, None, None]:
    with TestClient(create_app(handler)) as test_client:
        yield test_client
