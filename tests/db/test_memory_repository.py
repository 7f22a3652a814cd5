"""Unit tests for src/db/memory_repository.py"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.db.memory_repository import InMemoryGameRepository
from src.puzzle.board import Penkiolika
from tests.conftest import MID_GAME_BOARD, TOP_LEFT_EMPTY_BOARD, is_solvable


def test_create_game(repository: InMemoryGameRepository) -> None:
    """New games are shuffled, stored and numbered from 1."""
    game_id, game = repository.create()
    assert game_id == "1"
    assert isinstance(game, Penkiolika)
    assert not game.is_final()
    assert is_solvable(game.get_board())
    assert repository.get(game_id) is game


def test_ids_increase(repository: InMemoryGameRepository) -> None:
    ids = [repository.create()[0] for _ in range(5)]
    assert ids == ["1", "2", "3", "4", "5"]


def test_create_uses_shuffle_times() -> None:
    """A zero-move shuffle leaves the new game solved."""
    repository = InMemoryGameRepository(shuffle_times=0)
    _, game = repository.create()
    assert game.is_final()


def test_get_unknown_game(repository: InMemoryGameRepository) -> None:
    """Should return None if the id does not match anything, before and after games exist."""
    assert repository.get("1") is None
    repository.create()
    assert repository.get("2") is None
    assert repository.get("") is None


def test_delete_game(repository: InMemoryGameRepository) -> None:
    game_id, game = repository.create()
    assert repository.delete(game_id) is game
    assert repository.get(game_id) is None
    assert game_id not in repository
    # second delete finds nothing
    assert repository.delete(game_id) is None


def test_delete_does_not_reuse_ids(repository: InMemoryGameRepository) -> None:
    game_id, _ = repository.create()
    repository.delete(game_id)
    new_id, _ = repository.create()
    assert new_id == "2"


def test_seeded_games() -> None:
    """Games handed over at construction (or added later) are served under their own ids."""
    game = Penkiolika(MID_GAME_BOARD)
    repository = InMemoryGameRepository({"0": game})
    assert repository.get("0") is game
    assert len(repository) == 1

    other = Penkiolika()
    repository.add("custom", other)
    assert repository.get("custom") is other

    # the counter is not affected by seeded ids
    assert repository.create()[0] == "1"
    assert len(repository) == 3


@pytest.mark.parametrize(
    "move_fn, moved, expected_board",
    [
        (Penkiolika.move_right, True, [1, 0, *range(2, 16)]),
        (Penkiolika.move_left, False, TOP_LEFT_EMPTY_BOARD),
    ],
)
def test_apply_move(move_fn, moved: bool, expected_board: list[int]) -> None:
    game = Penkiolika(TOP_LEFT_EMPTY_BOARD)
    repository = InMemoryGameRepository({"0": game})
    assert repository.apply("0", move_fn) == (True, moved)
    assert game.get_board() == expected_board


def test_apply_unknown_game(repository: InMemoryGameRepository) -> None:
    calls: list[Penkiolika] = []

    def _move(game: Penkiolika) -> bool:
        calls.append(game)
        return True

    assert repository.apply("404", _move) == (False, False)
    assert calls == []


def test_concurrent_creates_have_unique_ids() -> None:
    repository = InMemoryGameRepository(shuffle_times=3)
    with ThreadPoolExecutor(max_workers=16) as pool:
        ids = list(pool.map(lambda _: repository.create()[0], range(400)))

    assert len(set(ids)) == 400
    assert set(ids) == {str(i) for i in range(1, 401)}
    assert len(repository) == 400


def test_concurrent_create_and_delete() -> None:
    repository = InMemoryGameRepository(shuffle_times=3)
    created = [repository.create()[0] for _ in range(100)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        deleted = list(pool.map(repository.delete, created))
        new_ids = list(pool.map(lambda _: repository.create()[0], range(100)))

    assert all(game is not None for game in deleted)
    assert all(repository.get(game_id) is None for game_id in created)
    assert set(new_ids) == {str(i) for i in range(101, 201)}
