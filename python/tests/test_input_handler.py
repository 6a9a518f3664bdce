"""Typed tile labels and the slide they trigger in the terminal frontends."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import Phase
from frontend.cli import input_handler
from frontend.cli.input_handler import Action, read_tile
from frontend.cli.vanilla import app as vanilla_app


def _feed(monkeypatch: pytest.MonkeyPatch, *keys: str | None) -> Iterator[str | None]:
    """Make ``get_key_timeout`` return *keys* in order."""
    it = iter(keys)
    monkeypatch.setattr(input_handler, "get_key_timeout", lambda timeout: next(it))
    return it


# -- read_tile ----------------------------------------------------------------


def test_single_digit_boards_do_not_wait(monkeypatch: pytest.MonkeyPatch) -> None:
    it = _feed(monkeypatch)
    assert read_tile("7", max_digits=1) == 7
    assert next(it, "untouched") == "untouched"


@pytest.mark.parametrize(
    "keys, expected",
    [
        (("2",), 12),
        ((None,), 1),
        ((Action.ENTER,), 1),
        ((Action.QUIT,), 1),
    ],
)
def test_second_digit(
    monkeypatch: pytest.MonkeyPatch, keys: tuple, expected: int
) -> None:
    _feed(monkeypatch, *keys)
    assert read_tile("1", max_digits=2) == expected


# -- slide binding ------------------------------------------------------------


def test_typed_tile_slides_its_column(monkeypatch: pytest.MonkeyPatch) -> None:
    _feed(monkeypatch, "2")
    game = GamePlay(4)
    assert vanilla_app._slide(game, "1") == ""
    assert game.board.tiles[11] == 0
    assert game.board.tiles[15] == 12
    assert game.history == (12,)
    assert game.phase == Phase.SHUFFLED


def test_typed_tile_out_of_line(monkeypatch: pytest.MonkeyPatch) -> None:
    _feed(monkeypatch, None)
    game = GamePlay(4)
    status = vanilla_app._slide(game, "9")
    assert "Tile 9 is not in line" in status
    assert game.is_won
    assert game.history == ()


def test_typed_tile_slides_whole_row() -> None:
    game = GamePlay(3)
    assert vanilla_app._slide(game, "7") == ""
    assert game.board.tiles == (1, 2, 3, 4, 5, 6, 0, 7, 8)
    assert game.history == (8, 7)
