"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a built-in menu for size selection, play, and study.
"""

from __future__ import annotations

import sys
import time

from backend.config import PuzzleConfig
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver, SolveStrategy
from backend.models.board import MAX_SIZE, MIN_SIZE, Board
from frontend.cli.input_handler import (
    Action,
    get_key,
    get_key_timeout,
    read_tile,
    to_direction,
)


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset
_BG_SEL = "\033[42;30m"  # green bg, black fg (selected size)


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}" if m else f"{s}s"


def _stats_line(game: GamePlay, elapsed: float) -> str:
    """Return the formatted Moves + Time string (no newline)."""
    return (
        f"  Moves: {_Y}{game.state.moves}{_R}  |  "
        f"Time: {_Y}{_format_time(elapsed)}{_R}"
    )


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.total_cells - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for cell_row in range(board.size):
        cells: list[str] = []
        for cell in range(cell_row * board.size, (cell_row + 1) * board.size):
            val = board.tiles[cell]
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(cell):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    """Apply a single solver hint.  Returns a status message."""
    board = game.board
    hint = Solver.hint(board, game.config.max_expansions)
    if hint is None:
        if board.is_solved():
            return f"{_G}Already solved!{_R}"
        return f"{_Y}No hint found within the search limit.{_R}"
    game.move_tile(hint)
    return f"{_C}Hint:{_R} moved tile {_BOLD}{hint}{_R}"


def _slide(game: GamePlay, first: str) -> str:
    """Slide the row or column segment up to the typed tile."""
    tile = read_tile(first, len(str(game.board.total_cells - 1)))
    if game.slide_tile(tile):
        return ""
    return f"{_Y}Tile {tile} is not in line with the blank.{_R}"


def _auto_solve(game: GamePlay, strategy: SolveStrategy) -> str:
    """Plan with *strategy* and animate the moves.  Returns a status message."""
    moves = game.auto_solve(strategy)
    if moves is None:
        if strategy == SolveStrategy.REPLAY:
            return f"{_Y}No move history to unwind.{_R}"
        return f"{_Y}No solution found, press R to reshuffle.{_R}"
    if not moves:
        return f"{_G}Already solved!{_R}"

    label = "Unwinding" if strategy == SolveStrategy.REPLAY else "Solving"
    size = game.size
    for i, board in enumerate(game.play_out(moves)):
        _clear()
        print(f"  {_C}=== {label}… ({size}×{size}) ==={_R}")
        print()
        print(_render_board(board))
        print()
        print(f"  Move {i + 1}/{len(moves)}  (tile {moves[i]})  {_DIM}Q to stop{_R}")
        sys.stdout.flush()

        if get_key_timeout(game.config.replay_delay) == Action.QUIT:
            game.cancel_solve()
            return f"{_Y}Stopped after {i + 1} moves.{_R}"

    return f"{_G}Solved in {len(moves)} moves!{_R}"


# -- menu screen --------------------------------------------------------------


def _show_menu(sel_size: int) -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}     S L I D I N G   P U Z Z L E     {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()

    sizes_str = ""
    for s in range(MIN_SIZE, MAX_SIZE + 1):
        if s == sel_size:
            sizes_str += f"  {_BG_SEL} {s}×{s} {_R}"
        else:
            sizes_str += f"  {_DIM}{s}×{s}{_R}"
    print(f"    Size:{sizes_str}")
    print(f"    {_DIM}← → to change{_R}")
    print()

    print(f"    {_C}1{_R}  Play")
    print(f"    {_Y}2{_R}  Study")
    print(f"    {_DIM}Q{_R}  Quit")
    print()


# -- game screens -------------------------------------------------------------


def _show_game(game: GamePlay, elapsed: float, status: str = "") -> None:
    """Draw the full play screen.

    The stats line (Moves + Time) is printed last, with no trailing
    newline, so ``_update_time`` can overwrite it in-place using
    ``\\r\\033[K``.
    """
    _clear()
    size = game.size
    print(f"  {_C}=== Sliding Puzzle ({size}×{size}) ==={_R}")
    print()
    print(_render_board(game.board))
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}0-9{_R}: slide  |  "
        f"{_C}N{_R}: hint  |  "
        f"{_C}R{_R}: restart  |  "
        f"{_C}Q{_R}: back"
    )
    if status:
        print(f"  {status}")
    sys.stdout.write(f"\n{_stats_line(game, elapsed)}")
    sys.stdout.flush()


def _update_time(game: GamePlay, elapsed: float) -> None:
    """Overwrite just the stats (last) line in-place."""
    sys.stdout.write(f"\r\033[K{_stats_line(game, elapsed)}")
    sys.stdout.flush()


def _show_study(game: GamePlay, status: str = "") -> None:
    _clear()
    size = game.size
    print(f"  {_Y}=== Study ({size}×{size}, {game.phase}) ==={_R}")
    print()
    print(_render_board(game.board))
    if status:
        print(f"\n  {status}")
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}0-9{_R}: slide  |  "
        f"{_Y}R{_R}: scramble  |  "
        f"{_C}N{_R}: hint  |  "
        f"{_C}V{_R}: solve  |  "
        f"{_C}U{_R}: unwind  |  "
        f"{_C}Q{_R}: back"
    )


def _show_win(game: GamePlay, elapsed: float) -> None:
    _clear()
    size = game.size
    print(f"  {_G}=== Sliding Puzzle ({size}×{size}) ==={_R}")
    print()
    print(_render_board(game.board))
    print()
    print(f"  {_G}★ CONGRATULATIONS! You solved it! ★{_R}")
    print()
    print(_stats_line(game, elapsed))
    print(f"\n  Press {_C}R{_R} to play again, {_C}Q{_R} to go back.")


# -- game loops ---------------------------------------------------------------


def _play_game(size: int, config: PuzzleConfig) -> None:
    """Play mode — hint only, timed."""
    while True:
        game = GamePlay(size, config)
        game.shuffle()
        started = time.monotonic()
        status = ""

        while not game.is_won:
            _show_game(game, time.monotonic() - started, status)
            status = ""

            # Wait for input; update the time display every 0.5 s.
            while True:
                key = get_key_timeout(0.5)
                if key is not None:
                    break
                _update_time(game, time.monotonic() - started)

            direction = to_direction(key)
            if direction is not None:
                game.move(direction)
            elif key.isdigit():
                status = _slide(game, key)
            elif key == Action.HINT:
                status = _apply_hint(game)
            elif key == Action.SHUFFLE:
                game.shuffle()
                started = time.monotonic()
            elif key == Action.QUIT:
                return

        _show_win(game, time.monotonic() - started)
        while True:
            key = get_key()
            if key == Action.SHUFFLE:
                break
            if key == Action.QUIT:
                return


def _study_game(size: int, config: PuzzleConfig) -> None:
    """Study mode — starts solved, scramble/hint/solve/unwind available."""
    game = GamePlay(size, config)
    status = ""

    while True:
        _show_study(game, status)
        status = ""
        key = get_key()

        direction = to_direction(key)
        if direction is not None:
            game.move(direction)
        elif key.isdigit():
            status = _slide(game, key)
        elif key == Action.SHUFFLE:
            game.shuffle()
            status = f"{_Y}Scrambled!{_R}"
        elif key == Action.HINT:
            status = _apply_hint(game)
        elif key == Action.SOLVE:
            status = _auto_solve(game, SolveStrategy.SEARCH)
        elif key == Action.UNWIND:
            status = _auto_solve(game, SolveStrategy.REPLAY)
        elif key == Action.QUIT:
            return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(sel_size: int, config: PuzzleConfig) -> None:
    while True:
        _show_menu(sel_size)
        key = get_key()

        if key == Action.QUIT:
            _clear()
            print("  Goodbye!\n")
            return
        elif key == Action.LEFT:
            sel_size = max(MIN_SIZE, sel_size - 1)
        elif key == Action.RIGHT:
            sel_size = min(MAX_SIZE, sel_size + 1)
        elif key in ("1", Action.ENTER):
            _play_game(sel_size, config)
        elif key == "2":
            _study_game(sel_size, config)


# -- public entry point -------------------------------------------------------


def run(size: int, config: PuzzleConfig) -> None:
    """Launch the vanilla CLI with interactive menu."""
    _menu_loop(size, config)
