"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.  Includes a built-in
menu for size selection, play, and study.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

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

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _controls(*pairs: tuple[str, str]) -> Text:
    controls = Text()
    for key, label in pairs:
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f"  {label} ", style="dim")
    return controls


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.total_cells - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * board.size + c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _draw(game: GamePlay, title: str, style: str, *lines: Text) -> None:
    console.clear()
    size = game.size
    panel = Panel(
        Align.center(_render_board(game.board)),
        title=f"[bold {style}]{title}  {size}×{size}[/bold {style}]",
        border_style=style,
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    for line in lines:
        console.print(Align.center(line))


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    board = game.board
    hint = Solver.hint(board, game.config.max_expansions)
    if hint is None:
        if board.is_solved():
            return "[green]Already solved![/green]"
        return "[yellow]No hint found within the search limit.[/yellow]"
    game.move_tile(hint)
    return f"[cyan]Hint:[/cyan] moved tile [bold]{hint}[/bold]"


def _slide(game: GamePlay, first: str) -> str:
    """Slide the row or column segment up to the typed tile."""
    tile = read_tile(first, len(str(game.board.total_cells - 1)))
    if game.slide_tile(tile):
        return ""
    return f"[yellow]Tile {tile} is not in line with the blank.[/yellow]"


def _auto_solve(game: GamePlay, strategy: SolveStrategy) -> str:
    """Plan with *strategy* and animate the moves.  Returns a status message."""
    moves = game.auto_solve(strategy)
    if moves is None:
        if strategy == SolveStrategy.REPLAY:
            return "[yellow]No move history to unwind.[/yellow]"
        return "[red]No solution found, press R to reshuffle.[/red]"
    if not moves:
        return "[green]Already solved![/green]"

    label = "Unwinding" if strategy == SolveStrategy.REPLAY else "Solving"
    for i, _ in enumerate(game.play_out(moves)):
        progress = Text()
        progress.append(f"  {label}… move {i + 1}/{len(moves)} ", style="bold cyan")
        progress.append(f"(tile {moves[i]})  Q to stop", style="dim")
        _draw(game, "Auto-Solve", "cyan", progress)

        if get_key_timeout(game.config.replay_delay) == Action.QUIT:
            game.cancel_solve()
            return f"[yellow]Stopped after {i + 1} moves.[/yellow]"

    return f"[bold green]Solved in {len(moves)} moves![/bold green]"


# -- menu screen --------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    """Draw the main menu."""
    console.clear()

    sizes = Text()
    for s in range(MIN_SIZE, MAX_SIZE + 1):
        if s > MIN_SIZE:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="bold yellow")
    opts.append("  Study    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]S L I D I N G   P U Z Z L E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _stats(game: GamePlay, elapsed: float) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(elapsed), style="bold yellow")
    return stats


def _draw_game(game: GamePlay, elapsed: float, status: str = "") -> None:
    """Draw the play screen (stats visible, hint only)."""
    lines = [_stats(game, elapsed)]
    if status:
        lines.append(Text.from_markup(f"  {status}"))
    lines.append(
        _controls(
            ("↑↓←→/WASD", "move"),
            ("0-9", "slide to tile"),
            ("N", "hint"),
            ("R", "restart"),
            ("Q", "back"),
        )
    )
    _draw(game, "Sliding Puzzle", "bright_blue", *lines)


def _draw_study(game: GamePlay, status: str = "") -> None:
    """Draw the study screen (scramble, hint and both solvers available)."""
    lines: list[Text] = []
    if status:
        lines.append(Text.from_markup(f"  {status}"))
    lines.append(
        _controls(
            ("↑↓←→/WASD", "move"),
            ("0-9", "slide to tile"),
            ("R", "scramble"),
            ("N", "hint"),
            ("V", "solve"),
            ("U", "unwind"),
            ("Q", "back"),
        )
    )
    _draw(game, f"Study ({game.phase})", "yellow", *lines)


def _draw_win(game: GamePlay, elapsed: float) -> None:
    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")
    hint = Text("\n  Press R to play again, Q to go back.\n", style="dim")
    _draw(game, "Sliding Puzzle", "bold green", congrats, _stats(game, elapsed), hint)


# -- game loops ---------------------------------------------------------------


def _play_game(size: int, config: PuzzleConfig) -> None:
    """Play mode — hint only, timed."""
    while True:
        game = GamePlay(size, config)
        game.shuffle()
        started = time.monotonic()
        status = ""

        while not game.is_won:
            _draw_game(game, time.monotonic() - started, status)
            status = ""

            # Redraw every 0.5 s so the clock keeps ticking.
            key = None
            while key is None:
                key = get_key_timeout(0.5)
                if key is None:
                    _draw_game(game, time.monotonic() - started)

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

        _draw_win(game, time.monotonic() - started)
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
        _draw_study(game, status)
        status = ""
        key = get_key()

        direction = to_direction(key)
        if direction is not None:
            game.move(direction)
        elif key.isdigit():
            status = _slide(game, key)
        elif key == Action.SHUFFLE:
            game.shuffle()
            status = "[yellow]Scrambled![/yellow]"
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
        _draw_menu(sel_size)
        key = get_key()

        if key == Action.QUIT:
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
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
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(size, config)
