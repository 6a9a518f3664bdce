#!/usr/bin/env python3
"""Sliding Puzzle.

Usage::

    python main.py                    # interactive menu
    python main.py -f rich -s 3       # Rich terminal, 3×3
    python main.py --demo -s 3 -m 20  # shuffle, solve, print — no input
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import (  # noqa: E402
    DEFAULT_MAX_EXPANSIONS,
    DEFAULT_REPLAY_DELAY,
    DEFAULT_SHUFFLE_FACTOR,
    PuzzleConfig,
)
from backend.engine.gameplay import GamePlay  # noqa: E402
from backend.engine.gamemoves import MoveEngine  # noqa: E402
from backend.engine.gamesolver import Solver  # noqa: E402
from backend.models.board import MAX_SIZE, MIN_SIZE  # noqa: E402

logger = logging.getLogger("slide_puzzle")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _ask_size(default: int) -> int:
    raw = input(f"  Grid size ({MIN_SIZE}-{MAX_SIZE}, default {default}): ").strip()
    try:
        size = int(raw or default)
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError
    except ValueError:
        print(f"  Invalid size, using {default}.")
        size = default
    return size


def _menu_loop(size: int, config: PuzzleConfig) -> None:
    while True:
        print()
        print("  ====================================")
        print("       S L I D I N G   P U Z Z L E    ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            size = _ask_size(size)
            frontend = Frontend.vanilla if choice == "1" else Frontend.rich
            importlib.import_module(_RUNNERS[frontend]).run(size=size, config=config)
        else:
            print("  Unknown option.")


def _demo(size: int, moves: Optional[int], seed: Optional[int], config: PuzzleConfig) -> int:
    """Shuffle once, then solve with both strategies and report."""
    console = Console()
    game = GamePlay(size, config, rng=random.Random(seed))
    board = game.shuffle(moves)
    history = game.history or ()

    console.print(f"[bold]Shuffled {size}×{size}[/bold] ({len(history)} moves)")
    console.print(str(board))

    unwound = MoveEngine.replay(board, Solver.unwind(history))
    console.print(
        f"[cyan]Unwind:[/cyan] {len(history)} moves, solved={unwound.is_solved()}"
    )

    result = Solver.search(board, config.max_expansions)
    if result.moves is None:
        console.print(
            f"[yellow]Search:[/yellow] no solution found "
            f"({result.outcome}, {result.expanded} expansions)"
        )
        return 1

    solved = MoveEngine.replay(board, result.moves)
    console.print(
        f"[green]Search:[/green] {len(result.moves)} moves after "
        f"{result.expanded} expansions, solved={solved.is_solved()}"
    )
    console.print(" ".join(str(t) for t in result.moves))
    return 0


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        4, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    max_expansions: int = typer.Option(
        DEFAULT_MAX_EXPANSIONS, "--max-expansions",
        min=1, envvar="SLIDE_PUZZLE_MAX_EXPANSIONS",
        help="Node expansions before the A* search gives up.",
    ),
    shuffle_factor: int = typer.Option(
        DEFAULT_SHUFFLE_FACTOR, "--shuffle-factor",
        min=1, envvar="SLIDE_PUZZLE_SHUFFLE_FACTOR",
        help="Scramble length is cells² × factor.",
    ),
    delay: float = typer.Option(
        DEFAULT_REPLAY_DELAY, "--delay",
        min=0.0, envvar="SLIDE_PUZZLE_DELAY",
        help="Seconds between animated auto-solve moves.",
    ),
    demo: bool = typer.Option(
        False, "--demo",
        help="Shuffle and solve once without interaction.",
    ),
    moves: Optional[int] = typer.Option(
        None, "-m", "--moves",
        min=0,
        help="Scramble length for --demo (default: cells² × factor).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --demo.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine activity to stderr.",
    ),
) -> None:
    """Sliding Puzzle."""
    _configure_logging(verbose)
    config = PuzzleConfig(
        max_expansions=max_expansions,
        shuffle_factor=shuffle_factor,
        replay_delay=delay,
    )
    logger.debug("Starting with %s", config)

    if demo:
        raise typer.Exit(code=_demo(size, moves, seed, config))

    if frontend is None:
        _menu_loop(size, config)
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(size=size, config=config)


if __name__ == "__main__":
    app()
