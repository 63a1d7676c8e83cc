#!/usr/bin/env python3
"""Jeopardy trivia board.

Usage::

    jeopardy                      # interactive menu
    jeopardy -f rich              # Rich terminal, 6 categories x 5 clues
    jeopardy -f pyqt -c 4 -n 3    # PyQt GUI, 4x3 board
    jeopardy -f vanilla --seed 7  # reproducible board
"""

from __future__ import annotations

import dataclasses
import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

from jeopardy.backend.errors import ConfigError
from jeopardy.config import GameConfig


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.vanilla: "jeopardy.frontend.cli.vanilla.app",
    Frontend.rich: "jeopardy.frontend.cli.rich.app",
    Frontend.pygame: "jeopardy.frontend.gui.pygame.app",
    Frontend.pyqt: "jeopardy.frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def configure_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=str(log_file) if log_file else None,
    )


def _launch(frontend: Frontend, config: GameConfig) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(config)


def _menu_loop(config: GameConfig) -> None:
    choices = {
        "1": Frontend.vanilla,
        "2": Frontend.rich,
        "3": Frontend.pygame,
        "4": Frontend.pyqt,
    }
    while True:
        print()
        print("  ====================================")
        print("          J E O P A R D Y !           ")
        print("  ====================================")
        print()
        print(f"  Board: {config.category_count} categories x {config.clue_count} clues")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice in choices:
            _launch(choices[choice], config)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    categories: Optional[int] = typer.Option(
        None, "-c", "--categories",
        min=1, max=10,
        help="Number of categories (board width). Default 6.",
    ),
    clues: Optional[int] = typer.Option(
        None, "-n", "--clues",
        min=1, max=10,
        help="Clues per category (board height). Default 5.",
    ),
    api_url: Optional[str] = typer.Option(
        None, "--api-url",
        help="Base URL of a jService-compatible trivia API.",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout",
        help="HTTP timeout in seconds.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the category and clue sampling.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log progress at INFO level.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        help="Write logs to this file instead of stderr.",
    ),
) -> None:
    """Jeopardy trivia board."""
    configure_logging(verbose, log_file)

    overrides = {
        "category_count": categories,
        "clue_count": clues,
        "api_url": api_url,
        "timeout": timeout,
        "seed": seed,
    }
    try:
        config = dataclasses.replace(
            GameConfig.from_env(),
            **{k: v for k, v in overrides.items() if v is not None},
        ).validate()
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if frontend is None:
        _menu_loop(config)
        return

    _launch(frontend, config)


if __name__ == "__main__":
    app()
