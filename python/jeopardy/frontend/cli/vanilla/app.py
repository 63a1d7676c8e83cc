"""Vanilla terminal frontend — no third-party rendering.

Uses only print, ANSI codes and the shared key reader for the board.
Each cell is a fixed-width box; revealed text is wrapped to fit.
"""

from __future__ import annotations

import asyncio
import shutil
import sys
import textwrap

from jeopardy.backend.engine.boardbuilder import BoardBuilder
from jeopardy.backend.engine.gameplay import GamePlay
from jeopardy.backend.engine.gamestate import SessionManager
from jeopardy.backend.errors import DataSourceError
from jeopardy.backend.models.board import Board, RevealState
from jeopardy.backend.models.commands import AdvanceClue
from jeopardy.config import GameConfig
from jeopardy.frontend.cli.input_handler import get_key


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_B = "\033[34;1m"    # bold blue
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_INV = "\033[7m"     # reverse video (cursor)
_R = "\033[0m"       # reset

_CELL_LINES = 3

_STATE_COLOUR = {
    RevealState.HIDDEN: _B,
    RevealState.QUESTION: "",
    RevealState.ANSWER: _G,
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _cell_width(board: Board) -> int:
    cols = shutil.get_terminal_size((100, 30)).columns
    return max(8, (cols - 1) // max(1, board.category_count) - 1)


def _fit(text: str, width: int, lines: int) -> list[str]:
    """Wrap *text* into exactly *lines* centred lines of *width* chars."""
    wrapped = textwrap.wrap(text, width - 2) or [""]
    if len(wrapped) > lines:
        wrapped = wrapped[:lines]
        wrapped[-1] = wrapped[-1][: width - 3] + "…"
    pad_top = (lines - len(wrapped)) // 2
    wrapped = [""] * pad_top + wrapped + [""] * (lines - pad_top - len(wrapped))
    return [w.center(width) for w in wrapped]


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, cursor: tuple[int, int]) -> str:
    """Return an ANSI-coloured text grid of the board."""
    width = _cell_width(board)
    sep = "+" + ("-" * width + "+") * board.category_count

    lines: list[str] = [sep]
    headers = [_fit(t.upper(), width, 2) for t in board.titles]
    for i in range(2):
        lines.append("|" + "|".join(f"{_Y}{h[i]}{_R}" for h in headers) + "|")
    lines.append(sep.replace("-", "="))

    for row in range(board.clue_count):
        cells: list[list[str]] = []
        for col in range(board.category_count):
            clue = board.get_clue(col, row)
            colour = _STATE_COLOUR[clue.reveal_state]
            if (col, row) == cursor:
                colour += _INV
            text = clue.display_text or "?"
            cells.append([f"{colour}{seg}{_R}" for seg in _fit(text, width, _CELL_LINES)])
        for i in range(_CELL_LINES):
            lines.append("|" + "|".join(c[i] for c in cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_menu(config: GameConfig, status: str = "") -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}           J E O P A R D Y !          {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()
    print(
        f"    {_DIM}{config.category_count} categories × "
        f"{config.clue_count} clues{_R}"
    )
    print()
    print(f"    {_C}1{_R}  Start")
    print(f"    {_DIM}Q{_R}  Quit")
    print()
    if status:
        print(f"  {status}")


def _show_game(game: GamePlay, cursor: tuple[int, int], status: str = "") -> None:
    _clear()
    cats, clues = game.size
    print(f"  {_C}=== Jeopardy! ({cats}×{clues}) ==={_R}")
    print()
    print(_render_board(game.board, cursor))
    print()
    print(f"  Answered: {_Y}{game.revealed_count}/{cats * clues}{_R}")
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: select  |  "
        f"{_C}Space{_R}: reveal  |  "
        f"{_C}R{_R}: restart  |  "
        f"{_C}Q{_R}: back"
    )
    if status:
        print(f"  {status}")


def _show_loading() -> None:
    _clear()
    print()
    print(f"  {_C}Fetching categories…{_R}")
    sys.stdout.flush()


# -- game loop ----------------------------------------------------------------


def _load_game(
    sessions: SessionManager, builder: BoardBuilder, config: GameConfig
) -> GamePlay | None:
    _show_loading()
    return asyncio.run(
        sessions.start(builder, config.category_count, config.clue_count)
    )


def _play_game(config: GameConfig, sessions: SessionManager) -> str:
    """Run one game until the player backs out.  Returns a menu status."""
    builder = config.make_builder()
    try:
        game = _load_game(sessions, builder, config)
    except DataSourceError as exc:
        return f"{_RED}Could not build a board:{_R} {exc}"
    if game is None:
        return ""

    moves = {
        "up": (0, -1),
        "down": (0, 1),
        "left": (-1, 0),
        "right": (1, 0),
    }
    cursor = (0, 0)
    status = ""

    while True:
        _show_game(game, cursor, status)
        status = ""
        key = get_key()

        if key in moves:
            dc, dr = moves[key]
            cats, clues = game.size
            cursor = (
                min(max(cursor[0] + dc, 0), cats - 1),
                min(max(cursor[1] + dr, 0), clues - 1),
            )
        elif key == "reveal":
            if not game.dispatch(AdvanceClue(*cursor)).changed:
                status = f"{_DIM}Answer already showing.{_R}"
        elif key == "restart":
            try:
                new_game = _load_game(sessions, builder, config)
            except DataSourceError as exc:
                return f"{_RED}Could not build a board:{_R} {exc}"
            if new_game is not None:
                game, cursor = new_game, (0, 0)
                status = f"{_Y}New board!{_R}"
        elif key == "quit":
            return ""


# -- menu loop ----------------------------------------------------------------


def _menu_loop(config: GameConfig) -> None:
    sessions = SessionManager()
    status = ""

    while True:
        _show_menu(config, status)
        status = ""
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        if key in ("1", "reveal"):
            status = _play_game(config, sessions)


# -- public entry point -------------------------------------------------------


def run(config: GameConfig) -> None:
    """Launch the vanilla CLI with its start menu."""
    _menu_loop(config)
