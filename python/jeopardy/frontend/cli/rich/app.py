"""Rich terminal frontend — styled board table, panels and a loading spinner.

Uses the ``rich`` library for output while sharing the key reader and
backend with the vanilla CLI.  Arrow keys move a cursor over the board;
Space / Enter reveals the question and then the answer of the selected clue.
"""

from __future__ import annotations

import asyncio

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from jeopardy.backend.engine.boardbuilder import BoardBuilder
from jeopardy.backend.engine.gameplay import GamePlay
from jeopardy.backend.engine.gamestate import SessionManager
from jeopardy.backend.errors import DataSourceError
from jeopardy.backend.models.board import Board, RevealState
from jeopardy.backend.models.commands import AdvanceClue
from jeopardy.config import GameConfig
from jeopardy.frontend.cli.input_handler import get_key

console = Console()

_CELL_STYLE = {
    RevealState.HIDDEN: "bold bright_blue",
    RevealState.QUESTION: "white",
    RevealState.ANSWER: "bold green",
}


# -- board rendering ----------------------------------------------------------


def _cell(board: Board, col: int, row: int, cursor: tuple[int, int]) -> Text:
    clue = board.get_clue(col, row)
    text = clue.display_text or "?"
    style = _CELL_STYLE[clue.reveal_state]
    if (col, row) == cursor:
        style += " reverse"
    return Text(text, style=style, justify="center")


def _render_board(board: Board, cursor: tuple[int, int]) -> Table:
    """Return a Rich Table with one column per category."""
    width = max(10, (console.width - 4) // max(1, board.category_count) - 3)
    table = Table(
        show_header=True,
        header_style="bold yellow",
        show_lines=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for title in board.titles:
        table.add_column(title.upper(), width=width, justify="center", overflow="fold")

    for row in range(board.clue_count):
        table.add_row(
            *(_cell(board, col, row, cursor) for col in range(board.category_count))
        )
    return table


# -- screens ------------------------------------------------------------------


def _draw_menu(config: GameConfig, status: str = "") -> None:
    console.clear()

    size = Text(
        f"{config.category_count} categories × {config.clue_count} clues",
        style="dim",
    )

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Start    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    parts = [Text(""), Align.center(size), Text(""), Align.center(opts), Text("")]
    if status:
        parts.append(Align.center(Text.from_markup(status)))

    panel = Panel(
        Group(*parts),
        title="[bold]J E O P A R D Y ![/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


def _draw_game(game: GamePlay, cursor: tuple[int, int], status: str = "") -> None:
    console.clear()

    cats, clues = game.size
    board_table = _render_board(game.board, cursor)

    stats = Text()
    stats.append("  Answered: ", style="dim")
    stats.append(f"{game.revealed_count}/{cats * clues}", style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  select   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  reveal   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(board_table),
        title="[bold cyan]Jeopardy![/bold cyan]",
        border_style="bright_blue",
        padding=(1, 1),
    )

    console.print(panel)
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _load_game(
    sessions: SessionManager, builder: BoardBuilder, config: GameConfig
) -> GamePlay | None:
    """Build a new board behind a spinner.  Raises DataSourceError."""
    with console.status("[bold cyan]Fetching categories…[/bold cyan]", spinner="dots"):
        return asyncio.run(
            sessions.start(builder, config.category_count, config.clue_count)
        )


def _play_game(config: GameConfig, sessions: SessionManager) -> str:
    """Run one game until the player backs out.  Returns a menu status."""
    builder = config.make_builder()
    try:
        game = _load_game(sessions, builder, config)
    except DataSourceError as exc:
        return f"[red]Could not build a board:[/red] {exc}"
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
        _draw_game(game, cursor, status)
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
            result = game.dispatch(AdvanceClue(*cursor))
            if not result.changed:
                status = "[dim]Answer already showing.[/dim]"
        elif key == "restart":
            try:
                new_game = _load_game(sessions, builder, config)
            except DataSourceError as exc:
                return f"[red]Could not build a board:[/red] {exc}"
            if new_game is not None:
                game, cursor = new_game, (0, 0)
                status = "[yellow]New board![/yellow]"
        elif key == "quit":
            return ""


# -- menu loop ----------------------------------------------------------------


def _menu_loop(config: GameConfig) -> None:
    sessions = SessionManager()
    status = ""

    while True:
        _draw_menu(config, status)
        status = ""
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        if key in ("1", "reveal"):
            status = _play_game(config, sessions)


# -- public entry point -------------------------------------------------------


def run(config: GameConfig) -> None:
    """Launch the Rich CLI with its start menu."""
    _menu_loop(config)
