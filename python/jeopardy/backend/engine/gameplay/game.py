"""Core gameplay logic — applies reveal commands to a session's board."""

from __future__ import annotations

from jeopardy.backend.engine.reveal import RevealResult, advance
from jeopardy.backend.models.board import Board, RevealState
from jeopardy.backend.models.commands import AdvanceClue


class GamePlay:
    """Owns the board of a single game session.

    Views never mutate clues directly; they dispatch :class:`AdvanceClue`
    commands and re-render from the returned :class:`RevealResult`.
    """

    def __init__(self, board: Board, token: int = 0) -> None:
        self.board = board
        self.token = token

    # -- commands -------------------------------------------------------------

    def dispatch(self, command: AdvanceClue) -> RevealResult:
        """Apply *command*.  Raises IndexError for a cell off the board."""
        clue = self.board.get_clue(command.category_index, command.clue_index)
        return advance(clue)

    def advance(self, category_index: int, clue_index: int) -> RevealResult:
        return self.dispatch(AdvanceClue(category_index, clue_index))

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> tuple[int, int]:
        """(category_count, clue_count)."""
        return self.board.category_count, self.board.clue_count

    @property
    def revealed_count(self) -> int:
        """Number of clues whose answer is showing."""
        return sum(1 for c in self.board.clues() if c.reveal_state is RevealState.ANSWER)

    @property
    def is_exhausted(self) -> bool:
        return self.revealed_count == self.board.category_count * self.board.clue_count
