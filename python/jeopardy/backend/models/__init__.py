from jeopardy.backend.models.board import Board, Category, Clue, RevealState
from jeopardy.backend.models.commands import AdvanceClue

__all__ = ["AdvanceClue", "Board", "Category", "Clue", "RevealState"]
