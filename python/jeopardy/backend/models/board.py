"""Board model for the trivia game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterator


class RevealState(StrEnum):
    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


@dataclass(eq=False)
class Clue:
    """A single question/answer pair.

    ``reveal_state`` is the only field that changes after construction, and
    only through :func:`jeopardy.backend.engine.reveal.advance`.  Equality is
    identity: two sessions never share a clue even if the text matches.
    """

    id: int
    question: str
    answer: str
    reveal_state: RevealState = RevealState.HIDDEN

    @property
    def display_text(self) -> str:
        """Text a view should show for the current state ("" while hidden)."""
        if self.reveal_state is RevealState.QUESTION:
            return self.question
        if self.reveal_state is RevealState.ANSWER:
            return self.answer
        return ""


@dataclass(frozen=True)
class Category:
    """A named column of clues.  Title and clue order are fixed."""

    id: int
    title: str
    clues: tuple[Clue, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.clues)


@dataclass(frozen=True)
class Board:
    """The categories and clues of one game session.

    Every category holds the same number of clues, so the board is a
    ``category_count`` x ``clue_count`` grid addressed column-first.
    """

    categories: tuple[Category, ...]

    def __post_init__(self) -> None:
        heights = {len(c) for c in self.categories}
        if len(heights) > 1:
            raise ValueError(
                f"All categories must hold the same number of clues, "
                f"got {sorted(heights)}."
            )

    # -- queries --------------------------------------------------------------

    @property
    def category_count(self) -> int:
        return len(self.categories)

    @property
    def clue_count(self) -> int:
        return len(self.categories[0]) if self.categories else 0

    @property
    def titles(self) -> list[str]:
        return [c.title for c in self.categories]

    def get_clue(self, category_index: int, clue_index: int) -> Clue:
        if not 0 <= category_index < self.category_count:
            raise IndexError(f"No category at index {category_index}.")
        if not 0 <= clue_index < self.clue_count:
            raise IndexError(f"No clue at index {clue_index}.")
        return self.categories[category_index].clues[clue_index]

    def clues(self) -> Iterator[Clue]:
        for category in self.categories:
            yield from category.clues
