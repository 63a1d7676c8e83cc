"""Board, Category and Clue models."""

from __future__ import annotations

import pytest

from jeopardy.backend.models.board import Board, Category, Clue, RevealState


def _cat(cid: int, n: int) -> Category:
    return Category(
        id=cid,
        title=f"c{cid}",
        clues=tuple(Clue(id=k, question=f"q{k}", answer=f"a{k}") for k in range(n)),
    )


def test_board_dimensions_and_titles() -> None:
    board = Board(categories=(_cat(1, 5), _cat(2, 5), _cat(3, 5)))
    assert board.category_count == 3
    assert board.clue_count == 5
    assert board.titles == ["c1", "c2", "c3"]
    assert len(list(board.clues())) == 15


def test_board_rejects_ragged_categories() -> None:
    with pytest.raises(ValueError):
        Board(categories=(_cat(1, 5), _cat(2, 4)))


def test_empty_board() -> None:
    board = Board(categories=())
    assert board.category_count == 0
    assert board.clue_count == 0


def test_get_clue_is_column_first() -> None:
    board = Board(categories=(_cat(1, 2), _cat(2, 2)))
    assert board.get_clue(1, 0) is board.categories[1].clues[0]


def test_clues_compare_by_identity() -> None:
    a = Clue(id=1, question="q", answer="a")
    b = Clue(id=1, question="q", answer="a")
    assert a != b


@pytest.mark.parametrize(
    "state, text",
    [
        (RevealState.HIDDEN, ""),
        (RevealState.QUESTION, "q"),
        (RevealState.ANSWER, "a"),
    ],
)
def test_display_text_follows_state(state: RevealState, text: str) -> None:
    clue = Clue(id=1, question="q", answer="a", reveal_state=state)
    assert clue.display_text == text


def test_category_title_is_immutable() -> None:
    cat = _cat(1, 1)
    with pytest.raises(AttributeError):
        cat.title = "renamed"  # type: ignore[misc]
