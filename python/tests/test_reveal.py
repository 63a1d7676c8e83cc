"""Reveal state machine: hidden -> question -> answer, then no-ops."""

from __future__ import annotations

import pytest

from jeopardy.backend.engine.reveal import TRANSITIONS, advance, next_state
from jeopardy.backend.models.board import Clue, RevealState


def _clue() -> Clue:
    return Clue(id=1, question="Author of Hamlet", answer="Shakespeare")


def test_new_clue_is_hidden() -> None:
    clue = _clue()
    assert clue.reveal_state is RevealState.HIDDEN
    assert clue.display_text == ""


def test_state_sequence_under_repeated_advance() -> None:
    clue = _clue()
    states = [clue.reveal_state]
    for _ in range(5):
        states.append(advance(clue).state)
    assert states == [
        RevealState.HIDDEN,
        RevealState.QUESTION,
        RevealState.ANSWER,
        RevealState.ANSWER,
        RevealState.ANSWER,
        RevealState.ANSWER,
    ]


def test_first_advance_shows_question() -> None:
    clue = _clue()
    result = advance(clue)
    assert result.text == "Author of Hamlet"
    assert result.state is RevealState.QUESTION
    assert result.changed
    assert clue.reveal_state is RevealState.QUESTION


def test_second_advance_shows_answer() -> None:
    clue = _clue()
    advance(clue)
    result = advance(clue)
    assert result.text == "Shakespeare"
    assert result.state is RevealState.ANSWER
    assert result.changed


def test_advance_on_answer_is_a_noop() -> None:
    clue = _clue()
    advance(clue)
    shown = advance(clue).text
    for _ in range(3):
        result = advance(clue)
        assert result.text == shown
        assert not result.changed
        assert clue.reveal_state is RevealState.ANSWER


@pytest.mark.parametrize("state", list(RevealState))
def test_transition_table_is_total_and_monotonic(state: RevealState) -> None:
    order = list(RevealState)
    nxt = next_state(state)
    assert state in TRANSITIONS
    assert order.index(nxt) >= order.index(state)


def test_advance_touches_only_its_clue() -> None:
    a, b = _clue(), _clue()
    advance(a)
    assert b.reveal_state is RevealState.HIDDEN
