"""Per-clue reveal progression: hidden -> question -> answer."""

from __future__ import annotations

from dataclasses import dataclass

from jeopardy.backend.models.board import Clue, RevealState

# Answer maps to itself: further clicks are ignored.
TRANSITIONS: dict[RevealState, RevealState] = {
    RevealState.HIDDEN: RevealState.QUESTION,
    RevealState.QUESTION: RevealState.ANSWER,
    RevealState.ANSWER: RevealState.ANSWER,
}


@dataclass(frozen=True)
class RevealResult:
    """What a view needs to re-render a cell after a click."""

    text: str
    state: RevealState
    changed: bool


def next_state(state: RevealState) -> RevealState:
    return TRANSITIONS[state]


def advance(clue: Clue) -> RevealResult:
    """Move *clue* one step along its reveal cycle.

    Total over every state and never raises.  Once the answer is showing
    the clue is left untouched and ``changed`` is False.
    """
    new = next_state(clue.reveal_state)
    changed = new is not clue.reveal_state
    clue.reveal_state = new
    return RevealResult(text=clue.display_text, state=new, changed=changed)
