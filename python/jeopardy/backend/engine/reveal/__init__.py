from jeopardy.backend.engine.reveal.machine import (
    TRANSITIONS,
    RevealResult,
    advance,
    next_state,
)

__all__ = ["TRANSITIONS", "RevealResult", "advance", "next_state"]
