"""Typed commands a view dispatches into the game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AdvanceClue:
    """Advance the clue at (``category_index``, ``clue_index``) one step."""

    category_index: int
    clue_index: int
