"""Tracks which game session is current across restarts."""

from __future__ import annotations

import logging

from jeopardy.backend.engine.boardbuilder import BoardBuilder
from jeopardy.backend.engine.gameplay import GamePlay
from jeopardy.backend.errors import DataSourceError
from jeopardy.backend.models.board import Board

logger = logging.getLogger(__name__)


class SessionManager:
    """Hands out generation tokens and installs only current boards.

    Every restart calls :meth:`begin`, which makes all earlier tokens stale.
    A build that completes with a stale token is dropped instead of being
    merged into the newer session.
    """

    def __init__(self) -> None:
        self._generation: int = 0
        self._current: GamePlay | None = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def current(self) -> GamePlay | None:
        return self._current

    # -- lifecycle ------------------------------------------------------------

    def begin(self) -> int:
        self._generation += 1
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation

    def accept(self, token: int, board: Board) -> GamePlay | None:
        """Install *board* if *token* is current; return the new game or None."""
        if not self.is_current(token):
            logger.info(
                "Discarding stale board (token %d, current %d)",
                token,
                self._generation,
            )
            return None
        self._current = GamePlay(board, token=token)
        return self._current

    async def start(
        self, builder: BoardBuilder, category_count: int, clue_count: int
    ) -> GamePlay | None:
        """Begin a session, build its board and install it.

        Build errors propagate and leave the previous game installed.  A
        session replaced while its build was running returns None, whether
        that build succeeded or failed.
        """
        token = self.begin()
        try:
            board = await builder.build_board(category_count, clue_count)
        except DataSourceError as exc:
            if self.is_current(token):
                raise
            logger.info(
                "Ignoring failure of stale build (token %d, current %d): %s",
                token,
                self._generation,
                exc,
            )
            return None
        return self.accept(token, board)
