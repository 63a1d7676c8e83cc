"""Builds trivia boards from a trivia data source."""

from __future__ import annotations

import asyncio
import logging
import random

from jeopardy.backend.engine.datasource import RawClue, TriviaSource
from jeopardy.backend.engine.sampling import sample
from jeopardy.backend.errors import DataSourceError
from jeopardy.backend.models.board import Board, Category, Clue

logger = logging.getLogger(__name__)

DEFAULT_POOL_SIZE = 100


class BoardBuilder:
    """Samples categories and clues into a fresh :class:`Board`.

    The source is asked for an oversized pool of ``pool_size`` candidate
    categories, which is sampled down to the board width.  *rng* drives every
    random draw; pass a seeded ``random.Random`` for reproducible boards.
    """

    def __init__(
        self,
        source: TriviaSource,
        rng: random.Random | None = None,
        pool_size: int = DEFAULT_POOL_SIZE,
    ) -> None:
        self.source = source
        self.rng = rng if rng is not None else random.Random()
        self.pool_size = pool_size

    # -- categories -----------------------------------------------------------

    def select_category_ids(self, count: int, min_clues: int = 0) -> list[int]:
        """Return *count* distinct category ids drawn from the candidate pool.

        Candidates advertising fewer than *min_clues* clues are left out of
        the draw.
        """
        pool = self.source.list_categories(self.pool_size)
        ids = list(dict.fromkeys(c.id for c in pool if c.clue_count >= min_clues))
        if len(ids) < count:
            raise DataSourceError(
                f"Need {count} categories but the source offered only "
                f"{len(ids)} usable candidates."
            )
        chosen = sample(ids, count, self.rng)
        logger.info("Selected categories %s from a pool of %d", chosen, len(ids))
        return chosen

    def build_category(
        self,
        category_id: int,
        clue_count: int,
        rng: random.Random | None = None,
    ) -> Category:
        """Fetch one category and sample *clue_count* hidden clues from it."""
        detail = self.source.get_category(category_id)
        # First entry wins when the payload repeats a clue id.
        by_id: dict[int, RawClue] = {}
        for raw in detail.clues:
            if raw.question and raw.answer:
                by_id.setdefault(raw.id, raw)
        usable = list(by_id.values())
        if len(usable) < clue_count:
            raise DataSourceError(
                f"Category {category_id} ({detail.title!r}) has "
                f"{len(usable)} usable clues, {clue_count} needed."
            )
        clues = tuple(
            Clue(id=raw.id, question=raw.question, answer=raw.answer)
            for raw in sample(usable, clue_count, rng or self.rng)
        )
        logger.debug("Built category %d %r", category_id, detail.title)
        return Category(id=detail.id, title=detail.title, clues=clues)

    # -- board ----------------------------------------------------------------

    async def build_board(self, category_count: int, clue_count: int) -> Board:
        """Return a fully populated board, or raise without a partial one.

        Category fetches run concurrently in worker threads; the first
        :class:`DataSourceError` aborts the build.
        """
        if category_count < 1 or clue_count < 1:
            raise ValueError(
                f"Board must be at least 1x1, got {category_count}x{clue_count}."
            )

        ids = await asyncio.to_thread(
            self.select_category_ids, category_count, clue_count
        )
        # One child RNG per category, seeded in selection order, keeps a
        # seeded build reproducible whatever order the threads finish in.
        rngs = [random.Random(self.rng.getrandbits(64)) for _ in ids]
        tasks = [
            asyncio.to_thread(self.build_category, cid, clue_count, rng)
            for cid, rng in zip(ids, rngs)
        ]
        try:
            categories = await asyncio.gather(*tasks)
        except DataSourceError:
            logger.warning("Board build failed; discarding fetched categories")
            raise
        return Board(categories=tuple(categories))
