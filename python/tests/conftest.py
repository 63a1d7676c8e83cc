"""Shared fixtures: an in-memory trivia source."""

from __future__ import annotations

import pytest

from jeopardy.backend.engine.datasource import CategoryDetail, CategorySummary, RawClue
from jeopardy.backend.errors import DataSourceError


class FakeSource:
    """Serves ``n_categories`` categories with ``clues_each`` clues apiece.

    Category ids listed in ``failing`` raise :class:`DataSourceError` from
    ``get_category``; ``short`` maps ids to a reduced clue count.
    """

    def __init__(
        self,
        n_categories: int = 100,
        clues_each: int = 10,
        failing: set[int] | None = None,
        short: dict[int, int] | None = None,
    ) -> None:
        self.failing = failing or set()
        self.short = short or {}
        self.list_calls: list[int] = []
        self.get_calls: list[int] = []
        self._details: dict[int, CategoryDetail] = {}
        for cid in range(1, n_categories + 1):
            count = self.short.get(cid, clues_each)
            self._details[cid] = CategoryDetail(
                id=cid,
                title=f"Category {cid}",
                clues=[
                    RawClue(
                        id=cid * 1000 + k,
                        question=f"Q{cid}-{k}",
                        answer=f"A{cid}-{k}",
                    )
                    for k in range(count)
                ],
            )

    def list_categories(self, pool_size: int) -> list[CategorySummary]:
        self.list_calls.append(pool_size)
        return [
            CategorySummary(id=d.id, title=d.title, clue_count=len(d.clues))
            for d in list(self._details.values())[:pool_size]
        ]

    def get_category(self, category_id: int) -> CategoryDetail:
        self.get_calls.append(category_id)
        if category_id in self.failing:
            raise DataSourceError(f"Category {category_id} unavailable")
        return self._details[category_id]


@pytest.fixture
def source() -> FakeSource:
    return FakeSource()


@pytest.fixture
def make_source() -> type[FakeSource]:
    return FakeSource
