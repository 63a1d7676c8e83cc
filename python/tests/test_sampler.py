"""Uniform sampling without replacement."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from jeopardy.backend.engine.sampling import sample


@pytest.mark.parametrize("k", [0, 1, 5, 20])
def test_returns_k_distinct_members(k: int) -> None:
    population = list(range(20))
    drawn = sample(population, k, random.Random(1))
    assert len(drawn) == k
    assert len(set(drawn)) == k
    assert set(drawn) <= set(population)


def test_does_not_mutate_population() -> None:
    population = [1, 2, 3, 4, 5]
    sample(population, 3, random.Random(0))
    assert population == [1, 2, 3, 4, 5]


def test_seeded_draw_is_reproducible() -> None:
    population = list(range(100))
    assert sample(population, 6, random.Random(42)) == sample(
        population, 6, random.Random(42)
    )


@pytest.mark.parametrize("k", [-1, 4])
def test_rejects_impossible_sizes(k: int) -> None:
    with pytest.raises(ValueError):
        sample([1, 2, 3], k)


def test_every_element_is_reachable_in_first_slot() -> None:
    rng = random.Random(7)
    firsts = Counter(sample("abcd", 1, rng)[0] for _ in range(2000))
    assert set(firsts) == set("abcd")
    # Uniform: each letter near 500 of 2000 draws.
    assert all(350 < n < 650 for n in firsts.values())
