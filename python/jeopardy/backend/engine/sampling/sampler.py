"""Uniform sampling without replacement."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def sample(
    population: Sequence[T], k: int, rng: random.Random | None = None
) -> list[T]:
    """Return *k* distinct elements of *population* in sampling order.

    Runs the first *k* steps of a Fisher-Yates shuffle over a copy, so every
    k-permutation is equally likely.  Pass a seeded ``random.Random`` as
    *rng* for a reproducible draw.
    """
    n = len(population)
    if k < 0 or k > n:
        raise ValueError(f"Cannot sample {k} items from a population of {n}.")

    randrange = rng.randrange if rng is not None else random.randrange
    pool = list(population)
    for i in range(k):
        j = randrange(i, n)
        pool[i], pool[j] = pool[j], pool[i]
    return pool[:k]
