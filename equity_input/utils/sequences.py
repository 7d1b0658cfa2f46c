"""
Generic sequence helpers.

Both helpers are domain-independent: ``dedupe_by`` for predicate-based
uniqueness and ``shuffle`` for randomizing a deck before sampling.
"""

from __future__ import annotations

from typing import Callable, Iterable, MutableSequence, TypeVar

import numpy as np

T = TypeVar("T")


def dedupe_by(items: Iterable[T], equals: Callable[[T, T], bool]) -> list[T]:
    """
    Drop duplicates according to a caller-supplied equality predicate.

    The first occurrence of each element is kept and survivors stay in
    first-seen order. Every candidate is compared with ``equals(candidate, kept)``
    against all survivors so far, so the cost is O(n * k) and elements need
    not be hashable or ordered. The predicate may be non-reflexive or
    non-transitive; it is applied exactly as given.

    Args:
        items: Elements to filter (not modified)
        equals: Returns True when two elements count as the same

    Returns:
        New list with duplicates removed

    Examples:
        >>> dedupe_by(["a", "b", "a", "c"], lambda x, y: x == y)
        ['a', 'b', 'c']
        >>> dedupe_by(["As", "as", "Kd"], lambda x, y: x.lower() == y.lower())
        ['As', 'Kd']
    """
    survivors: list[T] = []
    for candidate in items:
        if not any(equals(candidate, kept) for kept in survivors):
            survivors.append(candidate)
    return survivors


def shuffle(items: MutableSequence[T], rng: np.random.Generator | None = None) -> None:
    """
    Shuffle a sequence in place (Fisher-Yates).

    Walks from the last index down to 1, swapping each position with a
    uniformly drawn index in ``[0, i]``, so every permutation is equally
    likely given a uniform generator. Not suitable for cryptographic use.

    Args:
        items: Sequence to reorder in place
        rng: NumPy generator; a fresh ``default_rng()`` when omitted
    """
    if rng is None:
        rng = np.random.default_rng()
    for i in range(len(items) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        items[i], items[j] = items[j], items[i]
