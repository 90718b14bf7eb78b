"""Enumeration of k-element subsets."""

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


def iter_combinations(items: Sequence[T], k: int) -> Iterator[tuple[T, ...]]:
    """Yield every k-element subset of ``items``.

    Each subset keeps the relative order of ``items``. Subsets come out with
    ``items[0]`` first paired with every (k-1)-subset of the remaining
    suffix, then ``items[1]`` with its suffix, and so on.
    """
    if k <= 0 or k > len(items):
        return
    if k == 1:
        for item in items:
            yield (item,)
        return
    for i, item in enumerate(items):
        for rest in iter_combinations(items[i + 1 :], k - 1):
            yield (item, *rest)


def combinations(items: Sequence[T], k: int) -> list[tuple[T, ...]]:
    """All k-element subsets of ``items`` in generation order."""
    return list(iter_combinations(items, k))
