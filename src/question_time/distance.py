"""Distance functions for nearest-neighbour classification.

A distance function maps two values to a non-negative integer; zero means
identical.
"""

from __future__ import annotations

from typing import Callable, List, TypeVar

T = TypeVar("T")

DistanceFunction = Callable[[T, T], int]


def levenshtein(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions and
    substitutions turning ``a`` into ``b``.

    Case-sensitive; callers normalize first.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    # Single rolling row over the shorter string.
    previous: List[int] = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            insert_cost = current[j - 1] + 1
            delete_cost = previous[j] + 1
            substitute_cost = previous[j - 1] + (ca != cb)
            current.append(min(insert_cost, delete_cost, substitute_cost))
        previous = current
    return previous[-1]


def absolute_difference(a: int, b: int) -> int:
    """Distance between two points on a line."""
    return abs(a - b)
