"""k-nearest-neighbour classification over a labeled dataset.

Tie handling is deterministic:
- Neighbours at equal distance keep dataset order (stable sort).
- Labels with equal vote counts resolve to the one seen first among the
  selected neighbours.
"""

from __future__ import annotations

from typing import Dict, Sequence, TypeVar

from .distance import DistanceFunction
from .models import LabeledExample, ResultWithVotes

E = TypeVar("E")
L = TypeVar("L")


def get_label(
    query: E,
    dataset: Sequence[LabeledExample[E, L]],
    distance_fn: DistanceFunction[E],
    k: int,
) -> ResultWithVotes[L]:
    """Predict a label for ``query`` by majority vote of its k closest examples.

    Args:
        query: Value to classify
        dataset: Labeled examples; order matters for tie-breaking
        distance_fn: Non-negative integer distance between two values
        k: Number of neighbours to consult, 1 <= k <= len(dataset)

    Returns:
        The winning label and the number of neighbours that voted for it

    Raises:
        ValueError: If the dataset is empty or k is out of range
    """
    if not dataset:
        raise ValueError("Cannot classify against an empty dataset")
    if not 1 <= k <= len(dataset):
        raise ValueError(f"k must be between 1 and {len(dataset)}, got {k}")

    nearest = sorted(dataset, key=lambda ex: distance_fn(query, ex.example))[:k]

    # dicts keep insertion order, so the first label to reach the top count wins
    votes: Dict[L, int] = {}
    for ex in nearest:
        votes[ex.label] = votes.get(ex.label, 0) + 1

    best_label = nearest[0].label
    best_votes = 0
    for label, count in votes.items():
        if count > best_votes:
            best_label, best_votes = label, count
    return ResultWithVotes(label=best_label, votes=best_votes)
