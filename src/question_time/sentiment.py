"""Yes/no classification of free-form learner responses.

The classifier first looks for a verbatim (case-insensitive) match in the
bundled dataset and reports it with full confidence. Anything else is
classified by 3-NN under edit distance, which always produces an answer,
even a confidently wrong one for out-of-distribution input ("ouch" -> yes).
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from .distance import levenshtein
from .knn import get_label
from .models import LabeledExample, ResultWithVotes
from .normalize import normalize_response

Judge = Callable[[str], bool]

K = 3

DATASET: Tuple[LabeledExample[str, bool], ...] = (
    # Positive examples
    LabeledExample("yes", True),
    LabeledExample("y", True),
    LabeledExample("indeed", True),
    LabeledExample("aye", True),
    LabeledExample("oh yes", True),
    LabeledExample("affirmative", True),
    LabeledExample("roger", True),
    LabeledExample("uh huh", True),
    LabeledExample("true", True),
    # Negative examples
    LabeledExample("no", False),
    LabeledExample("n", False),
    LabeledExample("nope", False),
    LabeledExample("negative", False),
    LabeledExample("nay", False),
    LabeledExample("negatory", False),
    LabeledExample("uh uh", False),
    LabeledExample("absolutely not", False),
    LabeledExample("false", False),
)

_EXACT: Dict[str, bool] = {ex.example: ex.label for ex in DATASET}


def classify(text: str) -> ResultWithVotes[bool]:
    """Classify a response as positive/negative with a vote count out of 3."""
    query = normalize_response(text)
    if query in _EXACT:
        return ResultWithVotes(label=_EXACT[query], votes=K)
    return get_label(query, DATASET, levenshtein, K)


def is_positive(text: str) -> bool:
    return classify(text).label


def naive_classifier(text: str) -> bool:
    """Keystroke convention: anything starting with "y" counts as yes."""
    return (text or "").upper().startswith("Y")


JUDGES: Dict[str, Judge] = {
    "sentiment": is_positive,
    "naive": naive_classifier,
}


def get_judge(name: str) -> Judge:
    """Look up a judge by name.

    Raises:
        ValueError: If the name is not one of JUDGES
    """
    try:
        return JUDGES[name]
    except KeyError:
        raise ValueError(f"Unknown judge '{name}' (expected one of: {', '.join(sorted(JUDGES))})")
