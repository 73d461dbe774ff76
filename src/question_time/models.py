"""Value types shared across the quiz engine, loader and classifiers.

All types are frozen dataclasses: banks and datasets are reference data and
engine snapshots are never mutated in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Tuple, TypeVar

E = TypeVar("E")
L = TypeVar("L")


@dataclass(frozen=True)
class Question:
    question_text: str
    answer_text: str
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class QuestionBank:
    """Named, ordered collection of questions.

    Attributes:
        name: Bank title as shown in menus
        questions: Questions in traversal order
    """
    name: str
    questions: Tuple[Question, ...]

    def __len__(self) -> int:
        return len(self.questions)


@dataclass(frozen=True)
class LabeledExample(Generic[E, L]):
    example: E
    label: L


@dataclass(frozen=True)
class ResultWithVotes(Generic[L]):
    """Classification result: winning label and how many neighbours voted for it."""
    label: L
    votes: int


@dataclass(frozen=True)
class StudyDeckResult:
    """Outcome of a study session.

    Attributes:
        num_questions: Number of questions in the studied bank
        num_attempts: Number of answers judged before every question was retired
    """
    num_questions: int
    num_attempts: int
