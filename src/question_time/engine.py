"""Question bank state machine.

An engine is an immutable snapshot: every transition returns a new engine and
leaves the receiver untouched, so a caller can keep rendering a previous state
after asking for the next one.

Phases:
- QUESTIONING: question visible, answer hidden
- ANSWERING: answer revealed, waiting for a correctness judgment
- COMPLETED: every question has been answered correctly (terminal)

The working sequence ``remaining`` always has the current question at its
front. A correct answer retires it; an incorrect one rotates it to the back.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from .models import Question, QuestionBank


class Phase(Enum):
    QUESTIONING = "questioning"
    ANSWERING = "answering"
    COMPLETED = "completed"


@dataclass(frozen=True)
class QuestionBankEngine:
    """Immutable study state for one question bank.

    Attributes:
        bank: The bank being studied (never changes)
        remaining: Questions not yet answered correctly, current one first
        phase: Current phase
        correct_count: Number of questions retired so far
        attempt_count: Number of judged answers so far
    """
    bank: QuestionBank
    remaining: Tuple[Question, ...]
    phase: Phase = Phase.QUESTIONING
    correct_count: int = 0
    attempt_count: int = 0

    def __post_init__(self) -> None:
        if not self.bank.questions:
            raise ValueError(f"Question bank '{self.bank.name}' has no questions")
        if (self.phase is Phase.COMPLETED) != (not self.remaining):
            raise ValueError(
                f"Phase {self.phase.name} inconsistent with {len(self.remaining)} remaining questions"
            )

    @classmethod
    def from_bank(cls, bank: QuestionBank) -> "QuestionBankEngine":
        """Start studying ``bank`` from its first question.

        Raises:
            ValueError: If the bank is empty
        """
        return cls(bank=bank, remaining=tuple(bank.questions))

    def get_state(self) -> Phase:
        return self.phase

    def get_text(self) -> Optional[str]:
        """Currently visible text, or None once completed."""
        if self.phase is Phase.QUESTIONING:
            return self.remaining[0].question_text
        if self.phase is Phase.ANSWERING:
            return self.remaining[0].answer_text
        return None

    def get_size(self) -> int:
        """Number of question/answer pairs in the bank (independent of progress)."""
        return len(self.bank.questions)

    def remaining_count(self) -> int:
        return len(self.remaining)

    def current_question(self) -> Optional[Question]:
        return self.remaining[0] if self.remaining else None

    def show(self) -> "QuestionBankEngine":
        """Reveal the answer. No-op unless QUESTIONING."""
        if self.phase is not Phase.QUESTIONING:
            return self
        return replace(self, phase=Phase.ANSWERING)

    def next(self, correct: bool) -> "QuestionBankEngine":
        """Judge the current answer and move on. No-op unless ANSWERING.

        A correct answer retires the current question; an incorrect one sends
        it to the back of the working sequence.
        """
        if self.phase is not Phase.ANSWERING:
            return self
        current, rest = self.remaining[0], self.remaining[1:]
        if correct:
            remaining = rest
            correct_count = self.correct_count + 1
        else:
            remaining = rest + (current,)
            correct_count = self.correct_count
        return replace(
            self,
            remaining=remaining,
            phase=Phase.QUESTIONING if remaining else Phase.COMPLETED,
            correct_count=correct_count,
            attempt_count=self.attempt_count + 1,
        )
