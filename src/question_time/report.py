"""Reporting utilities for study sessions and classifier output."""

from __future__ import annotations

from typing import Iterable, Tuple

from .models import QuestionBank, ResultWithVotes, StudyDeckResult
from .sentiment import K


def format_bank_line(bank: QuestionBank) -> str:
    count = len(bank)
    noun = "question" if count == 1 else "questions"
    return f"{bank.name} ({count} {noun})"


def format_classification(text: str, result: ResultWithVotes[bool]) -> str:
    verdict = "yes" if result.label else "no"
    return f"{text!r}: {verdict} ({result.votes}/{K})"


def print_summary(bank: QuestionBank, result: StudyDeckResult) -> None:
    """Print end-of-session statistics.

    Args:
        bank: The bank that was studied
        result: Outcome of the study loop
    """
    accuracy = result.num_questions / result.num_attempts * 100 if result.num_attempts else 0.0
    print(f"Study Summary: {bank.name}")
    print(f"  Questions:          {result.num_questions}")
    print(f"  Attempts:           {result.num_attempts}")
    print(f"  Accuracy:           {accuracy:.1f}%")


def print_banks(sections: Iterable[Tuple[str, Iterable[QuestionBank]]]) -> None:
    for heading, banks in sections:
        print(f"{heading}:")
        for bank in banks:
            print(f"  {format_bank_line(bank)}")
