"""Interactive study loop driving a QuestionBankEngine to completion."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .engine import Phase, QuestionBankEngine
from .models import QuestionBank, StudyDeckResult
from .sentiment import Judge, is_positive

logger = logging.getLogger(__name__)

REVEAL_PROMPT = "Press Enter to reveal the answer..."
JUDGE_PROMPT = "Did you get it right?"


def render(engine: QuestionBankEngine) -> str:
    """Text to display for the engine's current phase ('' once completed)."""
    if engine.get_state() is Phase.QUESTIONING:
        return f"Q: {engine.get_text()}"
    if engine.get_state() is Phase.ANSWERING:
        return f"A: {engine.get_text()}"
    return ""


def step(engine: QuestionBankEngine, response: str, judge: Judge = is_positive) -> QuestionBankEngine:
    """Apply one line of user input to the engine."""
    if engine.get_state() is Phase.QUESTIONING:
        return engine.show()
    if engine.get_state() is Phase.ANSWERING:
        correct = judge(response)
        logger.debug("Response %r judged %s", response, "correct" if correct else "incorrect")
        return engine.next(correct)
    return engine


def study_bank(
    bank: QuestionBank,
    judge: Judge = is_positive,
    input_fn: Optional[Callable[[], str]] = None,
    output_fn: Optional[Callable[[str], None]] = None,
) -> StudyDeckResult:
    """Study every question of ``bank`` until each has been answered correctly.

    Args:
        bank: Non-empty question bank
        judge: Decides from the typed response whether the learner was right
        input_fn: Reads one line of user input
        output_fn: Displays one line of output

    Returns:
        Bank size and the number of judged attempts it took
    """
    input_fn = input_fn or input
    output_fn = output_fn or print
    engine = QuestionBankEngine.from_bank(bank)
    logger.info("Studying '%s' (%d questions)", bank.name, engine.get_size())
    while engine.get_state() is not Phase.COMPLETED:
        output_fn(render(engine))
        output_fn(REVEAL_PROMPT if engine.get_state() is Phase.QUESTIONING else JUDGE_PROMPT)
        engine = step(engine, input_fn(), judge)
    return StudyDeckResult(num_questions=engine.get_size(), num_attempts=engine.attempt_count)
