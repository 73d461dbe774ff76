"""Question file ingest.

Format (UTF-8, one record per line):
  # Bank name
  question text | answer text
  question text | answer text | tag one, tag two

Lines that are neither headings nor question lines are ignored. Only
non-empty banks are returned.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List

from .models import Question, QuestionBank
from .normalize import clean_field, normalize_text_nfc

logger = logging.getLogger(__name__)

BANK_MARKER = "#"
QA_SEPARATOR = "|"
TAG_SEPARATOR = ","


def parse_tags(field: str, tag_separator: str = TAG_SEPARATOR) -> List[str]:
    """Split a tag field, dropping empties and duplicates (first occurrence kept)."""
    tags: List[str] = []
    for raw in field.split(tag_separator):
        tag = clean_field(raw)
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def parse_question_line(
    line: str,
    qa_separator: str = QA_SEPARATOR,
    tag_separator: str = TAG_SEPARATOR,
) -> Question:
    """Parse ``question | answer [| tags]`` into a Question.

    Separators beyond the tag field are kept as part of the tag text.
    """
    parts = line.split(qa_separator, 2)
    if len(parts) < 2:
        raise ValueError(f"Missing '{qa_separator}' separator: {line!r}")
    tags = parse_tags(parts[2], tag_separator) if len(parts) > 2 else []
    return Question(
        question_text=clean_field(parts[0]),
        answer_text=clean_field(parts[1]),
        tags=tuple(tags),
    )


def parse_question_banks(
    lines: Iterable[str],
    bank_marker: str = BANK_MARKER,
    qa_separator: str = QA_SEPARATOR,
    tag_separator: str = TAG_SEPARATOR,
) -> List[QuestionBank]:
    """Group question lines under their most recent bank heading.

    A heading seen twice appends to the earlier bank. Banks are returned in
    first-seen order; empty ones are dropped.
    """
    banks: Dict[str, List[Question]] = {}
    current: str | None = None
    for lineno, raw in enumerate(lines, start=1):
        line = normalize_text_nfc(raw).rstrip("\r\n")
        if line.startswith(bank_marker):
            current = clean_field(line[len(bank_marker):])
            banks.setdefault(current, [])
            continue
        if qa_separator not in line:
            continue
        if current is None:
            logger.warning("Line %d: question before any bank heading, skipped", lineno)
            continue
        banks[current].append(parse_question_line(line, qa_separator, tag_separator))

    result: List[QuestionBank] = []
    for name, questions in banks.items():
        if not questions:
            logger.info("Bank '%s' has no questions, dropped", name)
            continue
        result.append(QuestionBank(name=name, questions=tuple(questions)))
    logger.debug("Parsed %d banks", len(result))
    return result


def read_question_banks(
    path: str | Path,
    bank_marker: str = BANK_MARKER,
    qa_separator: str = QA_SEPARATOR,
    tag_separator: str = TAG_SEPARATOR,
) -> List[QuestionBank]:
    """Read and parse a question file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Question file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return parse_question_banks(f, bank_marker, qa_separator, tag_separator)


def banks_by_tag(banks: Iterable[QuestionBank]) -> List[QuestionBank]:
    """Build one bank per tag from the tagged questions of ``banks``.

    Tags appear in first-seen order; within a tag bank, questions keep their
    order across the source banks.
    """
    by_tag: Dict[str, List[Question]] = {}
    for bank in banks:
        for q in bank.questions:
            for tag in q.tags:
                by_tag.setdefault(tag, []).append(q)
    return [QuestionBank(name=tag, questions=tuple(qs)) for tag, qs in by_tag.items()]
