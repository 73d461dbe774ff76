"""CLI entrypoint for Question Time.

Usage:
  questiontime study --questions resources/questions.txt
  questiontime study --bank "World capitals" --judge naive
  questiontime banks --tags
  questiontime classify "yerp" "nadda"
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from .ingest import banks_by_tag, read_question_banks
from .menu import NamedMenuOption, choose_menu
from .models import QuestionBank
from .report import format_classification, print_banks, print_summary
from .sentiment import JUDGES, classify, get_judge
from .study import study_bank

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "questions_path": "resources/questions.txt",
    "bank_marker": "#",
    "qa_separator": "|",
    "tag_separator": ",",
    "judge": "sentiment",
}


def load_config(path: str | Path) -> dict:
    """Load a JSON config merged over DEFAULT_CONFIG (defaults alone if missing).

    Raises:
        ValueError: If the file exists but isn't a valid JSON object
    """
    path = Path(path)
    cfg = dict(DEFAULT_CONFIG)
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return cfg
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}")
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    cfg.update(data)
    return cfg


def _load_banks(args: argparse.Namespace, cfg: dict) -> List[QuestionBank]:
    questions_path = args.questions or cfg["questions_path"]
    banks = read_question_banks(
        questions_path,
        bank_marker=cfg["bank_marker"],
        qa_separator=cfg["qa_separator"],
        tag_separator=cfg["tag_separator"],
    )
    logger.info("Loaded %d banks from %s", len(banks), questions_path)
    return banks


def _find_bank(banks: List[QuestionBank], name: str) -> Optional[QuestionBank]:
    wanted = name.strip().lower()
    for bank in banks:
        if bank.name.lower() == wanted:
            return bank
    return None


def cmd_study(args: argparse.Namespace) -> int:
    try:
        cfg = load_config(args.config)
        banks = _load_banks(args, cfg)
        judge = get_judge(args.judge or cfg["judge"])
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if args.tag:
        bank = _find_bank(banks_by_tag(banks), args.tag)
        if bank is None:
            print(f"Error: No questions tagged '{args.tag}'")
            return 1
    elif args.bank:
        bank = _find_bank(banks, args.bank)
        if bank is None:
            print(f"Error: No bank named '{args.bank}'")
            return 1
    else:
        if not banks:
            print("Error: No question banks found")
            return 1
        try:
            chosen = choose_menu([NamedMenuOption(b, b.name) for b in banks])
        except EOFError:
            print()
            return 0
        if chosen is None:
            return 0
        bank = chosen.option

    try:
        result = study_bank(bank, judge=judge)
    except EOFError:
        print()
        print("Error: Input ended before the bank was completed")
        return 1
    print_summary(bank, result)
    return 0


def cmd_banks(args: argparse.Namespace) -> int:
    try:
        cfg = load_config(args.config)
        banks = _load_banks(args, cfg)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    sections = [("Banks", banks)]
    if args.tags:
        sections.append(("Tags", banks_by_tag(banks)))
    print_banks(sections)
    return 0


def cmd_classify(args: argparse.Namespace) -> int:
    for text in args.text:
        print(format_classification(text, classify(text)))
    return 0


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--questions",
        help="Path to question file (default: questions_path from config)",
    )
    parser.add_argument(
        "--config",
        default="resources/config.json",
        help="Path to config.json (optional; defaults will be used if missing)",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="questiontime", description="Question Time flashcard CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    study = sub.add_parser("study", help="Study a question bank until every answer is right")
    _add_source_args(study)
    target = study.add_mutually_exclusive_group()
    target.add_argument("--bank", help="Bank name to study (skips the menu)")
    target.add_argument("--tag", help="Study every question carrying this tag")
    study.add_argument(
        "--judge",
        choices=sorted(JUDGES),
        help="How typed responses are judged (default: judge from config)",
    )
    study.set_defaults(func=cmd_study)

    banks = sub.add_parser("banks", help="List question banks")
    _add_source_args(banks)
    banks.add_argument("--tags", action="store_true", help="Also list banks built from tags")
    banks.set_defaults(func=cmd_banks)

    cls = sub.add_parser("classify", help="Classify free-form responses as yes/no")
    cls.add_argument("text", nargs="+", help="Responses to classify")
    cls.set_defaults(func=cmd_classify)

    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
