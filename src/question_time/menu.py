"""Numbered console menu."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")

PROMPT = "Enter 1, 2, ..., or 0 to quit:"
QUIT_MESSAGE = "Bye."


class MenuOption(Protocol):
    def get_title(self) -> str: ...


O = TypeVar("O", bound=MenuOption)


@dataclass(frozen=True)
class NamedMenuOption(Generic[T]):
    """A menu option carrying a single value and a title."""
    option: T
    title: str

    def get_title(self) -> str:
        return self.title


def render_menu(options: Sequence[MenuOption]) -> str:
    lines = [f"{i}. {opt.get_title()}" for i, opt in enumerate(options, start=1)]
    lines.append("")
    lines.append(PROMPT)
    return "\n".join(lines)


def choose_menu(
    options: Sequence[O],
    input_fn: Optional[Callable[[], str]] = None,
    output_fn: Optional[Callable[[str], None]] = None,
) -> Optional[O]:
    """Ask until the user picks an option (returned) or enters 0 (None).

    Anything that isn't 0 or a listed number redisplays the menu.
    """
    input_fn = input_fn or input
    output_fn = output_fn or print
    while True:
        for line in render_menu(options).split("\n"):
            output_fn(line)
        choice = input_fn().strip()
        if choice == "0":
            output_fn(QUIT_MESSAGE)
            return None
        if choice.isdecimal() and 1 <= int(choice) <= len(options):
            selected = options[int(choice) - 1]
            output_fn(f"You chose to study {selected.get_title()}")
            return selected
