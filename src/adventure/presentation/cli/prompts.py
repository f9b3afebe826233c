"""Interactive prompt providers for the CLI."""
from __future__ import annotations

from typing import Protocol, Sequence, Tuple

from adventure.presentation.cli import render

_YES = {"y", "yes"}
_NO = {"n", "no"}

# Returned for input that is not a listed menu number; never a valid choice id.
INVALID_SELECTION = ""


class Prompter(Protocol):
    """Blocking prompts the game loop depends on."""

    def select(self, message: str, options: Sequence[Tuple[str, str]]) -> str:
        """Present ``(option_id, label)`` pairs and return the chosen id, or ``INVALID_SELECTION``."""

    def confirm(self, message: str, *, default: bool = True) -> bool:
        """Ask a yes/no question."""


class ConsolePrompter:
    """Numbered menus and yes/no questions on standard input."""

    def select(self, message: str, options: Sequence[Tuple[str, str]]) -> str:
        render.render_menu(message, [label for _, label in options])
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            return INVALID_SELECTION
        if 0 <= index < len(options):
            return options[index][0]
        return INVALID_SELECTION

    def confirm(self, message: str, *, default: bool = True) -> bool:
        hint = "Y/n" if default else "y/N"
        while True:
            answer = input(f"{message} ({hint}) ").strip().lower()
            if not answer:
                return default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            render.render_error("Please answer yes or no.")
