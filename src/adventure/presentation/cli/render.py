"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Sequence

from rich import box
from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from adventure.core.types import TextDisplayMode, Tone
from adventure.presentation.cli.config import debug_enabled

HEART = "♥"
LOST_HEART = "♡"

_TONE_STYLES: dict[str, str] = {
    "info": "yellow",
    "good": "green",
    "bad": "red",
}

_console = Console(highlight=False)
_text_display_mode: TextDisplayMode = "instant"

_GAME_OVER_ART = r"""
  ____    _    __  __ _____    _____     _______ ____
 / ___|  / \  |  \/  | ____|  / _ \ \   / / ____|  _ \
| |  _  / _ \ | |\/| |  _|   | | | \ \ / /|  _| | |_) |
| |_| |/ ___ \| |  | | |___  | |_| |\ V / | |___|  _ <
 \____/_/   \_\_|  |_|_____|  \___/  \_/  |_____|_| \_\
"""


def configure_console(*, color: bool = True) -> Console:
    """Rebuild the shared console; plain output when colour is off."""
    global _console
    _console = Console(highlight=False, no_color=not color)
    return _console


def set_text_display_mode(mode: TextDisplayMode) -> None:
    global _text_display_mode
    _text_display_mode = "step" if mode == "step" else "instant"


def get_text_display_mode() -> TextDisplayMode:
    return _text_display_mode


def format_health(health: int, max_health: int) -> str:
    """Return hearts markup: filled red hearts for remaining health, hollow grey ones for lost health."""
    health = max(0, min(health, max_health))
    remaining = HEART * health
    lost = LOST_HEART * (max_health - health)
    return f"[red]{remaining}[/red][grey50]{lost}[/grey50] ({health}/{max_health})"


def render_title_banner(title: str = "The Adventure") -> None:
    """Print the welcome banner shown once at startup."""
    _console.print(
        Panel(
            Align.center(f"[bold]{escape(title)}[/bold]"),
            box=box.DOUBLE,
            border_style="blue",
        )
    )
    _console.print(f"[yellow]Welcome to {escape(title)}! You wake up in a dark room.[/yellow]\n")


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    _console.print(f"\n[bold]=== {escape(title)} ===[/bold]")


def render_scenario(scenario_id: str, health: int, max_health: int, inventory: Sequence[str]) -> None:
    """Show the player's status line, plus the scenario id when debugging."""
    if debug_enabled():
        _console.print(f"[dim]\\[{escape(scenario_id)}][/dim]")
    items = ", ".join(inventory) if inventory else "nothing"
    _console.print(f"Health: {format_health(health, max_health)}  Carrying: {escape(items)}")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        _console.print(f"{idx}. {escape(label)}")


def render_narration(lines: Sequence[tuple[str, Tone]]) -> None:
    """Render narration lines in their tone colours."""
    for text, tone in lines:
        style = _TONE_STYLES.get(tone, "yellow")
        _console.print(f"[{style}]{escape(text)}[/{style}]")


def pause_if_stepping() -> None:
    """In step mode, wait for Enter before the story moves on."""
    if _text_display_mode == "step":
        input("Press Enter to continue...")


def render_health_lost(amount: int, remaining: int, max_health: int) -> None:
    noun = "point" if amount == 1 else "points"
    _console.print(
        f"[red]You lost {amount} health {noun}. Health remaining: [/red]"
        f"{format_health(remaining, max_health)}"
    )


def render_game_over_banner() -> None:
    _console.print(f"[red]{escape(_GAME_OVER_ART)}[/red]")
    _console.print("\n[bold white on bright_red]Game Over![/bold white on bright_red]\n")


def render_error(message: str) -> None:
    _console.print(f"[red]{escape(message)}[/red]")


def render_farewell(message: str = "Thanks for playing!") -> None:
    _console.print(f"\n[green]{escape(message)}[/green]")
