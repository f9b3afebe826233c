"""Shared type aliases for the core and domain layers."""
from typing import Literal

Tone = Literal["info", "good", "bad"]
Outcome = Literal["continue", "win", "exit", "game_over"]
TextDisplayMode = Literal["instant", "step"]

__all__ = ["Outcome", "TextDisplayMode", "Tone"]
