"""The Adventure: a small branching-narrative terminal game."""

__version__ = "1.0.0"
