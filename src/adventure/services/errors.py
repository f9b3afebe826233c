"""Service-layer exceptions."""


class UnknownChoiceError(ValueError):
    """Raised when a choice id does not belong to the current scenario."""


class GameFinishedError(RuntimeError):
    """Raised when a choice is applied after the game has already ended."""
