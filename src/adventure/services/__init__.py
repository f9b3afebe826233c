"""Service layer exports."""

from .errors import GameFinishedError, UnknownChoiceError
from .scenario_service import (
    ChoiceResult,
    ExitRequestedEvent,
    GameOverEvent,
    HealthLostEvent,
    ItemGainedEvent,
    NarrationEvent,
    ScenarioEvent,
    ScenarioService,
    ScenarioView,
    VictoryEvent,
)

__all__ = [
    "GameFinishedError",
    "UnknownChoiceError",
    "ChoiceResult",
    "ExitRequestedEvent",
    "GameOverEvent",
    "HealthLostEvent",
    "ItemGainedEvent",
    "NarrationEvent",
    "ScenarioEvent",
    "ScenarioService",
    "ScenarioView",
    "VictoryEvent",
]
