"""Domain definition exports."""

from .scenario_def import (
    EXIT_TARGET,
    TERMINAL_TARGETS,
    WIN_TARGET,
    ChoiceDef,
    NarrationDef,
    OutcomeDef,
    ScenarioDef,
    ScenarioEffectDef,
)

__all__ = [
    "EXIT_TARGET",
    "TERMINAL_TARGETS",
    "WIN_TARGET",
    "ChoiceDef",
    "NarrationDef",
    "OutcomeDef",
    "ScenarioDef",
    "ScenarioEffectDef",
]
