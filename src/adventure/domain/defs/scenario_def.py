"""Scenario definition structures used by the runtime."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Tuple

from adventure.core.types import Tone

WIN_TARGET = "@win"
EXIT_TARGET = "@exit"
TERMINAL_TARGETS = frozenset({WIN_TARGET, EXIT_TARGET})


@dataclass(frozen=True, slots=True)
class ScenarioEffectDef:
    """Single state mutation attached to an outcome."""

    type: str
    data: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class NarrationDef:
    """One line of narration shown after a choice resolves."""

    text: str
    tone: Tone = "info"


@dataclass(frozen=True, slots=True)
class OutcomeDef:
    """What happens once a choice resolves: narration, effects, then a transition.

    ``next_scenario_id`` names another scenario or one of the terminal targets.
    """

    next_scenario_id: str
    narration: Tuple[NarrationDef, ...] = ()
    effects: Tuple[ScenarioEffectDef, ...] = ()


@dataclass(frozen=True, slots=True)
class ChoiceDef:
    """Represents a selectable choice within a scenario."""

    id: str
    label: str
    on_success: OutcomeDef
    requires_item: str | None = None
    on_failure: OutcomeDef | None = None

    def outcomes(self) -> Tuple[OutcomeDef, ...]:
        if self.on_failure is None:
            return (self.on_success,)
        return (self.on_success, self.on_failure)


@dataclass(frozen=True, slots=True)
class ScenarioDef:
    """Named node of the story graph with its ordered choices."""

    id: str
    choices: Tuple[ChoiceDef, ...] = ()
