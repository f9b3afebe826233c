"""Scenario progression services."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Sequence, Tuple

from adventure.core.types import Outcome, Tone
from adventure.domain.defs import EXIT_TARGET, WIN_TARGET, ChoiceDef, OutcomeDef, ScenarioEffectDef
from adventure.domain.state import MAX_HEALTH, REPLAY_HEALTH, STARTING_HEALTH, GameState, PlayerState
from adventure.services.errors import GameFinishedError, UnknownChoiceError

if TYPE_CHECKING:
    from adventure.data.repositories import ScenarioRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScenarioView:
    """Data returned to the presentation layer for rendering."""

    scenario_id: str
    choices: List[Tuple[str, str]]
    health: int
    max_health: int
    inventory: List[str]


@dataclass(slots=True)
class ScenarioEvent:
    """Base class for scenario events."""


@dataclass(slots=True)
class NarrationEvent(ScenarioEvent):
    text: str
    tone: Tone = "info"


@dataclass(slots=True)
class ItemGainedEvent(ScenarioEvent):
    item_id: str
    already_held: bool = False


@dataclass(slots=True)
class HealthLostEvent(ScenarioEvent):
    amount: int
    remaining: int
    max_health: int = MAX_HEALTH


@dataclass(slots=True)
class GameOverEvent(ScenarioEvent):
    scenario_id: str


@dataclass(slots=True)
class VictoryEvent(ScenarioEvent):
    scenario_id: str


@dataclass(slots=True)
class ExitRequestedEvent(ScenarioEvent):
    exit_code: int = 0


@dataclass(slots=True)
class ChoiceResult:
    """Result returned after applying a choice."""

    outcome: Outcome
    events: List[ScenarioEvent] = field(default_factory=list)
    next_scenario_id: str | None = None


class ScenarioService:
    """Application service that drives the scenario graph.

    Each call is a transition ``(state, scenario id, selection) -> (state, next id or terminal)``.
    The graph itself is never mutated; all changes land on the ``GameState`` passed in.
    """

    def __init__(self, scenario_repo: ScenarioRepository) -> None:
        self._scenario_repo = scenario_repo

    def start_new_game(self) -> GameState:
        """Create a fresh game state positioned at the entry scenario."""
        entry_id = self._scenario_repo.entry_scenario_id
        self._scenario_repo.get(entry_id)
        state = GameState(current_scenario_id=entry_id, player=PlayerState(health=STARTING_HEALTH))
        logger.info("New game started at '%s' with %d health", entry_id, state.player.health)
        return state

    def restart(self, state: GameState) -> None:
        """Reset the player for a replay and return to the entry scenario."""
        state.player.reset(REPLAY_HEALTH)
        state.current_scenario_id = self._scenario_repo.entry_scenario_id
        state.finished = None
        logger.info("Replay started with %d health", state.player.health)

    def get_current_view(self, state: GameState) -> ScenarioView:
        """Return the view model for the current scenario."""
        return ScenarioView(
            scenario_id=state.current_scenario_id,
            choices=[(choice.id, choice.label) for choice in self._current_choices(state)],
            health=state.player.health,
            max_health=MAX_HEALTH,
            inventory=state.player.items(),
        )

    def resolve_choice(self, state: GameState, selection: str) -> ChoiceDef | None:
        """Match a player's selection against the current scenario's choice ids."""
        return _find_choice(self._current_choices(state), selection)

    def choose(self, state: GameState, choice_id: str) -> ChoiceResult:
        """Apply the selected choice and advance the scenario."""
        if state.finished is not None:
            raise GameFinishedError(f"Game already finished with outcome '{state.finished}'.")
        scenario_id = state.current_scenario_id
        choice = _find_choice(self._current_choices(state), choice_id)
        if choice is None:
            raise UnknownChoiceError(f"Choice '{choice_id}' is invalid for scenario '{scenario_id}'.")

        outcome_def = self._select_outcome(choice, state.player)
        events: List[ScenarioEvent] = [
            NarrationEvent(text=line.text, tone=line.tone) for line in outcome_def.narration
        ]
        events.extend(self._apply_effects(outcome_def.effects, state.player))
        outcome = self._transition(state, scenario_id, outcome_def, events)
        logger.debug(
            "Choice '%s' at '%s' -> %s (%s)",
            choice.id,
            scenario_id,
            outcome_def.next_scenario_id,
            outcome,
        )
        next_scenario_id = state.current_scenario_id if outcome == "continue" else None
        return ChoiceResult(outcome=outcome, events=events, next_scenario_id=next_scenario_id)

    def _current_choices(self, state: GameState) -> Tuple[ChoiceDef, ...]:
        return self._scenario_repo.choices_for(state.current_scenario_id)

    @staticmethod
    def _select_outcome(choice: ChoiceDef, player: PlayerState) -> OutcomeDef:
        if choice.requires_item is None or player.has_item(choice.requires_item):
            return choice.on_success
        assert choice.on_failure is not None
        return choice.on_failure

    def _transition(
        self,
        state: GameState,
        scenario_id: str,
        outcome_def: OutcomeDef,
        events: List[ScenarioEvent],
    ) -> Outcome:
        if state.player.is_defeated:
            state.finished = "game_over"
            events.append(GameOverEvent(scenario_id=scenario_id))
            logger.info("Game over at '%s'", scenario_id)
            return "game_over"
        target = outcome_def.next_scenario_id
        if target == WIN_TARGET:
            state.finished = "win"
            events.append(VictoryEvent(scenario_id=scenario_id))
            logger.info("Victory at '%s'", scenario_id)
            return "win"
        if target == EXIT_TARGET:
            state.finished = "exit"
            events.append(ExitRequestedEvent(exit_code=0))
            return "exit"
        state.current_scenario_id = target
        return "continue"

    def _apply_effects(
        self, effects: Sequence[ScenarioEffectDef], player: PlayerState
    ) -> List[ScenarioEvent]:
        emitted: List[ScenarioEvent] = []
        for effect in effects:
            if effect.type == "add_item":
                item_id = self._require_str(effect.data.get("item_id"), "add_item.item_id")
                added = player.add_item(item_id)
                emitted.append(ItemGainedEvent(item_id=item_id, already_held=not added))
            elif effect.type == "lose_health":
                amount = self._require_int(effect.data.get("amount"), "lose_health.amount")
                remaining = player.lose_health(amount)
                emitted.append(HealthLostEvent(amount=amount, remaining=remaining))
            else:
                logger.warning("Ignoring unknown effect type '%s'", effect.type)
        return emitted

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise ValueError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        if not isinstance(value, int):
            raise ValueError(f"{context} must be an integer.")
        return value


def _find_choice(choices: Sequence[ChoiceDef], choice_id: str) -> ChoiceDef | None:
    for choice in choices:
        if choice.id == choice_id:
            return choice
    return None
