"""Console-driven game loop for The Adventure."""
from __future__ import annotations

import logging
import sys
from typing import List, Sequence, Tuple

from adventure.core.types import Outcome, Tone
from adventure.data.repositories import ScenarioRepository
from adventure.domain.state import GameState
from adventure.presentation.cli import render
from adventure.presentation.cli.config import load_config
from adventure.presentation.cli.prompts import ConsolePrompter, Prompter
from adventure.services import (
    ChoiceResult,
    HealthLostEvent,
    ItemGainedEvent,
    NarrationEvent,
    ScenarioEvent,
    ScenarioService,
)

logger = logging.getLogger(__name__)

_CHOICE_PROMPT = "What do you do?"
_REPLAY_PROMPT = "Do you want to play again?"
_INVALID_CHOICE = "Invalid choice! Please select a valid option."


def main() -> None:
    """Start the interactive CLI session."""
    config = load_config()
    render.configure_console(color=bool(config["color"]))
    render.set_text_display_mode(config["text_display_mode"])  # type: ignore[arg-type]
    service = _build_scenario_service()
    render.render_title_banner()
    try:
        run_game(service, ConsolePrompter())
    except KeyboardInterrupt:
        render.render_farewell("Interrupted. Goodbye!")
        sys.exit(130)
    except EOFError:
        render.render_farewell("Input closed. Goodbye!")
        sys.exit(1)


def _build_scenario_service() -> ScenarioService:
    """Construct the ScenarioService with the validated scenario graph."""
    return ScenarioService(scenario_repo=ScenarioRepository())


def run_game(service: ScenarioService, prompter: Prompter, state: GameState | None = None) -> Outcome:
    """Play until a win, an explicit exit or a declined replay."""
    state = state or service.start_new_game()
    while True:
        outcome = run_scenario(service, state, prompter)
        if outcome == "exit":
            sys.exit(0)
        if outcome == "game_over" and handle_game_over(service, state, prompter):
            continue
        return outcome


def run_scenario(service: ScenarioService, state: GameState, prompter: Prompter) -> Outcome:
    """Present choices and apply selections until the game leaves the normal flow."""
    while True:
        view = service.get_current_view(state)
        render.render_scenario(view.scenario_id, view.health, view.max_health, view.inventory)
        selection = prompter.select(_CHOICE_PROMPT, view.choices)
        choice = service.resolve_choice(state, selection)
        if choice is None:
            logger.debug("Unresolved selection %r at '%s'", selection, view.scenario_id)
            render.render_error(_INVALID_CHOICE)
            continue
        result = service.choose(state, choice.id)
        logger.debug("Resolved '%s' -> %s (%s)", choice.id, result.next_scenario_id, result.outcome)
        _render_result(result)
        if result.outcome != "exit":
            render.pause_if_stepping()
        if result.outcome != "continue":
            return result.outcome


def handle_game_over(service: ScenarioService, state: GameState, prompter: Prompter) -> bool:
    """Show the Game Over banner and ask for a replay. Returns True when replaying."""
    render.render_game_over_banner()
    if prompter.confirm(_REPLAY_PROMPT):
        service.restart(state)
        return True
    render.render_farewell()
    return False


def _render_result(result: ChoiceResult) -> None:
    render.render_narration(_narration_lines(result.events))
    for event in result.events:
        if isinstance(event, HealthLostEvent):
            render.render_health_lost(event.amount, event.remaining, event.max_health)
        elif isinstance(event, ItemGainedEvent) and event.already_held:
            logger.debug("Item '%s' was already held", event.item_id)


def _narration_lines(events: Sequence[ScenarioEvent]) -> List[Tuple[str, Tone]]:
    return [(event.text, event.tone) for event in events if isinstance(event, NarrationEvent)]
