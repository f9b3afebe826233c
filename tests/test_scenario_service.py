import pytest

from adventure.data.repositories import ScenarioRepository
from adventure.domain.state import GameState
from adventure.services import (
    ExitRequestedEvent,
    GameFinishedError,
    GameOverEvent,
    HealthLostEvent,
    ItemGainedEvent,
    NarrationEvent,
    ScenarioService,
    UnknownChoiceError,
    VictoryEvent,
)


def _make_service() -> ScenarioService:
    return ScenarioService(scenario_repo=ScenarioRepository())


def _play(service: ScenarioService, state: GameState, choice_ids: list[str]) -> None:
    for choice_id in choice_ids:
        result = service.choose(state, choice_id)
        assert result.outcome == "continue", choice_id


def _at_locked_door(service: ScenarioService, *, with_key: bool) -> GameState:
    state = service.start_new_game()
    path = ["wake_up", "open_door"]
    if with_key:
        path += ["climb_stairs", "take_key", "return_to_corridor"]
    _play(service, state, path + ["follow_hallway"])
    assert state.current_scenario_id == "lockedDoor"
    return state


def test_new_game_starts_at_start_with_full_health() -> None:
    service = _make_service()
    state = service.start_new_game()
    view = service.get_current_view(state)

    assert view.scenario_id == "start"
    assert view.health == 5
    assert view.max_health == 5
    assert view.inventory == []
    assert view.choices == [("wake_up", "You wake up in a dark room. What do you do?")]


def test_choose_moves_to_next_scenario_and_narrates() -> None:
    service = _make_service()
    state = service.start_new_game()

    result = service.choose(state, "wake_up")

    assert result.outcome == "continue"
    assert result.next_scenario_id == "room"
    assert result.events == [NarrationEvent(text="You're in a dark room.", tone="info")]


def test_waiting_in_room_loops_back() -> None:
    service = _make_service()
    state = service.start_new_game()
    _play(service, state, ["wake_up", "wait", "wait"])
    assert state.current_scenario_id == "room"
    assert state.player.health == 5


def test_resolve_choice_matches_ids_without_mutating_state() -> None:
    service = _make_service()
    state = service.start_new_game()
    service.choose(state, "wake_up")

    assert service.resolve_choice(state, "open_door").id == "open_door"
    assert service.resolve_choice(state, "You see a door. Do you open it?") is None
    assert service.resolve_choice(state, "42") is None
    assert state.current_scenario_id == "room"
    assert state.player.health == 5
    assert state.player.items() == []


def test_unknown_choice_raises() -> None:
    service = _make_service()
    state = service.start_new_game()
    with pytest.raises(UnknownChoiceError):
        service.choose(state, "open_door")
    assert state.current_scenario_id == "start"


def test_taking_key_adds_it_once_even_when_taken_twice() -> None:
    service = _make_service()
    state = service.start_new_game()
    _play(service, state, ["wake_up", "open_door", "climb_stairs"])

    first = service.choose(state, "take_key")
    assert ItemGainedEvent(item_id="key", already_held=False) in first.events
    assert first.next_scenario_id == "keyTaken"

    _play(service, state, ["return_to_corridor", "climb_stairs"])
    second = service.choose(state, "take_key")
    assert ItemGainedEvent(item_id="key", already_held=True) in second.events
    assert state.player.items() == ["key"]


def test_using_key_with_key_wins_without_health_change() -> None:
    service = _make_service()
    state = _at_locked_door(service, with_key=True)

    result = service.choose(state, "use_key")

    assert result.outcome == "win"
    assert result.next_scenario_id is None
    assert state.player.health == 5
    assert not any(isinstance(event, HealthLostEvent) for event in result.events)
    assert isinstance(result.events[-1], VictoryEvent)
    assert state.finished == "win"


@pytest.mark.parametrize(
    ("choice_id", "narration"),
    [("use_key", "You don't have the key."), ("force_door", "The door is locked.")],
)
def test_failing_at_door_without_key_costs_one_health(choice_id: str, narration: str) -> None:
    service = _make_service()
    state = _at_locked_door(service, with_key=False)

    result = service.choose(state, choice_id)

    assert result.outcome == "continue"
    assert result.next_scenario_id == "corridor"
    assert state.player.health == 4
    assert result.events == [
        NarrationEvent(text=narration, tone="bad"),
        HealthLostEvent(amount=1, remaining=4, max_health=5),
    ]


def test_forcing_door_ignores_key_in_inventory() -> None:
    service = _make_service()
    state = _at_locked_door(service, with_key=True)

    result = service.choose(state, "force_door")

    assert result.outcome == "continue"
    assert state.player.health == 4
    assert state.current_scenario_id == "corridor"


def test_game_over_on_exactly_the_fifth_failure() -> None:
    service = _make_service()
    state = _at_locked_door(service, with_key=False)

    for expected_health in (4, 3, 2, 1):
        result = service.choose(state, "use_key")
        assert result.outcome == "continue"
        assert state.player.health == expected_health
        _play(service, state, ["follow_hallway"])

    final = service.choose(state, "force_door")
    assert final.outcome == "game_over"
    assert state.player.health == 0
    assert state.finished == "game_over"
    assert final.events[-1] == GameOverEvent(scenario_id="lockedDoor")
    assert final.next_scenario_id is None


def test_choose_after_game_finished_raises() -> None:
    service = _make_service()
    state = _at_locked_door(service, with_key=True)
    service.choose(state, "use_key")
    with pytest.raises(GameFinishedError):
        service.choose(state, "use_key")


def test_exit_choice_requests_exit() -> None:
    service = _make_service()
    state = service.start_new_game()
    _play(service, state, ["wake_up", "open_door"])

    result = service.choose(state, "exit")

    assert result.outcome == "exit"
    assert result.events == [
        NarrationEvent(text="Exiting game...", tone="info"),
        ExitRequestedEvent(exit_code=0),
    ]


def test_restart_resets_to_replay_health_and_start() -> None:
    service = _make_service()
    state = _at_locked_door(service, with_key=True)
    service.choose(state, "force_door")
    state.finished = "game_over"

    service.restart(state)

    assert state.player.health == 4
    assert state.player.items() == []
    assert state.current_scenario_id == "start"
    assert state.finished is None


def test_service_never_mutates_the_graph() -> None:
    repo = ScenarioRepository()
    service = ScenarioService(scenario_repo=repo)
    before = {scenario.id: scenario for scenario in repo.all()}
    state = service.start_new_game()
    _play(service, state, ["wake_up", "open_door", "climb_stairs", "take_key", "return_to_corridor"])
    after = {scenario.id: scenario for scenario in repo.all()}
    assert before == after
    assert all(before[key] is after[key] for key in before)


def test_view_and_choices_come_from_the_repository(monkeypatch) -> None:
    repo = ScenarioRepository()
    service = ScenarioService(scenario_repo=repo)
    state = service.start_new_game()
    _play(service, state, ["wake_up"])
    requested: list[str] = []
    original = repo.choices_for

    def _tracking_choices_for(scenario_id: str):
        requested.append(scenario_id)
        return original(scenario_id)

    monkeypatch.setattr(repo, "choices_for", _tracking_choices_for)

    view = service.get_current_view(state)
    assert view.choices == [("open_door", "You see a door. Do you open it?"), ("wait", "You sit down and wait.")]
    assert service.resolve_choice(state, "wait") is not None
    service.choose(state, "open_door")
    assert requested == ["room", "room", "room"]
