"""The fixed scenario graph for The Adventure."""
from __future__ import annotations

from typing import Dict

from adventure.domain.defs import (
    EXIT_TARGET,
    WIN_TARGET,
    ChoiceDef,
    NarrationDef,
    OutcomeDef,
    ScenarioDef,
    ScenarioEffectDef,
)

ENTRY_SCENARIO_ID = "start"
KEY_ITEM_ID = "key"

START = "start"
ROOM = "room"
CORRIDOR = "corridor"
BRIGHT_ROOM = "brightRoom"
LOCKED_DOOR = "lockedDoor"
KEY_TAKEN = "keyTaken"

_LOSE_ONE_HEALTH = ScenarioEffectDef(type="lose_health", data={"amount": 1})


def build_scenarios() -> Dict[str, ScenarioDef]:
    """Return a fresh mapping of scenario id to its definition."""
    scenarios = [
        ScenarioDef(
            id=START,
            choices=(
                ChoiceDef(
                    id="wake_up",
                    label="You wake up in a dark room. What do you do?",
                    on_success=OutcomeDef(
                        next_scenario_id=ROOM,
                        narration=(NarrationDef("You're in a dark room.", "info"),),
                    ),
                ),
            ),
        ),
        ScenarioDef(
            id=ROOM,
            choices=(
                ChoiceDef(
                    id="open_door",
                    label="You see a door. Do you open it?",
                    on_success=OutcomeDef(
                        next_scenario_id=CORRIDOR,
                        narration=(
                            NarrationDef("You open the door and find yourself in a corridor.", "good"),
                        ),
                    ),
                ),
                ChoiceDef(
                    id="wait",
                    label="You sit down and wait.",
                    on_success=OutcomeDef(
                        next_scenario_id=ROOM,
                        narration=(NarrationDef("Nothing happens. You're still in the dark room.", "bad"),),
                    ),
                ),
            ),
        ),
        ScenarioDef(
            id=CORRIDOR,
            choices=(
                ChoiceDef(
                    id="climb_stairs",
                    label="You see a staircase going up. Do you take it?",
                    on_success=OutcomeDef(
                        next_scenario_id=BRIGHT_ROOM,
                        narration=(
                            NarrationDef("You climb the stairs and find yourself in a bright room.", "good"),
                        ),
                    ),
                ),
                ChoiceDef(
                    id="follow_hallway",
                    label="You see a hallway leading left. Do you go that way?",
                    on_success=OutcomeDef(
                        next_scenario_id=LOCKED_DOOR,
                        narration=(NarrationDef("You walk down the hallway and find a locked door.", "good"),),
                    ),
                ),
                ChoiceDef(
                    id="back_to_room",
                    label="You go back to the room.",
                    on_success=OutcomeDef(
                        next_scenario_id=ROOM,
                        narration=(NarrationDef("You return to the dark room.", "info"),),
                    ),
                ),
                ChoiceDef(
                    id="exit",
                    label="Exit",
                    on_success=OutcomeDef(
                        next_scenario_id=EXIT_TARGET,
                        narration=(NarrationDef("Exiting game...", "info"),),
                    ),
                ),
            ),
        ),
        ScenarioDef(
            id=BRIGHT_ROOM,
            choices=(
                ChoiceDef(
                    id="take_key",
                    label="You see a key on the table. Do you take it?",
                    on_success=OutcomeDef(
                        next_scenario_id=KEY_TAKEN,
                        narration=(NarrationDef("You take the key.", "good"),),
                        effects=(ScenarioEffectDef(type="add_item", data={"item_id": KEY_ITEM_ID}),),
                    ),
                ),
                ChoiceDef(
                    id="look_out_window",
                    label="You look out the window.",
                    on_success=OutcomeDef(
                        next_scenario_id=CORRIDOR,
                        narration=(NarrationDef("You see a beautiful garden outside.", "good"),),
                    ),
                ),
            ),
        ),
        ScenarioDef(
            id=LOCKED_DOOR,
            choices=(
                ChoiceDef(
                    id="use_key",
                    label="You use the key to unlock the door.",
                    requires_item=KEY_ITEM_ID,
                    on_success=OutcomeDef(
                        next_scenario_id=WIN_TARGET,
                        narration=(
                            NarrationDef("The door unlocks and you find a treasure chest! You win!", "good"),
                        ),
                    ),
                    on_failure=OutcomeDef(
                        next_scenario_id=CORRIDOR,
                        narration=(NarrationDef("You don't have the key.", "bad"),),
                        effects=(_LOSE_ONE_HEALTH,),
                    ),
                ),
                # Never checks the inventory, even with the key in hand.
                ChoiceDef(
                    id="force_door",
                    label="You try to open the door without a key.",
                    on_success=OutcomeDef(
                        next_scenario_id=CORRIDOR,
                        narration=(NarrationDef("The door is locked.", "bad"),),
                        effects=(_LOSE_ONE_HEALTH,),
                    ),
                ),
            ),
        ),
        ScenarioDef(
            id=KEY_TAKEN,
            choices=(
                ChoiceDef(
                    id="return_to_corridor",
                    label="You go back to the corridor.",
                    on_success=OutcomeDef(
                        next_scenario_id=CORRIDOR,
                        narration=(NarrationDef("You return to the corridor.", "info"),),
                    ),
                ),
            ),
        ),
    ]
    return {scenario.id: scenario for scenario in scenarios}
