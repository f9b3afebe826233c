"""Static scenario graph validation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from adventure.domain.defs import TERMINAL_TARGETS, ChoiceDef, OutcomeDef, ScenarioDef, ScenarioEffectDef


Severity = str

KNOWN_EFFECT_TYPES = {"add_item", "lose_health"}


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: dict[str, str]


@dataclass(frozen=True, slots=True)
class EntryRoot:
    scenario_id: str
    source_type: str
    source_id: str


@dataclass(frozen=True, slots=True)
class ScenarioInfo:
    scenario_id: str
    targets: list[tuple[str, str]]


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


def validate_scenario_graph(
    scenarios: Mapping[str, ScenarioDef] | Sequence[ScenarioDef],
    entry_roots: Sequence[EntryRoot] | Sequence[str],
) -> list[Issue]:
    issues: list[Issue] = []
    graph, duplicate_ids = _coerce_scenarios(scenarios)
    for scenario_id in duplicate_ids:
        issues.append(
            Issue(
                severity="ERROR",
                code="DUPLICATE_SCENARIO_ID",
                message="Duplicate scenario id detected.",
                context={"scenario_id": scenario_id},
            )
        )
    infos: dict[str, ScenarioInfo] = {}
    for scenario_id, scenario in graph.items():
        infos[scenario_id] = _build_scenario_info(scenario_id, scenario, issues)

    scenario_ids = set(infos.keys())
    entry_root_list = _coerce_entry_roots(entry_roots)
    for entry in entry_root_list:
        if entry.scenario_id not in scenario_ids:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_ENTRY_ROOT",
                    message="Entry root references missing scenario.",
                    context={
                        "source_type": entry.source_type,
                        "source_id": entry.source_id,
                        "referenced_id": entry.scenario_id,
                    },
                )
            )

    for info in infos.values():
        _validate_references(info, scenario_ids, issues)

    _validate_reachability(infos, entry_root_list, issues)
    return issues


def _coerce_scenarios(
    scenarios: Mapping[str, ScenarioDef] | Sequence[ScenarioDef],
) -> tuple[dict[str, ScenarioDef], list[str]]:
    if isinstance(scenarios, Mapping):
        return dict(scenarios), []
    graph: dict[str, ScenarioDef] = {}
    duplicates: list[str] = []
    for scenario in scenarios:
        if scenario.id in graph:
            duplicates.append(scenario.id)
            continue
        graph[scenario.id] = scenario
    return graph, duplicates


def _coerce_entry_roots(entry_roots: Sequence[EntryRoot] | Sequence[str]) -> list[EntryRoot]:
    roots: list[EntryRoot] = []
    for entry in entry_roots:
        if isinstance(entry, EntryRoot):
            roots.append(entry)
        else:
            roots.append(EntryRoot(scenario_id=str(entry), source_type="unknown", source_id="unknown"))
    return roots


def _build_scenario_info(scenario_id: str, scenario: ScenarioDef, issues: list[Issue]) -> ScenarioInfo:
    if not scenario.choices:
        issues.append(
            Issue(
                severity="ERROR",
                code="EMPTY_SCENARIO",
                message="Scenario has no choices to present.",
                context={"scenario_id": scenario_id},
            )
        )
    _validate_unique_choices(scenario_id, scenario.choices, issues)
    targets: list[tuple[str, str]] = []
    for index, choice in enumerate(scenario.choices):
        choice_path = f"choices[{index}]"
        if choice.requires_item is not None and choice.on_failure is None:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_FAILURE_OUTCOME",
                    message="Choice requires an item but has no failure outcome.",
                    context={"scenario_id": scenario_id, "field_path": choice_path},
                )
            )
        targets.append((f"{choice_path}.on_success", choice.on_success.next_scenario_id))
        _validate_effects(scenario_id, choice.on_success, f"{choice_path}.on_success", issues)
        if choice.on_failure is not None:
            targets.append((f"{choice_path}.on_failure", choice.on_failure.next_scenario_id))
            _validate_effects(scenario_id, choice.on_failure, f"{choice_path}.on_failure", issues)
    return ScenarioInfo(scenario_id=scenario_id, targets=targets)


def _validate_unique_choices(scenario_id: str, choices: Sequence[ChoiceDef], issues: list[Issue]) -> None:
    seen_ids: set[str] = set()
    seen_labels: set[str] = set()
    for index, choice in enumerate(choices):
        if choice.id in seen_ids:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="DUPLICATE_CHOICE_ID",
                    message="Choice id is not unique within its scenario.",
                    context={"scenario_id": scenario_id, "field_path": f"choices[{index}].id"},
                )
            )
        if choice.label in seen_labels:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="DUPLICATE_CHOICE_LABEL",
                    message="Choice label is not unique within its scenario.",
                    context={"scenario_id": scenario_id, "field_path": f"choices[{index}].label"},
                )
            )
        seen_ids.add(choice.id)
        seen_labels.add(choice.label)


def _validate_effects(scenario_id: str, outcome: OutcomeDef, path: str, issues: list[Issue]) -> None:
    for index, effect in enumerate(outcome.effects):
        effect_path = f"{path}.effects[{index}]"
        if effect.type not in KNOWN_EFFECT_TYPES:
            issues.append(
                Issue(
                    severity="WARN",
                    code="UNKNOWN_EFFECT_TYPE",
                    message="Effect type is not recognized by runtime and will be ignored.",
                    context={"scenario_id": scenario_id, "field_path": effect_path},
                )
            )
            continue
        problem = _effect_payload_problem(effect)
        if problem:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="INVALID_EFFECT",
                    message=problem,
                    context={"scenario_id": scenario_id, "field_path": effect_path},
                )
            )


def _effect_payload_problem(effect: ScenarioEffectDef) -> str | None:
    if effect.type == "add_item" and not isinstance(effect.data.get("item_id"), str):
        return "add_item.item_id must be a string."
    if effect.type == "lose_health":
        amount = effect.data.get("amount")
        if not isinstance(amount, int) or isinstance(amount, bool) or amount <= 0:
            return "lose_health.amount must be a positive integer."
    return None


def _validate_references(info: ScenarioInfo, scenario_ids: set[str], issues: list[Issue]) -> None:
    for field_path, target in info.targets:
        if target in TERMINAL_TARGETS or target in scenario_ids:
            continue
        issues.append(
            Issue(
                severity="ERROR",
                code="MISSING_SCENARIO_REF",
                message="Outcome references missing scenario.",
                context={
                    "scenario_id": info.scenario_id,
                    "field_path": f"{field_path}.next",
                    "referenced_id": target,
                },
            )
        )


def _validate_reachability(
    infos: Mapping[str, ScenarioInfo],
    entry_roots: Sequence[EntryRoot],
    issues: list[Issue],
) -> None:
    scenario_ids = set(infos.keys())
    reachable: set[str] = set()
    stack = [entry.scenario_id for entry in entry_roots if entry.scenario_id in scenario_ids]
    while stack:
        scenario_id = stack.pop()
        if scenario_id in reachable:
            continue
        reachable.add(scenario_id)
        for _, target in infos[scenario_id].targets:
            if target in scenario_ids:
                stack.append(target)
    for scenario_id in sorted(scenario_ids - reachable):
        issues.append(
            Issue(
                severity="WARN",
                code="UNREACHABLE_SCENARIO",
                message="Scenario is unreachable from entry roots.",
                context={"scenario_id": scenario_id},
            )
        )
