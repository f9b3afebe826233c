"""Repository for the scenario graph."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping, Sequence, Tuple

from adventure.data.errors import DataReferenceError, DataValidationError
from adventure.data.scenarios import ENTRY_SCENARIO_ID, build_scenarios
from adventure.data.repositories.base import RepositoryBase
from adventure.domain.defs import ChoiceDef, ScenarioDef
from adventure.services.scenario_graph_validator import (
    EntryRoot,
    format_issue,
    validate_scenario_graph,
)

logger = logging.getLogger(__name__)

_REFERENCE_CODES = {"MISSING_SCENARIO_REF", "MISSING_ENTRY_ROOT"}


class ScenarioRepository(RepositoryBase[ScenarioDef]):
    """Serves the scenario graph and validates it eagerly on first load."""

    def __init__(
        self,
        scenarios: Mapping[str, ScenarioDef] | Callable[[], Mapping[str, ScenarioDef]] | None = None,
        entry_roots: Sequence[str] | None = None,
    ) -> None:
        super().__init__()
        self._source = scenarios if scenarios is not None else build_scenarios
        self._entry_roots = tuple(entry_roots) if entry_roots is not None else (ENTRY_SCENARIO_ID,)

    @property
    def entry_scenario_id(self) -> str:
        return self._entry_roots[0]

    def choices_for(self, scenario_id: str) -> Tuple[ChoiceDef, ...]:
        """Return the ordered choices presented at a scenario."""
        return self.get(scenario_id).choices

    def _load(self) -> Dict[str, ScenarioDef]:
        raw = self._source() if callable(self._source) else self._source
        scenarios = dict(raw)
        for scenario_id, scenario in scenarios.items():
            if scenario.id != scenario_id:
                raise DataValidationError(
                    f"Scenario keyed as '{scenario_id}' declares id '{scenario.id}'."
                )
        roots = [
            EntryRoot(scenario_id=root, source_type="game", source_id="entry_roots")
            for root in self._entry_roots
        ]
        issues = validate_scenario_graph(scenarios, roots)
        for issue in issues:
            if issue.severity == "WARN":
                logger.warning(format_issue(issue))
        errors = [issue for issue in issues if issue.severity == "ERROR"]
        if errors:
            message = "; ".join(format_issue(issue) for issue in errors)
            if any(issue.code in _REFERENCE_CODES for issue in errors):
                raise DataReferenceError(message)
            raise DataValidationError(message)
        logger.debug("Loaded %d scenarios", len(scenarios))
        return scenarios
