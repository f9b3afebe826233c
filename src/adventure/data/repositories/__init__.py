"""Repository exports."""

from .scenario_repo import ScenarioRepository

__all__ = ["ScenarioRepository"]
