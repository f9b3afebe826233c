"""Data layer: the fixed scenario graph and its repository."""

from .errors import DataError, DataReferenceError, DataValidationError
from .scenarios import ENTRY_SCENARIO_ID, KEY_ITEM_ID, build_scenarios

__all__ = [
    "DataError",
    "DataReferenceError",
    "DataValidationError",
    "ENTRY_SCENARIO_ID",
    "KEY_ITEM_ID",
    "build_scenarios",
]
