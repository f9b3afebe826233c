"""Base repository implementation for in-process definition data."""
from __future__ import annotations

from typing import Dict, Generic, TypeVar

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Common caching and lookup behavior for repositories."""

    def __init__(self) -> None:
        self._definitions: Dict[str, T] | None = None

    def _load(self) -> Dict[str, T]:
        """Build and validate the typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._definitions is None:
            self._definitions = self._load()

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        try:
            return self._definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        return [self._definitions[key] for key in sorted(self._definitions.keys())]
