"""
Tuning store - named instrument tunings.

Same discovery rules as the formula store: the built-in library first,
then project tables overriding entries by name.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from chuk_mcp_theory.constants import (
    LIBRARY_PATH,
    TUNINGS_FILE,
    ErrorMessages,
    SuccessMessages,
)
from chuk_mcp_theory.errors import InvalidArgumentError, NotFoundError
from chuk_mcp_theory.models.tuning import InstrumentString, Tuning
from chuk_mcp_theory.stores.loader import read_table, table_paths, write_table

logger = logging.getLogger(__name__)


class TuningStore:
    """Tunings keyed by table key (e.g. 'guitar_standard'); the display name is separate."""

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        self.library_path = library_path or LIBRARY_PATH
        self.project_path = project_path
        self._tunings: dict[str, Tuning] = {}

    def load(self) -> TuningStore:
        """Clear, then load the tuning tables. Returns self."""
        self.clear()
        for path in table_paths(TUNINGS_FILE, self.library_path, self.project_path):
            for key, entry in read_table(path).items():
                self._tunings[str(key)] = self._parse_tuning(str(key), entry, path)

        logger.info(SuccessMessages.TUNINGS_LOADED.format(count=len(self._tunings)))
        return self

    def clear(self) -> None:
        """Drop every tuning."""
        self._tunings.clear()

    def get(self, key: str) -> Tuning:
        """Get a tuning by its table key."""
        tuning = self._tunings.get(key)
        if tuning is None:
            raise NotFoundError(ErrorMessages.TUNING_NOT_FOUND.format(name=key))
        return tuning

    def list_tunings(self) -> dict[str, Tuning]:
        """All tunings keyed by their lookup key, sorted by key."""
        return {key: self._tunings[key] for key in sorted(self._tunings)}

    def add(self, key: str, tuning: Tuning) -> Tuning:
        """Add or replace the tuning stored under key."""
        self._tunings[key] = tuning
        return tuning

    def to_yaml_dict(self) -> dict[str, Any]:
        """Persisted shape: key -> {name, strings}."""
        return {key: tuning.to_yaml_dict() for key, tuning in self._tunings.items()}

    def save(self, directory: Path) -> Path:
        """Export the tunings table to a directory."""
        path = write_table(directory / TUNINGS_FILE, self.to_yaml_dict())
        logger.info(SuccessMessages.TABLE_SAVED.format(table="tunings", path=path))
        return path

    def _parse_tuning(self, key: str, data: Any, path: Path) -> Tuning:
        """Parse one tuning entry."""
        if not isinstance(data, dict):
            raise InvalidArgumentError(
                ErrorMessages.BAD_TABLE_FILE.format(path=path, reason=f"{key}: expected a mapping")
            )
        try:
            strings = tuple(InstrumentString(**s) for s in data.get("strings", []))
            tuning = Tuning(name=data.get("name", key), strings=strings)
        except (TypeError, ValidationError) as e:
            raise InvalidArgumentError(
                ErrorMessages.BAD_TABLE_FILE.format(path=path, reason=f"{key}: {e}")
            ) from e

        logger.debug(f"Loaded tuning {key}: {tuning.open_notes}")
        return tuning

    def __len__(self) -> int:
        return len(self._tunings)

    def __contains__(self, key: object) -> bool:
        return key in self._tunings
