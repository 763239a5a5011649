"""
Formula store - named chord and scale formulas.

Formulas come from:
1. Built-in library (shipped with package)
2. Project tables (user's project directory)

Project entries override library entries with the same name. The store is
an explicit object: build one, load() it, and pass it to whatever needs
formulas.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from chuk_mcp_theory.constants import (
    CHORDS_FILE,
    LIBRARY_PATH,
    SCALES_FILE,
    CollectionKind,
    ErrorMessages,
    FormulaTable,
    SuccessMessages,
)
from chuk_mcp_theory.core.collection import PitchCollection, expand
from chuk_mcp_theory.core.pitch import Pitch
from chuk_mcp_theory.errors import InvalidArgumentError, NotFoundError
from chuk_mcp_theory.models.formula import Formula
from chuk_mcp_theory.stores.loader import read_table, table_paths, write_table

logger = logging.getLogger(__name__)


class FormulaStore:
    """
    Chord and scale formulas keyed by name.

    Read-only for the core once loaded. Reloading clears everything first.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the store.

        Args:
            library_path: Directory holding the built-in tables
            project_path: Directory holding project tables (overrides)
        """
        self.library_path = library_path or LIBRARY_PATH
        self.project_path = project_path
        self._chords: dict[str, Formula] = {}
        self._scales: dict[str, Formula] = {}

    def load(self) -> FormulaStore:
        """Clear, then load chord and scale tables. Returns self."""
        self.clear()
        for path in table_paths(CHORDS_FILE, self.library_path, self.project_path):
            self._chords.update(self._parse_table(read_table(path), path))
        for path in table_paths(SCALES_FILE, self.library_path, self.project_path):
            self._scales.update(self._parse_table(read_table(path), path))

        logger.info(
            SuccessMessages.FORMULAS_LOADED.format(
                chords=len(self._chords), scales=len(self._scales)
            )
        )
        return self

    def clear(self) -> None:
        """Drop every formula."""
        self._chords.clear()
        self._scales.clear()

    def get_chord(self, name: str) -> Formula:
        """Get a chord formula by name."""
        formula = self._chords.get(name)
        if formula is None:
            raise NotFoundError(ErrorMessages.CHORD_NOT_FOUND.format(name=name))
        return formula

    def get_scale(self, name: str) -> Formula:
        """Get a scale formula by name."""
        formula = self._scales.get(name)
        if formula is None:
            raise NotFoundError(ErrorMessages.SCALE_NOT_FOUND.format(name=name))
        return formula

    def list_chords(self) -> list[str]:
        """Sorted chord formula names."""
        return sorted(self._chords)

    def list_scales(self) -> list[str]:
        """Sorted scale formula names."""
        return sorted(self._scales)

    def add_chord(self, name: str, offsets: list[int] | tuple[int, ...]) -> Formula:
        """Add or replace a chord formula."""
        formula = self._build(name, offsets)
        self._chords[name] = formula
        return formula

    def add_scale(self, name: str, offsets: list[int] | tuple[int, ...]) -> Formula:
        """Add or replace a scale formula."""
        formula = self._build(name, offsets)
        self._scales[name] = formula
        return formula

    def expand_chord(self, root: Pitch, name: str) -> PitchCollection:
        """Expand a named chord formula from a root pitch."""
        return expand(root, self.get_chord(name), kind=CollectionKind.CHORD)

    def expand_scale(self, root: Pitch, name: str) -> PitchCollection:
        """Expand a named scale formula from a root pitch."""
        return expand(root, self.get_scale(name), kind=CollectionKind.SCALE)

    def to_yaml_dict(self, table: FormulaTable) -> dict[str, list[int]]:
        """Persisted shape of one table: name -> offsets."""
        formulas = self._chords if table == "chords" else self._scales
        return {name: list(f.offsets) for name, f in formulas.items()}

    def save(self, directory: Path) -> list[Path]:
        """
        Export both tables to a directory.

        Args:
            directory: Target directory (created if missing)

        Returns:
            Paths written
        """
        written = [
            write_table(directory / CHORDS_FILE, self.to_yaml_dict("chords")),
            write_table(directory / SCALES_FILE, self.to_yaml_dict("scales")),
        ]
        for path in written:
            logger.info(SuccessMessages.TABLE_SAVED.format(table=path.stem, path=path))
        return written

    def _build(self, name: str, offsets: Any) -> Formula:
        try:
            return Formula(name=name, offsets=offsets)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid formula '{name}': {e}") from e

    def _parse_table(self, data: dict[str, Any], path: Path) -> dict[str, Formula]:
        """Parse a name -> offsets table."""
        formulas = {}
        for name, offsets in data.items():
            try:
                formulas[str(name)] = Formula(name=str(name), offsets=offsets)
            except ValidationError as e:
                raise InvalidArgumentError(
                    ErrorMessages.BAD_TABLE_FILE.format(path=path, reason=f"{name}: {e}")
                ) from e
            logger.debug(f"Loaded formula {name}: {offsets}")
        return formulas

    def __len__(self) -> int:
        return len(self._chords) + len(self._scales)
