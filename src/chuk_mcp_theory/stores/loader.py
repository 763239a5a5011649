"""
Table loader - reads and writes the persisted YAML tables.

Tables are plain name-keyed mappings. JSON is a subset of YAML, so a JSON
export of the same shape loads too.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def read_table(path: Path) -> dict[str, Any]:
    """
    Read a name-keyed table from a YAML file.

    An empty file is an empty table.

    Args:
        path: File to read

    Returns:
        The parsed mapping
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise InvalidArgumentError(
            ErrorMessages.BAD_TABLE_FILE.format(path=path, reason=e)
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidArgumentError(
            ErrorMessages.BAD_TABLE_FILE.format(
                path=path, reason=f"expected a mapping, got {type(data).__name__}"
            )
        )
    logger.debug(f"Read {len(data)} entries from {path}")
    return data


def write_table(path: Path, data: dict[str, Any]) -> Path:
    """Write a name-keyed table to a YAML file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False, default_flow_style=None)
    return path


def table_paths(filename: str, library_path: Path, project_path: Path | None) -> list[Path]:
    """Existing table files in load order: library first, project overrides."""
    candidates = [library_path / filename]
    if project_path is not None:
        candidates.append(project_path / filename)
    return [p for p in candidates if p.exists()]
