"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_theory.stores import FormulaStore, TuningStore


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in table library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_theory" / "library"


@pytest.fixture
def formula_store(library_path: Path) -> FormulaStore:
    """Formula store loaded from the built-in library."""
    return FormulaStore(library_path=library_path).load()


@pytest.fixture
def tuning_store(library_path: Path) -> TuningStore:
    """Tuning store loaded from the built-in library."""
    return TuningStore(library_path=library_path).load()
