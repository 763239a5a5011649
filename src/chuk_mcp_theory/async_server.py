#!/usr/bin/env python3
"""
Async Music Theory MCP Server using chuk-mcp-server

This server provides MCP tools over a music-theory calculation core:
pitch conversion, chord/scale expansion, inversions, interval naming and
fretboard fingerings.

The server provides tools for:
- Converting between note names, MIDI numbers and frequencies
- Expanding chord and scale formulas from a root
- Detecting and applying chord inversions
- Measuring and naming intervals
- Mapping chords and scales onto instrument tunings
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.constants import LIBRARY_PATH
from chuk_mcp_theory.stores import FormulaStore, TuningStore
from chuk_mcp_theory.tools import (
    register_formula_tools,
    register_fretboard_tools,
    register_interval_tools,
    register_pitch_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Project tables override the built-in library by name
DEFAULT_PROJECT_PATH = Path.cwd() / "theory"


def build_stores(
    project_path: Path = DEFAULT_PROJECT_PATH,
    library_path: Path = LIBRARY_PATH,
) -> tuple[FormulaStore, TuningStore]:
    """Load the formula and tuning stores. Tools only read them afterwards."""
    formula_store = FormulaStore(library_path=library_path, project_path=project_path).load()
    tuning_store = TuningStore(library_path=library_path, project_path=project_path).load()
    return formula_store, tuning_store


def create_server(project_path: Path = DEFAULT_PROJECT_PATH) -> ChukMCPServer:
    """
    Create the MCP server with every theory tool registered.

    Args:
        project_path: Directory holding chords.yaml / scales.yaml / tunings.yaml overrides

    Returns:
        The configured server, ready for run_stdio() or run_http()
    """
    mcp = ChukMCPServer("chuk-mcp-theory")
    formula_store, tuning_store = build_stores(project_path)

    # Register all tools
    register_pitch_tools(mcp)
    register_formula_tools(mcp, formula_store)
    register_interval_tools(mcp)
    register_fretboard_tools(mcp, formula_store, tuning_store)

    logger.info("CHUK Music Theory MCP Server initialized")
    logger.info(f"  Library path: {LIBRARY_PATH}")
    logger.info(f"  Project path: {project_path}")
    return mcp
