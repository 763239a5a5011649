"""
Fretboard tools - MCP tools for tunings and fingerings.

Tools for listing tunings and mapping a chord or scale onto a tuning's
fretboard.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Literal

from chuk_mcp_theory.core.fretboard import fingering_for, render_fingering
from chuk_mcp_theory.core.pitch import pitch_from_name_octave
from chuk_mcp_theory.errors import TheoryError
from chuk_mcp_theory.stores import FormulaStore, TuningStore

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_fretboard_tools(
    mcp: ChukMCPServer,
    formulas: FormulaStore,
    tunings: TuningStore,
) -> dict[str, Any]:
    """
    Register fretboard tools with the MCP server.

    Args:
        mcp: The MCP server instance
        formulas: The loaded formula store
        tunings: The loaded tuning store

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_tunings() -> str:
        """
        List available instrument tunings.

        Returns:
            JSON string with tuning keys, names and open strings. Pass a
            key to theory_fingering.

        Example:
            theory_list_tunings()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "tunings": [
                        {
                            "key": key,
                            "name": t.name,
                            "strings": t.open_notes,
                            "frets": [s.number_of_frets for s in t.strings],
                        }
                        for key, t in tunings.list_tunings().items()
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to list tunings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_tunings"] = theory_list_tunings

    @mcp.tool  # type: ignore[arg-type]
    async def theory_fingering(
        tuning: str,
        root: str,
        octave: int,
        formula: str,
        kind: Literal["chord", "scale"] = "chord",
        max_frets: int | None = None,
    ) -> str:
        """
        Map a chord or scale onto every fret of a tuning.

        Only the exact octave the formula expands to is matched; play the
        same formula from another octave to see other positions.

        Args:
            tuning: Tuning key (e.g., 'guitar_standard')
            root: Root note name
            octave: Root octave
            formula: Chord or scale formula name
            kind: 'chord' or 'scale'
            max_frets: Limit the text diagram to this many frets

        Returns:
            JSON string with matched positions and a text diagram

        Example:
            theory_fingering(tuning="guitar_standard", root="A", octave=2, formula="minor")
        """
        try:
            tuning_obj = tunings.get(tuning)
            root_pitch = pitch_from_name_octave(root, octave)
            if kind == "scale":
                collection = formulas.expand_scale(root_pitch, formula)
            else:
                collection = formulas.expand_chord(root_pitch, formula)

            fingering = fingering_for(tuning_obj, collection)
            return json.dumps(
                {
                    "status": "success",
                    "midi": list(collection),
                    "fingering": fingering.to_dict(),
                    "diagram": render_fingering(fingering, max_frets),
                }
            )
        except TheoryError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to build fingering")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_fingering"] = theory_fingering

    return tools
