"""
Formula tools - MCP tools for chord and scale expansion and inversion.

Tools for listing formulas, expanding a formula from a root pitch, and
querying or applying chord inversions.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import MIDI_MAX, MIDI_MIN
from chuk_mcp_theory.core.collection import PitchCollection
from chuk_mcp_theory.core.inversion import invert_as_new, inversion_label, inversion_number
from chuk_mcp_theory.core.pitch import pitch_from_name_octave
from chuk_mcp_theory.errors import TheoryError
from chuk_mcp_theory.stores import FormulaStore

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def collection_to_dict(collection: PitchCollection) -> dict[str, Any]:
    """JSON-ready view of a pitch collection."""
    # Notes past MIDI 127 have no name
    in_range = [mnn for mnn in collection if MIDI_MIN <= mnn <= MIDI_MAX]
    return {
        "kind": collection.kind.value,
        "formula": collection.name,
        "midi": list(collection),
        "notes": PitchCollection(in_range).note_names(),
    }


def register_formula_tools(mcp: ChukMCPServer, store: FormulaStore) -> dict[str, Any]:
    """
    Register formula and inversion tools with the MCP server.

    Args:
        mcp: The MCP server instance
        store: The loaded formula store

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_formulas() -> str:
        """
        List available chord and scale formulas.

        Returns:
            JSON string with chord and scale formula names

        Example:
            theory_list_formulas()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "chords": store.list_chords(),
                    "scales": store.list_scales(),
                }
            )
        except Exception as e:
            logger.exception("Failed to list formulas")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_formulas"] = theory_list_formulas

    @mcp.tool  # type: ignore[arg-type]
    async def theory_expand_chord(root: str, octave: int, chord: str) -> str:
        """
        Expand a chord formula from a root note.

        Args:
            root: Root note name (e.g., 'C', 'F#')
            octave: Root octave (C4 = middle C)
            chord: Chord formula name (e.g., 'major', 'minor7')

        Returns:
            JSON string with the chord's MIDI numbers and note names

        Example:
            theory_expand_chord(root="C", octave=4, chord="major")
        """
        try:
            collection = store.expand_chord(pitch_from_name_octave(root, octave), chord)
            return json.dumps({"status": "success", "chord": collection_to_dict(collection)})
        except TheoryError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to expand chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_expand_chord"] = theory_expand_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_expand_scale(root: str, octave: int, scale: str) -> str:
        """
        Expand a scale formula from a root note.

        Args:
            root: Root note name (e.g., 'A')
            octave: Root octave
            scale: Scale formula name (e.g., 'natural_minor', 'dorian')

        Returns:
            JSON string with the scale's MIDI numbers and note names

        Example:
            theory_expand_scale(root="A", octave=3, scale="natural_minor")
        """
        try:
            collection = store.expand_scale(pitch_from_name_octave(root, octave), scale)
            return json.dumps({"status": "success", "scale": collection_to_dict(collection)})
        except TheoryError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to expand scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_expand_scale"] = theory_expand_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_chord_inversion(notes: list[int]) -> str:
        """
        Report which inversion a voiced chord is in.

        The first note is taken as the root; the inversion is how many
        chord tones sound below it.

        Args:
            notes: MIDI note numbers, root first

        Returns:
            JSON string with the inversion number and label

        Example:
            theory_chord_inversion(notes=[64, 67, 60])
        """
        try:
            n = inversion_number(notes)
            return json.dumps(
                {"status": "success", "inversion": n, "label": inversion_label(n)}
            )
        except TheoryError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to compute inversion")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_chord_inversion"] = theory_chord_inversion

    @mcp.tool  # type: ignore[arg-type]
    async def theory_invert_chord(notes: list[int], inversion: int) -> str:
        """
        Voice a chord in a given inversion.

        Sorts the notes ascending and rotates them left by the inversion
        number (wrapping past the chord length).

        Args:
            notes: MIDI note numbers
            inversion: 0 = root position, 1 = first inversion, ...

        Returns:
            JSON string with the rotated notes

        Example:
            theory_invert_chord(notes=[60, 64, 67], inversion=1)
        """
        try:
            inverted = invert_as_new(notes, inversion)
            return json.dumps(
                {
                    "status": "success",
                    "midi": list(inverted),
                    "inversion": inversion % len(inverted) if len(inverted) else 0,
                }
            )
        except TheoryError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to invert chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_invert_chord"] = theory_invert_chord

    return tools
