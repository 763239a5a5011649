"""
Pitch tools - MCP tools for pitch conversion.

Tools for resolving a pitch from a note name and octave, a MIDI note
number, or a frequency.
"""

from __future__ import annotations

import json
import logging
import math
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.core.pitch import (
    Pitch,
    pitch_from_frequency,
    pitch_from_mnn,
    pitch_from_name_octave,
)
from chuk_mcp_theory.errors import TheoryError

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def pitch_to_dict(pitch: Pitch) -> dict[str, Any]:
    """JSON-ready view of a pitch."""
    return {
        "name": pitch.name,
        "octave": pitch.octave,
        "midi": pitch.mnn,
        "frequency": round(pitch.frequency, 4),
        "label": str(pitch),
    }


def register_pitch_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch conversion tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_pitch_from_name(name: str, octave: int) -> str:
        """
        Resolve a pitch from its note name and octave.

        Args:
            name: Note name, one of C C# D D# E F F# G G# A A# B
            octave: Octave number (-1 to 9, C4 = middle C)

        Returns:
            JSON string with name, octave, MIDI number and frequency

        Example:
            theory_pitch_from_name(name="A", octave=4)
        """
        try:
            pitch = pitch_from_name_octave(name, octave)
            return json.dumps({"status": "success", "pitch": pitch_to_dict(pitch)})
        except TheoryError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to resolve pitch from name")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_pitch_from_name"] = theory_pitch_from_name

    @mcp.tool  # type: ignore[arg-type]
    async def theory_pitch_from_midi(midi: int) -> str:
        """
        Resolve a pitch from a MIDI note number.

        Args:
            midi: MIDI note number (0-127, 60 = C4)

        Returns:
            JSON string with name, octave, MIDI number and frequency

        Example:
            theory_pitch_from_midi(midi=69)
        """
        try:
            pitch = pitch_from_mnn(midi)
            return json.dumps({"status": "success", "pitch": pitch_to_dict(pitch)})
        except TheoryError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to resolve pitch from MIDI number")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_pitch_from_midi"] = theory_pitch_from_midi

    @mcp.tool  # type: ignore[arg-type]
    async def theory_pitch_from_frequency(frequency: float) -> str:
        """
        Resolve the nearest pitch to a frequency.

        The frequency is rounded to the nearest semitone; the response
        includes the exact frequency of that semitone and the cents offset
        of the input from it.

        Args:
            frequency: Frequency in Hz (must be positive)

        Returns:
            JSON string with the nearest pitch and the cents offset

        Example:
            theory_pitch_from_frequency(frequency=445.0)
        """
        try:
            pitch = pitch_from_frequency(frequency)
            cents = 1200 * math.log2(frequency / pitch.frequency)
            return json.dumps(
                {
                    "status": "success",
                    "pitch": pitch_to_dict(pitch),
                    "cents": round(cents, 2),
                }
            )
        except TheoryError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to resolve pitch from frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_pitch_from_frequency"] = theory_pitch_from_frequency

    return tools
