"""
Interval tools - MCP tools for interval distance and naming.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.core.interval import (
    describe_interval,
    interval_name,
    mnn_at_interval,
)
from chuk_mcp_theory.core.pitch import parse_pitch
from chuk_mcp_theory.errors import TheoryError

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_interval_between(
        from_note: str,
        to_note: str,
        style: str = "quality",
    ) -> str:
        """
        Measure and name the interval between two pitches.

        Descending intervals are named by their inversion with a negative
        octave count.

        Args:
            from_note: Starting pitch in scientific notation (e.g., 'C4')
            to_note: Target pitch (e.g., 'E5')
            style: 'quality' (major/minor/perfect) or 'altered' (augmented/diminished)

        Returns:
            JSON string with semitones, octaves and interval name

        Example:
            theory_interval_between(from_note="C4", to_note="D4")
        """
        try:
            a = parse_pitch(from_note)
            b = parse_pitch(to_note)
            result = describe_interval(a, b, style)
            return json.dumps({"status": "success", "interval": result})
        except TheoryError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to measure interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_interval_between"] = theory_interval_between

    @mcp.tool  # type: ignore[arg-type]
    async def theory_interval_name(semitones: int, style: str = "quality") -> str:
        """
        Name a signed semitone distance.

        Args:
            semitones: Distance in semitones (-127 to 127)
            style: 'quality' or 'altered'

        Returns:
            JSON string with octaves and interval name

        Example:
            theory_interval_name(semitones=14)
        """
        try:
            resolved = interval_name(semitones, style)
            return json.dumps(
                {
                    "status": "success",
                    "semitones": semitones,
                    "octaves": resolved.octaves,
                    "name": resolved.name,
                }
            )
        except TheoryError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to name interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_interval_name"] = theory_interval_name

    @mcp.tool  # type: ignore[arg-type]
    async def theory_note_at_interval(root: int, interval: str) -> str:
        """
        Find the MIDI note a named interval above a root.

        Args:
            root: Root MIDI note number
            interval: Interval name in either style (e.g., 'Perfect 5th')

        Returns:
            JSON string with the resulting MIDI note number

        Example:
            theory_note_at_interval(root=60, interval="Perfect 5th")
        """
        try:
            return json.dumps(
                {"status": "success", "midi": mnn_at_interval(root, interval)}
            )
        except TheoryError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to resolve interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_note_at_interval"] = theory_note_at_interval

    return tools
