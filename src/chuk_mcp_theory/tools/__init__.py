"""
MCP tool implementations.

Tools are organized by domain:
- pitch - Pitch conversion
- formulas - Chord/scale expansion and inversion
- intervals - Interval distance and naming
- fretboard - Tunings and fingerings
"""

from chuk_mcp_theory.tools.formulas import register_formula_tools
from chuk_mcp_theory.tools.fretboard import register_fretboard_tools
from chuk_mcp_theory.tools.intervals import register_interval_tools
from chuk_mcp_theory.tools.pitch import register_pitch_tools

__all__ = [
    "register_formula_tools",
    "register_fretboard_tools",
    "register_interval_tools",
    "register_pitch_tools",
]
