"""
Pydantic models for the theory system.

This module provides:
- Formula: Chord/scale shape as semitone offsets
- Tuning: Ordered strings of a fretted instrument
- InstrumentString: Open note, fret count and gauge of one string
"""

from chuk_mcp_theory.models.formula import Formula
from chuk_mcp_theory.models.tuning import InstrumentString, StringGauge, Tuning

__all__ = [
    "Formula",
    "InstrumentString",
    "StringGauge",
    "Tuning",
]
