"""
Tuning models - the strings of a fretted instrument.

A tuning is an ordered list of strings. String 1 is the first entry as
stored; each string knows its open note, how many frets it has and its
gauge category.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_theory.constants import StringGauge
from chuk_mcp_theory.core.pitch import NOTE_NAMES, midi_note_number


class InstrumentString(BaseModel):
    """One string: open note, fret count and gauge."""

    open_note_name: str = Field(..., description="Open note, one of the 12 sharp spellings")
    open_note_octave: int = Field(..., description="Octave of the open note")
    number_of_frets: int = Field(..., ge=0, description="Frets on this string")
    string_gauge: StringGauge = Field(default=StringGauge.MEDIUM)

    model_config = {"frozen": True}

    @field_validator("open_note_name")
    @classmethod
    def validate_open_note_name(cls, v: str) -> str:
        normalized = v.strip().upper()
        if normalized not in NOTE_NAMES:
            raise ValueError(f"Invalid note name: {v}")
        return normalized

    @property
    def open_mnn(self) -> int:
        """MIDI note number of the open string."""
        return midi_note_number(self.open_note_name, self.open_note_octave)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "open_note_name": self.open_note_name,
            "open_note_octave": self.open_note_octave,
            "number_of_frets": self.number_of_frets,
            "string_gauge": self.string_gauge.value,
        }


class Tuning(BaseModel):
    """A named instrument tuning."""

    name: str = Field(..., description="Tuning name, e.g. 'guitar standard'")
    strings: tuple[InstrumentString, ...] = Field(default=())

    model_config = {"frozen": True}

    @property
    def string_count(self) -> int:
        """Number of strings."""
        return len(self.strings)

    @property
    def open_notes(self) -> list[str]:
        """Open notes in string order, e.g. ['E2', 'A2', ...]."""
        return [f"{s.open_note_name}{s.open_note_octave}" for s in self.strings]

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "name": self.name,
            "strings": [s.to_yaml_dict() for s in self.strings],
        }
