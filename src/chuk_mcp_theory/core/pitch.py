"""
Pitch primitives - PitchClass and Pitch.

These are the foundational types for all pitch-related operations.
PitchClass represents the 12 chromatic pitches (octave-independent).
Pitch is a concrete pitch: name + octave, MIDI note number and frequency,
always built by one of the three conversion entry points.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import IntEnum

from chuk_mcp_theory.constants import (
    A4_FREQUENCY,
    A4_MIDI,
    MIDI_MAX,
    MIDI_MIN,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chuk_mcp_theory.errors import (
    InvalidFrequencyError,
    InvalidNameError,
    OutOfRangeError,
)

# Display names (module level to avoid IntEnum member issues)
NOTE_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

# Scientific pitch notation, e.g. "C#4", "A-1"
_SPN_PATTERN = re.compile(r"^\s*([A-Ga-g]#?)\s*(-?\d+)\s*$")


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Only sharp spellings are recognized.
    """

    C = 0
    Cs = 1  # C#
    D = 2
    Ds = 3  # D#
    E = 4
    F = 5
    Fs = 6  # F#
    G = 7
    Gs = 8  # G#
    A = 9
    As = 10  # A#
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * SEMITONES_PER_OCTAVE

    def spell(self) -> str:
        """Get human-readable name."""
        return NOTE_NAMES[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % SEMITONES_PER_OCTAVE)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'c#', ' F# '."""
        normalized = name.strip().upper()
        if normalized in NOTE_NAMES:
            return cls(NOTE_NAMES.index(normalized))
        raise InvalidNameError(
            ErrorMessages.INVALID_NAME.format(name=name, names=", ".join(NOTE_NAMES))
        )


def _check_mnn(mnn: int) -> None:
    if not MIDI_MIN <= mnn <= MIDI_MAX:
        raise OutOfRangeError(
            ErrorMessages.MIDI_OUT_OF_RANGE.format(mnn=mnn, low=MIDI_MIN, high=MIDI_MAX)
        )


def midi_note_number(name: str, octave: int) -> int:
    """
    MIDI note number for a note name and octave.

    No range check: C10 gives 132. Use pitch_from_name_octave for a
    validated Pitch.
    """
    return PitchClass.parse(name).value + SEMITONES_PER_OCTAVE * (octave + 1)


def frequency(mnn: int) -> float:
    """Equal-tempered frequency in Hz of a MIDI note number (A4 = 440 Hz)."""
    _check_mnn(mnn)
    return A4_FREQUENCY * 2 ** ((mnn - A4_MIDI) / SEMITONES_PER_OCTAVE)


@dataclass(frozen=True)
class Pitch:
    """
    A concrete pitch.

    Invariants:
        mnn == PitchClass.parse(name) + 12 * (octave + 1)
        frequency == 440 * 2 ** ((mnn - 69) / 12)

    Immutable and hashable. Build one with from_name_octave, from_mnn or
    from_frequency rather than calling the constructor directly.
    """

    name: str
    octave: int
    mnn: int
    frequency: float

    @classmethod
    def from_mnn(cls, mnn: int) -> Pitch:
        """Resolve a MIDI note number (0-127)."""
        _check_mnn(mnn)
        return cls(
            name=NOTE_NAMES[mnn % SEMITONES_PER_OCTAVE],
            octave=mnn // SEMITONES_PER_OCTAVE - 1,
            mnn=mnn,
            frequency=frequency(mnn),
        )

    @classmethod
    def from_name_octave(cls, name: str, octave: int) -> Pitch:
        """Resolve a note name and octave, e.g. ('C#', 4)."""
        mnn = midi_note_number(name, octave)
        if not MIDI_MIN <= mnn <= MIDI_MAX:
            raise OutOfRangeError(
                ErrorMessages.PITCH_OUT_OF_RANGE.format(
                    name=name.strip().upper(), octave=octave, mnn=mnn
                )
            )
        return cls.from_mnn(mnn)

    @classmethod
    def from_frequency(cls, freq: float) -> Pitch:
        """
        Resolve the nearest MIDI note to a frequency.

        Rounds to the nearest semitone (halves go up), so converting a
        pitch to frequency and back is exact but an arbitrary frequency
        loses its cent offset.
        """
        valid_type = isinstance(freq, (int, float)) and not isinstance(freq, bool)
        if not valid_type or not math.isfinite(freq) or freq <= 0:
            raise InvalidFrequencyError(ErrorMessages.INVALID_FREQUENCY.format(frequency=freq))

        exact = SEMITONES_PER_OCTAVE * math.log2(freq / A4_FREQUENCY) + A4_MIDI
        return cls.from_mnn(math.floor(exact + 0.5))

    @property
    def pitch_class(self) -> PitchClass:
        """Octave-independent pitch class."""
        return PitchClass.from_midi(self.mnn)

    def transpose(self, semitones: int) -> Pitch:
        """Transpose by a number of semitones, staying within the MIDI range."""
        return Pitch.from_mnn(self.mnn + semitones)

    def __str__(self) -> str:
        return f"{self.name}{self.octave}"


def pitch_from_name_octave(name: str, octave: int) -> Pitch:
    """Pitch for a note name and octave."""
    return Pitch.from_name_octave(name, octave)


def pitch_from_mnn(mnn: int) -> Pitch:
    """Pitch for a MIDI note number."""
    return Pitch.from_mnn(mnn)


def pitch_from_frequency(freq: float) -> Pitch:
    """Pitch nearest to a frequency in Hz."""
    return Pitch.from_frequency(freq)


def parse_pitch(text: str) -> Pitch:
    """
    Parse scientific pitch notation like 'C4', 'f#2' or 'G-1'.

    Args:
        text: Note name immediately followed by an octave number

    Returns:
        The resolved Pitch
    """
    match = _SPN_PATTERN.match(text)
    if match is None:
        raise InvalidNameError(f"Invalid pitch: '{text}'. Expected a note and octave like 'C#4'.")
    return Pitch.from_name_octave(match.group(1), int(match.group(2)))
