"""
Core theory primitives - the calculation engine.

Pure functions over caller-owned values:
- Pitch: name/octave <-> MIDI note number <-> frequency
- PitchCollection: ordered notes of a chord or scale, built by expand()
- Inversion: detect and apply chord rotations
- Interval: semitone distances and their names
- Fingering: a collection mapped onto a tuning's frets
"""

from chuk_mcp_theory.core.collection import PitchCollection, expand
from chuk_mcp_theory.core.fretboard import (
    Fingering,
    FrettedNote,
    fingering_for,
    render_fingering,
)
from chuk_mcp_theory.core.interval import (
    INTERVAL_NAMES,
    Interval,
    IntervalName,
    IntervalStyle,
    describe_interval,
    interval_name,
    mnn_at_interval,
    semitones_between,
)
from chuk_mcp_theory.core.inversion import (
    invert_as_new,
    invert_in_place,
    inversion_label,
    inversion_number,
    inversions,
)
from chuk_mcp_theory.core.pitch import (
    NOTE_NAMES,
    Pitch,
    PitchClass,
    frequency,
    midi_note_number,
    parse_pitch,
    pitch_from_frequency,
    pitch_from_mnn,
    pitch_from_name_octave,
)

__all__ = [
    # Pitch
    "NOTE_NAMES",
    "Pitch",
    "PitchClass",
    "frequency",
    "midi_note_number",
    "parse_pitch",
    "pitch_from_frequency",
    "pitch_from_mnn",
    "pitch_from_name_octave",
    # Collection
    "PitchCollection",
    "expand",
    # Inversion
    "invert_as_new",
    "invert_in_place",
    "inversion_label",
    "inversion_number",
    "inversions",
    # Interval
    "INTERVAL_NAMES",
    "Interval",
    "IntervalName",
    "IntervalStyle",
    "describe_interval",
    "interval_name",
    "mnn_at_interval",
    "semitones_between",
    # Fretboard
    "Fingering",
    "FrettedNote",
    "fingering_for",
    "render_fingering",
]
