"""
Constants and enums for the theory system.

No magic numbers - the MIDI band, the concert-pitch reference and the
standard messages all live here.
"""

from enum import Enum
from pathlib import Path
from typing import Literal

# MIDI note number band
MIDI_MIN = 0
MIDI_MAX = 127

# Octave band of the MIDI range (C-1 = 0, G9 = 127)
OCTAVE_MIN = -1
OCTAVE_MAX = 9

SEMITONES_PER_OCTAVE = 12

# Concert pitch reference: A4 = 440 Hz
A4_MIDI = 69
A4_FREQUENCY = 440.0

# Returned in FrettedNote fields when a fret is not part of the collection
UNUSED = -1

# Persisted table file names (library and project directories)
CHORDS_FILE = "chords.yaml"
SCALES_FILE = "scales.yaml"
TUNINGS_FILE = "tunings.yaml"

# Built-in tables shipped with the package
LIBRARY_PATH = Path(__file__).parent / "library"


class CollectionKind(str, Enum):
    """Provenance of a pitch collection."""

    CHORD = "chord"
    SCALE = "scale"
    COLLECTION = "collection"


class StringGauge(str, Enum):
    """Gauge category of an instrument string."""

    THIN = "thin"
    MEDIUM = "medium"
    THICK = "thick"
    BIG = "big"


# Formula table names
FormulaTable = Literal["chords", "scales"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NAME = "Invalid note name: '{name}'. Expected one of {names}."
    MIDI_OUT_OF_RANGE = "MIDI note number {mnn} is outside {low}..{high}."
    PITCH_OUT_OF_RANGE = "{name}{octave} is outside the MIDI range (mnn {mnn})."
    INVALID_FREQUENCY = "Invalid frequency: {frequency}. Must be a positive number."
    INVALID_INTERVAL = "Cannot name an interval of {semitones} semitones."
    UNKNOWN_INTERVAL = "Unknown interval name: '{name}'."
    UNKNOWN_STYLE = "Unknown interval style: '{style}'. Expected one of {styles}."
    CHORD_NOT_FOUND = "Chord formula '{name}' not found."
    SCALE_NOT_FOUND = "Scale formula '{name}' not found."
    TUNING_NOT_FOUND = "Tuning '{name}' not found."
    NO_DIRECTION = "Expansion needs a direction: ascending or descending."
    CONFLICTING_DIRECTION = "Expansion cannot be both ascending and descending."
    DESCENDING_UNSUPPORTED = "Descending expansion is not supported."
    EMPTY_COLLECTION = "Cannot take the inversion of an empty collection."
    BAD_TABLE_FILE = "Could not read table file {path}: {reason}"


class SuccessMessages:
    """Standardized success messages."""

    FORMULAS_LOADED = "Loaded {chords} chord and {scales} scale formulas."
    TUNINGS_LOADED = "Loaded {count} tunings."
    TABLE_SAVED = "Saved {table} to {path}."
