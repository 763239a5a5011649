"""
Tests for core theory primitives.

Tests cover:
- PitchClass and Pitch conversions (pitch.py)
- PitchCollection and formula expansion (collection.py)
- Chord inversion (inversion.py)
"""

import math

import pytest

from chuk_mcp_theory.constants import CollectionKind
from chuk_mcp_theory.core import (
    Pitch,
    PitchClass,
    PitchCollection,
    expand,
    frequency,
    invert_as_new,
    invert_in_place,
    inversion_label,
    inversion_number,
    inversions,
    midi_note_number,
    parse_pitch,
    pitch_from_frequency,
    pitch_from_mnn,
    pitch_from_name_octave,
)
from chuk_mcp_theory.errors import (
    ErrorKind,
    InvalidArgumentError,
    InvalidFrequencyError,
    InvalidNameError,
    OutOfRangeError,
    TheoryError,
)
from chuk_mcp_theory.models import Formula


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.Cs == 1
        assert PitchClass.A == 9
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B

    def test_to_midi(self) -> None:
        """Convert to MIDI note numbers."""
        assert PitchClass.C.to_midi(4) == 60
        assert PitchClass.A.to_midi(4) == 69
        assert PitchClass.C.to_midi(-1) == 0

    def test_parse_normalizes(self) -> None:
        """Parsing ignores case and whitespace."""
        assert PitchClass.parse("c#") == PitchClass.Cs
        assert PitchClass.parse(" F# ") == PitchClass.Fs
        assert PitchClass.parse("a") == PitchClass.A

    def test_parse_rejects_unknown(self) -> None:
        """Only the 12 sharp spellings are recognized."""
        with pytest.raises(InvalidNameError):
            PitchClass.parse("H")
        with pytest.raises(InvalidNameError):
            PitchClass.parse("Db")

    def test_spell(self) -> None:
        """Spell pitch class as string."""
        assert PitchClass.Cs.spell() == "C#"
        assert PitchClass.from_midi(70).spell() == "A#"


class TestPitchConversion:
    """Tests for name/MIDI/frequency conversion."""

    def test_known_pitches(self) -> None:
        """Reference pitches resolve to their MIDI numbers."""
        assert pitch_from_name_octave("A", 4).mnn == 69
        assert pitch_from_name_octave("C#", 8).mnn == 109
        assert pitch_from_name_octave("C", -1).mnn == 0
        assert pitch_from_name_octave("G", 9).mnn == 127

    def test_lowercase_name(self) -> None:
        """Names are uppercased before lookup."""
        pitch = pitch_from_name_octave("f#", 1)
        assert pitch.name == "F#"
        assert pitch.mnn == 30

    def test_invalid_name(self) -> None:
        """Unknown names fail with InvalidNameError."""
        with pytest.raises(InvalidNameError) as exc_info:
            pitch_from_name_octave("X", 4)
        assert exc_info.value.kind == ErrorKind.INVALID_NAME

    def test_name_octave_out_of_range(self) -> None:
        """An octave that pushes past MIDI 127 is rejected."""
        with pytest.raises(OutOfRangeError):
            pitch_from_name_octave("G#", 9)
        with pytest.raises(OutOfRangeError):
            pitch_from_name_octave("C", -2)

    def test_mnn_round_trip(self) -> None:
        """Every MIDI number survives a round trip through name and octave."""
        for mnn in range(128):
            pitch = pitch_from_mnn(mnn)
            assert pitch.mnn == mnn
            assert midi_note_number(pitch.name, pitch.octave) == mnn
            again = pitch_from_name_octave(pitch.name, pitch.octave)
            assert again == pitch

    def test_mnn_out_of_range(self) -> None:
        """MIDI numbers outside 0..127 fail."""
        with pytest.raises(OutOfRangeError):
            pitch_from_mnn(-1)
        with pytest.raises(OutOfRangeError):
            pitch_from_mnn(128)

    def test_octave_of_mnn(self) -> None:
        """Octave is mnn // 12 - 1."""
        assert pitch_from_mnn(0).octave == -1
        assert pitch_from_mnn(60).octave == 4
        assert pitch_from_mnn(59).octave == 3
        assert pitch_from_mnn(59).name == "B"

    def test_frequency_reference(self) -> None:
        """A4 is exactly 440 Hz."""
        assert frequency(69) == 440.0
        assert pitch_from_mnn(69).frequency == 440.0
        assert frequency(81) == pytest.approx(880.0)

    def test_frequency_strictly_increasing(self) -> None:
        """Frequency rises with every semitone."""
        values = [frequency(mnn) for mnn in range(128)]
        assert all(a < b for a, b in zip(values, values[1:], strict=False))

    def test_frequency_out_of_range(self) -> None:
        """Frequency of an invalid MIDI number fails."""
        with pytest.raises(OutOfRangeError):
            frequency(128)

    def test_from_frequency_nearest(self) -> None:
        """Frequencies resolve to the nearest semitone."""
        assert pitch_from_frequency(440.0).mnn == 69
        assert pitch_from_frequency(445.0).mnn == 69
        assert pitch_from_frequency(261.63).mnn == 60
        assert pitch_from_frequency(frequency(70) - 0.5).mnn == 70

    def test_from_frequency_round_trip(self) -> None:
        """Exact semitone frequencies convert back to the same pitch."""
        for mnn in range(128):
            assert pitch_from_frequency(frequency(mnn)).mnn == mnn

    def test_invalid_frequency(self) -> None:
        """Non-positive or non-finite frequencies fail."""
        for bad in (0, -440.0, math.inf, math.nan):
            with pytest.raises(InvalidFrequencyError):
                pitch_from_frequency(bad)

    def test_frequency_outside_midi_band(self) -> None:
        """A valid frequency far above the MIDI range is out of range."""
        with pytest.raises(OutOfRangeError):
            pitch_from_frequency(50000.0)

    def test_pitch_str_and_transpose(self) -> None:
        """Pitches print in scientific notation and transpose."""
        c4 = Pitch.from_name_octave("C", 4)
        assert str(c4) == "C4"
        assert str(c4.transpose(-1)) == "B3"
        assert c4.pitch_class == PitchClass.C

    def test_parse_pitch(self) -> None:
        """Scientific pitch notation is parsed."""
        assert parse_pitch("C#4").mnn == 61
        assert parse_pitch("a-1").mnn == 9
        with pytest.raises(InvalidNameError):
            parse_pitch("C")

    def test_errors_are_value_errors(self) -> None:
        """All theory errors are ValueErrors."""
        with pytest.raises(ValueError):
            pitch_from_mnn(200)
        assert issubclass(OutOfRangeError, TheoryError)


class TestFormulaExpansion:
    """Tests for expand()."""

    def test_major_triad(self) -> None:
        """C4 major triad."""
        root = pitch_from_name_octave("C", 4)
        assert expand(root, [0, 4, 7]) == [60, 64, 67]

    def test_minor_seventh(self) -> None:
        """F#1 minor seventh."""
        root = pitch_from_name_octave("F#", 1)
        formula = Formula(name="minor7", offsets=(0, 3, 7, 10))
        result = expand(root, formula, kind=CollectionKind.CHORD)
        assert result == [30, 33, 37, 40]
        assert result.kind == CollectionKind.CHORD
        assert result.name == "minor7"

    def test_no_clamping(self) -> None:
        """Notes past MIDI 127 are kept."""
        root = pitch_from_name_octave("G", 9)
        assert expand(root, [0, 4, 7]) == [127, 131, 134]

    def test_direction_flags(self) -> None:
        """Missing or conflicting directions are invalid arguments."""
        root = pitch_from_name_octave("C", 4)
        with pytest.raises(InvalidArgumentError):
            expand(root, [0, 4, 7], ascending=False)
        with pytest.raises(InvalidArgumentError):
            expand(root, [0, 4, 7], descending=True)
        with pytest.raises(InvalidArgumentError):
            expand(root, [0, 4, 7], ascending=False, descending=True)


class TestFormula:
    """Tests for Formula validation."""

    def test_valid_formula(self) -> None:
        """Lists are stored as tuples."""
        formula = Formula(name="major", offsets=[0, 4, 7])
        assert formula.offsets == (0, 4, 7)
        assert len(formula) == 3

    def test_must_start_at_root(self) -> None:
        """The first offset must be 0."""
        with pytest.raises(ValueError):
            Formula(name="bad", offsets=[1, 4, 7])

    def test_rejects_negative_and_empty(self) -> None:
        """Offsets are non-negative and non-empty."""
        with pytest.raises(ValueError):
            Formula(name="bad", offsets=[0, -3])
        with pytest.raises(ValueError):
            Formula(name="bad", offsets=[])


class TestPitchCollection:
    """Tests for PitchCollection."""

    def test_tags(self) -> None:
        """Chord and scale constructors tag provenance."""
        assert PitchCollection.chord([60, 64, 67]).kind == CollectionKind.CHORD
        assert PitchCollection.scale([60, 62]).kind == CollectionKind.SCALE
        assert PitchCollection([60]).kind == CollectionKind.COLLECTION

    def test_sequence_behaviour(self) -> None:
        """Collections behave like sequences of MIDI numbers."""
        chord = PitchCollection.chord([64, 67, 60])
        assert len(chord) == 3
        assert chord[0] == 64
        assert 67 in chord
        assert chord.index(60) == 2
        assert chord.root == 64
        assert list(chord) == [64, 67, 60]

    def test_note_names(self) -> None:
        """Notes resolve to scientific pitch names."""
        assert PitchCollection([60, 64, 67]).note_names() == ["C4", "E4", "G4"]


class TestInversion:
    """Tests for chord inversion."""

    def test_inversion_number(self) -> None:
        """Root position and inversions of a C major triad."""
        assert inversion_number([60, 64, 67]) == 0
        assert inversion_number([64, 67, 60]) == 1
        assert inversion_number([67, 60, 64]) == 2

    def test_inversion_number_does_not_mutate(self) -> None:
        """The queried chord keeps its order."""
        chord = PitchCollection.chord([67, 60, 64])
        inversion_number(chord)
        assert chord == [67, 60, 64]

    def test_empty_chord(self) -> None:
        """An empty chord has no inversion."""
        with pytest.raises(InvalidArgumentError):
            inversion_number([])

    def test_invert_in_place(self) -> None:
        """In-place inversion mutates the caller's list."""
        chord = [60, 64, 67]
        invert_in_place(chord, 1)
        assert chord == [64, 67, 60]

    def test_invert_in_place_collection(self) -> None:
        """In-place inversion works on collections too."""
        chord = PitchCollection.chord([67, 60, 64])
        notes = chord.notes
        invert_in_place(chord, 2)
        assert chord == [67, 60, 64]
        assert chord.notes is notes

    def test_invert_wraps(self) -> None:
        """Rotation counts wrap modulo the chord length."""
        assert invert_as_new([60, 64, 67], 3) == [60, 64, 67]
        assert invert_as_new([60, 64, 67], 4) == [64, 67, 60]

    def test_invert_as_new_leaves_original(self) -> None:
        """The source chord is untouched."""
        chord = PitchCollection.chord([67, 60, 64], name="major")
        result = invert_as_new(chord, 1)
        assert chord == [67, 60, 64]
        assert result == [64, 67, 60]
        assert result.kind == CollectionKind.CHORD
        assert result.name == "major"

    def test_invert_zero_sorts(self) -> None:
        """Inversion 0 yields the chord sorted ascending."""
        assert invert_as_new([67, 64, 60, 70], 0) == [60, 64, 67, 70]

    def test_inversion_round_trip(self) -> None:
        """Applying inversion k is detected as inversion k."""
        for chord in ([60, 64, 67], [70, 62, 65, 69], [30, 33, 37, 40, 44]):
            for k in range(len(chord)):
                assert inversion_number(invert_as_new(chord, k)) == k % len(chord)

    def test_inversion_number_with_doubled_root(self) -> None:
        """A doubled root reports the first matching position."""
        voiced = invert_as_new([60, 60, 64], 1)
        assert voiced == [60, 64, 60]
        assert inversion_number(voiced) == 0
        assert inversion_number(invert_as_new([60, 60, 64], 2)) == 2

    def test_inversions_and_labels(self) -> None:
        """All rotations are listed with readable labels."""
        assert [list(c) for c in inversions([60, 64, 67])] == [
            [60, 64, 67],
            [64, 67, 60],
            [67, 60, 64],
        ]
        assert inversion_label(0) == "root position"
        assert inversion_label(1) == "1st inversion"
        assert inversion_label(3) == "3rd inversion"
        assert inversion_label(4) == "4th inversion"
