"""
Chord inversion - detecting and applying rotations of a chord.

An inversion is a rotation of the sorted chord tones so that a non-root
member sounds lowest. The root is the collection's first element (formula
degree 0), not its lowest note, so the inversion number is where that
first element lands once the notes are sorted.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.errors import InvalidArgumentError

from .collection import PitchCollection

_ORDINALS = {1: "1st", 2: "2nd", 3: "3rd"}


def inversion_number(chord: Sequence[int] | PitchCollection) -> int:
    """
    How many chord tones have been rotated below the root.

    0 = root position, 1 = first inversion, and so on. Works on a sorted
    scratch copy; the chord itself is left untouched.

    With duplicate pitches the first matching position wins, so rotations
    that only move a doubled root are not told apart:
    inversion_number([60, 64, 60]) == 0.

    Examples:
        inversion_number([60, 64, 67]) == 0
        inversion_number([64, 67, 60]) == 1
        inversion_number([67, 60, 64]) == 2
    """
    notes = list(chord)
    if not notes:
        raise InvalidArgumentError(ErrorMessages.EMPTY_COLLECTION)
    return sorted(notes).index(notes[0])


def invert_in_place(chord: MutableSequence[int] | PitchCollection, n: int) -> None:
    """
    Sort the chord ascending, then rotate it left by n positions.

    Mutates the caller's storage. n wraps modulo the chord length.
    """
    if len(chord) == 0:
        return
    if isinstance(chord, PitchCollection):
        chord.sort()
        notes = chord.notes
    else:
        notes = chord
        notes[:] = sorted(notes)

    shift = n % len(notes)
    notes[:] = notes[shift:] + notes[:shift]


def invert_as_new(chord: Sequence[int] | PitchCollection, n: int) -> PitchCollection:
    """
    Same transform as invert_in_place, into a new collection.

    The original is untouched. invert_as_new(chord, 0) is the chord sorted
    ascending. A PitchCollection keeps its tag and name.
    """
    if isinstance(chord, PitchCollection):
        result = chord.copy()
    else:
        result = PitchCollection.chord(chord)
    invert_in_place(result, n)
    return result


def inversions(chord: Sequence[int] | PitchCollection) -> list[PitchCollection]:
    """Every rotation of the chord, root position first."""
    return [invert_as_new(chord, n) for n in range(len(chord))]


def inversion_label(n: int) -> str:
    """Human label for an inversion number."""
    if n == 0:
        return "root position"
    suffix = _ORDINALS.get(n, f"{n}th")
    return f"{suffix} inversion"
