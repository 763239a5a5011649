"""
Pitch collections and formula expansion.

A PitchCollection is an ordered list of MIDI note numbers anchored at a
concrete octave - an unrealized chord or scale. Order is meaningful:
position i is the formula degree the note came from. Duplicates and
unsorted orders are both valid (an inverted chord is not ascending).

Chords and scales share one representation and are told apart only by
their provenance tag.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import overload

from chuk_mcp_theory.constants import CollectionKind, ErrorMessages
from chuk_mcp_theory.errors import InvalidArgumentError
from chuk_mcp_theory.models.formula import Formula

from .pitch import Pitch


@dataclass(eq=False)
class PitchCollection:
    """
    Ordered MIDI note numbers with a provenance tag.

    Mutable: invert_in_place rotates the caller's collection. Compares
    equal to another collection with the same notes, or to a plain list
    or tuple of the same notes.
    """

    notes: list[int] = field(default_factory=list)
    kind: CollectionKind = CollectionKind.COLLECTION
    name: str = ""

    @classmethod
    def chord(cls, notes: Iterable[int], name: str = "") -> PitchCollection:
        """Create a collection tagged as a chord."""
        return cls(list(notes), CollectionKind.CHORD, name)

    @classmethod
    def scale(cls, notes: Iterable[int], name: str = "") -> PitchCollection:
        """Create a collection tagged as a scale."""
        return cls(list(notes), CollectionKind.SCALE, name)

    @property
    def root(self) -> int | None:
        """First note (formula degree 0), or None if empty."""
        return self.notes[0] if self.notes else None

    def pitches(self) -> list[Pitch]:
        """Resolve every note to a Pitch. Raises OutOfRangeError past mnn 127."""
        return [Pitch.from_mnn(mnn) for mnn in self.notes]

    def note_names(self) -> list[str]:
        """Scientific pitch names, e.g. ['C4', 'E4', 'G4']."""
        return [str(p) for p in self.pitches()]

    def copy(self) -> PitchCollection:
        """Independent copy with the same tag."""
        return PitchCollection(list(self.notes), self.kind, self.name)

    def sort(self) -> None:
        """Sort ascending in place."""
        self.notes.sort()

    def index(self, mnn: int) -> int:
        """Position of the first occurrence of a note."""
        return self.notes.index(mnn)

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[int]:
        return iter(self.notes)

    def __contains__(self, mnn: object) -> bool:
        return mnn in self.notes

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> list[int]: ...

    def __getitem__(self, index: int | slice) -> int | list[int]:
        return self.notes[index]

    def __setitem__(self, index: int | slice, value: int | Iterable[int]) -> None:
        self.notes[index] = value  # type: ignore[index,assignment]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PitchCollection):
            return self.notes == other.notes
        if isinstance(other, (list, tuple)):
            return self.notes == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"PitchCollection({self.notes!r}, {self.kind.value!r})"


def expand(
    root: Pitch,
    formula: Formula | Sequence[int],
    *,
    kind: CollectionKind = CollectionKind.COLLECTION,
    ascending: bool = True,
    descending: bool = False,
) -> PitchCollection:
    """
    Expand a formula from a root pitch.

    result[i] = root.mnn + offset[i]. Values past MIDI 127 are kept;
    they simply never match a fret.

    Args:
        root: Root pitch (formula degree 0)
        formula: A Formula or a plain offset sequence
        kind: Provenance tag for the result
        ascending: Stack offsets upward from the root
        descending: Stack offsets downward (not supported)

    Returns:
        A new PitchCollection in formula order
    """
    if ascending and descending:
        raise InvalidArgumentError(ErrorMessages.CONFLICTING_DIRECTION)
    if not ascending and not descending:
        raise InvalidArgumentError(ErrorMessages.NO_DIRECTION)
    if descending:
        raise InvalidArgumentError(ErrorMessages.DESCENDING_UNSUPPORTED)

    if isinstance(formula, Formula):
        offsets: Sequence[int] = formula.offsets
        name = formula.name
    else:
        offsets = formula
        name = ""

    return PitchCollection([root.mnn + k for k in offsets], kind, name)
