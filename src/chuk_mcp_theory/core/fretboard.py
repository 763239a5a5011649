"""
Fretboard fingering - mapping a pitch collection onto a tuning.

For every string and every fret the generator records whether the fretted
pitch belongs to the collection and, if so, which formula degree it is.
It does not choose fingers; the finger field is left unset.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import SEMITONES_PER_OCTAVE, UNUSED
from chuk_mcp_theory.errors import AllocationFailureError

from .collection import PitchCollection
from .pitch import NOTE_NAMES

if TYPE_CHECKING:
    from chuk_mcp_theory.models.tuning import Tuning


@dataclass(frozen=True)
class FrettedNote:
    """
    One fret position on one string.

    mnn, interval_index, string and fret are all -1 when the fret's pitch
    is not in the queried collection. string is 1-based.
    """

    mnn: int
    interval_index: int
    string: int
    fret: int
    finger: int | None = None

    @classmethod
    def unused(cls) -> FrettedNote:
        """Sentinel for a fret whose pitch is not in the collection."""
        return cls(UNUSED, UNUSED, UNUSED, UNUSED)

    @property
    def is_used(self) -> bool:
        return self.mnn != UNUSED

    @property
    def note_name(self) -> str | None:
        """Scientific pitch name, or None for the sentinel."""
        if not self.is_used:
            return None
        name = NOTE_NAMES[self.mnn % SEMITONES_PER_OCTAVE]
        return f"{name}{self.mnn // SEMITONES_PER_OCTAVE - 1}"


@dataclass
class Fingering:
    """
    Per-string, per-fret annotation of a collection on a tuning.

    rows[s][f] is the FrettedNote for string s + 1 at fret f. Each row is
    as long as that string's fret count.
    """

    tuning_name: str
    rows: list[list[FrettedNote]] = field(default_factory=list)

    def __getitem__(self, string_index: int) -> list[FrettedNote]:
        return self.rows[string_index]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[list[FrettedNote]]:
        return iter(self.rows)

    def on_string(self, string_number: int) -> list[FrettedNote]:
        """Row for a 1-based string number."""
        return self.rows[string_number - 1]

    def positions(self) -> list[FrettedNote]:
        """Matched notes only, in string then fret order."""
        return [note for row in self.rows for note in row if note.is_used]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary of matched positions."""
        return {
            "tuning": self.tuning_name,
            "strings": len(self.rows),
            "positions": [
                {
                    "string": note.string,
                    "fret": note.fret,
                    "mnn": note.mnn,
                    "note": note.note_name,
                    "degree": note.interval_index,
                }
                for note in self.positions()
            ],
        }


def fingering_for(tuning: Tuning, collection: Sequence[int] | PitchCollection) -> Fingering:
    """
    Map a pitch collection onto every fret of a tuning.

    For string s with open note o, fret f holds o + f. If that pitch is in
    the collection (first match wins) the fret records it with its
    collection index as the degree; otherwise it holds the unused sentinel.
    A string with no matches yields an all-sentinel row.

    Args:
        tuning: Instrument tuning
        collection: Chord, scale or any MIDI note sequence

    Returns:
        Fingering with one row per string
    """
    notes = list(collection)
    try:
        rows: list[list[FrettedNote]] = []
        for s, string in enumerate(tuning.strings):
            open_mnn = string.open_mnn
            row: list[FrettedNote] = []
            for fret in range(string.number_of_frets):
                candidate = open_mnn + fret
                if candidate in notes:
                    row.append(FrettedNote(candidate, notes.index(candidate), s + 1, fret))
                else:
                    row.append(FrettedNote.unused())
            rows.append(row)
    except MemoryError as e:
        raise AllocationFailureError(f"Could not allocate fingering for {tuning.name}") from e

    return Fingering(tuning.name, rows)


def render_fingering(fingering: Fingering, max_frets: int | None = None) -> str:
    """
    Plain-text fretboard: one line per string, degree numbers on matched
    frets (1 = root) and '-' elsewhere.
    """
    lines = []
    for s, row in enumerate(fingering.rows):
        shown = row if max_frets is None else row[:max_frets]
        cells = [
            f"{note.interval_index + 1:>2}" if note.is_used else " -" for note in shown
        ]
        lines.append(f"{s + 1:>2} |" + "|".join(cells) + "|")
    return "\n".join(lines)
