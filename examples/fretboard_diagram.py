#!/usr/bin/env python3
"""
Example: Print chord and scale diagrams for a guitar.

This walks the whole core: resolve a root pitch, expand formulas from the
built-in library, look at inversions and intervals, then map the result
onto a tuning.

Usage:
    python examples/fretboard_diagram.py
"""

from chuk_mcp_theory.core import (
    fingering_for,
    interval_name,
    invert_as_new,
    inversion_label,
    inversion_number,
    pitch_from_name_octave,
    render_fingering,
    semitones_between,
)
from chuk_mcp_theory.stores import FormulaStore, TuningStore


def main() -> None:
    """Print example diagrams."""
    formulas = FormulaStore().load()
    tunings = TuningStore().load()
    guitar = tunings.get("guitar_standard")

    # Example 1: A minor chord, root position and inversions
    root = pitch_from_name_octave("A", 2)
    chord = formulas.expand_chord(root, "minor")
    print(f"A minor from {root}: {chord.note_names()}")
    for n in range(len(chord)):
        voiced = invert_as_new(chord, n)
        print(f"  {inversion_label(inversion_number(voiced))}: {voiced.note_names()}")

    print(f"\n{guitar.name} ({' '.join(guitar.open_notes)})")
    print(render_fingering(fingering_for(guitar, chord), max_frets=13))

    # Example 2: Intervals inside the chord
    print("\nIntervals from the root:")
    for mnn in chord[1:]:
        octaves, name = interval_name(semitones_between(chord.root, mnn))
        print(f"  {name} (octaves: {octaves})")

    # Example 3: E minor pentatonic across two octaves
    scale = formulas.expand_scale(pitch_from_name_octave("E", 2), "minor_pentatonic")
    upper = formulas.expand_scale(pitch_from_name_octave("E", 3), "minor_pentatonic")
    both = list(scale) + list(upper)
    print(f"\nE minor pentatonic: {both}")
    print(render_fingering(fingering_for(guitar, both), max_frets=13))


if __name__ == "__main__":
    main()
