"""
Interval primitives - Interval, interval naming and distances.

Interval represents the distance between pitches in semitones. Naming
covers 0..24 semitones (unison to double octave) in two styles: the
quality style (minor/major/perfect) and the altered style
(augmented/diminished). Larger and negative distances are folded back
onto that table with an octave count.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import ClassVar, NamedTuple

from chuk_mcp_theory.constants import MIDI_MAX, MIDI_MIN, SEMITONES_PER_OCTAVE, ErrorMessages
from chuk_mcp_theory.errors import (
    InvalidArgumentError,
    InvalidIntervalError,
    InvalidNameError,
    OutOfRangeError,
)

from .pitch import Pitch

# (quality style, altered style) per semitone distance
INTERVAL_NAMES: tuple[tuple[str, str], ...] = (
    ("Perfect Unison", "Diminished 2nd"),  # 0
    ("Minor 2nd", "Augmented Unison"),  # 1
    ("Major 2nd", "Diminished 3rd"),  # 2
    ("Minor 3rd", "Augmented 2nd"),  # 3
    ("Major 3rd", "Diminished 4th"),  # 4
    ("Perfect 4th", "Augmented 3rd"),  # 5
    ("Diminished 5th", "Augmented 4th"),  # 6
    ("Perfect 5th", "Diminished 6th"),  # 7
    ("Minor 6th", "Augmented 5th"),  # 8
    ("Major 6th", "Diminished 7th"),  # 9
    ("Minor 7th", "Augmented 6th"),  # 10
    ("Major 7th", "Diminished Octave"),  # 11
    ("Perfect Octave", "Augmented 7th"),  # 12
    ("Minor 9th", "Augmented Octave"),  # 13
    ("Major 9th", "Diminished 10th"),  # 14
    ("Minor 10th", "Augmented 9th"),  # 15
    ("Major 10th", "Diminished 11th"),  # 16
    ("Perfect 11th", "Augmented 10th"),  # 17
    ("Diminished 12th", "Augmented 11th"),  # 18
    ("Perfect 12th", "Diminished 13th"),  # 19
    ("Minor 13th", "Augmented 12th"),  # 20
    ("Major 13th", "Diminished 14th"),  # 21
    ("Minor 14th", "Augmented 13th"),  # 22
    ("Major 14th", "Diminished 15th"),  # 23
    ("Perfect 15th", "Augmented 14th"),  # 24
)

MAX_NAMED_SEMITONES = len(INTERVAL_NAMES) - 1


class IntervalStyle(str, Enum):
    """Which naming variant to use."""

    QUALITY = "quality"  # minor / major / perfect
    ALTERED = "altered"  # augmented / diminished

    @property
    def column(self) -> int:
        return 0 if self is IntervalStyle.QUALITY else 1

    @classmethod
    def resolve(cls, style: IntervalStyle | str) -> IntervalStyle:
        """Coerce a style value, e.g. 'altered', raising InvalidArgumentError if unknown."""
        try:
            return cls(style)
        except ValueError as e:
            raise InvalidArgumentError(
                ErrorMessages.UNKNOWN_STYLE.format(
                    style=style, styles=", ".join(s.value for s in cls)
                )
            ) from e


class IntervalName(NamedTuple):
    """A resolved interval name with its octave count."""

    octaves: int
    name: str


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]
    MINOR_NINTH: ClassVar[Interval]
    MAJOR_NINTH: ClassVar[Interval]
    PERFECT_ELEVENTH: ClassVar[Interval]
    MAJOR_THIRTEENTH: ClassVar[Interval]
    DOUBLE_OCTAVE: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        """
        return Interval(SEMITONES_PER_OCTAVE - (self._semitones % SEMITONES_PER_OCTAVE))

    def name(self, style: IntervalStyle = IntervalStyle.QUALITY) -> IntervalName:
        """Resolve this interval's name and octave count."""
        return interval_name(self._semitones, style)

    @classmethod
    def between(cls, a: Pitch | int, b: Pitch | int) -> Interval:
        """Signed interval from a to b."""
        return cls(semitones_between(a, b))

    @classmethod
    def parse(cls, name: str) -> Interval:
        """
        Parse an interval name in either style, e.g. 'Major 3rd' or 'augmented 4th'.

        Only the 0..24 semitone table is searched. Case and extra
        whitespace are ignored.
        """
        wanted = " ".join(name.split()).lower()
        for style in IntervalStyle:
            for semitones, names in enumerate(INTERVAL_NAMES):
                if names[style.column].lower() == wanted:
                    return cls(semitones)
        raise InvalidNameError(ErrorMessages.UNKNOWN_INTERVAL.format(name=name))

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __sub__(self, other: Interval) -> Interval:
        """Subtract an interval from another."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones - other._semitones)

    def __neg__(self) -> Interval:
        """Negate the interval (descending instead of ascending)."""
        return Interval(-self._semitones)

    def __mul__(self, n: int) -> Interval:
        """Multiply an interval (e.g., two octaves)."""
        if not isinstance(n, int):
            return NotImplemented
        return Interval(self._semitones * n)

    def __rmul__(self, n: int) -> Interval:
        """Right multiply."""
        return self.__mul__(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Human-readable interval name."""
        try:
            resolved = self.name()
        except InvalidIntervalError:
            return f"{self._semitones} semitones"
        if resolved.octaves == 0:
            return resolved.name
        return f"{resolved.name} ({resolved.octaves:+d} oct)"


# Initialize class constants after class is defined
Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)
Interval.MINOR_NINTH = Interval(13)
Interval.MAJOR_NINTH = Interval(14)
Interval.PERFECT_ELEVENTH = Interval(17)
Interval.MAJOR_THIRTEENTH = Interval(21)
Interval.DOUBLE_OCTAVE = Interval(24)


def _mnn_of(value: Pitch | int) -> int:
    return value.mnn if isinstance(value, Pitch) else value


def semitones_between(a: Pitch | int, b: Pitch | int) -> int:
    """
    Signed semitone distance from a to b (b - a).

    Accepts Pitches or raw MIDI note numbers; raw numbers must be 0..127.
    """
    a_mnn, b_mnn = _mnn_of(a), _mnn_of(b)
    for mnn in (a_mnn, b_mnn):
        if not MIDI_MIN <= mnn <= MIDI_MAX:
            raise OutOfRangeError(
                ErrorMessages.MIDI_OUT_OF_RANGE.format(mnn=mnn, low=MIDI_MIN, high=MIDI_MAX)
            )
    return b_mnn - a_mnn


def interval_name(
    semitones: int, style: IntervalStyle | str = IntervalStyle.QUALITY
) -> IntervalName:
    """
    Name a signed semitone distance.

    0..24 are named directly. 25..127 report semitones // 12 octaves and
    are named from the table at semitones % 24. Descending distances name
    the inversion of the remainder within the octave, with a negative
    octave count: -14 is (-2, 'Minor 7th').

    Args:
        semitones: Signed distance, -127..127
        style: Quality or altered naming; unknown values raise InvalidArgumentError

    Returns:
        IntervalName(octaves, name)
    """
    column = IntervalStyle.resolve(style).column

    if 0 <= semitones <= MAX_NAMED_SEMITONES:
        return IntervalName(0, INTERVAL_NAMES[semitones][column])

    if MAX_NAMED_SEMITONES < semitones <= MIDI_MAX:
        # Octave count uses 12 while the name wraps at 24; fixtures rely on both
        octaves = semitones // SEMITONES_PER_OCTAVE
        remainder = semitones % (2 * SEMITONES_PER_OCTAVE)
        return IntervalName(octaves, INTERVAL_NAMES[remainder][column])

    if -MIDI_MAX <= semitones < 0:
        magnitude = -semitones
        octaves = -(magnitude // SEMITONES_PER_OCTAVE) - 1
        inverted = SEMITONES_PER_OCTAVE - magnitude % SEMITONES_PER_OCTAVE
        return IntervalName(octaves, INTERVAL_NAMES[inverted][column])

    raise InvalidIntervalError(ErrorMessages.INVALID_INTERVAL.format(semitones=semitones))


def mnn_at_interval(root_mnn: int, interval: Interval | str) -> int:
    """
    MIDI note number a named interval above a root.

    No range check: the result may fall outside 0..127.
    """
    if isinstance(interval, str):
        interval = Interval.parse(interval)
    return root_mnn + interval.semitones


def describe_interval(
    a: Pitch | int, b: Pitch | int, style: IntervalStyle | str = IntervalStyle.QUALITY
) -> dict[str, int | str]:
    """Distance and name between two pitches, ready for display."""
    semitones = semitones_between(a, b)
    resolved = interval_name(semitones, style)
    return {
        "from": _mnn_of(a),
        "to": _mnn_of(b),
        "semitones": semitones,
        "octaves": resolved.octaves,
        "name": resolved.name,
    }
