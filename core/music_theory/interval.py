"""
core/music_theory/interval.py — Interval calculator.

An Interval is an ordered pair of pitches (lower, upper). Everything else
is derived on demand:

    diatonic_number   letter-name distance, 1-based (C→E = 3, a "third")
    semitone_count    half steps between the two pitches
    quality           Perfect / Major / Minor / Augmented / Diminished,
                      looked up from (number, semitones) with octaves folded

    Interval(C0, E0).specific_interval() → (3, MAJOR, False)   major third
    Interval(C0, E1).specific_interval() → (3, MAJOR, True)    compound

Argument order never matters: Interval(p1, p2) and Interval(p2, p1) hold
the same pair.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.errors import UndefinedQualityError
from core.music_theory.pitch import SEMITONE, Pitch

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class IntervalQuality(Enum):
    """Interval quality names."""

    PERFECT = "perfect"
    MAJOR = "major"
    MINOR = "minor"
    AUGMENTED = "augmented"
    DIMINISHED = "diminished"


class IntervalStep(Enum):
    """Scale step sizes. The value is the number of semitones."""

    HALF = 1
    WHOLE = 2

    @property
    def semitones(self) -> int:
        return self.value

    @property
    def coordinate(self) -> float:
        """Step size in coordinate units (half = 0.5, whole = 1.0)."""
        return self.value * SEMITONE

    @classmethod
    def from_coordinate(cls, value: float) -> IntervalStep:
        """Map a coordinate step (0.5 or 1.0) to a step size.

        Raises:
            ValueError: For any other value.
        """
        for step in cls:
            if step.coordinate == value:
                return step
        raise ValueError(f"No interval step spans {value} coordinate units")


# ---------------------------------------------------------------------------
# Quality table
# ---------------------------------------------------------------------------

_P = IntervalQuality.PERFECT
_MAJ = IntervalQuality.MAJOR
_MIN = IntervalQuality.MINOR
_AUG = IntervalQuality.AUGMENTED
_DIM = IntervalQuality.DIMINISHED

QUALITY_TABLE: dict[int, dict[int, IntervalQuality]] = {
    1: {0: _P, 1: _AUG},
    2: {0: _DIM, 1: _MIN, 2: _MAJ, 3: _AUG},
    3: {2: _DIM, 3: _MIN, 4: _MAJ, 5: _AUG},
    4: {4: _DIM, 5: _P, 6: _AUG},
    5: {6: _DIM, 7: _P, 8: _AUG},
    6: {7: _DIM, 8: _MIN, 9: _MAJ, 10: _AUG},
    7: {9: _DIM, 10: _MIN, 11: _MAJ, 12: _AUG},
}
"""diatonic number → {semitone count → quality}, unison through seventh."""

INTERVAL_NAMES: dict[int, str] = {
    1: "unison",
    2: "second",
    3: "third",
    4: "fourth",
    5: "fifth",
    6: "sixth",
    7: "seventh",
}

_LETTERS_PER_OCTAVE = 7
_SEMITONES_PER_OCTAVE = 12


def lookup_quality(number: int, semitones: int) -> IntervalQuality:
    """Look up the quality of a simple interval.

    Raises:
        UndefinedQualityError: The pair is not in QUALITY_TABLE
            (e.g. number 1 with 2 semitones).
    """
    quality = QUALITY_TABLE.get(number, {}).get(semitones)
    if quality is None:
        raise UndefinedQualityError(number, semitones)
    return quality


# ---------------------------------------------------------------------------
# SpecificInterval
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SpecificInterval:
    """Number and quality of an interval, with octaves folded away.

    Attributes:
        number:   Simple diatonic number 1–7.
        quality:  Interval quality.
        compound: True when the unfolded interval spans more than 12 semitones.
    """

    number: int
    quality: IntervalQuality
    compound: bool

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'major third', 'compound perfect fifth'."""
        base = f"{self.quality.value} {INTERVAL_NAMES[self.number]}"
        return f"compound {base}" if self.compound else base

    def __iter__(self):
        # unpacks as (number, quality, compound)
        return iter((self.number, self.quality, self.compound))


# ---------------------------------------------------------------------------
# Interval
# ---------------------------------------------------------------------------


class Interval:
    """The distance between two pitches.

    The pair is ordered at construction so ``lower.coordinate <=
    upper.coordinate``. If ``p1 < p2`` then p1 is the lower pitch,
    otherwise p2 is.

    Example:
        >>> iv = Interval(Pitch.parse("C0"), Pitch.parse("E0"))
        >>> iv.diatonic_number(), iv.semitone_count(), iv.quality()
        (3, 4, <IntervalQuality.MAJOR: 'major'>)
    """

    __slots__ = ("_lower", "_upper")

    def __init__(self, p1: Pitch, p2: Pitch) -> None:
        if p1 < p2:
            self._lower, self._upper = p1, p2
        else:
            self._lower, self._upper = p2, p1

    @property
    def lower(self) -> Pitch:
        return self._lower

    @property
    def upper(self) -> Pitch:
        return self._upper

    @property
    def is_unison(self) -> bool:
        """True when both pitches share a coordinate (any spelling)."""
        return self._lower == self._upper

    def _octave_span(self) -> int:
        return abs(self._upper.octave - self._lower.octave)

    def diatonic_number(self, ignore_octave: bool = False) -> int:
        """Letter-name distance between the pitches, counted from 1.

        Args:
            ignore_octave: Fold the result into 1–7. When False, each octave
                between the pitches adds 7 (C0→E1 is a tenth).

        Returns:
            1 for a unison, 3 for C→E, 10 for C0→E1, and so on.
        """
        if self.is_unison:
            return 1
        lower_index = self._lower.name.index
        upper_index = self._upper.name.index
        if ignore_octave:
            if upper_index < lower_index:
                return upper_index + _LETTERS_PER_OCTAVE - lower_index + 1
            return upper_index - lower_index + 1
        return upper_index - lower_index + 1 + _LETTERS_PER_OCTAVE * self._octave_span()

    def semitone_count(self, ignore_octave: bool = False) -> int:
        """Half steps between the pitches.

        Args:
            ignore_octave: When True and the span exceeds 12, subtract 12 per
                octave-number difference between the pitches.
        """
        semitones = self._upper.half_steps - self._lower.half_steps
        if ignore_octave and semitones > _SEMITONES_PER_OCTAVE:
            return semitones - self._octave_span() * _SEMITONES_PER_OCTAVE
        return semitones

    def quality(self) -> IntervalQuality:
        """Quality of the folded interval.

        Raises:
            UndefinedQualityError: (number, semitones) has no table entry.
        """
        return lookup_quality(
            self.diatonic_number(ignore_octave=True),
            self.semitone_count(ignore_octave=True),
        )

    def specific_interval(self) -> SpecificInterval:
        """Folded number and quality plus whether the interval is compound.

        Raises:
            UndefinedQualityError: Propagated from quality().
        """
        return SpecificInterval(
            number=self.diatonic_number(ignore_octave=True),
            quality=self.quality(),
            compound=self.semitone_count(ignore_octave=False) > _SEMITONES_PER_OCTAVE,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._lower == other._lower and self._upper == other._upper

    def __hash__(self) -> int:
        return hash((self._lower, self._upper))

    def __repr__(self) -> str:
        return f"Interval({self._lower}, {self._upper})"
