"""
Tests for core/music_theory/interval.py — interval number, size and quality.

Validates:
    - diatonic_number with and without octave folding
    - semitone_count with and without octave folding
    - quality lookup for every table entry, and UndefinedQualityError outside it
    - specific_interval and its label
    - argument-order symmetry and the unison invariant
    - IntervalStep conversions
"""

import itertools

import pytest

from core.errors import UndefinedQualityError
from core.music_theory.interval import (
    QUALITY_TABLE,
    Interval,
    IntervalQuality,
    IntervalStep,
    SpecificInterval,
    lookup_quality,
)
from core.music_theory.pitch import Accidental, Pitch, PitchName

C, D, E, F, G, A, B = (PitchName(letter) for letter in "CDEFGAB")


def iv(first: str, second: str) -> Interval:
    return Interval(Pitch.parse(first), Pitch.parse(second))


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_orders_lower_first(self):
        interval = iv("E0", "C0")
        assert str(interval.lower) == "C0"
        assert str(interval.upper) == "E0"

    def test_keeps_order_when_already_sorted(self):
        interval = iv("C0", "E0")
        assert str(interval.lower) == "C0"

    def test_equal_intervals(self):
        assert iv("C0", "G0") == iv("G0", "C0")

    def test_hashable(self):
        _ = {iv("C0", "G0")}

    def test_repr(self):
        assert repr(iv("G0", "C0")) == "Interval(C0, G0)"


# ---------------------------------------------------------------------------
# Diatonic number
# ---------------------------------------------------------------------------


class TestDiatonicNumber:
    def test_same_octave(self):
        assert iv("C0", "E0").diatonic_number(False) == 3
        assert iv("C2", "G2").diatonic_number(False) == 5

    def test_different_octaves(self):
        assert iv("C0", "E1").diatonic_number(False) == 10
        assert iv("C1", "G3").diatonic_number(False) == 19

    def test_ignore_octave(self):
        assert iv("C0", "E0").diatonic_number(True) == 3
        assert iv("C0", "E1").diatonic_number(True) == 3
        assert iv("C1", "G3").diatonic_number(True) == 5

    def test_ignore_octave_wraps(self):
        assert iv("C1", "B0").diatonic_number(True) == 2
        assert iv("C1", "G0").diatonic_number(True) == 4

    def test_wrap_across_octave_not_ignored(self):
        assert iv("B0", "C1").diatonic_number(False) == 2

    def test_default_does_not_ignore_octave(self):
        assert iv("C0", "E1").diatonic_number() == 10

    def test_identical_pitches_are_unison(self):
        interval = iv("D3", "D3")
        assert interval.diatonic_number(False) == 1
        assert interval.diatonic_number(True) == 1

    def test_enharmonic_pitches_are_unison(self):
        interval = iv("C#0", "Db0")
        assert interval.is_unison
        assert interval.diatonic_number(True) == 1
        assert interval.semitone_count(False) == 0


# ---------------------------------------------------------------------------
# Semitone count
# ---------------------------------------------------------------------------


class TestSemitoneCount:
    def test_same_octave(self):
        assert iv("C0", "E0").semitone_count(False) == 4

    def test_different_octaves(self):
        assert iv("C0", "E1").semitone_count(False) == 16
        assert iv("C1", "G3").semitone_count(False) == 31

    def test_ignore_octave(self):
        assert iv("C0", "E0").semitone_count(True) == 4
        assert iv("C0", "E1").semitone_count(True) == 4
        assert iv("C1", "G3").semitone_count(True) == 7
        assert iv("C1", "B0").semitone_count(True) == 1
        assert iv("C1", "G0").semitone_count(True) == 5

    def test_octave_itself_is_not_folded(self):
        assert iv("C0", "C1").semitone_count(True) == 12

    def test_accidentals(self):
        assert iv("C0", "C#0").semitone_count() == 1
        assert iv("Cb0", "C##0").semitone_count() == 3

    def test_unison(self):
        assert iv("A4", "A4").semitone_count(True) == 0


# ---------------------------------------------------------------------------
# Quality
# ---------------------------------------------------------------------------


class TestQuality:
    def test_perfect(self):
        assert iv("C0", "C0").quality() is IntervalQuality.PERFECT
        assert iv("C0", "F0").quality() is IntervalQuality.PERFECT
        assert iv("C0", "G0").quality() is IntervalQuality.PERFECT
        assert iv("D2", "A2").quality() is IntervalQuality.PERFECT
        assert iv("C1", "G3").quality() is IntervalQuality.PERFECT

    def test_minor(self):
        assert iv("E0", "F0").quality() is IntervalQuality.MINOR
        assert iv("A0", "C1").quality() is IntervalQuality.MINOR
        assert iv("E0", "C1").quality() is IntervalQuality.MINOR
        assert iv("D0", "C1").quality() is IntervalQuality.MINOR
        assert iv("C0", "Eb0").quality() is IntervalQuality.MINOR
        assert iv("B0", "C1").quality() is IntervalQuality.MINOR

    def test_major(self):
        assert iv("C0", "D0").quality() is IntervalQuality.MAJOR
        assert iv("C0", "E0").quality() is IntervalQuality.MAJOR
        assert iv("C0", "A0").quality() is IntervalQuality.MAJOR
        assert iv("C0", "B0").quality() is IntervalQuality.MAJOR

    def test_diminished(self):
        assert iv("B0", "F1").quality() is IntervalQuality.DIMINISHED
        assert iv("C#0", "Eb0").quality() is IntervalQuality.DIMINISHED

    def test_augmented(self):
        assert iv("F0", "B0").quality() is IntervalQuality.AUGMENTED
        assert iv("C0", "G#0").quality() is IntervalQuality.AUGMENTED

    def test_augmented_unison(self):
        assert iv("C0", "C#0").quality() is IntervalQuality.AUGMENTED

    def test_undefined_raises(self):
        # C to D## is a second spanning 4 semitones
        with pytest.raises(UndefinedQualityError) as info:
            iv("C0", "D##0").quality()
        assert info.value.number == 2
        assert info.value.semitones == 4

    def test_undefined_is_value_error(self):
        with pytest.raises(ValueError):
            iv("C0", "D##0").quality()

    def test_octave_is_undefined(self):
        with pytest.raises(UndefinedQualityError):
            iv("C0", "C1").quality()


class TestQualityTable:
    def test_covers_unison_through_seventh(self):
        assert sorted(QUALITY_TABLE) == [1, 2, 3, 4, 5, 6, 7]

    def test_every_entry_round_trips(self):
        for number, row in QUALITY_TABLE.items():
            for semitones, quality in row.items():
                assert lookup_quality(number, semitones) is quality

    def test_values_outside_table_raise(self):
        for number in range(0, 9):
            for semitones in range(-1, 14):
                if semitones in QUALITY_TABLE.get(number, {}):
                    continue
                with pytest.raises(UndefinedQualityError):
                    lookup_quality(number, semitones)

    def test_unison_with_two_semitones_is_undefined(self):
        with pytest.raises(UndefinedQualityError):
            lookup_quality(1, 2)


# ---------------------------------------------------------------------------
# Specific interval
# ---------------------------------------------------------------------------


class TestSpecificInterval:
    def test_major_third(self):
        interval = iv("C0", "E0")
        assert interval.diatonic_number() == 3
        assert interval.semitone_count() == 4
        assert interval.quality() is IntervalQuality.MAJOR
        assert interval.specific_interval() == SpecificInterval(3, IntervalQuality.MAJOR, False)

    def test_same_octave(self):
        assert tuple(iv("C2", "G2").specific_interval()) == (5, IntervalQuality.PERFECT, False)

    def test_compound(self):
        assert tuple(iv("C0", "E1").specific_interval()) == (3, IntervalQuality.MAJOR, True)
        assert tuple(iv("C1", "G3").specific_interval()) == (5, IntervalQuality.PERFECT, True)

    def test_unpacks(self):
        number, quality, compound = iv("C0", "G0").specific_interval()
        assert (number, quality, compound) == (5, IntervalQuality.PERFECT, False)

    def test_label(self):
        assert iv("C0", "E0").specific_interval().label == "major third"
        assert iv("C1", "G3").specific_interval().label == "compound perfect fifth"

    def test_propagates_undefined(self):
        with pytest.raises(UndefinedQualityError):
            iv("C0", "D##0").specific_interval()


# ---------------------------------------------------------------------------
# Symmetry
# ---------------------------------------------------------------------------


class TestSymmetry:
    def test_argument_order_does_not_matter(self):
        pitches = [
            Pitch(name, octave, accidental)
            for name in PitchName
            for octave in (0, 1, 3)
            for accidental in (Accidental.NONE, Accidental.SHARP, Accidental.FLAT)
        ]
        for p1, p2 in itertools.combinations(pitches, 2):
            forward, backward = Interval(p1, p2), Interval(p2, p1)
            for ignore in (True, False):
                assert forward.diatonic_number(ignore) == backward.diatonic_number(ignore)
                assert forward.semitone_count(ignore) == backward.semitone_count(ignore)
            try:
                expected = forward.quality()
            except UndefinedQualityError:
                with pytest.raises(UndefinedQualityError):
                    backward.quality()
            else:
                assert backward.quality() is expected


# ---------------------------------------------------------------------------
# IntervalStep
# ---------------------------------------------------------------------------


class TestIntervalStep:
    def test_semitones(self):
        assert IntervalStep.HALF.semitones == 1
        assert IntervalStep.WHOLE.semitones == 2

    def test_coordinate(self):
        assert IntervalStep.HALF.coordinate == 0.5
        assert IntervalStep.WHOLE.coordinate == 1.0

    def test_from_coordinate(self):
        assert IntervalStep.from_coordinate(0.5) is IntervalStep.HALF
        assert IntervalStep.from_coordinate(1.0) is IntervalStep.WHOLE

    def test_from_coordinate_rejects_other(self):
        with pytest.raises(ValueError):
            IntervalStep.from_coordinate(1.5)
