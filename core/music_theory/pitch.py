"""
core/music_theory/pitch.py — Pitch coordinate algebra.

A pitch (letter, accidental, octave) maps to a single ordered coordinate.
Letters sit on the uneven diatonic grid (E→F and B→C are half steps), so
one octave spans 6.0 coordinate units and one semitone is 0.5:

    C=0.0  D=1.0  E=2.0  F=2.5  G=3.5  A=4.5  B=5.5

    coordinate = base(letter) + offset(accidental) + octave × 6.0

Every valid coordinate is a multiple of 0.5, so pitches are stored and
compared as an integer count of half steps (coordinate × 2). Floats only
appear at the `coordinate` property and the hertz boundary.

Equality, ordering and hashing use that count alone, which makes
enharmonic spellings interchangeable: C#0 == Db0, B#0 == C1, and both
collapse to one entry in a set or dict.

Exports:
    PitchName, Accidental, Pitch
    PITCH_PATTERN
    parse_pitch(text) → Pitch
    format_pitch(pitch) → str
    coordinate(pitch) → float
    pitch_to_hertz(pitch) → float
    pitch_from_coordinate(value) → Pitch
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

from core.errors import PitchParseError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SEMITONE: float = 0.5
"""Coordinate units per semitone."""

OCTAVE_HALF_STEPS: int = 12
"""Half steps per octave (6.0 coordinate units)."""

REFERENCE_HZ: float = 440.0
"""Concert pitch. A4 sounds at this frequency."""

MAX_TEXT_OCTAVE: int = 99
"""Largest octave the two-digit text grammar can express."""

PITCH_PATTERN: re.Pattern[str] = re.compile(
    r"(?P<letter>.)(?P<accidental>[^0-9-]*)(?P<octave>.*)", re.DOTALL
)
"""Splits pitch text into letter, accidental marker and octave digits.

Each part is validated on its own so errors name the part that failed.
"""

_OCTAVE_DIGITS = re.compile(r"[0-9]{1,2}")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class PitchName(Enum):
    """Natural letter names in diatonic order (C-based octave)."""

    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    A = "A"
    B = "B"

    @property
    def index(self) -> int:
        """Letter position 0..6 (C=0, B=6), used for diatonic distance."""
        return _LETTER_INDEX[self]

    @property
    def base_half_steps(self) -> int:
        """Half steps above C within the octave (C=0, D=2, E=4, F=5, ...)."""
        return _BASE_HALF_STEPS[self]


class Accidental(Enum):
    """Accidental marks; the value is the canonical text symbol."""

    NONE = ""
    SHARP = "#"
    FLAT = "b"
    DOUBLE_SHARP = "##"
    DOUBLE_FLAT = "bb"

    @property
    def half_steps(self) -> int:
        """Signed half-step offset (+1 for sharp, -2 for double flat, ...)."""
        return _ACCIDENTAL_HALF_STEPS[self]

    @property
    def offset(self) -> float:
        """Signed offset in coordinate units (+0.5 for sharp)."""
        return self.half_steps * SEMITONE

    @property
    def symbol(self) -> str:
        return self.value


_LETTER_INDEX: dict[PitchName, int] = {name: i for i, name in enumerate(PitchName)}

_BASE_HALF_STEPS: dict[PitchName, int] = {
    PitchName.C: 0,
    PitchName.D: 2,
    PitchName.E: 4,
    PitchName.F: 5,
    PitchName.G: 7,
    PitchName.A: 9,
    PitchName.B: 11,
}

_ACCIDENTAL_HALF_STEPS: dict[Accidental, int] = {
    Accidental.NONE: 0,
    Accidental.SHARP: 1,
    Accidental.FLAT: -1,
    Accidental.DOUBLE_SHARP: 2,
    Accidental.DOUBLE_FLAT: -2,
}

_ACCIDENTALS_BY_SYMBOL: dict[str, Accidental] = {acc.symbol: acc for acc in Accidental}

# Spelling used when turning a bare coordinate back into a pitch.
_SHARP_SPELLINGS: tuple[tuple[PitchName, Accidental], ...] = (
    (PitchName.C, Accidental.NONE),
    (PitchName.C, Accidental.SHARP),
    (PitchName.D, Accidental.NONE),
    (PitchName.D, Accidental.SHARP),
    (PitchName.E, Accidental.NONE),
    (PitchName.F, Accidental.NONE),
    (PitchName.F, Accidental.SHARP),
    (PitchName.G, Accidental.NONE),
    (PitchName.G, Accidental.SHARP),
    (PitchName.A, Accidental.NONE),
    (PitchName.A, Accidental.SHARP),
    (PitchName.B, Accidental.NONE),
)


# ---------------------------------------------------------------------------
# Pitch
# ---------------------------------------------------------------------------


@total_ordering
@dataclass(frozen=True, eq=False)
class Pitch:
    """A spelled pitch: letter name, accidental and signed octave.

    Two pitches are equal when they sound the same, whatever their
    spelling. ``Pitch(PitchName.C, 0, Accidental.SHARP) == Pitch(PitchName.D,
    0, Accidental.FLAT)`` holds, and the two hash identically.

    Attributes:
        name:       Letter name.
        octave:     Signed octave number (A4 = 440 Hz). Negative octaves
                    are valid values but have no text form.
        accidental: Accidental mark. Defaults to none.
    """

    name: PitchName
    octave: int
    accidental: Accidental = Accidental.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.name, PitchName):
            raise TypeError(f"Pitch.name must be a PitchName, got {self.name!r}")
        if not isinstance(self.accidental, Accidental):
            raise TypeError(f"Pitch.accidental must be an Accidental, got {self.accidental!r}")
        if isinstance(self.octave, bool) or not isinstance(self.octave, int):
            raise TypeError(f"Pitch.octave must be an int, got {self.octave!r}")

    # -- construction -------------------------------------------------------

    @classmethod
    def natural(cls, name: PitchName, octave: int) -> Pitch:
        """Build a pitch without an accidental."""
        return cls(name, octave)

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """Parse pitch text such as 'C0', 'A#4' or 'Ebb12'. See parse_pitch."""
        return parse_pitch(text)

    @classmethod
    def from_coordinate(cls, value: float) -> Pitch:
        """Spell a coordinate with naturals and sharps. See pitch_from_coordinate."""
        return pitch_from_coordinate(value)

    # -- derived values -----------------------------------------------------

    @property
    def half_steps(self) -> int:
        """Exact identity key: half steps above C0 (coordinate × 2)."""
        return (
            self.name.base_half_steps
            + self.accidental.half_steps
            + self.octave * OCTAVE_HALF_STEPS
        )

    @property
    def coordinate(self) -> float:
        """Position on the 6.0-per-octave coordinate axis."""
        return self.half_steps * SEMITONE

    def hertz(self) -> float:
        """Equal-tempered frequency relative to A4 = 440 Hz."""
        return pitch_to_hertz(self)

    # -- comparison ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.half_steps == other.half_steps

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.half_steps < other.half_steps

    def __hash__(self) -> int:
        return hash(self.half_steps)

    def __str__(self) -> str:
        return format_pitch(self)


# A4: the hertz reference point
_A4_HALF_STEPS: int = Pitch(PitchName.A, 4).half_steps


# ---------------------------------------------------------------------------
# Text grammar
# ---------------------------------------------------------------------------


def parse_pitch(text: str) -> Pitch:
    """Parse canonical pitch text.

    Grammar: one letter A–G, an optional accidental marker from
    {"#", "b", "##", "bb"}, then one or two decimal digits for the octave.
    No separators, no whitespace, no sign.

    Examples:
        'C0'    → C natural, octave 0
        'A#4'   → A sharp, octave 4
        'Cbb12' → C double flat, octave 12

    Args:
        text: Pitch text, e.g. a sample file stem.

    Returns:
        The parsed Pitch.

    Raises:
        PitchParseError: Unknown letter, non-canonical accidental marker, or
            missing / non-numeric / too-long octave digits.
    """
    match = PITCH_PATTERN.fullmatch(text) if text else None
    if match is None:
        raise PitchParseError(text, "empty pitch text")

    letter = match.group("letter")
    marker = match.group("accidental")
    digits = match.group("octave")

    try:
        name = PitchName(letter)
    except ValueError:
        raise PitchParseError(text, f"letter must be one of A-G, got {letter!r}") from None

    accidental = _ACCIDENTALS_BY_SYMBOL.get(marker)
    if accidental is None:
        raise PitchParseError(
            text, f"accidental must be one of '#', 'b', '##', 'bb', got {marker!r}"
        )

    if not _OCTAVE_DIGITS.fullmatch(digits):
        raise PitchParseError(text, f"octave must be 1-2 digits, got {digits!r}")

    return Pitch(name, int(digits), accidental)


def format_pitch(pitch: Pitch) -> str:
    """Render a pitch as `<Letter><Accidental><Octave>`.

    The inverse of parse_pitch for octaves 0–99. Other octaves are still
    rendered (e.g. 'A-1') for display and logging, but that text does not
    parse back.
    """
    return f"{pitch.name.value}{pitch.accidental.symbol}{pitch.octave}"


# ---------------------------------------------------------------------------
# Numeric conversions
# ---------------------------------------------------------------------------


def coordinate(pitch: Pitch) -> float:
    """Coordinate of a pitch: base(letter) + offset(accidental) + octave × 6.0."""
    return pitch.coordinate


def pitch_to_hertz(pitch: Pitch) -> float:
    """Convert a pitch to hertz using 12-tone equal temperament.

    Formula: hz = 440 × 2^(semitones / 12), where semitones is the signed
    distance from A4. A4 → 440.0, A3 → 220.0, C4 → 261.63.
    """
    semitones = pitch.half_steps - _A4_HALF_STEPS
    return REFERENCE_HZ * 2.0 ** (semitones / OCTAVE_HALF_STEPS)


def pitch_from_coordinate(value: float) -> Pitch:
    """Build a pitch from a raw coordinate.

    Black keys are spelled as sharps (0.5 → C#0, never Db0). The octave is
    floor(value / 6.0), so negative coordinates land in negative octaves:
    -0.5 → B-1.

    Args:
        value: Coordinate on the 6.0-per-octave axis.

    Returns:
        A Pitch whose coordinate equals ``value``.

    Raises:
        ValueError: If ``value`` is not a finite multiple of 0.5.
    """
    if not math.isfinite(value):
        raise ValueError(f"Coordinate must be finite, got {value}")
    doubled = value / SEMITONE
    if doubled != int(doubled):
        raise ValueError(f"Coordinate must be a multiple of {SEMITONE}, got {value}")
    half_steps = int(doubled)
    octave, within = divmod(half_steps, OCTAVE_HALF_STEPS)
    name, accidental = _SHARP_SPELLINGS[within]
    return Pitch(name, octave, accidental)
