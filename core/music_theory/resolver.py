"""
core/music_theory/resolver.py — Nearest-sample resolution.

Given the pitch a caller wants and the pitches that actually exist as
recordings, pick the closest recording and report how far it must be
pitch-shifted:

    requested C1 (coord 6.0), candidates C0..B0
        → B0 (coord 5.5), shift +1 semitone

Selection scans candidates in the order given and only replaces the
current best on a strictly smaller distance. Ties therefore go to the
earliest candidate; callers that need a stable answer must pass a stable
order (sampler.library sorts by file name).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from core.music_theory.pitch import Pitch


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolve_nearest().

    Attributes:
        pitch:            The chosen candidate (the request itself when no
                          candidates were given).
        shift_semitones:  Signed shift that turns ``pitch`` into the request.
                          Positive = shift up, negative = shift down.
    """

    pitch: Pitch
    shift_semitones: int

    @property
    def needs_shift(self) -> bool:
        return self.shift_semitones != 0


def semitone_distance(a: Pitch, b: Pitch) -> int:
    """Absolute distance between two pitches in semitones."""
    return abs(a.half_steps - b.half_steps)


def resolve_nearest(requested: Pitch, candidates: Iterable[Pitch]) -> Resolution:
    """Choose the candidate closest to ``requested``.

    Args:
        requested:  The pitch to produce.
        candidates: Available pitches, in enumeration order.

    Returns:
        Resolution with the chosen pitch and the signed shift
        ``requested − chosen`` in semitones. An empty candidate set, or one
        containing ``requested`` (any spelling), gives a zero shift.
    """
    best = requested
    best_distance: int | None = None
    for candidate in candidates:
        distance = semitone_distance(requested, candidate)
        if best_distance is None or distance < best_distance:
            best, best_distance = candidate, distance
            if distance == 0:
                break
    return Resolution(pitch=best, shift_semitones=requested.half_steps - best.half_steps)
