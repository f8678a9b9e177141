"""
core/music_theory/scales.py — Scale validator.

A scale is an ordered list of step sizes in half steps whose total is one
octave. Nothing else about the shape is checked: any number of steps is
fine, and [12] on its own is a valid (if dull) scale.

Exports:
    Scale
    MAJOR_STEPS, NATURAL_MINOR_STEPS
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from core.errors import InvalidScaleError
from core.music_theory.interval import IntervalStep
from core.music_theory.pitch import OCTAVE_HALF_STEPS

H = IntervalStep.HALF
W = IntervalStep.WHOLE

MAJOR_STEPS: tuple[IntervalStep, ...] = (W, W, H, W, W, W, H)
NATURAL_MINOR_STEPS: tuple[IntervalStep, ...] = (W, H, W, W, H, W, W)


def _as_half_steps(step: int | IntervalStep) -> int:
    if isinstance(step, IntervalStep):
        return step.semitones
    if isinstance(step, bool) or not isinstance(step, int):
        raise InvalidScaleError(f"Scale steps must be integers, got {step!r}")
    if step < 0:
        raise InvalidScaleError(f"Scale steps must be non-negative, got {step}")
    return step


@dataclass(frozen=True)
class Scale:
    """Half-step pattern of a scale.

    Invariants (checked in __post_init__):
        every step >= 0
        sum(steps) == 12
    """

    steps: tuple[int, ...]

    def __post_init__(self) -> None:
        steps = tuple(_as_half_steps(step) for step in self.steps)
        object.__setattr__(self, "steps", steps)
        total = sum(steps)
        if total != OCTAVE_HALF_STEPS:
            raise InvalidScaleError(
                f"Scale steps must sum to {OCTAVE_HALF_STEPS} half steps, got {total} ({list(steps)})"
            )

    @classmethod
    def try_new(cls, steps: Iterable[int | IntervalStep]) -> Scale:
        """Build a scale from any iterable of half-step counts or IntervalSteps.

        Raises:
            InvalidScaleError: The steps do not sum to exactly 12, or a step
                is negative or not an integer.
        """
        return cls(tuple(steps))

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)
