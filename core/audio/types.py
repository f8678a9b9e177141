"""
core/audio/types.py — Frozen data types for decoded and rendered samples.

All types are frozen dataclasses, immutable value objects that can be
passed between the I/O boundary (sampler/) and the pure DSP helpers.

Design principles:
    - No I/O, no state, no side effects.
    - Sample buffers are numpy arrays; the dataclass is frozen but the
      array inside is not copied. Treat it as read-only.
    - `DecodedSample.frames` and `RenderedSample.duration_sec` are computed
      properties to avoid duplicate storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np

from core.music_theory.pitch import Pitch


@dataclass(frozen=True)
class DecodedSample:
    """Raw output of the decoder boundary.

    Invariants:
        sample_rate > 0
        bits_per_sample in {8, 16, 24, 32}
        channels >= 1
        samples is a 1-D integer array, channel-interleaved
        (L0, R0, L1, R1, ... for stereo)
    """

    sample_rate: int
    """Sample rate in Hz."""

    bits_per_sample: int
    """PCM bit depth of the source file."""

    channels: int
    """Channel count. The pipeline accepts 1 or 2."""

    samples: np.ndarray
    """Interleaved integer PCM values at the native bit depth."""

    @property
    def frames(self) -> int:
        """Samples per channel."""
        return len(self.samples) // self.channels


@dataclass(frozen=True)
class RenderedSample:
    """A mono buffer ready for playback, plus how it was produced.

    Invariants:
        sample_rate > 0
        samples is a 1-D float32 array
        pitch == source_pitch shifted by shift_semitones
    """

    sample_rate: int
    """Sample rate in Hz, unchanged from the source file."""

    samples: np.ndarray
    """Mono float32 samples, nominally in [-1.0, 1.0]."""

    pitch: Pitch
    """The pitch that was requested."""

    source_pitch: Pitch
    """The recorded pitch the buffer was derived from."""

    shift_semitones: int
    """Signed shift applied to the source. 0 = exact sample."""

    source_path: Path
    """Sample file that was decoded."""

    @property
    def duration_sec(self) -> float:
        return len(self.samples) / self.sample_rate

    def as_tuple(self) -> tuple[int, np.ndarray]:
        """(sample_rate, samples), the shape the playback boundary takes."""
        return self.sample_rate, self.samples
