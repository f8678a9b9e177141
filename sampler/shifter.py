"""
sampler/shifter.py — Pitch-shift boundary backed by librosa.

librosa.effects.pitch_shift time-stretches with a phase vocoder and
resamples back, so the output keeps the input duration. The result is
trimmed or zero-padded to the exact input length with
librosa.util.fix_length, which the synthesis engine relies on.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


class LibrosaPitchShifter:
    """Semitone pitch shifting for mono float buffers.

    librosa is imported lazily at first use (or injected for testing).

    Args:
        librosa:         Injected librosa module. None = import lazily.
        bins_per_octave: Steps per octave for ``n_steps``. 12 = semitones.
        res_type:        Resampling filter passed through to librosa.
    """

    def __init__(
        self,
        librosa: Any = None,
        *,
        bins_per_octave: int = 12,
        res_type: str = "soxr_hq",
    ) -> None:
        self._librosa = librosa
        self.bins_per_octave = bins_per_octave
        self.res_type = res_type

    def _get_librosa(self) -> Any:
        """Return librosa, importing it lazily if not already injected."""
        if self._librosa is None:
            import librosa as _lib  # deferred: allows testing without audio backend

            self._librosa = _lib
        return self._librosa

    def shift(self, samples: np.ndarray, sample_rate: int, n_steps: float) -> np.ndarray:
        """Shift ``samples`` by ``n_steps`` semitones.

        Args:
            samples:     Mono float samples.
            sample_rate: Sample rate in Hz.
            n_steps:     Signed shift; positive raises the pitch.

        Returns:
            float32 array of the same length as ``samples``. A zero shift
            (or an empty buffer) returns an unprocessed copy.
        """
        y = np.asarray(samples, dtype=np.float32)
        if n_steps == 0 or y.size == 0:
            return y.copy()

        lib = self._get_librosa()
        logger.debug("Shifting %d samples by %+g semitones at %d Hz", y.size, n_steps, sample_rate)
        shifted = lib.effects.pitch_shift(
            y,
            sr=sample_rate,
            n_steps=float(n_steps),
            bins_per_octave=self.bins_per_octave,
            res_type=self.res_type,
        )
        fixed = lib.util.fix_length(np.asarray(shifted), size=y.size)
        return np.asarray(fixed, dtype=np.float32)
