"""
Audio boundary protocols for the sample synthesis pipeline.

Defines the contracts the decoder, pitch shifter and player must satisfy.
This module is pure — no I/O, no audio backend imports.
Concrete implementations (soundfile, librosa, sounddevice) live in sampler/.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

import numpy as np

from core.audio.types import DecodedSample


@runtime_checkable
class SampleDecoder(Protocol):
    """
    Protocol for sample decoders.

    Any class with a matching ``decode`` can feed the synthesis engine.
    """

    def decode(self, path: Path) -> DecodedSample:
        """
        Read a sample file into raw integer PCM.

        Args:
            path: Existing sample file.

        Returns:
            DecodedSample with interleaved integer samples.

        Raises:
            DecodeError: The file could not be decoded.
        """
        ...


@runtime_checkable
class PitchShifter(Protocol):
    """Protocol for pitch-shift transforms."""

    def shift(self, samples: np.ndarray, sample_rate: int, n_steps: float) -> np.ndarray:
        """
        Shift mono samples by ``n_steps`` semitones (positive = up).

        Returns:
            A float array with exactly ``len(samples)`` elements.
        """
        ...


@runtime_checkable
class AudioPlayer(Protocol):
    """Protocol for blocking audio output."""

    def play(self, sample_rate: int, channels: int, samples: np.ndarray) -> None:
        """
        Render samples on an output device and return when playback ends.

        Raises:
            PlaybackError: No usable output device, or the stream failed.
        """
        ...
