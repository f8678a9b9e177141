"""
core/audio/pcm.py — Integer PCM to float conversion and channel reduction.

Pure numpy, no librosa, no I/O. Both functions take the interleaved
integer buffer produced by the decoder boundary.

Usage:
    from core.audio.pcm import normalize_pcm, take_first_channel
    y = normalize_pcm(decoded.samples, decoded.bits_per_sample)
    if decoded.channels == 2:
        y = take_first_channel(y)
"""

from __future__ import annotations

import numpy as np


def full_scale(bits_per_sample: int) -> float:
    """Largest positive value of a signed PCM sample: 2^bits / 2 − 1.

    16-bit → 32767.0, 24-bit → 8388607.0.

    Raises:
        ValueError: If bits_per_sample < 2.
    """
    if bits_per_sample < 2:
        raise ValueError(f"bits_per_sample must be >= 2, got {bits_per_sample}")
    return 2.0**bits_per_sample / 2.0 - 1.0


def normalize_pcm(samples: np.ndarray, bits_per_sample: int) -> np.ndarray:
    """Scale integer PCM into float32 by dividing by full_scale(bits).

    The most negative integer maps slightly below -1.0 (e.g. -32768/32767);
    it is not clipped.
    """
    return (np.asarray(samples, dtype=np.float64) / full_scale(bits_per_sample)).astype(np.float32)


def take_first_channel(samples: np.ndarray) -> np.ndarray:
    """Reduce interleaved stereo to mono by keeping even-indexed samples.

    This drops the second channel entirely rather than averaging L and R.
    Output length is ceil(len / 2).
    """
    return np.asarray(samples)[::2].copy()
