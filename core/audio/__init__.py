"""
core/audio — Pure sample-buffer helpers.

Value types and numpy transforms for decoded sample data. No file I/O;
decoding, pitch shifting and playback live in sampler/.

Public API:
    Types:  DecodedSample, RenderedSample
    PCM:    normalize_pcm, take_first_channel, full_scale
"""

from core.audio.pcm import full_scale, normalize_pcm, take_first_channel
from core.audio.types import DecodedSample, RenderedSample

__all__ = [
    "DecodedSample",
    "RenderedSample",
    "full_scale",
    "normalize_pcm",
    "take_first_channel",
]
