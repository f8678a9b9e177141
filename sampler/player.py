"""
sampler/player.py — Blocking playback through sounddevice.

Each call opens its own output stream and waits until the buffer has
finished playing. There is no cancellation: a caller that needs to stop
playback early must run play() on a worker it manages itself.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from core.errors import PlaybackError

logger = logging.getLogger(__name__)


class SounddevicePlayer:
    """Plays float sample buffers on the default output device.

    Args:
        sounddevice: Injected sounddevice module. None = import lazily, which
                     also defers PortAudio loading until the first playback.
        device:      Output device index or name. None = system default.
    """

    def __init__(self, sounddevice: Any = None, *, device: int | str | None = None) -> None:
        self._sounddevice = sounddevice
        self.device = device

    def _get_sounddevice(self) -> Any:
        if self._sounddevice is None:
            try:
                import sounddevice as _sd  # deferred: PortAudio is loaded on import
            except OSError as exc:
                raise PlaybackError(f"Audio output unavailable: {exc}") from exc

            self._sounddevice = _sd
        return self._sounddevice

    def play(self, sample_rate: int, channels: int, samples: np.ndarray) -> None:
        """Play interleaved ``samples`` and block until done.

        Raises:
            ValueError: channels < 1.
            PlaybackError: sounddevice could not open or run the stream.
        """
        if channels < 1:
            raise ValueError(f"channels must be >= 1, got {channels}")

        sd = self._get_sounddevice()
        data = np.asarray(samples, dtype=np.float32).reshape(-1, channels)
        logger.debug("Playing %d frames at %d Hz", data.shape[0], sample_rate)
        try:
            sd.play(data, samplerate=sample_rate, device=self.device, blocking=False)
            sd.wait()
        except Exception as exc:
            raise PlaybackError(f"Playback failed: {exc}") from exc
