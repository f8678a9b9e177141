"""
sampler/decoder.py — File I/O boundary for sample decoding.

This is the ONLY module in the pipeline that reads audio files from disk.
Everything downstream (core/audio/pcm.py, the pitch shifter) takes the
decoded integer buffer, never file paths.

Usage:
    from sampler.decoder import SoundfileDecoder
    decoded = SoundfileDecoder().decode(Path("resources/samples/.../A4.flac"))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np

from core.audio.types import DecodedSample
from core.errors import DecodeError

logger = logging.getLogger(__name__)

# soundfile subtype → PCM bit depth
SUBTYPE_BITS: dict[str, int] = {
    "PCM_S8": 8,
    "PCM_U8": 8,
    "PCM_16": 16,
    "PCM_24": 24,
    "PCM_32": 32,
}

_READ_BITS = 32


class SoundfileDecoder:
    """Decodes lossless PCM files (FLAC, WAV, AIFF) with soundfile.

    soundfile is imported lazily on first use (or injected for testing).
    Samples are read as int32 and shifted down to the file's native bit
    depth, so a 16-bit file yields values in [-32768, 32767].
    """

    def __init__(self, soundfile: Any = None) -> None:
        """Initialise the decoder.

        Args:
            soundfile: Injected soundfile module. Pass a MagicMock in tests to
                       avoid loading libsndfile. None = import lazily.
        """
        self._soundfile = soundfile

    def _get_soundfile(self) -> Any:
        if self._soundfile is None:
            import soundfile as _sf  # deferred: allows testing without libsndfile

            self._soundfile = _sf
        return self._soundfile

    def decode(self, path: Path) -> DecodedSample:
        """Read a sample file into interleaved integer PCM.

        Args:
            path: Path to a FLAC/WAV/AIFF file.

        Returns:
            DecodedSample(sample_rate, bits_per_sample, channels, samples).

        Raises:
            DecodeError: File missing, not PCM, or soundfile failed to read it.
        """
        sf = self._get_soundfile()
        file_path = Path(path)

        if not file_path.is_file():
            raise DecodeError(f"Sample file not found: {file_path}")

        try:
            info = sf.info(str(file_path))
            data, sample_rate = sf.read(str(file_path), dtype="int32", always_2d=True)
        except Exception as exc:
            raise DecodeError(f"Failed to decode sample file {file_path.name!r}: {exc}") from exc

        bits = SUBTYPE_BITS.get(info.subtype)
        if bits is None:
            raise DecodeError(
                f"Sample file {file_path.name!r} has non-PCM subtype {info.subtype!r}; "
                f"supported: {sorted(SUBTYPE_BITS)}"
            )

        frames = np.asarray(data, dtype=np.int32)
        channels = int(frames.shape[1]) if frames.ndim == 2 else 1
        # row-major ravel of (frames, channels) interleaves L0 R0 L1 R1 ...
        samples = np.right_shift(frames.reshape(-1), _READ_BITS - bits)

        logger.debug(
            "Decoded %s: %d Hz, %d-bit, %d channel(s), %d samples",
            file_path.name,
            sample_rate,
            bits,
            channels,
            len(samples),
        )
        return DecodedSample(
            sample_rate=int(sample_rate),
            bits_per_sample=bits,
            channels=channels,
            samples=samples,
        )
