"""
sampler/engine.py — Orchestrator for the pitch → playable buffer pipeline.

SampleSynthesisEngine wires together the whole path from a requested pitch
to audio:

    instrument + pitch
        │
        ├─ SampleLibrary            [sampler/library.py — directory layout]
        │       ↓ exact file, or every file parsed as a Pitch
        ├─ resolve_nearest()        [core/music_theory/resolver.py — pure]
        │       ↓ source pitch + signed semitone shift
        ├─ SampleDecoder.decode()   [sampler/decoder.py — soundfile]
        │       ↓ integer PCM
        ├─ normalize_pcm()          [core/audio/pcm.py — pure numpy]
        ├─ take_first_channel()     (stereo only)
        │       ↓ mono float32
        ├─ PitchShifter.shift()     [sampler/shifter.py — librosa]
        │       ↓
        └─ AudioPlayer.play()       [sampler/player.py — sounddevice]

This module lives outside core/ because it touches the filesystem and
audio devices. Decoder, shifter and player are injected, so tests can run
the full pipeline against fakes.

Every step runs synchronously on the calling thread. Nothing is shared
between calls, so one engine can serve several threads at once.

Usage:
    engine = SampleSynthesisEngine()
    sample_rate, samples = engine.synthesize(Instrument.SALAMANDER_GRAND_PIANO,
                                             Pitch.parse("C#4"))
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from core.audio.base import AudioPlayer, PitchShifter, SampleDecoder
from core.audio.pcm import normalize_pcm, take_first_channel
from core.audio.types import RenderedSample
from core.config import DEFAULT_CONFIG, SamplerConfig
from core.errors import UnsupportedChannelLayoutError
from core.music_theory.pitch import Pitch
from core.music_theory.resolver import Resolution, resolve_nearest
from sampler.library import Instrument, SampleLibrary

logger = logging.getLogger(__name__)

MAX_CHANNELS = 2


class SampleSynthesisEngine:
    """Turns (instrument, pitch) requests into mono sample buffers.

    Args:
        config:   Filesystem layout. Defaults to DEFAULT_CONFIG.
        library:  Sample directory lookup. Built from ``config`` when None.
        decoder:  Decoder boundary. None = SoundfileDecoder.
        shifter:  Pitch-shift boundary. None = LibrosaPitchShifter.
        player:   Playback boundary. None = SounddevicePlayer.

    Example:
        engine = SampleSynthesisEngine(SamplerConfig(samples_root=Path("samples")))
        rendered = engine.render(Instrument.SALAMANDER_GRAND_PIANO, Pitch.parse("A4"))
        print(rendered.source_pitch, rendered.shift_semitones)
    """

    def __init__(
        self,
        config: SamplerConfig = DEFAULT_CONFIG,
        *,
        library: SampleLibrary | None = None,
        decoder: SampleDecoder | None = None,
        shifter: PitchShifter | None = None,
        player: AudioPlayer | None = None,
    ) -> None:
        self.config = config
        self.library = library if library is not None else SampleLibrary(config)
        self._decoder = decoder
        self._shifter = shifter
        self._player = player

    # ------------------------------------------------------------------
    # Lazily built default boundaries
    # ------------------------------------------------------------------

    @property
    def decoder(self) -> SampleDecoder:
        if self._decoder is None:
            from sampler.decoder import SoundfileDecoder

            self._decoder = SoundfileDecoder()
        return self._decoder

    @property
    def shifter(self) -> PitchShifter:
        if self._shifter is None:
            from sampler.shifter import LibrosaPitchShifter

            self._shifter = LibrosaPitchShifter()
        return self._shifter

    @property
    def player(self) -> AudioPlayer:
        if self._player is None:
            from sampler.player import SounddevicePlayer

            self._player = SounddevicePlayer()
        return self._player

    # ------------------------------------------------------------------
    # Stage 1: Sample resolution
    # ------------------------------------------------------------------

    def locate(self, instrument: Instrument, pitch: Pitch) -> tuple[Path, Resolution]:
        """Find the sample file to render ``pitch`` from.

        Returns:
            (path, resolution). The resolution shift is 0 when a file named
            after the requested pitch exists.

        Raises:
            AssetDirectoryNotFoundError: The instrument has no directory.
            AssetNotFoundError: The directory holds no samples.
            SampleNameError: A sample file name is not pitch text.
        """
        self.library.require_directory(instrument)

        exact = self.library.exact_sample(instrument, pitch)
        if exact is not None:
            logger.debug("Exact sample for %s: %s", pitch, exact.name)
            return exact, Resolution(pitch=pitch, shift_semitones=0)

        samples = self.library.available_samples(instrument)
        resolution = resolve_nearest(pitch, (candidate for candidate, _ in samples))
        # first path whose pitch matches the chosen candidate, in listing order
        path = next(p for candidate, p in samples if candidate is resolution.pitch)
        logger.info(
            "No sample for %s; using %s shifted %+d semitones",
            pitch,
            path.name,
            resolution.shift_semitones,
        )
        return path, resolution

    # ------------------------------------------------------------------
    # Stage 2: Decode, normalize, shift
    # ------------------------------------------------------------------

    def render(self, instrument: Instrument, pitch: Pitch) -> RenderedSample:
        """Produce a mono buffer that sounds at ``pitch``.

        Steps:
            1. Locate the exact or nearest sample (see locate()).
            2. Decode to integer PCM.
            3. Normalize by 2^bits / 2 − 1.
            4. Stereo → keep even-indexed samples (first channel).
            5. Pitch-shift by the signed semitone amount.

        Raises:
            AssetDirectoryNotFoundError, AssetNotFoundError, SampleNameError:
                from locate().
            DecodeError: The decoder failed.
            UnsupportedChannelLayoutError: More than two channels.
        """
        path, resolution = self.locate(instrument, pitch)

        decoded = self.decoder.decode(path)
        if decoded.channels > MAX_CHANNELS:
            raise UnsupportedChannelLayoutError(decoded.channels, path)

        samples = normalize_pcm(decoded.samples, decoded.bits_per_sample)
        if decoded.channels == 2:
            samples = take_first_channel(samples)

        shifted = np.asarray(
            self.shifter.shift(samples, decoded.sample_rate, resolution.shift_semitones),
            dtype=np.float32,
        )
        if shifted.shape != samples.shape:
            raise RuntimeError(
                f"Pitch shifter returned {shifted.shape[0]} samples for {samples.shape[0]} input samples"
            )

        return RenderedSample(
            sample_rate=decoded.sample_rate,
            samples=shifted,
            pitch=pitch,
            source_pitch=resolution.pitch,
            shift_semitones=resolution.shift_semitones,
            source_path=path,
        )

    def synthesize(self, instrument: Instrument, pitch: Pitch) -> tuple[int, np.ndarray]:
        """Return ``(sample_rate, samples)`` for ``pitch``. See render()."""
        return self.render(instrument, pitch).as_tuple()

    # ------------------------------------------------------------------
    # Stage 3: Playback
    # ------------------------------------------------------------------

    def play(self, instrument: Instrument, pitch: Pitch) -> RenderedSample:
        """Render ``pitch`` and play it, blocking until playback finishes.

        Raises:
            Everything render() raises, plus PlaybackError from the player.
        """
        rendered = self.render(instrument, pitch)
        logger.info(
            "Playing %s (%.2f s at %d Hz)",
            pitch,
            rendered.duration_sec,
            rendered.sample_rate,
        )
        self.player.play(rendered.sample_rate, 1, rendered.samples)
        return rendered
