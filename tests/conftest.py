"""
Shared fixtures for the test suite.

Centralizes fake audio boundaries and sample-directory builders so
individual test files don't need to repeat decoder/shifter/player
boilerplate.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from core.audio.types import DecodedSample
from core.config import SamplerConfig
from sampler.library import Instrument

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PIANO = Instrument.SALAMANDER_GRAND_PIANO

OCTAVE_ZERO_NAMES: tuple[str, ...] = ("C0", "D0", "E0", "F0", "G0", "A0", "B0")
"""Natural pitches of octave 0, the candidate set used in resolver scenarios."""


# ---------------------------------------------------------------------------
# Fake boundaries
# ---------------------------------------------------------------------------


class FakeDecoder:
    """Deterministic decoder — no soundfile.

    Returns the same integer ramp for every path and records the paths it
    was asked to decode.
    """

    def __init__(
        self,
        *,
        sample_rate: int = 44100,
        bits_per_sample: int = 16,
        channels: int = 1,
        samples: np.ndarray | None = None,
    ) -> None:
        if samples is None:
            samples = np.array([0, 16383, 32767, -32767, -16383, 0, 100, -100], dtype=np.int32)
        self.sample_rate = sample_rate
        self.bits_per_sample = bits_per_sample
        self.channels = channels
        self.samples = samples
        self.paths: list[Path] = []

    def decode(self, path: Path) -> DecodedSample:
        self.paths.append(Path(path))
        return DecodedSample(
            sample_rate=self.sample_rate,
            bits_per_sample=self.bits_per_sample,
            channels=self.channels,
            samples=self.samples,
        )


class FakeShifter:
    """Identity pitch shifter that records the requested shift amounts."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, float]] = []

    def shift(self, samples: np.ndarray, sample_rate: int, n_steps: float) -> np.ndarray:
        self.calls.append((sample_rate, n_steps))
        return np.asarray(samples, dtype=np.float32).copy()


class FakePlayer:
    """Player that stores what it was asked to play instead of making sound."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int, np.ndarray]] = []

    def play(self, sample_rate: int, channels: int, samples: np.ndarray) -> None:
        self.calls.append((sample_rate, channels, samples))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def make_sample_dir(root: Path, names: tuple[str, ...] | list[str], extension: str = ".flac") -> Path:
    """Create ``root/salamander_grand_piano`` with one empty file per pitch name."""
    directory = root / PIANO.folder_name
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / f"{name}{extension}").write_bytes(b"fake flac")
    return directory


@pytest.fixture()
def config(tmp_path: Path) -> SamplerConfig:
    """Config rooted at an empty temporary samples directory."""
    return SamplerConfig(samples_root=tmp_path)


@pytest.fixture()
def octave_zero_dir(tmp_path: Path) -> Path:
    """Piano directory holding C0..B0 naturals."""
    return make_sample_dir(tmp_path, OCTAVE_ZERO_NAMES)


@pytest.fixture()
def fake_decoder() -> FakeDecoder:
    return FakeDecoder()


@pytest.fixture()
def fake_shifter() -> FakeShifter:
    return FakeShifter()


@pytest.fixture()
def fake_player() -> FakePlayer:
    return FakePlayer()
