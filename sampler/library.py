"""
sampler/library.py — Instrument sample directories on disk.

Layout:

    <samples_root>/<snake_case(instrument)>/<PitchText><extension>

    e.g. ./resources/samples/salamander_grand_piano/A#4.flac

Nothing is cached: every call lists the directory again, so samples
added while the program runs are picked up on the next request.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path

from core.config import DEFAULT_CONFIG, SamplerConfig
from core.errors import (
    AssetDirectoryNotFoundError,
    AssetNotFoundError,
    PitchParseError,
    SampleNameError,
)
from core.music_theory.pitch import Pitch, format_pitch, parse_pitch

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_WORD = re.compile(r"[^0-9a-zA-Z]+")


def snake_case(name: str) -> str:
    """'SalamanderGrandPiano' → 'salamander_grand_piano'."""
    words = _CAMEL_BOUNDARY.sub("_", name)
    return _NON_WORD.sub("_", words).strip("_").lower()


class Instrument(Enum):
    """Sampled instruments. The value is the display name."""

    SALAMANDER_GRAND_PIANO = "SalamanderGrandPiano"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def folder_name(self) -> str:
        return snake_case(self.value)

    @classmethod
    def from_name(cls, name: str) -> Instrument:
        """Look up by display name, member name or folder name (case-insensitive).

        Raises:
            ValueError: No instrument matches.
        """
        key = snake_case(name)
        for instrument in cls:
            if key in (instrument.folder_name, instrument.name.lower()):
                return instrument
        raise ValueError(
            f"Unknown instrument {name!r}, valid options: {[i.display_name for i in cls]}"
        )

    def __str__(self) -> str:
        return self.value


class SampleLibrary:
    """Maps instruments and pitches to sample files under a root directory."""

    def __init__(self, config: SamplerConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    @property
    def root(self) -> Path:
        return self._config.samples_root

    @property
    def extension(self) -> str:
        return self._config.extension

    def directory_for(self, instrument: Instrument) -> Path:
        """Sample directory of an instrument (may not exist)."""
        return self.root / instrument.folder_name

    def require_directory(self, instrument: Instrument) -> Path:
        """Sample directory of an instrument.

        Raises:
            AssetDirectoryNotFoundError: The directory does not exist.
        """
        directory = self.directory_for(instrument)
        if not directory.is_dir():
            raise AssetDirectoryNotFoundError(instrument.display_name, directory)
        return directory

    def path_for(self, instrument: Instrument, pitch: Pitch) -> Path:
        """Expected file for a pitch, spelled exactly as requested."""
        return self.directory_for(instrument) / f"{format_pitch(pitch)}{self.extension}"

    def exact_sample(self, instrument: Instrument, pitch: Pitch) -> Path | None:
        """File whose name is the requested pitch text, or None."""
        path = self.path_for(instrument, pitch)
        return path if path.is_file() else None

    def sample_files(self, instrument: Instrument) -> list[Path]:
        """Sample files of an instrument, sorted by file name.

        Raises:
            AssetDirectoryNotFoundError: The directory does not exist.
        """
        directory = self.require_directory(instrument)
        return sorted(
            (
                path
                for path in directory.iterdir()
                if path.is_file() and path.suffix.lower() == self.extension
            ),
            key=lambda path: path.name,
        )

    def available_samples(self, instrument: Instrument) -> list[tuple[Pitch, Path]]:
        """Every sample of an instrument as (pitch, path), in file-name order.

        Raises:
            AssetDirectoryNotFoundError: The directory does not exist.
            AssetNotFoundError: The directory holds no sample files.
            SampleNameError: A file stem is not valid pitch text.
        """
        samples: list[tuple[Pitch, Path]] = []
        for path in self.sample_files(instrument):
            try:
                pitch = parse_pitch(path.stem)
            except PitchParseError as exc:
                raise SampleNameError(path, exc.reason) from exc
            samples.append((pitch, path))

        if not samples:
            raise AssetNotFoundError(
                instrument.display_name, self.directory_for(instrument), self.extension
            )
        logger.debug(
            "Found %d samples for %s in %s",
            len(samples),
            instrument.display_name,
            self.directory_for(instrument),
        )
        return samples
