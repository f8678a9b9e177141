"""
core/errors.py — Error taxonomy for the pitch and sampling layers.

Every error derives from FormeError and from the builtin exception it
specialises, so callers may catch either the project base class or the
familiar builtin (ValueError, FileNotFoundError, RuntimeError).

    FormeError
    ├── PitchParseError               (ValueError)
    │   └── SampleNameError
    ├── UndefinedQualityError         (ValueError)
    ├── InvalidScaleError             (ValueError)
    ├── UnsupportedChannelLayoutError (ValueError)
    ├── AssetDirectoryNotFoundError   (FileNotFoundError)
    ├── AssetNotFoundError            (FileNotFoundError)
    ├── DecodeError                   (RuntimeError)
    └── PlaybackError                 (RuntimeError)

None of these are retried anywhere: a bad file name or a missing directory
will not fix itself on a second attempt.
"""

from __future__ import annotations

from pathlib import Path


class FormeError(Exception):
    """Base class for every error raised by this project."""


class PitchParseError(FormeError, ValueError):
    """Raised when a string is not valid pitch text (e.g. 'H0', 'C###0').

    Args:
        text: The rejected input.
        reason: Short description of which part of the grammar failed.
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid pitch text {text!r}: {reason}")


class SampleNameError(PitchParseError):
    """Raised when a sample file stem in an instrument directory is not pitch text.

    Sample directories are authored by hand; an unparsable name is a
    configuration error and aborts resolution instead of being skipped.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(path.stem, f"{reason} (sample file {path.name!r})")


class UndefinedQualityError(FormeError, ValueError):
    """Raised when a (diatonic number, semitone count) pair has no quality."""

    def __init__(self, number: int, semitones: int) -> None:
        self.number = number
        self.semitones = semitones
        super().__init__(
            f"No interval quality for diatonic number {number} "
            f"with {semitones} semitones"
        )


class InvalidScaleError(FormeError, ValueError):
    """Raised when scale steps do not add up to one octave."""


class UnsupportedChannelLayoutError(FormeError, ValueError):
    """Raised when a decoded sample has more than two channels."""

    def __init__(self, channels: int, path: Path | None = None) -> None:
        self.channels = channels
        self.path = path
        where = f" in {path.name!r}" if path is not None else ""
        super().__init__(
            f"Only mono and stereo samples are supported, got {channels} channels{where}"
        )


class AssetDirectoryNotFoundError(FormeError, FileNotFoundError):
    """Raised when an instrument has no sample directory on disk."""

    def __init__(self, instrument: str, directory: Path) -> None:
        self.instrument = instrument
        self.directory = directory
        super().__init__(f"Sample directory for {instrument!r} not found: {directory}")


class AssetNotFoundError(FormeError, FileNotFoundError):
    """Raised when an instrument directory exists but holds no samples."""

    def __init__(self, instrument: str, directory: Path, extension: str) -> None:
        self.instrument = instrument
        self.directory = directory
        self.extension = extension
        super().__init__(
            f"No {extension} samples for {instrument!r} in {directory}"
        )


class DecodeError(FormeError, RuntimeError):
    """Raised when the audio decoder cannot read a sample file."""


class PlaybackError(FormeError, RuntimeError):
    """Raised when the audio output device rejects or fails a playback."""
