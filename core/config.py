"""
Configuration dataclass for the sample synthesis pipeline.

The config object decouples filesystem layout and logging verbosity from
function signatures, so the CLI, tests and library callers can all build
an engine from the same immutable description.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

# Extensions the decoder boundary knows how to open losslessly.
SUPPORTED_EXTENSIONS: frozenset[str] = frozenset({".flac", ".wav", ".aiff", ".aif"})

VALID_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

ENV_SAMPLES_ROOT = "FORME_SAMPLES_ROOT"
ENV_SAMPLE_EXTENSION = "FORME_SAMPLE_EXTENSION"
ENV_LOG_LEVEL = "FORME_LOG_LEVEL"


@dataclass(frozen=True)
class SamplerConfig:
    """
    Configuration for locating and rendering instrument samples.

    Attributes:
        samples_root: Directory holding one sub-directory per instrument.
            Defaults to ``./resources/samples`` relative to the working
            directory.
        extension: File extension of sample assets, including the dot.
            Defaults to ``.flac``.
        log_level: Logging level name used by the CLI. Defaults to ``INFO``.

    Example:
        >>> config = SamplerConfig(samples_root=Path("/opt/samples"))
        >>> engine = SampleSynthesisEngine(config)
    """

    samples_root: Path = field(default_factory=lambda: Path("./resources/samples"))
    extension: str = ".flac"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "samples_root", Path(self.samples_root))
        object.__setattr__(self, "extension", self.extension.lower())
        object.__setattr__(self, "log_level", self.log_level.upper())

        if not self.extension.startswith("."):
            raise ValueError(f"extension must start with '.', got {self.extension!r}")
        if self.extension not in SUPPORTED_EXTENSIONS:
            raise ValueError(
                f"Unsupported sample extension {self.extension!r}, "
                f"valid options: {sorted(SUPPORTED_EXTENSIONS)}"
            )
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Unknown log_level {self.log_level!r}, "
                f"valid options: {sorted(VALID_LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls) -> "SamplerConfig":
        """Build a config from ``FORME_*`` environment variables.

        Unset variables fall back to the dataclass defaults.
        """
        defaults = cls()
        return cls(
            samples_root=Path(os.environ.get(ENV_SAMPLES_ROOT, str(defaults.samples_root))),
            extension=os.environ.get(ENV_SAMPLE_EXTENSION, defaults.extension),
            log_level=os.environ.get(ENV_LOG_LEVEL, defaults.log_level),
        )


DEFAULT_CONFIG = SamplerConfig()
"""Default configuration: ./resources/samples, .flac assets, INFO logging."""
