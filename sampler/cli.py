"""
Command-line entry point for pitch lookups and sample rendering.

CLI entry point::

    python -m sampler.cli hertz A4
    python -m sampler.cli interval C0 E0
    python -m sampler.cli nearest C#4
    python -m sampler.cli render C#4 --output c_sharp_4.wav
    python -m sampler.cli play C#4

Configuration comes from ``FORME_*`` environment variables, optionally
loaded from a ``.env`` file in the working directory. Diagnostics go to
stderr; results are printed to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from core.config import SamplerConfig
from core.errors import FormeError
from core.music_theory.interval import Interval
from core.music_theory.pitch import Pitch
from sampler.engine import SampleSynthesisEngine
from sampler.library import Instrument

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s.%(msecs)03d " "[%(name)s] %(levelname)s " "%(message)s"
_LOG_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the root logger to write to stderr.

    Args:
        level: Logging level or level name (default: INFO)
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # librosa pulls in numba, which logs compilation at INFO
    logging.getLogger("librosa").setLevel(logging.WARNING)
    logging.getLogger("numba").setLevel(logging.WARNING)


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _cmd_hertz(args: argparse.Namespace, config: SamplerConfig) -> int:
    pitch = Pitch.parse(args.pitch)
    print(f"{pitch}\t{pitch.hertz():.2f} Hz")
    return 0


def _cmd_interval(args: argparse.Namespace, config: SamplerConfig) -> int:
    interval = Interval(Pitch.parse(args.first), Pitch.parse(args.second))
    specific = interval.specific_interval()
    print(
        f"{interval.lower} → {interval.upper}\t"
        f"number={interval.diatonic_number()}\t"
        f"semitones={interval.semitone_count()}\t"
        f"{specific.label}"
    )
    return 0


def _cmd_nearest(args: argparse.Namespace, config: SamplerConfig) -> int:
    engine = SampleSynthesisEngine(config)
    path, resolution = engine.locate(Instrument.from_name(args.instrument), Pitch.parse(args.pitch))
    print(f"{path}\tshift={resolution.shift_semitones:+d}")
    return 0


def _cmd_render(args: argparse.Namespace, config: SamplerConfig) -> int:
    import soundfile as sf  # deferred: only this command writes files

    engine = SampleSynthesisEngine(config)
    rendered = engine.render(Instrument.from_name(args.instrument), Pitch.parse(args.pitch))
    output = Path(args.output)
    sf.write(str(output), rendered.samples, rendered.sample_rate)
    print(f"{output}\t{rendered.duration_sec:.2f} s\tsource={rendered.source_path.name}")
    return 0


def _cmd_play(args: argparse.Namespace, config: SamplerConfig) -> int:
    engine = SampleSynthesisEngine(config)
    rendered = engine.play(Instrument.from_name(args.instrument), Pitch.parse(args.pitch))
    print(f"{rendered.pitch}\tsource={rendered.source_path.name}\tshift={rendered.shift_semitones:+d}")
    return 0


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forme",
        description="Pitch arithmetic and nearest-sample playback for sampled instruments.",
    )
    parser.add_argument(
        "--samples-root",
        default=None,
        help="Directory holding one folder per instrument (overrides FORME_SAMPLES_ROOT).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level name (overrides FORME_LOG_LEVEL).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    hertz = sub.add_parser("hertz", help="Print the frequency of a pitch.")
    hertz.add_argument("pitch", help="Pitch text, e.g. A4 or C#3.")
    hertz.set_defaults(func=_cmd_hertz)

    interval = sub.add_parser("interval", help="Describe the interval between two pitches.")
    interval.add_argument("first")
    interval.add_argument("second")
    interval.set_defaults(func=_cmd_interval)

    instrument_names = [i.display_name for i in Instrument]
    for name, func, help_text in (
        ("nearest", _cmd_nearest, "Show which sample would be used for a pitch."),
        ("render", _cmd_render, "Render a pitch to a WAV file."),
        ("play", _cmd_play, "Render a pitch and play it."),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("pitch")
        cmd.add_argument(
            "--instrument",
            default=instrument_names[0],
            help=f"Instrument name (default: {instrument_names[0]}). Options: {instrument_names}.",
        )
        if name == "render":
            cmd.add_argument("--output", "-o", required=True, help="Destination WAV file.")
        cmd.set_defaults(func=func)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and run the chosen command."""
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = SamplerConfig.from_env()
        if args.samples_root is not None:
            config = replace(config, samples_root=Path(args.samples_root))
        if args.log_level is not None:
            config = replace(config, log_level=args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(config.log_level)

    try:
        return args.func(args, config)
    except (FormeError, ValueError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
