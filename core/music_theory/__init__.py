"""
core/music_theory/ — Pure pitch and interval algebra.

Exports:
    Pitch:    PitchName, Accidental, Pitch, parse_pitch, format_pitch,
              pitch_to_hertz, pitch_from_coordinate
    Interval: Interval, IntervalQuality, IntervalStep, SpecificInterval
    Scale:    Scale
    Resolver: Resolution, resolve_nearest
"""

from core.music_theory.interval import Interval, IntervalQuality, IntervalStep, SpecificInterval
from core.music_theory.pitch import (
    Accidental,
    Pitch,
    PitchName,
    format_pitch,
    parse_pitch,
    pitch_from_coordinate,
    pitch_to_hertz,
)
from core.music_theory.resolver import Resolution, resolve_nearest
from core.music_theory.scales import Scale

__all__ = [
    # Pitch
    "PitchName",
    "Accidental",
    "Pitch",
    "parse_pitch",
    "format_pitch",
    "pitch_to_hertz",
    "pitch_from_coordinate",
    # Interval
    "Interval",
    "IntervalQuality",
    "IntervalStep",
    "SpecificInterval",
    # Scale
    "Scale",
    # Resolver
    "Resolution",
    "resolve_nearest",
]
