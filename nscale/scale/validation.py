"""Strict parsing and range checks for the positional CLI arguments."""

from __future__ import annotations

import math

from nscale.scale.errors import InvalidNumber, MidiOutOfRange, NonPositiveFrequency, NotesOutOfRange
from nscale.scale.types import ScaleParameters
from nscale.util.logging import get_logger

MIN_NOTES = 1
MAX_NOTES = 24
MIDI_MIN = 0.0
MIDI_MAX = 127.0

logger = get_logger(__name__)


def parse_notes(text: str) -> int:
    """Parse N as a strict integer in [1, 24]."""
    try:
        notes = int(str(text).strip())
    except ValueError as exc:
        raise InvalidNumber("N", text) from exc
    if notes < MIN_NOTES or notes > MAX_NOTES:
        raise NotesOutOfRange(notes)
    return notes


def parse_start_value(text: str) -> float:
    try:
        value = float(str(text).strip())
    except ValueError as exc:
        raise InvalidNumber("startVal", text) from exc
    if not math.isfinite(value):
        raise InvalidNumber("startVal", text)
    return value


def validate_start_value(value: float, is_midi: bool) -> None:
    """Range-check startVal; a negative MIDI note only warns."""
    if is_midi:
        if value > MIDI_MAX:
            raise MidiOutOfRange(value)
        if value < MIDI_MIN:
            logger.warning("MIDI startVal must be >= 0 (got %g), continuing", value)
    elif value <= 0.0:
        raise NonPositiveFrequency(value)


def build_parameters(
    notes_text: str,
    start_text: str,
    *,
    is_midi: bool = False,
    show_interval: bool = False,
    output_path: str | None = None,
) -> ScaleParameters:
    notes = parse_notes(notes_text)
    start_value = parse_start_value(start_text)
    validate_start_value(start_value, is_midi)
    return ScaleParameters(
        notes=notes,
        start_value=start_value,
        is_midi=is_midi,
        show_interval=show_interval,
        output_path=output_path,
    )
