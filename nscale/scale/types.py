"""Dataclasses shared by the validator, generator, and output layers."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ScaleParameters:
    notes: int
    start_value: float
    is_midi: bool = False
    show_interval: bool = False
    output_path: Optional[str] = None


@dataclass(frozen=True)
class ScaleEntry:
    step_index: int
    ratio_from_base: float
    frequency_hz: float
