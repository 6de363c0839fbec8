"""Equal-tempered scale generation.

The MIDI mapping is anchored on A3 = 220 Hz (note 57): C5 sits three
semitones above it, and MIDI note 0 is five octaves below C5. This lands
MIDI 69 on 440 Hz.

Frequencies are a running product of the step ratio starting at the base
frequency, so the last bits can differ from ``base * ratio**i``.
"""

from __future__ import annotations

import math
from typing import List

import numpy as np

from nscale.scale.types import ScaleEntry, ScaleParameters

SEMITONE_RATIO = math.pow(2.0, 1.0 / 12.0)
A3_HZ = 220.0
C5_HZ = A3_HZ * math.pow(SEMITONE_RATIO, 3)
MIDI_C0_HZ = C5_HZ * math.pow(0.5, 5)


def midi_to_frequency(note: float) -> float:
    """Return the 12-TET frequency in Hz for a (possibly fractional) MIDI note."""
    return MIDI_C0_HZ * math.pow(SEMITONE_RATIO, note)


def resolve_base_frequency(start_value: float, is_midi: bool) -> float:
    if is_midi:
        return midi_to_frequency(start_value)
    return float(start_value)


def step_ratio(notes: int) -> float:
    return math.pow(2.0, 1.0 / notes)


def generate_scale(notes: int, base_freq: float) -> List[ScaleEntry]:
    """Return ``notes + 1`` entries from the base up to and including the octave."""
    if notes < 1:
        raise ValueError("notes must be >= 1")
    ratio = step_ratio(notes)
    steps = np.arange(notes + 1)
    ratios = np.power(ratio, steps)
    factors = np.full(notes + 1, ratio, dtype=np.float64)
    factors[0] = base_freq
    freqs = np.multiply.accumulate(factors)
    return [
        ScaleEntry(step_index=int(i), ratio_from_base=float(r), frequency_hz=float(f))
        for i, r, f in zip(steps, ratios, freqs)
    ]


def scale_for(params: ScaleParameters) -> List[ScaleEntry]:
    base_freq = resolve_base_frequency(params.start_value, params.is_midi)
    return generate_scale(params.notes, base_freq)
