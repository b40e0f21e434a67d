"""Source types of waveforms, noises and filter/effect options."""

from __future__ import annotations

import enum
from typing import List, Optional

__all__ = [
    "SOURCE_MASK",
    "NOISE_MASK",
    "ORDER_MASK",
    "FIRST_WAVE",
    "LAST_WAVE",
    "FIRST_NOISE",
    "LAST_NOISE",
    "SourceType",
    "source_string",
]

SOURCE_MASK = 0x1F
NOISE_MASK = 0x60
ORDER_MASK = 0xFF00


class SourceType(enum.IntEnum):
    """Bit fields describing a signal source; members may be or-ed."""

    WAVE_NONE = 0
    CONSTANT = 1
    SAWTOOTH = 2
    SQUARE = 3
    TRIANGLE = 4
    SINE = 5
    CYCLOID = 6
    IMPULSE = 7
    PURE_SAWTOOTH = 8
    PURE_SQUARE = 9
    PURE_TRIANGLE = 10
    PURE_SINE = 11
    PURE_CYCLOID = 12
    ENVELOPE_FOLLOW = 13
    TIMED_TRANSITION = 14
    RANDOMNESS = 15
    RANDOM_SELECT = 16

    WHITE_NOISE = 0x20
    PINK_NOISE = 0x40
    BROWNIAN_NOISE = 0x60

    EFFECT_1ST_ORDER = 0x100
    EFFECT_2ND_ORDER = 0x200
    STAGE_1 = 0x400
    STAGE_2 = 0x800
    STAGE_3 = 0xC00
    STAGE_4 = 0x1000
    STAGE_5 = 0x1400
    STAGE_6 = 0x1800
    STAGE_7 = 0x1C00
    STAGE_8 = 0x2000

    ORDER_6DB = 0x100
    ORDER_12DB = 0x200
    ORDER_24DB = 0x300
    ORDER_36DB = 0x400
    ORDER_48DB = 0x500
    RESONANCE_FACTOR = 0x8000

    INVERSE = 0x10000
    BESSEL = 0x20000
    LFO_EXPONENTIAL = 0x40000


FIRST_WAVE = SourceType.CONSTANT
LAST_WAVE = SourceType.PURE_CYCLOID
FIRST_NOISE = SourceType.WHITE_NOISE
LAST_NOISE = SourceType.BROWNIAN_NOISE

_WAVE_NAMES = {
    SourceType.SAWTOOTH: "sawtooth",
    SourceType.SQUARE: "square",
    SourceType.TRIANGLE: "triangle",
    SourceType.SINE: "sine",
    SourceType.CYCLOID: "cycloid",
    SourceType.ENVELOPE_FOLLOW: "envelope",
    SourceType.TIMED_TRANSITION: "timed",
    SourceType.RANDOMNESS: "randomness",
    SourceType.RANDOM_SELECT: "random",
    SourceType.PURE_SAWTOOTH: "pure-sawtooth",
    SourceType.PURE_SQUARE: "pure-square",
    SourceType.PURE_TRIANGLE: "pure-triangle",
    SourceType.PURE_SINE: "pure-sine",
    SourceType.PURE_CYCLOID: "pure-cycloid",
}

_STAGE_NAMES = {
    SourceType.STAGE_1: "1-stage",
    SourceType.STAGE_2: "2-stage",
    SourceType.STAGE_3: "3-stage",
    SourceType.STAGE_4: "4-stage",
    SourceType.STAGE_5: "5-stage",
    SourceType.STAGE_6: "6-stage",
    SourceType.STAGE_7: "7-stage",
    SourceType.STAGE_8: "8-stage",
}

_FILTER_ORDER_NAMES = {
    SourceType.ORDER_6DB: "6db",
    SourceType.ORDER_12DB: "12db",
    SourceType.ORDER_24DB: "24db",
    SourceType.ORDER_36DB: "36db",
    SourceType.ORDER_48DB: "48db",
    SourceType.RESONANCE_FACTOR: "Q",
}

_STEADY_NAMES = {
    SourceType.CONSTANT: "true",
    SourceType.IMPULSE: "impulse",
}

_NOISE_NAMES = {
    SourceType.WHITE_NOISE: "white-noise",
    SourceType.PINK_NOISE: "pink-noise",
    SourceType.BROWNIAN_NOISE: "brownian-noise",
}


def source_string(stype: int, freqfilter: bool = False,
                  delay: bool = False) -> Optional[str]:
    """Describe a source type as ``|``-separated keywords.

    ``freqfilter`` selects the frequency-filter reading of the order bits,
    ``delay`` the delay-effect reading. Returns None when nothing applies.
    """
    value = int(stype)
    prefix = "inverse-" if value & SourceType.INVERSE else ""
    parts: List[str] = []

    wave = _WAVE_NAMES.get(value & SOURCE_MASK)
    if wave:
        parts.append(wave)

    order = value & ORDER_MASK
    if delay:
        if order & SourceType.EFFECT_1ST_ORDER:
            parts.append("1st-order")
        elif order & SourceType.EFFECT_2ND_ORDER:
            parts.append("2nd-order")
        stage = _STAGE_NAMES.get(order)
        if stage:
            parts.append(stage)

    if freqfilter:
        filter_order = _FILTER_ORDER_NAMES.get(order)
        if filter_order:
            parts.append(filter_order)
        if value & SourceType.BESSEL:
            parts.append("bessel")
        if value & SourceType.LFO_EXPONENTIAL:
            parts.append("logarithmic")
    else:
        steady = _STEADY_NAMES.get(value & SOURCE_MASK)
        if steady:
            parts.append(steady)
        noise = _NOISE_NAMES.get(value & NOISE_MASK)
        if noise:
            parts.append(noise)
        if value & SourceType.LFO_EXPONENTIAL:
            parts.append("exponential")

    text = prefix + "|".join(parts)
    return text or None