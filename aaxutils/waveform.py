"""Building AAXS sound scripts that mix generated waveforms."""

from __future__ import annotations

import enum
import math

from .sources import FIRST_NOISE, FIRST_WAVE, LAST_NOISE, LAST_WAVE, SourceType, source_string

__all__ = ["Processing", "WaveformScript"]

_LABELS = ("none", "overwrite", "add", "mix", "modulate", "append")
_LIMIT = 4095
_HEADER = '<?xml version="1.0"?>\n<aeonwave>\n <sound frequency="{:.0f}">\n'
_FOOTER = " </sound>\n</aeonwave>"
_MARKER = " </sound>"


class Processing(enum.IntEnum):
    """How a new waveform acts on the existing sound data."""

    NONE = 0
    OVERWRITE = 1
    ADD = 2
    MIX = 3
    RINGMODULATE = 4
    APPEND = 5

    @property
    def label(self) -> str:
        """The keyword used in the sound script."""
        return _LABELS[self.value]


def _pitch(rate: float, freq: float) -> float:
    if freq:
        return rate / freq
    if rate == 0 or math.isnan(rate):
        return math.nan
    return math.copysign(math.inf, rate)


class WaveformScript:
    """An AAXS sound script to which waveforms and noises are added."""

    def __init__(self, base_frequency: float = 0.0) -> None:
        self.base_frequency = float(base_frequency)
        self._script = ""
        self._script_frequency = self.base_frequency
        self._started = False

    def process(self, rate: float, stype: int, ratio: float,
                ptype: int = Processing.ADD) -> bool:
        """Add a waveform or noise to the script.

        ``rate`` is the frequency of a waveform or the staticity of a noise.
        The script starts afresh on first use, when overwriting, or when
        ``ratio`` is 1.0. Returns False only if the script has no sound
        element to extend.
        """
        freq = self.base_frequency
        if not self._started or ptype == Processing.OVERWRITE or ratio == 1.0:
            freq = rate
            self._script = (_HEADER.format(freq) + _FOOTER)[:_LIMIT]
            self._script_frequency = freq
            self._started = True

        if not (ratio > 0.0 and 0 <= int(ptype) < len(_LABELS)):
            return True

        pos = self._script.find(_MARKER)
        if pos < 0:
            return False

        value = int(stype)
        processing = _LABELS[int(ptype)]
        waveform = source_string(value) or ""
        inverse = "inverse-" if value & SourceType.INVERSE else ""

        if FIRST_WAVE <= value <= LAST_WAVE:
            line = (f'  <waveform src="{inverse}{waveform}" processing="{processing}"'
                    f' ratio="{ratio:.3f}" pitch="{_pitch(rate, freq):.3f}"/>\n')
            self._script = (self._script[:pos] + line + _FOOTER)[:_LIMIT]
        elif FIRST_NOISE <= value <= LAST_NOISE:
            line = (f'  <waveform src="{inverse}{waveform}" processing="{processing}"'
                    f' ratio="{ratio:.3f}" staticity="{rate:.3f}"/>\n')
            self._script = (self._script[:pos] + line + _FOOTER)[:_LIMIT]

        self.base_frequency = self._script_frequency
        return True

    def to_xml(self) -> str:
        """Return the script text; empty before the first call to process."""
        return self._script