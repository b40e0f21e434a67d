"""Sample formats: parsing format names and describing formats."""

from __future__ import annotations

import enum
from typing import Optional, Sequence

from .options import get_option

__all__ = [
    "FORMAT_NATIVE",
    "FORMAT_UNSIGNED",
    "FORMAT_LE",
    "FORMAT_BE",
    "FORMAT_MAX",
    "AudioFormat",
    "parse_audio_format",
    "audio_format",
    "format_description",
]

FORMAT_NATIVE = 0x1F
FORMAT_UNSIGNED = 0x100
FORMAT_LE = 0x200
FORMAT_BE = 0x400
FORMAT_MAX = 10
_SCRIPT = 0x1000


class AudioFormat(enum.IntEnum):
    """Sample formats; endianness flags may be or-ed onto the PCM ones."""

    PCM8S = 0
    PCM16S = 1
    PCM24S = 2
    PCM32S = 3
    FLOAT = 4
    DOUBLE = 5
    MULAW = 6
    ALAW = 7
    IMA4_ADPCM = 8
    PCM24S_PACKED = 9
    PCM8U = PCM8S | FORMAT_UNSIGNED
    PCM16U = PCM16S | FORMAT_UNSIGNED
    PCM24U = PCM24S | FORMAT_UNSIGNED
    PCM32U = PCM32S | FORMAT_UNSIGNED
    AAXS16S = _SCRIPT | PCM16S


# Names whose value replaces any endianness given by a suffix.
_REPLACING = {
    "AAX_PCM8S": AudioFormat.PCM8S,
    "AAX_MULAW": AudioFormat.MULAW,
    "AAX_ALAW": AudioFormat.ALAW,
    "AAX_IMA4_ADPCM": AudioFormat.IMA4_ADPCM,
    "AAX_PCM24S_PACKED": AudioFormat.PCM24S_PACKED,
    "AAX_PCM8U": AudioFormat.PCM8U,
    "AAX_AAXS16S": AudioFormat.AAXS16S,
    "AAX_AAXS24S": AudioFormat.AAXS16S,
}

# Names whose value is combined with the endianness of a suffix.
_COMBINING = {
    "AAX_PCM16S": AudioFormat.PCM16S,
    "AAX_PCM24S": AudioFormat.PCM24S,
    "AAX_PCM32S": AudioFormat.PCM32S,
    "AAX_FLOAT": AudioFormat.FLOAT,
    "AAX_DOUBLE": AudioFormat.DOUBLE,
    "AAX_PCM16U": AudioFormat.PCM16U,
    "AAX_PCM24U": AudioFormat.PCM24U,
    "AAX_PCM32U": AudioFormat.PCM32U,
}

_SIGNED_TEXT = (
    "signed, 8-bits per sample",
    "signed, 16-bits per sample",
    "signed, 24-bits per sample, 32-bit encoded",
    "signed, 32-bits per sample",
    "32-bit floating point, range: -1.0 to 1.0",
    "64-bit floating point, range: -1.0 to 1.0",
    "mulaw, 16-bit with 2:1 compression",
    "alaw, 16-bit with 2:1 compression",
    "IMA4 ADPCM, 16-bit with 4:1 compression",
    "signed, 24-bits per sample, 24-bit encoded",
)

_UNSIGNED_TEXT = (
    "unsigned, 8-bits per sample",
    "unsigned, 16-bits per sample",
    "unsigned, 24-bits per sample, 32-bit encoded",
    "unsigned, 32-bits per sample",
)


def parse_audio_format(name: str, default: int) -> int:
    """Parse a name such as ``AAX_PCM16S_LE`` into a format value.

    Matching is case-insensitive. An ``_LE`` or ``_BE`` suffix adds the
    endianness flag to formats that take one. Unknown names yield
    ``default``.
    """
    upper = name.upper()
    value = 0
    if upper.endswith("_LE"):
        upper = upper[:-3]
        value = FORMAT_LE
    elif upper.endswith("_BE"):
        upper = upper[:-3]
        value = FORMAT_BE

    if upper in _REPLACING:
        return int(_REPLACING[upper])
    if upper in _COMBINING:
        return value | int(_COMBINING[upper])
    return default


def audio_format(argv: Sequence[str], default: int) -> Optional[int]:
    """Return the format given by ``-f``/``--format``, or None if absent."""
    name = get_option(argv, "-f")
    if name is None:
        name = get_option(argv, "--format")
    if name is None:
        return None
    return parse_audio_format(name, default)


def format_description(fmt: int) -> str:
    """Return a human readable description of a format value."""
    pos = fmt & FORMAT_NATIVE
    if pos >= FORMAT_MAX:
        return ""
    if fmt & FORMAT_UNSIGNED and pos <= AudioFormat.PCM32S:
        return _UNSIGNED_TEXT[pos]
    return _SIGNED_TEXT[pos]