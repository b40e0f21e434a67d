"""Command-line option helpers shared by the audio utilities."""

from __future__ import annotations

import enum
import re
from typing import Optional, Sequence

__all__ = [
    "RenderMode",
    "get_option",
    "device_name",
    "capture_name",
    "renderer",
    "num_emitters",
    "frequency",
    "pitch",
    "pitch_range",
    "pitch_time",
    "gain",
    "envelope_stage",
    "gain_range",
    "gain_time",
    "parse_time",
    "playback_time",
    "duration",
    "render_mode",
    "input_file",
    "input_file_ext",
    "output_file",
    "wants_copyright",
]

_DEVICE_NAME_MAX = 255
_UNSET_STAGE = -1e-6

_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_RE = re.compile(r"\s*([+-]?\d+)")


class RenderMode(enum.Enum):
    """Output rendering mode of a playback device."""

    STEREO = "stereo"
    HRTF = "hrtf"
    SPATIAL = "spatial"
    SURROUND = "surround"


def _to_float(text: str) -> float:
    """Parse the leading number of ``text``; 0.0 when there is none."""
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _to_int(text: str) -> int:
    """Parse the leading integer of ``text``; 0 when there is none."""
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def get_option(argv: Sequence[str], option: str) -> Optional[str]:
    """Return the value of ``option`` in ``argv``, or None if absent.

    Accepts ``option=value`` and ``option value``; an option at the very end
    yields an empty string. When the option is given more than once, the
    last one wins.
    """
    found: Optional[str] = None
    args = iter(argv)
    for arg in args:
        if not arg.startswith(option):
            continue
        if len(arg) > len(option) and arg[len(option)] == "=":
            found = arg[len(option) + 1:]
        else:
            found = next(args, "")
    return found


def _first_option(argv: Sequence[str], *options: str) -> Optional[str]:
    for option in options:
        value = get_option(argv, option)
        if value is not None:
            return value
    return None


def renderer(argv: Sequence[str]) -> Optional[str]:
    """Return the renderer given by ``-r``/``--renderer``."""
    return _first_option(argv, "-r", "--renderer")


def device_name(argv: Sequence[str]) -> Optional[str]:
    """Return the device name, with `` on <renderer>`` appended if given."""
    name = _first_option(argv, "-d", "--device")
    if name is None:
        return None
    name = name[: _DEVICE_NAME_MAX - 1]
    backend = renderer(argv)
    if backend is not None:
        name = f"{name} on {backend}"
    return name[:_DEVICE_NAME_MAX]


def capture_name(argv: Sequence[str]) -> Optional[str]:
    """Return the capture device given by ``-c``/``--capture``."""
    return _first_option(argv, "-c", "--capture")


def num_emitters(argv: Sequence[str]) -> int:
    """Return the number of emitters (``-n``/``--num``), default 1."""
    value = _first_option(argv, "-n", "--num")
    return 1 if value is None else _to_int(value)


def frequency(argv: Sequence[str]) -> float:
    """Return the frequency (``-f``/``--frequency``), default 0.0."""
    value = _first_option(argv, "-f", "--frequency")
    return 0.0 if value is None else _to_float(value)


def _after(text: Optional[str], sep: str) -> Optional[str]:
    if text is None:
        return None
    pos = text.find(sep)
    return None if pos < 0 else text[pos + 1:]


def pitch(argv: Sequence[str]) -> float:
    """Return the pitch (``-p``/``--pitch``), default 1.0."""
    value = _first_option(argv, "-p", "--pitch")
    return 1.0 if value is None else _to_float(value)


def pitch_range(argv: Sequence[str]) -> float:
    """Return the pitch target after the first ``-`` of the pitch option."""
    value = _after(_first_option(argv, "-p", "--pitch"), "-")
    return 0.0 if value is None else _to_float(value)


def pitch_time(argv: Sequence[str]) -> float:
    """Return the pitch slide time after the ``:`` of the pitch option."""
    value = _after(_first_option(argv, "-p", "--pitch"), ":")
    return 0.0 if value is None else _to_float(value)


def gain(argv: Sequence[str]) -> float:
    """Return the gain (``-g``/``--gain``), default 1.0."""
    value = _first_option(argv, "-g", "--gain")
    return 1.0 if value is None else _to_float(value)


def envelope_stage(argv: Sequence[str], stage: int) -> float:
    """Return stage ``stage`` of a ``-``-separated gain envelope.

    Stage 0 is the value before the first ``-``. A missing stage yields
    a small negative sentinel.
    """
    value = _first_option(argv, "-g", "--gain")
    if value is None:
        return _UNSET_STAGE
    if stage <= 0:
        return _to_float(value)
    rest: Optional[str] = value
    for _ in range(stage):
        rest = _after(rest, "-")
        if rest is None:
            return _UNSET_STAGE
    return _to_float(rest)


def gain_range(argv: Sequence[str]) -> float:
    """Return the gain target: stage 1 of the gain envelope."""
    return envelope_stage(argv, 1)


def gain_time(argv: Sequence[str]) -> float:
    """Return the gain slide time after the ``:`` of the gain option."""
    value = _after(_first_option(argv, "-g", "--gain"), ":")
    return 1.0 if value is None else _to_float(value)


def parse_time(text: str) -> float:
    """Parse ``s``, ``m:s`` or ``h:m:s`` into seconds."""
    parts = text.split(":", 2)
    if len(parts) == 3:
        hours, minutes, seconds = parts
        return (_to_float(seconds) + 60.0 * _to_float(minutes)
                + 3600.0 * _to_float(hours))
    if len(parts) == 2:
        minutes, seconds = parts
        return _to_float(seconds) + 60.0 * _to_float(minutes)
    return _to_float(text)


def playback_time(argv: Sequence[str]) -> float:
    """Return the time (``-t``/``--time``) in seconds, default 0.0."""
    value = _first_option(argv, "-t", "--time")
    return 0.0 if value is None else parse_time(value)


def duration(argv: Sequence[str]) -> float:
    """Return the duration (``-t``/``--time``) in seconds, default 1.0."""
    value = _first_option(argv, "-t", "--time")
    return 1.0 if value is None else parse_time(value)


def render_mode(argv: Sequence[str]) -> RenderMode:
    """Return the render mode (``-m``/``--mode``), default stereo."""
    value = _first_option(argv, "-m", "--mode")
    if value is not None:
        lowered = value.lower()
        for mode in (RenderMode.HRTF, RenderMode.SPATIAL, RenderMode.SURROUND):
            if lowered == mode.value:
                return mode
    return RenderMode.STEREO


def input_file(argv: Sequence[str], default: Optional[str] = None) -> Optional[str]:
    """Return the input file (``-i``/``--input``) or ``default``."""
    value = _first_option(argv, "-i", "--input")
    return default if value is None else value


_VALUE_OPTIONS = frozenset(
    {"-o", "--output", "-d", "--device", "-r", "--renderer"}
)


def input_file_ext(argv: Sequence[str], ext: str) -> Optional[str]:
    """Return the first argument ending in ``ext`` (case-insensitive).

    Values of the output, device and renderer options are skipped.
    """
    suffix = ext.lower()
    args = iter(argv)
    for arg in args:
        if arg in _VALUE_OPTIONS:
            next(args, None)
            continue
        if len(arg) > len(ext) and arg.lower().endswith(suffix):
            return arg
    return None


def output_file(argv: Sequence[str], default: Optional[str] = None) -> Optional[str]:
    """Return the output file (``-o``/``--output``) or ``default``."""
    value = _first_option(argv, "-o", "--output")
    return default if value is None else value


def wants_copyright(argv: Sequence[str]) -> bool:
    """Return True if ``-c``/``--copyright`` was given."""
    return _first_option(argv, "-c", "--copyright") is not None