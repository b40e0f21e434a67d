"""Option parsing, playlist, format, source-type and waveform-script helpers for audio tools."""

__version__ = "0.1.0"

__all__ = ["formats", "geometry", "options", "playlist", "sources", "waveform"]