"""Reading M3U and PLS playlists and picking a stream from them."""

from __future__ import annotations

import os
import random
from typing import List, Optional

__all__ = [
    "MAX_ENTRIES",
    "STREAM_DRIVER",
    "read_m3u",
    "read_pls",
    "is_playlist",
    "url_from_playlist",
]

MAX_ENTRIES = 16
STREAM_DRIVER = "AeonWave on Audio Files: "
_NAME_LIMIT = 1024
_PLS_MIN_REMAINING = len("FileXX=") + 1

_M3U_EXTS = (".m3u", ".m3u8")
_PLS_EXTS = (".pls",)


def read_m3u(text: Optional[str]) -> List[str]:
    """Return up to MAX_ENTRIES entries of an M3U playlist, skipping comments."""
    entries: List[str] = []
    if not text:
        return entries
    pos = 0
    end = len(text)
    while end - pos > 1 and len(entries) < MAX_ENTRIES:
        nxt = text.find("\r\n", pos + 1)
        if nxt < 0:
            nxt = text.find("\n", pos + 1)
        if nxt < 0:
            nxt = end
        if text[pos] != "#":
            entries.append(text[pos:nxt])
        if nxt < end and text[nxt] == "\r":
            nxt += 1
        if nxt < end and text[nxt] == "\n":
            nxt += 1
        pos = nxt
    return entries


def read_pls(text: Optional[str]) -> List[str]:
    """Return up to MAX_ENTRIES ``FileN=`` URLs of a PLS playlist."""
    entries: List[str] = []
    if not text:
        return entries
    pos = 0
    end = len(text)
    while end - pos > _PLS_MIN_REMAINING and len(entries) < MAX_ENTRIES:
        newline = text.find("\n", pos + 1)
        nxt = end if newline < 0 else newline + 1
        if text[pos:pos + 4].lower() == "file":
            equals = text.find("=", pos)
            if equals >= 0:
                entries.append(text[equals + 1:nxt - 1])
        pos = nxt
    return entries


def _extension(name: str) -> str:
    return os.path.splitext(name)[1].lower() if "." in name else ""


def is_playlist(name: str) -> bool:
    """Return True if ``name`` has an M3U, M3U8 or PLS extension."""
    dot = name.rfind(".")
    return dot >= 0 and name[dot:].lower() in _M3U_EXTS + _PLS_EXTS


def url_from_playlist(playlist: str, rng: Optional[random.Random] = None) -> str:
    """Pick a random stream from a playlist file as a device name.

    A ``driver: `` prefix before the path is stripped. When ``playlist`` is
    not a playlist, cannot be read or holds no entries, it is returned as is.
    """
    if not is_playlist(playlist):
        return playlist
    dot = playlist.rfind(".")
    ext = playlist[dot:].lower()

    path = playlist
    colon = path.find(":")
    if colon >= 0:
        path = path[colon + 1:]
        if path.startswith(" "):
            path = path[1:]

    try:
        with open(path, "rb") as handle:
            text = handle.read().decode("utf-8", errors="replace")
    except OSError:
        return playlist

    text = text.split("\0", 1)[0]
    entries = read_m3u(text) if ext in _M3U_EXTS else read_pls(text)
    if not entries:
        return playlist

    chooser = rng if rng is not None else random.Random()
    url = entries[chooser.randrange(len(entries))]
    return STREAM_DRIVER + url[: _NAME_LIMIT - len(STREAM_DRIVER)]