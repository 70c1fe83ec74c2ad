"""Song records and the tab-separated text format they are stored in."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Iterable

from muplayer.paths import escape

UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_ALBUM = "Unknown Album"
UNKNOWN_ARTIST = "Unknown Artist"

_U8 = re.compile(r"\+?[0-9]+")


class SongFormatError(ValueError):
    """Raised when a song record cannot be read."""


def _parse_u8(text: str) -> int | None:
    """Parse an unsigned byte, or return ``None`` if ``text`` is not one."""
    if not _U8.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 255 else None


def _parse_f32(text: str) -> float | None:
    """Parse a float written without surrounding whitespace, or return ``None``."""
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _format_gain(gain: float) -> str:
    if gain == 0.0:
        return "0.0"
    if math.isnan(gain):
        return "NaN"
    if math.isfinite(gain) and gain.is_integer():
        return str(int(gain))
    return repr(gain)


@dataclass
class Song:
    title: str
    album: str
    artist: str
    disc_number: int
    track_number: int
    path: str
    gain: float

    def serialize(self) -> str:
        """One tab-separated line, ending in a newline."""
        fields = (
            escape(self.title),
            escape(self.album),
            escape(self.artist),
            str(self.disc_number),
            str(self.track_number),
            escape(self.path),
            _format_gain(self.gain),
        )
        return "\t".join(fields) + "\n"

    @classmethod
    def deserialize(cls, text: str) -> "Song":
        """Read a song from one line written by :meth:`serialize`."""
        if not text:
            raise SongFormatError("Empty song")
        if text.endswith("\n"):
            text = text[:-1]

        parts = iter(text.split("\t"))

        def take(name: str) -> str:
            try:
                return next(parts)
            except StopIteration:
                raise SongFormatError(f"Missing {name}") from None

        def number(name: str) -> int:
            raw = take(name)
            value = _parse_u8(raw)
            if value is None:
                raise SongFormatError(f"Invalid {name}: {raw!r}")
            return value

        title = take("title")
        album = take("album")
        artist = take("artist")
        disc_number = number("disc_number")
        track_number = number("track_number")
        path = take("path")
        raw_gain = take("gain")
        gain = _parse_f32(raw_gain)
        if gain is None:
            raise SongFormatError(f"Invalid gain: {raw_gain!r}")

        return cls(title, album, artist, disc_number, track_number, path, gain)

    @classmethod
    def unknown(cls) -> "Song":
        """A song with placeholder tags and no path."""
        return cls(UNKNOWN_TITLE, UNKNOWN_ALBUM, UNKNOWN_ARTIST, 1, 1, "", 0.0)

    @classmethod
    def example(cls) -> "Song":
        return cls("title", "album", "artist", 1, 1, "path", 1.0)


@dataclass
class Album:
    title: str = ""
    songs: list[Song] = field(default_factory=list)


@dataclass
class Artist:
    albums: list[Album] = field(default_factory=list)


def serialize_songs(songs: Iterable[Song]) -> str:
    return "".join(song.serialize() for song in songs)


def deserialize_songs(text: str) -> list[Song]:
    """Read every line of ``text`` as a song; any bad line raises."""
    return [Song.deserialize(line) for line in text.strip().split("\n")]