"""Reading Vorbis comment tags straight from FLAC files."""

from __future__ import annotations

import os
import string
from typing import BinaryIO

from muplayer.song import UNKNOWN_ARTIST, Song, _parse_f32, _parse_u8

_VORBIS_COMMENT = 4
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class FlacError(Exception):
    """Raised when a file is not FLAC or its metadata cannot be read."""


def _read_exact(stream: BinaryIO, n: int) -> bytes:
    data = stream.read(n)
    if len(data) != n:
        raise FlacError("unexpected end of file")
    return data


def _u32_le(stream: BinaryIO) -> int:
    return int.from_bytes(_read_exact(stream, 4), "little")


def _read_comments(path: str | os.PathLike[str]) -> list[tuple[str, str]]:
    """The (key, value) pairs of the first Vorbis comment block, in file order."""
    with open(path, "rb") as stream:
        if _read_exact(stream, 4) != b"fLaC":
            raise FlacError("File is not FLAC.")

        while True:
            flag = _read_exact(stream, 1)[0]
            is_last = bool(flag & 0x80)
            block_type = flag & 0x7F
            block_len = int.from_bytes(_read_exact(stream, 3), "big")

            if block_type == _VORBIS_COMMENT:
                vendor_length = _u32_le(stream)
                stream.seek(vendor_length, os.SEEK_CUR)
                comments = []
                for _ in range(_u32_le(stream)):
                    raw = _read_exact(stream, _u32_le(stream))
                    try:
                        tag = raw.decode("utf-8")
                    except UnicodeDecodeError as err:
                        raise FlacError("comment is not valid UTF-8") from err
                    key, _, value = tag.partition("=")
                    comments.append((key, value))
                return comments

            stream.seek(block_len, os.SEEK_CUR)
            if is_last:
                break

    raise FlacError("Could not parse metadata.")


def read_metadata_raw(path: str | os.PathLike[str]) -> dict[str, str]:
    """All comments, keyed by upper-cased name; later duplicates win."""
    return {key.translate(_TO_UPPER): value for key, value in _read_comments(path)}


def _replay_gain(value: str) -> float | None:
    # Drop the trailing " dB" from values such as "-5.39 dB".
    encoded = value.encode("utf-8")
    if len(encoded) < 3:
        return None
    try:
        number = encoded[:-3].decode("utf-8")
    except UnicodeDecodeError:
        return None
    db = _parse_f32(number)
    if db is None:
        return None
    return 10.0 ** (db / 20.0)


def read_metadata(path: str | os.PathLike[str]) -> Song:
    """Build a song from the tags of a FLAC file."""
    comments = _read_comments(path)
    song = Song.unknown()
    song.path = os.fsdecode(path)

    for key, value in comments:
        name = key.translate(_TO_LOWER)
        if name == "albumartist":
            song.artist = value
        elif name == "artist":
            if song.artist == UNKNOWN_ARTIST:
                song.artist = value
        elif name == "title":
            song.title = value
        elif name == "album":
            song.album = value
        elif name == "tracknumber":
            number = _parse_u8(value)
            song.track_number = 1 if number is None else number
        elif name == "discnumber":
            number = _parse_u8(value)
            song.disc_number = 1 if number is None else number
        elif name == "replaygain_track_gain":
            gain = _replay_gain(value)
            if gain is not None:
                song.gain = gain

    return song