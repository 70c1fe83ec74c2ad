"""Scanning a music folder into the song database file."""

from __future__ import annotations

import enum
import os
import re
import string
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator

from muplayer.flac import FlacError, read_metadata, read_metadata_raw
from muplayer.paths import database_path, settings_path
from muplayer.song import (
    UNKNOWN_ALBUM,
    UNKNOWN_ARTIST,
    UNKNOWN_TITLE,
    Song,
    SongFormatError,
    _parse_f32,
    _parse_u8,
    serialize_songs,
)

AUDIO_EXTENSIONS = frozenset({"flac", "mp3", "ogg"})

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_MPEG_SYNC = re.compile(rb"\xff[\xe0-\xff]")
_SYNC_WINDOW = 64 * 1024

_VORBIS_KEYS = {
    "ALBUMARTIST": "albumartist",
    "ARTIST": "artist",
    "ALBUM": "album",
    "TITLE": "title",
    "TRACKNUMBER": "tracknumber",
    "DISCNUMBER": "discnumber",
    "REPLAYGAIN_TRACK_GAIN": "replaygain_track_gain",
}

_ID3_KEYS = {
    "TPE2": "albumartist",
    "TP2": "albumartist",
    "TPE1": "artist",
    "TP1": "artist",
    "TALB": "album",
    "TAL": "album",
    "TIT2": "title",
    "TT2": "title",
    "TRCK": "tracknumber",
    "TRK": "tracknumber",
    "TPOS": "discnumber",
    "TPA": "discnumber",
}


class ScanStatus(enum.Enum):
    COMPLETED = "completed"
    COMPLETED_WITH_ERRORS = "completed_with_errors"
    FILE_IN_USE = "file_in_use"


@dataclass
class ScanResult:
    status: ScanStatus
    errors: list[str] = field(default_factory=list)


# --- tag sources -----------------------------------------------------------


def _vorbis_tags(pairs: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
    tags = []
    for key, value in pairs:
        name = _VORBIS_KEYS.get(key.translate(_TO_UPPER))
        if name is not None:
            tags.append((name, value))
    return tags


def _parse_vorbis_comment(data: bytes) -> list[tuple[str, str]]:
    def u32(offset: int) -> int:
        if offset + 4 > len(data):
            raise SongFormatError("malformed comment header")
        return int.from_bytes(data[offset : offset + 4], "little")

    pos = 4 + u32(0)
    count = u32(pos)
    pos += 4
    pairs = []
    for _ in range(count):
        length = u32(pos)
        pos += 4
        if pos + length > len(data):
            raise SongFormatError("malformed comment header")
        text = data[pos : pos + length].decode("utf-8", errors="replace")
        pos += length
        key, _, value = text.partition("=")
        pairs.append((key, value))
    return pairs


def _ogg_packets(stream: BinaryIO, limit: int) -> list[bytes]:
    packets: list[bytes] = []
    current = bytearray()
    while len(packets) < limit:
        header = stream.read(27)
        if len(header) < 27 or header[:4] != b"OggS":
            break
        table = stream.read(header[26])
        if len(table) < header[26]:
            break
        for lacing in table:
            current += stream.read(lacing)
            if lacing < 255:
                packets.append(bytes(current))
                current = bytearray()
                if len(packets) >= limit:
                    break
    return packets


def _ogg_tags(stream: BinaryIO) -> list[tuple[str, str]]:
    stream.seek(0)
    packets = _ogg_packets(stream, 2)
    if not packets or not packets[0].startswith(b"\x01vorbis"):
        raise SongFormatError("unsupported ogg stream")
    if len(packets) < 2 or not packets[1].startswith(b"\x03vorbis"):
        return []
    return _vorbis_tags(_parse_vorbis_comment(packets[1][7:]))


def _syncsafe(raw: bytes) -> int:
    value = 0
    for byte in raw:
        value = (value << 7) | (byte & 0x7F)
    return value


def _id3_decode(payload: bytes) -> list[str]:
    """Decode an ID3 text payload into its null-separated values."""
    if not payload:
        return [""]
    encoding, raw = payload[0], payload[1:]
    codec = {0: "latin-1", 1: "utf-16", 2: "utf-16-be"}.get(encoding, "utf-8")
    text = raw.decode(codec, errors="replace")
    return [part.lstrip("\ufeff") for part in text.rstrip("\0").split("\0")]


def _id3_frames(body: bytes, major: int) -> Iterator[tuple[str, bytes]]:
    id_len, size_len = (3, 3) if major == 2 else (4, 4)
    header_len = id_len + size_len + (0 if major == 2 else 2)
    pos = 0
    while pos + header_len <= len(body):
        frame_id = body[pos : pos + id_len]
        if frame_id[0] == 0:
            break
        raw_size = body[pos + id_len : pos + id_len + size_len]
        size = _syncsafe(raw_size) if major == 4 else int.from_bytes(raw_size, "big")
        pos += header_len
        yield frame_id.decode("latin-1"), body[pos : pos + size]
        pos += size


def _mpeg_tags(stream: BinaryIO) -> list[tuple[str, str]]:
    stream.seek(0)
    header = stream.read(10)
    tags: list[tuple[str, str]] = []

    if len(header) == 10 and header[:3] == b"ID3":
        major, flags = header[3], header[5]
        size = _syncsafe(header[6:10])
        body = stream.read(size)
        if major < 4 and flags & 0x80:
            body = body.replace(b"\xff\x00", b"\xff")
        if flags & 0x40 and len(body) >= 4:
            if major == 4:
                body = body[_syncsafe(body[:4]) :]
            else:
                body = body[4 + int.from_bytes(body[:4], "big") :]

        for frame_id, payload in _id3_frames(body, major):
            if frame_id in ("TXXX", "TXX"):
                values = _id3_decode(payload)
                if len(values) > 1 and values[0].translate(_TO_UPPER) == "REPLAYGAIN_TRACK_GAIN":
                    tags.append(("replaygain_track_gain", values[1]))
            elif frame_id in _ID3_KEYS:
                tags.append((_ID3_KEYS[frame_id], _id3_decode(payload)[0]))

        audio_start = 10 + size + (10 if major == 4 and flags & 0x10 else 0)
    else:
        audio_start = 0

    stream.seek(audio_start)
    if not _MPEG_SYNC.search(stream.read(_SYNC_WINDOW)):
        raise SongFormatError("no supported audio stream found")
    return tags


def _probe_tags(path: str) -> list[tuple[str, str]]:
    with open(path, "rb") as stream:
        magic = stream.read(4)
        if magic == b"OggS":
            return _ogg_tags(stream)
        if magic == b"fLaC":
            return _vorbis_tags(read_metadata_raw(path).items())
        return _mpeg_tags(stream)


def _song_from_tags(path: str, tags: Iterable[tuple[str, str]]) -> Song:
    title, album, artist = UNKNOWN_TITLE, UNKNOWN_ALBUM, UNKNOWN_ARTIST
    track_number = disc_number = 1
    gain = 0.0

    for key, value in tags:
        if key == "albumartist":
            artist = value
        elif key == "artist":
            if artist == UNKNOWN_ARTIST:
                artist = value
        elif key == "album":
            album = value
        elif key == "title":
            title = value
        elif key in ("tracknumber", "discnumber"):
            number = _parse_u8(value.split("/", 1)[0])
            number = 1 if number is None else number
            if key == "tracknumber":
                track_number = number
            else:
                disc_number = number
        elif key == "replaygain_track_gain":
            _, sep, rest = value.partition(" ")
            if not sep:
                raise SongFormatError("Invalid replay gain.")
            db = _parse_f32(rest)
            gain = 10.0 ** ((0.0 if db is None else db) / 20.0)

    return Song(title, album, artist, disc_number, track_number, path, gain)


def song_from_path(path: str | os.PathLike[str]) -> Song:
    """Read a song's tags from an audio file; failures raise :class:`SongFormatError`."""
    text_path = os.fsdecode(path)
    extension = Path(text_path).suffix[1:]
    if not extension:
        raise SongFormatError("Path is not audio")

    if extension == "flac":
        try:
            return read_metadata(text_path)
        except (OSError, FlacError) as err:
            raise SongFormatError(f"Error: ({err}) @ {text_path}") from err

    try:
        tags = _probe_tags(text_path)
    except (OSError, FlacError, SongFormatError) as err:
        raise SongFormatError(f"Error: ({err}) @ {text_path}") from err
    return _song_from_tags(text_path, tags)


# --- scanning --------------------------------------------------------------


def _audio_files(folder: str | os.PathLike[str]) -> Iterator[str]:
    for root, dirnames, filenames in os.walk(folder):
        dirnames.sort()
        for name in sorted(filenames):
            if Path(name).suffix[1:] in AUDIO_EXTENSIONS:
                yield os.path.join(root, name)


def _try_song(path: str) -> Song | str:
    try:
        return song_from_path(path)
    except SongFormatError as err:
        return str(err)


def scan(
    folder: str | os.PathLike[str],
    database_file: str | os.PathLike[str] | None = None,
) -> ScanResult:
    """Read every audio file under ``folder`` and replace the database file."""
    target = Path(database_file) if database_file is not None else database_path()
    temp = target.with_name("temp.db")

    try:
        handle = open(temp, "w", encoding="utf-8", newline="")
    except OSError:
        return ScanResult(ScanStatus.FILE_IN_USE)

    with handle:
        paths = list(_audio_files(folder))
        with ThreadPoolExecutor() as pool:
            outcomes = list(pool.map(_try_song, paths))
        songs = [outcome for outcome in outcomes if isinstance(outcome, Song)]
        errors = [outcome for outcome in outcomes if isinstance(outcome, str)]
        handle.write(serialize_songs(songs))

    os.replace(temp, target)

    if errors:
        return ScanResult(ScanStatus.COMPLETED_WITH_ERRORS, errors)
    return ScanResult(ScanStatus.COMPLETED)


def create(
    folder: str | os.PathLike[str],
    database_file: str | os.PathLike[str] | None = None,
) -> Future[ScanResult]:
    """Start :func:`scan` on a background thread and return its future."""
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="mu-scan")
    future = executor.submit(scan, folder, database_file)
    executor.shutdown(wait=False)
    return future


def reset(
    settings_file: str | os.PathLike[str] | None = None,
    database_file: str | os.PathLike[str] | None = None,
) -> None:
    """Delete the settings file, and the database file if there is one."""
    settings = Path(settings_file) if settings_file is not None else settings_path()
    database = Path(database_file) if database_file is not None else database_path()
    os.remove(settings)
    if database.exists():
        os.remove(database)