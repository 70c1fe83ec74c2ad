"""In-memory song library grouped by artist and album, with fuzzy search."""

from __future__ import annotations

import os
import string
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from muplayer import strsim
from muplayer.paths import database_path
from muplayer.song import Album, Song, SongFormatError

MIN_ACCURACY = 0.70
MAX_RESULTS = 40

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(text: str) -> str:
    return text.translate(_TO_LOWER)


@dataclass(frozen=True)
class SongItem:
    artist: str
    album: str
    name: str
    disc: int
    number: int


@dataclass(frozen=True)
class AlbumItem:
    artist: str
    album: str


@dataclass(frozen=True)
class ArtistItem:
    artist: str


Item = Union[SongItem, AlbumItem, ArtistItem]


def _item_text(item: Item) -> str:
    if isinstance(item, ArtistItem):
        return item.artist
    if isinstance(item, AlbumItem):
        return item.album
    return item.name


def _tie_key(item: Item) -> tuple[int, int, int]:
    """Among equal scores artists come first, then albums, then songs by disc and track."""
    if isinstance(item, ArtistItem):
        return (0, 0, 0)
    if isinstance(item, AlbumItem):
        return (1, 0, 0)
    return (2, item.disc, item.number)


class Database:
    """Songs grouped into albums per artist, in sorted order."""

    def __init__(self, songs: Iterable[Song] = ()) -> None:
        songs = list(songs)
        self._len = len(songs)

        groups: dict[tuple[str, str], list[Song]] = {}
        for song in songs:
            groups.setdefault((song.artist, song.album), []).append(song)

        artists: dict[str, list[Album]] = {}
        for artist, title in sorted(groups):
            tracks = sorted(
                groups[(artist, title)],
                key=lambda s: (s.disc_number, s.track_number),
            )
            artists.setdefault(artist, []).append(Album(title, tracks))

        for albums in artists.values():
            albums.sort(key=lambda album: _ascii_lower(album.title))

        self._artists = artists

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> "Database":
        """Read the database file; a missing file gives an empty database.

        Lines that are not valid song records are skipped.
        """
        target = Path(path) if path is not None else database_path()
        try:
            data = target.read_bytes()
        except FileNotFoundError:
            data = b""

        songs = []
        for line in data.decode("utf-8", errors="replace").split("\n"):
            if line.endswith("\r"):
                line = line[:-1]
            try:
                songs.append(Song.deserialize(line))
            except SongFormatError:
                continue
        return cls(songs)

    def __len__(self) -> int:
        return self._len

    def artists(self) -> list[str]:
        """All artist names, ordered ignoring ASCII case."""
        return sorted(self._artists, key=_ascii_lower)

    def albums_by_artist(self, artist: str) -> list[Album]:
        try:
            return self._artists[artist]
        except KeyError:
            raise KeyError(f"Could not find artist {artist}") from None

    def album(self, artist: str, album: str) -> Album:
        for candidate in self._artists.get(artist, []):
            if candidate.title == album:
                return candidate
        raise KeyError(f"Could not find album {artist} {album}")

    def song(self, artist: str, album: str, disc: int, number: int) -> Song:
        for candidate in self.albums_by_artist(artist):
            if candidate.title != album:
                continue
            for song in candidate.songs:
                if song.disc_number == disc and song.track_number == number:
                    return song
        raise KeyError(f"Could not find song {artist} {album} {disc} {number}")

    def _items(self) -> list[Item]:
        items: list[Item] = []
        for artist, albums in self._artists.items():
            for album in albums:
                items.extend(
                    SongItem(s.artist, s.album, s.title, s.disc_number, s.track_number)
                    for s in album.songs
                )
                items.append(AlbumItem(artist, album.title))
            items.append(ArtistItem(artist))
        return items

    def search(self, query: str) -> list[Item]:
        """The most similar artists, albums and songs, best first, at most 40."""
        query = query.lower()
        items = self._items()

        if not query:
            return items[:MAX_RESULTS]

        scored = []
        for item in items:
            score = strsim.jaro_winkler(query, _item_text(item).lower())
            if score > MIN_ACCURACY:
                scored.append((item, score))

        scored.sort(key=lambda pair: -pair[1])
        del scored[MAX_RESULTS:]
        scored.sort(key=lambda pair: (-pair[1], *_tie_key(pair[0])))
        return [item for item, _ in scored]