"""Named playlists, each stored in its own file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from muplayer.index import Index
from muplayer.paths import escape, mu_path
from muplayer.song import Song, deserialize_songs, serialize_songs

EXTENSION = ".playlist"


class Playlist:
    """A name, the file it is saved in, and its songs with a selection."""

    def __init__(
        self,
        name: str,
        songs: Iterable[Song] | Index[Song],
        path: str | os.PathLike[str],
    ) -> None:
        self._name = name
        self.path = Path(path)
        self.songs: Index[Song] = (
            songs if isinstance(songs, Index) else Index.from_items(songs)
        )

    @classmethod
    def new(
        cls,
        name: str,
        songs: Iterable[Song],
        directory: str | os.PathLike[str] | None = None,
    ) -> "Playlist":
        """A playlist saved as ``<name>.playlist`` in ``directory``."""
        name = escape(name)
        folder = Path(directory) if directory is not None else mu_path()
        return cls(name, songs, folder / f"{name}{EXTENSION}")

    @property
    def name(self) -> str:
        return self._name

    def serialize(self) -> str:
        return f"{self._name}\t{self.path}\n{serialize_songs(self.songs)}"

    @classmethod
    def deserialize(cls, text: str) -> "Playlist":
        start, sep, end = text.partition("\n")
        if not sep:
            raise ValueError("Invalid playlist")
        name, sep, path = start.partition("\t")
        if not sep:
            raise ValueError("Invalid playlist")
        return cls(name, deserialize_songs(end), path)

    def save(self) -> None:
        self.path.write_text(self.serialize(), encoding="utf-8", newline="")

    def delete(self) -> None:
        """Remove the playlist's file."""
        self.path.unlink()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Playlist):
            return NotImplemented
        return (
            self._name == other._name
            and self.path == other.path
            and self.songs == other.songs
        )

    def __repr__(self) -> str:
        return f"Playlist({self._name!r}, {self.songs!r}, {str(self.path)!r})"


def playlists(directory: str | os.PathLike[str] | None = None) -> list[Playlist]:
    """Every playlist file under ``directory``; unreadable files are skipped."""
    folder = Path(directory) if directory is not None else mu_path()
    found = []
    for root, dirnames, filenames in os.walk(folder):
        dirnames.sort()
        for filename in sorted(filenames):
            if not filename.endswith(EXTENSION):
                continue
            try:
                text = Path(root, filename).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                continue
            found.append(Playlist.deserialize(text))
    return found