"""Three-column library browser: artists, their albums, and the album's songs."""

from __future__ import annotations

import enum
from typing import Iterable

from muplayer.database import Database
from muplayer.index import Index
from muplayer.song import Album, Song

SongEntry = tuple[str, tuple[int, int]]


class BrowserMode(enum.Enum):
    ARTIST = "artist"
    ALBUM = "album"
    SONG = "song"


def _song_entries(songs: Iterable[Song]) -> list[SongEntry]:
    """A label and the (disc, track) key for each song."""
    return [
        (f"{song.track_number}. {song.title}", (song.disc_number, song.track_number))
        for song in songs
    ]


class Browser:
    """Selection state of the artist, album and song columns."""

    def __init__(self, db: Database) -> None:
        self.mode = BrowserMode.ARTIST
        self.db = db
        self.artists: Index[str] = Index()
        self.albums: Index[Album] = Index()
        self.songs: Index[SongEntry] = Index()
        self.refresh(db)

    def _column(self) -> Index:
        if self.mode is BrowserMode.ARTIST:
            return self.artists
        if self.mode is BrowserMode.ALBUM:
            return self.albums
        return self.songs

    def up(self, amount: int) -> None:
        self._column().up_n(amount)
        self.update()

    def down(self, amount: int) -> None:
        self._column().down_n(amount)
        self.update()

    def left(self) -> None:
        if self.mode is BrowserMode.ALBUM:
            self.mode = BrowserMode.ARTIST
        elif self.mode is BrowserMode.SONG:
            self.mode = BrowserMode.ALBUM

    def right(self) -> None:
        if self.mode is BrowserMode.ARTIST:
            self.mode = BrowserMode.ALBUM
        elif self.mode is BrowserMode.ALBUM:
            self.mode = BrowserMode.SONG

    def refresh(self, db: Database) -> None:
        """Reload every column from ``db`` and go back to the artist column."""
        self.db = db
        self.mode = BrowserMode.ARTIST
        self.artists = Index(db.artists(), 0)
        self.albums = Index()
        self.songs = Index()
        self.update_albums()

    def update(self) -> None:
        """Refresh the columns to the right of the active one."""
        if self.mode is BrowserMode.ARTIST:
            self.update_albums()
        elif self.mode is BrowserMode.ALBUM:
            self.update_songs()

    def update_albums(self) -> None:
        artist = self.artists.selected()
        if artist is None:
            return
        self.albums = Index.from_items(self.db.albums_by_artist(artist))
        self.update_songs()

    def update_songs(self) -> None:
        artist = self.artists.selected()
        album = self.albums.selected()
        if artist is None or album is None:
            return
        songs = self.db.album(artist, album.title).songs
        self.songs = Index.from_items(_song_entries(songs))

    def get_selected(self) -> list[Song]:
        """The songs under the selection in the active column.

        Raises :class:`LookupError` when any column has nothing selected.
        """
        artist = self.artists.selected()
        album = self.albums.selected()
        entry = self.songs.selected()
        if artist is None or album is None or entry is None:
            raise LookupError("nothing is selected")

        if self.mode is BrowserMode.ARTIST:
            return [
                song
                for each in self.db.albums_by_artist(artist)
                for song in each.songs
            ]
        if self.mode is BrowserMode.ALBUM:
            return list(self.db.album(artist, album.title).songs)
        _, (disc, number) = entry
        return [self.db.song(artist, album.title, disc, number)]