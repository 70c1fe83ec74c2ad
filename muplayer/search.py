"""State of the search view: the query being typed and the matching library items."""

from __future__ import annotations

import enum

from muplayer.database import AlbumItem, ArtistItem, Database, Item, SongItem
from muplayer.index import Index
from muplayer.song import Song


class SearchMode(enum.Enum):
    SEARCH = "search"
    SELECT = "select"


class Search:
    """A search query, whether it changed since the last lookup, and its results."""

    def __init__(self) -> None:
        self.query = ""
        self.query_changed = False
        self.mode = SearchMode.SEARCH
        self.results: Index[Item] = Index()

    def refresh(self, db: Database) -> None:
        """Run the query against ``db`` if it changed, keeping the current selection."""
        if not self.query_changed:
            return
        self.query_changed = False
        self.results.data = db.search(self.query)

    def type_char(self, c: str) -> None:
        """Add a character to the query while typing."""
        if self.mode is not SearchMode.SEARCH:
            return
        self.query += c
        self.query_changed = True

    def on_backspace(self, control: bool, shift: bool) -> None:
        """Delete a character, the last word with ``control``, or everything with both.

        In select mode this goes back to typing instead.
        """
        if self.mode is SearchMode.SELECT:
            self.results.select(None)
            self.mode = SearchMode.SEARCH
            return
        if not self.query:
            return

        if shift and control:
            self.query = ""
        elif control:
            trimmed = self.query.rstrip()
            space = trimmed.rfind(" ")
            self.query = "" if space == -1 else trimmed[: space + 1]
        else:
            self.query = self.query[:-1]
        self.query_changed = True

    def on_enter(self, db: Database) -> list[Song] | None:
        """Start selecting results, or return the songs of the selected result."""
        if self.mode is SearchMode.SEARCH:
            if self.results:
                self.mode = SearchMode.SELECT
                self.results.select(0)
            return None

        item = self.results.selected()
        if item is None:
            return None
        if isinstance(item, SongItem):
            return [db.song(item.artist, item.album, item.disc, item.number)]
        if isinstance(item, AlbumItem):
            return list(db.album(item.artist, item.album).songs)
        if isinstance(item, ArtistItem):
            return [
                song
                for album in db.albums_by_artist(item.artist)
                for song in album.songs
            ]
        raise TypeError(f"unknown search result: {item!r}")