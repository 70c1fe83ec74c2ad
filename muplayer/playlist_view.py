"""State of the playlist view: browsing playlists, adding songs and deleting."""

from __future__ import annotations

import enum
import os
import string
from pathlib import Path
from typing import Iterable

from muplayer.index import Index
from muplayer.playlist import Playlist, playlists
from muplayer.song import Song

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

EMPTY_PROMPT = "Enter a playlist name..."


class PlaylistMode(enum.Enum):
    PLAYLIST = "playlist"
    SONG = "song"
    POPUP = "popup"


class PlaylistView:
    """Playlists with a selection, a name being typed, and a pending delete prompt.

    ``confirm_delete`` is set while the user is asked to confirm a delete;
    ``yes`` is the highlighted answer.
    """

    def __init__(
        self,
        lists: Iterable[Playlist] | None = None,
        directory: str | os.PathLike[str] | None = None,
    ) -> None:
        self.directory = Path(directory) if directory is not None else None
        if lists is None:
            lists = playlists(directory)
        self.mode = PlaylistMode.PLAYLIST
        self.lists: Index[Playlist] = Index.from_items(lists)
        self.song_buffer: list[Song] = []
        self.search_query = ""
        self.confirm_delete = False
        self.yes = True

    # --- navigation --------------------------------------------------------

    def up(self, amount: int) -> None:
        if self.confirm_delete:
            return
        if self.mode is PlaylistMode.PLAYLIST:
            self.lists.up_n(amount)
        elif self.mode is PlaylistMode.SONG:
            selected = self.lists.selected()
            if selected is not None:
                selected.songs.up_n(amount)

    def down(self, amount: int) -> None:
        if self.confirm_delete:
            return
        if self.mode is PlaylistMode.PLAYLIST:
            self.lists.down_n(amount)
        elif self.mode is PlaylistMode.SONG:
            selected = self.lists.selected()
            if selected is not None:
                selected.songs.down_n(amount)

    def left(self) -> None:
        if self.confirm_delete:
            self.yes = True
        elif self.mode is PlaylistMode.SONG:
            self.mode = PlaylistMode.PLAYLIST

    def right(self) -> None:
        if self.confirm_delete:
            self.yes = False
        elif self.mode is PlaylistMode.PLAYLIST and self.lists.selected() is not None:
            self.mode = PlaylistMode.SONG

    # --- typing a playlist name -------------------------------------------

    def type_char(self, c: str) -> None:
        if self.mode is PlaylistMode.POPUP:
            self.search_query += c

    def on_backspace(self, control: bool) -> None:
        """Edit the name being typed; ``control`` clears it. Outside the popup, go left."""
        if self.mode is not PlaylistMode.POPUP:
            self.left()
            return
        if control:
            self.search_query = ""
        else:
            self.search_query = self.search_query[:-1]

    def prompt(self) -> str:
        """The line telling the user where the songs will be added."""
        query = self.search_query.translate(_TO_LOWER)
        for playlist in self.lists:
            if playlist.name.translate(_TO_LOWER) == query:
                return f"Add to existing playlist: {playlist.name}"
        if not self.search_query:
            return EMPTY_PROMPT
        return f"Add to new playlist: {self.search_query}"

    # --- actions -----------------------------------------------------------

    def add(self, songs: Iterable[Song]) -> None:
        """Hold ``songs`` and ask which playlist to add them to."""
        self.song_buffer = list(songs)
        self.mode = PlaylistMode.POPUP

    def on_enter_shift(self) -> None:
        """Offer the selected playlist or song for adding to another playlist."""
        selected = self.lists.selected()
        if selected is None:
            return
        if self.mode is PlaylistMode.PLAYLIST:
            self.add(selected.songs.to_list())
        elif self.mode is PlaylistMode.SONG:
            song = selected.songs.selected()
            if song is not None:
                self.add([song])

    def on_enter(self, songs: Index[Song], shift: bool) -> None:
        """Confirm a delete, queue songs into ``songs``, or save the held songs."""
        if shift:
            self.on_enter_shift()
            return

        if self.confirm_delete and not self.yes:
            self.yes = True
            self.confirm_delete = False
            return

        if self.mode is PlaylistMode.PLAYLIST:
            if self.confirm_delete:
                self._delete_playlist()
                return
            selected = self.lists.selected()
            if selected is not None:
                songs.extend(selected.songs.to_list())
        elif self.mode is PlaylistMode.SONG:
            if self.confirm_delete:
                self._delete_song()
                return
            selected = self.lists.selected()
            if selected is not None:
                song = selected.songs.selected()
                if song is not None:
                    songs.append(song)
        elif self.song_buffer:
            self._save_buffer()

    def _save_buffer(self) -> None:
        name = self.search_query.strip()
        buffered, self.song_buffer = self.song_buffer, []

        position = next(
            (i for i, playlist in enumerate(self.lists) if playlist.name == name),
            None,
        )
        if position is not None:
            target = self.lists[position]
            target.songs.extend(buffered)
            target.songs.select(0)
            target.save()
            self.lists.select(position)
        else:
            created = Playlist.new(name, buffered, self.directory)
            self.lists.append(created)
            created.save()
            self.lists.select(len(self.lists) - 1)

        self.search_query = ""
        self.mode = PlaylistMode.PLAYLIST

    def delete(self, force: bool) -> None:
        """Delete the selection now with ``force``, otherwise ask for confirmation."""
        if self.mode is PlaylistMode.PLAYLIST:
            if force:
                self._delete_playlist()
            else:
                self.confirm_delete = True
        elif self.mode is PlaylistMode.SONG:
            if force:
                self._delete_song()
            else:
                self.confirm_delete = True

    def _delete_song(self) -> None:
        i = self.lists.index
        if i is None:
            return
        selected = self.lists[i]
        j = selected.songs.index
        if j is not None:
            selected.songs.pop(j)
            selected.save()
            if not selected.songs:
                selected.delete()
                self.lists.remove_and_move(i)
                self.mode = PlaylistMode.PLAYLIST
        self.confirm_delete = False

    def _delete_playlist(self) -> None:
        i = self.lists.index
        if i is None:
            return
        self.lists[i].delete()
        self.lists.remove_and_move(i)
        self.confirm_delete = False