"""Playback control state: volume, pause state, seeking and the event queue for the decoder."""

from __future__ import annotations

import enum
import os
import queue
import threading
from dataclasses import dataclass
from pathlib import Path

from muplayer.index import Index
from muplayer.song import Song

VOLUME_REDUCTION = 75.0
DEFAULT_VOLUME = 15
DEFAULT_GAIN = 0.5
VOLUME_STEP = 5.0
MAX_VOLUME = 100.0


class EventKind(enum.Enum):
    STOP = "stop"
    SONG = "song"
    SEEK = "seek"
    SEEK_BACKWARD = "seek_backward"
    SEEK_FORWARD = "seek_forward"


@dataclass(frozen=True)
class Event:
    """A request for the decoder: a new song with its gain, a seek target, or a stop."""

    kind: EventKind
    path: Path | None = None
    gain: float | None = None
    position: float | None = None


class Player:
    """Shared playback state between the interface and the decoder.

    The interface queues events and reads the elapsed time; the decoder takes
    events with :meth:`next_event` and reports the end of a song with
    :meth:`finish_song`.
    """

    def __init__(self) -> None:
        self._events: queue.SimpleQueue[Event] = queue.SimpleQueue()
        self._lock = threading.Lock()
        self._level = float(DEFAULT_VOLUME)
        self._next = False
        self.paused = False
        self.elapsed = 0.0
        self.duration = 0.0

    # --- pause state -------------------------------------------------------

    def toggle_playback(self) -> None:
        self.paused = not self.paused

    def play(self) -> None:
        self.paused = False

    def pause(self) -> None:
        self.paused = True

    # --- volume ------------------------------------------------------------

    @property
    def amplitude(self) -> float:
        """The factor samples are scaled by before the track gain."""
        return self._level / VOLUME_REDUCTION

    def get_volume(self) -> int:
        return min(max(int(self._level), 0), 255)

    def set_volume(self, volume: int) -> None:
        if not 0 <= volume <= 255:
            raise ValueError(f"volume out of range: {volume}")
        self._level = float(volume)

    def volume_up(self) -> None:
        self._level = min(max(self._level + VOLUME_STEP, 0.0), MAX_VOLUME)

    def volume_down(self) -> None:
        self._level = min(max(self._level - VOLUME_STEP, 0.0), MAX_VOLUME)

    # --- seeking -----------------------------------------------------------

    def seek(self, position: float) -> None:
        """Jump to ``position`` seconds in the current song."""
        if position < 0:
            raise ValueError(f"cannot seek to a negative position: {position}")
        self._events.put(Event(EventKind.SEEK, position=position))
        self.elapsed = float(position)

    def seek_forward(self) -> None:
        self._events.put(Event(EventKind.SEEK_FORWARD))

    def seek_backward(self) -> None:
        self._events.put(Event(EventKind.SEEK_BACKWARD))

    # --- songs -------------------------------------------------------------

    def play_path(self, path: str | os.PathLike[str]) -> None:
        """Start playing a file with the default gain."""
        self.paused = False
        self.elapsed = 0.0
        self._events.put(Event(EventKind.SONG, path=Path(path), gain=DEFAULT_GAIN))

    def play_song(self, song: Song) -> None:
        """Start playing a song, using its replay gain when it has one."""
        self.paused = False
        self.elapsed = 0.0
        gain = DEFAULT_GAIN if song.gain == 0.0 else song.gain
        self._events.put(Event(EventKind.SONG, path=Path(song.path), gain=gain))

    def play_index(self, songs: Index[Song], i: int) -> None:
        songs.select(i)
        song = songs.selected()
        if song is not None:
            self.play_song(song)

    def delete(self, songs: Index[Song], index: int) -> None:
        """Remove a song from the queue, moving playback on if it was playing."""
        if not songs:
            return

        songs.pop(index)

        playing = songs.index
        if playing is None:
            return

        length = len(songs)
        if length == 0:
            songs.clear()
            songs.select(None)
            self._events.put(Event(EventKind.STOP))
        elif index == playing and index == 0:
            self.play_index(songs, 0)
        elif index == playing and index == length:
            self.play_index(songs, length - 1)
        elif index < playing:
            songs.select(playing - 1)

    def clear(self, songs: Index[Song]) -> None:
        """Stop playback and empty the queue."""
        self._events.put(Event(EventKind.STOP))
        songs.clear()

    # --- decoder side ------------------------------------------------------

    def next_event(self) -> Event | None:
        """The oldest queued event, or ``None`` if there is none."""
        try:
            return self._events.get_nowait()
        except queue.Empty:
            return None

    def finish_song(self) -> None:
        """Mark the current song as played to the end."""
        with self._lock:
            self._next = True

    def play_next(self) -> bool:
        """True once after each finished song."""
        with self._lock:
            if self._next:
                self._next = False
                return True
            return False


def clear_except_playing(songs: Index[Song]) -> None:
    """Drop every song from the queue except the one selected."""
    if songs.index is None:
        return
    playing = songs.pop(songs.index)
    songs.clear()
    songs.append(playing)
    songs.select(0)