# muplayer

The library side of a terminal music player: reading tags from audio files,
building a song database, fuzzy search across artists, albums and titles,
playlists saved one file per list, persistent player settings, playback
state, and the selection logic behind the queue, browser, search, playlist
and output-device views.

It uses only the standard library.

## Modules

| Module | Purpose |
| --- | --- |
| `muplayer.song` | `Song`, `Album`, `Artist`, and the tab-separated line format used on disk |
| `muplayer.flac` | `read_metadata` / `read_metadata_raw` read Vorbis comments from FLAC files |
| `muplayer.scanner` | `scan` / `create` walk a music folder and write the database file; `reset` deletes it |
| `muplayer.database` | `Database` groups songs by artist and album and runs `search` |
| `muplayer.strsim` | `jaro_winkler` and `generic_jaro` string similarity |
| `muplayer.index` | `Index`, a list with a wrapping selection cursor, plus `up` / `down` helpers |
| `muplayer.playlist` | `Playlist` files and `playlists()` to load them all |
| `muplayer.settings` | `Settings`: volume, queue position, elapsed time, output device, music folder, queue |
| `muplayer.player` | `Player`: pause state, volume, seeking and the event queue for a decoder |
| `muplayer.log` | short-lived status messages (`log`, `last_message`, `clear`, `MessageLog`) |
| `muplayer.paths` | where settings, the database and playlists live; `escape` for record fields |
| `muplayer.browser` | `Browser`: artist / album / song columns |
| `muplayer.queue` | `QueueView`: queue selection range and column widths |
| `muplayer.search` | `Search`: query editing and turning a result into songs |
| `muplayer.playlist_view` | `PlaylistView`: browsing, adding to and deleting playlists |
| `muplayer.devices` | `DeviceSettings`: choosing an output device by name |

## Songs and the database

Songs are stored one per line, fields separated by tabs:

```
title	album	artist	disc	track	path	gain
```

Tabs in text fields become four spaces and newlines are dropped when
written. A malformed line raises `SongFormatError`.

```python
from muplayer.song import Song
from muplayer.database import Database

song = Song.example()
line = song.serialize()
assert Song.deserialize(line) == song

db = Database([song])
print(db.artists())
for item in db.search("titl"):
    print(item)
```

`Database.load(path)` reads a database file; a missing file gives an empty
database and lines that are not valid records are skipped. Without a path it
reads `mu.db` in the data directory.

`Database.search` returns `SongItem`, `AlbumItem` and `ArtistItem` values,
at most 40 of them. An empty query returns the first 40 items in library
order. Otherwise items are scored with Jaro-Winkler similarity against the
lower-cased query, only scores above 0.70 are kept, the best come first, and
equal scores list artists, then albums, then songs by disc and track.

Lookups (`albums_by_artist`, `album`, `song`) raise `KeyError` when nothing
matches.

## Scanning a music folder

```python
from muplayer.scanner import scan, ScanStatus

result = scan("/path/to/music", "/path/to/mu.db")
if result.status is ScanStatus.COMPLETED_WITH_ERRORS:
    print("\n".join(result.errors))
```

Files ending in `.flac`, `.mp3` and `.ogg` are read: Vorbis comments from
FLAC and Ogg Vorbis, ID3 text frames from MP3. The songs are written to a
`temp.db` next to the target, which then replaces it. If `temp.db` cannot be
created the result is `FILE_IN_USE`. `create` runs the same scan on a
background thread and returns a `concurrent.futures.Future`.

## Reading FLAC tags

```python
from muplayer.flac import read_metadata

song = read_metadata("track.flac")
print(song.artist, song.album, song.title, song.track_number)
```

`ALBUMARTIST` wins over `ARTIST`; `REPLAYGAIN_TRACK_GAIN` (such as
`-5.39 dB`) becomes a linear gain. A file that does not start with `fLaC`,
or whose metadata cannot be read, raises `FlacError`.

## Selection with `Index`

```python
from muplayer.index import Index

items = Index.from_items(["a", "b", "c"])
items.up()               # wraps to the last item
print(items.selected())  # "c"
items.down_n(2)
print(items.selected())  # "b"
```

## Playlists and settings

```python
import tempfile
from muplayer.playlist import Playlist, playlists
from muplayer.song import Song

folder = tempfile.mkdtemp()
pl = Playlist.new("road trip", [Song.example()], folder)
pl.save()
print([p.name for p in playlists(folder)])
```

`Settings.load(path)` reads the settings file, creating it if it does not
exist, and falls back to defaults (volume 15, empty queue) when its contents
cannot be parsed. `Settings.save()` writes it back.

Without an explicit path, data lives in `%APPDATA%\mu` on Windows and
`~/.config/mu` elsewhere.

## Playback state

`Player` keeps the pause flag, volume (0–100 in steps of 5 with
`volume_up` / `volume_down`), elapsed time and a queue of `Event`s. Calls
such as `play_song`, `seek` and `clear` queue events; a decoder takes them
with `next_event` and reports the end of a song with `finish_song`, after
which `play_next` returns `True` once.

## What this package does not do

It does not decode or output audio, list system audio devices, or draw a
terminal interface, and it installs no command. `Player` only records what
should be played; `DeviceSettings` only tracks device names it is given; the
view classes hold selection state for a front end to draw.