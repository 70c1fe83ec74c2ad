"""Music library, tag reading, search, playlists, settings and playback state for a terminal music player."""

__version__ = "0.3.0"