"""Persistent player settings: volume, queue state, output device and music folder."""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from muplayer.paths import escape, settings_path
from muplayer.song import Song, _parse_f32, _parse_u8, deserialize_songs, serialize_songs

_UINT = re.compile(r"\+?[0-9]+")


def _parse_u16(text: str) -> int | None:
    if not _UINT.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 0xFFFF else None


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass
class Settings:
    volume: int = 15
    index: int = 0
    elapsed: float = 0.0
    output_device: str = ""
    music_folder: str = ""
    queue: list[Song] = field(default_factory=list)
    path: Path | None = field(default=None, compare=False)

    def serialize(self) -> str:
        header = "\t".join(
            (
                str(self.volume),
                str(self.index),
                _format_float(self.elapsed),
                escape(self.output_device),
                escape(self.music_folder),
            )
        )
        return f"{header}\n{serialize_songs(self.queue)}"

    @classmethod
    def deserialize(cls, text: str) -> "Settings":
        start, sep, end = text.partition("\n")
        if not sep:
            raise ValueError("Invalid settings")
        fields = start.split("\t")
        if len(fields) < 4:
            raise ValueError("Invalid settings")

        volume = _parse_u8(fields[0])
        index = _parse_u16(fields[1])
        elapsed = _parse_f32(fields[2])
        if volume is None or index is None or elapsed is None:
            raise ValueError("Invalid settings")

        music_folder = "" if len(fields) == 4 else fields[4]
        queue = deserialize_songs(end) if end else []
        return cls(volume, index, elapsed, fields[3], music_folder, queue)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> "Settings":
        """Read the settings file, creating it if needed; unreadable contents give defaults."""
        target = Path(path) if path is not None else settings_path()
        target.touch(exist_ok=True)
        text = target.read_bytes().decode("utf-8")
        try:
            settings = cls.deserialize(text)
        except ValueError:
            settings = cls()
        settings.path = target
        return settings

    def save(self) -> None:
        if self.path is None:
            raise ValueError("settings have no file to save to")
        self.path.write_text(self.serialize(), encoding="utf-8", newline="")