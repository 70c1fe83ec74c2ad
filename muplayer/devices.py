"""Selection state for the list of audio output devices."""

from __future__ import annotations

from typing import Iterable

from muplayer import index as _index


class DeviceSettings:
    """Output device names, the highlighted one, and the one in use."""

    def __init__(self, devices: Iterable[str], current_device: str) -> None:
        self.devices: list[str] = list(devices)
        self.index: int | None = 0 if self.devices else None
        self.current_device = current_device

    def selected(self) -> str | None:
        """The highlighted device name, or ``None``."""
        if self.index is None or not 0 <= self.index < len(self.devices):
            return None
        return self.devices[self.index]

    def up(self, amount: int) -> None:
        if not self.devices or self.index is None:
            return
        self.index = _index.up(len(self.devices), self.index, amount)

    def down(self, amount: int) -> None:
        if not self.devices or self.index is None:
            return
        self.index = _index.down(len(self.devices), self.index, amount)