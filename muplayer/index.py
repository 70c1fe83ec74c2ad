"""A list paired with an optional selected position, for moving through UI lists."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


def up(length: int, index: int, amount: int) -> int:
    """Move ``index`` back by ``amount``, wrapping around a list of ``length``."""
    if length == 0:
        return 0
    return (index + length - amount % length) % length


def down(length: int, index: int, amount: int) -> int:
    """Move ``index`` forward by ``amount``, wrapping around a list of ``length``."""
    if length == 0:
        return 0
    return (index + amount) % length


class Index(Generic[T]):
    """Items plus the position of the selected one, or ``None`` if nothing is selected."""

    def __init__(self, data: Iterable[T] | None = None, index: int | None = None) -> None:
        self.data: list[T] = list(data) if data is not None else []
        self.index: int | None = index

    @classmethod
    def from_items(cls, items: Iterable[T]) -> "Index[T]":
        """Build an index that selects the first item when there is one."""
        data = list(items)
        return cls(data, 0 if data else None)

    def up(self) -> None:
        if not self.data or self.index is None:
            return
        self.index = len(self.data) - 1 if self.index == 0 else self.index - 1

    def down(self) -> None:
        if not self.data or self.index is None:
            return
        self.index = self.index + 1 if self.index + 1 < len(self.data) else 0

    def up_n(self, n: int) -> None:
        if not self.data or self.index is None:
            return
        self.index = up(len(self.data), self.index, n)

    def down_n(self, n: int) -> None:
        if not self.data or self.index is None:
            return
        self.index = down(len(self.data), self.index, n)

    def selected(self) -> T | None:
        """The selected item, or ``None`` if nothing valid is selected."""
        if self.index is None or not 0 <= self.index < len(self.data):
            return None
        return self.data[self.index]

    def select(self, i: int | None) -> None:
        self.index = i

    def remove_and_move(self, index: int) -> None:
        """Remove the item at ``index`` and keep the selection in range."""
        del self.data[index]
        length = len(self.data)
        selected = self.index
        if selected is None:
            return
        if index == length and selected == length:
            self.index = max(length - 1, 0)
        elif index == 0 and selected == 0:
            self.index = 0
        elif length == 0:
            self.index = None

    def append(self, item: T) -> None:
        self.data.append(item)

    def extend(self, items: Iterable[T]) -> None:
        self.data.extend(items)

    def pop(self, i: int) -> T:
        """Remove and return the item at ``i`` without touching the selection."""
        return self.data.pop(i)

    def clear(self) -> None:
        self.data.clear()

    def to_list(self) -> list[T]:
        return list(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, i: int) -> T:
        return self.data[i]

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __bool__(self) -> bool:
        return bool(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        return self.data == other.data and self.index == other.index

    def __repr__(self) -> str:
        return f"Index({self.data!r}, index={self.index!r})"