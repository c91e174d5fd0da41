"""A growable array of strings whose capacity doubles when it fills up."""

from __future__ import annotations

from typing import Iterator, overload

STRING_SIZE = 1024
INIT_SIZE = 1


class CharArray:
    """Ordered collection of strings with explicit, doubling capacity.

    Each stored string is cut to ``STRING_SIZE - 1`` characters.
    """

    def __init__(self) -> None:
        self._items: list[str] = []
        self._capacity = INIT_SIZE

    @property
    def capacity(self) -> int:
        """Number of strings the array can hold before it must grow."""
        return self._capacity

    def append(self, text: str) -> None:
        """Add a string at the end, growing the array first if it is full."""
        if len(self._items) >= self._capacity:
            self.grow()
        self._items.append(text[: STRING_SIZE - 1])

    def grow(self) -> None:
        """Double the capacity."""
        self._capacity *= 2

    def clear(self) -> None:
        """Drop every string and return to the initial capacity."""
        self._items.clear()
        self._capacity = INIT_SIZE

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        return self._items[index]

    def __repr__(self) -> str:
        return f"CharArray({self._items!r}, capacity={self._capacity})"