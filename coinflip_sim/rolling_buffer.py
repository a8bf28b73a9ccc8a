"""Fixed-capacity circular buffer that keeps the most recent values."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class RollingBuffer(Generic[T]):
    """A circular buffer of fixed capacity; new values overwrite the oldest."""

    def __init__(self, size: int, fill: Any = None) -> None:
        if size < 1:
            raise ValueError(f"buffer size must be positive, got {size}")
        self._fill = fill
        self._slots: list[Any] = [fill] * size
        self._index = 0
        self._count = 0

    @property
    def size(self) -> int:
        """Capacity of the buffer."""
        return len(self._slots)

    @property
    def index(self) -> int:
        """Slot the next value will be written to."""
        return self._index

    @property
    def buffer(self) -> tuple:
        """Raw slots in storage order, including unfilled ones."""
        return tuple(self._slots)

    def add(self, value: T) -> None:
        """Store a value, overwriting the oldest one when full."""
        self._slots[self._index] = value
        self._index = (self._index + 1) % self.size
        if self._count < self.size:
            self._count += 1

    def resize(self, new_size: int) -> None:
        """Change capacity, keeping as many of the oldest values as fit."""
        if new_size < 1:
            raise ValueError(f"buffer size must be positive, got {new_size}")
        if new_size == self.size:
            return
        kept = self.ordered()[:new_size]
        self._slots = kept + [self._fill] * (new_size - len(kept))
        self._count = len(kept)
        self._index = self._count % new_size

    def ordered(self) -> list:
        """Stored values from oldest to newest."""
        start = (self._index - self._count) % self.size
        rotated = self._slots[start:] + self._slots[:start]
        return rotated[: self._count]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        return iter(self.ordered())