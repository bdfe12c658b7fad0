"""Fixed-size circular buffer indexed from the oldest element."""

from typing import Generic, TypeVar

T = TypeVar("T")


class CircBuf(Generic[T]):
    """A ring of ``size`` values; pushing overwrites the oldest one."""

    def __init__(self, size: int, init: T) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._start = 0
        self._values = [init] * size

    def push(self, x: T) -> None:
        """Add ``x`` at the end, dropping the oldest value."""
        if not self._values:
            raise IndexError("push to an empty circular buffer")
        self._values[self._start] = x
        self._start = (self._start + 1) % len(self._values)

    def get(self, i: int) -> T:
        """Return the ``i``-th value counting from the oldest."""
        size = len(self._values)
        if not 0 <= i < size:
            raise IndexError(f"index {i} out of range for size {size}")
        return self._values[(self._start + i) % size]

    def __len__(self) -> int:
        return len(self._values)