"""Running minimum and maximum of a stream of values."""

from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class MinMax(Generic[T]):
    """Tracks the smallest and largest value seen so far."""

    def __init__(self) -> None:
        self._minmax: Optional[Tuple[T, T]] = None

    def update(self, value: T) -> None:
        """Take ``value`` into account."""
        if self._minmax is None:
            self._minmax = (value, value)
            return
        low, high = self._minmax
        if value < low:
            low = value
        if value > high:
            high = value
        self._minmax = (low, high)

    def get(self) -> Tuple[T, T]:
        """Return ``(min, max)``; raises ValueError if nothing has been seen."""
        if self._minmax is None:
            raise ValueError("no values have been seen")
        return self._minmax