"""A lock-protected optional value shared between threads."""

import threading
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class _Slot(Generic[T]):
    value: Optional[T] = None


class Globby(Generic[T]):
    """Holds at most one value; every access happens under a lock.

    ``None`` stands for "empty", so a Globby cannot hold ``None`` itself.
    """

    def __init__(self, thing: Optional[T]) -> None:
        self._lock = threading.Lock()
        self._slot: _Slot[T] = _Slot(thing)

    @classmethod
    def empty(cls) -> "Globby[T]":
        """Create one holding nothing."""
        return cls(None)

    def use_and_return(self, f: Callable[[_Slot[T]], R]) -> R:
        """Call ``f`` with the slot under the lock; ``f`` may replace ``slot.value``."""
        with self._lock:
            return f(self._slot)

    def set(self, thing: T) -> None:
        """Replace the held value."""

        def put(slot: _Slot[T]) -> None:
            slot.value = thing

        self.use_and_return(put)

    def clear(self) -> Optional[T]:
        """Empty the holder and return what it held."""

        def take(slot: _Slot[T]) -> Optional[T]:
            old, slot.value = slot.value, None
            return old

        return self.use_and_return(take)

    def use_it(self, f: Callable[[T], object]) -> None:
        """Call ``f`` on the held value, if there is one."""

        def apply(slot: _Slot[T]) -> None:
            if slot.value is not None:
                f(slot.value)

        self.use_and_return(apply)

    def map(self, f: Callable[[T], R]) -> Optional[R]:
        """Return ``f(value)``, or None when empty."""

        def apply(slot: _Slot[T]) -> Optional[R]:
            return None if slot.value is None else f(slot.value)

        return self.use_and_return(apply)