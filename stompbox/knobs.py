"""Knob inputs that patches read their parameters from."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

_SPEW_KNOB_COUNT = 6


class Knobs(ABC):
    """A bank of knobs, each reading a value in [0, 1]."""

    def process(self) -> tuple[float, ...]:
        """Refresh knob readings and return the first six values."""
        return tuple(self.read(i) for i in range(_SPEW_KNOB_COUNT))

    @abstractmethod
    def read(self, knob_id: int) -> float:
        """Return the current value of knob ``knob_id``."""

    def spew(self) -> tuple[float, ...]:
        """Print the first six knob values and return them."""
        values = tuple(self.read(i) for i in range(_SPEW_KNOB_COUNT))
        print("knobs", *values)
        return values


@dataclass
class DummyKnobs(Knobs):
    """Knobs that all sit at one fixed value, fully up by default."""

    value: float = 1.0

    def read(self, knob_id: int) -> float:
        if knob_id < 0:
            raise ValueError(f"knob id must be non-negative, got {knob_id}")
        return self.value