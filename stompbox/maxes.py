"""Records the largest size seen for each of several working buffers."""

from enum import Enum
from typing import Dict


class Item(Enum):
    PEAKS = "Peaks"
    BPS = "BPs"
    OLD_FREQS = "OldFreqs"
    OLD_FAVES = "OldFaves"
    NEW_FAVES = "NewFaves"
    RESULTS = "Results"


class Maxes:
    """High-water marks keyed by :class:`Item`."""

    def __init__(self) -> None:
        self._counts: Dict[Item, int] = {}

    def update(self, item: Item, value: int) -> None:
        """Raise the mark for ``item`` to ``value`` if it is larger."""
        self._counts[item] = max(value, self._counts.get(item, 0))

    def get(self, item: Item) -> int:
        """Return the mark for ``item``, 0 if never updated."""
        return self._counts.get(item, 0)

    def dump(self) -> None:
        """Print every recorded mark."""
        for item, value in self._counts.items():
            print("maxes", item.value, value)