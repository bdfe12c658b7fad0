"""Table-driven sine with linear interpolation."""

import math
import sys
from typing import List, Optional, Sequence

import numpy as np

TABLE_SIZE = 256
_TWO_PI = np.float32(2.0) * np.float32(math.pi)


def generate_sine_table(table_size: int) -> List[float]:
    """Return ``table_size + 1`` single-precision samples of one sine period."""
    return [
        float(np.float32(math.sin((i * 2.0 * math.pi) / table_size)))
        for i in range(table_size + 1)
    ]


TABLE = tuple(generate_sine_table(TABLE_SIZE))


def table_sin(x: float) -> float:
    """Approximate ``sin(x)`` from the table, in single precision.

    Negative arguments are folded into the first bin, as the fixed-point
    original does; callers are expected to pass non-negative phases.
    """
    bin_size = _TWO_PI / np.float32(TABLE_SIZE)
    bin_frac = np.float32(x) / bin_size
    if math.isnan(bin_frac):
        return float("nan")
    bin_floor = np.floor(bin_frac)
    frac = bin_frac - bin_floor
    index = max(int(bin_floor), 0) % TABLE_SIZE
    lo = np.float32(TABLE[index])
    hi = np.float32(TABLE[index + 1])
    return float((np.float32(1.0) - frac) * lo + frac * hi)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the sine table and one sample lookup."""
    del argv
    out = sys.stdout
    print("TABLE = (", file=out)
    for value in generate_sine_table(TABLE_SIZE):
        print(f"{np.float32(value)},", file=out)
    print(")", file=out)
    tpio3 = float(np.float32(2.094 + (2.0 * 3.14159)))
    print(f"{np.float32(tpio3)} {np.float32(table_sin(tpio3))}", file=out)
    return 0