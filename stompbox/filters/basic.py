"""The patch interface and the simplest patches built on it."""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Sequence, Union

import numpy as np

from ..knobs import Knobs

Block = Union[Sequence[float], np.ndarray]

DELAY_LENGTH = 48


def _as_block(samples: Block) -> np.ndarray:
    block = np.asarray(samples, dtype=np.float32)
    if block.ndim != 1:
        raise ValueError("a block of samples must be one-dimensional")
    return block


class Patch(ABC):
    """Something that turns a block of input samples into a block of output."""

    @abstractmethod
    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        """Process one block and return an output block of the same length."""


class PassThruFilter(Patch):
    """Outputs its input unchanged."""

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        return _as_block(samples).copy()


class Gain(Patch):
    """Multiplies every sample by a fixed gain."""

    def __init__(self, gain: float) -> None:
        self.gain = gain

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        return np.float32(self.gain) * _as_block(samples)


class LowPassFilter(Patch):
    """Averages each sample with the previous one, then boosts the result."""

    def __init__(self) -> None:
        self.state = 0.0

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        block = _as_block(samples)
        if block.size == 0:
            return block.copy()
        prev = np.concatenate((np.array([self.state], dtype=np.float32), block[:-1]))
        self.state = float(block[-1])
        return np.float32(5.0) * ((block + prev) / np.float32(2.0))


class HighPassFilter(Patch):
    """Halves the difference from the previous sample, then boosts the result."""

    def __init__(self) -> None:
        self.state = 0.0

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        block = _as_block(samples)
        if block.size == 0:
            return block.copy()
        prev = np.concatenate((np.array([self.state], dtype=np.float32), block[:-1]))
        self.state = float(block[-1])
        return np.float32(5.0) * ((block - prev) / np.float32(2.0))


class KnobGain(Patch):
    """A gain set by a knob, mapped linearly onto ``[low, high]``."""

    def __init__(self, knob_id: int, low: float, high: float) -> None:
        self.knob_id = knob_id
        self.low = low
        self.high = high
        self.gain = 0.5

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        block = _as_block(samples)
        out = np.empty_like(block)
        for i, x in enumerate(block):
            alpha = knobs.read(self.knob_id)
            self.gain = ((1.0 - alpha) * self.low) + (alpha * self.high)
            out[i] = self.gain * x
        return out


class Delay(Patch):
    """Delays its input by a fixed number of samples, starting from silence."""

    def __init__(self) -> None:
        self._buf: Deque[float] = deque(maxlen=DELAY_LENGTH)

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        block = _as_block(samples)
        out = np.empty_like(block)
        for i, x in enumerate(block):
            out[i] = self._buf[0] if len(self._buf) == DELAY_LENGTH else 0.0
            self._buf.append(float(x))
        return out