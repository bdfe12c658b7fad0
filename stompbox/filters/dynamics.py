"""Envelope following and distortion patches."""

import numpy as np

from ..knobs import Knobs
from .basic import Block, Patch, _as_block


class EnvelopeFollower(Patch):
    """Tracks the envelope: jumps up quickly on attack, falls slowly on decay."""

    def __init__(self) -> None:
        self.last_x = 0.0
        self.last_y = 0.0
        self.attack_eagerness = 0.90
        self.decay_eagerness = 0.001

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        block = _as_block(samples)
        out = np.empty_like(block)
        for i, x in enumerate(block.tolist()):
            eagerness = self.attack_eagerness if x > self.last_y else self.decay_eagerness
            y = (eagerness * x) + ((1.0 - eagerness) * self.last_y)
            out[i] = y
            self.last_x = x
            self.last_y = y
        return out


class Fuzz(Patch):
    """Soft-clipping distortion with gain driven by the input envelope, mixed with dry."""

    MIN_ENV = 0.05
    GAIN = 7.5
    WET = 0.1

    def __init__(self) -> None:
        self.last_x = 0.0
        self.last_y = 0.0
        self.attack_eagerness = 0.90
        self.decay_eagerness = 0.001

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        block = _as_block(samples)
        out = np.empty_like(block)
        for i, x in enumerate(block.tolist()):
            eagerness = self.attack_eagerness if x > self.last_y else self.decay_eagerness
            env = (eagerness * x) + ((1.0 - eagerness) * self.last_y)
            self.last_x = x
            self.last_y = env

            input_gain = 0.8 / max(abs(env), self.MIN_ENV)
            xg = x * input_gain * 10.0 + self.GAIN
            y = xg / (1.0 + abs(xg))
            out[i] = (self.WET * y) + ((1.0 - self.WET) * x)
        return out


class WaveShaper(Patch):
    """Soft-clipping waveshaper; also records the input range it has seen."""

    INPUT_GAIN = 3.0
    GAIN = 7.5

    def __init__(self) -> None:
        self.min = 0.0
        self.max = 0.0

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        block = _as_block(samples)
        out = np.empty_like(block)
        for i, s in enumerate(block.tolist()):
            x = s * self.INPUT_GAIN * 10.0 + self.GAIN
            out[i] = x / (1.0 + abs(x))
            if s < self.min:
                self.min = s
            elif s > self.max:
                self.max = s
        return out