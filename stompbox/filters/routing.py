"""Patches that combine other patches: in series, in parallel, or crossfaded."""

from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from ..knobs import Knobs
from ..samples import BLOCK_SIZE
from .basic import Block, Patch, _as_block


def _check_length(block: np.ndarray, limit: int) -> None:
    if block.size > limit:
        raise ValueError(f"block of {block.size} samples exceeds the limit of {limit}")


class Seq(Patch):
    """Feeds the output of one patch into another."""

    def __init__(self, block_size: int, patch0: Patch, patch1: Patch) -> None:
        self.block_size = block_size
        self.patch0 = patch0
        self.patch1 = patch1

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        block = _as_block(samples)
        _check_length(block, self.block_size)
        return self.patch1.process(self.patch0.process(block, knobs), knobs)


@dataclass
class MixerChannel:
    """A patch and the fader level it is mixed in at."""

    gain: float
    patch: Patch


class Mixer(Patch):
    """Runs each channel on the same input and sums the results.

    Fader levels are rescaled so that they sum to the number of channels.
    """

    def __init__(self, channels: Iterable[MixerChannel]) -> None:
        channels = list(channels)
        total_gain = sum(ch.gain for ch in channels)
        if total_gain == 0.0:
            raise ValueError("mixer channel gains must not sum to zero")
        count = len(channels)
        self.channels: List[MixerChannel] = [
            MixerChannel(ch.gain / total_gain * count, ch.patch) for ch in channels
        ]

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        block = _as_block(samples)
        _check_length(block, BLOCK_SIZE)
        out = np.zeros_like(block)
        for channel in self.channels:
            out += np.float32(channel.gain) * channel.patch.process(block, knobs)
        return out


class Interp(Patch):
    """Crossfades between two patches with a knob: 0 is all ``patch0``, 1 all ``patch1``."""

    def __init__(self, block_size: int, patch0: Patch, patch1: Patch, interp_knob_id: int) -> None:
        self.block_size = block_size
        self.patch0 = patch0
        self.patch1 = patch1
        self.interp_knob_id = interp_knob_id

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        block = _as_block(samples)
        _check_length(block, self.block_size)
        interp = np.float32(knobs.read(self.interp_knob_id))
        p0 = self.patch0.process(block, knobs)
        p1 = self.patch1.process(block, knobs)
        return ((np.float32(1.0) - interp) * p0) + (interp * p1)