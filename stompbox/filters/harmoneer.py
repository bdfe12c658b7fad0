"""Pitch shifter that reads a delay line at a different speed than it writes."""

import math
from typing import List

import numpy as np

from ..knobs import Knobs
from .basic import Block, Patch, _as_block

# Must be even.
SIZE = 4096
HALF_SIZE = SIZE // 2
TIME_TO_REDUCE = SIZE * 8
REDUCE_BY = SIZE * 4
RAMPLEN = 384
RAMPLEN_EXTRA = 10.0
RAMPLEN_CUTOFF = float(RAMPLEN) + RAMPLEN_EXTRA
JUMP_MARGIN = 2.0


class Harmoneer(Patch):
    """Shifts pitch by ``ratio`` using two crossfaded read heads.

    A ratio of exactly 1.0 has no meaning here (it divides by zero), so it
    is rejected; use a pass-through instead.
    """

    def __init__(self, ratio: float) -> None:
        if ratio == 1.0:
            raise ValueError("a pitch ratio of exactly 1.0 is not supported")
        self.ratio = float(ratio)
        self.read_head = float(HALF_SIZE)
        self.write_head = SIZE
        self.last_alpha = 0.0
        self.sample_count = 0
        self._buf: List[float] = [0.0] * SIZE

    def _read(self, r: float) -> float:
        """Linearly interpolated read at fractional position ``r``."""
        if r < 0.0:
            raise RuntimeError(f"read position {r} fell before the start of the buffer")
        r0 = math.floor(r)
        alpha = r - r0
        return (1.0 - alpha) * self._buf[r0 % SIZE] + alpha * self._buf[(r0 + 1) % SIZE]

    def _smooth(self, alpha: float) -> float:
        difference = alpha - self.last_alpha
        if difference > RAMPLEN_CUTOFF or difference < -RAMPLEN_CUTOFF:
            difference = float(RAMPLEN)
        return self.last_alpha + difference

    def _step(self, inp: float) -> float:
        r = self.read_head
        w = self.write_head
        p = self.ratio

        # Write, but don't advance the head until the end.
        self._buf[w % SIZE] = inp

        if p >= 1.0:
            n_f = (w - r) / (p - 1.0)
            t_f = w + n_f
            ramp_start = t_f - RAMPLEN
            ramp_end = t_f
            alpha = max((w - ramp_start) / (ramp_end - ramp_start), 0.0)
            alpha = self._smooth(alpha)
            beta = 1.0 - alpha
            should_flip = ramp_end - w < JUMP_MARGIN
            out = beta * self._read(r) + alpha * self._read(r - HALF_SIZE)
        else:
            w_hat = w - SIZE
            n_r = (w_hat - r) / (p - 1.0)
            t_r = w_hat + n_r
            # Stop a little early: reads touch floor(r) and floor(r) + 1, so the
            # discontinuity must not be crossed.
            ramp_end = t_r - 2.0
            ramp_start = ramp_end - RAMPLEN
            alpha = min((w_hat - ramp_end) / (ramp_start - ramp_end), 1.0)
            alpha = self._smooth(alpha)
            beta = 1.0 - alpha
            should_flip = ramp_end - w_hat < JUMP_MARGIN
            out = alpha * self._read(r) + beta * self._read(r + HALF_SIZE)

        if should_flip:
            r += -HALF_SIZE if p >= 1.0 else HALF_SIZE

        r += p
        w += 1

        if r > TIME_TO_REDUCE and w > TIME_TO_REDUCE:
            r -= REDUCE_BY
            w -= REDUCE_BY

        self.read_head = r
        self.write_head = w
        self.sample_count += 1
        return out

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        block = _as_block(samples)
        return np.array([self._step(x) for x in block.tolist()], dtype=np.float32)