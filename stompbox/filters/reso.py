"""Two-pole resonant low-pass filter with cutoff and resonance on knobs."""

import numpy as np

from ..knobs import Knobs
from .basic import Block, Patch, _as_block

_FREQ_LO = 0.3
_FREQ_HI = 0.9
_Q_LO = 0.4
_Q_HI = 0.99


class ResoFilter(Patch):
    """Resonant filter whose cutoff and Q are read from two knobs once per block."""

    def __init__(self, freq_knob_id: int, q_knob_id: int) -> None:
        self.freq_knob_id = freq_knob_id
        self.q_knob_id = q_knob_id
        self.buf0 = 0.0
        self.buf1 = 0.0

    def process(self, samples: Block, knobs: Knobs) -> np.ndarray:
        block = _as_block(samples)
        freq_knob_value = knobs.read(self.freq_knob_id)
        q_knob_value = knobs.read(self.q_knob_id)

        oscf = _FREQ_LO + (freq_knob_value * (_FREQ_HI - _FREQ_LO))
        q = _Q_LO + (q_knob_value * (_Q_HI - _Q_LO))
        fb = q + q / (1.0 - oscf)

        out = np.empty_like(block)
        for i, inp in enumerate(block.tolist()):
            self.buf0 = self.buf0 + oscf * (inp - self.buf0 + fb * (self.buf0 - self.buf1))
            self.buf1 = self.buf1 + oscf * (self.buf0 - self.buf1)
            out[i] = self.buf1
        return out