"""A patch mixing several pitch-shifted copies of the input, each on a knob."""

from typing import List

from .filters.basic import KnobGain, PassThruFilter, Patch
from .filters.harmoneer import Harmoneer
from .filters.routing import Mixer, MixerChannel, Seq
from .samples import BLOCK_SIZE

# For guitar: (knob number, pitch ratio, (low gain, high gain)).
TONES = (
    (0, 0.5, (0.0, 1.0)),
    (1, 2.0, (0.0, 1.0)),
    (2, 1.5, (0.0, 1.0)),
)


def much_harm() -> Mixer:
    """Build the mixer: one knob-controlled harmony per tone plus the dry signal."""
    channels: List[MixerChannel] = []
    for knob_num, ratio, (low, high) in TONES:
        voice: Patch = PassThruFilter() if ratio == 1.0 else Harmoneer(ratio)
        chain = Seq(BLOCK_SIZE, voice, KnobGain(knob_num, low, high))
        channels.append(MixerChannel(1.0, chain))
    channels.append(MixerChannel(1.0, PassThruFilter()))
    return Mixer(channels)