"""Audio constants and conversions between 16-bit PCM and float samples."""

import math

import numpy as np

SAMPLE_RATE = 48000
BLOCK_SIZE = 48
FFT_SIZE = 2048
KSHEP = True
PROD = False

# Room is left for bookkeeping at the end of the 64 MiB external memory.
SDRAM_SIZE_BYTES = (64 * 1024 * 1024) - 128
SDRAM_SIZE_F32 = SDRAM_SIZE_BYTES // 4

_I16_MIN = -32768
_I16_MAX = 32767


def sample_i16_to_f32(x: int) -> float:
    """Convert a signed 16-bit sample to a float in [-1.0, 1.0)."""
    if not _I16_MIN <= x <= _I16_MAX:
        raise ValueError(f"sample {x} is outside the 16-bit range")
    return x / 32768.0


def sample_f32_to_i16(x: float) -> int:
    """Convert a float sample to 16 bits, truncating toward zero and saturating."""
    scaled = float(np.float32(x) * np.float32(32767.0))
    if math.isnan(scaled):
        return 0
    if scaled >= _I16_MAX:
        return _I16_MAX
    if scaled <= _I16_MIN:
        return _I16_MIN
    return int(scaled)