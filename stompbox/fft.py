"""Real-input FFT in packed form, and magnitudes from it."""

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from .samples import FFT_SIZE

_RSQRT_MAGIC = 0x5F375A86

ArrayLike = Union[Sequence[float], np.ndarray]


def _rsqrt_array(numbers: ArrayLike) -> np.ndarray:
    x = np.array(numbers, dtype=np.float32, ndmin=1)
    bits = x.view(np.int32).astype(np.int64)
    # 32-bit wrapping subtraction of the arithmetically shifted bit pattern.
    guess_bits = (_RSQRT_MAGIC - (bits >> 1)) & 0xFFFFFFFF
    guess = guess_bits.astype(np.uint32).view(np.float32)
    with np.errstate(over="ignore", invalid="ignore"):
        return guess * (np.float32(1.5) - x * np.float32(0.5) * guess * guess)


def quake_rsqrt(number: Union[float, ArrayLike]) -> Union[float, np.ndarray]:
    """Approximate ``1 / sqrt(number)`` with the bit-level trick and one Newton step.

    A scalar gives a float; a sequence or array gives a float32 array.
    """
    if np.ndim(number) == 0:
        return float(_rsqrt_array([number])[0])
    return _rsqrt_array(number).reshape(np.shape(number))


def _check_power_of_two(n: int) -> None:
    if n < 2 or n & (n - 1):
        raise ValueError(f"FFT length must be a power of two of at least 2, got {n}")


def rfft_packed(samples: ArrayLike) -> np.ndarray:
    """Forward FFT of real samples, packed into an array of the same length.

    Element 0 holds the DC term and element 1 the Nyquist term (both real);
    after that come alternating real and imaginary parts of bins 1..N/2-1.
    """
    x = np.asarray(samples, dtype=np.float32)
    if x.ndim != 1:
        raise ValueError("FFT input must be one-dimensional")
    n = x.size
    _check_power_of_two(n)
    spectrum = np.fft.rfft(x.astype(np.float64))
    out = np.empty(n, dtype=np.float32)
    out[0::2] = spectrum.real[:-1]
    out[1::2] = spectrum.imag[:-1]
    out[1] = spectrum.real[-1]
    return out


def fft_to_magnitudes(fft_in: ArrayLike) -> np.ndarray:
    """Turn packed re/im pairs into magnitudes, half as many as inputs.

    The first pair is DC and Nyquist, so its "magnitude" combines the two.
    """
    packed = np.asarray(fft_in, dtype=np.float32)
    if packed.ndim != 1 or packed.size % 2:
        raise ValueError("packed FFT output must be one-dimensional with even length")
    re = packed[0::2]
    im = packed[1::2]
    power = re * re + im * im
    with np.errstate(divide="ignore", over="ignore"):
        return np.float32(1.0) / _rsqrt_array(power)


@dataclass(frozen=True)
class RealFFT:
    """A real FFT of a fixed size returning packed output."""

    size: int = FFT_SIZE

    def __post_init__(self) -> None:
        _check_power_of_two(self.size)

    def run(self, samples: ArrayLike) -> np.ndarray:
        """Transform exactly ``size`` samples."""
        length = len(samples)
        if length != self.size:
            raise ValueError(f"expected {self.size} samples, got {length}")
        return rfft_packed(samples)