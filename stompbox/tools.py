"""Command-line helpers for working with mono WAV files."""

import argparse
import math
import sys
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from .fft import rfft_packed
from .samples import FFT_SIZE, SAMPLE_RATE
from .wavfile import file_read, file_write


def _argv(argv: Optional[Sequence[str]]) -> list:
    return list(sys.argv[1:] if argv is None else argv)


def _check_same_length(samples0: Sequence[float], samples1: Sequence[float]) -> None:
    if len(samples0) != len(samples1):
        raise ValueError(
            f"sample counts differ: {len(samples0)} and {len(samples1)}"
        )


def rms_difference(samples0: Sequence[float], samples1: Sequence[float]) -> float:
    """Root mean square of the sample-by-sample difference of two signals."""
    _check_same_length(samples0, samples1)
    if not len(samples0):
        return math.nan
    diff = np.asarray(samples0, dtype=np.float64) - np.asarray(samples1, dtype=np.float64)
    return float(np.sqrt(np.mean(diff * diff)))


def generate_sines(duration: float, pairs: Iterable[Tuple[float, float]]) -> np.ndarray:
    """Sum of sines, given as (frequency, amplitude) pairs, lasting ``duration`` seconds."""
    length = max(int(np.float32(duration) * np.float32(SAMPLE_RATE)), 0)
    t = np.arange(length, dtype=np.float32) / np.float32(SAMPLE_RATE)
    out = np.zeros(length, dtype=np.float32)
    two_pi = np.float32(2.0 * math.pi)
    for frequency, amp in pairs:
        out += np.float32(amp) * np.sin(t * two_pi * np.float32(frequency))
    return out


def fft_main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the normalised packed FFT of the first frame of a WAV file."""
    parser = argparse.ArgumentParser(description="FFT the first frame of a WAV file.")
    parser.add_argument("input")
    parser.add_argument("output")
    args = parser.parse_args(_argv(argv))
    samples = file_read(args.input)
    if len(samples) < FFT_SIZE:
        raise ValueError(f"need at least {FFT_SIZE} samples, got {len(samples)}")
    spectrum = rfft_packed(samples[:FFT_SIZE]) / np.float32(FFT_SIZE)
    file_write(args.output, spectrum.tolist())
    return 0


def compare_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the RMS difference between two WAV files."""
    parser = argparse.ArgumentParser(description="RMS difference of two WAV files.")
    parser.add_argument("first")
    parser.add_argument("second")
    args = parser.parse_args(_argv(argv))
    rms = rms_difference(file_read(args.first), file_read(args.second))
    print(f"RMS {np.float32(rms)}")
    return 0


def diff_main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the sample-by-sample difference of two WAV files."""
    parser = argparse.ArgumentParser(description="Difference of two WAV files.")
    parser.add_argument("first")
    parser.add_argument("second")
    parser.add_argument("output")
    args = parser.parse_args(_argv(argv))
    samples0 = file_read(args.first)
    samples1 = file_read(args.second)
    _check_same_length(samples0, samples1)
    file_write(args.output, [a - b for a, b in zip(samples0, samples1)])
    return 0


def dump_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every sample of a WAV file with its index."""
    parser = argparse.ArgumentParser(description="Print the samples of a WAV file.")
    parser.add_argument("input")
    args = parser.parse_args(_argv(argv))
    for i, sample in enumerate(file_read(args.input)):
        print(f"{i}: {np.float32(sample)}")
    return 0


def sine_main(argv: Optional[Sequence[str]] = None) -> int:
    """Write a WAV file holding a sum of sines given as frequency/amplitude pairs."""
    parser = argparse.ArgumentParser(description="Generate a sum of sines.")
    parser.add_argument("filename")
    parser.add_argument("duration", type=float)
    parser.add_argument("freq_amp", type=float, nargs="*")
    args = parser.parse_args(_argv(argv))
    values = args.freq_amp
    if len(values) % 2:
        raise ValueError("frequencies and amplitudes must come in pairs")
    pairs = list(zip(values[0::2], values[1::2]))
    file_write(args.filename, generate_sines(args.duration, pairs).tolist())
    return 0