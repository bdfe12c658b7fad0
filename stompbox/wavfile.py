"""Read and write mono 16-bit WAV files as float samples."""

import os
import wave
from typing import Iterable, List, Union

import numpy as np

from .samples import SAMPLE_RATE, sample_f32_to_i16, sample_i16_to_f32

PathLike = Union[str, "os.PathLike[str]"]


def file_read(filename: PathLike) -> List[float]:
    """Read a mono 16-bit WAV file into floats in [-1.0, 1.0)."""
    with wave.open(os.fspath(filename), "rb") as reader:
        if reader.getnchannels() != 1:
            raise ValueError(f"expected a mono file, got {reader.getnchannels()} channels")
        if reader.getsampwidth() != 2:
            raise ValueError(f"expected 16-bit samples, got {8 * reader.getsampwidth()}-bit")
        frames = reader.readframes(reader.getnframes())
    pcm = np.frombuffer(frames, dtype="<i2")
    return [sample_i16_to_f32(s) for s in pcm.tolist()]


def file_write(filename: PathLike, samples: Iterable[float]) -> None:
    """Write floats as a mono 16-bit WAV file at the standard sample rate."""
    pcm = np.array([sample_f32_to_i16(s) for s in samples], dtype="<i2")
    with wave.open(os.fspath(filename), "wb") as writer:
        writer.setnchannels(1)
        writer.setsampwidth(2)
        writer.setframerate(SAMPLE_RATE)
        writer.writeframes(pcm.tobytes())