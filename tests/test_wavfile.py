import wave

import pytest

from stompbox.samples import SAMPLE_RATE, sample_i16_to_f32
from stompbox.wavfile import file_read, file_write


def test_round_trip(tmp_path):
    path = tmp_path / "round.wav"
    samples = [0.0, 0.5, -0.5, 0.25, -0.75, 0.999]
    file_write(path, samples)
    back = file_read(path)
    assert len(back) == len(samples)
    for a, b in zip(samples, back):
        assert b == pytest.approx(a, abs=2 / 32768)


def test_header(tmp_path):
    path = tmp_path / "header.wav"
    file_write(path, [0.1] * 10)
    with wave.open(str(path), "rb") as reader:
        assert reader.getnchannels() == 1
        assert reader.getsampwidth() == 2
        assert reader.getframerate() == SAMPLE_RATE
        assert reader.getnframes() == 10


def test_silence_and_empty(tmp_path):
    silent = tmp_path / "silent.wav"
    file_write(silent, [0.0, 0.0])
    assert file_read(silent) == [0.0, 0.0]
    empty = tmp_path / "empty.wav"
    file_write(empty, [])
    assert file_read(empty) == []


def test_out_of_range_saturates(tmp_path):
    path = tmp_path / "clip.wav"
    file_write(path, [2.0, -2.0])
    assert file_read(path) == [sample_i16_to_f32(32767), sample_i16_to_f32(-32768)]


def test_accepts_string_path(tmp_path):
    path = str(tmp_path / "str.wav")
    file_write(path, [0.5])
    assert file_read(path)[0] == pytest.approx(0.5, abs=2 / 32768)


def test_stereo_rejected(tmp_path):
    path = tmp_path / "stereo.wav"
    with wave.open(str(path), "wb") as writer:
        writer.setnchannels(2)
        writer.setsampwidth(2)
        writer.setframerate(SAMPLE_RATE)
        writer.writeframes(b"\x00\x00" * 4)
    with pytest.raises(ValueError):
        file_read(path)


def test_eight_bit_rejected(tmp_path):
    path = tmp_path / "eight.wav"
    with wave.open(str(path), "wb") as writer:
        writer.setnchannels(1)
        writer.setsampwidth(1)
        writer.setframerate(SAMPLE_RATE)
        writer.writeframes(b"\x80" * 4)
    with pytest.raises(ValueError):
        file_read(path)