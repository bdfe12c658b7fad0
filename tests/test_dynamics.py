import numpy as np
import pytest

from stompbox.filters.dynamics import EnvelopeFollower, Fuzz, WaveShaper
from stompbox.knobs import DummyKnobs


def test_envelope_of_silence_is_silence():
    out = EnvelopeFollower().process(np.zeros(20), DummyKnobs())
    np.testing.assert_array_equal(out, np.zeros(20))


def test_envelope_attack_uses_attack_eagerness():
    out = EnvelopeFollower().process([1.0], DummyKnobs())
    assert out[0] == pytest.approx(0.9)


def test_envelope_decays_slowly_and_monotonically():
    ef = EnvelopeFollower()
    ef.process([1.0] * 10, DummyKnobs())
    peak = ef.last_y
    out = ef.process(np.zeros(50), DummyKnobs())
    assert np.all(np.diff(out) < 0)
    assert np.all(out > 0)
    assert out[-1] < peak
    assert out[-1] > 0.5 * peak


def test_envelope_across_blocks():
    sig = np.sin(np.linspace(0, 20, 96)).astype(np.float32)
    whole = EnvelopeFollower().process(sig, DummyKnobs())
    ef = EnvelopeFollower()
    parts = np.concatenate([ef.process(sig[:48], DummyKnobs()), ef.process(sig[48:], DummyKnobs())])
    np.testing.assert_allclose(parts, whole)


def test_fuzz_stays_near_dry_signal():
    sig = np.sin(np.linspace(0, 30, 200)).astype(np.float32) * 0.8
    out = Fuzz().process(sig, DummyKnobs())
    assert len(out) == len(sig)
    assert float(np.max(np.abs(out - 0.9 * sig))) <= 0.1 + 1e-6


def test_fuzz_on_silence_is_constant_and_positive():
    out = Fuzz().process(np.zeros(30), DummyKnobs())
    assert np.all(out == out[0])
    assert out[0] > 0


def test_waveshaper_output_bounded_and_monotone():
    sig = np.linspace(-1.0, 1.0, 101, dtype=np.float32)
    out = WaveShaper().process(sig, DummyKnobs())
    assert len(out) == len(sig)
    assert float(np.max(np.abs(out))) < 1.0
    assert float(np.min(np.diff(out))) >= 0.0


def test_waveshaper_tracks_input_range():
    ws = WaveShaper()
    ws.process([-0.5, 0.3, 0.1], DummyKnobs())
    assert ws.min == pytest.approx(-0.5)
    assert ws.max == pytest.approx(0.3)


def test_waveshaper_is_stateless_in_output():
    sig = np.array([0.2, -0.1, 0.05], dtype=np.float32)
    ws = WaveShaper()
    first = ws.process(sig, DummyKnobs())
    second = ws.process(sig, DummyKnobs())
    np.testing.assert_array_equal(first, second)