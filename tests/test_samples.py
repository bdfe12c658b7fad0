import pytest

from stompbox.samples import sample_f32_to_i16, sample_i16_to_f32


def test_full_scale_negative_is_minus_one():
    assert sample_i16_to_f32(-32768) == -1.0


def test_zero_maps_to_zero_both_ways():
    assert sample_i16_to_f32(0) == 0.0
    assert sample_f32_to_i16(0.0) == 0


def test_one_maps_to_max():
    assert sample_f32_to_i16(1.0) == 32767


@pytest.mark.parametrize("x", [5.0, 1e9, float("inf")])
def test_saturates_high(x):
    assert sample_f32_to_i16(x) == 32767


@pytest.mark.parametrize("x", [-5.0, -1e9, float("-inf")])
def test_saturates_low(x):
    assert sample_f32_to_i16(x) == -32768


def test_nan_is_zero():
    assert sample_f32_to_i16(float("nan")) == 0


def test_truncates_toward_zero():
    small = 0.9 / 32767.0
    assert sample_f32_to_i16(small) == 0
    assert sample_f32_to_i16(-small) == 0


@pytest.mark.parametrize("x", [-32768, -12345, -1, 1, 777, 16384, 32767])
def test_round_trip_within_one_step(x):
    back = sample_f32_to_i16(sample_i16_to_f32(x))
    assert abs(back - x) <= 1


@pytest.mark.parametrize("x", [-32769, 32768])
def test_out_of_range_i16_rejected(x):
    with pytest.raises(ValueError):
        sample_i16_to_f32(x)