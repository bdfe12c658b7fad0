import math

import pytest

from stompbox.sine_table import TABLE, TABLE_SIZE, generate_sine_table, main, table_sin


def test_table_has_one_extra_entry():
    assert len(generate_sine_table(256)) == 257
    assert len(TABLE) == TABLE_SIZE + 1


def test_table_landmarks():
    table = generate_sine_table(256)
    assert table[0] == 0.0
    assert table[64] == 1.0
    assert table[192] == -1.0


def test_table_matches_fixed_values():
    table = generate_sine_table(256)
    assert table[1] == pytest.approx(0.024541229, abs=1e-7)
    assert table[32] == pytest.approx(0.70710677, abs=1e-7)


def test_zero():
    assert table_sin(0.0) == 0.0


@pytest.mark.parametrize("x", [0.1 * k for k in range(1, 120)])
def test_close_to_real_sine(x):
    assert table_sin(x) == pytest.approx(math.sin(x), abs=1e-3)


@pytest.mark.parametrize("x", [0.3, 1.7, 4.0, 5.9])
def test_periodic(x):
    assert table_sin(x + 2 * math.pi) == pytest.approx(table_sin(x), abs=1e-3)


def test_bounded():
    values = [table_sin(0.013 * k) for k in range(2000)]
    assert max(values) <= 1.0
    assert min(values) >= -1.0


def test_main_prints_table(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "TABLE = ("
    assert lines[TABLE_SIZE + 2] == ")"
    assert len(lines) == TABLE_SIZE + 4
    assert lines[65] == "1.0,"