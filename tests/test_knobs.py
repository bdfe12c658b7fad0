import pytest

from stompbox.knobs import DummyKnobs, Knobs


class _RampKnobs(Knobs):
    def read(self, knob_id):
        return knob_id / 10


@pytest.mark.parametrize("knob_id", [0, 3, 5, 42])
def test_dummy_reads_full(knob_id):
    assert DummyKnobs().read(knob_id) == 1.0


def test_process_keeps_values():
    knobs = DummyKnobs()
    knobs.process()
    assert knobs.read(0) == 1.0


def test_spew_prints_six_values(capsys):
    DummyKnobs().spew()
    assert capsys.readouterr().out.strip() == "knobs 1.0 1.0 1.0 1.0 1.0 1.0"


def test_spew_uses_read_per_knob(capsys):
    Knobs.spew(_RampKnobs())
    words = capsys.readouterr().out.split()
    assert words[0] == "knobs"
    assert [float(w) for w in words[1:]] == [i / 10 for i in range(6)]


def test_base_is_abstract():
    with pytest.raises(TypeError):
        Knobs()