import threading

from stompbox.globby import Globby


def test_new_holds_value():
    g = Globby([1, 2])
    assert g.map(len) == 2


def test_empty_maps_to_none():
    g = Globby.empty()
    assert g.map(lambda x: x + 1) is None


def test_set_then_clear_returns_value():
    g = Globby.empty()
    g.set("abc")
    assert g.clear() == "abc"
    assert g.clear() is None
    assert g.map(str.upper) is None


def test_use_it_mutates_held_object():
    g = Globby([])
    g.use_it(lambda items: items.append(7))
    assert g.map(list) == [7]


def test_use_it_on_empty_does_not_call():
    calls = []
    g = Globby.empty()
    g.use_it(calls.append)
    assert calls == []


def test_use_and_return_can_replace_value():
    g = Globby(3)

    def bump(slot):
        slot.value += 1
        return slot.value * 10

    assert g.use_and_return(bump) == 40
    assert g.map(lambda x: x) == 4


def test_concurrent_updates_are_serialised():
    g = Globby(0)

    def bump(slot):
        slot.value += 1

    def worker():
        for _ in range(1000):
            g.use_and_return(bump)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert g.map(lambda x: x) == 8 * 1000