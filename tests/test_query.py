import dataclasses

import pytest

from minresolv.query import CLASS_IN, OPCODE_QUERY, Search, Timeout


def test_default_timeout_seconds():
    assert Timeout().seconds() == pytest.approx(5.005)


def test_timeout_whole_seconds():
    assert Timeout(3, 0).seconds() == 3


def test_timeout_microseconds_add_up():
    assert Timeout(0, 2_000_000).seconds() == pytest.approx(Timeout(2, 0).seconds())


@pytest.mark.parametrize("sec, usec", [(-1, 0), (0, -1)])
def test_negative_timeout_rejected(sec, usec):
    with pytest.raises(ValueError):
        Timeout(sec, usec)


def test_search_defaults():
    search = Search("example.com", 1)
    assert search.qclass == CLASS_IN == 1
    assert search.opcode == OPCODE_QUERY == 0


def test_search_equality_and_hash():
    a = Search("example.com", 28)
    b = Search("example.com", 28)
    assert a == b
    assert len({a, b}) == 1
    assert a != Search("example.com", 1)


def test_search_is_immutable():
    search = Search("example.com", 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        search.name = "example.org"
    assert search.name == "example.com"
    assert search == Search("example.com", 1)