import pytest

from zumic.errors import InvalidTypeError
from zumic.floats import DecrByFloatCommand, IncrByFloatCommand, SetFloatCommand


@pytest.fixture
def store():
    return {}


def test_incr_by_float(store):
    store[b"key1"] = 10.0
    assert IncrByFloatCommand(key="key1", increment=5.5).execute(store) == 15.5
    assert store[b"key1"] == 15.5


def test_decr_by_float(store):
    store[b"key1"] = 10.0
    assert DecrByFloatCommand(key="key1", decrement=3.5).execute(store) == 6.5


def test_set_float(store):
    assert SetFloatCommand(key="key1", value=20.5).execute(store) == 20.5
    assert store[b"key1"] == 20.5


def test_incr_by_float_missing_key(store):
    assert IncrByFloatCommand(key="new", increment=2.5).execute(store) == 2.5


def test_decr_by_float_missing_key(store):
    assert DecrByFloatCommand(key="new", decrement=2.5).execute(store) == -2.5


def test_incr_by_float_invalid_type(store):
    store[b"key1"] = b"text"
    with pytest.raises(InvalidTypeError):
        IncrByFloatCommand(key="key1", increment=1.0).execute(store)


def test_decr_by_float_refuses_integer(store):
    store[b"key1"] = 3
    with pytest.raises(InvalidTypeError):
        DecrByFloatCommand(key="key1", decrement=1.0).execute(store)