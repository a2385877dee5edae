"""Floating-point commands: increment, decrement and set.

A missing key counts as 0.0; a value that is not a float is refused.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidTypeError


def _key(name: str) -> bytes:
    return name.encode("utf-8")


def _adjust(store, name: str, delta: float) -> float:
    key = _key(name)
    current = store.get(key)
    if current is None:
        result = float(delta)
    elif type(current) is float:
        result = current + delta
    else:
        raise InvalidTypeError()
    store[key] = result
    return result


@dataclass
class IncrByFloatCommand:
    """Add ``increment`` to the float under ``key``; return the new value."""

    key: str
    increment: float

    def execute(self, store):
        return _adjust(store, self.key, self.increment)


@dataclass
class DecrByFloatCommand:
    """Subtract ``decrement`` from the float under ``key``; return the new value."""

    key: str
    decrement: float

    def execute(self, store):
        return _adjust(store, self.key, -self.decrement)


@dataclass
class SetFloatCommand:
    """Store the float ``value`` under ``key`` and return it."""

    key: str
    value: float

    def execute(self, store):
        value = float(self.value)
        store[_key(self.key)] = value
        return value