"""Integer counter commands: increment and decrement by one or by an amount.

A missing key counts as 0; a value that is not an integer is refused.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidTypeError


def _key(name: str) -> bytes:
    return name.encode("utf-8")


def _adjust(store, name: str, delta: int) -> int:
    key = _key(name)
    current = store.get(key)
    if current is None:
        current = 0
    elif type(current) is not int:
        raise InvalidTypeError()
    result = current + delta
    store[key] = result
    return result


@dataclass
class IncrCommand:
    """Add 1 to the integer under ``key``; return the new value."""

    key: str

    def execute(self, store):
        return _adjust(store, self.key, 1)


@dataclass
class IncrByCommand:
    """Add ``increment`` to the integer under ``key``; return the new value."""

    key: str
    increment: int

    def execute(self, store):
        return _adjust(store, self.key, self.increment)


@dataclass
class DecrCommand:
    """Subtract 1 from the integer under ``key``; return the new value."""

    key: str

    def execute(self, store):
        return _adjust(store, self.key, -1)


@dataclass
class DecrByCommand:
    """Subtract ``decrement`` from the integer under ``key``; return the new value."""

    key: str
    decrement: int

    def execute(self, store):
        return _adjust(store, self.key, -self.decrement)