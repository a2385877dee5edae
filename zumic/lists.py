"""List commands: push and pop at either end, length and index ranges.

A list value is stored as a ``list`` of ``bytes``. A missing key reads as
``None``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidTypeError


def _key(name: str) -> bytes:
    return name.encode("utf-8")


def _existing_list(store, key: bytes):
    current = store.get(key)
    if current is None:
        return None
    if not isinstance(current, list):
        raise InvalidTypeError()
    return current


def _push(store, name: str, value: str, front: bool) -> int:
    key = _key(name)
    items = _existing_list(store, key)
    if items is None:
        items = []
    element = _key(value)
    if front:
        items.insert(0, element)
    else:
        items.append(element)
    store[key] = items
    return len(items)


def _pop(store, name: str, front: bool):
    key = _key(name)
    items = _existing_list(store, key)
    if not items:
        return None
    element = items.pop(0) if front else items.pop()
    store[key] = items
    return element


@dataclass
class LPushCommand:
    """Insert ``value`` at the head of the list; return the new length."""

    key: str
    value: str

    def execute(self, store):
        return _push(store, self.key, self.value, front=True)


@dataclass
class RPushCommand:
    """Append ``value`` at the tail of the list; return the new length."""

    key: str
    value: str

    def execute(self, store):
        return _push(store, self.key, self.value, front=False)


@dataclass
class LPopCommand:
    """Remove and return the head of the list, or ``None`` if there is none."""

    key: str

    def execute(self, store):
        return _pop(store, self.key, front=True)


@dataclass
class RPopCommand:
    """Remove and return the tail of the list, or ``None`` if there is none."""

    key: str

    def execute(self, store):
        return _pop(store, self.key, front=False)


@dataclass
class LLenCommand:
    """Return the length of the list, or 0 if the key is absent."""

    key: str

    def execute(self, store):
        items = _existing_list(store, _key(self.key))
        return 0 if items is None else len(items)


@dataclass
class LRangeCommand:
    """Return the elements from ``start`` to ``stop`` inclusive.

    Negative indices count from the end. A missing key yields ``None``.
    """

    key: str
    start: int
    stop: int

    def execute(self, store):
        items = _existing_list(store, _key(self.key))
        if items is None:
            return None
        length = len(items)
        if length == 0:
            return []
        start = max(length + self.start, 0) if self.start < 0 else min(self.start, length)
        stop = max(length + self.stop, 0) if self.stop < 0 else min(self.stop, length - 1)
        if start > stop:
            return []
        return items[start:stop + 1]