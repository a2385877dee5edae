"""Hash commands: set, get and delete fields, and list every field.

A hash value is stored as a ``dict`` mapping field ``bytes`` to value
``bytes``. A missing key reads as ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidTypeError


def _key(name: str) -> bytes:
    return name.encode("utf-8")


@dataclass
class HSetCommand:
    """Set ``field`` of the hash under ``key`` to ``value``; return 1."""

    key: str
    field: str
    value: str

    def execute(self, store):
        key = _key(self.key)
        current = store.get(key)
        if current is None:
            current = {}
        elif not isinstance(current, dict):
            raise InvalidTypeError()
        current[_key(self.field)] = _key(self.value)
        store[key] = current
        return 1


@dataclass
class HGetCommand:
    """Return ``field`` of the hash under ``key``, or ``None`` if absent."""

    key: str
    field: str

    def execute(self, store):
        current = store.get(_key(self.key))
        if isinstance(current, dict):
            return current.get(_key(self.field))
        return None


@dataclass
class HDelCommand:
    """Remove ``field`` from the hash under ``key``; return 1 if removed, else 0."""

    key: str
    field: str

    def execute(self, store):
        key = _key(self.key)
        current = store.get(key)
        if not isinstance(current, dict):
            return 0
        field = _key(self.field)
        if field not in current:
            return 0
        del current[field]
        store[key] = current
        return 1


def _text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


@dataclass
class HGetAllCommand:
    """Return every field of the hash as ``b"field: value"`` entries, or ``None``."""

    key: str

    def execute(self, store):
        current = store.get(_key(self.key))
        if not isinstance(current, dict):
            return None
        return [
            f"{_text(field)}: {_text(value)}".encode("utf-8")
            for field, value in current.items()
        ]