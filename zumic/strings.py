"""String commands: length, append and byte-range extraction.

String values are stored as ``bytes``. A missing key reads as ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidTypeError


def _key(name: str) -> bytes:
    return name.encode("utf-8")


@dataclass
class StrLenCommand:
    """Return the byte length of the string under ``key``, or 0 if absent."""

    key: str

    def execute(self, store):
        value = store.get(_key(self.key))
        if value is None:
            return 0
        if not isinstance(value, bytes):
            raise InvalidTypeError()
        return len(value)


@dataclass
class AppendCommand:
    """Append ``value`` to the string under ``key``; return the new length."""

    key: str
    value: str

    def execute(self, store):
        key = _key(self.key)
        data = self.value.encode("utf-8")
        current = store.get(key)
        if current is None:
            result = data
        elif isinstance(current, bytes):
            result = current + data
        else:
            raise InvalidTypeError()
        store[key] = result
        return len(result)


@dataclass
class GetRangeCommand:
    """Return bytes ``start`` up to (not including) ``end`` of the string under ``key``.

    ``start`` is clamped at 0 and ``end`` at the string's length; a start past
    the end yields an empty string. A missing key yields ``None``.
    """

    key: str
    start: int
    end: int

    def execute(self, store):
        value = store.get(_key(self.key))
        if value is None:
            return None
        if not isinstance(value, bytes):
            raise InvalidTypeError()
        end = max(0, min(self.end, len(value)))
        start = min(max(self.start, 0), end)
        return value[start:end]