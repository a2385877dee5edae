"""Key-space commands: get, set, delete, existence checks, renames and flushes.

Every command works on a store, a mutable mapping from byte-string keys to
values. A string value is ``bytes``, an integer ``int``, a float ``float`` and
a list a ``list`` of ``bytes``. A missing value reads as ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import StoreError, WrongTypeError


def _key(name: str) -> bytes:
    return name.encode("utf-8")


@dataclass
class SetCommand:
    """Store ``value`` under ``key``, replacing what was there."""

    key: str
    value: Any

    def execute(self, store):
        store[_key(self.key)] = self.value
        return None


@dataclass
class GetCommand:
    """Return the value under ``key``, or ``None`` when it is absent."""

    key: str

    def execute(self, store):
        return store.get(_key(self.key))


@dataclass
class DelCommand:
    """Delete ``key``; return 1 if it existed, else 0."""

    key: str

    def execute(self, store):
        key = _key(self.key)
        if key in store:
            del store[key]
            return 1
        return 0


@dataclass
class ExistsCommand:
    """Count how many of ``keys`` are present."""

    keys: list[str] = field(default_factory=list)

    def execute(self, store):
        return sum(1 for name in self.keys if _key(name) in store)


@dataclass
class SetNxCommand:
    """Store ``value`` only if ``key`` is absent; return 1 if stored, else 0."""

    key: str
    value: Any

    def execute(self, store):
        key = _key(self.key)
        if key in store:
            return 0
        store[key] = self.value
        return 1


@dataclass
class MSetCommand:
    """Store several key/value pairs at once."""

    entries: list[tuple[str, Any]] = field(default_factory=list)

    def execute(self, store):
        store.update((_key(name), value) for name, value in self.entries)
        return None


@dataclass
class MGetCommand:
    """Return the string values of ``keys`` in order; absent keys read as ``b""``."""

    keys: list[str] = field(default_factory=list)

    def execute(self, store):
        result = []
        for name in self.keys:
            value = store.get(_key(name))
            if value is None:
                result.append(b"")
            elif isinstance(value, bytes):
                result.append(value)
            else:
                raise WrongTypeError("Wrong type")
        return result


def _require(store, key: bytes) -> None:
    if key not in store:
        raise StoreError(f"Key not found: {key.decode('utf-8', 'replace')}")


@dataclass
class RenameCommand:
    """Move the value of ``source`` to ``target``, overwriting ``target``."""

    source: str
    target: str

    def execute(self, store):
        source, target = _key(self.source), _key(self.target)
        _require(store, source)
        store[target] = store.pop(source)
        return b""


@dataclass
class RenameNxCommand:
    """Move ``source`` to ``target`` only if ``target`` is absent; return 1 or 0."""

    source: str
    target: str

    def execute(self, store):
        source, target = _key(self.source), _key(self.target)
        _require(store, source)
        if target in store:
            return 0
        store[target] = store.pop(source)
        return 1


@dataclass
class FlushDbCommand:
    """Remove every key from the store."""

    def execute(self, store):
        store.clear()
        return b"OK"