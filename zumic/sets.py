"""Set commands: add, remove, membership, listing and cardinality.

A set value is stored as a Python ``set`` of ``bytes``. A missing key reads
as ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidTypeError


def _key(name: str) -> bytes:
    return name.encode("utf-8")


@dataclass
class SAddCommand:
    """Add ``member`` to the set under ``key``; return 1 if it was new, else 0."""

    key: str
    member: str

    def execute(self, store):
        key = _key(self.key)
        member = _key(self.member)
        current = store.get(key)
        if current is None:
            store[key] = {member}
            return 1
        if not isinstance(current, set):
            raise InvalidTypeError()
        added = member not in current
        current.add(member)
        store[key] = current
        return int(added)


@dataclass
class SRemCommand:
    """Remove ``member`` from the set under ``key``; return 1 if removed, else 0."""

    key: str
    member: str

    def execute(self, store):
        key = _key(self.key)
        current = store.get(key)
        if not isinstance(current, set):
            return 0
        member = _key(self.member)
        removed = member in current
        current.discard(member)
        store[key] = current
        return int(removed)


@dataclass
class SIsMemberCommand:
    """Return 1 if ``member`` belongs to the set under ``key``, else 0."""

    key: str
    member: str

    def execute(self, store):
        current = store.get(_key(self.key))
        if not isinstance(current, set):
            return 0
        return int(_key(self.member) in current)


@dataclass
class SMembersCommand:
    """Return every member of the set as a list, or ``None`` if there is no set."""

    key: str

    def execute(self, store):
        current = store.get(_key(self.key))
        if not isinstance(current, set):
            return None
        return list(current)


@dataclass
class SCardCommand:
    """Return the number of members of the set, or 0 if the key is absent."""

    key: str

    def execute(self, store):
        current = store.get(_key(self.key))
        if current is None:
            return 0
        if not isinstance(current, set):
            raise InvalidTypeError()
        return len(current)