"""Sorted-set commands: add, remove, score lookup, cardinality and ranges.

A sorted-set value is stored as a :class:`ZSet`. A missing key reads as
``None``.
"""

from __future__ import annotations

from dataclasses import dataclass

from sortedcontainers import SortedList

from .errors import InvalidTypeError


def _key(name: str) -> bytes:
    return name.encode("utf-8")


class ZSet:
    """Members with float scores, kept in ascending order of score then member."""

    def __init__(self):
        self._scores: dict[bytes, float] = {}
        self._ordered = SortedList()

    def add(self, member, score):
        """Set the score of ``member``; return True if the member is new."""
        score = float(score)
        previous = self._scores.get(member)
        if previous is not None:
            self._ordered.remove((previous, member))
        self._scores[member] = score
        self._ordered.add((score, member))
        return previous is None

    def discard(self, member):
        """Remove ``member``; return True if it was present."""
        previous = self._scores.pop(member, None)
        if previous is None:
            return False
        self._ordered.remove((previous, member))
        return True

    def score(self, member):
        """Return the score of ``member``, or None if it is absent."""
        return self._scores.get(member)

    def __len__(self):
        return len(self._scores)

    def __contains__(self, member):
        return member in self._scores

    def __iter__(self):
        return (member for _, member in self._ordered)

    def __reversed__(self):
        return (member for _, member in reversed(self._ordered))

    def __repr__(self):
        return f"ZSet({list(self._ordered)!r})"


def _zset_or_none(store, key: bytes):
    current = store.get(key)
    if current is None:
        return None
    if not isinstance(current, ZSet):
        raise InvalidTypeError()
    return current


def _index_range(members: list, start: int, stop: int) -> list:
    length = len(members)
    s = max(length + start, 0) if start < 0 else min(start, length)
    e = max(length + stop, 0) if stop < 0 else min(stop, length - 1)
    if s <= e and s < length:
        return members[s:e + 1]
    return []


@dataclass
class ZAddCommand:
    """Set the score of ``member``; return 1 if it was new, else 0."""

    key: str
    member: str
    score: float

    def execute(self, store):
        key = _key(self.key)
        zset = _zset_or_none(store, key)
        if zset is None:
            zset = ZSet()
        is_new = zset.add(_key(self.member), self.score)
        store[key] = zset
        return int(is_new)


@dataclass
class ZRemCommand:
    """Remove ``member``; return 1 if it was removed, else 0."""

    key: str
    member: str

    def execute(self, store):
        key = _key(self.key)
        current = store.get(key)
        if not isinstance(current, ZSet):
            return 0
        if not current.discard(_key(self.member)):
            return 0
        store[key] = current
        return 1


@dataclass
class ZScoreCommand:
    """Return the score of ``member``, or ``None`` if it is absent."""

    key: str
    member: str

    def execute(self, store):
        zset = _zset_or_none(store, _key(self.key))
        if zset is None:
            return None
        return zset.score(_key(self.member))


@dataclass
class ZCardCommand:
    """Return the number of members, or 0 if the key is absent."""

    key: str

    def execute(self, store):
        zset = _zset_or_none(store, _key(self.key))
        return 0 if zset is None else len(zset)


@dataclass
class ZRangeCommand:
    """Return members by ascending score from ``start`` to ``stop`` inclusive."""

    key: str
    start: int
    stop: int

    def execute(self, store):
        zset = _zset_or_none(store, _key(self.key))
        if zset is None:
            return None
        return _index_range(list(zset), self.start, self.stop)


@dataclass
class ZRevRangeCommand:
    """Return members by descending score from ``start`` to ``stop`` inclusive."""

    key: str
    start: int
    stop: int

    def execute(self, store):
        zset = _zset_or_none(store, _key(self.key))
        if zset is None:
            return None
        return _index_range(list(reversed(zset)), self.start, self.stop)