"""Dispatch of named commands to their implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .basic import (
    DelCommand,
    ExistsCommand,
    FlushDbCommand,
    GetCommand,
    MGetCommand,
    MSetCommand,
    RenameCommand,
    RenameNxCommand,
    SetCommand,
    SetNxCommand,
)
from .floats import IncrByFloatCommand, SetFloatCommand
from .hashes import HDelCommand, HGetAllCommand, HGetCommand, HSetCommand
from .integers import DecrByCommand, DecrCommand, IncrByCommand, IncrCommand
from .lists import (
    LLenCommand,
    LPopCommand,
    LPushCommand,
    LRangeCommand,
    RPopCommand,
    RPushCommand,
)
from .sets import (
    SAddCommand,
    SCardCommand,
    SIsMemberCommand,
    SMembersCommand,
    SRemCommand,
)
from .strings import AppendCommand, GetRangeCommand, StrLenCommand
from .zsets import (
    ZAddCommand,
    ZCardCommand,
    ZRangeCommand,
    ZRemCommand,
    ZRevRangeCommand,
    ZScoreCommand,
)

_REGISTRY: dict[str, type] = {
    "set": SetCommand,
    "get": GetCommand,
    "del": DelCommand,
    "exists": ExistsCommand,
    "setnx": SetNxCommand,
    "mset": MSetCommand,
    "mget": MGetCommand,
    "rename": RenameCommand,
    "renamenx": RenameNxCommand,
    "flushdb": FlushDbCommand,
    "strlen": StrLenCommand,
    "append": AppendCommand,
    "getrange": GetRangeCommand,
    "incr": IncrCommand,
    "incrby": IncrByCommand,
    "decr": DecrCommand,
    "decrby": DecrByCommand,
    "incrbyfloat": IncrByFloatCommand,
    # The float decrement is served by the integer decrement command.
    "decrbyfloat": DecrByCommand,
    "setfloat": SetFloatCommand,
    "hset": HSetCommand,
    "hget": HGetCommand,
    "hdel": HDelCommand,
    "hgetall": HGetAllCommand,
    "sadd": SAddCommand,
    "srem": SRemCommand,
    "sismember": SIsMemberCommand,
    "smembers": SMembersCommand,
    "scard": SCardCommand,
    "zadd": ZAddCommand,
    "zscore": ZScoreCommand,
    "zcard": ZCardCommand,
    "zrem": ZRemCommand,
    "zrange": ZRangeCommand,
    "zrevrange": ZRevRangeCommand,
    "lpush": LPushCommand,
    "rpush": RPushCommand,
    "lpop": LPopCommand,
    "rpop": RPopCommand,
    "llen": LLenCommand,
    "lrange": LRangeCommand,
}


def command_class(name):
    """Return the command class registered under ``name`` (case-insensitive)."""
    try:
        return _REGISTRY[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown command: {name}") from None


@dataclass(frozen=True)
class Command:
    """A named command together with the action that carries it out."""

    name: str
    action: Any

    def __post_init__(self):
        normalized = self.name.lower()
        expected = command_class(normalized)
        if not isinstance(self.action, expected):
            raise TypeError(
                f"Command {normalized!r} expects {expected.__name__}, "
                f"got {type(self.action).__name__}"
            )
        object.__setattr__(self, "name", normalized)

    def execute(self, store):
        """Run the wrapped action against ``store`` and return its reply."""
        return self.action.execute(store)


def execute(command, store):
    """Run ``command`` (a :class:`Command` or a bare command object) against ``store``."""
    return command.execute(store)