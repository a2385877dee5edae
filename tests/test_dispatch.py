import pytest

from zumic.basic import GetCommand, SetCommand
from zumic.dispatch import Command, command_class, execute
from zumic.errors import InvalidTypeError
from zumic.integers import DecrByCommand, IncrCommand
from zumic.lists import LRangeCommand, RPushCommand


def test_set_then_get_through_command():
    store = {}
    Command("set", SetCommand(key="k", value=b"value")).execute(store)
    assert Command("get", GetCommand(key="k")).execute(store) == b"value"


def test_execute_function_accepts_wrapped_and_bare_commands():
    store = {}
    assert execute(Command("incr", IncrCommand(key="c")), store) == 1
    assert execute(IncrCommand(key="c"), store) == 2


def test_name_is_case_insensitive_and_normalized():
    cmd = Command("INCR", IncrCommand(key="c"))
    assert cmd.name == "incr"
    assert command_class("LRange") is LRangeCommand


def test_decrbyfloat_is_served_by_integer_decrement():
    assert command_class("decrbyfloat") is DecrByCommand
    store = {}
    assert Command("decrbyfloat", DecrByCommand(key="n", decrement=3)).execute(store) == -3


def test_unknown_command_name_raises():
    with pytest.raises(ValueError):
        command_class("nosuchcommand")
    with pytest.raises(ValueError):
        Command("nosuchcommand", IncrCommand(key="c"))


def test_mismatched_action_raises_type_error():
    with pytest.raises(TypeError):
        Command("get", SetCommand(key="k", value=b"v"))


def test_errors_from_action_propagate():
    store = {b"c": b"text"}
    with pytest.raises(InvalidTypeError):
        Command("incr", IncrCommand(key="c")).execute(store)


def test_list_commands_dispatch_in_order():
    store = {}
    for item in ("x", "y", "z"):
        Command("rpush", RPushCommand(key="l", value=item)).execute(store)
    result = Command("lrange", LRangeCommand(key="l", start=0, stop=-1)).execute(store)
    assert result == [b"x", b"y", b"z"]


@pytest.mark.parametrize(
    "name",
    ["set", "get", "del", "exists", "setnx", "mset", "mget", "rename",
     "renamenx", "flushdb", "strlen", "append", "getrange", "incr", "incrby",
     "decr", "decrby", "incrbyfloat", "decrbyfloat", "setfloat", "hset",
     "hget", "hdel", "hgetall", "sadd", "srem", "sismember", "smembers",
     "scard", "zadd", "zscore", "zcard", "zrem", "zrange", "zrevrange",
     "lpush", "rpush", "lpop", "rpop", "llen", "lrange"],
)
def test_every_command_name_resolves(name):
    cls = command_class(name)
    assert command_class(name.upper()) is cls
    assert callable(getattr(cls, "execute"))
    assert cls.__name__.endswith("Command")