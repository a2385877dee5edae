# zumic

The core of an in-memory key-value store: commands that work on typed
values (strings, integers, floats, hashes, lists, sets and sorted sets)
held in an ordinary Python mapping, access control lists for users,
parsing of the authentication configuration, and runtime settings read
from the environment.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Commands and the store

A store is any mutable mapping, usually a plain `dict`. Keys are `bytes`
(command fields take `str` and encode it as UTF-8). Values are kept as
Python types:

| Kind        | Stored as                                   |
|-------------|---------------------------------------------|
| string      | `bytes`                                     |
| integer     | `int`                                       |
| float       | `float`                                     |
| hash        | `dict` of `bytes` field to `bytes` value    |
| list        | `list` of `bytes`                           |
| set         | `set` of `bytes`                            |
| sorted set  | `zumic.zsets.ZSet`                          |

Each command is a dataclass; `execute(store)` runs it and returns the
reply. A missing key generally reads as `None`.

```python
from zumic.basic import SetCommand, GetCommand, MGetCommand
from zumic.integers import IncrCommand
from zumic.zsets import ZAddCommand, ZRangeCommand

store = {}
SetCommand("greeting", b"hello").execute(store)
GetCommand("greeting").execute(store)              # b"hello"
MGetCommand(["greeting", "nope"]).execute(store)   # [b"hello", b""]
IncrCommand("counter").execute(store)              # 1

ZAddCommand("board", "a", 2.0).execute(store)      # 1
ZAddCommand("board", "b", 1.0).execute(store)      # 1
ZRangeCommand("board", 0, -1).execute(store)       # [b"b", b"a"]
```

The commands, by module:

- `zumic.basic`: `SetCommand`, `GetCommand`, `DelCommand`, `ExistsCommand`,
  `SetNxCommand`, `MSetCommand`, `MGetCommand`, `RenameCommand` and
  `RenameNxCommand` (fields `source` and `target`; a missing source raises
  `StoreError`), `FlushDbCommand` (replies `b"OK"`)
- `zumic.strings`: `StrLenCommand`, `AppendCommand`, `GetRangeCommand`
  (`end` is exclusive)
- `zumic.integers`: `IncrCommand`, `IncrByCommand`, `DecrCommand`,
  `DecrByCommand`; a missing key counts as 0
- `zumic.floats`: `IncrByFloatCommand`, `DecrByFloatCommand`,
  `SetFloatCommand`; a missing key counts as 0.0
- `zumic.hashes`: `HSetCommand`, `HGetCommand`, `HDelCommand`,
  `HGetAllCommand` (replies entries of the form `b"field: value"`)
- `zumic.lists`: `LPushCommand`, `RPushCommand`, `LPopCommand`,
  `RPopCommand`, `LLenCommand`, `LRangeCommand` (inclusive, negative
  indices count from the end)
- `zumic.sets`: `SAddCommand`, `SRemCommand`, `SIsMemberCommand`,
  `SMembersCommand`, `SCardCommand`
- `zumic.zsets`: `ZAddCommand`, `ZRemCommand`, `ZScoreCommand`,
  `ZCardCommand`, `ZRangeCommand`, `ZRevRangeCommand`; `ZSet` keeps
  members ordered by score, then by member

Running a command against a value of the wrong kind raises
`zumic.errors.InvalidTypeError`; `MGetCommand` meeting a non-string value
raises `WrongTypeError`. Both derive from `zumic.errors.StoreError`.

### Dispatch by name

`zumic.dispatch.command_class(name)` returns the command class for a
command name such as `"zadd"` (case-insensitive) and raises `ValueError`
for an unknown one. Note that `"decrbyfloat"` maps to the integer
`DecrByCommand`.

`Command(name, action)` pairs a name with a command object, checking that
the object is of the class registered for that name (`TypeError`
otherwise); its `execute(store)` runs the action. The module-level
`execute(command, store)` runs either a `Command` or a bare command object.

```python
from zumic.dispatch import Command, command_class, execute

cmd = Command("INCRBY", command_class("incrby")("hits", 5))
execute(cmd, store)   # 5
```

## Access control

`zumic.acl.Acl` keeps a thread-safe table of users. Users are created or
changed with rule strings:

| Rule          | Effect                                                      |
|---------------|-------------------------------------------------------------|
| `on`/`off`    | enable or disable the user                                  |
| `>value`      | set the stored password hash                                |
| `+...`/`-...` | add a permission entry such as `+@admin` or `+@write\|set`  |
| `~pattern`    | grant access to keys matching a glob (`*` and `?`)          |
| `&channel`    | grant access to a channel                                   |

Any other rule raises `zumic.errors.PermissionDeniedError`.

```python
from zumic.acl import Acl

password = "password"
acl = Acl()
acl.acl_setuser("alice", ["on", f">{password}", "+@write|set", "~data:*"])

user = acl.acl_getuser("alice")        # a copy, or None if absent
user.authenticate(password)            # raises AuthFailedError on mismatch
user.check_permission("write", "set")  # True
user.check_key("data:42")              # True
user.check_key("info:42")              # False

acl.acl_users()                        # ["alice"]
acl.acl_deluser("alice")               # raises UserNotFoundError if absent
```

A new user starts enabled with `+@all`, channel `*` and key `*`; the
first `~pattern` rule replaces the `*` key grant with that pattern.
`check_permission` accepts `*`, `+@category` or `+@category|command`.
`authenticate` compares the stored value as given; it does no hashing.
The glob matcher is available on its own as `zumic.acl.key_matches`.

## Authentication configuration

`zumic.auth_config.ServerConfig` reads a line-based format with
`requirepass`, `auth-pepper` and `user` lines. Blank lines and lines
starting with `#` are skipped; other lines are ignored.

```python
from zumic.auth_config import ServerConfig

password = "password"
config = ServerConfig.parse(
    f"requirepass {password}\n"
    "user default on nopass ~* +@all\n"
    f"user alice on >{password} ~data:* +get +set\n"
)
config.requirepass       # "password"
config.users[1].keys     # ["~data:*"]
```

`ServerConfig.load(path)` reads the same format from a file and raises
`zumic.errors.ConfigError` if the file cannot be read. A `user` line with
fewer than three words, or an unknown user directive, raises
`zumic.errors.ConfigParseError`.

## Settings

`zumic.settings.Settings.load(environ=None)` reads `ZUMIC_`-prefixed
variables from `environ` (or `os.environ`), lower-casing the rest of each
name into a field. `ZUMIC_LISTEN_ADD` must be set; `ZUMIC_MAX_CONNECTIONS`
defaults to 100 and must be a non-negative integer; `ZUMIC_AOF_PATH` is
optional. Problems raise `ConfigError`. `StorageType` and `StorageConfig`
describe the storage kind, of which there is only `StorageType.MEMORY`.

## What this package does not do

There is no network server, wire protocol, command-line program or
persistence: commands run only against a mapping you pass in, and the
settings and ACL tables are not wired to anything. Password hashing and a
manager that turns a `ServerConfig` into ACL users are not included.