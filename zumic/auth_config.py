"""Parsing of the server's authentication configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError, ConfigParseError


@dataclass
class UserConfig:
    """One ``user`` line of the configuration."""

    username: str
    enabled: bool = False
    nopass: bool = False
    password: str | None = None
    keys: list[str] = field(default_factory=list)
    permissions: list[str] = field(default_factory=list)


@dataclass
class ServerConfig:
    """Authentication settings: a server password, a pepper and users."""

    requirepass: str | None = None
    auth_pepper: str | None = None
    users: list[UserConfig] = field(default_factory=list)

    @classmethod
    def load(cls, path):
        try:
            content = Path(path).read_text()
        except OSError as exc:
            raise ConfigError(f"Config file error: {exc}") from exc
        return cls.parse(content)

    @classmethod
    def parse(cls, content):
        config = cls()
        for raw in content.splitlines():
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("requirepass "):
                config.requirepass = line[len("requirepass "):].strip()
            elif line.startswith("auth-pepper "):
                config.auth_pepper = line[len("auth-pepper "):].strip()
            elif line.startswith("user "):
                config.users.append(_parse_user(line[len("user "):]))
        return config


def _parse_user(line):
    parts = line.split()
    if len(parts) < 3:
        raise ConfigParseError("Invalid user format")

    user = UserConfig(username=parts[0])
    for part in parts[1:]:
        if part == "on":
            user.enabled = True
        elif part == "off":
            user.enabled = False
        elif part == "nopass":
            user.nopass = True
        elif part.startswith("~"):
            user.keys.append(part)
        elif part.startswith(">"):
            user.password = part[1:]
        elif part.startswith(("+", "-")):
            user.permissions.append(part)
        else:
            raise ConfigParseError(f"Unknown user directive: {part}")
    return user