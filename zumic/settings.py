"""Server settings read from defaults and ``ZUMIC_``-prefixed environment variables."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass

from .errors import ConfigError

ENV_PREFIX = "ZUMIC_"

_DEFAULTS = {
    "listen_address": "127.0.0.1:6379",
    "max_connections": 100,
}


class StorageType(enum.Enum):
    MEMORY = "memory"


@dataclass
class StorageConfig:
    """Storage configuration."""

    storage_type: StorageType = StorageType.MEMORY


@dataclass
class Settings:
    listen_add: str
    aof_path: str | None = None
    max_connections: int = 100

    @classmethod
    def load(cls, environ=None):
        """Build settings from defaults overlaid with ``ZUMIC_*`` variables."""
        environ = os.environ if environ is None else environ
        values = dict(_DEFAULTS)
        for name, value in environ.items():
            if name.upper().startswith(ENV_PREFIX):
                values[name[len(ENV_PREFIX):].lower()] = value

        if "listen_add" not in values:
            raise ConfigError("missing field `listen_add`")
        if "max_connections" not in values:
            raise ConfigError("missing field `max_connections`")

        try:
            max_connections = int(values["max_connections"])
        except (TypeError, ValueError) as exc:
            raise ConfigError(
                f"invalid value for max_connections: {values['max_connections']!r}"
            ) from exc
        if max_connections < 0:
            raise ConfigError(f"invalid value for max_connections: {max_connections}")

        aof_path = values.get("aof_path")
        return cls(
            listen_add=str(values["listen_add"]),
            aof_path=None if aof_path is None else str(aof_path),
            max_connections=max_connections,
        )