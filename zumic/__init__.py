"""In-memory key-value store core: commands over a mapping, ACL users, configuration and settings."""

__version__ = "0.1.0"