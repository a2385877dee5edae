"""Users, their rules, and checks against permissions, channels and keys."""

from __future__ import annotations

import copy
import threading
from dataclasses import dataclass, field

from .errors import AuthFailedError, PermissionDeniedError, UserNotFoundError


@dataclass
class AclUser:
    """A user with a password hash and the rules that govern its access."""

    username: str
    password_hash: str | None = None
    enabled: bool = True
    permissions: set[str] = field(default_factory=lambda: {"+@all"})
    channels: set[str] = field(default_factory=lambda: {"*"})
    keys: set[str] = field(default_factory=lambda: {"*"})

    def authenticate(self, password_hash):
        """Raise AuthFailedError unless the user is enabled and the hash matches."""
        if not self.enabled or self.password_hash is None or self.password_hash != password_hash:
            raise AuthFailedError()

    def check_permission(self, category, command):
        if not self.enabled:
            return False
        return (
            "*" in self.permissions
            or f"+@{category}" in self.permissions
            or f"+@{category}|{command}" in self.permissions
        )

    def check_channel(self, channel):
        return self.enabled and channel in self.channels

    def check_key(self, key):
        if not self.enabled:
            return False
        if "*" in self.keys:
            return True
        return any(pattern == key or key_matches(pattern, key) for pattern in self.keys)


def key_matches(pattern, key):
    """Match ``key`` against a glob pattern supporting ``*`` and ``?``."""
    p = k = 0
    backtrack = None
    while k < len(key):
        if p < len(pattern):
            pc = pattern[p]
            if pc == "*":
                backtrack = (p + 1, k)
                p += 1
                continue
            if pc == "?" or pc == key[k]:
                p += 1
                k += 1
                continue
        if backtrack is not None and backtrack[1] < len(key):
            bp, bk = backtrack
            p, k = bp, bk + 1
            backtrack = (bp, bk + 1)
            continue
        return False
    while p < len(pattern) and pattern[p] == "*":
        p += 1
    return p == len(pattern)


class Acl:
    """A thread-safe registry of ACL users."""

    def __init__(self):
        self._users: dict[str, AclUser] = {}
        self._lock = threading.RLock()

    def acl_setuser(self, username, rules):
        """Create the user if needed and apply each rule in order."""
        with self._lock:
            user = self._users.setdefault(username, AclUser(username))
            for rule in rules:
                self._apply_rule(user, rule)

    @staticmethod
    def _apply_rule(user, rule):
        if rule == "on":
            user.enabled = True
        elif rule == "off":
            user.enabled = False
        elif rule.startswith(">"):
            user.password_hash = rule[1:]
        elif rule.startswith(("+", "-")):
            user.permissions.add(rule)
        elif rule.startswith("~"):
            if "*" in user.keys:
                user.keys.clear()
            user.keys.add(rule[1:])
        elif rule.startswith("&"):
            user.channels.add(rule[1:])
        else:
            raise PermissionDeniedError()

    def acl_getuser(self, username):
        """Return a copy of the user, or None if it is not registered."""
        with self._lock:
            user = self._users.get(username)
            return copy.deepcopy(user) if user is not None else None

    def acl_deluser(self, username):
        with self._lock:
            if self._users.pop(username, None) is None:
                raise UserNotFoundError()

    def acl_users(self):
        with self._lock:
            return list(self._users)