"""Exception types raised by the access-control, configuration and storage layers."""


class AclError(Exception):
    """Base class for access-control failures."""

    message = "ACL error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class UserExistsError(AclError):
    """The user is already registered."""

    message = "User already exists"


class UserNotFoundError(AclError):
    """No user with the given name is registered."""

    message = "User not found"


class PermissionDeniedError(AclError):
    """The operation or rule is not permitted."""

    message = "Permission denied"


class AuthFailedError(AclError):
    """The supplied credentials were rejected."""

    message = "Authentication failed"


class InvalidAclRuleError(AclError):
    """An ACL rule could not be understood."""

    message = "Invalid ACL rule"


class ChannelDeniedError(AclError):
    """Access to a channel was refused."""

    message = "Channel access denied"


class ConfigError(Exception):
    """A configuration file could not be read or understood."""


class ConfigParseError(ConfigError):
    """A configuration file contains an invalid line."""

    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"Parse error: {detail}")


class StoreError(Exception):
    """Base class for storage command failures."""


class InvalidTypeError(StoreError):
    """The stored value has a type the command cannot work on."""

    def __init__(self, message="Invalid type"):
        super().__init__(message)


class WrongTypeError(StoreError):
    """A value of an unexpected type was met while building a reply."""

    def __init__(self, message):
        super().__init__(message)