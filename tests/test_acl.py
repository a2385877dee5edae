import pytest

from zumic.acl import Acl, AclUser, key_matches
from zumic.errors import AuthFailedError, PermissionDeniedError, UserNotFoundError

password = "password"
USERNAME = "test_user"


def make_user(*rules):
    acl = Acl()
    acl.acl_setuser(USERNAME, list(rules))
    return acl, acl.acl_getuser(USERNAME)


def test_acl_setuser():
    _, user = make_user("on", f">{password}", "+@admin", "~key1", "&channel1")
    assert user.username == USERNAME
    assert user.password_hash == password
    assert "+@admin" in user.permissions
    assert "key1" in user.keys
    assert "channel1" in user.channels


def test_authenticate_user_not_found():
    acl = Acl()
    assert acl.acl_getuser("non_existent_user") is None


def test_authenticate_success():
    _, user = make_user("on", f">{password}", "+@admin")
    assert user.authenticate(password) is None


def test_authenticate_failure():
    _, user = make_user("on", f">{password}", "+@admin")
    with pytest.raises(AuthFailedError):
        user.authenticate("secret")


def test_authenticate_disabled_user_fails():
    _, user = make_user("off", f">{password}")
    with pytest.raises(AuthFailedError):
        user.authenticate(password)


def test_check_permission_success():
    _, user = make_user("on", f">{password}", "+@admin", "+@write|set")
    assert user.check_permission("write", "set")


def test_check_permission_failure():
    _, user = make_user("on", f">{password}", "+@admin")
    assert not user.check_permission("write", "set")


def test_check_permission_category_grants_all_commands():
    _, user = make_user("+@write")
    assert user.check_permission("write", "anything")


def test_check_channel_access():
    _, user = make_user("on", f">{password}", "&channel1")
    assert user.check_channel("channel1")


def test_check_channel_denied():
    _, user = make_user("on", f">{password}", "&channel1")
    assert not user.check_channel("channel2")


def test_check_key_access():
    _, user = make_user("on", f">{password}", "~key1")
    assert user.check_key("key1")


def test_check_key_denied():
    _, user = make_user("on", f">{password}", "~key1")
    assert not user.check_key("key2")
    assert not user.check_key("key1_extra")
    assert not user.check_key("key")


def test_check_key_pattern():
    _, user = make_user("~data:*")
    assert user.check_key("data:123")
    assert not user.check_key("info:123")


def test_disabled_user_has_no_access():
    _, user = make_user("off")
    assert not user.check_key("anything")
    assert not user.check_permission("write", "set")
    assert not user.check_channel("*")


def test_new_user_defaults():
    user = AclUser("fresh")
    assert user.enabled
    assert user.permissions == {"+@all"}
    assert user.keys == {"*"}
    assert user.check_key("anything")


def test_acl_deluser():
    acl, _ = make_user("on", f">{password}", "+@admin")
    acl.acl_deluser(USERNAME)
    assert acl.acl_getuser(USERNAME) is None


def test_acl_deluser_not_found():
    acl = Acl()
    with pytest.raises(UserNotFoundError):
        acl.acl_deluser("non_existent_user")


def test_unknown_rule_raises():
    acl = Acl()
    with pytest.raises(PermissionDeniedError):
        acl.acl_setuser(USERNAME, ["bogus"])


def test_acl_users_lists_names():
    acl = Acl()
    acl.acl_setuser("a", ["on"])
    acl.acl_setuser("b", ["off"])
    assert sorted(acl.acl_users()) == ["a", "b"]


def test_getuser_returns_copy():
    acl, user = make_user("~key1")
    user.keys.add("other")
    assert "other" not in acl.acl_getuser(USERNAME).keys


@pytest.mark.parametrize(
    ("pattern", "key", "expected"),
    [
        ("data:*", "data:123", True),
        ("data:*", "info:123", False),
        ("k?y", "key", True),
        ("k?y", "ky", False),
        ("*1", "key1", True),
        ("a*b*c", "axxbyyc", True),
        ("a*b*c", "axxbyy", False),
        ("key*", "key", True),
    ],
)
def test_key_matches(pattern, key, expected):
    assert key_matches(pattern, key) is expected