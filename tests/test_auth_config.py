import pytest

from zumic.auth_config import ServerConfig
from zumic.errors import ConfigError, ConfigParseError

password = "password"


def test_parse_requirepass():
    config = ServerConfig.parse(f"requirepass {password}")
    assert config.requirepass == password
    assert config.users == []


def test_parse_single_user():
    config = ServerConfig.parse("user default on nopass ~* +@all")
    assert len(config.users) == 1
    user = config.users[0]
    assert user.username == "default"
    assert user.enabled
    assert user.nopass
    assert "~*" in user.keys
    assert "+@all" in user.permissions


def test_parse_multiple_users():
    content = (
        f"    requirepass {password}\n"
        "    user default on nopass ~* +@all\n"
        f"    user alice on >{password} ~data:* +get +set"
    )
    config = ServerConfig.parse(content)
    assert config.requirepass == password
    assert len(config.users) == 2
    alice = config.users[1]
    assert alice.username == "alice"
    assert alice.enabled
    assert alice.password == password
    assert "~data:*" in alice.keys
    assert "+get" in alice.permissions
    assert "+set" in alice.permissions


def test_parse_invalid_user_format():
    with pytest.raises(ConfigParseError):
        ServerConfig.parse("user default")


def test_unknown_directive():
    with pytest.raises(ConfigParseError) as info:
        ServerConfig.parse("user default on unknown_directive")
    assert "unknown_directive" in str(info.value)


def test_comments_blank_lines_and_pepper():
    content = "# a comment\n\nauth-pepper  pepper1  \nuser bob off ~k -@admin\n"
    config = ServerConfig.parse(content)
    assert config.auth_pepper == "pepper1"
    assert config.requirepass is None
    bob = config.users[0]
    assert not bob.enabled
    assert bob.permissions == ["-@admin"]


def test_load_reads_file(tmp_path):
    path = tmp_path / "zumic.conf"
    path.write_text("user default on nopass ~* +@all\n")
    config = ServerConfig.load(path)
    assert [u.username for u in config.users] == ["default"]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError):
        ServerConfig.load(tmp_path / "absent.conf")