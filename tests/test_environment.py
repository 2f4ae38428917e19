import pytest

from minishell.environment import Environment, Shell, Variable


def _env():
    return Environment.from_strings(["HOME=/home/user", "FLAG", "EMPTY="])


def test_from_strings_parses_values():
    env = _env()
    assert env.get("HOME") == "/home/user"
    assert env.get("FLAG") is None
    assert env.get("EMPTY") == ""
    assert [var.key for var in env] == ["HOME", "FLAG", "EMPTY"]


def test_find_missing_returns_none():
    assert _env().find("NOPE") is None
    assert _env().get("NOPE") is None


def test_find_matches_prefix():
    env = Environment([("PATH", "/bin")])
    assert env.find("PA") == Variable("PATH", "/bin")


def test_change_existing_and_missing():
    env = _env()
    assert env.change("HOME", "/tmp").value == "/tmp"
    assert env.get("HOME") == "/tmp"
    assert env.change("MISSING", "x") is None
    assert len(env) == 3


def test_add_new_goes_to_end():
    env = _env()
    env.add("NEW", "v")
    assert [var.key for var in env][-1] == "NEW"
    assert env.get("NEW") == "v"


def test_add_existing_replaces():
    env = _env()
    env.add("HOME", "/root")
    assert env.get("HOME") == "/root"
    assert len(env) == 3


def test_append_existing_and_new():
    env = _env()
    env.append("HOME", "/sub")
    assert env.get("HOME") == "/home/user/sub"
    env.append("FLAG", "on")
    assert env.get("FLAG") == "on"
    env.append("OTHER", "val")
    assert env.get("OTHER") == "val"


def test_erase_removes_only_match():
    env = _env()
    env.erase("FLAG")
    assert [var.key for var in env] == ["HOME", "EMPTY"]
    env.erase("HOME")
    assert [var.key for var in env] == ["EMPTY"]
    env.erase("NOPE")
    assert len(env) == 1


def test_add_without_name_rejected():
    with pytest.raises(TypeError):
        Environment().add(None, "x")


def test_shell_holds_environment():
    shell = Shell(env=_env(), status=2)
    assert shell.env.get("HOME") == "/home/user"
    assert shell.status == 2
    assert shell.finished is False