import pytest

from minishell.environment import (
    EnvVar,
    Environment,
    InvalidIdentifier,
    load_path_from_environment_file,
    load_path_from_paths_file,
    validate_name,
)


@pytest.fixture
def env():
    return Environment.from_mapping({"HOME": "/home/user", "PATH": "/bin", "_": "/usr/bin/env"})


def test_find_existing_and_missing(env):
    assert env.find("HOME") == "/home/user"
    assert env.find("NOPE") is None


def test_find_declared_without_value():
    env = Environment([EnvVar("FOO")])
    assert "FOO" in env
    assert env.find("FOO") is None


def test_update_only_changes_existing(env):
    assert env.update("HOME", "/tmp") is True
    assert env.find("HOME") == "/tmp"
    assert env.update("NEW", "x") is False
    assert "NEW" not in env


def test_set_creates_and_replaces(env):
    env.set("NEW", "1")
    env.set("NEW", "2")
    assert env.find("NEW") == "2"
    assert [var.name for var in env].count("NEW") == 1
    assert list(env)[-1].name == "NEW"


def test_set_rejects_invalid_name(env):
    with pytest.raises(InvalidIdentifier):
        env.set("1ABC", "x")


def test_remove(env):
    assert env.remove("HOME") is True
    assert "HOME" not in env
    assert env.remove("HOME") is False


def test_remove_protects_underscore(env):
    assert env.remove("_") is False
    assert env.find("_") == "/usr/bin/env"


@pytest.mark.parametrize("word, expected", [("FOO", 3), ("FOO=bar", 3), ("_x1=", 3), ("a=b=c", 1)])
def test_validate_name_returns_name_length(word, expected):
    assert validate_name(word) == expected


@pytest.mark.parametrize("word", ["=x", "1A", "A-B", "", "a b"])
def test_validate_name_rejects(word):
    with pytest.raises(InvalidIdentifier) as info:
        validate_name(word)
    assert info.value.word == word
    assert "not a valid identifier" in str(info.value)


def test_sorted_copy_is_sorted_and_independent(env):
    env.set("ALPHA", "a")
    copy = env.sorted_copy()
    keys = [var.sort_key for var in copy]
    assert keys == sorted(keys)
    copy[0].value = "changed"
    assert "changed" not in [var.value for var in env]


def test_export_lines_format():
    env = Environment.from_mapping({"B": 'say "$x"', "A": "", "_": "last"})
    env.set("C", None)
    assert env.export_lines() == [
        'declare -x A=""',
        'declare -x B="say \\"\\$x\\""',
        "declare -x C",
    ]


def test_env_lines_skip_valueless():
    env = Environment.from_mapping({"A": "1", "B": None, "C": ""})
    assert env.env_lines() == ["A=1", "C="]


def test_environment_file_fills_missing_path(tmp_path):
    source = tmp_path / "environment"
    source.write_text('LANG="C"\nPATH="/usr/bin:/bin"\n')
    env = Environment.from_mapping({"HOME": "/h"})
    assert load_path_from_environment_file(env, source) == "/usr/bin:/bin"
    assert env.find("PATH") == "/usr/bin:/bin"


def test_environment_file_keeps_existing_path(tmp_path):
    source = tmp_path / "environment"
    source.write_text('PATH="/other"\n')
    env = Environment.from_mapping({"PATH": "/mine"})
    assert load_path_from_environment_file(env, source) == "/mine"


def test_environment_file_replaces_empty_path(tmp_path):
    source = tmp_path / "environment"
    source.write_text('PATH="/usr/bin"\n')
    env = Environment.from_mapping({"PATH": ""})
    load_path_from_environment_file(env, source)
    assert env.find("PATH") == "/usr/bin"
    assert len(env) == 1


def test_environment_file_missing_changes_nothing(tmp_path):
    env = Environment.from_mapping({"HOME": "/h"})
    assert load_path_from_environment_file(env, tmp_path / "absent") is None
    assert "PATH" not in env


def test_paths_file_joins_lines(tmp_path):
    source = tmp_path / "paths"
    source.write_text("/usr/bin\n/bin\n")
    env = Environment()
    result = load_path_from_paths_file(env, source)
    assert sorted(result.split(":")) == ["/bin", "/usr/bin"]
    assert env.find("PATH") == result


def test_paths_file_keeps_existing(tmp_path):
    source = tmp_path / "paths"
    source.write_text("/usr/bin\n")
    env = Environment.from_mapping({"PATH": "/mine"})
    assert load_path_from_paths_file(env, source) == "/mine"


def test_paths_file_missing_gives_empty_path(tmp_path):
    env = Environment()
    assert load_path_from_paths_file(env, tmp_path / "absent") == ""
    assert "PATH" in env


def test_envvar_str():
    assert str(EnvVar("A", "1")) == "A=1"
    assert str(EnvVar("A")) == "A"