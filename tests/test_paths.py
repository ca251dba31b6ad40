import os

import pytest

from pipex.errors import PipexError
from pipex.paths import (
    find_path,
    getenv,
    is_directory,
    resolve_command,
    search_paths,
)


def _make_file(path, mode):
    path.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(path, mode)
    return path


def test_getenv_from_entries():
    envp = ["HOME=/home/someone", "PATH=/bin:/usr/bin"]
    assert getenv(envp, "PATH") == "/bin:/usr/bin"


def test_getenv_requires_exact_name():
    assert getenv(["PATHX=/nowhere"], "PATH") is None


def test_getenv_missing():
    assert getenv([], "PATH") is None


def test_getenv_from_mapping():
    assert getenv({"PATH": "/bin"}, "PATH") == "/bin"


def test_getenv_keeps_later_equals_signs():
    assert getenv(["OPTS=a=b"], "OPTS") == "a=b"


def test_is_directory(tmp_path):
    file_path = _make_file(tmp_path / "f", 0o644)
    assert is_directory(str(tmp_path)) is True
    assert is_directory(str(file_path)) is False
    assert is_directory(str(tmp_path / "missing")) is False


def test_search_paths_finds_first_executable(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    _make_file(first / "tool", 0o644)
    _make_file(second / "tool", 0o755)
    assert search_paths([str(first), str(second)], "tool") == f"{second}/tool"


def test_search_paths_none_when_absent(tmp_path):
    assert search_paths([str(tmp_path)], "tool") is None


def test_find_path_searches_path(tmp_path):
    _make_file(tmp_path / "tool", 0o755)
    envp = [f"PATH=::{tmp_path}:"]
    assert find_path("tool", envp) == f"{tmp_path}/tool"


@pytest.mark.parametrize("envp", [[], ["PATH="]])
def test_find_path_without_path_fails(envp):
    with pytest.raises(PipexError) as info:
        find_path("tool", envp)
    assert info.value.exit_code == 127
    assert info.value.message == "tool"


def test_find_path_explicit_missing(tmp_path):
    target = str(tmp_path / "missing")
    with pytest.raises(PipexError) as info:
        find_path(target, [])
    assert info.value.exit_code == 127


def test_find_path_explicit_absolute_directory(tmp_path):
    with pytest.raises(PipexError) as info:
        find_path(str(tmp_path), [])
    assert info.value.exit_code == 126


def test_find_path_explicit_relative_directory(tmp_path, monkeypatch):
    (tmp_path / "sub" / "dir").mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    with pytest.raises(PipexError) as info:
        find_path("sub/dir", [])
    assert info.value.exit_code == 127


def test_find_path_explicit_not_executable(tmp_path):
    target = _make_file(tmp_path / "script", 0o644)
    with pytest.raises(PipexError) as info:
        find_path(str(target), [])
    assert info.value.exit_code == 126


def test_find_path_explicit_executable(tmp_path):
    target = str(_make_file(tmp_path / "script", 0o755))
    assert find_path(target, []) == target


def test_resolve_command_explicit_executable(tmp_path):
    target = str(_make_file(tmp_path / "script", 0o755))
    assert resolve_command(target, []) == target


def test_resolve_command_explicit_not_executable(tmp_path):
    target = _make_file(tmp_path / "script", 0o644)
    with pytest.raises(PipexError) as info:
        resolve_command(str(target), [])
    assert info.value.exit_code == 126
    assert info.value.message == str(target)


def test_resolve_command_explicit_missing(tmp_path):
    with pytest.raises(PipexError) as info:
        resolve_command(str(tmp_path / "missing"), [])
    assert info.value.exit_code == 127


def test_resolve_command_not_found_in_path(tmp_path):
    with pytest.raises(PipexError) as info:
        resolve_command("tool", [f"PATH={tmp_path}"])
    assert info.value.exit_code == 127
    assert info.value.message is None
    assert info.value.describe() == "command not found\n"


def test_resolve_command_found_directory_in_path(tmp_path):
    (tmp_path / "tool").mkdir()
    with pytest.raises(PipexError) as info:
        resolve_command("tool", {"PATH": str(tmp_path)})
    assert info.value.exit_code == 127
    assert info.value.message == "tool"


def test_resolve_command_found_in_path(tmp_path):
    _make_file(tmp_path / "tool", 0o755)
    assert resolve_command("tool", {"PATH": str(tmp_path)}) == f"{tmp_path}/tool"