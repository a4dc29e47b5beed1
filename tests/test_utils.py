import os
from pathlib import Path

import pytest

from topgrade.utils import (
    ProcessFailed,
    SkipStep,
    check_returncode,
    editor,
    if_exists,
    is_descendant_of,
    require,
    require_option,
    require_path,
    sudo,
    which,
)


def _make_executable(directory: Path, name: str) -> Path:
    target = directory / name
    target.write_text("#!/bin/sh\nexit 0\n")
    target.chmod(0o755)
    return target


def test_check_returncode_success():
    assert check_returncode(0, ()) is None


def test_check_returncode_failure_carries_code():
    with pytest.raises(ProcessFailed) as info:
        check_returncode(3, ())
    assert info.value.returncode == 3


def test_check_returncode_accepted_code():
    assert check_returncode(80, [80]) is None


def test_check_returncode_other_code_still_fails():
    with pytest.raises(ProcessFailed):
        check_returncode(2, [5])


def test_check_returncode_signal_maps_to_minus_one():
    assert check_returncode(-9, [-1]) is None
    with pytest.raises(ProcessFailed):
        check_returncode(-9, [9])


def test_if_exists(tmp_path):
    assert if_exists(tmp_path) == tmp_path
    assert if_exists(tmp_path / "missing") is None


def test_is_descendant_of():
    assert is_descendant_of("/home/user/project", "/home/user")
    assert not is_descendant_of("/home/other/project", "/home/user")
    assert is_descendant_of(Path("/a/b"), Path("/a/b"))


def test_require_path(tmp_path):
    assert require_path(tmp_path) == tmp_path
    with pytest.raises(SkipStep) as info:
        require_path(tmp_path / "missing")
    assert "doesn't exist" in info.value.reason


def test_which_finds_binary(tmp_path, monkeypatch):
    tool = _make_executable(tmp_path, "mytool")
    monkeypatch.setenv("PATH", str(tmp_path))
    assert which("mytool") == tool
    assert which("nosuchtool") is None


def test_require(tmp_path, monkeypatch):
    tool = _make_executable(tmp_path, "mytool")
    monkeypatch.setenv("PATH", str(tmp_path))
    assert require("mytool") == tool
    with pytest.raises(SkipStep) as info:
        require("nosuchtool")
    assert "nosuchtool" in str(info.value)


def test_sudo_prefers_in_order(tmp_path, monkeypatch):
    _make_executable(tmp_path, "pkexec")
    expected = _make_executable(tmp_path, "sudo")
    monkeypatch.setenv("PATH", str(tmp_path))
    assert sudo() == expected


def test_sudo_none(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    assert sudo() is None


def test_editor_splits_words(monkeypatch):
    monkeypatch.setenv("EDITOR", "code  --wait")
    assert editor() == ["code", "--wait"]


def test_editor_default(monkeypatch):
    monkeypatch.delenv("EDITOR", raising=False)
    result = editor()
    assert result == (["notepad"] if os.name == "nt" else ["vi"])


def test_require_option():
    assert require_option(5, "absent") == 5
    with pytest.raises(SkipStep) as info:
        require_option(None, "absent")
    assert info.value.reason == "absent"