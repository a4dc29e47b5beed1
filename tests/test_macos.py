from pathlib import Path

import pytest

from topgrade.macos import system_update_available, update_available_from
from topgrade.utils import ProcessFailed


def _fake(directory: Path, name: str, body: str) -> Path:
    path = directory / name
    path.write_text("#!/bin/sh\n" + body + "\n")
    path.chmod(0o755)
    return path


def test_nothing_new():
    assert update_available_from("Software Update Tool\n\nNo new software available.\n") is False


def test_update_present():
    assert update_available_from("Software Update found the following new or updated software:\n") is True


def test_system_update_none(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    _fake(tmp_path, "softwareupdate", "printf 'No new software available.\\n' >&2")
    assert system_update_available() is False


def test_system_update_found(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    _fake(tmp_path, "softwareupdate", "printf 'Finding available software\\n' >&2")
    assert system_update_available() is True


def test_system_update_failure(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    _fake(tmp_path, "softwareupdate", "exit 2")
    with pytest.raises(ProcessFailed) as info:
        system_update_available()
    assert info.value.returncode == 2