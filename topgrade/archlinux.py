"""Arch Linux helpers: the pacman search path and leftover backup config files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

_BACKUP_SUFFIXES = (".pacnew", ".pacsave")


def execution_path(path: str | None = None) -> str:
    """Return the PATH used for AUR helpers, with /usr/bin searched first.

    Without an explicit value the current PATH environment variable is used.
    """
    if path is None:
        path = os.environ["PATH"]
    return f"/usr/bin:{path}"


def _is_backup(path: Path) -> bool:
    return path.suffix in _BACKUP_SUFFIXES


def find_pacnew(root: str | os.PathLike = "/etc") -> Iterator[Path]:
    """Yield every .pacnew or .pacsave entry under root, unreadable parts skipped."""
    top = Path(root)
    if _is_backup(top):
        yield top
    for dirpath, dirnames, filenames in os.walk(top):
        base = Path(dirpath)
        for name in (*dirnames, *filenames):
            candidate = base / name
            if _is_backup(candidate):
                yield candidate


def show_pacnew(root: str | os.PathLike = "/etc") -> None:
    """Print the pacman backup configuration files found under root, if any."""
    found = list(find_pacnew(root))
    if not found:
        return
    print("\nPacman backup configuration files found:")
    for path in found:
        print(path)