"""Helpers for locating binaries and paths and for checking process results."""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P", str, os.PathLike)


class SkipStep(Exception):
    """Raised when a step cannot run in this environment and should be skipped."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ProcessFailed(Exception):
    """Raised when a child process exits unsuccessfully."""

    def __init__(self, returncode: int) -> None:
        super().__init__(f"A process failed with exit status {returncode}")
        self.returncode = returncode


def check_returncode(returncode: int, codes: Iterable[int] = ()) -> None:
    """Raise ProcessFailed unless the code is zero or one of the accepted codes.

    A negative code means the process was killed by a signal and is
    treated as -1 when compared with the accepted codes.
    """
    if returncode == 0:
        return
    code = -1 if returncode < 0 else returncode
    if code in set(codes):
        return
    raise ProcessFailed(returncode)


def if_exists(path: P) -> P | None:
    """Return the path if it exists, otherwise None."""
    if Path(path).exists():
        log.debug("Path %r exists", str(path))
        return path
    log.debug("Path %r doesn't exist", str(path))
    return None


def is_descendant_of(path: str | os.PathLike, ancestor: str | os.PathLike) -> bool:
    """Tell whether the leading components of both paths agree."""
    return all(a == b for a, b in zip(Path(path).parts, Path(ancestor).parts))


def require_path(path: P) -> P:
    """Return the path if it exists, otherwise raise SkipStep."""
    if Path(path).exists():
        log.debug("Path %r exists", str(path))
        return path
    raise SkipStep(f'Path "{path}" doesn\'t exist')


def which(binary_name: str) -> Path | None:
    """Locate a binary in PATH."""
    found = shutil.which(binary_name)
    if found is None:
        log.debug("Cannot find %r", binary_name)
        return None
    log.debug("Detected %r as %r", found, binary_name)
    return Path(found)


def sudo() -> Path | None:
    """Find the first available privilege escalation tool."""
    for name in ("doas", "sudo", "gsudo", "pkexec"):
        found = which(name)
        if found is not None:
            return found
    return None


def editor() -> list[str]:
    """Return the user's editor command split into words."""
    default = "notepad" if sys.platform.startswith("win") else "vi"
    return os.environ.get("EDITOR", default).split()


def require(binary_name: str) -> Path:
    """Locate a binary in PATH or raise SkipStep."""
    found = which(binary_name)
    if found is None:
        raise SkipStep(f'Cannot find "{binary_name}" in PATH')
    return found


def require_option(option: T | None, cause: str) -> T:
    """Return the value unless it is None, in which case raise SkipStep."""
    if option is None:
        raise SkipStep(cause)
    return option