"""Vagrant boxes: reading their status and choosing power commands."""

from __future__ import annotations

import enum
import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .utils import check_returncode

log = logging.getLogger(__name__)


class BoxStatus(enum.Enum):
    POWER_OFF = "poweroff"
    RUNNING = "running"
    SAVED = "saved"
    ABORTED = "aborted"

    def powered_on(self) -> bool:
        return self is BoxStatus.RUNNING

    def power_on_command(self) -> str:
        """Return the vagrant subcommand that brings a box in this state up."""
        if self in (BoxStatus.POWER_OFF, BoxStatus.ABORTED):
            return "up"
        if self is BoxStatus.SAVED:
            return "resume"
        raise ValueError("a running box needs no powering on")

    def power_off_command(self, always_suspend: bool = False) -> str:
        """Return the vagrant subcommand that returns a box to this state."""
        if always_suspend:
            return "suspend"
        if self in (BoxStatus.POWER_OFF, BoxStatus.ABORTED):
            return "halt"
        if self is BoxStatus.SAVED:
            return "suspend"
        raise ValueError("a running box is not powered off afterwards")


@dataclass(frozen=True)
class VagrantBox:
    path: Path
    name: str
    initial_status: BoxStatus

    def smart_name(self) -> str:
        """Return the box name, or the directory name for the default box."""
        if self.name == "default":
            return Path(self.path).name
        return self.name

    def __str__(self) -> str:
        return f"{self.name} @ {self.path}"


def parse_status_output(output: str, path: str | os.PathLike) -> list[VagrantBox]:
    """Parse the box table printed by `vagrant status`.

    Raises ValueError on a line that does not name a known box state.
    """
    directory = Path(path)
    boxes = []
    for line in output.split("\n")[2:]:
        if not line or line.startswith("\r"):
            break
        log.debug("Vagrant line: %r", line)
        words = line.split()
        if len(words) < 2:
            raise ValueError(f"Malformed vagrant status line: {line!r}")
        box = VagrantBox(path=directory, name=words[0], initial_status=BoxStatus(words[1]))
        log.debug("%r", box)
        boxes.append(box)
    return boxes


def get_boxes(vagrant: str | os.PathLike, directory: str | os.PathLike) -> list[VagrantBox]:
    """Run `vagrant status` in a directory and return the boxes it reports."""
    result = subprocess.run(
        [str(vagrant), "status"],
        cwd=directory,
        capture_output=True,
        text=True,
        check=False,
    )
    check_returncode(result.returncode)
    log.debug("Vagrant output in %s: %s", directory, result.stdout)
    return parse_status_output(result.stdout, directory)