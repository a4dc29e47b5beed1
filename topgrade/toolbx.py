"""Toolbx containers: listing them and locating this program from inside one."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

log = logging.getLogger(__name__)

HOST_ROOT = "/run/host"


def parse_toolbox_list(output: str) -> list[str]:
    """Return the container names from the output of `toolbox list --containers`.

    The first line only holds column headers and is skipped; the name is
    the second word of every following line.
    """
    names = []
    for line in output.splitlines()[1:]:
        words = line.split()
        if len(words) > 1 and words[1]:
            names.append(words[1])
    return names


def list_toolboxes(toolbx: str | os.PathLike) -> list[str]:
    """Run the toolbox binary and return the names of its containers."""
    result = subprocess.run(
        [str(toolbx), "list", "--containers"],
        capture_output=True,
        check=False,
    )
    return parse_toolbox_list(result.stdout.decode("utf-8"))


def host_executable_path(executable: str | os.PathLike | None = None) -> str:
    """Return where an executable of the host is seen from inside a container.

    Without an argument the running program is used.
    """
    if executable is None:
        executable = Path(sys.argv[0]).resolve()
    parts = Path(executable).parts[1:]
    path = str(Path(HOST_ROOT).joinpath(*parts))
    log.debug("Host executable path: %s", path)
    return path