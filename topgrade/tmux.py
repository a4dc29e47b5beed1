"""Running the upgrade inside a tmux session."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from typing import NoReturn

from .utils import check_returncode, which

SESSION = "topgrade"


class Tmux:
    """A tmux binary together with extra arguments placed before each subcommand."""

    def __init__(self, args: str | None = None) -> None:
        found = which("tmux")
        if found is None:
            raise FileNotFoundError("Could not find tmux")
        self.tmux = found
        self.args = args.split() if args is not None else None

    def build(self, *args: str) -> list[str]:
        """Return the full command line for a tmux subcommand."""
        return [str(self.tmux), *(self.args or ()), *args]

    def _env(self) -> dict[str, str] | None:
        if self.args is None:
            return None
        env = dict(os.environ)
        env.pop("TMUX", None)
        return env

    def has_session(self, session_name: str) -> bool:
        result = subprocess.run(
            self.build("has-session", "-t", session_name),
            env=self._env(),
            capture_output=True,
            check=False,
        )
        return result.returncode == 0

    def new_session(self, session_name: str) -> bool:
        result = subprocess.run(
            self.build("new-session", "-d", "-s", session_name, "-n", "dummy"),
            env=self._env(),
            check=False,
        )
        return result.returncode == 0

    def run_in_session(self, command: str) -> None:
        """Open a new window in the session running the command.

        Raises ProcessFailed if tmux fails.
        """
        result = subprocess.run(
            self.build("new-window", "-t", SESSION, command),
            env=self._env(),
            check=False,
        )
        check_returncode(result.returncode)


def topgrade_command(argv: Sequence[str] | None = None) -> str:
    """Return the shell command that reruns this program inside tmux."""
    if argv is None:
        argv = sys.argv
    return " ".join(["env", "TOPGRADE_KEEP_END=1", "TOPGRADE_INSIDE_TMUX=1", *argv])


def run_in_tmux(args: str | None = None) -> NoReturn:
    """Start this program in a tmux session, then attach to it or exit."""
    command = topgrade_command(sys.argv)
    tmux = Tmux(args)

    if not tmux.has_session(SESSION):
        tmux.new_session(SESSION)

    tmux.run_in_session(command)
    subprocess.run(
        tmux.build("kill-window", "-t", f"{SESSION}:dummy"),
        env=tmux._env(),
        capture_output=True,
        check=False,
    )

    if "TMUX" not in os.environ:
        argv = tmux.build("attach", "-t", SESSION)
        env = tmux._env()
        os.execve(argv[0], argv, env if env is not None else dict(os.environ))

    print("Topgrade launched in a new tmux session")
    sys.exit(0)