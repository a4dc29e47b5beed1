"""Locating PowerShell and building the commands that update its modules."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .terminal import is_dumb
from .utils import SkipStep, require_option, require_path, which

log = logging.getLogger(__name__)


def _profile_dir(path: Path) -> Path | None:
    """Ask PowerShell for the directory of its profile, if it exists."""
    try:
        result = subprocess.run(
            [str(path), "-NoProfile", "-Command", "Split-Path $profile"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return None
    if result.returncode != 0:
        return None
    try:
        return require_path(Path(result.stdout.strip()))
    except SkipStep:
        return None


@dataclass
class Powershell:
    """A PowerShell binary, if one was found, and its profile directory."""

    path: Path | None = None
    profile: Path | None = None

    @classmethod
    def detect(cls) -> Powershell:
        """Find pwsh or powershell; nothing is found on a dumb terminal."""
        path = which("pwsh") or which("powershell")
        if path is not None and is_dumb():
            path = None
        profile = _profile_dir(path) if path is not None else None
        return cls(path=path, profile=profile)

    @classmethod
    def windows_powershell(cls) -> Powershell:
        """Find Windows PowerShell itself, without a profile."""
        path = which("powershell")
        if path is not None and is_dumb():
            path = None
        return cls(path=path, profile=None)

    @staticmethod
    def has_module(powershell: str | os.PathLike, command: str) -> bool:
        """Tell whether a module is available to the given PowerShell."""
        try:
            result = subprocess.run(
                [str(powershell), "-NoProfile", "-Command", f"Get-Module -ListAvailable {command}"],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            log.debug("Running %s failed: %s", powershell, exc)
            return False
        return result.returncode == 0 and bool(result.stdout)

    def supports_windows_update(self) -> bool:
        """Tell whether the PSWindowsUpdate module is installed."""
        return self.path is not None and self.has_module(self.path, "PSWindowsUpdate")

    def update_modules_command(self, verbose: bool = False, force: bool = False) -> list[str]:
        """Return the command line that updates PowerShell modules.

        Raises SkipStep when PowerShell is not installed.
        """
        powershell = require_option(self.path, "Powershell is not installed")
        cmd = ["Update-Module"]
        if verbose:
            cmd.append("-Verbose")
        if force:
            cmd.append("-Force")
        return [str(powershell), "-NoProfile", "-Command", " ".join(cmd)]