"""macOS software update detection."""

from __future__ import annotations

import logging
import subprocess

from .utils import check_returncode

log = logging.getLogger(__name__)

_NOTHING_NEW = "No new software available"


def update_available_from(listing: str) -> bool:
    """Tell from `softwareupdate --list` diagnostics whether an update exists."""
    return _NOTHING_NEW not in listing


def system_update_available() -> bool:
    """Ask softwareupdate whether a system update is available.

    Raises ProcessFailed if softwareupdate fails.
    """
    result = subprocess.run(["softwareupdate", "--list"], capture_output=True, check=False)
    log.debug("%r", result)
    check_returncode(result.returncode)
    listing = result.stderr.decode("utf-8")
    log.debug("%r", listing)
    return update_available_from(listing)