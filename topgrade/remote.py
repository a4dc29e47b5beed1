"""Building the ssh command lines that run the upgrade on a remote host."""

from __future__ import annotations

from collections.abc import Sequence


def ssh_args(hostname: str, topgrade: str, ssh_arguments: str | None = None) -> list[str]:
    """Return the ssh arguments that run topgrade on a host with its name as prefix."""
    args = ["-t", hostname]
    if ssh_arguments:
        args.extend(ssh_arguments.split())
    args.extend(["env", f"TOPGRADE_PREFIX={hostname}", "$SHELL", "-lc", topgrade])
    return args


def async_ssh_args(args: Sequence[str]) -> list[str]:
    """Turn ssh arguments into a full command that keeps its window open."""
    return ["ssh", *args, "--keep"]