"""Homebrew variants and the command lines that run them."""

from __future__ import annotations

import enum
import os
import platform

INTEL_BREW = "/usr/local/bin/brew"
ARM_BREW = "/opt/homebrew/bin/brew"

_ARM_MACHINES = frozenset({"arm64", "aarch64"})
_X86_MACHINES = frozenset({"x86_64", "amd64"})


def both_exist() -> bool:
    """Tell whether both the Intel and the ARM Homebrew installations are present."""
    return os.path.exists(INTEL_BREW) and os.path.exists(ARM_BREW)


class BrewVariant(enum.Enum):
    LINUX = "linux"
    MAC_INTEL = "mac-intel"
    MAC_ARM = "mac-arm"

    def binary_name(self) -> str:
        """Return the brew binary this variant runs."""
        if self is BrewVariant.MAC_INTEL:
            return INTEL_BREW
        if self is BrewVariant.MAC_ARM:
            return ARM_BREW
        return "brew"

    def step_title(self) -> str:
        """Return the step title, naming the architecture when both installations exist."""
        if self is BrewVariant.MAC_ARM and both_exist():
            return "Brew (ARM)"
        if self is BrewVariant.MAC_INTEL and both_exist():
            return "Brew (Intel)"
        return "Brew"

    def command(self, machine: str | None = None) -> list[str]:
        """Return the command prefix that runs brew for this variant.

        A brew built for another architecture than the machine's is run
        through `arch`. Without a machine name the running machine is used.
        """
        if machine is None:
            machine = platform.machine()
        machine = machine.lower()
        if self is BrewVariant.MAC_INTEL and machine in _ARM_MACHINES:
            return ["arch", "-x86_64", self.binary_name()]
        if self is BrewVariant.MAC_ARM and machine in _X86_MACHINES:
            return ["arch", "-arm64e", self.binary_name()]
        return [self.binary_name()]