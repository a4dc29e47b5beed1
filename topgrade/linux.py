"""Linux distribution detection from os-release data."""

from __future__ import annotations

import enum
import logging
import subprocess
from pathlib import Path

from .utils import check_returncode

log = logging.getLogger(__name__)

OS_RELEASE_PATH = "/etc/os-release"
BEDROCK_PATH = "/bedrock"


class UnknownLinuxDistribution(Exception):
    """Raised when the running Linux distribution cannot be identified."""

    def __init__(self) -> None:
        super().__init__("Unknown Linux Distribution")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _general_section(text: str) -> dict[str, str]:
    """Read the key/value pairs that appear before any section header."""
    values: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(("#", ";")):
            continue
        if line.startswith("["):
            break
        key, sep, value = line.partition("=")
        if not sep:
            continue
        values[key.strip()] = _unquote(value.strip())
    return values


class Distribution(enum.Enum):
    ALPINE = "alpine"
    ARCH = "arch"
    BEDROCK = "bedrock"
    CENTOS = "centos"
    CLEAR_LINUX = "clear-linux"
    FEDORA = "fedora"
    DEBIAN = "debian"
    GENTOO = "gentoo"
    SUSE = "suse"
    VOID = "void"
    SOLUS = "solus"
    EXHERBO = "exherbo"
    NIXOS = "nixos"
    KDE_NEON = "kde-neon"

    @classmethod
    def detect(
        cls,
        bedrock_path: str | Path = BEDROCK_PATH,
        os_release_path: str | Path = OS_RELEASE_PATH,
    ) -> Distribution:
        """Identify the running distribution.

        Raises UnknownLinuxDistribution when it cannot be determined.
        """
        if Path(bedrock_path).exists():
            return cls.BEDROCK
        release = Path(os_release_path)
        if release.exists():
            return parse_os_release(release.read_text(encoding="utf-8", errors="replace"))
        raise UnknownLinuxDistribution()

    def redhat_based(self) -> bool:
        return self in (Distribution.CENTOS, Distribution.FEDORA)


_BY_ID = {
    "alpine": Distribution.ALPINE,
    "centos": Distribution.CENTOS,
    "rhel": Distribution.CENTOS,
    "ol": Distribution.CENTOS,
    "clear-linux-os": Distribution.CLEAR_LINUX,
    "fedora": Distribution.FEDORA,
    "void": Distribution.VOID,
    "debian": Distribution.DEBIAN,
    "pureos": Distribution.DEBIAN,
    "arch": Distribution.ARCH,
    "anarchy": Distribution.ARCH,
    "manjaro-arm": Distribution.ARCH,
    "garuda": Distribution.ARCH,
    "artix": Distribution.ARCH,
    "solus": Distribution.SOLUS,
    "gentoo": Distribution.GENTOO,
    "exherbo": Distribution.EXHERBO,
    "nixos": Distribution.NIXOS,
    "neon": Distribution.KDE_NEON,
}

_BY_ID_LIKE = (
    (("debian", "ubuntu"), Distribution.DEBIAN),
    (("centos",), Distribution.CENTOS),
    (("suse",), Distribution.SUSE),
    (("arch", "archlinux"), Distribution.ARCH),
    (("alpine",), Distribution.ALPINE),
    (("fedora",), Distribution.FEDORA),
)


def parse_os_release(text: str) -> Distribution:
    """Determine the distribution from the contents of an os-release file."""
    section = _general_section(text)
    distro_id = section.get("ID")
    if distro_id in _BY_ID:
        return _BY_ID[distro_id]

    id_like = section.get("ID_LIKE")
    if id_like is not None:
        likes = set(id_like.split())
        for names, distribution in _BY_ID_LIKE:
            if likes.intersection(names):
                return distribution
    raise UnknownLinuxDistribution()


def is_wsl() -> bool:
    """Tell whether the kernel is a Windows Subsystem for Linux kernel."""
    result = subprocess.run(["uname", "-r"], capture_output=True, text=True, check=False)
    check_returncode(result.returncode)
    log.debug("Uname output: %s", result.stdout)
    return "microsoft" in result.stdout