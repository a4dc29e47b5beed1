"""Locating shell and editor configuration files."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .utils import SkipStep, require_path


def zshrc(home: str | os.PathLike) -> Path:
    """Return the zsh startup file, honouring ZDOTDIR."""
    zdotdir = os.environ.get("ZDOTDIR")
    if zdotdir is not None:
        return Path(zdotdir) / ".zshrc"
    return Path(home) / ".zshrc"


def vimrc(home: str | os.PathLike) -> Path:
    """Return the vim configuration file, or raise SkipStep if there is none."""
    home = Path(home)
    try:
        return require_path(home / ".vimrc")
    except SkipStep:
        return require_path(home / ".vim" / "vimrc")


def _nvim_base(home: Path) -> Path:
    if sys.platform.startswith("win"):
        local = os.environ.get("LOCALAPPDATA")
        return Path(local) if local else home / "AppData" / "Local"
    config_home = os.environ.get("XDG_CONFIG_HOME")
    return Path(config_home) if config_home is not None else home / ".config"


def nvimrc(home: str | os.PathLike) -> Path:
    """Return the neovim init file, or raise SkipStep if there is none."""
    base = _nvim_base(Path(home))
    try:
        return require_path(base / "nvim" / "init.vim")
    except SkipStep:
        return require_path(base / "nvim" / "init.lua")