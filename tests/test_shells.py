import pytest

from topgrade.shells import nvimrc, vimrc, zshrc
from topgrade.utils import SkipStep


def test_zshrc_in_home(tmp_path, monkeypatch):
    monkeypatch.delenv("ZDOTDIR", raising=False)
    assert zshrc(tmp_path) == tmp_path / ".zshrc"


def test_zshrc_follows_zdotdir(tmp_path, monkeypatch):
    zdot = tmp_path / "zdot"
    monkeypatch.setenv("ZDOTDIR", str(zdot))
    assert zshrc(tmp_path / "home") == zdot / ".zshrc"


def test_vimrc_prefers_dotfile(tmp_path):
    (tmp_path / ".vimrc").write_text("")
    (tmp_path / ".vim").mkdir()
    (tmp_path / ".vim" / "vimrc").write_text("")
    assert vimrc(tmp_path) == tmp_path / ".vimrc"


def test_vimrc_falls_back_to_vim_dir(tmp_path):
    (tmp_path / ".vim").mkdir()
    (tmp_path / ".vim" / "vimrc").write_text("")
    assert vimrc(tmp_path) == tmp_path / ".vim" / "vimrc"


def test_vimrc_missing_skips(tmp_path):
    with pytest.raises(SkipStep):
        vimrc(tmp_path)


def test_nvimrc_init_vim_first(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    (tmp_path / "nvim").mkdir()
    (tmp_path / "nvim" / "init.vim").write_text("")
    (tmp_path / "nvim" / "init.lua").write_text("")
    assert nvimrc(tmp_path / "home") == tmp_path / "nvim" / "init.vim"


def test_nvimrc_lua(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    (tmp_path / "nvim").mkdir()
    (tmp_path / "nvim" / "init.lua").write_text("")
    assert nvimrc(tmp_path / "home") == tmp_path / "nvim" / "init.lua"


def test_nvimrc_default_config_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    config = tmp_path / ".config" / "nvim"
    config.mkdir(parents=True)
    (config / "init.vim").write_text("")
    assert nvimrc(tmp_path) == config / "init.vim"


def test_nvimrc_missing_skips(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    with pytest.raises(SkipStep):
        nvimrc(tmp_path)