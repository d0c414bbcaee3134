"""Shared fixtures for integration tests."""

from pathlib import Path

import pytest


@pytest.fixture
def user_home(tmp_path: Path) -> Path:
    """A fake user home with a dotfile and a config directory.

    Layout:
        home/.bashrc              ("export EDITOR=vim")
        home/.config/nvim/init.lua ("set number")
    """
    home = tmp_path / "home"
    (home / ".config" / "nvim").mkdir(parents=True)
    (home / ".bashrc").write_text("export EDITOR=vim", encoding="utf-8")
    (home / ".config" / "nvim" / "init.lua").write_text("set number", encoding="utf-8")
    return home
