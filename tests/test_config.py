"""Unit tests for environment-driven settings."""

import tempfile
from pathlib import Path

from vim_anywhere_app.config import get_settings


def _clear(monkeypatch):
    for name in (
        "VIM_ANYWHERE_TERM",
        "VIM_ANYWHERE_EDITOR",
        "VIM_ANYWHERE_TMPDIR",
        "VIM_ANYWHERE_SKIP_EMPTY",
        "VIM_ANYWHERE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    _clear(monkeypatch)

    settings = get_settings()

    assert settings.terminal_template is None
    assert settings.editor == "vim"
    assert settings.clipboard_helper == "xclip"
    assert settings.scratch_dir == Path(tempfile.gettempdir()) / "vim-anywhere"
    assert settings.skip_empty is False
    assert settings.log_level == "WARNING"


def test_overrides(monkeypatch, tmp_path):
    _clear(monkeypatch)
    monkeypatch.setenv("VIM_ANYWHERE_TERM", 'terminator -e "%s"')
    monkeypatch.setenv("VIM_ANYWHERE_EDITOR", "nvim")
    monkeypatch.setenv("VIM_ANYWHERE_TMPDIR", str(tmp_path))
    monkeypatch.setenv("VIM_ANYWHERE_SKIP_EMPTY", "yes")
    monkeypatch.setenv("VIM_ANYWHERE_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.terminal_template == 'terminator -e "%s"'
    assert settings.editor == "nvim"
    assert settings.scratch_root == tmp_path.resolve()
    assert settings.skip_empty is True
    assert settings.log_level == "DEBUG"


def test_empty_template_is_kept(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("VIM_ANYWHERE_TERM", "")

    assert get_settings().terminal_template == ""


def test_settings_are_cached(monkeypatch):
    _clear(monkeypatch)

    assert get_settings() is get_settings()
