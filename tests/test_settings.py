from pathlib import Path

import pytest

from mcp_launcher_config import settings
from mcp_launcher_config.settings import DATA_DIR_ENV, default_data_dir, load_settings


def test_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
    s = load_settings()
    assert s.data_dir == tmp_path
    assert s.app_config_file == tmp_path / "config.json"


def test_explicit_data_dir_wins(monkeypatch, tmp_path):
    monkeypatch.setenv(DATA_DIR_ENV, "/elsewhere")
    assert load_settings(tmp_path).data_dir == tmp_path


def test_xdg_data_home(monkeypatch, tmp_path):
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    monkeypatch.setattr(settings.sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert default_data_dir() == tmp_path / "mcp-launcher"


def test_linux_fallback(monkeypatch, tmp_path):
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setattr(settings.sys, "platform", "linux")
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert default_data_dir() == tmp_path / ".local" / "share" / "mcp-launcher"


def test_windows_appdata(monkeypatch):
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    monkeypatch.setattr(settings.sys, "platform", "win32")
    monkeypatch.setenv("APPDATA", "C:/Users/me/AppData/Roaming")
    assert default_data_dir("app") == Path("C:/Users/me/AppData/Roaming") / "app"


def test_macos(monkeypatch, tmp_path):
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    monkeypatch.setattr(settings.sys, "platform", "darwin")
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert default_data_dir() == tmp_path / "Library" / "Application Support" / "mcp-launcher"


def test_unresolvable_home_is_io_error(monkeypatch):
    def no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setattr(settings.sys, "platform", "linux")
    monkeypatch.setattr(Path, "home", classmethod(no_home))
    with pytest.raises(settings.IoError):
        default_data_dir()
