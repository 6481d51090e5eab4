"""
TEST: app_config.py — directory resolution

What we're testing:
    - Environment overrides win
    - Per-platform defaults (Linux/XDG, macOS, Windows)
    - Missing Windows variables / home directory => PathResolutionError
    - File-name constants the rest of the app relies on

How to run:
    pytest tests/test_app_config.py -v
"""

from pathlib import Path

import pytest

import app_config
from app_config import (
    APP_IDENTIFIER,
    ConfigError,
    PathResolutionError,
    app_data_dir,
    app_local_data_dir,
)


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    monkeypatch.setattr(app_config, "_home", lambda: tmp_path)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    return tmp_path


def _on(monkeypatch, platform):
    monkeypatch.setattr(app_config.sys, "platform", platform)


# =============================================================================
# TEST 1: Constants
# =============================================================================

def test_layout_constants():
    assert app_config.CONFIG_DIR_NAME == ".claude"
    assert app_config.CLAUDE_MD == "CLAUDE.md"
    assert app_config.SETTINGS_JSON == "settings.json"
    assert app_config.LEGACY_DB_NAME == "pluely.db"
    assert app_config.DB_NAME == "freely.db"


def test_error_hierarchy():
    assert issubclass(PathResolutionError, ConfigError)
    assert issubclass(app_config.ResourceNotFoundError, app_config.ConfigIOError)
    assert issubclass(app_config.ConfigIOError, ConfigError)


# =============================================================================
# TEST 2: Overrides
# =============================================================================

def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("FREELY_LOCAL_DATA_DIR", str(tmp_path / "local"))
    monkeypatch.setenv("FREELY_DATA_DIR", str(tmp_path / "roaming"))

    assert app_local_data_dir() == tmp_path / "local"
    assert app_data_dir() == tmp_path / "roaming"


# =============================================================================
# TEST 3: Platform defaults
# =============================================================================

def test_linux_uses_xdg_data_home(monkeypatch, fake_home):
    _on(monkeypatch, "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(fake_home / "xdg"))

    assert app_local_data_dir() == fake_home / "xdg" / APP_IDENTIFIER
    assert app_data_dir() == fake_home / "xdg" / APP_IDENTIFIER


def test_linux_falls_back_to_local_share(monkeypatch, fake_home):
    _on(monkeypatch, "linux")
    assert app_local_data_dir() == fake_home / ".local" / "share" / APP_IDENTIFIER


def test_macos_application_support(monkeypatch, fake_home):
    _on(monkeypatch, "darwin")
    expected = fake_home / "Library" / "Application Support" / APP_IDENTIFIER
    assert app_local_data_dir() == expected
    assert app_data_dir() == expected


def test_windows_local_vs_roaming(monkeypatch):
    _on(monkeypatch, "win32")
    monkeypatch.setenv("LOCALAPPDATA", "C:/Users/dev/AppData/Local")
    monkeypatch.setenv("APPDATA", "C:/Users/dev/AppData/Roaming")

    assert app_local_data_dir() == Path("C:/Users/dev/AppData/Local") / APP_IDENTIFIER
    assert app_data_dir() == Path("C:/Users/dev/AppData/Roaming") / APP_IDENTIFIER


# =============================================================================
# TEST 4: Resolution failures
# =============================================================================

def test_windows_missing_variable(monkeypatch):
    _on(monkeypatch, "win32")
    monkeypatch.delenv("LOCALAPPDATA", raising=False)

    with pytest.raises(PathResolutionError, match="Could not resolve app_local_data_dir"):
        app_local_data_dir()


def test_missing_home_directory(monkeypatch):
    def _no_home():
        raise RuntimeError("Could not determine home directory.")

    _on(monkeypatch, "linux")
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setattr(app_config.Path, "home", _no_home)

    with pytest.raises(PathResolutionError, match="Could not resolve app_data_dir: home directory"):
        app_data_dir()
