"""
App Configuration - Central place for Freely's directory layout and file names.

Resolves the same per-user directories the desktop host hands out:
    app_local_data_dir  ->  where the .claude/ agent config lives
    app_data_dir        ->  where freely.db lives

Both can be pinned with environment variables (FREELY_LOCAL_DATA_DIR,
FREELY_DATA_DIR), which is what the tests and portable installs use.
"""

import os
import sys
from pathlib import Path


# =============================================================================
# APPLICATION IDENTITY
# =============================================================================

APP_IDENTIFIER = "com.freely.app"

LOCAL_DATA_DIR_ENV = "FREELY_LOCAL_DATA_DIR"
DATA_DIR_ENV = "FREELY_DATA_DIR"

# =============================================================================
# AGENT CONFIG LAYOUT  (<app_local_data_dir>/.claude/...)
# =============================================================================

CONFIG_DIR_NAME = ".claude"
CLAUDE_MD = "CLAUDE.md"
SETTINGS_JSON = "settings.json"
COMMANDS_DIR = "commands"

# =============================================================================
# DATABASE FILES  (<app_data_dir>/...)
# =============================================================================

LEGACY_DB_NAME = "pluely.db"
DB_NAME = "freely.db"


# =============================================================================
# ERRORS
# =============================================================================

class ConfigError(Exception):
    """Base class for everything the config layer raises."""


class PathResolutionError(ConfigError):
    """The environment could not supply a base directory."""


class ConfigIOError(ConfigError):
    """A create/read/write on the config directory failed."""


class ResourceNotFoundError(ConfigIOError):
    """The requested resource file does not exist."""


# =============================================================================
# PATH RESOLUTION
# =============================================================================

def _home() -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise PathResolutionError(f"home directory is not available: {e}") from e


def _platform_base(windows_var: str) -> Path:
    if sys.platform.startswith("win"):
        value = os.environ.get(windows_var)
        if not value:
            raise PathResolutionError(f"%{windows_var}% is not set")
        return Path(value)
    if sys.platform == "darwin":
        return _home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg)
    return _home() / ".local" / "share"


def _resolve(label: str, override_env: str, windows_var: str) -> Path:
    override = os.environ.get(override_env)
    if override:
        return Path(override)
    try:
        return _platform_base(windows_var) / APP_IDENTIFIER
    except PathResolutionError as e:
        raise PathResolutionError(f"Could not resolve {label}: {e}") from e


def app_local_data_dir() -> Path:
    """Machine-local data directory (not roamed on Windows)."""
    return _resolve("app_local_data_dir", LOCAL_DATA_DIR_ENV, "LOCALAPPDATA")


def app_data_dir() -> Path:
    """Roaming data directory; same as the local one outside Windows."""
    return _resolve("app_data_dir", DATA_DIR_ENV, "APPDATA")
