"""
Claude CLI configuration management.

Manages a `.claude/` directory in the app's local data directory.
On first run it seeds CLAUDE.md and settings.json. Later runs leave
existing files alone so users can customize them.

Every operation takes the base directory explicitly; the host-facing
wrappers at the bottom resolve it through app_config first.
"""

import json
from pathlib import Path, PurePath

from app_config import (
    CLAUDE_MD,
    COMMANDS_DIR,
    CONFIG_DIR_NAME,
    SETTINGS_JSON,
    ConfigError,
    ConfigIOError,
    ResourceNotFoundError,
    app_local_data_dir,
)
from logger_config import get_logger
logger = get_logger(__name__)

# =============================================================================
# DEFAULT RESOURCES
# =============================================================================

DEFAULT_CLAUDE_MD = """# Freely Assistant

You are an AI coding assistant running inside Freely, a desktop development tool.

## Context
- You are running as an agent provider inside the Freely desktop app
- The user interacts with you through Freely's chat interface
- You have access to the user's filesystem through Claude Code's built-in tools

## Guidelines
- Be concise and helpful
- Focus on the user's coding task
- When modifying files, explain what you changed and why
- Respect the user's project structure and conventions
"""

DEFAULT_SETTINGS_JSON = """{
  "permissions": {
    "allow": ["Read", "Glob", "Grep", "Bash(git status)", "Bash(git diff)"],
    "deny": []
  }
}
"""

# Seeded in this order
DEFAULT_RESOURCES = {
    CLAUDE_MD: DEFAULT_CLAUDE_MD,
    SETTINGS_JSON: DEFAULT_SETTINGS_JSON,
}


# =============================================================================
# HELPERS
# =============================================================================

def config_dir_for(base_dir) -> Path:
    """Where the .claude directory lives under base_dir. Does not touch disk."""
    return Path(base_dir) / CONFIG_DIR_NAME


def _resource_path(config_dir: Path, name: str) -> Path:
    pure = PurePath(name or "")
    if not name or pure.anchor or ".." in pure.parts:
        raise ConfigError(f"Invalid resource name: {name!r}")
    return config_dir / name


def _make_dir(config_dir: Path):
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigIOError(f"Failed to create {CONFIG_DIR_NAME} directory: {e}") from e


def _write_text(path: Path, name: str, content: str):
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise ConfigIOError(f"Failed to write {name}: {e}") from e


# =============================================================================
# CORE OPERATIONS
# =============================================================================

def ensure_config_dir(base_dir) -> Path:
    """
    Create `<base_dir>/.claude` and seed the default resources.

    A resource is written only if nothing exists at its path, so user
    edits (and anything else the user put in the directory) survive.

    Returns:
        Path to the .claude directory, used as the CLI's working directory.

    Raises:
        ConfigIOError: directory creation or a seed write failed.
    """
    config_dir = config_dir_for(base_dir)
    _make_dir(config_dir)

    for name, content in DEFAULT_RESOURCES.items():
        path = config_dir / name
        if path.exists():
            logger.debug(f"Exists (skipped): {name}")
            continue
        _write_text(path, name, content)
        logger.info(f"Seeded {name} in {config_dir}")

    return config_dir


def read_resource(base_dir, name: str) -> str:
    """Read a file from the .claude directory."""
    path = _resource_path(config_dir_for(base_dir), name)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise ResourceNotFoundError(f"Failed to read {name}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigIOError(f"Failed to read {name}: {e}") from e


def write_resource(base_dir, name: str, content: str):
    """Overwrite a file in the .claude directory, re-creating the directory if needed."""
    config_dir = config_dir_for(base_dir)
    path = _resource_path(config_dir, name)
    _make_dir(path.parent)
    _write_text(path, name, content)
    logger.info(f"Updated {name} ({len(content)} chars)")


def read_settings(base_dir) -> dict:
    """Parse settings.json. Raises ConfigIOError if it is not a JSON object."""
    raw = read_resource(base_dir, SETTINGS_JSON)
    try:
        settings = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigIOError(f"Failed to parse {SETTINGS_JSON}: {e}") from e
    if not isinstance(settings, dict):
        raise ConfigIOError(f"Failed to parse {SETTINGS_JSON}: expected an object")
    return settings


def list_commands(base_dir) -> list:
    """Names of the user's custom slash-command files under .claude/commands."""
    commands_dir = config_dir_for(base_dir) / COMMANDS_DIR
    if not commands_dir.is_dir():
        return []
    return sorted(p.name for p in commands_dir.glob("*.md") if p.is_file())


def restore_default(base_dir, name: str):
    """Put a resource back to its shipped default. Only called on explicit request."""
    if name not in DEFAULT_RESOURCES:
        raise ConfigError(f"No default for {name!r} (known: {', '.join(DEFAULT_RESOURCES)})")
    write_resource(base_dir, name, DEFAULT_RESOURCES[name])
    logger.warning(f"{name} restored to default")


# =============================================================================
# HOST-FACING WRAPPERS (resolve app_local_data_dir, then delegate)
# =============================================================================

def init_claude_config() -> Path:
    """Seed the .claude directory in the app's local data dir and return its path."""
    return ensure_config_dir(app_local_data_dir())


def get_claude_md() -> str:
    """Current CLAUDE.md content."""
    return read_resource(app_local_data_dir(), CLAUDE_MD)


def update_claude_md(content: str):
    """Replace CLAUDE.md with new content."""
    write_resource(app_local_data_dir(), CLAUDE_MD, content)
