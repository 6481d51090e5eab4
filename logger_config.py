"""
Logger Configuration - Markdown Table-Based Bootstrap Log

Writes a Priority Dashboard log to <app_local_data_dir>/logs/Log_Files.md with:
  - Table format: | Priority | Status | Date | Timestamp | Module | Message |
  - Severity: LOW (🔵 DEBUG), MEDIUM (🟢 INFO / 🟡 WARNING), HIGH (🔴 ERROR)
  - Module icons: 📝 Config seeding, 🗄️ Store migration, ⚙️ System
  - Rotating file handler (5MB, 3 backups)

Set FREELY_LOG_DIR to write the log somewhere else. If the data dir cannot
be resolved, the log falls back to data/system_logs next to this file.

Usage in any module:
    from logger_config import get_logger
    logger = get_logger(__name__)
    logger.info("Seeded CLAUDE.md")
"""

import os
import atexit
import logging
import traceback
from datetime import datetime
from logging.handlers import RotatingFileHandler

from app_config import PathResolutionError, app_local_data_dir

# =============================================================================
# PATHS
# =============================================================================

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
LOG_DIR_ENV = "FREELY_LOG_DIR"
LOG_FILE_NAME = "Log_Files.md"

# Set on first setup
LOG_FILE = None

ROOT_LOGGER_NAME = "FreelyLog"


def resolve_log_dir() -> str:
    """FREELY_LOG_DIR, else <app_local_data_dir>/logs, else data/system_logs beside the code."""
    override = os.environ.get(LOG_DIR_ENV)
    if override:
        return override
    try:
        return str(app_local_data_dir() / "logs")
    except PathResolutionError:
        return os.path.join(SCRIPT_DIR, "data", "system_logs")


# =============================================================================
# TABLE HEADER (written at file creation and rotation)
# =============================================================================

TABLE_HEADER = (
    "| Priority | Status | Date | Timestamp | Module | Message |\n"
    "| :--- | :--- | :--- | :--- | :--- | :--- |\n"
)

# =============================================================================
# MODULE ICON MAPPING
# =============================================================================

MODULE_ICONS = {
    # 📝 Config seeding
    "claude_config.py":  "📝",

    # 🗄️ Store migration
    "legacy_store.py":   "🗄️",

    # ⚙️ System
    "main.py":           "⚙️",
    "manage_config.py":  "⚙️",
    "logger_config.py":  "⚙️",
}


# =============================================================================
# CUSTOM TABLE FORMATTER
# =============================================================================

class TableFormatter(logging.Formatter):
    """
    Formats log records as Markdown table rows.

    Output example:
        | MEDIUM | 🟢 | `2026-10-19` | `09:14:02.311 AM` | 📝 `claude_config.py` | Seeded CLAUDE.md |
        | MEDIUM | 🟡 | `2026-10-19` | `09:14:02.315 AM` | 🗄️ `legacy_store.py` | Failed to rename pluely.db → freely.db |
    """

    SEVERITY_MAP = {
        "DEBUG":    ("LOW",    "🔵"),
        "INFO":     ("MEDIUM", "🟢"),
        "WARNING":  ("MEDIUM", "🟡"),
        "ERROR":    ("HIGH",   "🔴"),
        "CRITICAL": ("HIGH",   "💀"),
    }

    def format(self, record):
        dt = datetime.fromtimestamp(record.created)
        timestamp = dt.strftime("%I:%M:%S")
        ampm = dt.strftime("%p")
        ms = f"{int(record.msecs):03d}"
        date_str = dt.strftime("%Y-%m-%d")

        priority, status_icon = self.SEVERITY_MAP.get(record.levelname, ("LOW", "⚪"))
        module_icon = MODULE_ICONS.get(record.filename, "⚙️")

        # Pipes would break the table
        message = record.getMessage().replace("|", "∣").replace("\n", " ")

        if record.exc_info and record.exc_info[1]:
            tb = "".join(traceback.format_exception(*record.exc_info))
            tb_short = tb.strip().split("\n")[-1]
            message = f"{message} — `{tb_short}`"

        return f"| {priority} | {status_icon} | `{date_str}` | `{timestamp}.{ms} {ampm}` | {module_icon} `{record.filename}` | {message} |"


# =============================================================================
# CONSOLE FORMATTER (minimal, doesn't clutter CLI)
# =============================================================================

class ConsoleFormatter(logging.Formatter):
    """Minimal console format, warnings and errors only."""

    LEVEL_EMOJI = {
        "WARNING":  "🟡",
        "ERROR":    "🔴",
        "CRITICAL": "💀",
    }

    def format(self, record):
        emoji = self.LEVEL_EMOJI.get(record.levelname, "")
        return f"   {emoji} [{record.levelname}] {record.getMessage()}"


# =============================================================================
# CUSTOM ROTATING HANDLER (writes table header on new files)
# =============================================================================

class TableRotatingHandler(RotatingFileHandler):
    """
    RotatingFileHandler that writes the Markdown table header
    at the top of every new/rotated log file.
    """

    def _open(self):
        stream = super()._open()
        stream.seek(0, 2)
        if stream.tell() == 0:
            stream.write(TABLE_HEADER)
            stream.flush()
        return stream


# =============================================================================
# LOGGER SETUP
# =============================================================================

_initialized = False

def _setup_root_logger():
    """Configure the root 'FreelyLog' logger once."""
    global _initialized, LOG_FILE
    if _initialized:
        return

    log_dir = resolve_log_dir()
    os.makedirs(log_dir, exist_ok=True)
    LOG_FILE = os.path.join(log_dir, LOG_FILE_NAME)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # --- File Handler (Markdown table log) ---
    file_handler = TableRotatingHandler(
        LOG_FILE,
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(TableFormatter())
    root_logger.addHandler(file_handler)

    # --- Console Handler (warnings/errors only) ---
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(ConsoleFormatter())
    root_logger.addHandler(console_handler)

    atexit.register(log_session_end)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger under the 'FreelyLog' namespace.

    Args:
        name: Module name (use __name__)

    Returns:
        Logger instance ready to use
    """
    _setup_root_logger()
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _write_separator(icon: str, text: str):
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in logger.handlers:
        if isinstance(handler, TableRotatingHandler):
            now = datetime.now()
            separator = (
                f"| **---** | **{icon}** | `{now.strftime('%Y-%m-%d')}` | **`{now.strftime('%I:%M:%S %p')}`** | **SESSION** | "
                f"**{text}** |\n"
            )
            if handler.stream is None:
                handler.stream = handler._open()
            handler.stream.write(separator)
            handler.stream.flush()
            break


_session_started = False

def log_session_start():
    """Write a session separator row once per process, matching the single end row."""
    global _session_started
    if _session_started:
        return
    _session_started = True

    _setup_root_logger()
    _write_separator("🚀", "Freely Bootstrap Log — Session Start")


_session_ended = False

def log_session_end():
    """Write a session end marker row. Guarded against duplicate calls."""
    global _session_ended
    if _session_ended:
        return
    _session_ended = True

    _setup_root_logger()
    _write_separator("🏁", "Session closed")
