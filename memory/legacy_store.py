"""
Legacy Store Migration - pluely.db → freely.db

Runs before the SQL store opens its connection. Renames only when:
  - pluely.db exists, AND
  - freely.db does NOT exist yet (never clobber a fresh install)

Failures are logged and swallowed. A missed migration leaves the user
with a fresh, empty store; a crash would leave them with no app.
"""

import os
import sqlite3
from pathlib import Path

from app_config import DB_NAME, LEGACY_DB_NAME, PathResolutionError, app_data_dir
from logger_config import get_logger
logger = get_logger(__name__)


def migrate_legacy_db(data_dir=None) -> bool:
    """
    Rename the legacy database to its current name, at most once.

    Args:
        data_dir: Directory holding the databases. Resolved from the
                  host (app_data_dir) when omitted.

    Returns:
        True if a rename happened, False otherwise (including on failure).
    """
    if data_dir is None:
        try:
            data_dir = app_data_dir()
        except PathResolutionError as e:
            logger.warning(f"Could not resolve app data directory for legacy migration: {e}")
            return False

    old_path = Path(data_dir) / LEGACY_DB_NAME
    new_path = Path(data_dir) / DB_NAME

    try:
        if not old_path.exists():
            logger.debug(f"No {LEGACY_DB_NAME} in {data_dir} - nothing to migrate")
            return False
        if new_path.exists():
            logger.debug(f"{DB_NAME} already present - leaving {LEGACY_DB_NAME} in place")
            return False
    except OSError as e:
        logger.warning(f"Could not check {data_dir} for {LEGACY_DB_NAME}: {e}")
        return False

    try:
        os.rename(old_path, new_path)
    except OSError as e:
        logger.error(f"Failed to rename {LEGACY_DB_NAME} → {DB_NAME}: {e}")
        return False

    logger.info(f"Migrated {LEGACY_DB_NAME} → {DB_NAME}")
    return True


def open_store(data_dir=None) -> sqlite3.Connection:
    """
    Migrate the legacy file if needed, then open freely.db.

    Schema setup belongs to the caller; this only hands back the connection.
    Unlike the migration, failing to resolve or create the directory raises.
    """
    if data_dir is None:
        data_dir = app_data_dir()
    migrate_legacy_db(data_dir)

    os.makedirs(data_dir, exist_ok=True)
    db_path = os.path.join(data_dir, DB_NAME)
    conn = sqlite3.connect(db_path, check_same_thread=False)
    logger.info(f"Store opened - {db_path}")
    return conn
