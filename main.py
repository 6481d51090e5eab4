import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Initialize logging FIRST, before any other imports that log on load
from logger_config import get_logger, log_session_start
logger = get_logger(__name__)

from app_config import ConfigError
from agent.claude_config import ensure_config_dir, init_claude_config
from memory.legacy_store import migrate_legacy_db


@dataclass
class StartupReport:
    config_dir: Optional[Path]
    migrated: bool


def bootstrap(local_data_dir=None, data_dir=None) -> StartupReport:
    """
    Startup sequence, run once before the UI and the SQL store come up.

    1. Legacy store migration (never fails)
    2. Seed the .claude config directory (failure is logged, startup continues)
    """
    log_session_start()

    migrated = migrate_legacy_db(data_dir)

    config_dir = None
    try:
        if local_data_dir is None:
            config_dir = init_claude_config()
        else:
            config_dir = ensure_config_dir(local_data_dir)
    except ConfigError as e:
        logger.error(f"Claude config init failed: {e}")

    logger.info(f"Startup complete - config_dir={config_dir} migrated={migrated}")
    return StartupReport(config_dir=config_dir, migrated=migrated)


def main():
    report = bootstrap()
    print("Freely")
    if report.config_dir is None:
        print("   >> Agent config unavailable (see log).")
        sys.exit(1)
    print(f"   >> Agent config: {report.config_dir}")
    if report.migrated:
        print("   >> Migrated pluely.db → freely.db")


if __name__ == "__main__":
    main()
