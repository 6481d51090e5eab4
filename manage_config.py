"""
Config Management Utility - manage_config.py

Inspect and edit the Claude agent config that Freely seeds on startup.

Usage:
    python manage_config.py init            # Seed .claude/ and print its path
    python manage_config.py show [name]     # Print CLAUDE.md (or another resource)
    python manage_config.py update <file>   # Replace CLAUDE.md ('-' reads stdin)
    python manage_config.py settings        # Show allowed/denied permissions
    python manage_config.py commands        # List custom slash commands
    python manage_config.py reset <name>    # Restore a resource to its default
    python manage_config.py migrate         # Run the pluely.db → freely.db migration
    python manage_config.py paths           # Show resolved directories
"""

import sys

from app_config import (
    CLAUDE_MD,
    DB_NAME,
    LEGACY_DB_NAME,
    ConfigError,
    app_data_dir,
    app_local_data_dir,
)
from agent.claude_config import (
    DEFAULT_RESOURCES,
    config_dir_for,
    ensure_config_dir,
    list_commands,
    read_resource,
    read_settings,
    restore_default,
    write_resource,
)
from memory.legacy_store import migrate_legacy_db
from logger_config import get_logger
logger = get_logger(__name__)


def _banner(title: str):
    print("=" * 70)
    print(title)
    print("=" * 70)


def init_config():
    config_dir = ensure_config_dir(app_local_data_dir())
    print(f"[OK] Config directory ready: {config_dir}")


def show_resource(name: str = CLAUDE_MD):
    content = read_resource(app_local_data_dir(), name)
    print(content, end="" if content.endswith("\n") else "\n")


def update_instructions(source: str):
    if source == "-":
        content = sys.stdin.read()
    else:
        try:
            with open(source, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"[Error] Could not read {source}: {e}")
            sys.exit(1)

    write_resource(app_local_data_dir(), CLAUDE_MD, content)
    print(f"[OK] {CLAUDE_MD} updated ({len(content)} chars)")


def show_settings():
    _banner("AGENT PERMISSIONS")
    settings = read_settings(app_local_data_dir())
    permissions = settings.get("permissions") or {}

    for key in ("allow", "deny"):
        rules = permissions.get(key) or []
        print(f"\n[{key}] {len(rules)} rule(s)")
        for rule in rules:
            print(f"    - {rule}")
    print()


def show_commands():
    _banner("CUSTOM COMMANDS")
    names = list_commands(app_local_data_dir())
    if not names:
        print("\nNo custom commands found.")
        return
    print()
    for name in names:
        print(f"  /{name[:-3]}  ({name})")


def reset_resource(name: str):
    if name not in DEFAULT_RESOURCES:
        print(f"[Error] No default for {name}. Use: {', '.join(DEFAULT_RESOURCES)}")
        sys.exit(1)

    confirm = input(f"Overwrite {name} with the default? Your edits will be lost. (yes/no): ")
    if confirm.lower() not in ["yes", "y"]:
        print("Reset cancelled.")
        return

    restore_default(app_local_data_dir(), name)
    print(f"[OK] {name} restored to default")


def run_migration():
    if migrate_legacy_db():
        print(f"[OK] Migrated {LEGACY_DB_NAME} → {DB_NAME}")
    else:
        print("Nothing migrated (see log for details).")


def show_paths():
    _banner("FREELY PATHS")
    local_dir = app_local_data_dir()
    data_dir = app_data_dir()
    print(f"\n  app_local_data_dir : {local_dir}")
    print(f"  agent config       : {config_dir_for(local_dir)}")
    print(f"  app_data_dir       : {data_dir}")
    print(f"  store              : {data_dir / DB_NAME}")
    print()


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    command = sys.argv[1].lower()
    args = sys.argv[2:]

    try:
        if command == "init":
            init_config()
        elif command == "show":
            show_resource(args[0] if args else CLAUDE_MD)
        elif command == "update":
            if not args:
                print("[Error] Please specify a file (or '-' for stdin)")
                print("Usage: python manage_config.py update <file>")
                sys.exit(1)
            update_instructions(args[0])
        elif command == "settings":
            show_settings()
        elif command == "commands":
            show_commands()
        elif command == "reset":
            if not args:
                print("[Error] Please specify a resource to reset")
                print("Usage: python manage_config.py reset <name>")
                sys.exit(1)
            reset_resource(args[0])
        elif command == "migrate":
            run_migration()
        elif command == "paths":
            show_paths()
        else:
            print(f"[Error] Unknown command: {command}")
            print("Use: init, show, update, settings, commands, reset, migrate, or paths")
            sys.exit(1)
    except ConfigError as e:
        logger.error(f"manage_config {command} failed: {e}")
        print(f"[Error] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
