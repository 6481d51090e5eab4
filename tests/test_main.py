"""
TEST: main.py — startup bootstrap

What we're testing:
    - bootstrap() migrates the legacy store and seeds .claude/
    - A seeding failure is logged and startup still completes
    - Host-resolved directories are used when none are passed

How to run:
    pytest tests/test_main.py -v
"""

from main import bootstrap


def test_bootstrap_seeds_and_migrates(tmp_path):
    local_dir = tmp_path / "local"
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "pluely.db").write_bytes(b"legacy")

    report = bootstrap(local_data_dir=local_dir, data_dir=data_dir)

    assert report.config_dir == local_dir / ".claude"
    assert (report.config_dir / "CLAUDE.md").is_file()
    assert report.migrated is True
    assert (data_dir / "freely.db").read_bytes() == b"legacy"


def test_bootstrap_survives_config_failure(tmp_path):
    blocked = tmp_path / "blocked"
    blocked.write_text("a file, not a directory", encoding="utf-8")

    report = bootstrap(local_data_dir=blocked, data_dir=tmp_path)

    assert report.config_dir is None
    assert report.migrated is False


def test_bootstrap_uses_host_dirs(tmp_path, monkeypatch):
    monkeypatch.setenv("FREELY_LOCAL_DATA_DIR", str(tmp_path / "local"))
    monkeypatch.setenv("FREELY_DATA_DIR", str(tmp_path / "data"))

    report = bootstrap()

    assert report.config_dir == tmp_path / "local" / ".claude"
    assert report.migrated is False


def test_bootstrap_survives_unusable_data_dir(tmp_path):
    report = bootstrap(local_data_dir=tmp_path / "local", data_dir=tmp_path / ("x" * 300))

    assert report.migrated is False
    assert report.config_dir == tmp_path / "local" / ".claude"


def test_repeated_bootstrap_writes_one_session_start(tmp_path):
    import logger_config

    def _starts():
        with open(logger_config.LOG_FILE, encoding="utf-8") as f:
            return f.read().count("Session Start")

    bootstrap(local_data_dir=tmp_path / "local", data_dir=tmp_path)
    after_first = _starts()
    bootstrap(local_data_dir=tmp_path / "local", data_dir=tmp_path)

    assert _starts() == after_first
