import os
import sys
import tempfile

import pytest

# Keep the bootstrap log out of the source tree while testing.
# Must be set before logger_config is first imported.
os.environ.setdefault("FREELY_LOG_DIR", tempfile.mkdtemp(prefix="freely-logs-"))

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _no_pinned_dirs(monkeypatch):
    """Tests opt in to FREELY_LOCAL_DATA_DIR / FREELY_DATA_DIR explicitly."""
    monkeypatch.delenv("FREELY_LOCAL_DATA_DIR", raising=False)
    monkeypatch.delenv("FREELY_DATA_DIR", raising=False)
