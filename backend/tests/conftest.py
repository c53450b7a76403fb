from __future__ import annotations

import os
import tempfile

import pytest

# main builds its app at import time; keep that away from the real home dir
os.environ.setdefault("ALLINONE_TOOLS_CONFIG_DIR", tempfile.mkdtemp(prefix="allinone_tools_"))

from services.config_manager import CONFIG_DIR_ENV, ConfigManager  # noqa: E402


@pytest.fixture()
def config_dir(tmp_path, monkeypatch):
    """Point the config singleton at a fresh per-test directory."""
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    ConfigManager.reset_instance()
    yield tmp_path
    ConfigManager.reset_instance()


@pytest.fixture()
def client(config_dir):
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
