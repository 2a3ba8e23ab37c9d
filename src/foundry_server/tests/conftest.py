"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.
"""
# spell-checker: disable
# pylint: disable=redefined-outer-name

import pytest
from fastapi.testclient import TestClient

from foundry_server.app.core.config import Settings
from foundry_server.app.main import create_app

ENV_KEYS = (
    "APPLICATION_DIR",
    "DATA_DIR",
    "FOUNDRY_ENV",
    "FOUNDRY_SERVER_URL_PREFIX",
    "FOUNDRY_SERVER_PORT",
    "FOUNDRY_LOG_LEVEL",
    "FOUNDRY_API_KEY",
    "FOUNDRY_NODE_BINARY",
)

TEST_API_KEY = "test-secret"


@pytest.fixture
def make_settings(monkeypatch):
    """Build Settings from a clean environment plus optional overrides (no .env file)."""

    def _make(env_vars: dict | None = None, **kwargs) -> Settings:
        for key in ENV_KEYS:
            monkeypatch.delenv(key, raising=False)
        if env_vars:
            for key, value in env_vars.items():
                monkeypatch.setenv(key, value)
        kwargs.setdefault("_env_file", None)
        return Settings(**kwargs)

    return _make


@pytest.fixture
def app_client(make_settings):
    """Build a TestClient around an app created with explicit Settings."""

    def _make(env_vars: dict | None = None, **kwargs) -> TestClient:
        kwargs.setdefault("api_key", TEST_API_KEY)
        return TestClient(create_app(make_settings(env_vars, **kwargs)))

    return _make


@pytest.fixture
def auth_headers():
    """Headers carrying the API key used by app_client."""
    return {"X-API-Key": TEST_API_KEY}


@pytest.fixture
def legacy_install(tmp_path):
    """Application root using the older resources/app layout."""
    script = tmp_path / "resources" / "app" / "main.js"
    script.parent.mkdir(parents=True)
    script.write_text("// old main.js", encoding="utf-8")
    return tmp_path


@pytest.fixture
def current_install(tmp_path):
    """Application root with main.js at the top level."""
    (tmp_path / "main.js").write_text("// new main.js", encoding="utf-8")
    return tmp_path
