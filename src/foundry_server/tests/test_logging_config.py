"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Tests for common.logging_config.
"""

import logging

import pytest

from common import logging_config
from common._version import __version__

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Keep the root logger as pytest configured it."""
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def test_explicit_level(monkeypatch):
    """An explicit level wins over the environment."""
    monkeypatch.setenv("FOUNDRY_LOG_LEVEL", "ERROR")
    logging_config.configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG


def test_level_from_env(monkeypatch):
    """FOUNDRY_LOG_LEVEL is used when no level is passed."""
    monkeypatch.setenv("FOUNDRY_LOG_LEVEL", "WARNING")
    logging_config.configure_logging()
    assert logging.getLogger().level == logging.WARNING


def test_default_level(monkeypatch):
    """INFO is the fallback level."""
    monkeypatch.delenv("FOUNDRY_LOG_LEVEL", raising=False)
    logging_config.configure_logging()
    assert logging.getLogger().level == logging.INFO


def test_version_injected():
    """Records passing through the console handler carry the package version."""
    logging_config.configure_logging("INFO")
    handler = logging.getLogger().handlers[0]
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)

    assert handler.filter(record)
    assert record.__version__ == __version__
    assert f"(v{__version__})" in handler.format(record)
