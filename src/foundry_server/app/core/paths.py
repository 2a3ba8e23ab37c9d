"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Filesystem path constants and Foundry VTT install layout resolution
(leaf module, no app-level imports).
"""

import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent.parent

DEFAULT_APPLICATION_DIR = "/foundryvtt"
DEFAULT_DATA_DIR = "/foundrydata"

SCRIPT_NAME = "main.js"


def resolve_foundry_script_path(app_dir: str | Path) -> Path:
    """Resolve the path to the Foundry VTT main.js script.

    Older releases nest the script under ``resources/app``; that layout is
    tried first so in-place upgrades keep working. Newer releases keep it at
    the top of the install, and that path is returned even when it does not
    exist so the caller fails on it downstream.
    """
    base = Path(app_dir)

    legacy_path = base / "resources" / "app" / SCRIPT_NAME
    if legacy_path.exists():
        LOGGER.debug("Using legacy Foundry VTT path: %s", legacy_path)
        return legacy_path

    current_path = base / SCRIPT_NAME
    LOGGER.debug("Using current Foundry VTT path: %s", current_path)
    return current_path
