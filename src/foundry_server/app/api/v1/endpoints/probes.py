"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.
"""
# spell-checker:ignore noauth

import logging

from fastapi import APIRouter, Depends, Response, status

from common._version import __version__
from foundry_server.app.api.deps import get_settings
from foundry_server.app.api.v1.schemas.probes import ProbeResponse, StatusResponse
from foundry_server.app.core.config import Settings
from foundry_server.app.core.process import LaunchFailure, execute

LOGGER = logging.getLogger(__name__)

noauth = APIRouter()
auth = APIRouter()


@noauth.get("/liveness", response_model=ProbeResponse)
async def liveness_probe():
    """Kubernetes liveness probe"""
    return {"status": "alive"}


@noauth.get("/readiness", response_model=ProbeResponse)
def readiness_probe(response: Response, settings: Settings = Depends(get_settings)):
    """Kubernetes readiness probe; ready once the Foundry VTT script is in place"""
    if not settings.foundry_script_path.exists():
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "not ready"}
    return {"status": "ready"}


@auth.get("/status", response_model=StatusResponse)
def get_status(settings: Settings = Depends(get_settings)):
    """Return application version, resolved paths and Node.js runtime version."""
    node_version = None
    try:
        result = execute(settings.node_binary, ["--version"])
        if result.ok:
            node_version = result.stdout.strip() or None
        else:
            LOGGER.debug("%s --version exited with %i", settings.node_binary, result.returncode)
    except LaunchFailure as ex:
        LOGGER.warning("Unable to query Node.js version: %s", ex)

    return {
        "version": __version__,
        "status": "ok",
        "application_dir": str(settings.application_dir),
        "data_dir": str(settings.data_dir),
        "foundry_script_path": str(settings.foundry_script_path),
        "node_version": node_version,
    }
