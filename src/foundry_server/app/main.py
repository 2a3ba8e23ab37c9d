"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

FastAPI application entrypoint.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from common._version import __version__
from foundry_server.app.api.v1.router import router as v1_router
from foundry_server.app.core.config import Settings

LOGGER = logging.getLogger(__name__)

API_PREFIX = "/v1"


#############################################################################
# APP FACTORY
#############################################################################
@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI Lifespan"""
    settings: Settings = app.state.settings
    if settings.api_key_generated:
        LOGGER.warning("FOUNDRY_API_KEY not set; using generated key: %s", settings.api_key)

    LOGGER.info("Application directory: %s", settings.application_dir)
    LOGGER.info("Data directory: %s", settings.data_dir)
    script_path = settings.foundry_script_path
    if script_path.exists():
        LOGGER.info("Foundry VTT script: %s", script_path)
    else:
        LOGGER.warning("Foundry VTT script not found: %s", script_path)
    yield


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application around a single Settings instance."""
    settings = settings or Settings()

    base_path = settings.server_url_prefix.strip("/")
    base_path = f"/{base_path}" if base_path else ""

    fastapi_app = FastAPI(
        title="Foundry VTT Server",
        version=__version__,
        docs_url=f"{API_PREFIX}/docs",
        openapi_url=f"{API_PREFIX}/openapi.json",
        root_path=base_path,
        lifespan=lifespan,
        license_info={
            "name": "Universal Permissive License",
            "url": "http://oss.oracle.com/licenses/upl",
        },
    )
    fastapi_app.state.settings = settings
    fastapi_app.include_router(v1_router, prefix=API_PREFIX)
    return fastapi_app


app = create_app()
