"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.
"""

import argparse
import logging
from typing import Optional

import uvicorn

from common import logging_config
from foundry_server.app.core.config import Settings
from foundry_server.app.main import create_app

LOGGER = logging.getLogger("launch_server")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Command line options for the API server"""
    parser = argparse.ArgumentParser(description="Foundry VTT management server")
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to start server (defaults to FOUNDRY_SERVER_PORT)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (defaults to FOUNDRY_LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    """Configure logging, build settings once and serve the app."""
    args = parse_args(argv)
    settings = Settings()
    logging_config.configure_logging(args.log_level or settings.log_level)

    port = args.port or settings.server_port
    LOGGER.info("API Server Using port: %i", port)

    uvicorn.run(
        create_app(settings),
        host="0.0.0.0",
        port=port,
        timeout_graceful_shutdown=5,
        log_config=None,
    )


if __name__ == "__main__":
    main()
