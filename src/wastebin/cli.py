"""Process entry point: resolve configuration, then serve."""

from __future__ import annotations

import logging
import sys

import uvicorn
from pydantic import ValidationError

from wastebin.config import WastebinEnvironment, resolve_settings
from wastebin.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Route wastebin and uvicorn logs through the root logger."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def main() -> int:
    """
    Resolve the startup configuration and run the server.

    Returns a non-zero exit status without binding a socket when any
    setting fails to resolve.
    """
    try:
        environment = WastebinEnvironment()
    except ValidationError as e:
        configure_logging()
        logger.error(f"invalid environment: {e}")
        return 1

    configure_logging(environment.log_level)

    try:
        settings = resolve_settings(environment.to_inputs())
    except ConfigurationError as e:
        logger.error(e.message)
        return 1

    from wastebin.api.app import create_app

    app = create_app(settings)
    logger.info(f"Listening on {settings.address}")
    uvicorn.run(
        app,
        host=str(settings.address.host),
        port=settings.address.port,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
