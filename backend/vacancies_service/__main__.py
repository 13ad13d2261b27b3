"""Run the service with uvicorn: ``python -m vacancies_service``."""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from vacancies_service.config import get_settings
from vacancies_service.main import create_app

logger = logging.getLogger("vacancies_service")


def main() -> None:
    try:
        settings = get_settings()
    except (ValidationError, ValueError) as e:
        # ValueError covers a config.json that is not valid JSON.
        logging.basicConfig(level=logging.INFO)
        logger.error("Failed to load configuration: %s", e)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server starting on %s:%d", settings.server_host, settings.server_port)

    uvicorn.run(
        create_app(settings),
        host=settings.server_host,
        port=settings.server_port,
        timeout_keep_alive=settings.request_timeout,
        log_level=settings.log_level.lower(),
        lifespan="on",
    )


if __name__ == "__main__":
    main()
