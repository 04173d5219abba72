# File: users_api/core/logging_config.py

import logging

from users_api.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Set up root logging for the API process.

    Uvicorn installs its own handlers for its loggers; this only covers
    the users_api.* loggers that would otherwise have no handler.
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
