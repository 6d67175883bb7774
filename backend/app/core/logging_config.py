"""Logging setup for the networking CRM backend."""

import logging

from backend.app.core.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    settings = get_settings()
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)
    # SQL echo is controlled by the engine, keep the library logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
