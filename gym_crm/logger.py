import logging

from gym_crm.config import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_configured = False


def setup_logging(level: str | None = None) -> None:
    """Attach a console handler to the package logger once."""
    global _configured
    if _configured:
        return

    logger = logging.getLogger("gym_crm")
    logger.setLevel((level or config.LOG_LEVEL).upper())

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(ch)

    _configured = True
    logger.info("Logger configured.")
