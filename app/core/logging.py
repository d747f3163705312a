import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the root handler once and return the ``backend`` logger."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logger = logging.getLogger("backend")
    logger.setLevel(level.upper())
    return logger
