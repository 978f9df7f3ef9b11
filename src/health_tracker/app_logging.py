"""Logging setup for the health tracker API and its background reads."""

import logging


def configure_logging(level: int = logging.INFO) -> None:
    """Attach one stderr handler to the `health_tracker` logger.

    Repeated calls only adjust the level.
    """
    logger = logging.getLogger("health_tracker")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
