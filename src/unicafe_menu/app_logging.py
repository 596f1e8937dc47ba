"""Logging configuration helpers."""

import logging


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Configure the ``unicafe_menu`` logger with one stderr handler.

    ``level`` comes from ``Settings.log_level``; ``--verbose`` passes DEBUG.
    Repeated calls only update the level, and stdout stays reserved for menus.
    """
    logger = logging.getLogger("unicafe_menu")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
