"""Logging setup for simpledate entry points."""

import logging


def configure_logging(*, level: int | str = logging.WARNING, force: bool = False) -> None:
    """Initialise the root logger.

    Library modules only call logging.getLogger(__name__). Pass force=True to
    reconfigure during tests.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
