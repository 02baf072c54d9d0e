"""Shared logging helpers for placekeeper."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "PLACEKEEPER_LOG_LEVEL"


def get_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``PLACEKEEPER_LOG_LEVEL`` or ``default``."""

    name = os.getenv(LOG_LEVEL_ENV_VAR)
    if not name or not name.strip():
        return default
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        return default
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with a terse format suitable for CLI output.

    When ``level`` is omitted the environment override is consulted before falling
    back to INFO. Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
