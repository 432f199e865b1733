"""Logger helper for the bdrate package."""

from __future__ import annotations

import logging
import os
from typing import Final, Optional

# Optional environment override; otherwise levels and handlers are left to
# the application (NOTSET defers to the parent logger)
_LEVEL_NAME: Final[Optional[str]] = os.getenv("BDRATE_LOG_LEVEL")
_PACKAGE_LOGGER_LEVEL: Final[int] = (
    getattr(logging, _LEVEL_NAME.upper(), logging.NOTSET) if _LEVEL_NAME else logging.NOTSET
)


def get_logger(name: str) -> logging.Logger:
    """Return a module-level logger without altering global handlers."""
    logger = logging.getLogger(name)
    if _PACKAGE_LOGGER_LEVEL != logging.NOTSET:
        logger.setLevel(_PACKAGE_LOGGER_LEVEL)
    return logger
