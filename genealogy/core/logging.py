"""Process-wide logging setup."""

from __future__ import annotations

import logging

from genealogy.core.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
        ],
    )


__all__ = ["LOG_FORMAT", "configure_logging"]
