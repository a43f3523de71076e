"""Console logging for the mies command."""

from __future__ import annotations

import logging

LOG_FORMAT = "[%(asctime)s %(levelname).3s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr at DEBUG when ``verbose`` else INFO."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        force=True,
    )


__all__ = ["configure_logging"]
