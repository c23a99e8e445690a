"""Logging configuration."""

import logging

from finledger.config.settings import get_settings


def setup_logging() -> None:
    """Configure application logging.

    Log records go to a file under the data directory so they do not
    interleave with the console menu.
    """
    settings = get_settings()
    log_file = settings.get_log_dir() / "finledger.log"

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(log_file, encoding="utf-8")],
    )
