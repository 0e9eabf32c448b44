"""Logging setup for the pathfinder package."""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_file: Optional[str] = None, level: int = logging.INFO) -> None:
    """
    Configure the root logger.

    Args:
        log_file: Write to this file (overwritten each run) instead of stderr
        level: Logging level for the root logger
    """
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        logging.basicConfig(
            filename=log_file,
            filemode="w",
            level=level,
            format=LOG_FORMAT,
            force=True,
        )
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

    logging.getLogger(__name__).debug("Logging initialized")
