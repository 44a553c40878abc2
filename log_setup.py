"""
Logging setup.

Configures the root logger once and hands out loggers namespaced under
``retirement``.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from config import LOG_LEVEL

ROOT_NAME = "retirement"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application-wide logging.

    Idempotent: if the root logger already has handlers (Streamlit, pytest's
    caplog, a second call) nothing is attached again.
    """
    level_name = (level or LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.setLevel(log_level)
        root_logger.addHandler(console_handler)

    logging.getLogger(ROOT_NAME).setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``retirement`` namespace for ``name``."""
    setup_logging()
    return logging.getLogger(f"{ROOT_NAME}.{name}")
