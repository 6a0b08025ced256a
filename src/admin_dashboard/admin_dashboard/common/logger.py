"""Logging setup shared by every module.

Modules do ``logger = get_logger(__name__)``; ``create_app`` calls
``setup_logging`` with the LOG_LEVEL setting.
"""
import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    """Install the console handler once; later calls only change the level."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
