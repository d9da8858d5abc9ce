"""Logging setup shared by the helpers and the CLI."""
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"

_handler = None


def setup_logging(level: str = "INFO") -> None:
    """
    Attach a single stdout handler to the package logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
    """
    global _handler
    log_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    package_logger = logging.getLogger("a11y_helpers")
    package_logger.setLevel(log_level)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        package_logger.addHandler(_handler)
    _handler.setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
