# =======================================================================================
# fwe_access/utils/logging_config.py - Structured Logging
# =======================================================================================
import logging
from pythonjsonlogger.json import JsonFormatter
from ..config import config

PACKAGE_LOGGER = "fwe_access"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
RENAMED_FIELDS = {"asctime": "timestamp", "levelname": "level", "name": "logger"}


def _configure_package_logger() -> logging.Logger:
    """One JSON stream handler on the package logger; module loggers propagate to it."""
    root = logging.getLogger(PACKAGE_LOGGER)
    if root.handlers:
        return root

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(
        LOG_FORMAT,
        rename_fields=RENAMED_FIELDS,
        static_fields={"service": "fwe-access"},
    ))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if config.API_DEBUG else config.LOG_LEVEL)
    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """Logger for a module of this package; `extra` fields become JSON keys."""
    _configure_package_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
