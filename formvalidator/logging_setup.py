"""Central logging configuration for the form validator.

Applies a root stdout handler so all module loggers emit through one place
without per-module setup. Avoids duplicate handlers when called repeatedly.
"""
from __future__ import annotations
import logging
from logging.config import dictConfig
from typing import Optional

_DICT_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        }
    },
    "root": {"level": "INFO", "handlers": ["console"]},
    "loggers": {
        "formvalidator": {"level": "INFO", "handlers": ["console"], "propagate": False},
    },
}


def configure_logging(level: Optional[str] = None) -> None:
    """Configure package-wide logging once.

    If the root logger already has handlers, return to prevent duplicate output.
    `level` defaults to the configured `log_level`.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    if level is None:
        from formvalidator.config import load_config

        level = load_config().log_level
    config = dict(_DICT_CONFIG)
    config["loggers"] = {
        "formvalidator": {"level": level, "handlers": ["console"], "propagate": False},
    }
    dictConfig(config)
