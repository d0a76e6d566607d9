# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Logging configuration module.

The library itself only emits records; applications that want them on
stderr can call ``configure_logging``.
"""

import logging.config
import os
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple, get_args

ENV_PREFIX = "HTPASSWD_GEN_"
LOGGER_NAME = "htpasswd_gen"


class LogLevel(str, Enum):
    """The log level type."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


LogLevelType = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
"""Possible log levels."""


# fmt: off
def get_logging_config(log_level: str) -> Dict[str, Any]:
    """Get logging config dict.

    Parameters
    ----------
    log_level : str
        The log level

    Returns
    -------
    Dict[str, Any]
        The logging config dict, for ``logging.config.dictConfig``
    """
    # skip spamming logs from these modules
    modules_to_have_level_warning = [
        "passlib",
    ]
    logging_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(levelname)s %(asctime)s.%(msecs)03d [%(name)s:%(filename)s:%(lineno)d] %(message)s",  # pylint: disable=line-too-long # noqa: E501
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {},
    }
    logging_config["loggers"][LOGGER_NAME] = {
        "handlers": ["default"],
        "level": log_level,
        "propagate": False,
    }
    for module in modules_to_have_level_warning:
        logging_config["loggers"][module] = {
            "handlers": ["default"],
            "level": "WARNING",
            "propagate": False,
        }
    return logging_config
# fmt: on


# pyright: reportInvalidTypeForm=false
def get_log_level() -> LogLevelType:
    """Get the default log level.

    Returns
    -------
    LogLevelType
        The level from HTPASSWD_GEN_LOG_LEVEL, INFO if unset or invalid
    """
    possible_log_levels: Tuple[LogLevelType, ...] = get_args(LogLevelType)
    from_env = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").strip().upper()
    if from_env in possible_log_levels:
        return from_env  # type: ignore[return-value]
    return "INFO"


def configure_logging(log_level: Optional[str] = None) -> None:
    """Send the library's log records to stderr.

    Parameters
    ----------
    log_level : Optional[str], optional
        The log level, by default the configured one
        (``HTPASSWD_GEN_LOG_LEVEL``, ``INFO`` if unset).
    """
    if log_level is None:
        log_level = get_log_level()
    logging.config.dictConfig(get_logging_config(log_level.upper()))
