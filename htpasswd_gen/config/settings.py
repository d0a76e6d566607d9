# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""htpasswd_gen settings module.

Environment variables (with prefix HTPASSWD_GEN_)
-------------------------------------------------
LOG_LEVEL (str) # default: INFO
FILE_MODE (octal str) # default: unset, keep the process umask
"""

from functools import lru_cache
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .._logging import LogLevelType
from ._common import ENV_PREFIX, get_dot_env_path, parse_file_mode


class HtpasswdSettings(BaseSettings):
    """Settings class."""

    log_level: LogLevelType = "INFO"
    # permissions of written htpasswd files, e.g. 0o640
    file_mode: Optional[int] = None

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any) -> Any:
        """Validate the log level.

        Parameters
        ----------
        value : Any
            The log level

        Returns
        -------
        Any
            The upper-cased log level
        """
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("file_mode", mode="before")
    @classmethod
    def validate_file_mode(cls, value: Any) -> Optional[int]:
        """Validate the file mode.

        Parameters
        ----------
        value : Any
            The file mode, an int or an octal string

        Returns
        -------
        Optional[int]
            The file mode
        """
        return parse_file_mode(value)

    @classmethod
    def load(cls) -> "HtpasswdSettings":
        """Load the settings.

        Returns
        -------
        HtpasswdSettings
            The settings instance
        """
        dot_env_path = get_dot_env_path()
        if dot_env_path.exists():
            load_dotenv(dot_env_path, override=False)
        return cls()


@lru_cache(maxsize=1)
def get_settings() -> HtpasswdSettings:
    """Get the process-wide settings.

    Returns
    -------
    HtpasswdSettings
        The settings, loaded on first use
    """
    return HtpasswdSettings.load()
