# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Common configuration constants and functions."""

from pathlib import Path
from typing import Any, Optional

ENV_PREFIX = "HTPASSWD_GEN_"
MAX_FILE_MODE = 0o7777


def get_dot_env_path() -> Path:
    """Get the path of the optional .env file.

    Returns
    -------
    Path
        The .env file in the current working directory
    """
    return Path.cwd() / ".env"


def parse_file_mode(value: Any) -> Optional[int]:
    """Parse a file mode.

    Parameters
    ----------
    value : Any
        An int, or an octal string such as ``"640"``, ``"0640"``
        or ``"0o640"``.

    Returns
    -------
    Optional[int]
        The file mode, None if the value is empty.

    Raises
    ------
    ValueError
        If the value is not a valid file mode.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid file mode: {value!r}")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        mode = int(value, 8)
    else:
        mode = int(value)
    if not 0 <= mode <= MAX_FILE_MODE:
        raise ValueError(f"Invalid file mode: {oct(mode)}")
    return mode
