# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Configuration module."""

from ._common import ENV_PREFIX
from .settings import HtpasswdSettings, get_settings

__all__ = ["ENV_PREFIX", "HtpasswdSettings", "get_settings"]
