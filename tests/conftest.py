# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import logging
from collections.abc import Generator

import pytest

from htpasswd_gen import Htpasswd
from htpasswd_gen.config import HtpasswdSettings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Do not share cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(name="restore_logging")
def restore_logging_fixture() -> Generator[None, None, None]:
    """Undo logging.config changes made by a test."""
    names = ["htpasswd_gen", "passlib"]
    saved = {}
    for name in names:
        logger = logging.getLogger(name)
        saved[name] = (logger.level, list(logger.handlers), logger.propagate)
    yield
    for name, (level, handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = handlers
        logger.propagate = propagate


@pytest.fixture(name="settings")
def settings_fixture() -> HtpasswdSettings:
    """Settings independent of the environment."""
    return HtpasswdSettings(log_level="INFO", file_mode=None)


@pytest.fixture(name="htpasswd")
def htpasswd_fixture(settings: HtpasswdSettings) -> Htpasswd:
    """An empty table."""
    return Htpasswd(settings)
