# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Test the package version."""

import re
from importlib.metadata import PackageNotFoundError, version

import pytest

import htpasswd_gen
from htpasswd_gen._version import __version__

# final, pre and dev releases as written by hand in _version.py
VERSION_RE = re.compile(r"^\d+\.\d+\.\d+(?:(?:a|b|rc)\d+)?(?:\.dev\d+)?$")


def test_version_format() -> None:
    """Test __version__ is a plain release number."""
    assert VERSION_RE.match(__version__)
    assert __version__ != "0.0.0"


def test_version_exported() -> None:
    """Test the package exposes its version."""
    assert htpasswd_gen.__version__ == __version__
    assert "__version__" in htpasswd_gen.__all__


def test_version_matches_distribution() -> None:
    """Test the installed distribution reports the same version."""
    try:
        installed = version("htpasswd-gen")
    except PackageNotFoundError:
        pytest.skip("htpasswd-gen is not installed")
    assert installed == __version__
