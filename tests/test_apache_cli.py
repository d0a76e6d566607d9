# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=missing-param-doc

"""Check written files with the Apache htpasswd command line tool."""

import shutil
import subprocess  # nosemgrep # nosec
from pathlib import Path

import pytest

from htpasswd_gen import BcryptMinCost, Htpasswd
from htpasswd_gen.config import HtpasswdSettings

HTPASSWD_CLI = shutil.which("htpasswd")

pytestmark = pytest.mark.skipif(
    HTPASSWD_CLI is None, reason="the htpasswd command is not installed"
)


def _cli_verifies(path: Path, username: str, password: str) -> bool:
    """Run ``htpasswd -bv`` on the file."""
    assert HTPASSWD_CLI is not None
    result = subprocess.run(  # nosemgrep # nosec
        [HTPASSWD_CLI, "-bv", str(path), username, password],
        capture_output=True,
        check=False,
    )
    return result.returncode == 0


def test_verifies_bcrypt_min_cost(tmp_path: Path) -> None:
    """Test a minimum cost bcrypt entry verifies with the CLI."""
    htpasswd = Htpasswd(HtpasswdSettings())
    htpasswd.set_with(BcryptMinCost(), "a", "b")
    path = tmp_path / "passwords"
    htpasswd.write_to_path(path)

    assert _cli_verifies(path, "a", "b")
    assert not _cli_verifies(path, "a", "wrong")


def test_verifies_multiple(tmp_path: Path) -> None:
    """Test several default bcrypt entries verify with the CLI."""
    htpasswd = Htpasswd(HtpasswdSettings())
    htpasswd.set("foo", "bar")  # nosemgrep # nosec
    htpasswd.set("qux", "baz")  # nosemgrep # nosec
    path = tmp_path / "passwords"
    htpasswd.write_to_path(path)

    assert _cli_verifies(path, "foo", "bar")
    assert _cli_verifies(path, "qux", "baz")
    assert not _cli_verifies(path, "foo", "baz")
    assert not _cli_verifies(path, "nobody", "bar")
