# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Generate Apache htpasswd files with bcrypt or SHA-512-crypt hashes."""

import logging

from ._version import __version__
from .algorithms import (
    Algorithm,
    Bcrypt,
    BcryptDefault,
    BcryptMinCost,
    Sha512,
    Sha512Default,
    Sha512MinRounds,
)
from .errors import HashingError, HtpasswdError
from .htpasswd import Htpasswd

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Algorithm",
    "Bcrypt",
    "BcryptDefault",
    "BcryptMinCost",
    "HashingError",
    "Htpasswd",
    "HtpasswdError",
    "Sha512",
    "Sha512Default",
    "Sha512MinRounds",
]
