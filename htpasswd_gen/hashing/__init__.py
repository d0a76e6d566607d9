# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing and verification."""

from ._bcrypt_hasher import BcryptHasher
from ._sha512_hasher import Sha512Hasher
from .dispatcher import (
    PasswordHasherDispatcher,
    hash_password,
    verify_password,
)
from .protocol import Hasher, Secret

password_hasher: Hasher = PasswordHasherDispatcher()

__all__ = [
    "password_hasher",
    "hash_password",
    "verify_password",
    "BcryptHasher",
    "Hasher",
    "PasswordHasherDispatcher",
    "Secret",
    "Sha512Hasher",
]
