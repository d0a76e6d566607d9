# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hasher dispatcher supporting the htpasswd hash formats."""

import logging
from typing import Union

from ..algorithms import Algorithm, BcryptDefault, Sha512, resolve
from ..errors import HashingError
from ._bcrypt_hasher import BCRYPT_PREFIXES, BcryptHasher
from ._sha512_hasher import SHA512_PREFIX, Sha512Hasher
from .protocol import Hasher, Secret

LOG = logging.getLogger(__name__)


class PasswordHasherDispatcher(Hasher):
    """Dispatcher that hashes with the chosen algorithm, verifies all formats."""

    def __init__(self, algorithm: Algorithm | None = None) -> None:
        """Initialize the hasher.

        Parameters
        ----------
        algorithm : Algorithm | None, optional
            The algorithm to hash with, by default bcrypt with the
            default cost.
        """
        self.algorithm = resolve(
            algorithm if algorithm is not None else BcryptDefault()
        )

    def _hasher(self) -> Union[BcryptHasher, Sha512Hasher]:
        if isinstance(self.algorithm, Sha512):
            return Sha512Hasher(rounds=self.algorithm.rounds)
        return BcryptHasher(cost=self.algorithm.cost)

    def hash(self, plain: Secret) -> str:
        """Hash with the chosen algorithm.

        Parameters
        ----------
        plain : Secret
            The plain secret to hash.

        Returns
        -------
        str
            The hashed secret.

        Raises
        ------
        HashingError
            If the algorithm parameters are rejected or hashing fails.
        """
        try:
            return self._hasher().hash(plain)
        except HashingError as error:
            LOG.warning("Could not hash with %r: %s", self.algorithm, error)
            raise

    def verify(self, plain: Secret, stored: str) -> bool:
        """Verify against any known format.

        Parameters
        ----------
        plain : Secret
            The plain secret to check.
        stored : str
            The stored hashed secret.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        return verify_password(plain, stored)


def hash_password(algorithm: Algorithm, plain: Secret) -> str:
    """Hash a password with the given algorithm.

    Parameters
    ----------
    algorithm : Algorithm
        The algorithm selection.
    plain : Secret
        The plain secret to hash.

    Returns
    -------
    str
        The hashed secret.
    """
    return PasswordHasherDispatcher(algorithm).hash(plain)


def verify_password(plain: Secret, stored: str) -> bool:
    """Verify a password against a bcrypt or SHA-512-crypt hash.

    Parameters
    ----------
    plain : Secret
        The plain secret to check.
    stored : str
        The stored hashed secret.

    Returns
    -------
    bool
        True if the verification succeeds, False for a mismatch or an
        unsupported format.
    """
    if stored.startswith(SHA512_PREFIX):
        return Sha512Hasher.verify(plain, stored)
    if stored.startswith(BCRYPT_PREFIXES):
        return BcryptHasher.verify(plain, stored)
    # Unknown format
    return False


__all__ = ["PasswordHasherDispatcher", "hash_password", "verify_password"]
