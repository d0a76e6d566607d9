# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pyright: reportUnknownMemberType=false,reportUnknownVariableType=false

"""SHA-512-crypt password hasher."""

from dataclasses import dataclass, field
from typing import Any

from passlib.hash import (  # type: ignore[import-untyped, unused-ignore]
    sha512_crypt,
)

from ..algorithms import (
    SHA512_DEFAULT_ROUNDS,
    SHA512_MAX_ROUNDS,
    SHA512_MIN_ROUNDS,
)
from ..errors import HashingError
from .protocol import Secret

SHA512_PREFIX = "$6$"


@dataclass(frozen=True)
class Sha512Hasher:
    """SHA-512-crypt hasher.

    Every call to ``hash`` draws a fresh random salt of the maximum length
    (16 characters). The ``rounds=`` clause is left out of the hash when
    the rounds equal the crypt(3) default of 5000.
    """

    _handler: Any = field(init=False, repr=False, compare=False)

    rounds: int = SHA512_DEFAULT_ROUNDS

    def __post_init__(self) -> None:
        if not SHA512_MIN_ROUNDS <= self.rounds <= SHA512_MAX_ROUNDS:
            raise HashingError(
                f"Invalid sha512-crypt rounds {self.rounds}: expected a value "
                f"between {SHA512_MIN_ROUNDS} and {SHA512_MAX_ROUNDS}"
            )
        try:
            handler = sha512_crypt.using(rounds=self.rounds)
        except ValueError as error:
            raise HashingError(f"sha512-crypt error: {error}") from error
        object.__setattr__(self, "_handler", handler)

    def hash(self, plain: Secret) -> str:
        """Hash password using SHA-512-crypt.

        Parameters
        ----------
        plain : Secret
            The plain secret to hash.

        Returns
        -------
        str
            The hashed secret, ``$6$[rounds=<n>$]<salt>$<digest>``.

        Raises
        ------
        HashingError
            If the password is rejected (e.g. it contains NUL bytes).
        """
        try:
            return str(self._handler.hash(plain))
        except (TypeError, ValueError) as error:
            raise HashingError(f"sha512-crypt error: {error}") from error

    @staticmethod
    def verify(plain: Secret, stored: str) -> bool:
        """Verify password against SHA-512-crypt hash.

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
        if not stored.startswith(SHA512_PREFIX):
            return False
        try:
            return bool(sha512_crypt.verify(plain, stored))
        except (TypeError, ValueError):
            # malformed hash or a password the scheme cannot represent
            return False


__all__ = ["Sha512Hasher", "SHA512_PREFIX"]
