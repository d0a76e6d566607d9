# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""bcrypt password hasher, always emitting the ``$2a$`` version tag."""

from dataclasses import dataclass

import bcrypt

from ..algorithms import BCRYPT_DEFAULT_COST, BCRYPT_MAX_COST, BCRYPT_MIN_COST
from ..errors import HashingError
from .protocol import Secret, to_bytes

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
BCRYPT_MAX_PASSWORD_BYTES = 72


def _truncate(plain: Secret) -> bytes:
    # bcrypt originally suffered from a wraparound bug:
    #  http://www.openwall.com/lists/oss-security/2012/01/02/4
    # OpenBSD fixed it by truncating inputs to 72 bytes on the new $2b$
    # prefix and left $2a$ unchanged. Recent pyca/bcrypt releases refuse
    # longer inputs instead, so truncate here like the 2a implementations
    # that read these files do.
    return to_bytes(plain)[:BCRYPT_MAX_PASSWORD_BYTES]


@dataclass(frozen=True)
class BcryptHasher:
    """bcrypt hasher.

    The hash is formatted with the ``2a`` version tag, not the ``2b``
    default of the underlying library: the ``htpasswd`` command line tool
    shipped with macOS does not verify ``2b`` hashes.
    """

    cost: int = BCRYPT_DEFAULT_COST

    def __post_init__(self) -> None:
        if not BCRYPT_MIN_COST <= self.cost <= BCRYPT_MAX_COST:
            raise HashingError(
                f"Invalid bcrypt cost {self.cost}: expected a value "
                f"between {BCRYPT_MIN_COST} and {BCRYPT_MAX_COST}"
            )

    def hash(self, plain: Secret) -> str:
        """Hash password using bcrypt.

        Parameters
        ----------
        plain : Secret
            The plain secret to hash.

        Returns
        -------
        str
            The hashed secret, ``$2a$<cost>$<salt><digest>``.

        Raises
        ------
        HashingError
            If bcrypt rejects the cost or fails.
        """
        try:
            salt = bcrypt.gensalt(rounds=self.cost, prefix=b"2a")
            hashed = bcrypt.hashpw(_truncate(plain), salt)
        except ValueError as error:
            raise HashingError(f"bcrypt error: {error}") from error
        return hashed.decode("ascii")

    @staticmethod
    def verify(plain: Secret, stored: str) -> bool:
        """Verify password against bcrypt hash.

        Parameters
        ----------
        plain : Secret
            The plain secret to verify.
        stored : str
            The stored hash.

        Returns
        -------
        bool
            True if verified, False if not.
        """
        if not stored.startswith(BCRYPT_PREFIXES):
            return False
        try:
            return bcrypt.checkpw(_truncate(plain), stored.encode("utf-8"))
        except ValueError:
            # malformed hash
            return False


__all__ = ["BcryptHasher", "BCRYPT_PREFIXES"]
