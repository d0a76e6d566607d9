# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hashing protocol."""

from typing import Protocol, Union, runtime_checkable

Secret = Union[str, bytes]
"""A plain password, text (encoded as UTF-8) or raw bytes."""


def to_bytes(plain: Secret) -> bytes:
    """Get the bytes of a plain password.

    Parameters
    ----------
    plain : Secret
        The plain password.

    Returns
    -------
    bytes
        The password, UTF-8 encoded if it was text.
    """
    if isinstance(plain, bytes):
        return plain
    return plain.encode("utf-8")


@runtime_checkable
class Hasher(Protocol):  # pragma: no cover
    """Protocol for password hashing implementations."""

    def hash(self, plain: Secret) -> str:
        """Hash a plain text password.

        Parameters
        ----------
        plain : Secret
            The plain text password
        """
        ...

    def verify(self, plain: Secret, stored: str) -> bool:
        """Verify a plain text password against a stored hash.

        Parameters
        ----------
        plain : Secret
            The plain text password
        stored : str
            The stored hash
        """
        ...


__all__ = ["Hasher", "Secret", "to_bytes"]
