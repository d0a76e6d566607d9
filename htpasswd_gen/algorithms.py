# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Hashing algorithms understood by htpasswd_gen.

Not every scheme that may appear in an htpasswd file is supported.

* bcrypt: understood by nginx, the Docker registry and Apache ``htpasswd``.
* SHA-512-crypt: understood by nginx, not by Apache ``htpasswd``.
"""

from dataclasses import dataclass
from typing import Union

BCRYPT_MIN_COST = 4
BCRYPT_MAX_COST = 31
BCRYPT_DEFAULT_COST = 12

SHA512_MIN_ROUNDS = 1000
SHA512_MAX_ROUNDS = 999_999_999
# the crypt(3) default, written without a "rounds=" clause
SHA512_DEFAULT_ROUNDS = 5000


@dataclass(frozen=True)
class Bcrypt:
    """bcrypt with a specific cost.

    The cost must be between ``BCRYPT_MIN_COST`` and ``BCRYPT_MAX_COST``.
    """

    cost: int


@dataclass(frozen=True)
class BcryptMinCost:
    """Fastest, cheapest and least secure bcrypt. Useful for tests."""


@dataclass(frozen=True)
class BcryptDefault:
    """bcrypt with the default cost."""


@dataclass(frozen=True)
class Sha512:
    """SHA-512-crypt with a specific number of rounds.

    The rounds must be between ``SHA512_MIN_ROUNDS`` and
    ``SHA512_MAX_ROUNDS``.
    """

    rounds: int


@dataclass(frozen=True)
class Sha512Default:
    """SHA-512-crypt with the default number of rounds."""


@dataclass(frozen=True)
class Sha512MinRounds:
    """Fastest, cheapest and least secure SHA-512-crypt. Useful for tests."""


Algorithm = Union[
    Bcrypt,
    BcryptMinCost,
    BcryptDefault,
    Sha512,
    Sha512Default,
    Sha512MinRounds,
]
"""Any supported algorithm selection."""

ResolvedAlgorithm = Union[Bcrypt, Sha512]
"""A fully specified algorithm selection."""


def resolve(algorithm: Algorithm) -> ResolvedAlgorithm:
    """Resolve the default/minimum variants to a fully specified one.

    Parameters
    ----------
    algorithm : Algorithm
        The algorithm selection.

    Returns
    -------
    ResolvedAlgorithm
        ``Bcrypt`` or ``Sha512`` with an explicit cost/rounds.

    Raises
    ------
    TypeError
        If the argument is not an algorithm selection.
    """
    if isinstance(algorithm, (Bcrypt, Sha512)):
        return algorithm
    if isinstance(algorithm, BcryptDefault):
        return resolve(Bcrypt(cost=BCRYPT_DEFAULT_COST))
    if isinstance(algorithm, BcryptMinCost):
        return resolve(Bcrypt(cost=BCRYPT_MIN_COST))
    if isinstance(algorithm, Sha512Default):
        return resolve(Sha512(rounds=SHA512_DEFAULT_ROUNDS))
    if isinstance(algorithm, Sha512MinRounds):
        return resolve(Sha512(rounds=SHA512_MIN_ROUNDS))
    raise TypeError(f"Unsupported hashing algorithm: {algorithm!r}")


__all__ = [
    "Algorithm",
    "Bcrypt",
    "BcryptDefault",
    "BcryptMinCost",
    "ResolvedAlgorithm",
    "Sha512",
    "Sha512Default",
    "Sha512MinRounds",
    "resolve",
    "BCRYPT_DEFAULT_COST",
    "BCRYPT_MAX_COST",
    "BCRYPT_MIN_COST",
    "SHA512_DEFAULT_ROUNDS",
    "SHA512_MAX_ROUNDS",
    "SHA512_MIN_ROUNDS",
]
