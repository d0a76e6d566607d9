# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Errors raised by htpasswd_gen.

Write failures are not wrapped: they surface as the builtin ``OSError``
family, unchanged.
"""


class HtpasswdError(Exception):
    """Base class for the errors raised by htpasswd_gen."""


class HashingError(HtpasswdError, ValueError):
    """A password could not be hashed with the requested algorithm.

    Raised when the cost or rounds are outside the range accepted by the
    hashing primitive, or when the primitive itself fails.
    """


__all__ = ["HtpasswdError", "HashingError"]
