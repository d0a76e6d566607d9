# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""In-memory htpasswd credentials table.

Example
-------
    credentials = Htpasswd()
    credentials.set("John Doe", "Don't hardcode")
    credentials.write_to_path("www/.htpasswd")
"""

import logging
import os
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from .algorithms import Algorithm, BcryptDefault
from .config import HtpasswdSettings, get_settings
from .hashing import PasswordHasherDispatcher, Secret, password_hasher

LOG = logging.getLogger(__name__)


class Htpasswd:
    """Ordered table of usernames and password hashes.

    Serialized as one ``username:hash`` line per entry, in insertion
    order. Setting an existing username replaces its hash and keeps the
    entry where it was. Usernames are written as-is: a username containing
    ``:`` or a line break produces a malformed file.
    """

    def __init__(self, settings: Optional[HtpasswdSettings] = None) -> None:
        """Create an empty table.

        Parameters
        ----------
        settings : Optional[HtpasswdSettings], optional
            The settings to use, by default the process-wide ones, loaded
            on first use.
        """
        self._settings = settings
        # username -> hashed password
        self._entries: Dict[str, str] = {}

    @property
    def settings(self) -> HtpasswdSettings:
        """The settings used when writing the file."""
        if self._settings is None:
            return get_settings()
        return self._settings

    def set(self, username: str, password: Secret) -> None:
        """Hash a password with bcrypt (default cost) and store it.

        Parameters
        ----------
        username : str
            The username.
        password : Secret
            The plain password.
        """
        self.set_with(BcryptDefault(), username, password)

    def set_with(
        self, algorithm: Algorithm, username: str, password: Secret
    ) -> None:
        """Hash a password with the given algorithm and store it.

        Parameters
        ----------
        algorithm : Algorithm
            The algorithm, cost or rounds to hash with.
        username : str
            The username.
        password : Secret
            The plain password.

        Raises
        ------
        HashingError
            If the cost/rounds are out of range or hashing fails. The table
            is left unchanged.
        """
        hashed = PasswordHasherDispatcher(algorithm).hash(password)
        action = "Replaced" if username in self._entries else "Added"
        self._entries[username] = hashed
        LOG.debug("%s entry for %r using %r", action, username, algorithm)

    def verify(self, username: str, password: Secret) -> bool:
        """Check a password against the stored hash.

        Parameters
        ----------
        username : str
            The username.
        password : Secret
            The plain password.

        Returns
        -------
        bool
            True if the user exists and the password matches.
        """
        stored = self._entries.get(username)
        if stored is None:
            return False
        return password_hasher.verify(password, stored)

    def get_hash(self, username: str) -> Optional[str]:
        """Get the stored hash of a user, if any."""
        return self._entries.get(username)

    def usernames(self) -> List[str]:
        """Get the usernames, in file order."""
        return list(self._entries)

    def copy(self) -> "Htpasswd":
        """Get an independent copy of this table."""
        other = Htpasswd(self._settings)
        other._entries = dict(self._entries)  # pylint: disable=protected-access
        return other

    def to_string(self) -> str:
        """Render the table in the htpasswd file format.

        Returns
        -------
        str
            One ``username:hash`` line per entry, each ending with a newline.
        """
        return "".join(
            f"{username}:{hashed}\n"
            for username, hashed in self._entries.items()
        )

    def write_to_path(self, path: Union[str, "os.PathLike[str]"]) -> None:
        """Write the table to a file, replacing any existing content.

        The write is not atomic.

        Parameters
        ----------
        path : Union[str, os.PathLike[str]]
            The file to write.

        Raises
        ------
        OSError
            If the file cannot be written.
        pydantic.ValidationError
            If the process-wide settings are invalid. Nothing is written.
        """
        file_mode = self.settings.file_mode
        target = Path(path)
        target.write_text(self.to_string(), encoding="utf-8", newline="")
        if file_mode is not None:
            target.chmod(file_mode)
        LOG.info("Wrote %d htpasswd entries to %s", len(self), target)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Htpasswd(usernames={self.usernames()!r})"

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, username: object) -> bool:
        return username in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))


__all__ = ["Htpasswd"]
