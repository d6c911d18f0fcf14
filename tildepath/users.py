"""Access to the host user database and the current user's home directory.

These functions are the only place :mod:`tildepath` touches process or system
state. Home directories are returned as raw ``bytes`` so that entries which
are not valid in the filesystem encoding survive unchanged.
"""

from __future__ import annotations

import logging
import os
import pwd

import msgspec

from tildepath.config import current_configuration

LOGGER = logging.getLogger(__name__)


class UserRecord(msgspec.Struct, frozen=True, kw_only=True):
    """A user database entry reduced to the fields expansion needs."""

    name: str
    home_directory: bytes | None = None

    @classmethod
    def from_passwd(cls, entry: pwd.struct_passwd) -> UserRecord:
        """Build a record from a :mod:`pwd` entry."""
        home = entry.pw_dir
        return cls(
            name=entry.pw_name,
            home_directory=None if home is None else os.fsencode(home),
        )


def lookup_user_by_name(name: bytes) -> UserRecord | None:
    """Return the user database record for ``name``, or ``None`` if unknown."""
    if b"\0" in name:
        message = f"user name must not contain NUL bytes: {name!r}"
        raise ValueError(message)
    try:
        entry = pwd.getpwnam(os.fsdecode(name))
    except KeyError:
        return None
    return UserRecord.from_passwd(entry)


def current_user_home() -> bytes | None:
    """Return the home directory of the running process's user.

    The configured environment variable (``HOME`` by default) wins when it is
    set to a non-empty value. Otherwise the password database entry for the
    real uid is used.
    """
    env_var = os.fsencode(current_configuration().home_env_var)
    home = os.environb.get(env_var)
    if home:
        return home
    LOGGER.debug(
        "%s is unset or empty; reading home directory from the password database",
        os.fsdecode(env_var),
    )
    try:
        entry = pwd.getpwuid(os.getuid())
    except KeyError:
        LOGGER.debug("No password database entry for uid %d", os.getuid())
        return None
    record = UserRecord.from_passwd(entry)
    return record.home_directory or None
