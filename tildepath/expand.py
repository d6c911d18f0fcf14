"""Expansion of ``~`` and ``~user`` prefixes in filesystem paths."""

from __future__ import annotations

import dataclasses as dc
import os
import posixpath
import typing as typ
from collections import abc as cabc
from pathlib import Path

from tildepath import users
from tildepath.config import current_configuration
from tildepath.errors import (
    CurrentUserHomeNotFoundError,
    InvalidTildeExpressionError,
    UserHomeNotFoundError,
    UserNotFoundError,
)

if typ.TYPE_CHECKING:
    from tildepath.users import UserRecord

ExpressionKind = typ.Literal["none", "current", "named", "root"]
PathInput = str | bytes | os.PathLike[str] | os.PathLike[bytes]

ROOT_USER = "root"


@dc.dataclass(frozen=True, slots=True)
class TildeExpression:
    """Classification of a path's first component.

    ``user`` is the text following ``~`` for ``named`` and ``root``
    expressions. ``remainder`` holds the components after the first one, in
    the same ``str``/``bytes`` flavour as the input.
    """

    kind: ExpressionKind
    user: str | bytes | None = None
    remainder: tuple[str | bytes, ...] = ()

    @property
    def needs_resolution(self) -> bool:
        """Return ``True`` when the first component must be replaced."""
        return self.kind != "none"


def _markers(native: str | bytes) -> tuple[typ.Any, typ.Any, typ.Any]:
    """Return the separator, tilde and current-directory markers for ``native``."""
    if isinstance(native, bytes):
        return b"/", b"~", b"."
    return "/", "~", "."


def _is_utf8(component: str | bytes) -> bool:
    """Return ``True`` when ``component`` is valid UTF-8 text."""
    try:
        if isinstance(component, bytes):
            component.decode("utf-8")
        else:
            component.encode("utf-8")
    except UnicodeError:
        return False
    return True


def parse_tilde_expression(path: PathInput) -> TildeExpression:
    """Classify the first component of ``path``.

    Only a leading component of the form ``~`` or ``~name`` is treated as a
    tilde expression. Empty paths, absolute paths and any other leading
    component classify as ``none``, as does a first component that is not
    valid UTF-8 (surrogate escapes in ``str`` input).
    """
    native = os.fspath(path)
    sep, tilde, curdir = _markers(native)
    if not native.startswith(tilde):
        return TildeExpression(kind="none")
    first, _, rest = native.partition(sep)
    if not _is_utf8(first):
        return TildeExpression(kind="none")
    remainder = tuple(part for part in rest.split(sep) if part and part != curdir)
    if first == tilde:
        return TildeExpression(kind="current", remainder=remainder)
    user = first[1:]
    root = ROOT_USER.encode() if isinstance(user, bytes) else ROOT_USER
    if user == root and current_configuration().root_shortcut:
        return TildeExpression(kind="root", user=user, remainder=remainder)
    return TildeExpression(kind="named", user=user, remainder=remainder)


@dc.dataclass(frozen=True, slots=True)
class HomeResolver:
    """Turn a :class:`TildeExpression` into the home directory it denotes."""

    current_user_home: cabc.Callable[[], bytes | None] = users.current_user_home
    lookup_user_by_name: cabc.Callable[[bytes], UserRecord | None] = (
        users.lookup_user_by_name
    )

    def resolve(self, expression: TildeExpression) -> bytes:
        """Return the replacement prefix for ``expression`` as raw bytes."""
        if expression.kind == "current":
            home = self.current_user_home()
            if home is None:
                raise CurrentUserHomeNotFoundError
            return home
        if expression.kind == "root":
            return os.fsencode(current_configuration().root_home)
        if expression.kind == "named" and expression.user is not None:
            return self.resolve_user(expression.user)
        message = f"{expression.kind!r} expressions do not name a home directory"
        raise ValueError(message)

    def resolve_user(self, user: str | bytes) -> bytes:
        """Return the home directory recorded for ``user``."""
        display = os.fsdecode(user)
        try:
            encoded = os.fsencode(user)
        except UnicodeEncodeError as exc:
            raise InvalidTildeExpressionError(display) from exc
        if b"\0" in encoded:
            raise InvalidTildeExpressionError(display)
        record = self.lookup_user_by_name(encoded)
        if record is None:
            raise UserNotFoundError(display)
        if record.home_directory is None:
            raise UserHomeNotFoundError(display)
        return record.home_directory


@typ.overload
def expand_user(path: str, *, resolver: HomeResolver | None = None) -> str: ...


@typ.overload
def expand_user(path: bytes, *, resolver: HomeResolver | None = None) -> bytes: ...


@typ.overload
def expand_user(
    path: os.PathLike[str], *, resolver: HomeResolver | None = None
) -> Path: ...


@typ.overload
def expand_user(
    path: os.PathLike[bytes], *, resolver: HomeResolver | None = None
) -> bytes: ...


def expand_user(
    path: PathInput, *, resolver: HomeResolver | None = None
) -> str | bytes | Path:
    """Replace a leading ``~`` or ``~user`` in ``path`` with a home directory.

    ``str`` and ``bytes`` inputs produce the same type; other path-like
    objects produce a :class:`pathlib.Path` (or ``bytes`` when they are
    byte-oriented). Paths that do not start with a tilde expression are
    returned unchanged. Lookup failures raise a subclass of
    :class:`tildepath.errors.ExpandUserError`.
    """
    native = os.fspath(path)
    expression = parse_tilde_expression(native)
    if not expression.needs_resolution:
        return _restore_flavour(path, native)
    prefix = (resolver or HomeResolver()).resolve(expression)
    head = prefix if isinstance(native, bytes) else os.fsdecode(prefix)
    expanded = posixpath.join(head, *expression.remainder)
    return _restore_flavour(path, expanded)


def _restore_flavour(original: PathInput, value: str | bytes) -> str | bytes | Path:
    """Return ``value`` in the flavour callers passed in as ``original``."""
    if isinstance(original, str | bytes) or isinstance(value, bytes):
        return value
    return Path(value)
