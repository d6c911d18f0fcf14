"""Configuration for tilde expansion."""

from __future__ import annotations

import contextlib
import contextvars
import dataclasses as dc
import typing as typ
from collections import abc as cabc

DEFAULT_HOME_ENV_VAR = "HOME"
DEFAULT_ROOT_HOME = "/root"

_KNOWN_OPTIONS: typ.Final[frozenset[str]] = frozenset(
    {"home_env_var", "root_shortcut", "root_home"}
)


class ConfigurationError(RuntimeError):
    """Raised when an expansion configuration is invalid."""


@dc.dataclass(frozen=True, slots=True)
class ExpansionConfig:
    """Settings that influence how ``~`` expressions are resolved.

    ``home_env_var`` names the environment variable consulted for a bare
    ``~``. When ``root_shortcut`` is set, ``~root`` resolves to ``root_home``
    without querying the user database.
    """

    home_env_var: str = DEFAULT_HOME_ENV_VAR
    root_shortcut: bool = True
    root_home: str = DEFAULT_ROOT_HOME

    @classmethod
    def from_mapping(
        cls, mapping: cabc.Mapping[str, typ.Any] | None
    ) -> ExpansionConfig:
        """Create an :class:`ExpansionConfig` from a parsed settings table."""
        if mapping is None:
            return cls()
        if not isinstance(mapping, cabc.Mapping):
            message = (
                f"configuration must be a mapping; received {type(mapping).__name__}."
            )
            raise ConfigurationError(message)
        unknown = set(mapping) - _KNOWN_OPTIONS
        if unknown:
            joined = ", ".join(sorted(unknown))
            message = f"Unknown expansion option(s): {joined}."
            raise ConfigurationError(message)
        return cls(
            home_env_var=_non_empty_string(
                mapping.get("home_env_var", DEFAULT_HOME_ENV_VAR), "home_env_var"
            ),
            root_shortcut=_boolean(mapping.get("root_shortcut", True), "root_shortcut"),
            root_home=_non_empty_string(
                mapping.get("root_home", DEFAULT_ROOT_HOME), "root_home"
            ),
        )


_DEFAULT_CONFIG = ExpansionConfig()

_active_config: contextvars.ContextVar[ExpansionConfig] = contextvars.ContextVar(
    "tildepath_active_config"
)


@contextlib.contextmanager
def use_configuration(configuration: ExpansionConfig) -> typ.Iterator[None]:
    """Set ``configuration`` as the active configuration for the current context."""
    token = _active_config.set(configuration)
    try:
        yield
    finally:
        _active_config.reset(token)


def current_configuration() -> ExpansionConfig:
    """Return the active configuration, falling back to the defaults."""
    return _active_config.get(_DEFAULT_CONFIG)


def _non_empty_string(value: object, field_name: str) -> str:
    """Return ``value`` when it is a non-empty string."""
    if not isinstance(value, str):
        message = f"{field_name} must be a string; received {type(value).__name__}."
        raise ConfigurationError(message)
    if not value:
        message = f"{field_name} must not be empty."
        raise ConfigurationError(message)
    if "\0" in value:
        message = f"{field_name} must not contain NUL characters."
        raise ConfigurationError(message)
    return value


def _boolean(value: object, field_name: str) -> bool:
    """Return ``value`` when it is a boolean."""
    if isinstance(value, bool):
        return value
    message = f"{field_name} must be true or false; received {type(value).__name__}."
    raise ConfigurationError(message)
