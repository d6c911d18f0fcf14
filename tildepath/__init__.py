"""Expand leading ``~`` and ``~user`` expressions in filesystem paths.

The package exposes :func:`expand_user` together with the exception
hierarchy rooted at :class:`ExpandUserError`.
"""

from __future__ import annotations

from .config import ConfigurationError, ExpansionConfig, use_configuration
from .errors import (
    CurrentUserHomeNotFoundError,
    ExpandUserError,
    InvalidTildeExpressionError,
    UserHomeNotFoundError,
    UserNotFoundError,
)
from .expand import HomeResolver, TildeExpression, expand_user, parse_tilde_expression
from .users import UserRecord

__all__ = [
    "ConfigurationError",
    "CurrentUserHomeNotFoundError",
    "ExpandUserError",
    "ExpansionConfig",
    "HomeResolver",
    "InvalidTildeExpressionError",
    "TildeExpression",
    "UserHomeNotFoundError",
    "UserNotFoundError",
    "UserRecord",
    "expand_user",
    "parse_tilde_expression",
    "use_configuration",
]
