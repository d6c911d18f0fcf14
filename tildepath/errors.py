"""Exceptions raised while expanding tilde expressions."""

from __future__ import annotations


class ExpandUserError(RuntimeError):
    """Base class for failures raised by :func:`tildepath.expand_user`.

    Subclasses keep their payload in :attr:`args`, so two errors compare equal
    when they are of the same type and describe the same user or expression.
    """

    def __eq__(self, other: object) -> bool:
        """Compare errors by type and payload."""
        if not isinstance(other, ExpandUserError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        """Hash errors consistently with :meth:`__eq__`."""
        return hash((type(self), self.args))

    @classmethod
    def current_user_home_not_found(cls) -> CurrentUserHomeNotFoundError:
        """Return an error for a missing current-user home directory."""
        return CurrentUserHomeNotFoundError()

    @classmethod
    def user_not_found(cls, user: str) -> UserNotFoundError:
        """Return an error for a user absent from the user database."""
        return UserNotFoundError(user)

    @classmethod
    def user_home_not_found(cls, user: str) -> UserHomeNotFoundError:
        """Return an error for a user record without a home directory."""
        return UserHomeNotFoundError(user)

    @classmethod
    def invalid_tilde_expression(cls, expr: str) -> InvalidTildeExpressionError:
        """Return an error for a user name that cannot be looked up."""
        return InvalidTildeExpressionError(expr)


class CurrentUserHomeNotFoundError(ExpandUserError):
    """Raised when ``~`` is used but the current home directory is unknown."""

    def __init__(self) -> None:
        """Initialise the error without a payload."""
        super().__init__()

    def __str__(self) -> str:
        """Describe the missing home directory."""
        return "Current user's $HOME directory not found"


class UserNotFoundError(ExpandUserError):
    """Raised when ``~user`` names an unknown user."""

    def __init__(self, user: str) -> None:
        """Record the name that failed to resolve."""
        super().__init__(user)
        self.user = user

    def __str__(self) -> str:
        """Name the missing user."""
        return f"User {self.user} not found"


class UserHomeNotFoundError(ExpandUserError):
    """Raised when a user exists but has no home directory configured."""

    def __init__(self, user: str) -> None:
        """Record the user whose home directory is missing."""
        super().__init__(user)
        self.user = user

    def __str__(self) -> str:
        """Name the user lacking a home directory."""
        return f"$HOME directory for {self.user} not found"


class InvalidTildeExpressionError(ExpandUserError):
    """Raised when the text after ``~`` cannot be passed to the user database."""

    def __init__(self, expr: str) -> None:
        """Record the offending expression."""
        super().__init__(expr)
        self.expr = expr

    def __str__(self) -> str:
        """Repeat the expression that could not be expanded."""
        return f"Failed to expand tilde expression: {self.expr}"
