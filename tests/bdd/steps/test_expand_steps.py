"""Behavioural tests for tilde expansion."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from tildepath import ExpandUserError, expand_user

if typ.TYPE_CHECKING:
    from tests.helpers.user_database import FakeUserDatabase

scenarios("../features/expand_user.feature")


@dc.dataclass(slots=True)
class ExpansionOutcome:
    """Result of a single expansion attempt."""

    path: str | None = None
    error: ExpandUserError | None = None


@pytest.fixture
def outcome() -> ExpansionOutcome:
    """Collect the result of the ``When`` step."""
    return ExpansionOutcome()


@given(parsers.parse('the current user\'s home is "{home}"'))
def given_current_home(user_database: FakeUserDatabase, home: str) -> None:
    """Set the home directory reported for the current user."""
    user_database.current_home = home.encode()


@given("the current user has no home directory")
def given_no_current_home(user_database: FakeUserDatabase) -> None:
    """Make the current-user lookup come back empty."""
    user_database.current_home = None


@given(parsers.parse('the user "{name}" has the home "{home}"'))
def given_user_home(user_database: FakeUserDatabase, name: str, home: str) -> None:
    """Register ``name`` in the fake user database."""
    user_database.add(name, home.encode())


@given(parsers.parse('the user "{name}" has no home directory'))
def given_user_without_home(user_database: FakeUserDatabase, name: str) -> None:
    """Register ``name`` without a home directory."""
    user_database.add(name, None)


@when(parsers.parse('I expand "{path}"'))
def when_expand(
    user_database: FakeUserDatabase, outcome: ExpansionOutcome, path: str
) -> None:
    """Expand ``path`` using the fake user database."""
    try:
        outcome.path = expand_user(path, resolver=user_database.resolver())
    except ExpandUserError as exc:
        outcome.error = exc


@then(parsers.parse('the expanded path is "{expected}"'))
def then_expanded_path(outcome: ExpansionOutcome, expected: str) -> None:
    """Assert that expansion succeeded with ``expected``."""
    assert outcome.error is None
    assert outcome.path == expected


@then(parsers.parse('expansion fails with "{message}"'))
def then_expansion_fails(outcome: ExpansionOutcome, message: str) -> None:
    """Assert that expansion raised an error described by ``message``."""
    assert outcome.path is None
    assert outcome.error is not None
    assert str(outcome.error) == message


@then("the user database was not consulted")
def then_no_lookups(user_database: FakeUserDatabase) -> None:
    """Assert that no named-user lookups happened."""
    assert user_database.lookups == []
