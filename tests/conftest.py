"""Pytest configuration for the tildepath test-suite."""

from __future__ import annotations

import typing as typ

import pytest

from tests.helpers.user_database import KINBOTE_HOME, FakeUserDatabase

if typ.TYPE_CHECKING:
    from tildepath import HomeResolver


@pytest.fixture
def user_database() -> FakeUserDatabase:
    """Provide an empty fake user database with a current home set."""
    return FakeUserDatabase()


@pytest.fixture
def resolver(user_database: FakeUserDatabase) -> HomeResolver:
    """Provide a resolver backed by :func:`user_database`."""
    return user_database.resolver()


@pytest.fixture
def kinbote_home(monkeypatch: pytest.MonkeyPatch) -> str:
    """Point ``HOME`` at ``/Users/kinbote`` for the duration of a test."""
    monkeypatch.setenv("HOME", KINBOTE_HOME)
    return KINBOTE_HOME
