# SPDX-License-Identifier: MIT
# Copyright (c) 2025 fauna-connection contributors

"""Test fixtures for fauna_connection."""

from unittest.mock import MagicMock, patch

import pytest

from fauna_connection.config import ENV_VARS


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: tests that need a live Fauna database (FAUNADB_SECRET_KEY)"
    )


@pytest.fixture
def fauna_client_cls():
    """Patch FaunaClient so no connection creates a real HTTP client."""
    with patch("fauna_connection.connection.FaunaClient") as client_cls:
        client_cls.return_value = MagicMock(name="FaunaClient()")
        yield client_cls


@pytest.fixture
def fauna(fauna_client_cls):
    """A FaunaConnection backed by a mocked client."""
    from fauna_connection import FaunaConnection

    return FaunaConnection(secret="test-secret")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove FAUNADB_* variables so tests do not see the developer's settings.

    Each variable is set before being deleted so monkeypatch restores the
    original state even when a test (or load_dotenv) writes to os.environ.
    """
    for var in ENV_VARS.values():
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch
