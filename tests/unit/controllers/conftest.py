"""Fixtures for controller tests."""

from unittest.mock import MagicMock

import pytest

from bitbucket_v1.controllers import UsersController


@pytest.fixture
def mock_client():
    """A stand-in for BitbucketClient that records every call."""
    return MagicMock()


@pytest.fixture
def mock_repository(mock_client):
    """Repository controller for owner/repo built on the mock client."""
    return UsersController(mock_client)["owner"].repositories["repo"]
