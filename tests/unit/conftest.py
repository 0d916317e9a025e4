"""Pytest fixtures for bitbucket-v1 tests."""

import os
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock, patch

import httpx
import pytest

from bitbucket_v1.client import BitbucketClient
from bitbucket_v1.config import BitbucketConfig

API_URL = "https://api.bitbucket.org/1.0"


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for basic authentication."""
    with patch.dict(
        os.environ,
        {
            "BITBUCKET_URL": API_URL,
            "BITBUCKET_USERNAME": "username",
            "BITBUCKET_PASSWORD": "app_password",
        },
        clear=True,
    ):
        yield


@pytest.fixture
def bitbucket_config():
    """Create a BitbucketConfig instance for tests."""
    return BitbucketConfig(
        url=API_URL,
        auth_type="basic",
        username="username",
        password="app_password",
    )


@pytest.fixture
def bitbucket_client(bitbucket_config):
    """Create a BitbucketClient with mocked session."""
    client = BitbucketClient(bitbucket_config)
    client.session = MagicMock()
    return client


@pytest.fixture
def make_response() -> Callable[..., httpx.Response]:
    """Build real httpx responses so raise_for_status behaves as in production."""

    def _make(
        status_code: int = 200,
        json_data: Any = None,
        text: str | None = None,
        method: str = "GET",
        url: str = f"{API_URL}/test",
    ) -> httpx.Response:
        request = httpx.Request(method, url)
        if json_data is not None:
            return httpx.Response(status_code, json=json_data, request=request)
        return httpx.Response(status_code, text=text or "", request=request)

    return _make


@pytest.fixture
def repository(bitbucket_client):
    """Repository controller for owner/repo."""
    return bitbucket_client.repository("owner", "repo")


@pytest.fixture
def mock_user_data():
    """Mock v1 user payload."""
    return {
        "username": "jdoe",
        "first_name": "Jane",
        "last_name": "Doe",
        "display_name": "Jane Doe",
        "is_team": False,
        "avatar": "https://bitbucket.org/account/jdoe/avatar/32/",
        "resource_uri": "/1.0/users/jdoe",
    }


@pytest.fixture
def mock_issue_data(mock_user_data):
    """Mock v1 issue payload."""
    return {
        "status": "open",
        "priority": "major",
        "title": "Crash on startup",
        "reported_by": mock_user_data,
        "utc_last_updated": "2013-04-03 09:12:07+00:00",
        "responsible": mock_user_data,
        "created_on": "2013-04-02T13:43:58.000",
        "metadata": {
            "kind": "bug",
            "version": "1.0",
            "component": "core",
            "milestone": None,
        },
        "content": "The app crashes right after the splash screen.",
        "comment_count": 2,
        "local_id": 42,
        "follower_count": 1,
        "utc_created_on": "2013-04-02 11:43:58+00:00",
        "resource_uri": "/1.0/repositories/owner/repo/issues/42",
        "is_spam": False,
    }


@pytest.fixture
def mock_comment_data(mock_user_data):
    """Mock v1 issue comment payload."""
    return {
        "content": "Reproduced on 1.0.1 as well.",
        "author_info": mock_user_data,
        "comment_id": 7,
        "utc_updated_on": "2013-04-03 10:00:00+00:00",
        "utc_created_on": "2013-04-03 09:00:00+00:00",
        "is_spam": False,
    }


@pytest.fixture
def mock_repository_data():
    """Mock v1 repository payload."""
    return {
        "scm": "hg",
        "has_wiki": True,
        "last_updated": "2013-04-03T11:12:07.000",
        "creator": None,
        "forks_count": 3,
        "created_on": "2012-06-20T03:37:42.000",
        "owner": "owner",
        "logo": None,
        "email_mailinglist": "",
        "is_mq": False,
        "size": 1024,
        "read_only": False,
        "fork_of": {"owner": "upstream", "slug": "repo", "name": "repo"},
        "mq_of": None,
        "followers_count": 12,
        "state": "available",
        "utc_created_on": "2012-06-20 01:37:42+00:00",
        "website": "",
        "description": "A test repository",
        "has_issues": True,
        "is_fork": True,
        "slug": "repo",
        "is_private": False,
        "name": "Repo",
        "language": "python",
        "utc_last_updated": "2013-04-03 09:12:07+00:00",
        "no_public_forks": False,
        "resource_uri": "/1.0/repositories/owner/repo",
    }


@pytest.fixture
def mock_changeset_data():
    """Mock v1 changeset payload."""
    return {
        "node": "a4b2c3d4e5f6",
        "files": [{"type": "modified", "file": "setup.py"}],
        "raw_author": "Jane Doe <jane@example.com>",
        "utc_timestamp": "2013-04-01 08:00:00+00:00",
        "author": "jdoe",
        "timestamp": "2013-04-01 10:00:00",
        "raw_node": "a4b2c3d4e5f6a7b8c9d0a4b2c3d4e5f6a7b8c9d0",
        "parents": ["0f1e2d3c4b5a"],
        "branch": "default",
        "message": "Fix startup crash\n",
        "revision": 120,
        "size": -1,
    }
