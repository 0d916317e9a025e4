"""Tests for the Bitbucket v1 HTTP client."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from bitbucket_v1.cache import CacheProvider
from bitbucket_v1.client import BitbucketClient
from bitbucket_v1.config import BitbucketConfig
from bitbucket_v1.controllers import AccountController, UsersController
from bitbucket_v1.exceptions import (
    BitbucketApiError,
    BitbucketAuthenticationError,
    BitbucketNotFoundError,
)

API_URL = "https://api.bitbucket.org/1.0"


def test_client_init(bitbucket_config):
    """Test BitbucketClient initialization."""
    with patch("httpx.Client", MagicMock()) as mock_client:
        client = BitbucketClient(bitbucket_config)

        assert client.config == bitbucket_config
        assert isinstance(client.cache, CacheProvider)
        assert isinstance(client.users, UsersController)
        assert isinstance(client.account, AccountController)
        mock_client.assert_called_once()


def test_client_basic_auth(bitbucket_config):
    """Test the session carries basic auth credentials."""
    with patch("httpx.Client", MagicMock()) as mock_client:
        instance = mock_client.return_value

        BitbucketClient(bitbucket_config)

        assert instance.auth == ("username", "app_password")


def test_client_anonymous_has_no_auth():
    """Test anonymous clients leave session auth untouched."""
    client = BitbucketClient(BitbucketConfig())

    assert client.session.auth is None
    assert client.session.headers["Accept"] == "application/json"
    client.close()


def test_client_custom_headers():
    """Test custom headers are added to the session."""
    config = BitbucketConfig(custom_headers={"X-Trace": "abc"})

    client = BitbucketClient(config)

    assert client.session.headers["X-Trace"] == "abc"
    client.close()


def test_client_cache_disabled():
    """Test no cache is created when caching is disabled."""
    client = BitbucketClient(BitbucketConfig(cache_enabled=False))

    assert client.cache is None
    client.close()


def test_build_url(bitbucket_client):
    """Test URIs are resolved against the API root."""
    assert bitbucket_client.build_url("users/jdoe") == f"{API_URL}/users/jdoe"
    assert bitbucket_client.build_url("/users/jdoe") == f"{API_URL}/users/jdoe"


def test_get_success(bitbucket_client, make_response):
    """Test successful GET request."""
    bitbucket_client.session.get.return_value = make_response(json_data={"k": "v"})

    result = bitbucket_client.get("test", params={"limit": 5})

    bitbucket_client.session.get.assert_called_once_with(
        f"{API_URL}/test", params={"limit": 5}
    )
    assert result == {"k": "v"}


def test_get_is_cached(bitbucket_client, make_response):
    """Test a repeated GET is served from the cache."""
    bitbucket_client.session.get.return_value = make_response(json_data={"k": "v"})

    first = bitbucket_client.get("test")
    second = bitbucket_client.get("test")

    assert first == second == {"k": "v"}
    bitbucket_client.session.get.assert_called_once()


def test_get_cache_key_includes_params(bitbucket_client, make_response):
    """Test GETs with different query parameters are cached separately."""
    bitbucket_client.session.get.side_effect = [
        make_response(json_data={"page": 1}),
        make_response(json_data={"page": 2}),
    ]

    assert bitbucket_client.get("test", params={"start": 0}) == {"page": 1}
    assert bitbucket_client.get("test", params={"start": 15}) == {"page": 2}
    assert bitbucket_client.session.get.call_count == 2


def test_get_force_cache_invalidation(bitbucket_client, make_response):
    """Test forcing cache invalidation fetches the resource again."""
    bitbucket_client.session.get.side_effect = [
        make_response(json_data={"version": 1}),
        make_response(json_data={"version": 2}),
    ]

    assert bitbucket_client.get("test") == {"version": 1}
    assert bitbucket_client.get("test", force_cache_invalidation=True) == {
        "version": 2
    }
    assert bitbucket_client.get("test") == {"version": 2}
    assert bitbucket_client.session.get.call_count == 2


def test_get_force_cache_invalidation_keeps_children(bitbucket_client, make_response):
    """Test a forced read of a repository keeps its cached issues."""
    bitbucket_client.session.get.return_value = make_response(json_data={"k": "v"})
    for uri in (
        "repositories/owner/repo",
        "repositories/owner/repo/issues/1",
        "repositories/owner/repo/issues/1/comments",
    ):
        bitbucket_client.get(uri)

    bitbucket_client.repository("owner", "repo").get_info(force_cache_invalidation=True)

    assert bitbucket_client.session.get.call_count == 4
    assert f"{API_URL}/repositories/owner/repo" in bitbucket_client.cache
    assert f"{API_URL}/repositories/owner/repo/issues/1" in bitbucket_client.cache
    assert (
        f"{API_URL}/repositories/owner/repo/issues/1/comments"
        in bitbucket_client.cache
    )


def test_get_does_not_cache_response_invalidated_in_flight(
    bitbucket_client, make_response
):
    """Test a GET that overlaps a write does not store the old body."""

    def respond(url, params=None):
        bitbucket_client.invalidate_cache_objects("issues/1")
        return make_response(json_data={"version": 1})

    bitbucket_client.session.get.side_effect = respond

    assert bitbucket_client.get("issues/1") == {"version": 1}
    assert f"{API_URL}/issues/1" not in bitbucket_client.cache


def test_cache_size_from_config(bitbucket_config, make_response):
    """Test the cache is bounded by the configured size."""
    bitbucket_config.cache_max_entries = 3
    client = BitbucketClient(bitbucket_config)
    client.session = MagicMock()
    client.session.get.return_value = make_response(json_data={"k": "v"})

    for i in range(10):
        client.repository("owner", "repo").issues.search(f"q{i}")

    assert client.cache.maxsize == 3
    assert len(client.cache) == 3


def test_get_without_cache_always_requests(make_response):
    """Test every GET hits the network when caching is disabled."""
    client = BitbucketClient(BitbucketConfig(cache_enabled=False))
    client.session = MagicMock()
    client.session.get.return_value = make_response(json_data={"k": "v"})

    client.get("test")
    client.get("test")

    assert client.session.get.call_count == 2


def test_invalidate_cache_objects(bitbucket_client, make_response):
    """Test invalidation drops the resource and its children only."""
    bitbucket_client.session.get.return_value = make_response(json_data={"k": "v"})
    for uri in ("issues/1", "issues/1/comments", "issues/10"):
        bitbucket_client.get(uri)

    bitbucket_client.invalidate_cache_objects("issues/1")

    assert f"{API_URL}/issues/1" not in bitbucket_client.cache
    assert f"{API_URL}/issues/1/comments" not in bitbucket_client.cache
    assert f"{API_URL}/issues/10" in bitbucket_client.cache


def test_post_sends_form_data(bitbucket_client, make_response):
    """Test POST sends a form-encoded body."""
    bitbucket_client.session.post.return_value = make_response(json_data={"id": 1})

    result = bitbucket_client.post("test", data={"title": "t"})

    bitbucket_client.session.post.assert_called_once_with(
        f"{API_URL}/test", data={"title": "t"}
    )
    assert result == {"id": 1}


def test_put_sends_form_data(bitbucket_client, make_response):
    """Test PUT sends a form-encoded body."""
    bitbucket_client.session.put.return_value = make_response(json_data={"id": 1})

    result = bitbucket_client.put("test", data={"status": "resolved"})

    bitbucket_client.session.put.assert_called_once_with(
        f"{API_URL}/test", data={"status": "resolved"}
    )
    assert result == {"id": 1}


def test_delete_empty_body(bitbucket_client, make_response):
    """Test DELETE with an empty response body returns None."""
    bitbucket_client.session.delete.return_value = make_response(status_code=204)

    assert bitbucket_client.delete("test") is None
    bitbucket_client.session.delete.assert_called_once_with(f"{API_URL}/test")


@pytest.mark.parametrize(
    "status_code, expected_error",
    [
        (400, BitbucketApiError),
        (401, BitbucketAuthenticationError),
        (403, BitbucketAuthenticationError),
        (404, BitbucketNotFoundError),
        (500, BitbucketApiError),
    ],
)
def test_http_errors(bitbucket_client, make_response, status_code, expected_error):
    """Test HTTP status errors are mapped onto the exception hierarchy."""
    bitbucket_client.session.get.return_value = make_response(
        status_code=status_code, text="Boom"
    )

    with pytest.raises(expected_error) as excinfo:
        bitbucket_client.get("test")

    assert excinfo.value.status_code == status_code
    assert f"HTTP error: {status_code} - Boom" in str(excinfo.value)


def test_http_error_is_not_cached(bitbucket_client, make_response):
    """Test failed GETs leave nothing in the cache."""
    bitbucket_client.session.get.return_value = make_response(
        status_code=500, text="Boom"
    )

    with pytest.raises(BitbucketApiError):
        bitbucket_client.get("test")

    assert len(bitbucket_client.cache) == 0


def test_request_error(bitbucket_client):
    """Test transport failures raise BitbucketApiError without status code."""
    bitbucket_client.session.get.side_effect = httpx.RequestError(
        "Connection error", request=MagicMock()
    )

    with pytest.raises(BitbucketApiError) as excinfo:
        bitbucket_client.get("test")

    assert "Request error: Connection error" in str(excinfo.value)
    assert excinfo.value.status_code is None


def test_invalid_json(bitbucket_client, make_response):
    """Test a non-JSON body raises BitbucketApiError."""
    bitbucket_client.session.get.return_value = make_response(text="<html>")

    with pytest.raises(BitbucketApiError) as excinfo:
        bitbucket_client.get("test")

    assert "Invalid JSON response" in str(excinfo.value)


def test_close(bitbucket_client):
    """Test closing the client session."""
    bitbucket_client.close()

    bitbucket_client.session.close.assert_called_once()


def test_context_manager(bitbucket_client):
    """Test the client closes its session when used as a context manager."""
    with bitbucket_client as client:
        assert client is bitbucket_client

    bitbucket_client.session.close.assert_called_once()
