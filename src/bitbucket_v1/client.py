"""HTTP client shared by every Bitbucket v1 controller."""

import logging
from types import TracebackType
from typing import Any

import httpx

from .cache import CacheProvider
from .config import BitbucketConfig
from .constants import AUTH_TYPE_BASIC
from .controllers import AccountController, RepositoryController, UsersController
from .exceptions import (
    BitbucketApiError,
    BitbucketAuthenticationError,
    BitbucketNotFoundError,
)
from .logging_config import mask_sensitive

logger = logging.getLogger("bitbucket-v1.client")


class BitbucketClient:
    """Client for the Bitbucket REST API version 1.

    Controllers hand it URIs relative to the API root (``repositories/a/b``)
    and get decoded JSON back. Successful GET responses are kept in a
    :class:`CacheProvider` until a write invalidates them.
    """

    config: BitbucketConfig
    session: httpx.Client
    cache: CacheProvider | None

    def __init__(
        self,
        config: BitbucketConfig | None = None,
        cache: CacheProvider | None = None,
    ) -> None:
        """Initialize the Bitbucket client.

        Args:
            config: Configuration object (loaded from env vars if not provided)
            cache: Cache to use; a fresh one is created when caching is enabled

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or BitbucketConfig.from_env()
        if cache is not None:
            self.cache = cache
        else:
            self.cache = (
                CacheProvider(self.config.cache_max_entries)
                if self.config.cache_enabled
                else None
            )
        self.session = self._create_session()

        self.users = UsersController(self)
        self.account = AccountController(self)

    def _create_session(self) -> httpx.Client:
        """Create HTTP session with authentication.

        Returns:
            Configured HTTP session
        """
        session = httpx.Client(
            verify=self.config.ssl_verify,
            timeout=self.config.timeout,
            headers={"Accept": "application/json"},
        )

        if self.config.auth_type == AUTH_TYPE_BASIC:
            session.auth = (self.config.username, self.config.password)
            logger.debug(
                f"Initialized Bitbucket client with Basic authentication. "
                f"URL: {self.config.url}, Username: {self.config.username}, "
                f"Password (masked): {mask_sensitive(self.config.password)}"
            )
        else:
            logger.debug(
                f"Initialized anonymous Bitbucket client. URL: {self.config.url}"
            )

        if self.config.custom_headers:
            session.headers.update(self.config.custom_headers)

        return session

    def build_url(self, uri: str) -> str:
        """Resolve a controller URI against the configured API root.

        Args:
            uri: URI relative to the API root

        Returns:
            Absolute URL
        """
        return f"{self.config.url}/{uri.lstrip('/')}"

    def _cache_key(self, uri: str, params: dict[str, Any] | None) -> str:
        url = httpx.URL(self.build_url(uri))
        if params:
            url = url.copy_merge_params(params)
        return str(url)

    def repository(self, owner: str, slug: str) -> RepositoryController:
        """Shortcut for ``client.users[owner].repositories[slug]``."""
        return self.users[owner].repositories[slug]

    def get(
        self,
        uri: str,
        params: dict[str, Any] | None = None,
        force_cache_invalidation: bool = False,
    ) -> Any:
        """Send GET request, serving it from the cache when possible.

        Args:
            uri: URI relative to the API root
            params: Query parameters
            force_cache_invalidation: Drop the cached copy of this URL and fetch
                again; cached children are kept

        Returns:
            Decoded JSON response

        Raises:
            BitbucketApiError: If the request fails
        """
        key = self._cache_key(uri, params)

        generation = None
        if self.cache is not None:
            if force_cache_invalidation:
                self.cache.discard(key)
            else:
                cached = self.cache.get(key)
                if cached is not None:
                    logger.debug(f"Cache hit for {key}")
                    return cached
            generation = self.cache.generation

        url = self.build_url(uri)
        logger.debug(f"Sending GET request to {url}")
        data = self._send("GET", url, params=params)

        if self.cache is not None and data is not None:
            self.cache.set(key, data, generation)
        return data

    def post(self, uri: str, data: dict[str, Any] | None = None) -> Any:
        """Send POST request with a form-encoded body.

        Args:
            uri: URI relative to the API root
            data: Form fields

        Returns:
            Decoded JSON response

        Raises:
            BitbucketApiError: If the request fails
        """
        url = self.build_url(uri)
        logger.debug(f"Sending POST request to {url}")
        return self._send("POST", url, data=data)

    def put(self, uri: str, data: dict[str, Any] | None = None) -> Any:
        """Send PUT request with a form-encoded body.

        Args:
            uri: URI relative to the API root
            data: Form fields

        Returns:
            Decoded JSON response

        Raises:
            BitbucketApiError: If the request fails
        """
        url = self.build_url(uri)
        logger.debug(f"Sending PUT request to {url}")
        return self._send("PUT", url, data=data)

    def delete(self, uri: str) -> Any:
        """Send DELETE request.

        Args:
            uri: URI relative to the API root

        Returns:
            Decoded JSON response, or None when the body is empty

        Raises:
            BitbucketApiError: If the request fails
        """
        url = self.build_url(uri)
        logger.debug(f"Sending DELETE request to {url}")
        return self._send("DELETE", url)

    def invalidate_cache_objects(self, uri: str) -> None:
        """Drop cached responses for ``uri`` and everything below it.

        Args:
            uri: URI relative to the API root
        """
        if self.cache is not None:
            self.cache.invalidate(self.build_url(uri))

    def _send(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> Any:
        try:
            if method == "GET":
                response = self.session.get(url, params=params)
            elif method == "POST":
                response = self.session.post(url, data=data)
            elif method == "PUT":
                response = self.session.put(url, data=data)
            else:
                response = self.session.delete(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP error {status} for {method} {url}: {e.response.text}")
            message = f"HTTP error: {status} - {e.response.text}"
            if status in (401, 403):
                raise BitbucketAuthenticationError(message, status) from e
            if status == 404:
                raise BitbucketNotFoundError(message, status) from e
            raise BitbucketApiError(message, status) from e
        except httpx.RequestError as e:
            logger.error(f"Request error for {method} {url}: {str(e)}")
            raise BitbucketApiError(f"Request error: {str(e)}") from e

        if not response.text:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON in response to {method} {url}")
            raise BitbucketApiError(f"Invalid JSON response: {str(e)}") from e

    def close(self) -> None:
        """Close HTTP session."""
        self.session.close()

    def __enter__(self) -> "BitbucketClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
