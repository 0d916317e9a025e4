"""Configuration module for Bitbucket v1 API access."""

import logging
import os
from dataclasses import dataclass, field
from typing import Literal

from .constants import (
    AUTH_TYPE_ANONYMOUS,
    AUTH_TYPE_BASIC,
    DEFAULT_API_URL,
    DEFAULT_CACHE_MAX_ENTRIES,
    DEFAULT_SSL_VERIFY,
    DEFAULT_TIMEOUT,
    ENV_BITBUCKET_CACHE_ENABLED,
    ENV_BITBUCKET_CACHE_MAX_ENTRIES,
    ENV_BITBUCKET_CUSTOM_HEADERS,
    ENV_BITBUCKET_PASSWORD,
    ENV_BITBUCKET_SSL_VERIFY,
    ENV_BITBUCKET_TIMEOUT,
    ENV_BITBUCKET_URL,
    ENV_BITBUCKET_USERNAME,
)
from .utils.env import get_custom_headers, is_env_ssl_verify, is_env_truthy

logger = logging.getLogger("bitbucket-v1.config")


@dataclass
class BitbucketConfig:
    """Configuration for Bitbucket v1 API access.

    Supports two authentication methods:
    - Basic auth (username + password or app password)
    - Anonymous access to public resources
    """

    url: str = DEFAULT_API_URL
    auth_type: Literal["basic", "anonymous"] = AUTH_TYPE_ANONYMOUS
    username: str | None = None
    password: str | None = None
    ssl_verify: bool = DEFAULT_SSL_VERIFY
    timeout: float = DEFAULT_TIMEOUT
    cache_enabled: bool = True
    cache_max_entries: int = DEFAULT_CACHE_MAX_ENTRIES
    custom_headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.url = self.url.rstrip("/")
        if not self.url:
            raise ValueError("Bitbucket API URL must not be empty")

        if self.auth_type == AUTH_TYPE_BASIC:
            if not self.username or not self.password:
                error_msg = "Basic authentication requires both username and password"
                raise ValueError(error_msg)
        elif self.auth_type != AUTH_TYPE_ANONYMOUS:
            raise ValueError(f"Unsupported auth type: {self.auth_type}")

        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")

        if self.cache_max_entries <= 0:
            raise ValueError(
                f"Cache size must be positive, got {self.cache_max_entries}"
            )

    @classmethod
    def from_env(cls) -> "BitbucketConfig":
        """Create configuration from environment variables.

        Environment variables:
            BITBUCKET_URL: API root (default: https://api.bitbucket.org/1.0)
            BITBUCKET_USERNAME: Username for basic auth
            BITBUCKET_PASSWORD: Password or app password for basic auth
            BITBUCKET_SSL_VERIFY: SSL verification setting (default: true)
            BITBUCKET_TIMEOUT: Request timeout in seconds (default: 30)
            BITBUCKET_CACHE_ENABLED: Response cache toggle (default: true)
            BITBUCKET_CACHE_MAX_ENTRIES: Cached responses kept (default: 1000)
            BITBUCKET_CUSTOM_HEADERS: Extra headers as ``Name=value,Other=value``

        Returns:
            BitbucketConfig instance

        Raises:
            ValueError: If the configuration is incomplete or invalid
        """
        url = os.getenv(ENV_BITBUCKET_URL) or DEFAULT_API_URL

        username = os.getenv(ENV_BITBUCKET_USERNAME)
        password = os.getenv(ENV_BITBUCKET_PASSWORD)

        if username or password:
            # A half-configured pair is rejected by __post_init__
            auth_type = AUTH_TYPE_BASIC
        else:
            logger.debug("No Bitbucket credentials found, using anonymous access")
            auth_type = AUTH_TYPE_ANONYMOUS

        timeout_str = os.getenv(ENV_BITBUCKET_TIMEOUT)
        try:
            timeout = float(timeout_str) if timeout_str else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(
                f"{ENV_BITBUCKET_TIMEOUT} must be a number, got '{timeout_str}'"
            ) from None

        max_entries_str = os.getenv(ENV_BITBUCKET_CACHE_MAX_ENTRIES)
        try:
            cache_max_entries = (
                int(max_entries_str) if max_entries_str else DEFAULT_CACHE_MAX_ENTRIES
            )
        except ValueError:
            raise ValueError(
                f"{ENV_BITBUCKET_CACHE_MAX_ENTRIES} must be an integer, "
                f"got '{max_entries_str}'"
            ) from None

        return cls(
            url=url,
            auth_type=auth_type,
            username=username,
            password=password,
            ssl_verify=is_env_ssl_verify(ENV_BITBUCKET_SSL_VERIFY),
            timeout=timeout,
            cache_enabled=is_env_truthy(ENV_BITBUCKET_CACHE_ENABLED, "true"),
            cache_max_entries=cache_max_entries,
            custom_headers=get_custom_headers(ENV_BITBUCKET_CUSTOM_HEADERS),
        )

    def is_auth_configured(self) -> bool:
        """Check if credentials are configured.

        Returns:
            True for basic auth with both username and password, False otherwise
        """
        return self.auth_type == AUTH_TYPE_BASIC and bool(
            self.username and self.password
        )
