"""Constants for the Bitbucket v1 client."""

from typing import Final

# Authentication methods
AUTH_TYPE_BASIC: Final[str] = "basic"
AUTH_TYPE_ANONYMOUS: Final[str] = "anonymous"

# Environment variable names
ENV_BITBUCKET_URL: Final[str] = "BITBUCKET_URL"
ENV_BITBUCKET_USERNAME: Final[str] = "BITBUCKET_USERNAME"
ENV_BITBUCKET_PASSWORD: Final[str] = "BITBUCKET_PASSWORD"
ENV_BITBUCKET_SSL_VERIFY: Final[str] = "BITBUCKET_SSL_VERIFY"
ENV_BITBUCKET_TIMEOUT: Final[str] = "BITBUCKET_TIMEOUT"
ENV_BITBUCKET_CACHE_ENABLED: Final[str] = "BITBUCKET_CACHE_ENABLED"
ENV_BITBUCKET_CACHE_MAX_ENTRIES: Final[str] = "BITBUCKET_CACHE_MAX_ENTRIES"
ENV_BITBUCKET_CUSTOM_HEADERS: Final[str] = "BITBUCKET_CUSTOM_HEADERS"

# API endpoints
DEFAULT_API_URL: Final[str] = "https://api.bitbucket.org/1.0"

# Default values
DEFAULT_SSL_VERIFY: Final[bool] = True
DEFAULT_TIMEOUT: Final[float] = 30.0
DEFAULT_CACHE_MAX_ENTRIES: Final[int] = 1000
DEFAULT_ISSUES_LIMIT: Final[int] = 15
DEFAULT_CHANGESETS_LIMIT: Final[int] = 15
DEFAULT_EVENTS_LIMIT: Final[int] = 25
