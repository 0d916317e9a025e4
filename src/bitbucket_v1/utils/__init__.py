"""Utility functions for bitbucket-v1."""

from .date import parse_datetime
from .env import get_custom_headers, is_env_ssl_verify, is_env_truthy

__all__ = [
    "get_custom_headers",
    "is_env_ssl_verify",
    "is_env_truthy",
    "parse_datetime",
]
