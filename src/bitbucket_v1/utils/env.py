"""Environment variable utility functions for bitbucket-v1."""

import logging
import os

logger = logging.getLogger("bitbucket-v1.utils")


def is_env_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if environment variable is set to a standard truthy value.

    Considers 'true', '1', 'yes' as truthy values (case-insensitive).

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to a truthy value, False otherwise
    """
    return os.getenv(env_var_name, default).lower() in ("true", "1", "yes")


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def get_custom_headers(env_var_name: str) -> dict[str, str]:
    """Parse custom HTTP headers from an environment variable.

    The expected format is ``Header-One=value1,Header-Two=value2``.
    Malformed pairs are skipped.

    Args:
        env_var_name: Name of the environment variable holding the headers

    Returns:
        Dictionary of header names to values (empty when unset)
    """
    raw = os.getenv(env_var_name, "").strip()
    if not raw:
        return {}

    headers: dict[str, str] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if "=" not in pair:
            logger.warning(f"Ignoring malformed header entry in {env_var_name}")
            continue
        name, value = pair.split("=", 1)
        name = name.strip()
        if not name:
            logger.warning(f"Ignoring header with empty name in {env_var_name}")
            continue
        headers[name] = value.strip()

    return headers
