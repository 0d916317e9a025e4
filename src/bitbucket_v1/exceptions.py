class BitbucketError(Exception):
    """Base exception for bitbucket-v1 errors."""

    pass


class BitbucketApiError(BitbucketError):
    """Raised when a request to the Bitbucket API fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class BitbucketAuthenticationError(BitbucketApiError):
    """Raised when Bitbucket API authentication fails (401/403)."""

    pass


class BitbucketNotFoundError(BitbucketApiError):
    """Raised when the requested resource does not exist (404)."""

    pass
