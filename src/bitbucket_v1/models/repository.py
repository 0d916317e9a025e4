"""
Bitbucket repository models.

This module provides Pydantic models for Bitbucket v1 repositories.
"""

import logging
from datetime import datetime
from typing import Any

from ..utils.date import parse_datetime
from .base import ApiModel
from .constants import EMPTY_STRING, UNKNOWN

logger = logging.getLogger(__name__)


class RepositoryDetailedModel(ApiModel):
    """
    Model representing a Bitbucket repository.

    The v1 API returns the owner as a bare username and the fork parent as
    a nested repository object, of which only the owner and slug are kept.
    """

    slug: str = EMPTY_STRING
    name: str = UNKNOWN
    owner: str = EMPTY_STRING
    scm: str | None = None
    description: str | None = None
    website: str | None = None
    language: str | None = None
    logo: str | None = None
    resource_uri: str | None = None
    state: str | None = None
    size: int | None = None
    followers_count: int = 0
    forks_count: int = 0
    is_private: bool = False
    is_fork: bool = False
    is_mq: bool = False
    read_only: bool = False
    has_issues: bool = False
    has_wiki: bool = False
    no_public_forks: bool = False
    fork_of: str | None = None
    created_on: datetime | None = None
    last_updated: datetime | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "RepositoryDetailedModel":
        """Create a RepositoryDetailedModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()

        fork_of = None
        if parent := data.get("fork_of"):
            if isinstance(parent, dict) and parent.get("slug"):
                fork_of = f"{parent.get('owner', EMPTY_STRING)}/{parent['slug']}"

        return cls(
            slug=data.get("slug", EMPTY_STRING),
            name=data.get("name") or UNKNOWN,
            owner=data.get("owner") or EMPTY_STRING,
            scm=data.get("scm"),
            description=data.get("description") or None,
            website=data.get("website") or None,
            language=data.get("language") or None,
            logo=data.get("logo"),
            resource_uri=data.get("resource_uri"),
            state=data.get("state"),
            size=data.get("size"),
            followers_count=int(data.get("followers_count") or 0),
            forks_count=int(data.get("forks_count") or 0),
            is_private=bool(data.get("is_private", False)),
            is_fork=bool(data.get("is_fork", False)),
            is_mq=bool(data.get("is_mq", False)),
            read_only=bool(data.get("read_only", False)),
            has_issues=bool(data.get("has_issues", False)),
            has_wiki=bool(data.get("has_wiki", False)),
            no_public_forks=bool(data.get("no_public_forks", False)),
            fork_of=fork_of,
            created_on=parse_datetime(data.get("utc_created_on")),
            last_updated=parse_datetime(data.get("utc_last_updated")),
        )

    @property
    def full_name(self) -> str:
        """Owner and slug joined the way Bitbucket displays them."""
        return f"{self.owner}/{self.slug}"
