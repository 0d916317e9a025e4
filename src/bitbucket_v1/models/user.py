"""
Bitbucket user models.

This module provides Pydantic models for Bitbucket v1 users and the
follower lists attached to users, repositories and issues.
"""

import logging
from typing import Any

from pydantic import Field

from .base import ApiModel
from .constants import EMPTY_STRING
from .repository import RepositoryDetailedModel

logger = logging.getLogger(__name__)


class UserModel(ApiModel):
    """Model representing a Bitbucket user or team."""

    username: str = EMPTY_STRING
    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None
    avatar: str | None = None
    resource_uri: str | None = None
    is_team: bool = False

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "UserModel":
        """Create a UserModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()

        display_name = data.get("display_name")
        if not display_name:
            full_name = " ".join(
                part for part in (data.get("first_name"), data.get("last_name")) if part
            )
            display_name = full_name or None

        return cls(
            username=data.get("username", EMPTY_STRING),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            display_name=display_name,
            avatar=data.get("avatar"),
            resource_uri=data.get("resource_uri"),
            is_team=bool(data.get("is_team", False)),
        )


class FollowersModel(ApiModel):
    """Model representing the followers of a user, repository or issue."""

    count: int = 0
    followers: list[UserModel] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "FollowersModel":
        """Create a FollowersModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()

        followers = [
            UserModel.from_api_response(follower)
            for follower in data.get("followers", [])
            if isinstance(follower, dict)
        ]
        return cls(count=int(data.get("count", len(followers))), followers=followers)


class UserInfoModel(ApiModel):
    """Model representing a user together with their repositories."""

    user: UserModel = Field(default_factory=UserModel)
    repositories: list[RepositoryDetailedModel] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "UserInfoModel":
        """Create a UserInfoModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()

        repositories = []
        for repo_data in data.get("repositories", []) or []:
            if not isinstance(repo_data, dict):
                logger.debug("Skipping non-dictionary repository entry")
                continue
            repositories.append(RepositoryDetailedModel.from_api_response(repo_data))

        return cls(
            user=UserModel.from_api_response(data.get("user", {})),
            repositories=repositories,
        )
