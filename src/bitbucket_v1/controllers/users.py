"""Controllers for Bitbucket users and the authenticated account."""

import logging
from typing import TYPE_CHECKING, Any

from ..constants import DEFAULT_EVENTS_LIMIT
from ..models import (
    EventsModel,
    FollowersModel,
    RepositoryDetailedModel,
    UserInfoModel,
)
from .base import Controller
from .repositories import RepositoryController

if TYPE_CHECKING:
    from ..client import BitbucketClient

logger = logging.getLogger("bitbucket-v1.controllers")


def _repository_list(response: Any) -> list[RepositoryDetailedModel]:
    return [
        RepositoryDetailedModel.from_api_response(entry)
        for entry in response or []
        if isinstance(entry, dict)
    ]


class UsersController(Controller):
    """Entry point for looking users up by username."""

    def __getitem__(self, username: str) -> "UserController":
        """Access a specific user by username."""
        return UserController(self.client, username)

    @property
    def uri(self) -> str:
        return "users"


class UserController(Controller):
    """Provides access to a user's profile, feeds and repositories."""

    def __init__(self, client: "BitbucketClient", username: str) -> None:
        """Initialize the user controller.

        Args:
            client: Bitbucket client
            username: The user's (or team's) username
        """
        super().__init__(client)
        self.username = username
        self.repositories = UserRepositoriesController(client, self)

    @property
    def uri(self) -> str:
        return f"users/{self.username}"

    def get_info(self, force_cache_invalidation: bool = False) -> UserInfoModel:
        """Get the user together with their visible repositories."""
        response = self.client.get(
            self.uri, force_cache_invalidation=force_cache_invalidation
        )
        return UserInfoModel.from_api_response(response)

    def get_followers(self, force_cache_invalidation: bool = False) -> FollowersModel:
        """Get the users following this user."""
        response = self.client.get(
            f"{self.uri}/followers", force_cache_invalidation=force_cache_invalidation
        )
        return FollowersModel.from_api_response(response)

    def get_events(
        self, start: int = 0, limit: int = DEFAULT_EVENTS_LIMIT
    ) -> EventsModel:
        """Get one page of the user's activity feed.

        Args:
            start: The start index of the returned set
            limit: The maximum number of events returned

        Returns:
            Page of events
        """
        response = self.client.get(
            f"{self.uri}/events", params={"start": start, "limit": limit}
        )
        return EventsModel.from_api_response(response)


class UserRepositoriesController(Controller):
    """Provides access to the repositories owned by a user."""

    def __init__(self, client: "BitbucketClient", owner: UserController) -> None:
        super().__init__(client)
        self.owner = owner

    def __getitem__(self, slug: str) -> RepositoryController:
        """Access a specific repository by its slug."""
        return RepositoryController(self.client, self, slug)

    @property
    def uri(self) -> str:
        return f"repositories/{self.owner.username}"


class AccountController(Controller):
    """Provides access to the authenticated user's account."""

    @property
    def uri(self) -> str:
        return "user"

    def get_info(self, force_cache_invalidation: bool = False) -> UserInfoModel:
        """Get the authenticated user together with their repositories."""
        response = self.client.get(
            self.uri, force_cache_invalidation=force_cache_invalidation
        )
        return UserInfoModel.from_api_response(response)

    def get_repositories(
        self, force_cache_invalidation: bool = False
    ) -> list[RepositoryDetailedModel]:
        """Get every repository the authenticated user has access to."""
        response = self.client.get(
            f"{self.uri}/repositories",
            force_cache_invalidation=force_cache_invalidation,
        )
        return _repository_list(response)

    def get_followed_repositories(
        self, force_cache_invalidation: bool = False
    ) -> list[RepositoryDetailedModel]:
        """Get the repositories the authenticated user follows."""
        response = self.client.get(
            f"{self.uri}/follows", force_cache_invalidation=force_cache_invalidation
        )
        return _repository_list(response)
