"""Controllers for a single repository and its read-only resources."""

import logging
from typing import TYPE_CHECKING, Any

from ..constants import DEFAULT_CHANGESETS_LIMIT, DEFAULT_EVENTS_LIMIT
from ..models import (
    BranchModel,
    ChangesetModel,
    ChangesetsModel,
    DiffstatModel,
    EventsModel,
    FollowersModel,
    RepositoryDetailedModel,
    TagModel,
)
from .base import Controller
from .issues import IssuesController

if TYPE_CHECKING:
    from ..client import BitbucketClient
    from .users import UserController, UserRepositoriesController

logger = logging.getLogger("bitbucket-v1.controllers")


class RepositoryController(Controller):
    """Provides access to a repository."""

    def __init__(
        self,
        client: "BitbucketClient",
        repositories: "UserRepositoriesController",
        slug: str,
    ) -> None:
        """Initialize the repository controller.

        Args:
            client: Bitbucket client
            repositories: The owner's repositories collection
            slug: The repository slug
        """
        super().__init__(client)
        self.repositories = repositories
        self.slug = slug
        self.issues = IssuesController(client, self)
        self.changesets = ChangesetsController(client, self)

    @property
    def owner(self) -> "UserController":
        """The UserController of the repository owner."""
        return self.repositories.owner

    @property
    def uri(self) -> str:
        return f"{self.repositories.uri}/{self.slug}"

    def get_info(
        self, force_cache_invalidation: bool = False
    ) -> RepositoryDetailedModel:
        """Get the repository details."""
        response = self.client.get(
            self.uri, force_cache_invalidation=force_cache_invalidation
        )
        return RepositoryDetailedModel.from_api_response(response)

    def get_followers(self, force_cache_invalidation: bool = False) -> FollowersModel:
        """Get the users following this repository."""
        response = self.client.get(
            f"{self.uri}/followers", force_cache_invalidation=force_cache_invalidation
        )
        return FollowersModel.from_api_response(response)

    def get_branches(
        self, force_cache_invalidation: bool = False
    ) -> dict[str, BranchModel]:
        """Get the branch heads of the repository, keyed by branch name."""
        response = self.client.get(
            f"{self.uri}/branches", force_cache_invalidation=force_cache_invalidation
        )
        return {
            name: BranchModel.from_api_response(head, name=name)
            for name, head in (response or {}).items()
        }

    def get_tags(self, force_cache_invalidation: bool = False) -> dict[str, TagModel]:
        """Get the tags of the repository, keyed by tag name."""
        response = self.client.get(
            f"{self.uri}/tags", force_cache_invalidation=force_cache_invalidation
        )
        return {
            name: TagModel.from_api_response(target, name=name)
            for name, target in (response or {}).items()
        }

    def get_events(
        self, start: int = 0, limit: int = DEFAULT_EVENTS_LIMIT
    ) -> EventsModel:
        """Get one page of the repository's activity feed.

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


class ChangesetsController(Controller):
    """Provides access to the changesets of a repository."""

    def __init__(
        self, client: "BitbucketClient", repository: RepositoryController
    ) -> None:
        super().__init__(client)
        self.repository = repository

    def __getitem__(self, node: str) -> "ChangesetController":
        """Access a specific changeset by its node hash."""
        return ChangesetController(self.client, self, node)

    @property
    def uri(self) -> str:
        return f"{self.repository.uri}/changesets"

    def get_changesets(
        self, limit: int = DEFAULT_CHANGESETS_LIMIT, start: str | None = None
    ) -> ChangesetsModel:
        """Get one page of changesets, newest first.

        Args:
            limit: The maximum number of changesets returned
            start: Node hash to start from (default: the repository tip)

        Returns:
            Page of changesets
        """
        params: dict[str, Any] = {"limit": limit}
        if start:
            params["start"] = start
        response = self.client.get(f"{self.uri}/", params=params)
        return ChangesetsModel.from_api_response(response)


class ChangesetController(Controller):
    """Provides access to a single changeset."""

    def __init__(
        self, client: "BitbucketClient", changesets: ChangesetsController, node: str
    ) -> None:
        super().__init__(client)
        self.changesets = changesets
        self.node = node

    @property
    def uri(self) -> str:
        return f"{self.changesets.uri}/{self.node}"

    def get_info(self, force_cache_invalidation: bool = False) -> ChangesetModel:
        """Get the changeset."""
        response = self.client.get(
            self.uri, force_cache_invalidation=force_cache_invalidation
        )
        return ChangesetModel.from_api_response(response)

    def get_diffstat(
        self, force_cache_invalidation: bool = False
    ) -> list[DiffstatModel]:
        """Get per-file line counts of the changeset."""
        response = self.client.get(
            f"{self.uri}/diffstat", force_cache_invalidation=force_cache_invalidation
        )
        return [
            DiffstatModel.from_api_response(entry)
            for entry in response or []
            if isinstance(entry, dict)
        ]
