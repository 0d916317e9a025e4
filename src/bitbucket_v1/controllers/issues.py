"""Controllers for the issue tracker of a repository."""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from ..constants import DEFAULT_ISSUES_LIMIT
from ..models import FollowersModel, IssueModel, IssuesModel
from .base import Controller
from .comments import CommentsController

if TYPE_CHECKING:
    from ..client import BitbucketClient
    from .repositories import RepositoryController

logger = logging.getLogger("bitbucket-v1.controllers")


def _issue_form(issue: IssueModel | Mapping[str, str]) -> dict[str, str]:
    if isinstance(issue, IssueModel):
        return issue.to_form_data()
    return dict(issue)


class IssuesController(Controller):
    """Provides access to the issues owned by a repository."""

    def __init__(
        self, client: "BitbucketClient", repository: "RepositoryController"
    ) -> None:
        """Initialize the issues controller.

        Args:
            client: Bitbucket client
            repository: The repository the issues belong to
        """
        super().__init__(client)
        self.repository = repository

    def __getitem__(self, issue_id: int) -> "IssueController":
        """Access a specific issue by its id."""
        return IssueController(self.client, self.repository, issue_id)

    @property
    def uri(self) -> str:
        return f"{self.repository.uri}/issues"

    def search(self, search: str) -> IssuesModel:
        """Search through the issues for a specific match.

        Args:
            search: Text to search for

        Returns:
            Matching issues
        """
        logger.debug(f"Searching issues of {self.repository.uri} for '{search}'")
        response = self.client.get(f"{self.uri}/", params={"search": search})
        return IssuesModel.from_api_response(response)

    def get_issues(
        self, start: int = 0, limit: int = DEFAULT_ISSUES_LIMIT
    ) -> IssuesModel:
        """Get one page of the repository's issues.

        Args:
            start: The start index of the returned set
            limit: The maximum number of issues returned

        Returns:
            Page of issues
        """
        response = self.client.get(
            f"{self.uri}/", params={"start": start, "limit": limit}
        )
        return IssuesModel.from_api_response(response)

    def create(self, issue: IssueModel | Mapping[str, str]) -> IssueModel:
        """Create a new issue for this repository.

        Args:
            issue: Issue model or raw form data

        Returns:
            Created issue

        Raises:
            BitbucketApiError: If the API request fails
        """
        self.client.invalidate_cache_objects(self.uri)
        response = self.client.post(self.uri, data=_issue_form(issue))
        return IssueModel.from_api_response(response)

    def update(
        self, issue_id: int, issue: IssueModel | Mapping[str, str]
    ) -> IssueModel:
        """Update an issue from its id.

        Args:
            issue_id: The issue id
            issue: Issue model or raw form data

        Returns:
            Updated issue
        """
        return self[issue_id].update(issue)


class IssueController(Controller):
    """Provides access to an issue."""

    def __init__(
        self,
        client: "BitbucketClient",
        repository: "RepositoryController",
        issue_id: int,
    ) -> None:
        """Initialize the issue controller.

        Args:
            client: Bitbucket client
            repository: The repository this issue belongs to
            issue_id: The id of this issue
        """
        super().__init__(client)
        self.id = issue_id
        self.repository = repository
        self.comments = CommentsController(client, self)

    @property
    def uri(self) -> str:
        return f"{self.repository.uri}/issues/{self.id}"

    def get_issue(self, force_cache_invalidation: bool = False) -> IssueModel:
        """Request the issue information."""
        response = self.client.get(
            self.uri, force_cache_invalidation=force_cache_invalidation
        )
        return IssueModel.from_api_response(response)

    def get_issue_followers(
        self, force_cache_invalidation: bool = False
    ) -> FollowersModel:
        """Request the followers of this issue."""
        response = self.client.get(
            f"{self.uri}/followers", force_cache_invalidation=force_cache_invalidation
        )
        return FollowersModel.from_api_response(response)

    def delete_issue(self) -> None:
        """Delete this issue."""
        logger.debug(f"Deleting issue {self.uri}")
        self.client.invalidate_cache_objects(self.repository.issues.uri)
        self.client.delete(self.uri)

    def update(self, issue: IssueModel | Mapping[str, str]) -> IssueModel:
        """Update the issue.

        Args:
            issue: Issue model or raw form data

        Returns:
            Updated issue
        """
        self.client.invalidate_cache_objects(self.repository.issues.uri)
        response = self.client.put(self.uri, data=_issue_form(issue))
        return IssueModel.from_api_response(response)
