"""Controllers for the comments of an issue."""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from ..models import CommentModel
from .base import Controller

if TYPE_CHECKING:
    from ..client import BitbucketClient
    from .issues import IssueController

logger = logging.getLogger("bitbucket-v1.controllers")


def _comment_form(comment: CommentModel | Mapping[str, str]) -> dict[str, str]:
    if isinstance(comment, CommentModel):
        return comment.to_form_data()
    return dict(comment)


class CommentsController(Controller):
    """Accesses the comments of an issue."""

    def __init__(self, client: "BitbucketClient", issue: "IssueController") -> None:
        """Initialize the comments controller.

        Args:
            client: Bitbucket client
            issue: The issue these comments belong to
        """
        super().__init__(client)
        self.issue = issue

    def __getitem__(self, comment_id: int) -> "CommentController":
        """Access a specific comment by its id."""
        return CommentController(self.client, self, comment_id)

    @property
    def uri(self) -> str:
        return f"{self.issue.uri}/comments"

    def get_comments(self, force_cache_invalidation: bool = False) -> list[CommentModel]:
        """Get all comments of the issue.

        Args:
            force_cache_invalidation: Bypass any cached copy

        Returns:
            List of comments

        Raises:
            BitbucketApiError: If the API request fails
        """
        logger.debug(f"Getting comments of {self.issue.uri}")
        response = self.client.get(
            self.uri, force_cache_invalidation=force_cache_invalidation
        )
        return [
            CommentModel.from_api_response(entry)
            for entry in response or []
            if isinstance(entry, dict)
        ]

    def create(self, comment: CommentModel | Mapping[str, str]) -> CommentModel:
        """Create a new comment on the issue.

        Args:
            comment: Comment model or raw form data

        Returns:
            Created comment

        Raises:
            BitbucketApiError: If the API request fails
        """
        self.client.invalidate_cache_objects(self.uri)
        response = self.client.post(self.uri, data=_comment_form(comment))
        return CommentModel.from_api_response(response)


class CommentController(Controller):
    """Accesses a specific comment."""

    def __init__(
        self, client: "BitbucketClient", comments: CommentsController, comment_id: int
    ) -> None:
        """Initialize the comment controller.

        Args:
            client: Bitbucket client
            comments: The comments collection this comment belongs to
            comment_id: The id of the comment
        """
        super().__init__(client)
        self.comments = comments
        self.id = comment_id

    @property
    def uri(self) -> str:
        return f"{self.comments.uri}/{self.id}"

    def get_info(self, force_cache_invalidation: bool = False) -> CommentModel:
        """Get the comment."""
        response = self.client.get(
            self.uri, force_cache_invalidation=force_cache_invalidation
        )
        return CommentModel.from_api_response(response)

    def delete_comment(self) -> None:
        """Delete this comment."""
        logger.debug(f"Deleting comment {self.uri}")
        # Covers both this comment and the issue's comment listing
        self.client.invalidate_cache_objects(self.comments.uri)
        self.client.delete(self.uri)

    def update(self, comment: CommentModel | Mapping[str, str]) -> CommentModel:
        """Update the comment.

        Args:
            comment: Comment model or raw form data

        Returns:
            Updated comment
        """
        self.client.invalidate_cache_objects(self.comments.uri)
        response = self.client.put(self.uri, data=_comment_form(comment))
        return CommentModel.from_api_response(response)
