"""Comment models for Bitbucket issues."""

from datetime import datetime
from typing import Any

from ..utils.date import parse_datetime
from .base import ApiModel
from .user import UserModel


class CommentModel(ApiModel):
    """Model representing a comment on an issue."""

    comment_id: int | None = None
    content: str | None = None
    author_info: UserModel | None = None
    is_spam: bool = False
    created_on: datetime | None = None
    updated_on: datetime | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "CommentModel":
        """Create a CommentModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()

        author_data = data.get("author_info")
        return cls(
            comment_id=data.get("comment_id"),
            content=data.get("content"),
            author_info=UserModel.from_api_response(author_data)
            if author_data
            else None,
            is_spam=bool(data.get("is_spam", False)),
            created_on=parse_datetime(data.get("utc_created_on")),
            updated_on=parse_datetime(data.get("utc_updated_on")),
        )

    def to_form_data(self) -> dict[str, str]:
        """Return the form fields the comments endpoint accepts."""
        if not self.content:
            return {}
        return {"content": self.content}
