"""Event models for Bitbucket users and repositories."""

from datetime import datetime
from typing import Any

from pydantic import Field

from ..utils.date import parse_datetime
from .base import ApiModel
from .constants import EMPTY_STRING
from .repository import RepositoryDetailedModel
from .user import UserModel


class EventModel(ApiModel):
    """A single entry of an activity feed."""

    event: str = EMPTY_STRING
    node: str | None = None
    description: Any = None
    user: UserModel | None = None
    repository: RepositoryDetailedModel | None = None
    created_on: datetime | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "EventModel":
        """Create an EventModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()

        user_data = data.get("user")
        repo_data = data.get("repository")
        return cls(
            event=data.get("event", EMPTY_STRING),
            node=data.get("node"),
            description=data.get("description"),
            user=UserModel.from_api_response(user_data) if user_data else None,
            repository=RepositoryDetailedModel.from_api_response(repo_data)
            if repo_data
            else None,
            created_on=parse_datetime(data.get("utc_created_on")),
        )


class EventsModel(ApiModel):
    """Model representing one page of an activity feed."""

    count: int = 0
    events: list[EventModel] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "EventsModel":
        """Create an EventsModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()

        events = [
            EventModel.from_api_response(entry)
            for entry in data.get("events", [])
            if isinstance(entry, dict)
        ]
        return cls(count=int(data.get("count", len(events))), events=events)
