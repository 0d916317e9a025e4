"""
Bitbucket issue models.

This module provides Pydantic models for issues in a repository's issue
tracker, the paged issue listings, and the form fields sent when an issue
is created or updated.
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import Field

from ..utils.date import parse_datetime
from .base import ApiModel
from .constants import EMPTY_STRING
from .user import UserModel

logger = logging.getLogger(__name__)


class IssueMetadataModel(ApiModel):
    """Classification fields of an issue."""

    kind: str | None = None
    version: str | None = None
    component: str | None = None
    milestone: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "IssueMetadataModel":
        """Create an IssueMetadataModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            kind=data.get("kind"),
            version=data.get("version"),
            component=data.get("component"),
            milestone=data.get("milestone"),
        )


class IssueModel(ApiModel):
    """
    Model representing a Bitbucket issue.

    ``local_id`` is the issue number inside its repository and is None for
    an issue that has not been created yet.
    """

    local_id: int | None = None
    title: str = EMPTY_STRING
    content: str | None = None
    status: str | None = None
    priority: str | None = None
    responsible: UserModel | None = None
    reported_by: UserModel | None = None
    metadata: IssueMetadataModel = Field(default_factory=IssueMetadataModel)
    comment_count: int = 0
    follower_count: int = 0
    is_spam: bool = False
    resource_uri: str | None = None
    created_on: datetime | None = None
    updated_on: datetime | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "IssueModel":
        """Create an IssueModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()

        responsible_data = data.get("responsible")
        reported_by_data = data.get("reported_by")

        return cls(
            local_id=data.get("local_id"),
            title=data.get("title", EMPTY_STRING),
            content=data.get("content"),
            status=data.get("status"),
            priority=data.get("priority"),
            responsible=UserModel.from_api_response(responsible_data)
            if responsible_data
            else None,
            reported_by=UserModel.from_api_response(reported_by_data)
            if reported_by_data
            else None,
            metadata=IssueMetadataModel.from_api_response(data.get("metadata", {})),
            comment_count=int(data.get("comment_count") or 0),
            follower_count=int(data.get("follower_count") or 0),
            is_spam=bool(data.get("is_spam", False)),
            resource_uri=data.get("resource_uri"),
            created_on=parse_datetime(data.get("utc_created_on")),
            updated_on=parse_datetime(data.get("utc_last_updated")),
        )

    def to_form_data(self) -> dict[str, str]:
        """Flatten the writable fields into the form the issues endpoint accepts.

        Empty fields are left out so an update only touches what was set.

        Returns:
            Mapping of form field names to string values
        """
        fields: dict[str, Any] = {
            "title": self.title,
            "content": self.content,
            "status": self.status,
            "priority": self.priority,
            "responsible": self.responsible.username if self.responsible else None,
            "kind": self.metadata.kind,
            "component": self.metadata.component,
            "milestone": self.metadata.milestone,
            "version": self.metadata.version,
        }
        return {k: str(v) for k, v in fields.items() if v not in (None, "")}


class IssuesModel(ApiModel):
    """Model representing one page of a repository's issues."""

    count: int = 0
    search: str | None = None
    filter: dict[str, Any] = Field(default_factory=dict)
    issues: list[IssueModel] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "IssuesModel":
        """Create an IssuesModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()

        issues = []
        for issue_data in data.get("issues", []):
            if not isinstance(issue_data, dict):
                logger.debug("Skipping non-dictionary issue entry")
                continue
            issues.append(IssueModel.from_api_response(issue_data))

        filter_data = data.get("filter")
        return cls(
            count=int(data.get("count", len(issues))),
            search=data.get("search"),
            filter=filter_data if isinstance(filter_data, dict) else {},
            issues=issues,
        )
