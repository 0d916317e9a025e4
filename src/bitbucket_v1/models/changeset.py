"""
Bitbucket changeset models.

This module provides Pydantic models for changesets, their diff
statistics, and the branch and tag heads that point at them.
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import Field

from ..utils.date import parse_datetime
from .base import ApiModel
from .constants import EMPTY_STRING

logger = logging.getLogger(__name__)


class ChangesetFileModel(ApiModel):
    """A file touched by a changeset."""

    type: str = EMPTY_STRING
    file: str = EMPTY_STRING


class ChangesetModel(ApiModel):
    """Model representing a single changeset (commit)."""

    node: str = EMPTY_STRING
    raw_node: str | None = None
    author: str | None = None
    raw_author: str | None = None
    branch: str | None = None
    message: str | None = None
    revision: int | None = None
    size: int | None = None
    parents: list[str] = Field(default_factory=list)
    files: list[ChangesetFileModel] = Field(default_factory=list)
    timestamp: datetime | None = None

    @classmethod
    def _fields_from_api(cls, data: dict[str, Any]) -> dict[str, Any]:
        files = [
            ChangesetFileModel(
                type=entry.get("type", EMPTY_STRING),
                file=entry.get("file", EMPTY_STRING),
            )
            for entry in data.get("files", []) or []
            if isinstance(entry, dict)
        ]
        return {
            "node": data.get("node", EMPTY_STRING),
            "raw_node": data.get("raw_node"),
            "author": data.get("author"),
            "raw_author": data.get("raw_author"),
            "branch": data.get("branch"),
            "message": data.get("message"),
            "revision": data.get("revision"),
            "size": data.get("size"),
            "parents": [str(p) for p in data.get("parents", []) or []],
            "files": files,
            "timestamp": parse_datetime(data.get("utc_timestamp")),
        }

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ChangesetModel":
        """Create a ChangesetModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()
        return cls(**cls._fields_from_api(data))


class BranchModel(ChangesetModel):
    """The head changeset of a named branch."""

    name: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "BranchModel":
        """Create a BranchModel; the name comes from the key of the listing."""
        if not data or not isinstance(data, dict):
            return cls(name=kwargs.get("name", EMPTY_STRING))
        return cls(name=kwargs.get("name", EMPTY_STRING), **cls._fields_from_api(data))


class TagModel(ChangesetModel):
    """The changeset a tag points at."""

    name: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "TagModel":
        """Create a TagModel; the name comes from the key of the listing."""
        if not data or not isinstance(data, dict):
            return cls(name=kwargs.get("name", EMPTY_STRING))
        return cls(name=kwargs.get("name", EMPTY_STRING), **cls._fields_from_api(data))


class ChangesetsModel(ApiModel):
    """Model representing one page of a repository's changesets."""

    count: int = 0
    start: str | None = None
    limit: int = 0
    changesets: list[ChangesetModel] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ChangesetsModel":
        """Create a ChangesetsModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()

        changesets = [
            ChangesetModel.from_api_response(entry)
            for entry in data.get("changesets", [])
            if isinstance(entry, dict)
        ]
        return cls(
            count=int(data.get("count", len(changesets))),
            start=data.get("start"),
            limit=int(data.get("limit") or len(changesets)),
            changesets=changesets,
        )


class DiffstatModel(ApiModel):
    """Lines added and removed for one file of a changeset."""

    type: str = EMPTY_STRING
    file: str = EMPTY_STRING
    added: int = 0
    removed: int = 0

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "DiffstatModel":
        """Create a DiffstatModel from a Bitbucket API response."""
        if not data or not isinstance(data, dict):
            return cls()

        stats = data.get("diffstat") or {}
        return cls(
            type=data.get("type", EMPTY_STRING),
            file=data.get("file", EMPTY_STRING),
            added=int(stats.get("added") or 0),
            removed=int(stats.get("removed") or 0),
        )
