"""Bitbucket v1 models."""

from .base import ApiModel
from .changeset import (
    BranchModel,
    ChangesetFileModel,
    ChangesetModel,
    ChangesetsModel,
    DiffstatModel,
    TagModel,
)
from .comment import CommentModel
from .event import EventModel, EventsModel
from .issue import IssueMetadataModel, IssueModel, IssuesModel
from .repository import RepositoryDetailedModel
from .user import FollowersModel, UserInfoModel, UserModel

__all__ = [
    "ApiModel",
    "BranchModel",
    "ChangesetFileModel",
    "ChangesetModel",
    "ChangesetsModel",
    "CommentModel",
    "DiffstatModel",
    "EventModel",
    "EventsModel",
    "FollowersModel",
    "IssueMetadataModel",
    "IssueModel",
    "IssuesModel",
    "RepositoryDetailedModel",
    "TagModel",
    "UserInfoModel",
    "UserModel",
]
