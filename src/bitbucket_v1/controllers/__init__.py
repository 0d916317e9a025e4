"""Controllers mirroring the Bitbucket v1 resource hierarchy.

``users[name].repositories[slug].issues[id].comments[id]`` builds the same
URI the server uses, one segment per level.
"""

from .base import Controller
from .comments import CommentController, CommentsController
from .issues import IssueController, IssuesController
from .repositories import (
    ChangesetController,
    ChangesetsController,
    RepositoryController,
)
from .users import (
    AccountController,
    UserController,
    UserRepositoriesController,
    UsersController,
)

__all__ = [
    "AccountController",
    "ChangesetController",
    "ChangesetsController",
    "CommentController",
    "CommentsController",
    "Controller",
    "IssueController",
    "IssuesController",
    "RepositoryController",
    "UserController",
    "UserRepositoriesController",
    "UsersController",
]
