"""Base class for Bitbucket v1 resource controllers."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..client import BitbucketClient

logger = logging.getLogger("bitbucket-v1.controllers")


class Controller(ABC):
    """A handle on one server-side resource.

    Controllers only know how to build their URI from their parent's and
    which client to send requests through. Creating one never performs I/O.
    """

    def __init__(self, client: "BitbucketClient") -> None:
        self.client = client

    @property
    @abstractmethod
    def uri(self) -> str:
        """URI of the resource, relative to the API root."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.uri}>"
