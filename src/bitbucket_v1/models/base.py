"""
Base models for Bitbucket v1 API responses.

Every resource model is built from the raw JSON with
``from_api_response`` and rendered for display with ``to_simplified_dict``.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """Base class for Bitbucket v1 API models."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """Create a model instance from raw API data.

        Args:
            data: Raw API response

        Returns:
            Model instance
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert the model to a JSON-friendly dictionary without empty fields."""
        return self.model_dump(mode="json", exclude_none=True)
