"""Base model for all pixbuild Pydantic models.

This module provides a base model class that enforces consistent serialization
behavior across all pixbuild models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class PixbuildBaseModel(BaseModel):
    """Base model class for all pixbuild Pydantic models."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        use_enum_values=False,
        validate_assignment=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to a JSON-compatible dictionary."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")

    def to_dict_full(self) -> dict[str, Any]:
        """Convert model to dictionary including all fields (even unset ones)."""
        return self.model_dump(by_alias=True, exclude_unset=False, mode="json")
