"""Base class shared by every QPay wire model."""

from pydantic import BaseModel, ConfigDict


class APIBaseModel(BaseModel):
    """
    Base class for all API models.

    Attribute names equal the snake_case wire keys; the few keys that are not
    valid Python identifiers use an alias, and ``populate_by_name`` lets callers
    construct models with either spelling.
    """

    model_config = ConfigDict(populate_by_name=True)

    def __str__(self) -> str:
        """Return a formatted JSON representation of the model."""
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True)

    def to_wire(self) -> bytes:
        """Encode for the request body, omitting fields that are not set."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
