"""Shared base for API models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Immutable record populated from camelCase server JSON.

    Attributes are snake_case in Python; both spellings are accepted when
    validating and unknown server fields are kept.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    def to_api(self) -> dict:
        """Serialize back to the server's camelCase JSON."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
