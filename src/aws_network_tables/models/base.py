"""Base Pydantic models for AWS API responses."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class AWSModel(BaseModel):
    """Parses boto3's PascalCase response dicts into snake_case fields.

    Fields the API adds later are ignored rather than rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal, populate_by_name=True, extra="ignore"
    )

    def to_dict(self) -> dict:
        """Dump back to the provider's key names."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Tag(AWSModel):
    """EC2 resource tag."""

    key: str
    value: str = ""
