"""Shared pydantic configuration for backend payloads (camelCase on the wire)."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self, *, partial: bool = False) -> dict:
        """Serialize with backend field names; ``partial`` drops fields never set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=partial)
