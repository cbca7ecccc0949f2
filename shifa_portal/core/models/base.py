"""
Base models shared by every persisted record.
"""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Immutable value stored as camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the JSON-ready dict written to storage."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Entity(RecordModel):
    """Record with a unique string identity."""

    id: str
