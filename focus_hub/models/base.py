"""
Base model configuration.

The web client speaks camelCase JSON (``startTime``, ``userEmail``); Python
code uses snake_case attribute names. Both spellings are accepted on input.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model serialised with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """
    Whitelisted partial update.

    Only declared fields are accepted. Fields listed in ``non_nullable`` may be
    omitted but not explicitly set to null.
    """

    model_config = ConfigDict(extra="forbid")

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_for_required(self):
        nulled = sorted(
            name for name in self.model_fields_set
            if name in self.non_nullable and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"fields may not be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict[str, Any]:
        """Explicitly provided fields, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)
