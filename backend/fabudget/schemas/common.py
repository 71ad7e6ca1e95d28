"""
Shared Pydantic schema pieces: camelCase base model, money type, update guard.
"""
from decimal import Decimal
from typing import Annotated, ClassVar, FrozenSet

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, model_validator
from pydantic.alias_generators import to_camel

# Decimals travel as JSON numbers rather than strings
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Request amounts must fit the Numeric(15, 2) columns exactly
MoneyInput = Annotated[Decimal, Field(ge=0, max_digits=15, decimal_places=2)]


class CamelModel(BaseModel):
    """Base schema exposing camelCase JSON while accepting snake_case too."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """
    Base for PUT bodies: every field optional, but fields outside
    ``nullable_fields`` may not be explicitly set to null.
    """
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict:
        """Fields the client actually sent."""
        return self.model_dump(exclude_unset=True)
