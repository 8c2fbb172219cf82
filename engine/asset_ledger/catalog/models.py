"""
Pydantic models for the asset catalog.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

# Validation context flag set when decoding bytes read from the ledger
STORED_CONTEXT = "stored"


class AssetRecord(BaseModel):
    """
    A uniquely identified asset stored in the ledger.

    The id doubles as the ledger key and never changes once written.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(
        ...,
        description="Unique asset identifier, used as the ledger key",
        min_length=1,
    )
    name: str = Field(
        ...,
        description="Asset name (e.g., book title)",
    )
    creator: str = Field(
        ...,
        description="Free-text attribution (e.g., author)",
    )
    value: Decimal = Field(
        ...,
        description="Unit value",
        ge=0,
    )
    quantity: int = Field(
        ...,
        description="Number of units held",
        ge=0,
    )
    holder: str = Field(
        ...,
        description="Current owner or possessor",
    )

    @field_validator("value", mode="before")
    @classmethod
    def stored_value_is_decimal_text(cls, v: Any, info: ValidationInfo) -> Any:
        """Stored records carry value as a finite decimal string."""
        if not (info.context and info.context.get(STORED_CONTEXT)):
            return v
        if not isinstance(v, str):
            raise ValueError("stored value must be a decimal string")
        try:
            parsed = Decimal(v)
        except InvalidOperation as e:
            raise ValueError(f"invalid decimal string: {v!r}") from e
        if not parsed.is_finite():
            raise ValueError(f"stored value must be finite: {v!r}")
        return parsed

    def with_holder(self, holder: str) -> "AssetRecord":
        """Return a copy of this record owned by another holder."""
        return self.model_copy(update={"holder": holder})
