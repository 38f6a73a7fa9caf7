"""Throw Schemas — inbound throw body and accepted response.

Invariants:
    - ThrowRequest accepts absent or null fields as "" (required-field rule runs later)
    - Non-string field values fail validation (no int → str coercion)
    - Unknown keys are ignored

Design Decisions:
    - Emptiness is checked by core.enforce_throw, not by Field(min_length):
      parse failures and missing fields map to different error codes
"""

from pydantic import BaseModel, field_validator


class ThrowRequest(BaseModel):
    """Throw submission body."""
    user_id: str = ""
    role: str = ""
    action: str = ""
    target: str = ""

    @field_validator("user_id", "role", "action", "target", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v


class ThrowAccepted(BaseModel):
    message: str = "Ball thrown!"
