"""Cup Schemas — authorization response."""

from pydantic import BaseModel


class CupAccessGranted(BaseModel):
    """Returned when the policy-decision point permits the cup action."""
    message: str = "Access granted!"
    cup: str
