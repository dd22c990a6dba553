from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from quote_intake.core.exceptions import QuoteValidationError

REQUIRED_FIELDS = ("name", "phone", "address")


class QuoteSubmission(BaseModel):
    """Raw form body. Every field is optional so a missing one maps to a 400, not a 422."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    service: Optional[str] = None
    urgency: Optional[str] = None
    details: Optional[str] = None

    def missing_fields(self) -> List[str]:
        return [field for field in REQUIRED_FIELDS if not getattr(self, field)]

    def to_quote_request(self) -> "QuoteRequest":
        missing = self.missing_fields()
        if missing:
            raise QuoteValidationError(missing)
        return QuoteRequest(
            name=self.name,
            phone=self.phone,
            address=self.address,
            # blank optionals are dropped rather than sent as placeholders
            service=self.service or None,
            urgency=self.urgency or None,
            details=self.details or None,
        )


class QuoteRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    service: Optional[str] = Field(None, description="Service type label, e.g. 'Mowing'")
    urgency: Optional[str] = None
    details: Optional[str] = None
