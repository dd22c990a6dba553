from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

class ErrorResponse(BaseModel):
    error: str

class QuoteAccepted(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    debug: Optional[Dict[str, str]] = Field(None, alias="_debug")

class CollaboratorOutcome(BaseModel):
    name: str
    ok: bool
    reason: Optional[str] = None

    def summary(self) -> str:
        return "OK" if self.ok else f"FAIL: {self.reason}"

class IntakeReport(BaseModel):
    record_id: Optional[str] = None
    outcomes: List[CollaboratorOutcome] = []

    @property
    def failures(self) -> List[CollaboratorOutcome]:
        return [o for o in self.outcomes if not o.ok]

    def summary(self) -> Dict[str, str]:
        return {o.name: o.summary() for o in self.outcomes}
