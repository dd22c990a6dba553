class QuoteIntakeError(Exception):
    pass


class QuoteValidationError(QuoteIntakeError):
    """A required form field is missing or blank."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required fields: {', '.join(missing)}")


class CollaboratorError(QuoteIntakeError):
    """An outbound call to Airtable, Textbelt or Resend failed."""

    collaborator = "collaborator"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"{self.collaborator}: {reason}")


class AirtableError(CollaboratorError):
    collaborator = "airtable"


class TextbeltError(CollaboratorError):
    collaborator = "sms"


class ResendError(CollaboratorError):
    collaborator = "email"


class MalformedSubmission(QuoteIntakeError):
    """Request body is not a JSON object of string fields."""
