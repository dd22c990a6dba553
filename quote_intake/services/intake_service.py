import asyncio
from datetime import datetime, timezone
from typing import Optional

from quote_intake.core.config import Settings
from quote_intake.core.exceptions import CollaboratorError
from quote_intake.core.logger import get_logger
from quote_intake.models.quote_request import QuoteRequest
from quote_intake.models.response import CollaboratorOutcome, IntakeReport
from quote_intake.services.airtable_service import AirtableClient
from quote_intake.services.email_service import ResendClient
from quote_intake.services.sms_service import TextbeltClient
from quote_intake.services.template_service import (
    render_email_html,
    render_email_subject,
    render_sms,
)

logger = get_logger(__name__)


def _outcome(name: str, result) -> CollaboratorOutcome:
    if isinstance(result, BaseException):
        reason = result.reason if isinstance(result, CollaboratorError) else repr(result)
        logger.error(f"{name} notification failed: {reason}")
        return CollaboratorOutcome(name=name, ok=False, reason=reason)
    return CollaboratorOutcome(name=name, ok=True)


class IntakeService:
    """
    Fans a quote request out to the record store, SMS and email.

    The Airtable record is created first so the email can link to it; SMS
    and email then go out concurrently. Every collaborator is attempted
    exactly once and a failure in one never stops the others.
    """

    def __init__(
        self,
        settings: Settings,
        airtable: Optional[AirtableClient] = None,
        sms: Optional[TextbeltClient] = None,
        email: Optional[ResendClient] = None,
    ):
        self.settings = settings
        self.airtable = airtable or AirtableClient(settings)
        self.sms = sms or TextbeltClient(settings)
        self.email = email or ResendClient(settings)

    async def submit(self, quote: QuoteRequest) -> IntakeReport:
        logger.info(f"Dispatching quote request from {quote.name}")

        # Step 1: Airtable record (its id goes into the email link)
        try:
            record_id = await self.airtable.create_quote_record(quote)
            airtable_result = record_id
        except Exception as e:
            record_id = None
            airtable_result = e

        # Step 2: SMS and email in parallel
        sms_result, email_result = await asyncio.gather(
            self.send_sms(quote),
            self.send_email(quote, record_id),
            return_exceptions=True,
        )

        report = IntakeReport(
            record_id=record_id,
            outcomes=[
                _outcome("airtable", airtable_result),
                _outcome("sms", sms_result),
                _outcome("email", email_result),
            ],
        )
        logger.info(f"Quote request from {quote.name} dispatched: {report.summary()}")
        return report

    async def send_sms(self, quote: QuoteRequest) -> dict:
        message = render_sms(quote, business_name=self.settings.BUSINESS_NAME)
        return await self.sms.send(message)

    async def send_email(self, quote: QuoteRequest, record_id: Optional[str]) -> dict:
        html = render_email_html(
            quote,
            record_url=self.airtable.record_url(record_id),
            submitted_at=datetime.now(timezone.utc),
            timezone=self.settings.TIMEZONE,
        )
        return await self.email.send(render_email_subject(quote), html)
