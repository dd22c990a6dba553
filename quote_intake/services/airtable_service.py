from typing import Optional

import httpx
from quote_intake.core.config import Settings
from quote_intake.core.exceptions import AirtableError
from quote_intake.core.logger import get_logger
from quote_intake.models.quote_request import QuoteRequest

logger = get_logger("airtable_service")

NEW_STATUS = "New"


def record_fields(quote: QuoteRequest) -> dict:
    """Airtable field set for a quote. Single-select columns are omitted when empty."""
    fields = {
        "Name": quote.name,
        "Phone": quote.phone,
        "Address": quote.address,
        "Details": quote.details or "",
        "Status": NEW_STATUS,
    }
    if quote.service:
        fields["Service"] = quote.service
    if quote.urgency:
        fields["Urgency"] = quote.urgency
    return fields


class AirtableClient:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._api_url = settings.AIRTABLE_API_URL.rstrip("/")
        self._web_url = settings.AIRTABLE_WEB_URL.rstrip("/")
        self._base_id = settings.AIRTABLE_BASE_ID
        self._table_id = settings.AIRTABLE_TABLE_ID
        self._token = settings.AIRTABLE_API_KEY
        self._timeout = settings.HTTP_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def table_endpoint(self) -> str:
        return f"{self._api_url}/{self._base_id}/{self._table_id}"

    def record_url(self, record_id: Optional[str]) -> str:
        """Web link to the record, or to the table when no record was created."""
        url = f"{self._web_url}/{self._base_id}/{self._table_id}"
        return f"{url}/{record_id}" if record_id else url

    async def create_quote_record(self, quote: QuoteRequest) -> Optional[str]:
        payload = {"records": [{"fields": record_fields(quote)}]}
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
        }
        logger.info(f"Airtable POST request to {self.table_endpoint}")

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                resp = await client.post(self.table_endpoint, headers=headers, json=payload)
            except httpx.RequestError as e:
                raise AirtableError(f"request failed: {e!r}") from e

        if not resp.is_success:
            logger.error(f"Airtable error {resp.status_code}: {resp.text}")
            raise AirtableError(f"{resp.status_code}: {resp.text}")

        try:
            data = resp.json()
        except ValueError as e:
            raise AirtableError("non-json response") from e

        records = data.get("records") if isinstance(data, dict) else None
        if records is not None and not isinstance(records, list):
            raise AirtableError(f"unexpected records payload: {records!r}")
        record_id = records[0].get("id") if records and isinstance(records[0], dict) else None
        logger.info(f"Airtable record created: {record_id}")
        return record_id
