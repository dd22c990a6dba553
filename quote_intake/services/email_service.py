import asyncio
from typing import Optional

import aiohttp
from quote_intake.core.config import Settings
from quote_intake.core.exceptions import ResendError
from quote_intake.core.logger import get_logger

logger = get_logger(__name__)


class ResendClient:
    def __init__(self, settings: Settings, session: Optional[aiohttp.ClientSession] = None):
        self._url = settings.RESEND_URL
        self._sender = settings.EMAIL_FROM
        self._recipient = settings.NOTIFY_EMAIL
        self._headers = {
            "Authorization": f"Bearer {settings.RESEND_API_KEY}",
            "Content-Type": "application/json",
        }
        self._timeout = aiohttp.ClientTimeout(total=settings.HTTP_TIMEOUT_SECONDS)
        self._session = session

    async def send(self, subject: str, html: str) -> dict:
        request_payload = {
            "from": self._sender,
            "to": [self._recipient],
            "subject": subject,
            "html": html,
        }
        logger.info(f"Sending email '{subject}' to {self._recipient}")

        try:
            if self._session is not None:
                data = await self._post(self._session, request_payload)
            else:
                async with aiohttp.ClientSession(timeout=self._timeout) as session:
                    data = await self._post(session, request_payload)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ResendError(f"request failed: {e!r}") from e

        logger.info(f"Received Resend response: {data}")
        return data

    async def _post(self, session, request_payload: dict) -> dict:
        async with session.post(self._url, headers=self._headers, json=request_payload) as response:
            if response.status >= 400:
                text = await response.text()
                raise ResendError(f"{response.status}: {text}")
            try:
                return await response.json(content_type=None)
            except ValueError:
                # delivery was accepted, body just isn't JSON
                return {}
