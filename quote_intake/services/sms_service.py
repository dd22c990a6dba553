import asyncio
from typing import Optional

import aiohttp
from quote_intake.core.config import Settings
from quote_intake.core.exceptions import TextbeltError
from quote_intake.core.logger import get_logger

logger = get_logger(__name__)


class TextbeltClient:
    """Sends the operator SMS through Textbelt."""

    def __init__(self, settings: Settings, session: Optional[aiohttp.ClientSession] = None):
        self._url = settings.TEXTBELT_URL
        self._key = settings.TEXTBELT_API_KEY
        self._phone = settings.NOTIFY_PHONE
        self._timeout = aiohttp.ClientTimeout(total=settings.HTTP_TIMEOUT_SECONDS)
        self._session = session

    async def send(self, message: str) -> dict:
        payload = {"phone": self._phone, "message": message, "key": self._key}
        logger.info(f"Sending SMS to {self._phone} ({len(message)} chars)")

        try:
            if self._session is not None:
                data = await self._post(self._session, payload)
            else:
                async with aiohttp.ClientSession(timeout=self._timeout) as session:
                    data = await self._post(session, payload)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TextbeltError(f"request failed: {e!r}") from e

        # Textbelt reports quota and key problems as 200 with success=false
        if not isinstance(data, dict) or not data.get("success"):
            error = data.get("error") if isinstance(data, dict) else data
            raise TextbeltError(f"failed: {error}")

        logger.info(f"Textbelt accepted message: {data.get('textId')}")
        return data

    async def _post(self, session, payload: dict) -> dict:
        async with session.post(self._url, json=payload) as response:
            if response.status >= 400:
                text = await response.text()
                raise TextbeltError(f"{response.status}: {text}")
            try:
                return await response.json(content_type=None)
            except ValueError as e:
                raise TextbeltError("non-json response") from e
