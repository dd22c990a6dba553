import asyncio

import aiohttp
import pytest

from quote_intake.core.exceptions import TextbeltError
from quote_intake.services.sms_service import TextbeltClient
from tests.fakes import FakeResponse, FakeSession


def send(settings, session, message="hello"):
    return asyncio.run(TextbeltClient(settings, session=session).send(message))


def test_send_posts_phone_message_and_key(settings):
    session = FakeSession(FakeResponse(200, {"success": True, "textId": "42", "quotaRemaining": 10}))

    result = send(settings, session, "New quote")

    assert result["textId"] == "42"
    url, kwargs = session.calls[0]
    assert url == "https://textbelt.com/text"
    assert kwargs["json"] == {
        "phone": "7605550199",
        "message": "New quote",
        "key": "textbelt_test_key",
    }


def test_success_false_in_200_is_a_failure(settings):
    session = FakeSession(FakeResponse(200, {"success": False, "error": "Out of quota"}))

    with pytest.raises(TextbeltError) as exc_info:
        send(settings, session)

    assert "Out of quota" in exc_info.value.reason


def test_missing_success_flag_is_a_failure(settings):
    session = FakeSession(FakeResponse(200, {"textId": "1"}))

    with pytest.raises(TextbeltError):
        send(settings, session)


def test_http_error_status_raises(settings):
    session = FakeSession(FakeResponse(500, "upstream exploded"))

    with pytest.raises(TextbeltError) as exc_info:
        send(settings, session)

    assert exc_info.value.reason == "500: upstream exploded"


def test_non_json_body_raises(settings):
    session = FakeSession(FakeResponse(200, "<html>maintenance</html>"))

    with pytest.raises(TextbeltError):
        send(settings, session)


def test_connection_error_raises(settings):
    session = FakeSession(error=aiohttp.ClientConnectionError("connection refused"))

    with pytest.raises(TextbeltError) as exc_info:
        send(settings, session)

    assert exc_info.value.collaborator == "sms"
