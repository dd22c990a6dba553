"""Shared fixtures: explicit Settings and fake collaborators wired into the app."""
import pytest
from fastapi.testclient import TestClient

from quote_intake.core.config import Settings, get_settings
from quote_intake.main import app
from quote_intake.routes.quote_router import get_intake_service
from quote_intake.services.intake_service import IntakeService
from tests.fakes import FakeAirtable, FakeEmail, FakeSms


def make_settings(**overrides) -> Settings:
    values = {
        "AIRTABLE_API_KEY": "patTestKey1234567890",
        "AIRTABLE_BASE_ID": "appBase123",
        "AIRTABLE_TABLE_ID": "tblQuotes456",
        "TEXTBELT_API_KEY": "textbelt_test_key",
        "NOTIFY_PHONE": "7605550199",
        "NOTIFY_EMAIL": "owner@example.com",
        "RESEND_API_KEY": "re_test_key_abc",
        "RESPONSE_POLICY": "silent",
        "DEBUG_ENDPOINT_ENABLED": True,
    }
    values.update(overrides)
    # _env_file=None keeps a developer's .env out of the tests
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def airtable(settings, call_log):
    return FakeAirtable(settings, call_log)


@pytest.fixture
def sms(settings, call_log):
    return FakeSms(settings, call_log)


@pytest.fixture
def email(settings, call_log):
    return FakeEmail(settings, call_log)


@pytest.fixture
def intake(settings, airtable, sms, email):
    return IntakeService(settings, airtable=airtable, sms=sms, email=email)


@pytest.fixture
def client(settings, intake):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_intake_service] = lambda: intake
    yield TestClient(app)
    app.dependency_overrides.clear()
