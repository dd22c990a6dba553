from datetime import datetime, timezone

from quote_intake.models.quote_request import QuoteRequest
from quote_intake.services.template_service import (
    format_timestamp,
    render_email_html,
    render_email_subject,
    render_sms,
)

JANE = QuoteRequest(
    name="Jane Doe",
    phone="760-555-0100",
    address="123 Oak St",
    service="Mowing",
    details="Gate code 4521",
)
MINIMAL = QuoteRequest(name="Sam", phone="760-555-0111", address="9 Elm Rd")
RECORD_URL = "https://airtable.com/appBase/tblQuotes/rec1"


def test_sms_for_jane_doe():
    assert render_sms(JANE) == "\n".join(
        [
            "🌿 New WeMow760 Quote Request",
            "",
            "Name: Jane Doe",
            "Phone: 760-555-0100",
            "Address: 123 Oak St",
            "Service: Mowing",
            "Details: Gate code 4521",
        ]
    )


def test_sms_omits_absent_optional_fields():
    text = render_sms(MINIMAL)

    assert "Service" not in text
    assert "Urgency" not in text
    assert "Details" not in text
    assert text.endswith("Address: 9 Elm Rd")


def test_subject_with_and_without_service():
    assert render_email_subject(JANE) == "New Quote Request — Jane Doe (Mowing)"
    assert render_email_subject(MINIMAL) == "New Quote Request — Sam"


def test_timestamp_in_pacific_time():
    moment = datetime(2026, 10, 18, 22, 4, tzinfo=timezone.utc)
    assert format_timestamp(moment) == "Oct 18, 2026, 3:04 PM"


def test_timestamp_midnight_hour():
    moment = datetime(2026, 1, 5, 8, 30, tzinfo=timezone.utc)
    assert format_timestamp(moment) == "Jan 5, 2026, 12:30 AM"


def test_email_html_contains_fields_and_link():
    html = render_email_html(JANE, RECORD_URL, datetime(2026, 10, 18, 22, 4, tzinfo=timezone.utc))

    assert "Jane Doe" in html
    assert 'href="tel:760-555-0100"' in html
    assert "123 Oak St" in html
    assert ">Service<" in html
    assert ">Details<" in html
    assert ">Urgency<" not in html
    assert f'href="{RECORD_URL}"' in html
    assert "View in Airtable" in html
    assert "Oct 18, 2026, 3:04 PM" in html


def test_email_html_omits_optional_rows():
    html = render_email_html(MINIMAL, RECORD_URL)

    assert ">Service<" not in html
    assert ">Urgency<" not in html
    assert ">Details<" not in html


def test_email_html_escapes_submitted_text():
    quote = QuoteRequest(
        name="<script>alert(1)</script>",
        phone="760-555-0100",
        address="1 Main & 2nd",
    )

    html = render_email_html(quote, RECORD_URL)

    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "1 Main &amp; 2nd" in html
