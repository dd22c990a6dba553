"""
Plain-text and HTML bodies for the operator notifications.

Pure functions of a QuoteRequest: no I/O, optional fields are left out of
the output entirely when they were not submitted.
"""
from datetime import datetime
from html import escape
from typing import Optional
from zoneinfo import ZoneInfo

from quote_intake.models.quote_request import QuoteRequest

BRAND_COLOR = "#00BF66"
CELL_STYLE = "padding: 10px 0; border-bottom: 1px solid #eee;"
LABEL_STYLE = f"{CELL_STYLE} font-weight: 600;"


def render_sms(quote: QuoteRequest, business_name: str = "WeMow760") -> str:
    lines = [
        f"🌿 New {business_name} Quote Request",
        "",
        f"Name: {quote.name}",
        f"Phone: {quote.phone}",
        f"Address: {quote.address}",
        f"Service: {quote.service}" if quote.service else None,
        f"Urgency: {quote.urgency}" if quote.urgency else None,
        f"Details: {quote.details}" if quote.details else None,
    ]
    return "\n".join(line for line in lines if line is not None)


def render_email_subject(quote: QuoteRequest) -> str:
    subject = f"New Quote Request — {quote.name}"
    if quote.service:
        subject += f" ({quote.service})"
    return subject


def format_timestamp(moment: datetime, timezone: str = "America/Los_Angeles") -> str:
    """'Oct 18, 2026, 3:04 PM' in the operator's local zone."""
    local = moment.astimezone(ZoneInfo(timezone))
    hour = local.hour % 12 or 12
    return f"{local:%b} {local.day}, {local.year}, {hour}:{local:%M %p}"


def _row(label: str, value_html: str, last: bool = False) -> str:
    value_style = "padding: 10px 0;" if last else CELL_STYLE
    label_style = f"{LABEL_STYLE} vertical-align: top;" if last else LABEL_STYLE
    return (
        "<tr>"
        f'<td style="{label_style} width: 100px;">{label}</td>'
        f'<td style="{value_style}">{value_html}</td>'
        "</tr>"
    )


def render_email_html(
    quote: QuoteRequest,
    record_url: str,
    submitted_at: Optional[datetime] = None,
    timezone: str = "America/Los_Angeles",
) -> str:
    submitted_at = submitted_at or datetime.now(ZoneInfo("UTC"))
    phone = escape(quote.phone)

    rows = [
        _row("Name", escape(quote.name)),
        _row("Phone", f'<a href="tel:{phone}" style="color: {BRAND_COLOR};">{phone}</a>'),
        _row("Address", escape(quote.address)),
    ]
    if quote.service:
        rows.append(_row("Service", escape(quote.service)))
    if quote.urgency:
        rows.append(_row("Urgency", escape(quote.urgency)))
    if quote.details:
        rows.append(_row("Details", escape(quote.details), last=True))

    button_style = (
        f"display: inline-block; padding: 10px 20px; background: {BRAND_COLOR}; "
        "color: #fff; text-decoration: none; border-radius: 6px; font-weight: 600;"
    )
    return (
        '<div style="font-family: -apple-system, sans-serif; max-width: 500px;">'
        f'<h2 style="color: {BRAND_COLOR}; margin-bottom: 4px;">New Quote Request</h2>'
        f'<p style="color: #888; margin-top: 0; font-size: 14px;">'
        f"{format_timestamp(submitted_at, timezone)}</p>"
        '<table style="width: 100%; border-collapse: collapse;">'
        f"{''.join(rows)}"
        "</table>"
        '<p style="margin-top: 20px;">'
        f'<a href="{escape(record_url)}" style="{button_style}">View in Airtable</a>'
        "</p>"
        "</div>"
    )
