from fastapi import APIRouter, Depends, HTTPException
from quote_intake.core.config import Settings, get_settings
from quote_intake.core.logger import get_logger

debug_router = APIRouter(prefix="/api", tags=["Debug"])
logger = get_logger("debug_router")

CHECKED_VARIABLES = [
    "AIRTABLE_API_KEY",
    "AIRTABLE_BASE_ID",
    "AIRTABLE_TABLE_ID",
    "TEXTBELT_API_KEY",
    "NOTIFY_PHONE",
    "NOTIFY_EMAIL",
    "RESEND_API_KEY",
]


def redact(value: str) -> str:
    if not value:
        return "MISSING"
    return f'SET ({len(value)} chars, starts with "{value[:4]}...")'


@debug_router.get("/debug")
async def config_status(settings: Settings = Depends(get_settings)):
    """
    Reports which integration variables are configured.
    Only a length and a 4-character prefix are ever returned.
    """
    if not settings.DEBUG_ENDPOINT_ENABLED:
        raise HTTPException(status_code=404, detail="Not found")

    status = {name: redact(getattr(settings, name)) for name in CHECKED_VARIABLES}
    missing = [name for name, value in status.items() if value == "MISSING"]
    if missing:
        logger.warning(f"Missing configuration: {missing}")
    return status
