import json
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from quote_intake.core.config import Settings, get_settings
from quote_intake.core.exceptions import MalformedSubmission
from quote_intake.core.logger import get_logger
from quote_intake.models.quote_request import QuoteSubmission
from quote_intake.models.response import ErrorResponse, QuoteAccepted
from quote_intake.services.intake_service import IntakeService

quote_router = APIRouter(prefix="/api", tags=["Quote"])

logger = get_logger(__name__)

FALLBACK_MESSAGE = "Something went wrong. Please call us instead."

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST",
    "Access-Control-Allow-Headers": "Content-Type",
}


def get_intake_service(settings: Settings = Depends(get_settings)) -> IntakeService:
    return IntakeService(settings)


async def read_submission(request: Request) -> QuoteSubmission:
    try:
        body = await request.json()
        return QuoteSubmission.model_validate(body)
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        raise MalformedSubmission(str(e)) from e


@quote_router.options("/quote")
async def quote_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@quote_router.post(
    "/quote",
    response_model=QuoteAccepted,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_quote(
    request: Request,
    settings: Settings = Depends(get_settings),
    intake: IntakeService = Depends(get_intake_service),
):
    submission = await read_submission(request)

    # raises QuoteValidationError before any collaborator is touched
    quote = submission.to_quote_request()

    try:
        report = await intake.submit(quote)
    except Exception as e:
        logger.exception(f"Quote handler error: {e}")
        return JSONResponse(
            status_code=500, content={"error": FALLBACK_MESSAGE}, headers=CORS_HEADERS
        )

    if report.failures:
        logger.warning(
            f"Quote from {quote.name} accepted with failed notifications: "
            f"{[o.name for o in report.failures]}"
        )

    accepted = QuoteAccepted()
    if settings.RESPONSE_POLICY == "debug":
        accepted.debug = report.summary()

    return JSONResponse(
        content=accepted.model_dump(by_alias=True, exclude_none=True),
        headers=CORS_HEADERS,
    )
