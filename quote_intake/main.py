from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from quote_intake.routes.quote_router import quote_router, CORS_HEADERS, FALLBACK_MESSAGE
from quote_intake.routes.debug_router import debug_router
from contextlib import asynccontextmanager
from quote_intake.core.config import settings
from quote_intake.core.exceptions import MalformedSubmission, QuoteValidationError
from quote_intake.core.logger import get_logger
from quote_intake.core.middleware import log_requests

logger = get_logger(__name__)

REQUIRED_FIELDS_MESSAGE = "Name, phone, and address are required."

@asynccontextmanager
async def lifespan(app: FastAPI):

    logger.info(f" {settings.app_name} startup complete (response policy: {settings.RESPONSE_POLICY})")

    yield


    logger.info(" Application shutdown initiated")

# CORS is answered by quote_router itself: preflights must get an empty 200
app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.middleware("http")(log_requests)
app.include_router(quote_router)
app.include_router(debug_router)


@app.exception_handler(QuoteValidationError)
async def validation_error_handler(request: Request, exc: QuoteValidationError):
    logger.warning(f"Rejected quote request, missing {exc.missing}")
    return JSONResponse(
        status_code=400, content={"error": REQUIRED_FIELDS_MESSAGE}, headers=CORS_HEADERS
    )


@app.exception_handler(MalformedSubmission)
async def malformed_submission_handler(request: Request, exc: MalformedSubmission):
    logger.error(f"Quote handler error: malformed body: {exc}")
    return JSONResponse(status_code=500, content={"error": FALLBACK_MESSAGE}, headers=CORS_HEADERS)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    detail = "Method not allowed" if exc.status_code == 405 else exc.detail
    return JSONResponse(
        status_code=exc.status_code, content={"error": detail}, headers=getattr(exc, "headers", None)
    )
