
import time
from fastapi import Request
from quote_intake.core.logger import get_logger

logger = get_logger("request_logger")

async def log_requests(request: Request, call_next):
    start_time = time.time()
    client = request.client.host if request.client else "-"
    logger.info(f"Started request {request.method} {request.url.path} from {client}")
    response = await call_next(request)
    duration = time.time() - start_time
    message = (
        f"Completed request {request.method} {request.url.path} "
        f"with status={response.status_code} in {duration:.3f}s"
    )
    if response.status_code >= 400:
        logger.warning(message)
    else:
        logger.info(message)
    return response
