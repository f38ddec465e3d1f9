import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.company import ScrapeStatus
from app.schemas.responses import ErrorCode, ScrapeError, ScrapeResponse
from app.services.company_scraper import VALIDATION_MESSAGE

logger = logging.getLogger(__name__)


async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("Rejected request: %s", exc.errors())
    body = ScrapeResponse(
        success=False,
        status=ScrapeStatus.failed,
        error=ScrapeError(code=ErrorCode.validation_error, message=VALIDATION_MESSAGE),
    )
    # Outcome lives in the body; the status code stays 200.
    return JSONResponse(status_code=200, content=body.to_payload())
