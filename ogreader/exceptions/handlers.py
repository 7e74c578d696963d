from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from ogreader.services.exceptions import (
    ServiceError,
    ValidationError,
    FetchError,
    HTTPFetchError,
    ContentError,
    SpecificationViolationError,
)

logger = logging.getLogger(__name__)


def _error_body(exc: ServiceError, **details) -> dict:
    body = {
        "code": exc.error_code or "INTERNAL_SERVER_ERROR",
        "message": exc.message
    }
    if details:
        body["details"] = details
    return body


async def validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(f"Rejected request input: {exc.message}")
    return JSONResponse(status_code=400, content=_error_body(exc))


async def specification_exception_handler(request: Request, exc: SpecificationViolationError) -> JSONResponse:
    logger.warning(f"Specification violation: {exc.message}")
    return JSONResponse(
        status_code=422,
        content=_error_body(exc, missing_properties=exc.missing_properties)
    )


async def fetch_exception_handler(request: Request, exc: FetchError) -> JSONResponse:
    logger.error(f"Fetch failed: {exc.message}")
    details = {}
    if isinstance(exc, HTTPFetchError):
        details["upstream_status"] = exc.status_code
    return JSONResponse(status_code=502, content=_error_body(exc, **details))


async def content_exception_handler(request: Request, exc: ContentError) -> JSONResponse:
    logger.warning(f"Unusable content: {exc.message}")
    return JSONResponse(status_code=415, content=_error_body(exc))


async def service_exception_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Fallback for service errors without a dedicated handler"""
    logger.error(f"Service error: {exc.message}", exc_info=True)
    return JSONResponse(status_code=500, content=_error_body(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(SpecificationViolationError, specification_exception_handler)
    app.add_exception_handler(FetchError, fetch_exception_handler)
    app.add_exception_handler(ContentError, content_exception_handler)
    app.add_exception_handler(ServiceError, service_exception_handler)
