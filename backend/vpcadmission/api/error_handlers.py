"""Error Handlers — global exception handlers for the webhook API.

Invariants:
    - Policy denials never reach here: they are AdmissionReview bodies (HTTP 200)
    - AdmissionError → its own envelope and HTTP status, logged with its context
    - RequestValidationError → MalformedReviewError (HTTP 400) naming each bad
      AdmissionReview field, with the request uid when the body carries one
    - Exception (catch-all) → InternalError envelope, never leaks internal details

Design Decisions:
    - Every handler answers with an AdmissionError envelope, so clients parse one shape
    - Field locations rendered with FieldPath: "request.operation", "request.object[0]"
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from vpcadmission.core.errors import (
    AdmissionError, ErrorContext, ErrorSeverity, InternalError, MalformedReviewError,
)
from vpcadmission.core.field_errors import FieldPath

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(AdmissionError, admission_error_handler)
    app.add_exception_handler(RequestValidationError, review_validation_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)


async def admission_error_handler(request: Request, exc: AdmissionError):
    log = logger.error if exc.severity == ErrorSeverity.CRITICAL else logger.warning
    log(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "request_uid": exc.context.request_uid,
            "operation": exc.context.operation,
            "cluster_name": exc.context.cluster_name,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def review_validation_error_handler(request: Request, exc: RequestValidationError):
    """The body failed AdmissionReview parsing; report which fields, keep the uid."""
    body = getattr(exc, "body", None)
    error = MalformedReviewError(
        review_error_details(exc.errors()),
        ErrorContext(request_uid=request_uid_of(body), operation=_operation_of(body)),
    )
    return await admission_error_handler(request, error)


async def internal_error_handler(request: Request, exc: Exception):
    """Catch-all — the traceback goes to the log, never to the client."""
    error = InternalError()
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": error.code, "path": request.url.path},
    )
    return JSONResponse(status_code=error.http_status, content=error.to_response())


def review_error_details(errors: list[dict]) -> list[dict]:
    """Pydantic errors → [{field, message, type}] with paths relative to the review."""
    details = []
    for e in errors:
        loc = tuple(e.get("loc", ()))
        if loc[:1] == ("body",):
            loc = loc[1:]
        details.append({
            "field": str(FieldPath(loc)),
            "message": e.get("msg", ""),
            "type": e.get("type", ""),
        })
    return details


def request_uid_of(body: Any) -> str | None:
    """Best-effort uid from a raw review body that failed to parse."""
    request = body.get("request") if isinstance(body, dict) else None
    if isinstance(request, dict) and isinstance(request.get("uid"), str):
        return request["uid"] or None
    return None


def _operation_of(body: Any) -> str | None:
    request = body.get("request") if isinstance(body, dict) else None
    if isinstance(request, dict) and isinstance(request.get("operation"), str):
        return request["operation"]
    return None
