"""Error Hierarchy — typed, categorized exceptions for all admission failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation failures carry ALL field errors at once (never one per exception)
    - to_response() produces REST envelope; to_status() produces a Kubernetes Status body
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with AdmissionError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - BadRequestError kept distinct from ClusterInvalidError: a wrong object type is
      a caller problem, not a rule violation of the resource
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from vpcadmission.core.domain_types import (
    CLUSTER_GROUP, CLUSTER_KIND, StatusReason,
)
from vpcadmission.core.field_errors import FieldError


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BAD_REQUEST = "bad_request"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_uid: str | None = None
    operation: str | None = None
    cluster_name: str | None = None


class AdmissionError(Exception):
    """Base exception for all admission errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        reason: StatusReason | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.reason = reason

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "request_uid": self.context.request_uid,
                    "operation": self.context.operation,
                    "cluster_name": self.context.cluster_name,
                },
            }
        }

    def to_status(self) -> dict:
        """Convert to a Kubernetes Status body for a denied AdmissionResponse."""
        status = {
            "status": "Failure",
            "code": self.http_status,
            "message": self.message,
        }
        if self.reason is not None:
            status["reason"] = self.reason.value
        return status


# ─── Admission Errors (400-level) ───────────────────────────────

class ClusterInvalidError(AdmissionError):
    """Cluster spec violates one or more structural rules."""
    def __init__(
        self,
        name: str,
        errors: list[FieldError],
        context: ErrorContext | None = None,
    ):
        super().__init__(
            _invalid_message(name, errors),
            "CLUSTER_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422, StatusReason.INVALID,
        )
        self.name = name
        self.errors = list(errors)

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [
            {"field": e.field, "message": e.detail, "type": e.type.value}
            for e in self.errors
        ]
        return response

    def to_status(self) -> dict:
        status = super().to_status()
        status["details"] = {
            "name": self.name,
            "group": CLUSTER_GROUP,
            "kind": CLUSTER_KIND,
            "causes": [
                {"reason": e.type.value, "message": e.error_body(), "field": e.field}
                for e in self.errors
            ],
        }
        return status


class BadRequestError(AdmissionError):
    """Request could not be interpreted as the expected resource."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BAD_REQUEST", ErrorCategory.BAD_REQUEST,
            ErrorSeverity.WARNING, context, 400, StatusReason.BAD_REQUEST,
        )


class UnsupportedReviewVersionError(AdmissionError):
    """AdmissionReview apiVersion is not one this webhook serves."""
    def __init__(
        self, api_version: str, supported: list[str],
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Unsupported AdmissionReview version '{api_version}'. "
            f"Supported: {', '.join(supported)}",
            "UNSUPPORTED_REVIEW_VERSION", ErrorCategory.BAD_REQUEST,
            ErrorSeverity.WARNING, context, 400, StatusReason.BAD_REQUEST,
        )
        self.api_version = api_version


class MalformedReviewError(AdmissionError):
    """Request body is not a well-formed AdmissionReview."""
    def __init__(self, details: list[dict], context: ErrorContext | None = None):
        fields = ", ".join(d["field"] or "<body>" for d in details) or "<body>"
        super().__init__(
            f"Malformed AdmissionReview, check field(s): {fields}",
            "MALFORMED_REVIEW", ErrorCategory.BAD_REQUEST,
            ErrorSeverity.WARNING, context, 400, StatusReason.BAD_REQUEST,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalError(AdmissionError):
    """Unexpected failure inside the webhook. Message is fixed: nothing internal leaks."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


def _invalid_message(name: str, errors: list[FieldError]) -> str:
    """Kubernetes-style aggregate: Kind.group "name" is invalid: [e1, e2]."""
    rendered = [str(e) for e in errors]
    if len(rendered) == 1:
        joined = rendered[0]
    else:
        joined = "[" + ", ".join(rendered) + "]"
    return f'{CLUSTER_KIND}.{CLUSTER_GROUP} "{name}" is invalid: {joined}'
