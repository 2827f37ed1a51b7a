"""AdmissionReview Service — decodes a review, dispatches by operation, builds the reply.

Invariants:
    - Response apiVersion/kind/uid echo the request
    - Allowed → {allowed: true}; AdmissionError from a hook → {allowed: false, status}
    - Envelope problems (no request, unsupported version) raise; the route's
      error handler turns them into HTTP 400
    - Raw objects of another kind pass through undecoded; the hook reports them

Design Decisions:
    - Denials are HTTP 200 with allowed=false: the API server expects a review
      body, not an HTTP error, for policy decisions
    - Mutating path never patches (defaulting is a no-op)
"""

import logging
from typing import Any

from pydantic import ValidationError

from vpcadmission.core.domain_types import CLUSTER_KIND, Operation
from vpcadmission.core.errors import (
    AdmissionError, BadRequestError, ErrorContext, UnsupportedReviewVersionError,
)
from vpcadmission.schemas.admission import (
    AdmissionRequest, AdmissionResponse, AdmissionReview,
)
from vpcadmission.schemas.cluster import IBMVPCCluster
from vpcadmission.services.admission_handler import IBMVPCClusterWebhook

logger = logging.getLogger(__name__)


def review_validation(
    review: AdmissionReview,
    webhook: IBMVPCClusterWebhook,
    supported_versions: list[str],
) -> AdmissionReview:
    """Answer a validating AdmissionReview."""
    request = _open_review(review, supported_versions)
    ctx = _request_context(request)
    try:
        warnings = _dispatch(request, webhook, ctx)
    except AdmissionError as exc:
        return _denied(review, request, exc)
    return _allowed(review, request, warnings)


def review_mutation(
    review: AdmissionReview,
    webhook: IBMVPCClusterWebhook,
    supported_versions: list[str],
) -> AdmissionReview:
    """Answer a mutating AdmissionReview. Defaulting never changes the object."""
    request = _open_review(review, supported_versions)
    try:
        webhook.default(decode_object(request.object, _request_context(request)))
    except AdmissionError as exc:
        return _denied(review, request, exc)
    return _allowed(review, request, [])


def decode_object(raw: dict[str, Any] | None, context: ErrorContext | None = None) -> Any:
    """Decode a raw manifest into IBMVPCCluster when its kind matches."""
    if raw is None or raw.get("kind") != CLUSTER_KIND:
        return raw
    try:
        return IBMVPCCluster.model_validate(raw)
    except ValidationError as exc:
        raise BadRequestError(
            f"cannot decode {CLUSTER_KIND}: {exc.error_count()} invalid field(s)",
            context,
        ) from exc


# ─── Internal Helpers ────────────────────────────────────────────

def _open_review(review: AdmissionReview, supported_versions: list[str]) -> AdmissionRequest:
    if review.api_version not in supported_versions:
        raise UnsupportedReviewVersionError(review.api_version, supported_versions)
    if review.request is None:
        raise BadRequestError("AdmissionReview has no request")
    return review.request


def _request_context(request: AdmissionRequest) -> ErrorContext:
    return ErrorContext(
        request_uid=request.uid,
        operation=request.operation.value,
        cluster_name=request.name or None,
    )


def _dispatch(
    request: AdmissionRequest, webhook: IBMVPCClusterWebhook, ctx: ErrorContext,
) -> list[str]:
    if request.operation == Operation.CREATE:
        return webhook.validate_create(decode_object(request.object, ctx), ctx)
    if request.operation == Operation.UPDATE:
        return webhook.validate_update(
            decode_object(request.old_object, ctx),
            decode_object(request.object, ctx),
            ctx,
        )
    if request.operation == Operation.DELETE:
        # not decoded: deletes pass even for objects that no longer decode
        return webhook.validate_delete(request.old_object, ctx)
    return []


def _allowed(
    review: AdmissionReview, request: AdmissionRequest, warnings: list[str],
) -> AdmissionReview:
    return AdmissionReview(
        api_version=review.api_version,
        response=AdmissionResponse(
            uid=request.uid, allowed=True, warnings=warnings or None,
        ),
    )


def _denied(
    review: AdmissionReview, request: AdmissionRequest, exc: AdmissionError,
) -> AdmissionReview:
    log = logger.warning if isinstance(exc, BadRequestError) else logger.info
    log(
        f"Admission denied ({exc.code}) for {request.operation.value}",
        extra={
            "request_uid": request.uid,
            "operation": request.operation.value,
            "error_code": exc.code,
        },
    )
    return AdmissionReview(
        api_version=review.api_version,
        response=AdmissionResponse(
            uid=request.uid, allowed=False, status=exc.to_status(),
        ),
    )
