"""Domain Types — enums and constants that replace bare strings across the codebase.

Invariants:
    - ErrorType values are the Kubernetes field error type strings
    - Operation covers every AdmissionReview operation the API server sends
    - CLUSTER_GROUP / CLUSTER_VERSION / CLUSTER_KIND identify the validated resource

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (ADR: AdmissionReview is JSON)
"""

from enum import Enum


# ─── Resource Identity ───────────────────────────────────────────

CLUSTER_GROUP = "infrastructure.cluster.x-k8s.io"
CLUSTER_VERSION = "v1beta2"
CLUSTER_KIND = "IBMVPCCluster"


# ─── Enums ───────────────────────────────────────────────────────

class ErrorType(str, Enum):
    """Field error kinds. Required = value omitted, Invalid = value wrong."""
    REQUIRED = "FieldValueRequired"
    INVALID = "FieldValueInvalid"

    @property
    def label(self) -> str:
        """Human-readable prefix used when rendering an error."""
        return _ERROR_TYPE_LABELS[self]


_ERROR_TYPE_LABELS = {
    ErrorType.REQUIRED: "Required value",
    ErrorType.INVALID: "Invalid value",
}


class Operation(str, Enum):
    """AdmissionReview request operations."""
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    CONNECT = "CONNECT"


class StatusReason(str, Enum):
    """Kubernetes Status reasons surfaced on denied admission responses."""
    INVALID = "Invalid"
    BAD_REQUEST = "BadRequest"
