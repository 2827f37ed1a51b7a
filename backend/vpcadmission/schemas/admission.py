"""Admission Schemas — AdmissionReview request/response contracts.

Invariants:
    - request.object / request.oldObject stay raw dicts; decoding into a resource
      type is the admission service's job (so a kind mismatch is a bad request,
      not a 422 from FastAPI)
    - Response echoes apiVersion, kind and request uid
    - None-valued response fields are omitted from the JSON body

Design Decisions:
    - Literal for kind over free str: anything else is not an AdmissionReview
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vpcadmission.core.domain_types import Operation


class _ReviewModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )


class GroupVersionKind(_ReviewModel):
    group: str = ""
    version: str = ""
    kind: str = ""


class AdmissionRequest(_ReviewModel):
    uid: str = Field(min_length=1)
    kind: GroupVersionKind | None = None
    operation: Operation
    name: str = ""
    namespace: str = ""
    object: dict[str, Any] | None = None
    old_object: dict[str, Any] | None = None
    dry_run: bool = False


class AdmissionResponse(_ReviewModel):
    uid: str
    allowed: bool
    status: dict[str, Any] | None = None
    warnings: list[str] | None = None


class AdmissionReview(_ReviewModel):
    """Envelope for both directions. request is set inbound, response outbound."""
    api_version: str
    kind: Literal["AdmissionReview"] = "AdmissionReview"
    request: AdmissionRequest | None = None
    response: AdmissionResponse | None = None
