"""Admission Webhook Routes — validating and mutating endpoints for IBMVPCCluster.

Invariants:
    - Paths match the webhook configuration the API server is registered with
    - Routes never contain business logic (delegate to services/admission_review)
    - Body parsed as AdmissionReview by FastAPI; malformed bodies → 400 via error handler

Design Decisions:
    - One module-level webhook instance: it is stateless, safe to share across requests
"""

from fastapi import APIRouter, Depends

from vpcadmission.config import Settings, get_settings
from vpcadmission.core.domain_types import CLUSTER_GROUP, CLUSTER_KIND, CLUSTER_VERSION
from vpcadmission.schemas.admission import AdmissionReview
from vpcadmission.services.admission_handler import IBMVPCClusterWebhook
from vpcadmission.services.admission_review import review_mutation, review_validation

router = APIRouter(tags=["webhooks"])


def webhook_path(verb: str) -> str:
    """kubebuilder path convention: /<verb>-<group with dashes>-<version>-<lowercase kind>."""
    group = CLUSTER_GROUP.replace(".", "-")
    return f"/{verb}-{group}-{CLUSTER_VERSION}-{CLUSTER_KIND.lower()}"


VALIDATE_PATH = webhook_path("validate")
MUTATE_PATH = webhook_path("mutate")

_webhook = IBMVPCClusterWebhook()


@router.post(
    VALIDATE_PATH, response_model=AdmissionReview,
    response_model_by_alias=True, response_model_exclude_none=True,
)
async def validate_ibmvpccluster(
    review: AdmissionReview, settings: Settings = Depends(get_settings),
):
    """Validating webhook: create/update run the rule set, delete always passes."""
    return review_validation(review, _webhook, settings.admission_review_versions)


@router.post(
    MUTATE_PATH, response_model=AdmissionReview,
    response_model_by_alias=True, response_model_exclude_none=True,
)
async def mutate_ibmvpccluster(
    review: AdmissionReview, settings: Settings = Depends(get_settings),
):
    """Mutating webhook: defaulting is a no-op, always allowed without patch."""
    return review_mutation(review, _webhook, settings.admission_review_versions)
