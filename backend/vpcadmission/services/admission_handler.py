"""IBMVPCCluster Webhook — defaulting and validation hooks for the cluster resource.

Invariants:
    - default() and validate_delete() always pass (no defaulting, no delete rules)
    - validate_create() / validate_update() run the full rule set on the incoming object
    - validate_update() ignores the old object
    - A non-IBMVPCCluster object raises BadRequestError, never ClusterInvalidError
    - All field errors for one object surface in ONE ClusterInvalidError

Design Decisions:
    - Hooks return warnings lists (always empty today) so the review service can
      forward them without special-casing
"""

import logging
from typing import Any

from vpcadmission.core.domain_types import CLUSTER_KIND
from vpcadmission.core.errors import BadRequestError, ClusterInvalidError, ErrorContext
from vpcadmission.core.validate_cluster import validate_cluster_spec
from vpcadmission.schemas.cluster import IBMVPCCluster

logger = logging.getLogger(__name__)


class IBMVPCClusterWebhook:
    """Validation and defaulting webhook for IBMVPCCluster."""

    def default(self, obj: Any) -> None:
        return None

    def validate_create(self, obj: Any, context: ErrorContext | None = None) -> list[str]:
        cluster = _expect_cluster(obj, context)
        return validate_ibmvpc_cluster(cluster, context)

    def validate_update(
        self, old_obj: Any, new_obj: Any, context: ErrorContext | None = None,
    ) -> list[str]:
        cluster = _expect_cluster(new_obj, context)
        return validate_ibmvpc_cluster(cluster, context)

    def validate_delete(self, obj: Any, context: ErrorContext | None = None) -> list[str]:
        return []


def validate_ibmvpc_cluster(
    cluster: IBMVPCCluster, context: ErrorContext | None = None,
) -> list[str]:
    """Validate one cluster. Returns warnings or raises ClusterInvalidError."""
    errors = validate_cluster_spec(cluster.spec)
    if not errors:
        return []

    ctx = context or ErrorContext()
    ctx.cluster_name = cluster.metadata.name
    logger.info(
        f"Denying {CLUSTER_KIND} '{cluster.metadata.name}': {len(errors)} error(s)",
        extra={
            "request_uid": ctx.request_uid,
            "cluster_name": cluster.metadata.name,
            "error_count": len(errors),
        },
    )
    raise ClusterInvalidError(cluster.metadata.name, errors, ctx)


def _expect_cluster(obj: Any, context: ErrorContext | None) -> IBMVPCCluster:
    if not isinstance(obj, IBMVPCCluster):
        raise BadRequestError(
            f"expected a {CLUSTER_KIND} but got a {_type_name(obj)}", context,
        )
    return obj


def _type_name(obj: Any) -> str:
    """Prefer the resource kind for raw manifests, else the Python type."""
    if isinstance(obj, dict) and obj.get("kind"):
        return str(obj["kind"])
    return type(obj).__name__
