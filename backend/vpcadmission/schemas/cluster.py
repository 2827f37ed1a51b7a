"""Cluster Schemas — immutable Pydantic models of the IBMVPCCluster resource.

Invariants:
    - Field names are snake_case in Python, camelCase on the wire (alias generator)
    - All models frozen: a decoded cluster is a value snapshot
    - Unknown fields are ignored (the resource carries more than this webhook checks)
    - JSON null on any field decodes exactly like the field being omitted:
      strings become "", lists become (), nested objects take their defaults,
      optional references stay None

Design Decisions:
    - Only fields the webhook reads are modeled strictly; the rest are optional
      pass-through so older/newer clients still decode
    - null handled once on the shared base (not per field): the API server may
      send null for any zero-valued field, and a null must never turn a policy
      denial (422) into a decode failure (400)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from vpcadmission.core.domain_types import CLUSTER_KIND


class _ResourceModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def null_as_omitted(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class ObjectMeta(_ResourceModel):
    name: str = ""
    namespace: str = ""


class APIEndpoint(_ResourceModel):
    """Control-plane endpoint. Empty host means "not yet known"."""
    host: str = ""
    port: int = 0


class VPCLoadBalancerSpec(_ResourceModel):
    """Load balancer descriptor. Contents are opaque to validation."""
    name: str = ""
    id: str | None = None
    public: bool | None = None


class Subnet(_ResourceModel):
    """Subnet reference: existing subnet by id, or new subnet placed in a zone."""
    id: str | None = None
    name: str | None = None
    cidr: str | None = None
    zone: str | None = None


class VPCNetworkSpec(_ResourceModel):
    load_balancers: tuple[VPCLoadBalancerSpec, ...] = ()
    control_plane_subnets: tuple[Subnet, ...] = ()
    worker_subnets: tuple[Subnet, ...] = ()
    resource_group: str | None = None


class IBMVPCClusterSpec(_ResourceModel):
    region: str = ""
    resource_group: str = ""
    zone: str = ""
    control_plane_endpoint: APIEndpoint = Field(default_factory=APIEndpoint)
    control_plane_load_balancer: VPCLoadBalancerSpec | None = None
    network: VPCNetworkSpec | None = None


class IBMVPCCluster(_ResourceModel):
    api_version: str = ""
    kind: str = CLUSTER_KIND
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: IBMVPCClusterSpec = Field(default_factory=IBMVPCClusterSpec)
