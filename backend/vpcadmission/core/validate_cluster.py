"""Cluster Spec Validation — structural admissibility rules for an IBMVPCCluster spec.

Invariants:
    - All functions are PURE: no IO, no async, no logging, no side effects
    - Every rule runs; errors accumulate (no first-error-wins)
    - Order: control plane, load balancers, control plane subnets, worker subnets;
      subnet errors ascend by index
    - A network-less spec produces no network errors
    - Empty string and None are both "not provided" for subnet id/zone

Design Decisions:
    - Return list[FieldError] (not exceptions): the shell decides how to wrap the
      whole list into one denial (ADR: caller sees every problem in one round-trip)
    - Control-plane error attached to the spec root path, matching the behavior
      clusters have already been admitted under
"""

from vpcadmission.core.field_errors import (
    FieldError, FieldPath, invalid, new_path, required,
)
from vpcadmission.schemas.cluster import IBMVPCClusterSpec, Subnet, VPCNetworkSpec


CONTROL_PLANE_MSG = (
    "one of control-plane endpoint or control-plane load balancer must be specified"
)
LOAD_BALANCER_MSG = (
    "at least one load balancer must be specified when network is set"
)
CONTROL_PLANE_SUBNET_MSG = (
    "zone is required for each control plane subnet if ID is not provided"
)
WORKER_SUBNET_MSG = (
    "zone is required for each worker subnet if ID is not provided"
)


def validate_cluster_spec(spec: IBMVPCClusterSpec) -> list[FieldError]:
    """Run every rule against the spec. Empty list means admissible."""
    errors: list[FieldError] = []
    control_plane_error = validate_control_plane(spec)
    if control_plane_error is not None:
        errors.append(control_plane_error)
    if spec.network is not None:
        errors.extend(validate_network(spec.network, new_path("spec", "network")))
    return errors


def validate_control_plane(spec: IBMVPCClusterSpec) -> FieldError | None:
    """Rule 1: the control plane must be reachable via endpoint host or load balancer."""
    if spec.control_plane_endpoint.host == "" and spec.control_plane_load_balancer is None:
        return invalid(new_path(""), "", CONTROL_PLANE_MSG)
    return None


def validate_network(network: VPCNetworkSpec, path: FieldPath) -> list[FieldError]:
    """Rules 3-5: load balancer presence and per-subnet placement."""
    errors: list[FieldError] = []
    if not network.load_balancers:
        errors.append(required(path.child("loadBalancers"), LOAD_BALANCER_MSG))
    errors.extend(validate_subnets(
        network.control_plane_subnets,
        path.child("controlPlaneSubnets"),
        CONTROL_PLANE_SUBNET_MSG,
    ))
    errors.extend(validate_subnets(
        network.worker_subnets,
        path.child("workerSubnets"),
        WORKER_SUBNET_MSG,
    ))
    return errors


def validate_subnets(
    subnets: tuple[Subnet, ...], path: FieldPath, detail: str,
) -> list[FieldError]:
    """One Required zone error per subnet that has neither id nor zone."""
    return [
        required(path.index(i).child("zone"), detail)
        for i, subnet in enumerate(subnets)
        if not has_placement(subnet)
    ]


def has_placement(subnet: Subnet) -> bool:
    """A subnet is placeable when it names an existing id or a zone."""
    return bool(subnet.id) or bool(subnet.zone)
