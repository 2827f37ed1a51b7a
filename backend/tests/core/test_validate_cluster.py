"""Cluster Spec Validation — tests for the pure structural rules.

Tests cover:
    - control plane reachability (endpoint host OR load balancer)
    - network gate: no network → no network errors
    - load balancer presence when network is set
    - per-subnet id/zone requirement for control plane and worker subnets
    - accumulation order and idempotence
    - reference scenarios A-D
"""

from vpcadmission.core.domain_types import ErrorType
from vpcadmission.core.validate_cluster import (
    CONTROL_PLANE_MSG,
    CONTROL_PLANE_SUBNET_MSG,
    LOAD_BALANCER_MSG,
    WORKER_SUBNET_MSG,
    has_placement,
    validate_cluster_spec,
    validate_control_plane,
)
from vpcadmission.schemas.cluster import (
    APIEndpoint,
    IBMVPCClusterSpec,
    Subnet,
    VPCLoadBalancerSpec,
    VPCNetworkSpec,
)


LB = VPCLoadBalancerSpec(name="lb1")


def _spec(network=None, host="", control_plane_lb=None) -> IBMVPCClusterSpec:
    """Helper: build a spec with only the fields the rules read."""
    return IBMVPCClusterSpec(
        control_plane_endpoint=APIEndpoint(host=host),
        control_plane_load_balancer=control_plane_lb,
        network=network,
    )


def _network(load_balancers=(LB,), cp=(), workers=()) -> VPCNetworkSpec:
    return VPCNetworkSpec(
        load_balancers=load_balancers,
        control_plane_subnets=cp,
        worker_subnets=workers,
    )


# ─── control plane ───────────────────────────────────────────────

def test_control_plane_error_when_no_host_and_no_load_balancer():
    error = validate_control_plane(_spec())
    assert error is not None
    assert error.type == ErrorType.INVALID
    assert error.field == ""
    assert error.bad_value == ""
    assert error.detail == CONTROL_PLANE_MSG


def test_control_plane_ok_with_host():
    assert validate_control_plane(_spec(host="10.0.0.1")) is None


def test_control_plane_ok_with_load_balancer():
    assert validate_control_plane(_spec(control_plane_lb=LB)) is None


def test_control_plane_error_reported_regardless_of_network():
    errors = validate_cluster_spec(_spec(network=_network()))
    assert [e.detail for e in errors] == [CONTROL_PLANE_MSG]


# ─── network gate ────────────────────────────────────────────────

def test_no_network_means_no_network_errors():
    assert validate_cluster_spec(_spec(host="host")) == []


def test_no_network_still_reports_control_plane():
    errors = validate_cluster_spec(_spec())
    assert len(errors) == 1
    assert errors[0].type == ErrorType.INVALID


# ─── load balancers ──────────────────────────────────────────────

def test_empty_load_balancers_required():
    errors = validate_cluster_spec(_spec(network=_network(load_balancers=()), host="h"))
    assert len(errors) == 1
    assert errors[0].type == ErrorType.REQUIRED
    assert errors[0].field == "spec.network.loadBalancers"
    assert errors[0].detail == LOAD_BALANCER_MSG


def test_one_load_balancer_is_enough():
    assert validate_cluster_spec(_spec(network=_network(), host="h")) == []


# ─── subnets ─────────────────────────────────────────────────────

def test_has_placement_treats_empty_string_as_absent():
    assert not has_placement(Subnet())
    assert not has_placement(Subnet(id="", zone=""))
    assert not has_placement(Subnet(id=None, zone=""))
    assert has_placement(Subnet(id="subnet-1"))
    assert has_placement(Subnet(zone="us-south-1"))
    assert has_placement(Subnet(id="", zone="us-south-1"))


def test_control_plane_subnet_without_id_or_zone():
    errors = validate_cluster_spec(_spec(network=_network(cp=(Subnet(),)), host="h"))
    assert len(errors) == 1
    assert errors[0].type == ErrorType.REQUIRED
    assert errors[0].field == "spec.network.controlPlaneSubnets[0].zone"
    assert errors[0].detail == CONTROL_PLANE_SUBNET_MSG


def test_worker_subnet_without_id_or_zone():
    errors = validate_cluster_spec(_spec(network=_network(workers=(Subnet(),)), host="h"))
    assert len(errors) == 1
    assert errors[0].field == "spec.network.workerSubnets[0].zone"
    assert errors[0].detail == WORKER_SUBNET_MSG


def test_every_offending_subnet_index_reported_in_order():
    cp = (Subnet(), Subnet(id="ok"), Subnet(zone=""), Subnet(zone="z"))
    errors = validate_cluster_spec(_spec(network=_network(cp=cp), host="h"))
    assert [e.field for e in errors] == [
        "spec.network.controlPlaneSubnets[0].zone",
        "spec.network.controlPlaneSubnets[2].zone",
    ]


def test_placed_subnets_produce_no_errors():
    network = _network(
        cp=(Subnet(id="a"), Subnet(zone="z1")),
        workers=(Subnet(id="b", zone="z2"),),
    )
    assert validate_cluster_spec(_spec(network=network, host="h")) == []


# ─── aggregation ─────────────────────────────────────────────────

def test_all_rules_accumulate_in_rule_order():
    network = _network(
        load_balancers=(),
        cp=(Subnet(), Subnet()),
        workers=(Subnet(id="w"), Subnet()),
    )
    errors = validate_cluster_spec(_spec(network=network))
    assert [(e.type, e.field) for e in errors] == [
        (ErrorType.INVALID, ""),
        (ErrorType.REQUIRED, "spec.network.loadBalancers"),
        (ErrorType.REQUIRED, "spec.network.controlPlaneSubnets[0].zone"),
        (ErrorType.REQUIRED, "spec.network.controlPlaneSubnets[1].zone"),
        (ErrorType.REQUIRED, "spec.network.workerSubnets[1].zone"),
    ]


def test_validation_is_idempotent():
    spec = _spec(network=_network(load_balancers=(), cp=(Subnet(),)))
    assert validate_cluster_spec(spec) == validate_cluster_spec(spec)


# ─── reference scenarios ─────────────────────────────────────────

def test_scenario_a_missing_control_plane_and_subnet_zone():
    spec = _spec(network=_network(cp=(Subnet(id=None, zone=None),)))
    errors = validate_cluster_spec(spec)
    assert len(errors) == 2
    assert (errors[0].type, errors[0].field) == (ErrorType.INVALID, "")
    assert (errors[1].type, errors[1].field) == (
        ErrorType.REQUIRED, "spec.network.controlPlaneSubnets[0].zone",
    )


def test_scenario_b_missing_load_balancers():
    network = _network(
        load_balancers=(), cp=(Subnet(id="id"),), workers=(Subnet(id="id"),),
    )
    errors = validate_cluster_spec(_spec(network=network, control_plane_lb=LB))
    assert len(errors) == 1
    assert (errors[0].type, errors[0].field) == (
        ErrorType.REQUIRED, "spec.network.loadBalancers",
    )


def test_scenario_c_valid_network():
    network = _network(cp=(Subnet(id="id"),), workers=(Subnet(zone="z"),))
    assert validate_cluster_spec(_spec(network=network, control_plane_lb=LB)) == []


def test_scenario_d_no_network_with_host():
    assert validate_cluster_spec(_spec(network=None, host="host")) == []
