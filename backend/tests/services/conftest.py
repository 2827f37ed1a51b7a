"""Service test fixtures — FastAPI test client and AdmissionReview builders.

Invariants:
    - Every test gets a fresh AsyncClient bound to the ASGI app
    - review() builds a v1 AdmissionReview body around a raw object

Design Decisions:
    - ASGITransport: exercises routing, body parsing and error handlers without a socket
"""

import pytest
from httpx import ASGITransport, AsyncClient

from vpcadmission.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


def cluster_manifest(spec: dict, name: str = "test-cluster") -> dict:
    return {
        "apiVersion": "infrastructure.cluster.x-k8s.io/v1beta2",
        "kind": "IBMVPCCluster",
        "metadata": {"name": name, "namespace": "default"},
        "spec": spec,
    }


@pytest.fixture
def review():
    def _build(operation="CREATE", obj=None, old_obj=None, uid="req-1",
               api_version="admission.k8s.io/v1"):
        return {
            "apiVersion": api_version,
            "kind": "AdmissionReview",
            "request": {
                "uid": uid,
                "kind": {
                    "group": "infrastructure.cluster.x-k8s.io",
                    "version": "v1beta2",
                    "kind": "IBMVPCCluster",
                },
                "operation": operation,
                "name": "test-cluster",
                "namespace": "default",
                "object": obj,
                "oldObject": old_obj,
            },
        }
    return _build


@pytest.fixture
def valid_cluster():
    return cluster_manifest({
        "controlPlaneEndpoint": {"host": "10.240.0.4", "port": 6443},
        "network": {
            "loadBalancers": [{"name": "lb1"}],
            "controlPlaneSubnets": [{"id": "subnet-1"}],
            "workerSubnets": [{"zone": "us-south-1"}],
        },
    })


@pytest.fixture
def cluster_with_null_endpoint():
    return cluster_manifest({
        "controlPlaneEndpoint": None,
        "controlPlaneLoadBalancer": None,
        "network": {
            "loadBalancers": [{"name": "lb1"}],
            "controlPlaneSubnets": [{"id": "subnet-1"}],
        },
    })


@pytest.fixture
def invalid_cluster():
    return cluster_manifest({
        "network": {
            "loadBalancers": [{"name": "lb1"}],
            "controlPlaneSubnets": [{"id": None, "zone": None}],
        },
    })
