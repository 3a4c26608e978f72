import pytest

from cassandra_crate.errors import PreconditionViolation
from cassandra_crate.inventory import ClusterMember, Group
from cassandra_crate.topology import resolver
from cassandra_crate.topology.resolver import (
    ProviderStrategy,
    RpcAddressMode,
    register_provider,
    resolve_address,
    resolve_listen_address,
    resolve_rpc_address_mode,
    resolve_snitch,
    resolve_topology,
    topology_properties,
)

both = ClusterMember(id="a", primary_ip="54.0.0.1", private_ip="10.0.0.1")
public_only = ClusterMember(id="b", primary_ip="54.0.0.2")
private_only = ClusterMember(id="c", private_ip="10.0.0.3")


def test_snitch_by_provider():
    assert resolve_snitch("ec2") == "Ec2Snitch"
    assert resolve_snitch("aws-ec2") == "Ec2Snitch"
    assert resolve_snitch("unknown") == "SimpleSnitch"
    assert resolve_snitch(None) == "SimpleSnitch"


def test_rpc_mode_by_provider():
    assert resolve_rpc_address_mode("ec2") is RpcAddressMode.PRIVATE
    assert resolve_rpc_address_mode("openstack") is RpcAddressMode.PUBLIC


def test_address_modes_fall_back():
    assert resolve_address("public", both) == "54.0.0.1"
    assert resolve_address("public", private_only) == "10.0.0.3"
    assert resolve_address("private", both) == "10.0.0.1"
    assert resolve_address("private", public_only) == "54.0.0.2"
    assert resolve_address(RpcAddressMode.ALL, both) == "0.0.0.0"


def test_listen_address_prefers_private():
    assert resolve_listen_address(both) == "10.0.0.1"
    assert resolve_listen_address(public_only) == "54.0.0.2"


def test_topology_for_ec2_member():
    member = ClusterMember(id="e", primary_ip="54.0.0.9", private_ip="10.0.0.9", provider="ec2")
    choice = resolve_topology(member)
    assert choice.endpoint_snitch == "Ec2Snitch"
    assert choice.rpc_address == "10.0.0.9"
    assert choice.listen_address == "10.0.0.9"


def test_explicit_rpc_mode_overrides_provider():
    member = ClusterMember(id="e", primary_ip="54.0.0.9", private_ip="10.0.0.9", provider="ec2")
    assert resolve_topology(member, "all").rpc_address == "0.0.0.0"
    assert resolve_topology(member, "public").endpoint_snitch == "Ec2Snitch"


@pytest.fixture
def providers(monkeypatch):
    monkeypatch.setattr(resolver, "_PROVIDERS", dict(resolver._PROVIDERS))
    return resolver._PROVIDERS


def test_registered_provider_does_not_disturb_others(providers):
    register_provider("gce", ProviderStrategy("GoogleCloudSnitch", RpcAddressMode.PRIVATE))
    assert resolve_snitch("gce") == "GoogleCloudSnitch"
    assert resolve_snitch("ec2") == "Ec2Snitch"
    assert resolve_snitch("unknown") == "SimpleSnitch"


def test_existing_provider_not_replaced_silently(providers):
    gce = ProviderStrategy("GoogleCloudSnitch", RpcAddressMode.PRIVATE)
    with pytest.raises(PreconditionViolation):
        register_provider("ec2", gce)
    assert resolve_snitch("ec2") == "Ec2Snitch"

    register_provider("ec2", ProviderStrategy("Ec2MultiRegionSnitch", RpcAddressMode.PUBLIC), replace=True)
    assert resolve_snitch("ec2") == "Ec2MultiRegionSnitch"

    with pytest.raises(PreconditionViolation):
        register_provider("default", gce, replace=True)
    assert resolve_snitch(None) == "SimpleSnitch"


def test_registry_restored_between_tests():
    assert resolve_snitch("gce") == "SimpleSnitch"
    assert resolve_snitch("ec2") == "Ec2Snitch"


def test_topology_properties_lines():
    groups = {
        "east": Group("east", (both, public_only)),
        "west": Group("west", (ClusterMember(id="w", primary_ip="54.1.0.1"),)),
    }
    text = topology_properties({"east": ["DC1", "RAC1"], "west": ("DC2", "RAC9")}, groups)
    assert text.splitlines() == [
        "54.0.0.1=DC1:RAC1",
        "54.0.0.2=DC1:RAC1",
        "54.1.0.1=DC2:RAC9",
    ]


def test_topology_properties_private_only_members():
    groups = {"east": Group("east", (private_only, ClusterMember(id="bare")))}
    assert topology_properties({"east": ("DC1", "RAC1")}, groups) == "10.0.0.3=DC1:RAC1"


def test_topology_properties_skips_unknown_group():
    assert topology_properties({"nope": ["DC1", "RAC1"]}, {}) == ""
