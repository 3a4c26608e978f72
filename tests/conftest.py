from __future__ import annotations

import pytest

from cassandra_crate.inventory import ClusterMember, Group, Inventory


@pytest.fixture
def members():
    return [
        ClusterMember(id="cass-1", primary_ip="54.0.0.1", private_ip="10.0.0.1", ram=8000),
        ClusterMember(id="cass-2", primary_ip="54.0.0.2", private_ip="10.0.0.2", ram=8000),
        ClusterMember(id="cass-3", primary_ip="54.0.0.3", private_ip=None, ram=8000),
    ]


@pytest.fixture
def group(members):
    return Group(name="cassandra", members=tuple(members))


@pytest.fixture
def inventory(group):
    return Inventory(groups={"cassandra": group})
