# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/topology/resolver.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Sequence

from ..errors import PreconditionViolation
from ..inventory import ClusterMember, Group

log = logging.getLogger("cassandra_crate")

DEFAULT_PROVIDER = "default"
BIND_ALL = "0.0.0.0"


class RpcAddressMode(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    ALL = "all"


@dataclass(frozen=True)
class ProviderStrategy:
    """Snitch and rpc_address choice for one compute provider."""
    snitch: str
    rpc_mode: RpcAddressMode


@dataclass(frozen=True)
class TopologyChoice:
    listen_address: Optional[str]
    rpc_address: Optional[str]
    endpoint_snitch: str


_PROVIDERS: Dict[str, ProviderStrategy] = {
    DEFAULT_PROVIDER: ProviderStrategy("SimpleSnitch", RpcAddressMode.PUBLIC),
    "ec2": ProviderStrategy("Ec2Snitch", RpcAddressMode.PRIVATE),
    "aws-ec2": ProviderStrategy("Ec2Snitch", RpcAddressMode.PRIVATE),
}


def register_provider(tag: str, strategy: ProviderStrategy, replace: bool = False) -> None:
    """
    Register the strategy used for a provider tag. An existing tag is only
    replaced with ``replace=True``; the default strategy is never replaced.
    """
    if tag == DEFAULT_PROVIDER:
        raise PreconditionViolation(f"the '{DEFAULT_PROVIDER}' provider strategy cannot be replaced")
    if tag in _PROVIDERS and not replace:
        raise PreconditionViolation(f"provider '{tag}' is already registered")
    _PROVIDERS[tag] = strategy
    log.debug("registered provider %s: %s", tag, strategy)


def provider_strategy(tag: Optional[str]) -> ProviderStrategy:
    strategy = _PROVIDERS.get(tag) if tag else None
    if strategy is None:
        if tag:
            log.debug("Unrecognized provider %r, using default strategy", tag)
        return _PROVIDERS[DEFAULT_PROVIDER]
    return strategy


def resolve_snitch(tag: Optional[str]) -> str:
    return provider_strategy(tag).snitch


def resolve_rpc_address_mode(tag: Optional[str]) -> RpcAddressMode:
    return provider_strategy(tag).rpc_mode


def resolve_address(mode: RpcAddressMode | str, member: ClusterMember) -> Optional[str]:
    mode = RpcAddressMode(mode)
    if mode is RpcAddressMode.ALL:
        return BIND_ALL
    if mode is RpcAddressMode.PRIVATE:
        return member.private_ip or member.primary_ip
    return member.primary_ip or member.private_ip


def resolve_listen_address(member: ClusterMember) -> Optional[str]:
    return member.private_ip or member.primary_ip


def resolve_topology(
    member: ClusterMember,
    rpc_mode: Optional[RpcAddressMode | str] = None,
) -> TopologyChoice:
    """
    Pick listen/rpc addresses and the endpoint snitch for a member.
    An explicit ``rpc_mode`` overrides the provider's default.
    """
    strategy = provider_strategy(member.provider)
    mode = RpcAddressMode(rpc_mode) if rpc_mode else strategy.rpc_mode
    choice = TopologyChoice(
        listen_address=resolve_listen_address(member),
        rpc_address=resolve_address(mode, member),
        endpoint_snitch=strategy.snitch,
    )
    log.debug("topology for %s: %s (rpc mode %s)", member.id, choice, mode.value)
    return choice


def topology_properties(
    group_data_centers: Mapping[str, Sequence[str]],
    groups: Mapping[str, Group],
) -> str:
    """
    cassandra-topology.properties content for PropertyFileSnitch.
    ``group_data_centers`` maps a group name to (data-center, rack), so each
    group is rack specific.
    """
    lines = []
    for group_name, (dc_name, rack_name) in group_data_centers.items():
        group = groups.get(group_name)
        if group is None:
            log.warning("group_data_centers names unknown group '%s'", group_name)
            continue
        for node in group.members:
            address = node.primary_ip or node.private_ip
            if address is None:
                log.warning("'%s' has no address, left out of the topology file", node.id)
                continue
            lines.append(f"{address}={dc_name}:{rack_name}")
    return "\n".join(lines)
