# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/settings/builder.py
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Union

from ..config.models import CrateConfig
from ..inventory import ClusterMember, Group
from ..sizing import compute_sizing
from ..topology.resolver import resolve_topology
from ..topology.seeds import select_seeds
from ..topology.tokens import derive_initial_token
from .defaults import default_settings, version_settings
from .merge import deep_merge, merge_settings

log = logging.getLogger("cassandra_crate")


def computed_settings(
    settings: Mapping[str, Any],
    member: ClusterMember,
    group: Group,
) -> Dict[str, Any]:
    """
    Cluster specific values for ``member``: addresses, snitch and token
    under ``server``, JVM sizing under ``service``.
    """
    service = settings.get("service") or {}
    topology = resolve_topology(member, settings.get("rpc_address_algo"))
    sizing = compute_sizing(member.ram, settings.get("ram_fraction", 0.4))
    server = {
        "rpc_address": topology.rpc_address,
        "listen_address": topology.listen_address,
        "endpoint_snitch": topology.endpoint_snitch,
        "initial_token": derive_initial_token(
            service.get("tokens"), member, group.members, service.get("token_index"),
        ),
    }
    log.debug("computed-settings defaults %s", server)
    log.debug("computed-settings ram %sMB sizes %s", member.ram, sizing)
    return {"server": server, "service": sizing.as_service()}


def build_settings(
    config: Union[CrateConfig, Mapping[str, Any], None],
    member: ClusterMember,
    group: Group,
) -> Dict[str, Any]:
    """
    Settings for one Cassandra node.

    Layers, lowest precedence first:
      1. computed values (addresses, snitch, token, JVM sizing)
      2. crate defaults plus the version's install defaults
      3. the user's config, with ``service.config`` merged over ``server``
    The seed list is injected last.
    """
    if isinstance(config, CrateConfig):
        user = config.overrides()
    else:
        user = deep_merge(config)

    base = deep_merge(default_settings(), user)
    version_defaults = deep_merge(default_settings(), version_settings(base["version"], base))

    service_config = (user.get("service") or {}).get("config")
    user_overrides = deep_merge(user, {"server": deep_merge(user.get("server"), service_config)})

    seeds = select_seeds(
        base["max_seeds"], (base.get("service") or {}).get("seeds"), group.members,
    )
    settings = merge_settings(
        user_overrides,
        version_defaults,
        computed_settings(base, member, group),
        seeds=seeds,
    )
    log.debug("settings for %s: %s", member.id, settings)
    return settings
