# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/settings/merge.py

import copy
import logging
from typing import Any, Mapping, Optional

log = logging.getLogger("cassandra_crate")


def deep_merge(*maps: Optional[Mapping[str, Any]]) -> dict:
    """
    Merge mappings left to right; later maps win.

    Nested mappings merge key by key. Any other value (scalar, list) at a
    key is replaced outright by the later map, never concatenated. None
    maps are skipped. Inputs are not mutated.
    """
    result: dict = {}
    for m in maps:
        if not m:
            continue
        for key, value in m.items():
            if isinstance(result.get(key), dict) and isinstance(value, Mapping):
                result[key] = deep_merge(result[key], value)
            elif isinstance(value, Mapping):
                result[key] = deep_merge(value)
            else:
                result[key] = copy.deepcopy(value)
    return result


def merge_settings(
    user_overrides: Optional[Mapping[str, Any]],
    version_defaults: Optional[Mapping[str, Any]],
    computed: Optional[Mapping[str, Any]],
    seeds: Optional[str] = None,
) -> dict:
    """
    Combine settings sources with precedence
    computed < version defaults < user overrides.

    The seed list is cluster derived rather than user declarable, so it is
    written into ``server.seed_provider[0].parameters[0].seeds`` after the
    merge.
    """
    merged = deep_merge(computed, version_defaults, user_overrides)
    if seeds is not None:
        _inject_seeds(merged, seeds)
    return merged


def _inject_seeds(settings: dict, seeds: str) -> None:
    server = settings.setdefault("server", {})
    providers = server.get("seed_provider") or [
        {"class_name": "org.apache.cassandra.locator.SimpleSeedProvider"}
    ]
    provider = dict(providers[0])
    params = list(provider.get("parameters") or [{}])
    params[0] = {**params[0], "seeds": seeds}
    provider["parameters"] = params
    server["seed_provider"] = [provider, *providers[1:]]
    log.debug("seeds injected: %s", seeds)
