# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/topology/seeds.py
from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..errors import PreconditionViolation
from ..inventory import ClusterMember

log = logging.getLogger("cassandra_crate")


def select_seeds(
    max_seeds: int,
    explicit_seeds: Optional[Sequence[str]],
    group_members: Sequence[ClusterMember],
) -> str:
    """
    Comma-joined seed list. Explicit seeds are used as given (no truncation);
    otherwise the first ``max_seeds`` members in inventory order, preferring
    the private address.
    """
    if explicit_seeds is not None:
        if isinstance(explicit_seeds, str):
            return explicit_seeds
        return ",".join(explicit_seeds)

    if isinstance(max_seeds, bool) or not isinstance(max_seeds, int) or max_seeds < 1:
        raise PreconditionViolation(f"max_seeds must be a positive integer, got {max_seeds!r}")

    seeds = [m.private_ip or m.primary_ip for m in list(group_members)[:max_seeds]]
    log.debug("seeds: %s", seeds)
    return ",".join(ip for ip in seeds if ip)
