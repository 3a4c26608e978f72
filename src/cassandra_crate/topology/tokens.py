# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/topology/tokens.py
from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence

from ..errors import PreconditionViolation
from ..inventory import ClusterMember, member_index

log = logging.getLogger("cassandra_crate")

# RandomPartitioner ring size
TOKEN_SPACE = 2 ** 127


def compute_tokens(count: int) -> List[int]:
    """
    Return tokens for a cluster of ``count`` nodes, evenly distributed over
    TOKEN_SPACE. Integer arithmetic only; each token is floored independently
    so spacing errors never accumulate along the ring.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise PreconditionViolation(f"token count must be an integer, got {count!r}")
    if count <= 0:
        raise PreconditionViolation(f"token count must be positive, got {count}")
    return [(i * TOKEN_SPACE) // count for i in range(count)]


def derive_initial_token(
    supplied_tokens: Optional[Mapping[str, int]],
    member: ClusterMember,
    group_members: Sequence[ClusterMember],
    token_index: Optional[int] = None,
) -> str:
    """
    Compute a node's initial_token.

    An explicit ``supplied_tokens`` map (primary IP -> token) wins outright;
    an IP missing from it falls back to "0" rather than failing. Without a
    map, tokens are equi-spaced over the group in inventory order and
    ``token_index`` is added to the member's slot.
    """
    if supplied_tokens is not None:
        token = supplied_tokens.get(member.primary_ip)
        if token is None:
            log.warning(
                "No supplied token for %s (%s), falling back to 0",
                member.id, member.primary_ip,
            )
            return "0"
        return str(token)

    rank = member_index(group_members, member)
    baseline = 0 if rank is None else compute_tokens(len(group_members))[rank]
    token = baseline + (token_index or 0)
    log.debug("initial token for %s: %s", member.id, token)
    return str(token)
