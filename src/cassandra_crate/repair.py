# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/repair.py
#
# nodetool repair scheduling.
#   http://wiki.apache.org/cassandra/NodeTool
#   http://wiki.apache.org/cassandra/Operations#Frequency_of_nodetool_repair
from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from .errors import PreconditionViolation
from .inventory import ClusterMember, member_index
from .render.renderer import TemplateRenderer

log = logging.getLogger("cassandra_crate")

HOUR_SLOTS = 23
CRON_PATH = "/etc/cron.d/cassandra-repair"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def compute_cron_time(index: int, n: int) -> Tuple[int, int]:
    """
    Return (minute, hour) at which the index'th of n nodes runs its daily
    operation, spreading the n runs over 23 hour slots and cycling through
    minute buckets once n exceeds 23.
    """
    if not (_is_int(index) and _is_int(n)):
        raise PreconditionViolation(f"cron index and count must be integers, got {index!r}, {n!r}")
    if n < 1 or not (0 <= index < n):
        raise PreconditionViolation(f"cron index {index} out of range for {n} nodes")

    maxq = n // HOUR_SLOTS + 1
    minute = (60 // maxq) * (index // HOUR_SLOTS)
    hour = index % HOUR_SLOTS
    log.debug("cron-time index %s n %s -> minute %s hour %s", index, n, minute, hour)
    return minute, hour


def build_repair_cron_expression(index: int, n: int, day: int = 0, keyspace: str = "") -> str:
    """Cron line running a primary-range repair; an empty keyspace repairs all."""
    minute, hour = compute_cron_time(index, n)
    return (
        f"{minute} {hour} * * {day} root nodetool -h localhost repair -pr {keyspace} "
        ">> /dev/null 2>&1"
    )


def repair_cron_file(
    member: ClusterMember,
    group_members: Sequence[ClusterMember],
    day: int = 0,
    keyspace: str = "",
    renderer: Optional[TemplateRenderer] = None,
) -> str:
    """
    /etc/cron.d content running repair on ``member``, staggered against the
    rest of its group. The day of the week is chosen with ``day``.
    """
    members = list(group_members)
    index = member_index(members, member)
    if index is None:
        raise PreconditionViolation(f"'{member.id}' is not in the repair group")
    log.debug("repair cron index %s count %s", index, len(members))
    renderer = renderer or TemplateRenderer()
    return renderer.render(
        "cassandra-repair.cron.j2",
        {"cron_line": build_repair_cron_expression(index, len(members), day, keyspace)},
    )
