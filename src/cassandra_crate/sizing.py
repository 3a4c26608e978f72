# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/sizing.py
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from decimal import Decimal, InvalidOperation
from typing import Dict

from .errors import PreconditionViolation

log = logging.getLogger("cassandra_crate")

OS_RESERVED_MB = 100
MAX_RAM_FRACTION = Decimal("0.5")
STACK_SIZE = "200K"


@dataclass(frozen=True)
class ResourceSizing:
    max_heap: str
    heap_new: str
    young_gen_size: str
    stack_size: str = STACK_SIZE

    def as_service(self) -> Dict[str, str]:
        return asdict(self)


def _mb(value: Decimal) -> str:
    return f"{int(value)}M"


def compute_sizing(total_ram: int, ram_fraction: float) -> ResourceSizing:
    """
    JVM memory settings for a node with ``total_ram`` megabytes installed.

    Two Cassandra JVMs share the host and the settings are per JVM, so
    ``ram_fraction`` must be in (0, 0.5]. 100MB is left for the OS.
    """
    try:
        fraction = Decimal(str(ram_fraction))
    except InvalidOperation:
        raise PreconditionViolation(f"ram_fraction must be a number, got {ram_fraction!r}") from None
    if not fraction.is_finite() or not (0 < fraction <= MAX_RAM_FRACTION):
        raise PreconditionViolation(
            f"ram_fraction must be in (0, {MAX_RAM_FRACTION}], got {ram_fraction}"
        )
    usable = Decimal(total_ram) - OS_RESERVED_MB
    if usable <= 0:
        raise PreconditionViolation(
            f"node has {total_ram}MB installed, need more than {OS_RESERVED_MB}MB"
        )

    sizing = ResourceSizing(
        max_heap=_mb(fraction * usable),
        heap_new=_mb(Decimal("0.2") * fraction * usable),
        young_gen_size=_mb(Decimal("0.1") * fraction * usable),
    )
    log.debug("sizing for %sMB at %s: %s", total_ram, ram_fraction, sizing)
    return sizing
