# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/observers/events.py

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import List, Dict, Any, Optional
from datetime import datetime, timezone
import uuid


# ---------------------------------------------------------------------
# Base context and helper
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class BaseEvent:
    ts: str           # ISO timestamp
    run_id: str       # correlates all events in a single planning pass
    group: str        # inventory group being planned
    node: Optional[str]  # member id, when the event concerns one node

    def dict(self) -> Dict[str, Any]:
        return asdict(self)


def new_ctx(group: str, node: Optional[str] = None, run_id: Optional[str] = None) -> Dict[str, Any]:
    return {
        "ts": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "run_id": run_id or str(uuid.uuid4()),
        "group": group,
        "node": node,
    }


# ---------------------------------------------------------------------
# Planner
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class SettingsComputed(BaseEvent):
    initial_token: str
    endpoint_snitch: str
    seeds: str
    max_heap: str

@dataclass(frozen=True)
class NodePlanned(BaseEvent):
    files: List[str]
    directories: List[str]

@dataclass(frozen=True)
class PlanFailed(BaseEvent):
    error: str
