# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/inventory.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import InventoryError

log = logging.getLogger("cassandra_crate")


@dataclass(frozen=True)
class ClusterMember:
    """
    One deployment target, as reported by the node inventory.
    """
    id: str                           # stable node identity
    primary_ip: Optional[str] = None  # public address
    private_ip: Optional[str] = None
    ram: int = 0                      # installed memory, megabytes
    provider: Optional[str] = None    # cloud-provider tag, e.g. "ec2"


@dataclass(frozen=True)
class Group:
    """
    Members sharing a role. Order is inventory order and drives
    token placement, seed choice and repair staggering.
    """
    name: str
    members: Tuple[ClusterMember, ...] = ()

    def __len__(self) -> int:
        return len(self.members)

    def member(self, member_id: str) -> ClusterMember:
        for m in self.members:
            if m.id == member_id:
                return m
        raise InventoryError(f"Group '{self.name}' has no member '{member_id}'")


def member_index(members: Sequence[ClusterMember], member: ClusterMember) -> Optional[int]:
    """Position of ``member`` in ``members`` by identity, None when absent."""
    for i, m in enumerate(members):
        if m == member:
            return i
    return None


class MemberSpec(BaseModel):
    id: str
    primary_ip: Optional[str] = None
    private_ip: Optional[str] = None
    ram: int = Field(0, ge=0)
    provider: Optional[str] = None


class InventorySpec(BaseModel):
    groups: Dict[str, List[MemberSpec]] = Field(default_factory=dict)


@dataclass(frozen=True)
class Inventory:
    groups: Dict[str, Group]

    def group(self, name: str) -> Group:
        try:
            return self.groups[name]
        except KeyError:
            raise InventoryError(f"Inventory has no group '{name}'") from None

    @classmethod
    def from_spec(cls, spec: InventorySpec) -> "Inventory":
        groups = {
            name: Group(
                name=name,
                members=tuple(ClusterMember(**m.model_dump()) for m in members),
            )
            for name, members in spec.groups.items()
        }
        return cls(groups=groups)


def load_inventory(path: str | Path) -> Inventory:
    """
    Load a YAML inventory of the form::

        groups:
          cassandra:
            - id: cass-1
              primary_ip: 54.1.2.3
              private_ip: 10.0.0.11
              ram: 8000
              provider: ec2
    """
    path = Path(path)
    if not path.is_file():
        raise InventoryError(f"Inventory file {path} does not exist")
    data = yaml.safe_load(path.read_text()) or {}
    try:
        spec = InventorySpec.model_validate(data)
    except ValidationError as e:
        raise InventoryError(f"Invalid inventory {path}: {e}") from e
    inv = Inventory.from_spec(spec)
    log.debug("Loaded inventory %s: %s", path, {n: len(g) for n, g in inv.groups.items()})
    return inv
