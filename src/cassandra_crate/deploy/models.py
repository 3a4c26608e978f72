# src/cassandra_crate/deploy/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..inventory import ClusterMember

# Set by the orchestrator when any config file below changes content.
CONFIG_CHANGED_FLAG = "cassandra-config"


@dataclass(frozen=True)
class Directory:
    path: str
    owner: str
    group: str
    mode: str = "0755"


@dataclass(frozen=True)
class ConfigFile:
    path: str
    content: str
    owner: str
    group: str
    flag_on_changed: Optional[str] = CONFIG_CHANGED_FLAG


@dataclass(frozen=True)
class ServiceAction:
    """
    What the supervisor should do with the service. ``if_flag`` limits the
    action to runs where the named flag was set (e.g. restart on config change).
    """
    service_name: str
    supervisor: str
    action: str = "manage"
    if_flag: Optional[str] = None
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class NodePlan:
    """
    Everything the orchestrator needs to install, configure and run
    Cassandra on one member.
    """
    member: ClusterMember
    settings: Dict[str, Any]
    install: Dict[str, Any] = field(default_factory=dict)
    directories: List[Directory] = field(default_factory=list)
    files: List[ConfigFile] = field(default_factory=list)
    service: Optional[ServiceAction] = None

    def file(self, name: str) -> ConfigFile:
        for f in self.files:
            if f.path.rsplit("/", 1)[-1] == name:
                return f
        raise KeyError(name)
