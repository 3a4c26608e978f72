# src/cassandra_crate/config/models.py

from typing import Any, Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from ..topology.resolver import RpcAddressMode


class ServiceOptions(BaseModel):
    """JVM process options plus the cluster-derived knobs for a node."""
    model_config = ConfigDict(extra="allow")

    config: Dict[str, Any] = Field(default_factory=dict)  # deep-merged over `server`
    seeds: Optional[List[str]] = None                     # explicit seed list
    tokens: Optional[Dict[str, int]] = None               # primary ip -> initial token
    token_index: Optional[int] = None                     # offset from the computed token
    jmx_port: Optional[int] = None
    jvm_opts: Optional[List[str]] = None
    max_heap: Optional[str] = None
    heap_new: Optional[str] = None
    young_gen_size: Optional[str] = None
    stack_size: Optional[str] = None


class RepairOptions(BaseModel):
    day: int = Field(0, ge=0, le=7)   # cron day of week, 0 = Sunday
    keyspace: str = ""                # empty repairs every keyspace


class CrateConfig(BaseModel):
    """
    User settings for the crate. Anything left unset falls back to
    settings.defaults.default_settings().
    """
    model_config = ConfigDict(extra="forbid")

    version: Optional[str] = None
    config_dir: Optional[str] = None
    owner: Optional[str] = None
    user: Optional[str] = None
    group: Optional[str] = None
    service_name: Optional[str] = None
    supervisor: Optional[str] = None
    service_action: Optional[Literal["manage", "start", "stop", "restart"]] = None
    supervision_options: Optional[Dict[str, Any]] = None
    max_seeds: Optional[int] = Field(None, ge=1)
    ram_fraction: Optional[float] = Field(None, gt=0, le=0.5, allow_inf_nan=False)
    rpc_address_algo: Optional[RpcAddressMode] = None
    group_data_centers: Optional[Dict[str, Tuple[str, str]]] = None
    install_strategy: Optional[str] = None
    package_source: Optional[Dict[str, Any]] = None
    packages: Optional[List[str]] = None
    server: Dict[str, Any] = Field(default_factory=dict)
    service: ServiceOptions = Field(default_factory=ServiceOptions)
    repair: RepairOptions = Field(default_factory=RepairOptions)

    def overrides(self) -> Dict[str, Any]:
        """The settings the user actually declared, as plain data."""
        data = self.model_dump(mode="json", exclude_none=True, exclude={"repair"})
        if not data.get("server"):
            data.pop("server", None)
        service = data.get("service") or {}
        if not service.get("config"):
            service.pop("config", None)
        if not service:
            data.pop("service", None)
        return data
