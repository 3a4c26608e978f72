# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import posixpath
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..config.models import CrateConfig, RepairOptions
from ..errors import ConfigError
from ..inventory import ClusterMember, Group, Inventory
from ..render.files import render_cassandra_yaml, render_environment
from ..render.renderer import TemplateRenderer
from ..repair import CRON_PATH, repair_cron_file
from ..settings.builder import build_settings
from ..topology.resolver import topology_properties

# Observer bits
from ..observers.dispatcher import EventBus
from ..observers.events import NodePlanned, PlanFailed, SettingsComputed, new_ctx
from .models import CONFIG_CHANGED_FLAG, ConfigFile, Directory, NodePlan, ServiceAction

log = logging.getLogger("cassandra_crate")


def install_plan(settings: Mapping[str, Any]) -> tuple[Dict[str, Any], List[Directory]]:
    """Install strategy plus the data directories Cassandra needs."""
    server = settings["server"]
    owner, group = settings["owner"], settings["group"]
    paths = [
        *server.get("data_file_directories", []),
        server.get("commitlog_directory"),
        server.get("saved_caches_directory"),
    ]
    directories = [Directory(p, owner, group) for p in paths if p]
    install = {
        k: settings[k]
        for k in ("install_strategy", "package_source", "packages")
        if settings.get(k) is not None
    }
    return install, directories


def configure_plan(
    settings: Mapping[str, Any],
    member: ClusterMember,
    group: Group,
    inventory: Inventory,
    repair: Optional[RepairOptions] = None,
    renderer: Optional[TemplateRenderer] = None,
) -> List[ConfigFile]:
    """Rendered config files plus the staggered repair cron job."""
    renderer = renderer or TemplateRenderer()
    repair = repair or RepairOptions()
    owner, grp, config_dir = settings["owner"], settings["group"], settings["config_dir"]

    def config_file(name: str, content: str) -> ConfigFile:
        return ConfigFile(posixpath.join(config_dir, name), content, owner, grp)

    files = [
        ConfigFile(
            CRON_PATH,
            repair_cron_file(member, group.members, repair.day, repair.keyspace, renderer),
            "root", "root", flag_on_changed=None,
        ),
    ]
    group_data_centers = settings.get("group_data_centers")
    log.debug("config group-data-centers %s", group_data_centers)
    if group_data_centers:
        files.append(config_file(
            "cassandra-topology.properties",
            topology_properties(group_data_centers, inventory.groups),
        ))
    files.append(config_file("cassandra-env.sh", render_environment(settings["service"], renderer)))
    files.append(config_file("cassandra.yaml", render_cassandra_yaml(settings["server"])))
    return files


def service_plan(settings: Mapping[str, Any], action: str = "manage", **options: Any) -> ServiceAction:
    """
    Supervisor action for the service. Config changes restart a running
    node unless an explicit ``if_flag`` is given.
    """
    if_flag = options.pop("if_flag", CONFIG_CHANGED_FLAG if action == "restart" else None)
    merged = {**(settings.get("supervision_options") or {}), **options}
    return ServiceAction(
        service_name=settings["service_name"],
        supervisor=settings["supervisor"],
        action=action,
        if_flag=if_flag,
        options=merged,
    )


def plan_node(
    config: Union[CrateConfig, Mapping[str, Any], None],
    inventory: Inventory,
    group_name: str,
    member_id: str,
    bus: Optional[EventBus] = None,
    run_ctx: Optional[dict] = None,
) -> NodePlan:
    """
    Run the settings, install and configure phases for one member.
    Emits SettingsComputed / NodePlanned, or PlanFailed, if a bus is given.
    """
    ctx = {**(run_ctx or new_ctx(group=group_name)), "node": member_id}
    try:
        if not isinstance(config, CrateConfig):
            try:
                config = CrateConfig.model_validate(config or {})
            except ValidationError as e:
                raise ConfigError(f"Invalid crate config: {e}") from e
        group = inventory.group(group_name)
        member = group.member(member_id)

        settings = build_settings(config, member, group)
        if bus:
            server, service = settings["server"], settings["service"]
            bus.emit(SettingsComputed(
                initial_token=server["initial_token"],
                endpoint_snitch=server["endpoint_snitch"],
                seeds=server["seed_provider"][0]["parameters"][0]["seeds"],
                max_heap=service["max_heap"],
                **ctx,
            ))

        install, directories = install_plan(settings)
        files = configure_plan(settings, member, group, inventory, config.repair)
        node_plan = NodePlan(
            member=member,
            settings=settings,
            install=install,
            directories=directories,
            files=files,
            service=service_plan(settings, action=settings.get("service_action", "manage")),
        )
        log.debug("planned %s: %s files, %s directories", member.id, len(files), len(directories))

        if bus:
            bus.emit(NodePlanned(
                files=[f.path for f in files],
                directories=[d.path for d in directories],
                **ctx,
            ))
        return node_plan

    except Exception as e:
        if bus:
            bus.emit(PlanFailed(error=str(e), **ctx))
        raise


def plan_group(
    config: Union[CrateConfig, Mapping[str, Any], None],
    inventory: Inventory,
    group_name: str,
    bus: Optional[EventBus] = None,
    run_ctx: Optional[dict] = None,
) -> List[NodePlan]:
    """
    Plan every member of a group, in inventory order, under one run id.
    Pass ``run_ctx`` to tie the events to a run started elsewhere, such as
    the run id of the log file.
    """
    ctx = run_ctx or new_ctx(group=group_name)
    group = inventory.group(group_name)
    return [plan_node(config, inventory, group_name, m.id, bus=bus, run_ctx=ctx) for m in group.members]
