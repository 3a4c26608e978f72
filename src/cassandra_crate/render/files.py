# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/render/files.py
from __future__ import annotations

from typing import Any, Mapping, Optional

import yaml

from .renderer import TemplateRenderer


def render_cassandra_yaml(server: Mapping[str, Any]) -> str:
    """cassandra.yaml: the server map, serialised verbatim."""
    return yaml.safe_dump(dict(server), default_flow_style=False, sort_keys=False)


def render_environment(
    service: Mapping[str, Any],
    renderer: Optional[TemplateRenderer] = None,
) -> str:
    """cassandra-env.sh: JVM sizing, JMX port and extra JVM options."""
    renderer = renderer or TemplateRenderer()
    return renderer.render(
        "cassandra-env.sh.j2",
        {
            "max_heap": service["max_heap"],
            "heap_new": service["heap_new"],
            "stack_size": service["stack_size"],
            "young_gen_size": service["young_gen_size"],
            "jmx_port": service["jmx_port"],
            "jvm_opts": list(service.get("jvm_opts") or []),
        },
    )
