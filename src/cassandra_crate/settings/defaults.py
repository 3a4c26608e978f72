# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/settings/defaults.py
#
#   http://www.datastax.com/docs/0.8/configuration/node_configuration
#   http://www.datastax.com/docs/1.2/configuration/node_configuration
from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Mapping

log = logging.getLogger("cassandra_crate")

DEFAULT_JVM_OPTS = [
    "-Dcom.sun.management.jmxremote.authenticate=false",
    "-Dcom.sun.management.jmxremote.port=${JMX_PORT}",
    "-Dcom.sun.management.jmxremote.ssl=false",
    "-Djava.net.preferIPv4Stack=true",
    "-XX:+CMSParallelRemarkEnabled",
    "-XX:+HeapDumpOnOutOfMemoryError",
    "-XX:+UseCMSInitiatingOccupancyOnly",
    "-XX:+UseConcMarkSweepGC",
    "-XX:+UseParNewGC",
    "-XX:+UseThreadPriorities",
    "-XX:CMSInitiatingOccupancyFraction=75",
    "-XX:MaxTenuringThreshold=1",
    "-XX:SurvivorRatio=8",
    "-XX:ThreadPriorityPolicy=42",
    "-Xms${HEAP_NEWSIZE}",
    "-Xmn${YOUNG_GEN_SIZE}",
    "-Xmx${MAX_HEAP_SIZE}",
    "-Xss${STACK_SIZE}",
    "-javaagent:${CASSANDRA_HOME}/lib/jamm-0.2.5.jar",
    "-ea",
]

_DEFAULT_SETTINGS: Dict[str, Any] = {
    "config_dir": "/etc/cassandra",
    "owner": "cassandra",
    "user": "cassandra",
    "group": "cassandra",
    "service_name": "cassandra",
    "supervisor": "initd",
    "service_action": "manage",
    "version": "1.1",
    "group_data_centers": None,
    "max_seeds": 1,
    "ram_fraction": 0.4,
    "server": {
        "authenticator": "org.apache.cassandra.auth.AllowAllAuthenticator",
        "authority": "org.apache.cassandra.auth.AllowAllAuthority",
        "cluster_name": "cassandra-cluster",
        "column_index_size_in_kb": 64,
        "commitlog_directory": "/mnt/cassandra/commitlog",
        "commitlog_sync": "periodic",
        "commitlog_sync_period_in_ms": 20000,
        "commitlog_total_space_in_mb": 4096,
        "compaction_preheat_key_cache": True,
        "concurrent_reads": 16,
        "concurrent_writes": 32,
        "data_file_directories": ["/mnt/cassandra/data"],
        "dynamic_snitch_badness_threshold": 0.0,
        "dynamic_snitch_reset_interval_in_ms": 600000,
        "dynamic_snitch_update_interval_in_ms": 100,
        "encryption_options": {
            "internode_encryption": "none",
            "keystore": "conf/.keystore",
            "keystore_password": "cassandra",
            "truststore": "conf/.truststore",
            "truststore_password": "cassandra",
        },
        "flush_largest_memtables_at": 0.75,
        "hinted_handoff_enabled": True,
        "in_memory_compaction_limit_in_mb": 64,
        "incremental_backups": False,
        "index_interval": 128,
        "max_hint_window_in_ms": 3600000,
        "memtable_flush_queue_size": 4,
        "memtable_total_space_in_mb": 4096,
        "multithreaded_compaction": False,
        "partitioner": "org.apache.cassandra.dht.RandomPartitioner",
        "reduce_cache_capacity_to": 0.6,
        "reduce_cache_sizes_at": 0.85,
        "request_scheduler": "org.apache.cassandra.scheduler.NoScheduler",
        "rpc_keepalive": True,
        "rpc_port": 9160,
        "rpc_server_type": "hsha",
        "saved_caches_directory": "/mnt/cassandra/saved_caches",
        "seed_provider": [
            {
                "class_name": "org.apache.cassandra.locator.SimpleSeedProvider",
                "parameters": [{"seeds": "127.0.0.1"}],
            }
        ],
        "snapshot_before_compaction": False,
        "storage_port": 7000,
        "thrift_framed_transport_size_in_mb": 15,
        "thrift_max_message_length_in_mb": 16,
    },
    "service": {
        "jmx_port": 7199,
        "jvm_opts": DEFAULT_JVM_OPTS,
    },
}

APACHE_DEBIAN_REPO = "http://www.apache.org/dist/cassandra/debian"


def default_settings() -> Dict[str, Any]:
    """A fresh copy of the crate defaults; callers may mutate it freely."""
    return copy.deepcopy(_DEFAULT_SETTINGS)


def apt_release(version: str) -> str:
    """Apache repo release name for a version, e.g. "1.2.5" -> "12x"."""
    digits = [c for c in str(version) if c.isdigit()]
    return "".join(digits[:2]) + "x"


def version_settings(version: str, settings: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Version specific install defaults. Settings that already carry an
    ``install_strategy`` are left alone; otherwise the Apache Debian
    package source for the version's release series is used.
    """
    if settings.get("install_strategy"):
        return {}
    release = apt_release(version)
    log.debug("package source release %s for version %s", release, version)
    return {
        "install_strategy": "package_source",
        "package_source": {
            "name": "cassandra",
            "aptitude": {
                "url": APACHE_DEBIAN_REPO,
                "release": release,
                "scopes": ["main"],
                "key_server": "pgp.mit.edu",
                "key_id": "2B5C1B00",
            },
        },
        "packages": ["cassandra"],
    }
