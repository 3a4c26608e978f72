# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/config/loader.py

import logging
import os
import yaml
from pathlib import Path
from pydantic import ValidationError

from ..errors import ConfigError
from ..settings.merge import deep_merge
from .models import CrateConfig

log = logging.getLogger("cassandra_crate")


def _find_overrides_file(config_path: Path) -> Path | None:
    """
    Locate an overrides file using this priority:

    1. CASSANDRA_CRATE_OVERRIDES environment variable (explicit override)
    2. overrides.yaml in the same directory as the crate config
    """
    env = os.environ.get("CASSANDRA_CRATE_OVERRIDES")
    if env:
        p = Path(env)
        if p.is_file():
            return p
        log.warning("CASSANDRA_CRATE_OVERRIDES=%s does not exist, skipping", env)
        return None

    p = config_path.parent / "overrides.yaml"
    if p.is_file() and p != config_path:
        return p

    return None


def _load_yaml(path: Path) -> dict:
    """Load a YAML file, expanding ${ENV_VAR} references."""
    raw = path.read_text()
    expanded = os.path.expandvars(raw)
    return yaml.safe_load(expanded) or {}


def load_config(path: str | Path) -> CrateConfig:
    """
    Load and validate a crate YAML config.

    Site specific values (cluster name, keystore passwords, explicit tokens)
    can live in an overrides file whose structure mirrors the config. It is
    deep-merged into the config before validation. Discovery order:
      1. ``CASSANDRA_CRATE_OVERRIDES`` env var -> explicit path
      2. ``overrides.yaml`` next to the config file

    ``${ENV_VAR}`` placeholders in either file are resolved at load time.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Config file {path} does not exist")
    data = _load_yaml(path)

    overrides_path = _find_overrides_file(path)
    if overrides_path:
        log.debug("Merging overrides from %s", overrides_path)
        data = deep_merge(data, _load_yaml(overrides_path))
    else:
        log.debug("No overrides file found, using %s as is", path)

    try:
        return CrateConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid crate config {path}: {e}") from e
