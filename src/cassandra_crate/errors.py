# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/errors.py
class CrateError(RuntimeError):
    """Base class for cassandra-crate failures."""

class PreconditionViolation(CrateError, ValueError):
    """Raised when a computation is handed input it cannot plan with."""

class InventoryError(CrateError):
    """Raised when the node inventory is missing a group or member."""

class ConfigError(CrateError):
    """Raised when a crate config file cannot be loaded or validated."""
