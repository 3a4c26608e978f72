# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

#src/cassandra_crate/logging/log.py

from __future__ import annotations

import logging
from pathlib import Path
from datetime import datetime, timezone
from typing import Any, Mapping, Optional
import uuid

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(run_id).8s | %(message)s"


class RunContextFilter(logging.Filter):
    """Stamps every record with the planning run it belongs to."""

    def __init__(self, run_id: str):
        super().__init__()
        self.run_id = run_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = self.run_id
        return True


def init_logging(
    *,
    base_dir: Path | None = None,
    name: str = "cassandra_crate",
    verbose: bool = False,
    group: Optional[str] = None,
    context: Optional[Mapping[str, Any]] = None,
    run_id: Optional[str] = None,
) -> tuple[logging.Logger, str, Path]:
    """
    Set up logging for one planning run of ``group``.

    The log file is named after the group and the run id and keeps the
    whole DEBUG trace; the console gets INFO (DEBUG when ``verbose``).
    Every line carries the run id, the same one the planner's events
    use. ``context`` (config and inventory paths, the node asked for)
    is written at the top of the file.
    """
    run_id = run_id or str(uuid.uuid4())

    if base_dir is None:
        base_dir = Path.home() / ".cassandra-crate" / "logs"
    base_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    stem = f"{name}-{group}" if group else name
    log_path = base_dir / f"{stem}-{ts}-{run_id}.log"

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    run_filter = RunContextFilter(run_id)

    fh = logging.FileHandler(log_path)
    fh.setLevel(logging.DEBUG)
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    for h in (fh, ch):
        h.setFormatter(formatter)
        h.addFilter(run_filter)
        logger.addHandler(h)

    logger.debug("=== cassandra-crate plan started ===")
    logger.debug("run_id=%s group=%s", run_id, group or "-")
    for key, value in (context or {}).items():
        logger.debug("%s=%s", key, value)
    logger.debug("log_file=%s", log_path)

    return logger, run_id, log_path
