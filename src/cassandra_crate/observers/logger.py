# src/cassandra_crate/observers/logger.py
from __future__ import annotations
import logging
from .events import BaseEvent, PlanFailed


class LoggerObserver:
    """Mirror planning events into a logger; failures go out at ERROR."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def notify(self, event: BaseEvent) -> None:
        d = event.dict()
        etype = event.__class__.__name__
        data = ", ".join(
            f"{k}={v}" for k, v in d.items() if k not in ("ts", "run_id", "group", "node")
        )
        level = logging.ERROR if isinstance(event, PlanFailed) else logging.INFO
        self.logger.log(level, "[%s] %s/%s %s", etype, d["group"], d["node"] or "-", data)
