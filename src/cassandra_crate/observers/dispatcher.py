# src/cassandra_crate/observers/dispatcher.py
from __future__ import annotations
import logging
from typing import List, Optional, Protocol
from .events import BaseEvent

log = logging.getLogger("cassandra_crate")


class Observer(Protocol):
    """Anything with ``notify(event)``: loggers, consoles, test captures."""
    def notify(self, event: BaseEvent) -> None: ...


class EventBus:
    def __init__(self, observers: Optional[List[Observer]] = None):
        self._observers = observers or []

    def emit(self, event: BaseEvent) -> None:
        for ob in self._observers:
            try:
                ob.notify(event)
            except Exception:
                # observers must not break planning
                log.debug("observer %r failed on %s", ob, type(event).__name__, exc_info=True)
