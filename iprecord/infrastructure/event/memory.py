import logging
from typing import Any

from iprecord.domain.shared.event import Event
from iprecord.domain.shared.port.event_emitter import EventEmitter

logger = logging.getLogger(__name__)


class InMemoryEventEmitter(EventEmitter):
    """Collects emitted events in order. Nothing is delivered anywhere."""

    def __init__(self) -> None:
        self.emitted: list[tuple[str, dict[str, Any]]] = []

    def emit(self, name: str, payload: dict[str, Any]) -> None:
        logger.debug(f"Event {name} emitted: {payload}")
        self.emitted.append((name, payload))

    def names(self) -> list[str]:
        return [name for name, _ in self.emitted]

    def events(self) -> list[Event]:
        """Emitted events rebuilt as typed Event instances."""
        return [Event.from_payload(name, payload) for name, payload in self.emitted]

    def clear(self) -> None:
        self.emitted.clear()
