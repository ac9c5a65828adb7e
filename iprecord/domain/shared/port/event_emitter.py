from abc import abstractmethod
from typing import Any, Protocol

from iprecord.domain.shared.port import Port


class EventEmitter(Port, Protocol):
    """Event channel provided by the host for off-chain observers."""

    @abstractmethod
    def emit(self, name: str, payload: dict[str, Any]) -> None: ...
