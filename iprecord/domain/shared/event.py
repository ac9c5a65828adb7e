"""Domain events emitted to off-chain observers after successful mutations."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class Event(BaseModel):
    """Base class for domain events.

    Subclasses are automatically registered by name in Event._registry so that
    persisted (name, payload) pairs can be turned back into typed events.
    """

    model_config = ConfigDict(frozen=True)

    # Auto-populated registry of all Event subclasses
    _registry: ClassVar[dict[str, type["Event"]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._registry[cls.__name__] = cls

    @property
    def name(self) -> str:
        return type(self).__name__

    def payload(self) -> dict[str, Any]:
        """Structured payload handed to the event emitter."""
        return self.model_dump(mode="json")

    @classmethod
    def from_payload(cls, name: str, payload: dict[str, Any]) -> "Event":
        """Rebuild a typed event from its name and payload.

        Raises:
            KeyError: If no event class is registered under ``name``.
        """
        return cls._registry[name].model_validate(payload)
