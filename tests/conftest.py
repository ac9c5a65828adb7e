"""Global test fixtures."""

from collections.abc import Callable, Mapping
from datetime import UTC, datetime

import pytest

from iprecord.domain.shared.context import Context
from iprecord.infrastructure.event.memory import InMemoryEventEmitter
from iprecord.infrastructure.persistence.adapter.memory import InMemoryObjectStore

FIXED_TIME = datetime(2024, 5, 1, 12, 30, 0, tzinfo=UTC)


@pytest.fixture
def store() -> InMemoryObjectStore:
    return InMemoryObjectStore()


@pytest.fixture
def emitter() -> InMemoryEventEmitter:
    return InMemoryEventEmitter()


@pytest.fixture
def make_context(
    store: InMemoryObjectStore, emitter: InMemoryEventEmitter
) -> Callable[..., Context]:
    """Build a Context over the shared in-memory store and emitter."""

    def _make(
        args: Mapping[str, str | bytes] | None = None,
        *,
        initiator: str = "caller",
        timestamp: datetime = FIXED_TIME,
    ) -> Context:
        encoded = {
            k: v.encode("utf-8") if isinstance(v, str) else v for k, v in (args or {}).items()
        }
        return Context(
            args=encoded,
            initiator=initiator,
            timestamp=timestamp,
            store=store,
            emitter=emitter,
        )

    return _make


@pytest.fixture
def register_args() -> dict[str, str]:
    return {
        "id": "C1",
        "title": "Sunrise",
        "creator_name": "Alice",
        "holder_address": "addrA",
        "category": "image",
        "description": "a painting",
    }
