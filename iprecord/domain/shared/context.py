"""Host execution context handed to every operation."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime

from iprecord.domain.shared.port.event_emitter import EventEmitter
from iprecord.domain.shared.port.object_store import ObjectStore


@dataclass(frozen=True)
class Context:
    """Everything one invocation may use.

    Attributes:
        args: Flat argument mapping supplied by the caller.
        initiator: Identity of the caller, as furnished by the host.
        timestamp: Transaction time supplied by the host. Used for every
            timestamp written by the operation so replicas agree.
        store: The host object store.
        emitter: The host event channel.
    """

    args: Mapping[str, bytes]
    initiator: str
    timestamp: datetime
    store: ObjectStore
    emitter: EventEmitter = field(repr=False)
