"""LocalHost - a transactional stand-in for the host execution environment."""

import logging
from collections.abc import Mapping
from datetime import datetime
from zoneinfo import ZoneInfo

from sqlalchemy import Engine

from iprecord.application.manager import RecordManager, Response
from iprecord.domain.shared.context import Context
from iprecord.domain.shared.error import NotFoundError
from iprecord.domain.shared.event import Event
from iprecord.infrastructure.persistence.adapter.sql import SqlObjectStore
from iprecord.infrastructure.persistence.repository.event import SqlEventLog

logger = logging.getLogger(__name__)


def _encode_args(args: Mapping[str, bytes | str]) -> dict[str, bytes]:
    return {
        key: value.encode("utf-8") if isinstance(value, str) else value
        for key, value in args.items()
    }


class LocalHost:
    """Runs each invocation in its own database transaction.

    State changes and emitted events are committed only when the operation
    succeeds; a failed or crashed operation leaves no trace.
    """

    def __init__(
        self,
        engine: Engine,
        manager: RecordManager,
        *,
        timezone: ZoneInfo | None = None,
        default_initiator: str = "local",
    ) -> None:
        self._engine = engine
        self._manager = manager
        self._timezone = timezone or ZoneInfo("UTC")
        self._default_initiator = default_initiator

    def now(self) -> datetime:
        return datetime.now(self._timezone)

    def invoke(
        self,
        method: str,
        args: Mapping[str, bytes | str] | None = None,
        *,
        initiator: str | None = None,
        timestamp: datetime | None = None,
    ) -> Response:
        """Invoke an operation as the host would.

        Args:
            method: Operation name (e.g. "Register").
            args: Argument mapping; str values are UTF-8 encoded.
            initiator: Caller identity (default: configured initiator).
            timestamp: Transaction time (default: host clock). Naive values are
                taken to be in the host timezone.
        """
        if timestamp is None:
            timestamp = self.now()
        elif timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=self._timezone)
        else:
            timestamp = timestamp.astimezone(self._timezone)

        with self._engine.connect() as connection:
            transaction = connection.begin()
            context = Context(
                args=_encode_args(args or {}),
                initiator=initiator or self._default_initiator,
                timestamp=timestamp,
                store=SqlObjectStore(connection),
                emitter=SqlEventLog(connection, emitted_at=timestamp),
            )
            try:
                response = self._manager.invoke(method, context)
            except Exception:
                transaction.rollback()
                raise

            if response.ok:
                transaction.commit()
            else:
                transaction.rollback()

        logger.debug(f"{method} -> {response.status}")
        return response

    def read_object(self, key: bytes | str) -> bytes | None:
        """Raw stored bytes, bypassing the record lifecycle (tombstones included)."""
        if isinstance(key, str):
            key = key.encode("utf-8")
        with self._engine.connect() as connection:
            try:
                return SqlObjectStore(connection).get(key)
            except NotFoundError:
                return None

    def list_events(
        self, limit: int = 50, names: list[str] | None = None
    ) -> list[tuple[datetime, Event]]:
        with self._engine.connect() as connection:
            return SqlEventLog(connection, emitted_at=self.now()).list_events(limit, names)
