"""RecordManager - dispatches host invocations to record command handlers.

Every operation result leaves here as a Response. Domain and infrastructure
errors are mapped to a failure Response in one place; anything else is a bug
and propagates to the host.
"""

import logging
from typing import Any

from dishka import Container
from pydantic import BaseModel, ConfigDict

from iprecord.domain.record.command import (
    DeleteRecordHandler,
    InitializeHandler,
    QueryRecordHandler,
    RegisterRecordHandler,
    TransferRecordHandler,
    UpdateDescriptionHandler,
)
from iprecord.domain.shared.command import CommandHandler
from iprecord.domain.shared.context import Context
from iprecord.domain.shared.error import (
    AuthorizationError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InvalidArgumentError,
    InvalidStateError,
    IPRecordError,
    MethodNotFoundError,
    MissingArgumentError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

OK = 200

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    MissingArgumentError: 400,
    InvalidArgumentError: 400,
    AuthorizationError: 403,
    NotFoundError: 404,
    MethodNotFoundError: 404,
    ConflictError: 409,
    InvalidStateError: 409,
}

# Host-visible method name -> handler
HANDLERS: dict[str, type[CommandHandler[Any, Any]]] = {
    "Initialize": InitializeHandler,
    "Register": RegisterRecordHandler,
    "Query": QueryRecordHandler,
    "Transfer": TransferRecordHandler,
    "UpdateDescription": UpdateDescriptionHandler,
    "Delete": DeleteRecordHandler,
}


class Response(BaseModel):
    """Outcome of one invocation, as returned to the host."""

    model_config = ConfigDict(frozen=True)

    status: int
    message: str = ""
    body: bytes = b""
    code: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == OK

    @classmethod
    def success(cls, body: bytes) -> "Response":
        return cls(status=OK, body=body)

    @classmethod
    def from_error(cls, error: IPRecordError) -> "Response":
        return cls(status=error_status(error), message=error.message, code=error.code)


def error_status(error: IPRecordError) -> int:
    """Map an iprecord error to a response status."""
    if isinstance(error, InfrastructureError):
        return 500
    for error_type in type(error).__mro__:
        status = DOMAIN_ERROR_STATUS_MAP.get(error_type)
        if status is not None:
            return status
    return 400 if isinstance(error, DomainError) else 500


class RecordManager:
    """Entry point the host calls with a method name and an execution context.

    Handlers and the services behind them are resolved per invocation from a
    REQUEST scope of the given container, entered with the invocation's Context.
    """

    def __init__(self, container: Container) -> None:
        self._container = container

    @property
    def methods(self) -> list[str]:
        return list(HANDLERS)

    def invoke(self, method: str, context: Context) -> Response:
        try:
            handler_type = HANDLERS.get(method)
            if handler_type is None:
                raise MethodNotFoundError(f"unknown method: {method}")

            with self._container(context={Context: context}) as request:
                handler = request.get(handler_type)
                result = handler.run_args(context.args)
        except IPRecordError as e:
            logger.info(f"{method} failed: [{e.code}] {e.message}")
            return Response.from_error(e)
        return Response.success(result.to_bytes())

    def close(self) -> None:
        self._container.close()
