"""Error hierarchy for iprecord.

Error layers:
- IPRecordError: Base class for all iprecord errors
- DomainError: Argument problems and lifecycle rule violations (4xx responses)
- InfrastructureError: Storage and codec failures (500 responses)

Errors are mapped to operation responses once, by RecordManager.
"""

from typing import ClassVar


class IPRecordError(Exception):
    """Base class for all iprecord errors."""

    default_code: ClassVar[str | None] = None

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.default_code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (argument and lifecycle violations - typically 4xx)
# =============================================================================


class DomainError(IPRecordError):
    """Base class for domain/business errors."""


class MissingArgumentError(DomainError):
    """A required key is absent from the argument mapping."""

    default_code = "MissingArgument"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidArgumentError(DomainError):
    """An argument is present but empty or undecodable."""

    default_code = "InvalidArgument"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError):
    """Resource not found."""

    default_code = "NotFound"


class MethodNotFoundError(DomainError):
    """The host invoked an operation name that does not exist."""

    default_code = "MethodNotFound"


class ConflictError(DomainError):
    """Resource already exists or is already in the requested state."""


class AlreadyExistsError(ConflictError):
    default_code = "AlreadyExists"


class AlreadyDeletedError(ConflictError):
    default_code = "AlreadyDeleted"


class InvalidStateError(DomainError):
    """Operation not allowed in current state."""

    default_code = "InvalidState"


class AuthorizationError(DomainError):
    """Caller not authorized for this operation."""

    default_code = "Unauthorized"


# =============================================================================
# Infrastructure Errors (system-level failures - typically 500)
# =============================================================================


class InfrastructureError(IPRecordError):
    """Base class for infrastructure/system errors."""


class StorageError(InfrastructureError):
    """The object store failed to read or write."""

    default_code = "StorageFailure"


class CodecError(InfrastructureError):
    """Stored bytes could not be encoded or decoded as a record."""

    default_code = "CodecFailure"


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""

    default_code = "Misconfigured"
