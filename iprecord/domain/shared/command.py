"""Command, Result and CommandHandler base classes.

Commands are parsed from the flat argument mapping the host passes to every
operation (string key -> raw bytes). Handlers are dataclasses bound to the
services of a single invocation.
"""

from abc import ABC, ABCMeta, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Self, TypeVar, dataclass_transform, get_args, get_origin

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from iprecord.domain.shared.error import InvalidArgumentError, MissingArgumentError


def _decode(name: str, raw: bytes | str) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidArgumentError(f"{name} is not valid UTF-8", field=name) from e


class Command(BaseModel):
    @classmethod
    def from_args(cls, args: Mapping[str, bytes]) -> Self:
        """Build the command from a host argument mapping.

        Raises:
            MissingArgumentError: A required key is absent.
            InvalidArgumentError: A value is undecodable or fails validation.
        """
        values: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            raw = args.get(name)
            if raw is None:
                if field.is_required():
                    raise MissingArgumentError(f"missing {name}", field=name)
                continue
            values[name] = _decode(name, raw)

        try:
            return cls.model_validate(values)
        except PydanticValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else None
            if error["type"] == "string_too_short":
                message = f"{field} cannot be empty"
            else:
                message = f"invalid {field}: {error['msg']}"
            raise InvalidArgumentError(message, field=field) from e


class Result(BaseModel, ABC):
    @abstractmethod
    def to_bytes(self) -> bytes:
        """Success payload returned to the host."""
        ...


class Confirmation(Result):
    """Human-readable confirmation of a successful mutation."""

    message: str

    def to_bytes(self) -> bytes:
        return self.message.encode("utf-8")


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)


def _get_command_type(cls: type) -> type[Command] | None:
    """Extract the Command type C from CommandHandler[C, R] in class bases."""
    for base in getattr(cls, "__orig_bases__", []):
        origin = get_origin(base)
        if origin is not None and getattr(origin, "__name__", None) == "CommandHandler":
            args = get_args(base)
            if args and isinstance(args[0], type) and issubclass(args[0], Command):
                return args[0]
    return None


@dataclass_transform()
class _CommandHandlerMeta(ABCMeta):
    """Metaclass that combines ABC with auto-dataclass and command type extraction."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)
            command_type = _get_command_type(cls)
            if command_type is not None:
                cls.__command_type__ = command_type
        return cls


class CommandHandler(Generic[C, R], metaclass=_CommandHandlerMeta):
    """Base class for command handlers. Subclasses are automatically dataclasses.

    Example:
        class TransferRecordHandler(CommandHandler[TransferRecord, Confirmation]):
            record_service: RecordService
            context: Context

            def run(self, cmd: TransferRecord) -> Confirmation: ...
    """

    __command_type__: ClassVar[type[Command]]

    @abstractmethod
    def run(self, cmd: C) -> R: ...

    def run_args(self, args: Mapping[str, bytes]) -> R:
        """Parse the host arguments into this handler's command and run it."""
        return self.run(self.__command_type__.from_args(args))
