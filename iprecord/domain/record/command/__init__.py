"""One handler per host-invocable record operation."""

from iprecord.domain.record.command.delete import DeleteRecord, DeleteRecordHandler
from iprecord.domain.record.command.initialize import Initialize, InitializeHandler
from iprecord.domain.record.command.query import QueryRecord, QueryRecordHandler, RecordFound
from iprecord.domain.record.command.register import RegisterRecord, RegisterRecordHandler
from iprecord.domain.record.command.transfer import TransferRecord, TransferRecordHandler
from iprecord.domain.record.command.update_description import (
    UpdateDescription,
    UpdateDescriptionHandler,
)

__all__ = [
    "DeleteRecord",
    "DeleteRecordHandler",
    "Initialize",
    "InitializeHandler",
    "QueryRecord",
    "QueryRecordHandler",
    "RecordFound",
    "RegisterRecord",
    "RegisterRecordHandler",
    "TransferRecord",
    "TransferRecordHandler",
    "UpdateDescription",
    "UpdateDescriptionHandler",
]
