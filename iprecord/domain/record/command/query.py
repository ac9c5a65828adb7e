"""QueryRecord handler - read access to live records."""

from iprecord.domain.record.model.aggregate import Record
from iprecord.domain.record.model.codec import encode_record
from iprecord.domain.record.service.record import RecordService
from iprecord.domain.shared.command import Command, CommandHandler, Result
from iprecord.domain.shared.model.value import NonEmptyStr


class QueryRecord(Command):
    id: NonEmptyStr


class RecordFound(Result):
    record: Record

    def to_bytes(self) -> bytes:
        return encode_record(self.record)


class QueryRecordHandler(CommandHandler[QueryRecord, RecordFound]):
    record_service: RecordService

    def run(self, cmd: QueryRecord) -> RecordFound:
        return RecordFound(record=self.record_service.query(cmd.id))
