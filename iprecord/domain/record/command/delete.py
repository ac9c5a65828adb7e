import logfire

from iprecord.domain.record.service.record import RecordService
from iprecord.domain.shared.command import Command, CommandHandler, Confirmation
from iprecord.domain.shared.context import Context
from iprecord.domain.shared.model.value import NonEmptyStr


class DeleteRecord(Command):
    id: NonEmptyStr


class DeleteRecordHandler(CommandHandler[DeleteRecord, Confirmation]):
    record_service: RecordService
    context: Context

    def run(self, cmd: DeleteRecord) -> Confirmation:
        with logfire.span("DeleteRecord"):
            self.record_service.delete(
                cmd.id, initiator=self.context.initiator, at=self.context.timestamp
            )
            logfire.info(
                "Record marked as deleted", record_id=cmd.id, deleted_by=self.context.initiator
            )
            return Confirmation(message=f"Record {cmd.id} marked as deleted")
