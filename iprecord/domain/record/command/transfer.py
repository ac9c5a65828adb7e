import logfire

from iprecord.domain.record.service.record import RecordService
from iprecord.domain.shared.command import Command, CommandHandler, Confirmation
from iprecord.domain.shared.context import Context
from iprecord.domain.shared.model.value import NonEmptyStr


class TransferRecord(Command):
    id: NonEmptyStr
    new_holder_address: NonEmptyStr


class TransferRecordHandler(CommandHandler[TransferRecord, Confirmation]):
    record_service: RecordService
    context: Context

    def run(self, cmd: TransferRecord) -> Confirmation:
        with logfire.span("TransferRecord"):
            self.record_service.transfer(
                cmd.id,
                cmd.new_holder_address,
                initiator=self.context.initiator,
                at=self.context.timestamp,
            )
            logfire.info(
                "Record transferred", record_id=cmd.id, new_holder=cmd.new_holder_address
            )
            return Confirmation(message=f"Record {cmd.id} transferred to {cmd.new_holder_address}")
