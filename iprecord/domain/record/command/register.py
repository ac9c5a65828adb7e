import logfire

from iprecord.domain.record.service.record import RecordService
from iprecord.domain.shared.command import Command, CommandHandler, Confirmation
from iprecord.domain.shared.context import Context
from iprecord.domain.shared.model.value import NonEmptyStr


class RegisterRecord(Command):
    id: NonEmptyStr
    title: NonEmptyStr
    creator_name: NonEmptyStr
    holder_address: NonEmptyStr
    category: NonEmptyStr
    # Key is mandatory but the value may be empty
    description: str


class RegisterRecordHandler(CommandHandler[RegisterRecord, Confirmation]):
    record_service: RecordService
    context: Context

    def run(self, cmd: RegisterRecord) -> Confirmation:
        with logfire.span("RegisterRecord"):
            self.record_service.register(
                id=cmd.id,
                title=cmd.title,
                creator_name=cmd.creator_name,
                holder_address=cmd.holder_address,
                category=cmd.category,
                description=cmd.description,
                at=self.context.timestamp,
            )
            logfire.info("Record registered", record_id=cmd.id)
            return Confirmation(message=f"Record {cmd.id} registered successfully")
