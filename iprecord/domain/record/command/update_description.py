import logfire

from iprecord.domain.record.service.record import RecordService
from iprecord.domain.shared.command import Command, CommandHandler, Confirmation
from iprecord.domain.shared.context import Context
from iprecord.domain.shared.model.value import NonEmptyStr


class UpdateDescription(Command):
    id: NonEmptyStr
    # Absent and empty are not distinguished: both clear the description
    new_description: str = ""


class UpdateDescriptionHandler(CommandHandler[UpdateDescription, Confirmation]):
    record_service: RecordService
    context: Context

    def run(self, cmd: UpdateDescription) -> Confirmation:
        with logfire.span("UpdateDescription"):
            self.record_service.update_description(
                cmd.id,
                cmd.new_description,
                initiator=self.context.initiator,
                at=self.context.timestamp,
            )
            logfire.info("Record description updated", record_id=cmd.id)
            return Confirmation(message=f"Description for record {cmd.id} updated")
